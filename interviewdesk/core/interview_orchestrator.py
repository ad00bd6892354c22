"""
Interview Orchestrator - coordinates the request flows of the platform.

Each flow is independent and stateless:
- Question generation: prompt → completion → extraction → persistence
- Candidate analysis: aggregation → prompt → completion → extraction
- Result publication: persistence → report composition → e-mail dispatch
- Resource listing: read every stored question set
"""

import json
import logging
from uuid import uuid4

from interviewdesk.core.completion import CompletionClient, CompletionOptions
from interviewdesk.core.errors import StoreError
from interviewdesk.core.extraction import ResponseExtractor, ResponseShape
from interviewdesk.core.notifications import NotificationDispatcher
from interviewdesk.core.report_composer import ReportComposer
from interviewdesk.core.scoring import ScoreAggregator
from interviewdesk.core.store import DocumentStore
from interviewdesk.models.evaluation import AnalysisRequest
from interviewdesk.models.notification import Recipients
from interviewdesk.models.question import QuestionGenerationRequest, QuestionSet, QuestionSpec
from interviewdesk.models.report import PublishedResult, PublishRequest, PublishResponse
from interviewdesk.prompts.evaluator import EvaluatorPrompts
from interviewdesk.prompts.interviewer import InterviewerPrompts

logger = logging.getLogger(__name__)

QUESTIONS_PATH = "questions"
USERS_PATH = "users"

PUBLISH_SUCCESS_MESSAGE = "Results published successfully!!"
PUBLISH_FAILURE_MESSAGE = "Error publishing results, kindly check the entered E-mail address."


class InterviewOrchestrator:
    """
    Wires the core components to the document store for each endpoint.

    The orchestrator coordinates between:
    - Completion Client and Response Extractor (LLM calls)
    - Score Aggregator (numeric results)
    - Report Composer and Notification Dispatcher (publication)
    - Document Store (question sets and published results)
    """

    def __init__(
        self,
        completion_client: CompletionClient,
        completion_options: CompletionOptions,
        store: DocumentStore,
        dispatcher: NotificationDispatcher,
        report_composer: ReportComposer | None = None,
        extractor: ResponseExtractor | None = None,
        aggregator: ScoreAggregator | None = None,
    ):
        """
        Initialize the orchestrator with component dependencies.

        Args:
            completion_client: LLM client with acceptance retry
            completion_options: Options used for every completion call
            store: Document store for question sets and results
            dispatcher: E-mail dispatcher for published reports
            report_composer: Report renderer
            extractor: LLM output parser
            aggregator: Score aggregator
        """
        self.completion_client = completion_client
        self.completion_options = completion_options
        self.store = store
        self.dispatcher = dispatcher
        self.report_composer = report_composer or ReportComposer()
        self.extractor = extractor or ResponseExtractor()
        self.aggregator = aggregator or ScoreAggregator()

        self.interviewer_prompts = InterviewerPrompts()
        self.evaluator_prompts = EvaluatorPrompts()

    # =========================================================================
    # QUESTION GENERATION
    # =========================================================================

    async def generate_question_set(
        self, request: QuestionGenerationRequest
    ) -> tuple[list[QuestionSpec], str]:
        """
        Generate, validate and store a question set.

        Returns:
            The generated questions and the identifier they were stored under
        """
        messages = self.interviewer_prompts.question_generation_messages(
            role=request.role,
            content=request.content,
        )
        text = await self.completion_client.complete(messages, self.completion_options)
        questions: list[QuestionSpec] = self.extractor.extract(text, ResponseShape.QUESTION_LIST)

        q_id = str(uuid4())
        question_set = QuestionSet(
            q_id=q_id,
            role=request.role,
            experience=request.experience,
            no_of_questions=request.questions,
            skills=request.skills,
            questions=questions,
        )
        await self.store.set(f"{QUESTIONS_PATH}/{q_id}", question_set.model_dump())

        logger.info(f"Stored {len(questions)} generated questions for {request.role} as {q_id}")
        return questions, q_id

    @staticmethod
    def serialize_questions(questions: list[QuestionSpec]) -> str:
        """Compact JSON string of the questions, as returned to the caller."""
        return json.dumps(
            [question.model_dump() for question in questions],
            separators=(",", ":"),
            ensure_ascii=False,
        )

    async def list_question_sets(self) -> list[dict]:
        """Every stored question set, in store order."""
        snapshot = await self.store.get(QUESTIONS_PATH)
        if not snapshot:
            return []
        return list(snapshot.values())

    # =========================================================================
    # CANDIDATE ANALYSIS
    # =========================================================================

    async def analyse_candidate(self, request: AnalysisRequest) -> str:
        """Aggregate the scores and ask the LLM for feedback comments."""
        submission = request.to_submission()
        result = self.aggregator.aggregate(
            submission.questions_asked,
            submission.scores_respectively,
        )

        messages = self.evaluator_prompts.evaluation_messages(request, result)
        text = await self.completion_client.complete(messages, self.completion_options)
        feedback = self.extractor.extract(text, ResponseShape.FEEDBACK)

        logger.info(f"Generated feedback for {request.candidate_email} ({result.percentage})")
        return feedback.comments

    # =========================================================================
    # RESULT PUBLICATION
    # =========================================================================

    async def publish_results(self, request: PublishRequest) -> PublishResponse:
        """
        Record the result, compose the report and e-mail it.

        Reports are composed before anything is written, so a request that
        cannot be rendered leaves no record. A store failure is logged and
        does not stop the e-mails. Only the candidate delivery decides
        the response.
        """
        report = self.report_composer.compose(request)

        summary = None
        interviewer = None
        if request.receive_results_mail and request.interviewer_email:
            summary = self.report_composer.compose_interviewer_summary(request)
            interviewer = request.interviewer_email

        u_id = request.user_id or uuid4().hex
        record = PublishedResult.from_request(u_id, request)
        try:
            await self.store.set(f"{USERS_PATH}/{u_id}", record.model_dump(by_alias=True))
        except StoreError as e:
            logger.error(f"Failed to store published result {u_id}: {e.message}")

        outcome = await self.dispatcher.dispatch(
            report,
            Recipients(candidate=[request.email], interviewer=interviewer),
            summary=summary,
        )

        if outcome.candidate_delivered:
            return PublishResponse(message=PUBLISH_SUCCESS_MESSAGE, success=True)
        return PublishResponse(message=PUBLISH_FAILURE_MESSAGE, success=False)
