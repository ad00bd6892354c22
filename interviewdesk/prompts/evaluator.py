"""
AI Evaluator Prompt Templates

Contains the prompt asking the model for qualitative feedback on a
candidate, given the interviewer's scores and the job description.
"""

import math

from interviewdesk.models.evaluation import AggregateResult, AnalysisRequest


class EvaluatorPrompts:
    """
    Prompt templates for AI evaluation of interview scores.

    Key principles:
    - Judge technical proficiency only
    - Compare the scores against the job description
    - Answer with a single {"comments": ...} JSON object
    """

    OUTPUT_FORMAT = """{
    "comments": "Your comments on candidate's performance based on the scores."
}"""

    def _transcript(self, request: AnalysisRequest) -> str:
        return ", ".join(
            f"{question} - mark scored - {score}"
            for question, score in zip(
                request.questions_asked_to_the_candidate,
                request.scores_respectively,
            )
        )

    def evaluation_prompt(self, request: AnalysisRequest, result: AggregateResult) -> str:
        """Build the single system prompt for candidate evaluation."""
        total = "NaN" if math.isnan(result.total_score) else result.total_score

        prompt = f"""As a Senior Technical Recruiter with 30+ years of experience in hiring people, your role is to carefully assess the candidate's technical skills and suitability for the position of {request.hiring_for}.
Please evaluate the candidate only based on their technical proficiency by the scores obtained comparing them with the company's job description and provide feedback accordingly.

Candidate Information:
- Name: {request.candidate_name}
- Email: {request.candidate_email}
- Experience: {request.candidates_experience} years
- Skills: {', '.join(request.candidates_skills)}

Questions Asked to the Candidate and their scores for the response by the interviewer:
{self._transcript(request)}

Total Score:
{total} out of {result.max_possible_score}

Percentage:
{result.percentage}

Job Description by the organisation:
{request.job_description}

Above is the candidate's performance and the job description.
Please provide your evaluation only in the following JSON format:
{self.OUTPUT_FORMAT}
"""
        return prompt

    def evaluation_messages(self, request: AnalysisRequest, result: AggregateResult) -> list[dict[str, str]]:
        return [{"role": "system", "content": self.evaluation_prompt(request, result)}]
