import json

import pytest

from interviewdesk.core.errors import MalformedResponse
from interviewdesk.core.extraction import ResponseExtractor, ResponseShape, strip_fences
from interviewdesk.models.evaluation import FeedbackComments
from interviewdesk.models.question import QuestionSpec

BARE = '[{"question":"Q","answer":"A","weightage":"2"}]'


@pytest.fixture
def extractor():
    return ResponseExtractor()


@pytest.mark.parametrize(
    "raw",
    [
        BARE,
        f"```json\n{BARE}\n```",
        f"```\n{BARE}\n```",
        f"  ```json{BARE}```  ",
    ],
)
def test_fenced_and_bare_output_parse_identically(extractor, raw):
    parsed = extractor.extract(raw, ResponseShape.QUESTION_LIST)

    assert parsed == [QuestionSpec(question="Q", answer="A", weightage="2")]


def test_json_inside_values_is_kept(extractor):
    raw = '```json\n[{"question":"Parse json safely?","answer":"Use json.loads","weightage":"1"}]\n```'

    parsed = extractor.extract(raw, ResponseShape.QUESTION_LIST)

    assert parsed[0].question == "Parse json safely?"
    assert parsed[0].answer == "Use json.loads"


def test_numeric_weightage_is_coerced_to_text(extractor):
    raw = json.dumps([{"question": "Q", "answer": "A", "weightage": 3}])

    parsed = extractor.extract(raw, ResponseShape.QUESTION_LIST)

    assert parsed[0].weightage == "3"


def test_feedback_shape(extractor):
    parsed = extractor.extract('```json\n{"comments": "Strong SQL, weak on caching."}\n```', ResponseShape.FEEDBACK)

    assert parsed == FeedbackComments(comments="Strong SQL, weak on caching.")


def test_invalid_json_raises_malformed_response(extractor):
    raw = "Sure! Here are some questions you could ask the candidate during the interview."

    with pytest.raises(MalformedResponse) as exc_info:
        extractor.extract(raw, ResponseShape.QUESTION_LIST)

    assert exc_info.value.raw_text == raw


def test_wrong_shape_raises_malformed_response(extractor):
    with pytest.raises(MalformedResponse):
        extractor.extract('{"comments": "fine"}', ResponseShape.QUESTION_LIST)

    with pytest.raises(MalformedResponse):
        extractor.extract('[{"question": "Q"}]', ResponseShape.QUESTION_LIST)

    with pytest.raises(MalformedResponse):
        extractor.extract(BARE, ResponseShape.FEEDBACK)


def test_strip_fences_removes_every_marker():
    assert strip_fences("```json\n{}\n```\n```") == "{}"
