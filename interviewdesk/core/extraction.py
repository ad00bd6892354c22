"""
Response Extractor for InterviewDesk

Turns raw LLM output into a guaranteed-shape value. Models wrap their
JSON in Markdown fences more often than not, so every ``` marker and a
`json` language tag after an opening fence are removed before parsing.

Parse failures are terminal: retrying is the completion client's job,
and its acceptance condition never sees parse errors.
"""

import json
import logging
import re
from enum import Enum
from typing import Any

from pydantic import TypeAdapter, ValidationError

from interviewdesk.core.errors import MalformedResponse
from interviewdesk.models.evaluation import FeedbackComments
from interviewdesk.models.question import QuestionSpec

logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r"```(?:json\b)?")


class ResponseShape(str, Enum):
    """Expected top-level shape of an LLM answer."""

    QUESTION_LIST = "question_list"
    FEEDBACK = "feedback"


_ADAPTERS: dict[ResponseShape, TypeAdapter] = {
    ResponseShape.QUESTION_LIST: TypeAdapter(list[QuestionSpec]),
    ResponseShape.FEEDBACK: TypeAdapter(FeedbackComments),
}


def strip_fences(raw_text: str) -> str:
    """Remove code-fence markers and their json tag, then trim."""
    return _FENCE_PATTERN.sub("", raw_text).strip()


class ResponseExtractor:
    """Parses fenced or bare LLM JSON output into validated models."""

    def extract(self, raw_text: str, shape: ResponseShape) -> Any:
        """
        Parse LLM output into the requested shape.

        Args:
            raw_text: Text returned by the completion client
            shape: Expected structure

        Returns:
            list[QuestionSpec] for QUESTION_LIST, FeedbackComments for FEEDBACK

        Raises:
            MalformedResponse: If the text is not JSON of the expected shape
        """
        cleaned = strip_fences(raw_text)

        try:
            data = json.loads(cleaned)
        except json.JSONDecodeError as e:
            logger.error(f"LLM output is not valid JSON: {e}")
            logger.debug(f"Raw output (first 500 chars): {raw_text[:500]}")
            raise MalformedResponse(f"Invalid JSON in LLM output: {e}", raw_text) from e

        try:
            return _ADAPTERS[shape].validate_python(data)
        except ValidationError as e:
            logger.error(f"LLM output does not match {shape.value}: {e.error_count()} error(s)")
            raise MalformedResponse(
                f"LLM output does not match {shape.value}",
                raw_text,
                details={"errors": e.errors(include_url=False)},
            ) from e
