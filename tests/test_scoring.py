import math

import pytest

from interviewdesk.core.errors import AlignmentError
from interviewdesk.core.scoring import ScoreAggregator, format_percentage, parse_score_token


@pytest.fixture
def aggregator():
    return ScoreAggregator()


def test_three_questions_example(aggregator):
    result = aggregator.aggregate(["q1", "q2", "q3"], ["4", "3", "2"])

    assert result.total_score == 9
    assert result.max_possible_score == 12
    assert result.percentage == "75.00%"


def test_only_leading_token_counts(aggregator):
    verbose = aggregator.aggregate(["q1", "q2"], ["3 out of 4", "2 - partially correct"])
    bare = aggregator.aggregate(["q1", "q2"], ["3", "2"])

    assert verbose == bare


@pytest.mark.parametrize(
    "token, expected",
    [("3", 3), ("3/4", 3), ("  4 points", 4), ("+2", 2), ("-1", -1), ("07", 7)],
)
def test_parse_score_token_integer_prefix(token, expected):
    assert parse_score_token(token) == expected


@pytest.mark.parametrize("token", ["abc", "", "four", "/4", "٣", "３"])
def test_parse_score_token_without_digits_is_nan(token):
    assert math.isnan(parse_score_token(token))


def test_non_numeric_score_propagates_nan(aggregator):
    result = aggregator.aggregate(["q1", "q2"], ["3", "excellent"])

    assert math.isnan(result.total_score)
    assert result.percentage == "NaN%"


def test_no_clamping_above_maximum(aggregator):
    result = aggregator.aggregate(["q1"], ["6"])

    assert result.percentage == "150.00%"


def test_percentage_rounds_half_up():
    # 97 / 32 * 100 == 303.125 exactly
    assert format_percentage(97, 32) == "303.13%"
    assert format_percentage(1, 3) == "33.33%"
    assert format_percentage(2, 3) == "66.67%"


def test_empty_submission_is_nan(aggregator):
    result = aggregator.aggregate([], [])

    assert result.max_possible_score == 0
    assert result.percentage == "NaN%"


def test_misaligned_lengths_raise(aggregator):
    with pytest.raises(AlignmentError):
        aggregator.aggregate(["q1", "q2"], ["3"])
