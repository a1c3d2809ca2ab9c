"""
MBTI and VARK questionnaire scoring.

MBTI: responses are summed per pole; each axis percentage is
round(first_pole / axis_total * 100) and the opposite pole takes the
remainder. Ties pick the first pole of the axis (E, S, T, J).

VARK: responses are summed per type and converted to percentages that
sum to 100 (rounding drift goes to the largest type). Types at or above
the dominance cutoff (25 + 3) form the VARK type; no dominant type or all
four dominant gives the multimodal "VARK".
"""

import logging
from typing import Any, Dict, Mapping, Sequence, Union

from ..similarity.vectors import round_half_up
from .schema import MbtiQuestion, VarkQuestion, MbtiResult, VarkResult, MBTI_POLES, VARK_TYPES

logger = logging.getLogger(__name__)

MBTI_AXES = [("e", "i"), ("s", "n"), ("t", "f"), ("j", "p")]

VARK_EVEN_SHARE = 25
VARK_DOMINANCE_MARGIN = 3
MULTIMODAL_VARK_TYPE = "VARK"

Responses = Mapping[Union[str, int], float]


def _response_for(responses: Responses, question_id: int):
    if str(question_id) in responses:
        return responses[str(question_id)]
    return responses.get(question_id)


def calculate_progress(responses: Responses, total_questions: int) -> Dict[str, int]:
    """
    Report how much of a questionnaire has been answered.

    Returns:
        Dictionary with answered_count, total_questions and rounded percentage
    """
    answered = len(responses)
    percentage = round_half_up(answered / total_questions * 100) if total_questions else 0
    return {
        "answered_count": answered,
        "total_questions": total_questions,
        "percentage": percentage
    }


def score_mbti(
    responses: Responses,
    questions: Sequence[Union[MbtiQuestion, Mapping[str, Any]]]
) -> MbtiResult:
    """
    Score an MBTI questionnaire.

    Args:
        responses: Likert answers keyed by question id
        questions: Questionnaire items

    Returns:
        MbtiResult with raw sums, type letters and percentages
    """
    scores = {pole: 0.0 for pole in MBTI_POLES}

    for question in questions:
        if not isinstance(question, MbtiQuestion):
            question = MbtiQuestion.from_dict(question)
        response = _response_for(responses, question.id)
        if response is not None:
            scores[question.pole.lower()] += response

    percentages = {pole.upper(): 0 for pole in MBTI_POLES}
    mbti_type = ""

    for first, second in MBTI_AXES:
        total = scores[first] + scores[second]
        if total > 0:
            percentages[first.upper()] = round_half_up(scores[first] / total * 100)
            percentages[second.upper()] = 100 - percentages[first.upper()]
            mbti_type += first.upper() if scores[first] >= scores[second] else second.upper()

    logger.debug(f"Scored MBTI questionnaire: {mbti_type} {percentages}")
    return MbtiResult(scores=scores, mbti_type=mbti_type, percentages=percentages)


def determine_vark_type(percentages: Mapping[str, float]) -> str:
    """
    Determine the VARK type from percentages.

    Args:
        percentages: Mapping with V, A, R and K percentages

    Returns:
        Dominant letters ordered by percentage, or "VARK" if none or all dominate
    """
    cutoff = VARK_EVEN_SHARE + VARK_DOMINANCE_MARGIN
    dominant = [key for key in "VARK" if percentages[key] >= cutoff]

    if not dominant or len(dominant) == 4:
        return MULTIMODAL_VARK_TYPE

    # sorted() is stable, so equal percentages keep V, A, R, K order
    return "".join(sorted(dominant, key=lambda key: percentages[key], reverse=True))


def score_vark(
    responses: Responses,
    questions: Sequence[Union[VarkQuestion, Mapping[str, Any]]]
) -> VarkResult:
    """
    Score a VARK questionnaire.

    Args:
        responses: Likert answers keyed by question id
        questions: Questionnaire items

    Returns:
        VarkResult with raw sums, VARK type and percentages summing to 100
    """
    scores = {vark_type: 0.0 for vark_type in VARK_TYPES}

    for question in questions:
        if not isinstance(question, VarkQuestion):
            question = VarkQuestion.from_dict(question)
        response = _response_for(responses, question.id)
        if response is not None:
            scores[question.type.lower()] += response

    total = sum(scores.values())
    if total > 0:
        percentages = {
            key.upper(): round_half_up(value / total * 100) for key, value in scores.items()
        }
        drift = 100 - sum(percentages.values())
        if drift != 0:
            # First key wins ties for the largest bucket
            largest = max(percentages, key=lambda key: percentages[key])
            percentages[largest] += drift
    else:
        percentages = {key.upper(): VARK_EVEN_SHARE for key in VARK_TYPES}

    return VarkResult(
        scores=scores,
        vark_type=determine_vark_type(percentages),
        percentages=percentages
    )
