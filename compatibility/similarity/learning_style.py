"""
Learning-style (VARK) derivation and compatibility.

Learning-style scores either come from a VARK questionnaire or are
derived from MBTI percentages:

    visual      = 0.6 * S + 0.4 * J   (structured, visual information)
    auditory    = E                   (discussion-driven learning)
    read_write  = I                   (reading and writing)
    kinesthetic = 0.6 * N + 0.4 * P   (experience-driven learning)

Two score sets are compared by cosine similarity, so identical profiles
score 1 and profiles dominated by different styles score lower.
"""

import logging
from typing import Any, Mapping, Optional, Union

from ..models.schema import LearningStyleScores, MbtiPercentages, LEARNING_STYLE_ORDER
from .mbti import to_mbti_percentages
from .vectors import cosine_similarity, clamp_unit

logger = logging.getLogger(__name__)

# Neutral score when either side is missing or has all-zero scores
LEARNING_STYLE_MISSING_SCORE = 0.5

# MBTI-to-VARK derivation weights
PRIMARY_AXIS_WEIGHT = 0.6
SECONDARY_AXIS_WEIGHT = 0.4

LearningStyleInput = Union[LearningStyleScores, MbtiPercentages, Mapping[str, Any], None]


def derive_learning_style_scores(mbti: Any) -> Optional[LearningStyleScores]:
    """
    Derive VARK scores from MBTI percentages.

    Args:
        mbti: MbtiPercentages or an MBTI mapping (may be None)

    Returns:
        LearningStyleScores on a 0-100 scale, or None if mbti is None
    """
    percentages = to_mbti_percentages(mbti)
    if percentages is None:
        return None

    return LearningStyleScores(
        visual=percentages.S * PRIMARY_AXIS_WEIGHT + percentages.J * SECONDARY_AXIS_WEIGHT,
        auditory=percentages.E,
        read_write=percentages.I,
        kinesthetic=percentages.N * PRIMARY_AXIS_WEIGHT + percentages.P * SECONDARY_AXIS_WEIGHT,
    )


def derive_learning_style(scores: Union[LearningStyleScores, Mapping[str, Any]]) -> str:
    """
    Pick the dominant learning style.

    Ties go to the style listed first in LEARNING_STYLE_ORDER
    (visual, auditory, read_write, kinesthetic).
    """
    if not isinstance(scores, LearningStyleScores):
        scores = LearningStyleScores.from_dict(scores)

    best_style = LEARNING_STYLE_ORDER[0]
    best_value = getattr(scores, best_style)
    for style in LEARNING_STYLE_ORDER[1:]:
        value = getattr(scores, style)
        if value > best_value:
            best_style, best_value = style, value
    return best_style


def to_learning_style_scores(value: LearningStyleInput) -> Optional[LearningStyleScores]:
    """
    Coerce a learning-style input into scores.

    MBTI percentages (as objects or mappings with an ``E`` key) are
    converted with derive_learning_style_scores.
    """
    if value is None or isinstance(value, LearningStyleScores):
        return value
    if isinstance(value, MbtiPercentages):
        return derive_learning_style_scores(value)
    if "E" in value or "percentages" in value:
        return derive_learning_style_scores(value)
    return LearningStyleScores.from_dict(value)


def calculate_learning_style_compatibility(
    a: LearningStyleInput,
    b: LearningStyleInput
) -> float:
    """
    Compute learning-style similarity between two subjects.

    Args:
        a: Learning-style scores or MBTI percentages of the first subject
        b: Learning-style scores or MBTI percentages of the second subject

    Returns:
        Similarity in [0, 1]; 0.5 when either side is missing or all-zero
    """
    scores_a = to_learning_style_scores(a)
    scores_b = to_learning_style_scores(b)
    if scores_a is None or scores_b is None:
        return LEARNING_STYLE_MISSING_SCORE

    similarity = cosine_similarity(scores_a.to_vector(), scores_b.to_vector())
    if similarity is None:
        return LEARNING_STYLE_MISSING_SCORE

    logger.debug(
        f"Learning style similarity {similarity:.3f} "
        f"({derive_learning_style(scores_a)} vs {derive_learning_style(scores_b)})"
    )
    return clamp_unit(similarity)
