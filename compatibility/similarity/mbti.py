"""
MBTI compatibility from pole percentages.

similarity = 1 - mean(|A_axis - B_axis|) / 100 over the E, S, T and J axes.
"""

from typing import Any, Mapping, Optional, Union

import numpy as np

from ..models.schema import MbtiPercentages
from .vectors import clamp_unit

# Neutral score when either subject has no MBTI analysis
MBTI_MISSING_SCORE = 0.5

MBTI_PERCENT_SCALE = 100.0

MbtiInput = Union[MbtiPercentages, Mapping[str, Any], None]


def to_mbti_percentages(value: MbtiInput) -> Optional[MbtiPercentages]:
    """Coerce an MBTI record (or its ``percentages`` mapping) into MbtiPercentages."""
    if value is None or isinstance(value, MbtiPercentages):
        return value
    if "percentages" in value:
        return to_mbti_percentages(value["percentages"])
    return MbtiPercentages.from_dict(value)


def calculate_mbti_compatibility(a: MbtiInput, b: MbtiInput) -> float:
    """
    Compute MBTI similarity between two subjects.

    Args:
        a: MBTI percentages of the first subject (may be None)
        b: MBTI percentages of the second subject (may be None)

    Returns:
        Similarity in [0, 1]; 0.5 when either side is missing
    """
    mbti_a = to_mbti_percentages(a)
    mbti_b = to_mbti_percentages(b)
    if mbti_a is None or mbti_b is None:
        return MBTI_MISSING_SCORE

    diffs = np.abs(np.asarray(mbti_a.to_vector()) - np.asarray(mbti_b.to_vector()))
    avg_diff = float(np.mean(diffs))

    return clamp_unit(1 - avg_diff / MBTI_PERCENT_SCALE)
