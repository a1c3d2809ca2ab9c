"""
Name-numerology compatibility.

Compares the four stroke-count grids (won, hyung, yi, jeong) of two
names. Grid values run 1-81, so the largest possible difference per
grid is 80:

    normalized_diff = sum(|A_grid - B_grid|) / (80 * 4)
    similarity = 1 - normalized_diff
"""

from typing import Any, Mapping, Optional, Union

import numpy as np

from ..models.schema import NameNumerologyGrids, NameNumerologyResult
from .vectors import clamp_unit, round_half_up

# Largest difference between two grid values (81 - 1)
MAX_GRID_VALUE = 80

GRID_COUNT = 4

# Score when either name analysis or its grids are missing
NAME_MISSING_SCORE = 0.0

# Upper bound of each interpretation band, checked in order
GRID_INTERPRETATION_BANDS = [
    (10, "Weak foundation; benefits from a supportive environment."),
    (20, "Stable and diligent; steady effort is a strength."),
    (30, "Drive to challenge and achieve; well suited to reaching goals."),
    (40, "Strong responsibility and leadership; earns the trust of others."),
    (50, "Highly active; energy shines in relationships."),
    (60, "Well balanced; strong at long-term planning."),
    (70, "Practical and capable; builds a solid base."),
    (81, "Strong sense of completion; brings achievement and honor."),
]
GRID_INTERPRETATION_FALLBACK = "Many changes ahead; needs steady management."

NameInput = Union[NameNumerologyResult, NameNumerologyGrids, Mapping[str, Any], None]


def to_name_grids(value: NameInput) -> Optional[NameNumerologyGrids]:
    """
    Extract grids from a stored name analysis.

    Returns None if the analysis or its grids are absent.
    """
    if value is None or isinstance(value, NameNumerologyGrids):
        return value
    if isinstance(value, NameNumerologyResult):
        return value.grids
    return NameNumerologyResult.from_dict(value).grids


def calculate_name_compatibility(a: NameInput, b: NameInput) -> float:
    """
    Compute name-numerology similarity between two subjects.

    Args:
        a: Name analysis of the first subject (may be None or lack grids)
        b: Name analysis of the second subject (may be None or lack grids)

    Returns:
        Similarity in [0, 1]; 0 when either side has no grids
    """
    grids_a = to_name_grids(a)
    grids_b = to_name_grids(b)
    if grids_a is None or grids_b is None:
        return NAME_MISSING_SCORE

    diffs = np.abs(np.asarray(grids_a.to_vector()) - np.asarray(grids_b.to_vector()))
    normalized_diff = float(np.sum(diffs)) / (MAX_GRID_VALUE * GRID_COUNT)

    return clamp_unit(1 - normalized_diff)


def interpret_grid_value(value: int) -> str:
    """Return the interpretation text for a single grid value."""
    for upper, text in GRID_INTERPRETATION_BANDS:
        if value <= upper:
            return text
    return GRID_INTERPRETATION_FALLBACK


def interpret_grids(grids: NameNumerologyGrids) -> dict:
    """Interpret each grid plus the rounded average as ``overall``."""
    average = round_half_up(sum(grids.to_vector()) / GRID_COUNT)
    return {
        "won": interpret_grid_value(grids.won),
        "hyung": interpret_grid_value(grids.hyung),
        "yi": interpret_grid_value(grids.yi),
        "jeong": interpret_grid_value(grids.jeong),
        "overall": interpret_grid_value(average),
    }
