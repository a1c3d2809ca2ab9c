"""Per-dimension similarity functions for compatibility scoring."""

from .saju import calculate_saju_compatibility, SAJU_MISSING_SCORE
from .mbti import calculate_mbti_compatibility, MBTI_MISSING_SCORE
from .name import (
    calculate_name_compatibility,
    interpret_grid_value,
    interpret_grids,
    MAX_GRID_VALUE,
    NAME_MISSING_SCORE
)
from .learning_style import (
    calculate_learning_style_compatibility,
    derive_learning_style,
    derive_learning_style_scores,
    LEARNING_STYLE_MISSING_SCORE
)

__all__ = [
    "calculate_saju_compatibility",
    "calculate_mbti_compatibility",
    "calculate_name_compatibility",
    "calculate_learning_style_compatibility",
    "derive_learning_style",
    "derive_learning_style_scores",
    "interpret_grid_value",
    "interpret_grids",
    "SAJU_MISSING_SCORE",
    "MBTI_MISSING_SCORE",
    "NAME_MISSING_SCORE",
    "LEARNING_STYLE_MISSING_SCORE",
    "MAX_GRID_VALUE"
]
