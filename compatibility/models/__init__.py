"""Value objects for analysis records and compatibility results."""

from .schema import (
    ElementDistribution,
    MbtiPercentages,
    NameNumerologyGrids,
    NameNumerologyResult,
    LearningStyleScores,
    SubjectAnalysis,
    CompatibilityBreakdown,
    CompatibilityScore,
    ELEMENT_ORDER,
    LEARNING_STYLE_ORDER,
)

__all__ = [
    "ElementDistribution",
    "MbtiPercentages",
    "NameNumerologyGrids",
    "NameNumerologyResult",
    "LearningStyleScores",
    "SubjectAnalysis",
    "CompatibilityBreakdown",
    "CompatibilityScore",
    "ELEMENT_ORDER",
    "LEARNING_STYLE_ORDER",
]
