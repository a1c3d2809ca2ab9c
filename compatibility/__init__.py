"""
Teacher-Student Compatibility Scoring

This package combines personality-analysis outputs (Saju element
distributions, MBTI percentages, name-numerology grids and VARK
learning styles) into normalized compatibility scores used for
teacher-student matching.

Key Design Decisions:
- Every scorer is a pure function of its inputs; no I/O or shared state
- Missing analyses never raise; each dimension has its own fallback
  (Saju and name fall back to 0, MBTI and learning style to 0.5)
- Dimension weights are a named, overridable policy (ScoringWeights)
"""

from .models import SubjectAnalysis, CompatibilityScore, CompatibilityBreakdown
from .scoring import (
    calculate_compatibility_score,
    CompatibilityScorer,
    ScoringWeights,
    DEFAULT_WEIGHTS
)
from .similarity import (
    calculate_saju_compatibility,
    calculate_mbti_compatibility,
    calculate_name_compatibility,
    calculate_learning_style_compatibility,
    derive_learning_style
)

__version__ = "1.0.0"

__all__ = [
    "SubjectAnalysis",
    "CompatibilityScore",
    "CompatibilityBreakdown",
    "calculate_compatibility_score",
    "CompatibilityScorer",
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
    "calculate_saju_compatibility",
    "calculate_mbti_compatibility",
    "calculate_name_compatibility",
    "calculate_learning_style_compatibility",
    "derive_learning_style",
]
