"""
Teacher-student compatibility aggregation.

Combines the per-dimension similarities into one overall score:

    breakdown = {saju, mbti, name, learning_style}   each in [0, 1]
    overall = sum(w_i * s_i) / sum(w_i)

The teacher load-balance term always joins the weighted sum; an unknown
load scores as an empty roster. Missing analyses never raise; each
dimension falls back to its own default.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from ..models.schema import (
    SubjectAnalysis,
    CompatibilityBreakdown,
    CompatibilityScore,
)
from ..similarity import (
    calculate_saju_compatibility,
    calculate_mbti_compatibility,
    calculate_name_compatibility,
    calculate_learning_style_compatibility,
)
from .load_balance import calculate_load_balance_score
from .weights import ScoringWeights, DEFAULT_WEIGHTS

logger = logging.getLogger(__name__)

SubjectInput = Union[SubjectAnalysis, Mapping[str, Any]]


def _to_subject(value: SubjectInput) -> SubjectAnalysis:
    if isinstance(value, SubjectAnalysis):
        return value
    return SubjectAnalysis.from_dict(value)


def _learning_style_source(subject: SubjectAnalysis):
    """Explicit VARK scores win over scores derived from MBTI."""
    if subject.learning_style is not None:
        return subject.learning_style
    return subject.mbti


def calculate_breakdown(
    teacher: SubjectInput,
    student: SubjectInput
) -> CompatibilityBreakdown:
    """Compute all four similarities for a pair of subjects."""
    teacher = _to_subject(teacher)
    student = _to_subject(student)

    return CompatibilityBreakdown(
        saju=calculate_saju_compatibility(teacher.saju, student.saju),
        mbti=calculate_mbti_compatibility(teacher.mbti, student.mbti),
        name=calculate_name_compatibility(teacher.name, student.name),
        learning_style=calculate_learning_style_compatibility(
            _learning_style_source(teacher), _learning_style_source(student)
        ),
    )


def generate_reasons(
    breakdown: CompatibilityBreakdown,
    load_balance: Optional[float] = None
) -> List[str]:
    """
    Build recommendation reasons from the breakdown.

    Args:
        breakdown: Per-dimension similarities
        load_balance: Teacher load score, None to omit the load reason

    Returns:
        Non-empty list of reason sentences
    """
    reasons = []

    if breakdown.mbti >= 0.8:
        reasons.append("Very similar MBTI profiles; communication styles should fit well.")
    elif breakdown.mbti >= 0.6:
        reasons.append("Similar MBTI profiles; everyday communication should be easy.")
    elif breakdown.mbti >= 0.4:
        reasons.append("Some MBTI differences, but the two can complement each other.")
    else:
        reasons.append("Large MBTI differences; complementary strengths can create synergy.")

    if breakdown.learning_style >= 0.8:
        reasons.append("Learning styles match well; teaching should be highly effective.")
    elif breakdown.learning_style >= 0.5:
        reasons.append("Learning styles broadly align; study efficiency should be good.")

    if breakdown.saju >= 0.7:
        reasons.append("Five-element balance fits well; favorable for a long-term relationship.")
    elif breakdown.saju >= 0.5:
        reasons.append("Five-element energies blend into a harmonious relationship.")

    if breakdown.name >= 0.7:
        reasons.append("Name numerology traits fit well; a positive relationship is expected.")

    if load_balance is not None:
        if load_balance >= 1.0:
            reasons.append("Few students currently assigned; plenty of attention available.")
        elif load_balance >= 2 / 3:
            reasons.append("A moderate number of assigned students allows balanced guidance.")
        elif load_balance >= 1 / 3:
            reasons.append("Many students already assigned, but efficient management is possible.")

    if (breakdown.mbti + breakdown.learning_style) / 2 >= 0.8:
        reasons.append("High compatibility in both personality and learning style.")

    if not reasons:
        reasons.append("Compatibility computed from the combined analysis data.")

    return reasons


def calculate_compatibility_score(
    teacher: SubjectInput,
    student: SubjectInput,
    weights: Optional[ScoringWeights] = None
) -> CompatibilityScore:
    """
    Compute the overall compatibility between a teacher and a student.

    Args:
        teacher: Teacher analysis bundle (any analysis may be missing)
        student: Student analysis bundle (any analysis may be missing)
        weights: Dimension weights, DEFAULT_WEIGHTS if None

    Returns:
        CompatibilityScore with overall in [0, 1], four-part breakdown and reasons
    """
    if weights is None:
        weights = DEFAULT_WEIGHTS
    else:
        weights.validate()
    teacher = _to_subject(teacher)
    student = _to_subject(student)

    breakdown = calculate_breakdown(teacher, student)

    terms = [
        (weights.mbti, breakdown.mbti),
        (weights.learning_style, breakdown.learning_style),
        (weights.saju, breakdown.saju),
        (weights.name, breakdown.name),
    ]

    # An unknown load counts as an empty roster
    load_balance = calculate_load_balance_score(teacher.current_load)
    terms.append((weights.load_balance, load_balance))

    w = np.array([t[0] for t in terms], dtype=float)
    s = np.array([t[1] for t in terms], dtype=float)
    overall = float(np.clip(np.dot(w, s) / w.sum(), 0.0, 1.0))

    logger.debug(
        f"Compatibility {teacher.subject_id} / {student.subject_id}: "
        f"overall={overall:.3f} breakdown={breakdown.to_dict()}"
    )

    return CompatibilityScore(
        overall=overall,
        breakdown=breakdown,
        load_balance=load_balance,
        reasons=generate_reasons(breakdown, load_balance),
    )


class CompatibilityScorer:
    """
    Compatibility scorer bound to a set of weights.

    Attributes:
        weights: ScoringWeights used for every score
    """

    def __init__(self, weights: Optional[ScoringWeights] = None):
        """
        Initialize the scorer.

        Args:
            weights: ScoringWeights instance, DEFAULT_WEIGHTS if None
        """
        self.weights = weights or DEFAULT_WEIGHTS
        self.weights.validate()
        logger.info(f"Initialized CompatibilityScorer with weights={self.weights.to_dict()}")

    def score(self, teacher: SubjectInput, student: SubjectInput) -> CompatibilityScore:
        """Score one teacher-student pair."""
        return calculate_compatibility_score(teacher, student, self.weights)

    def rank(
        self,
        student: SubjectInput,
        teachers: Sequence[SubjectInput],
        top_k: Optional[int] = None
    ) -> List[Tuple[Optional[str], CompatibilityScore]]:
        """
        Rank candidate teachers for a student.

        Args:
            student: Student analysis bundle
            teachers: Candidate teacher bundles
            top_k: Keep only the best k candidates (all if None)

        Returns:
            List of (teacher subject_id, score), best first; ties keep input order
        """
        student = _to_subject(student)
        scored = []
        for teacher in teachers:
            teacher = _to_subject(teacher)
            scored.append((teacher.subject_id, self.score(teacher, student)))

        scored.sort(key=lambda item: item[1].overall, reverse=True)
        if top_k is not None:
            scored = scored[:top_k]

        logger.info(f"Ranked {len(teachers)} teachers for student {student.subject_id}")
        return scored

    def get_effective_weights(self) -> Dict[str, float]:
        """Weights normalized over the four similarity dimensions."""
        total = self.weights.dimension_total()
        return {
            "mbti": self.weights.mbti / total,
            "learning_style": self.weights.learning_style / total,
            "saju": self.weights.saju / total,
            "name": self.weights.name / total,
        }


def create_scorer_from_config(config: Dict[str, Any]) -> CompatibilityScorer:
    """
    Factory function to create a CompatibilityScorer from config.

    Args:
        config: Main configuration dictionary

    Returns:
        Configured CompatibilityScorer instance
    """
    return CompatibilityScorer(ScoringWeights.from_config(config))
