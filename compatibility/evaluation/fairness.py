"""
Fairness metrics for teacher-student assignments.

Checks a set of assignments (student, teacher, compatibility score on the
0-100 display scale) for algorithmic bias:

- Disparity index: spread of mean scores between student groups (schools).
  0 = no difference between groups, 1 = maximal difference.
- ABROCA: L1 distance between the score histogram and a uniform histogram,
  normalized by 2N. 0 = evenly spread scores, 1 = heavily skewed.
- Distribution balance: 1 - std/mean of assignments per teacher.
  1 = perfectly even workload, 0 = concentrated on a few teachers.

These metrics describe the assignment distribution; they do not claim
anything about real-world outcomes.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Sequence, Mapping
import json

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Assignment:
    """One student assigned to one teacher with its compatibility score (0-100)."""
    student_id: str
    teacher_id: str
    score: float


@dataclass
class FairnessThresholds:
    """
    Thresholds that trigger fairness recommendations.

    Attributes:
        disparity_index: Recommend reweighting above this disparity
        abroca: Recommend an algorithm review above this skew
        distribution_balance: Recommend more load balancing below this balance
        histogram_bins: Number of histogram bins for ABROCA
        score_scale: Upper bound of the score scale
    """
    disparity_index: float = 0.2
    abroca: float = 0.3
    distribution_balance: float = 0.7
    histogram_bins: int = 10
    score_scale: float = 100.0

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "FairnessThresholds":
        """Create from main config dictionary."""
        fairness_config = config.get("fairness", {})
        thresholds = fairness_config.get("thresholds", {})

        return cls(
            disparity_index=thresholds.get("disparity_index", 0.2),
            abroca=thresholds.get("abroca", 0.3),
            distribution_balance=thresholds.get("distribution_balance", 0.7),
            histogram_bins=fairness_config.get("histogram_bins", 10),
            score_scale=fairness_config.get("score_scale", 100.0)
        )


@dataclass
class AssignmentScoreStats:
    """Spread of assignment scores on the 0-100 scale."""
    count: int
    mean: float
    std: float
    min: float
    max: float
    percentiles: Dict[str, float]  # {"p10": ..., "p50": ..., "p90": ...}
    teacher_means: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "mean": self.mean,
            "std": self.std,
            "min": self.min,
            "max": self.max,
            "percentiles": dict(self.percentiles),
            "teacher_means": dict(self.teacher_means)
        }


@dataclass
class FairnessMetrics:
    """Fairness metrics for a set of assignments."""
    disparity_index: float
    abroca: float
    distribution_balance: float
    recommendations: List[str] = field(default_factory=list)
    distribution_stats: Optional[AssignmentScoreStats] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "disparity_index": float(self.disparity_index),
            "abroca": float(self.abroca),
            "distribution_balance": float(self.distribution_balance),
            "recommendations": list(self.recommendations)
        }
        if self.distribution_stats:
            result["distribution_stats"] = self.distribution_stats.to_dict()
        return result

    def save(self, filepath: str) -> None:
        """Save metrics to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved fairness metrics to {filepath}")

    def summary(self) -> str:
        """Generate text summary of the metrics."""
        lines = [
            "Fairness Metrics",
            "=" * 50,
            f"  Disparity index:      {self.disparity_index:.4f}",
            f"  ABROCA:               {self.abroca:.4f}",
            f"  Distribution balance: {self.distribution_balance:.4f}",
        ]
        if self.distribution_stats:
            stats = self.distribution_stats
            lines.append(
                f"  Scores:               mean {stats.mean:.1f}, "
                f"median {stats.percentiles.get('p50', stats.mean):.1f} (n={stats.count})"
            )
        lines.extend(["", "Recommendations:"])
        lines.extend(f"  - {r}" for r in self.recommendations)
        return "\n".join(lines)


def _to_frame(assignments: Sequence[Assignment]) -> pd.DataFrame:
    return pd.DataFrame(
        [(a.student_id, a.teacher_id, float(a.score)) for a in assignments],
        columns=["student_id", "teacher_id", "score"]
    )


def calculate_disparity_index(
    assignments: Sequence[Assignment],
    student_groups: Mapping[str, Optional[str]],
    score_scale: float = 100.0
) -> float:
    """
    Compute the spread of mean scores between student groups.

    Students without a group are ignored.

    Args:
        assignments: Assignments to analyze
        student_groups: Student id to group (e.g., school)
        score_scale: Upper bound of the score scale

    Returns:
        (max group mean - min group mean) / score_scale in [0, 1];
        0 when fewer than two groups have scores
    """
    if not assignments:
        return 0.0

    df = _to_frame(assignments)
    df["group"] = df["student_id"].map(lambda sid: student_groups.get(sid))
    df = df.dropna(subset=["group"])

    group_means = df.groupby("group")["score"].mean()
    if len(group_means) < 2:
        return 0.0

    disparity = (group_means.max() - group_means.min()) / score_scale
    return float(np.clip(disparity, 0.0, 1.0))


def calculate_abroca(
    assignments: Sequence[Assignment],
    bins: int = 10,
    score_scale: float = 100.0
) -> float:
    """
    Compute score-distribution skew against a uniform histogram.

    Args:
        assignments: Assignments to analyze
        bins: Number of equal-width bins over [0, score_scale]
        score_scale: Upper bound of the score scale

    Returns:
        L1 distance to the uniform histogram / (2N), in [0, 1]
    """
    if not assignments:
        return 0.0

    scores = np.array([a.score for a in assignments], dtype=float)
    bin_size = score_scale / bins

    # Scores at the top of the scale fall into the last bin
    bin_index = np.clip(np.floor(scores / bin_size), 0, bins - 1).astype(int)
    histogram = np.bincount(bin_index, minlength=bins)

    ideal_count = len(scores) / bins
    l1_distance = np.sum(np.abs(histogram - ideal_count))

    abroca = l1_distance / (2 * len(scores))
    return float(np.clip(abroca, 0.0, 1.0))


def calculate_distribution_balance(assignments: Sequence[Assignment]) -> float:
    """
    Compute how evenly assignments are spread across teachers.

    Returns:
        1 - std/mean of per-teacher counts in [0, 1]; 1 when empty
    """
    if not assignments:
        return 1.0

    counts = _to_frame(assignments)["teacher_id"].value_counts().to_numpy(dtype=float)
    mean = counts.mean()
    if mean == 0:
        return 1.0

    # Population standard deviation
    std = counts.std(ddof=0)
    return float(np.clip(1 - std / mean, 0.0, 1.0))


def summarize_assignment_scores(
    assignments: Sequence[Assignment],
    percentiles: Sequence[int] = (10, 25, 50, 75, 90)
) -> Optional[AssignmentScoreStats]:
    """
    Summarize how assignment scores are spread overall and per teacher.

    Args:
        assignments: Scored teacher-student assignments
        percentiles: Percentile ranks (0-100) to report

    Returns:
        AssignmentScoreStats, or None when there are no assignments
    """
    if not assignments:
        return None

    df = _to_frame(assignments)
    scores = df["score"].to_numpy()
    values = np.percentile(scores, list(percentiles))
    teacher_means = df.groupby("teacher_id", sort=True)["score"].mean()

    return AssignmentScoreStats(
        count=len(scores),
        mean=float(scores.mean()),
        std=float(scores.std()),
        min=float(scores.min()),
        max=float(scores.max()),
        percentiles={f"p{p}": float(v) for p, v in zip(percentiles, values)},
        teacher_means={str(k): float(v) for k, v in teacher_means.items()}
    )


def generate_fairness_recommendations(
    disparity_index: float,
    abroca: float,
    distribution_balance: float,
    thresholds: Optional[FairnessThresholds] = None
) -> List[str]:
    """Suggest corrective actions for metrics outside their thresholds."""
    thresholds = thresholds or FairnessThresholds()
    recommendations = []

    if disparity_index > thresholds.disparity_index:
        recommendations.append(
            "Compatibility scores differ widely between schools. Review the scoring weights."
        )

    if abroca > thresholds.abroca:
        recommendations.append(
            "The compatibility score distribution is skewed. Review the scoring algorithm."
        )

    if distribution_balance < thresholds.distribution_balance:
        recommendations.append(
            "Assignments are unevenly spread across teachers. Increase the load-balance weight."
        )

    if not recommendations:
        recommendations.append("Fairness metrics are within normal ranges.")

    return recommendations


def calculate_fairness_metrics(
    assignments: Sequence[Assignment],
    student_groups: Optional[Mapping[str, Optional[str]]] = None,
    thresholds: Optional[FairnessThresholds] = None
) -> FairnessMetrics:
    """
    Compute all fairness metrics for a set of assignments.

    Args:
        assignments: Assignments with scores on the 0-100 scale
        student_groups: Student id to group; disparity is 0 when omitted
        thresholds: Recommendation thresholds (defaults if None)

    Returns:
        FairnessMetrics instance
    """
    thresholds = thresholds or FairnessThresholds()

    disparity = calculate_disparity_index(
        assignments, student_groups or {}, thresholds.score_scale
    )
    abroca = calculate_abroca(assignments, thresholds.histogram_bins, thresholds.score_scale)
    balance = calculate_distribution_balance(assignments)

    stats = summarize_assignment_scores(assignments)

    logger.info(
        f"Fairness over {len(assignments)} assignments: disparity={disparity:.3f}, "
        f"abroca={abroca:.3f}, balance={balance:.3f}"
    )

    return FairnessMetrics(
        disparity_index=disparity,
        abroca=abroca,
        distribution_balance=balance,
        recommendations=generate_fairness_recommendations(disparity, abroca, balance, thresholds),
        distribution_stats=stats
    )
