"""Fairness evaluation for teacher-student assignments."""

from .fairness import (
    Assignment,
    FairnessThresholds,
    FairnessMetrics,
    AssignmentScoreStats,
    calculate_disparity_index,
    calculate_abroca,
    calculate_distribution_balance,
    calculate_fairness_metrics,
    summarize_assignment_scores,
    generate_fairness_recommendations
)

__all__ = [
    "Assignment",
    "FairnessThresholds",
    "FairnessMetrics",
    "AssignmentScoreStats",
    "calculate_disparity_index",
    "calculate_abroca",
    "calculate_distribution_balance",
    "calculate_fairness_metrics",
    "summarize_assignment_scores",
    "generate_fairness_recommendations"
]
