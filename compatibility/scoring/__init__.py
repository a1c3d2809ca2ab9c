"""Aggregation of per-dimension similarities into compatibility scores."""

from .weights import ScoringWeights, DEFAULT_WEIGHTS
from .load_balance import calculate_load_balance_score
from .aggregator import (
    calculate_compatibility_score,
    calculate_breakdown,
    generate_reasons,
    CompatibilityScorer,
    create_scorer_from_config
)

__all__ = [
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
    "calculate_load_balance_score",
    "calculate_compatibility_score",
    "calculate_breakdown",
    "generate_reasons",
    "CompatibilityScorer",
    "create_scorer_from_config"
]
