"""
Weights for combining per-dimension similarities.

The default weighting is a product policy, not a derived quantity:

    overall = (0.25 * mbti + 0.25 * learning_style + 0.20 * saju
               + 0.15 * name + 0.15 * load_balance) / total_weight

The load-balance term only takes part when the teacher's current load is
known, so the total weight is computed over the terms actually used.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Any
import json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringWeights:
    """
    Relative weight of each compatibility dimension.

    Attributes:
        mbti: Weight of MBTI similarity
        learning_style: Weight of learning-style similarity
        saju: Weight of Saju element similarity
        name: Weight of name-numerology similarity
        load_balance: Weight of the teacher load-balance score
    """
    mbti: float = 0.25
    learning_style: float = 0.25
    saju: float = 0.20
    name: float = 0.15
    load_balance: float = 0.15

    def validate(self) -> None:
        """Validate weight values."""
        for key, value in self.to_dict().items():
            if value < 0:
                raise ValueError(f"Weight '{key}' must be non-negative, got {value}")
        if self.dimension_total() == 0:
            raise ValueError("At least one dimension weight must be positive")

    def dimension_total(self) -> float:
        """Sum of the four similarity weights (load balance excluded)."""
        return self.mbti + self.learning_style + self.saju + self.name

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ScoringWeights":
        """Create from dictionary; missing keys keep their defaults."""
        known = {k: float(v) for k, v in d.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ScoringWeights":
        """Create from main config dictionary."""
        return cls.from_dict(config.get("scoring", {}).get("weights", {}))

    def save(self, filepath: str) -> None:
        """Save to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved scoring weights to {filepath}")

    @classmethod
    def load(cls, filepath: str) -> "ScoringWeights":
        """Load from JSON file."""
        with open(filepath, "r") as f:
            d = json.load(f)
        return cls.from_dict(d)


DEFAULT_WEIGHTS = ScoringWeights()
