"""
Vector helpers shared by the similarity functions.
"""

from typing import Optional, Sequence

import numpy as np


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> Optional[float]:
    """
    Compute cosine similarity between two equal-length vectors.

    Args:
        a: First vector
        b: Second vector

    Returns:
        Cosine similarity, or None if either vector has zero magnitude
    """
    vec_a = np.asarray(a, dtype=float)
    vec_b = np.asarray(b, dtype=float)

    norm_a = np.linalg.norm(vec_a)
    norm_b = np.linalg.norm(vec_b)

    # Avoid division by zero
    if norm_a == 0 or norm_b == 0:
        return None

    return float(np.dot(vec_a, vec_b) / (norm_a * norm_b))


def clamp_unit(value: float) -> float:
    """Clamp a score to [0, 1]."""
    return float(np.clip(value, 0.0, 1.0))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(np.floor(value + 0.5))
