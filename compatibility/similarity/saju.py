"""
Saju (five-element) compatibility.

Compares two element distributions by the cosine of their
(wood, fire, earth, metal, water) vectors. Element weights are
non-negative, so the cosine already lies in [0, 1]; the clamp only
guards against float rounding.
"""

import logging
from typing import Any, Mapping, Optional, Union

from ..models.schema import ElementDistribution
from .vectors import cosine_similarity, clamp_unit

logger = logging.getLogger(__name__)

# Score when either subject has no Saju analysis. Differs from the MBTI
# fallback (0.5); matching results depend on it.
SAJU_MISSING_SCORE = 0.0

# Score when either distribution is all zeros
SAJU_ZERO_VECTOR_SCORE = 0.0

SajuInput = Union[ElementDistribution, Mapping[str, Any], None]


def to_element_distribution(value: SajuInput) -> Optional[ElementDistribution]:
    """
    Coerce a stored Saju record into an ElementDistribution.

    Accepts an ElementDistribution, a mapping of element labels, or a full
    Saju result mapping carrying an ``elements`` key.
    """
    if value is None or isinstance(value, ElementDistribution):
        return value
    if "elements" in value:
        elements = value["elements"]
        return None if elements is None else ElementDistribution.from_dict(elements)
    return ElementDistribution.from_dict(value)


def calculate_saju_compatibility(a: SajuInput, b: SajuInput) -> float:
    """
    Compute five-element similarity between two subjects.

    Args:
        a: Element distribution of the first subject (may be None)
        b: Element distribution of the second subject (may be None)

    Returns:
        Similarity in [0, 1]; 0 when either side is missing or all-zero
    """
    dist_a = to_element_distribution(a)
    dist_b = to_element_distribution(b)
    if dist_a is None or dist_b is None:
        return SAJU_MISSING_SCORE

    similarity = cosine_similarity(dist_a.to_vector(), dist_b.to_vector())
    if similarity is None:
        logger.debug("Zero-magnitude element distribution, returning fallback")
        return SAJU_ZERO_VECTOR_SCORE

    return clamp_unit(similarity)
