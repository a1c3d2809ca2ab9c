"""
Teacher load-balance score.

Teachers with fewer assigned students score higher, which spreads new
assignments across the staff.
"""

from typing import Optional

# (maximum current load, score) checked in order
LOAD_BALANCE_TIERS = [
    (10, 1.0),
    (20, 2 / 3),
    (30, 1 / 3),
]
OVERLOADED_SCORE = 0.0


def calculate_load_balance_score(current_load: Optional[int]) -> float:
    """
    Score a teacher's current load.

    - 0-10 students: 1.0
    - 11-20 students: 2/3
    - 21-30 students: 1/3
    - 31 or more: 0.0

    An unknown load counts as zero students.
    """
    load = current_load or 0
    for max_load, score in LOAD_BALANCE_TIERS:
        if load <= max_load:
            return score
    return OVERLOADED_SCORE
