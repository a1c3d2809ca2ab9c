"""
Smoke test for the compatibility scoring API.

This script validates that:
1. Each similarity function returns values in [0, 1]
2. Missing analyses fall back instead of raising
3. Ranking orders candidates by overall score
4. Fairness metrics run on a small assignment set

Usage:
    python scripts/smoke_test.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_mock_teacher(subject_id: str, mbti: dict, load: int) -> dict:
    """Create a mock teacher analysis bundle."""
    return {
        "subject_id": subject_id,
        "mbti": mbti,
        "saju": {"elements": {"목": 2, "화": 1, "토": 2, "금": 1, "수": 2}},
        "name": {"grids": {"won": 15, "hyung": 23, "yi": 31, "jeong": 38}},
        "current_load": load,
    }


def run_smoke_test() -> bool:
    """Run smoke tests on the public API."""
    from compatibility import calculate_compatibility_score, CompatibilityScorer
    from compatibility.configs import load_config, validate_config
    from compatibility.evaluation import Assignment, calculate_fairness_metrics
    from compatibility.scoring import create_scorer_from_config

    logger.info("=" * 60)
    logger.info("SMOKE TEST: Compatibility Scoring")
    logger.info("=" * 60)

    ok = True

    config = load_config(str(project_root / "configs" / "config.yaml"))
    issues = validate_config(config)
    if issues:
        logger.error(f"  Config issues: {issues}")
        ok = False

    student = {
        "subject_id": "student_1",
        "mbti": {"E": 70, "S": 40, "T": 55, "J": 60},
        "saju": {"elements": {"목": 1, "화": 3, "토": 1, "금": 0, "수": 2}},
        "name": {"grids": {"won": 12, "hyung": 25, "yi": 29, "jeong": 41}},
    }

    # =========================================================================
    # TEST 1: Single pair
    # =========================================================================
    logger.info("\nTEST 1: Single pair")
    teacher = create_mock_teacher("teacher_a", {"E": 65, "S": 45, "T": 50, "J": 55}, load=8)
    result = calculate_compatibility_score(teacher, student)
    logger.info(f"  Overall: {result.overall_percent}")
    for dimension, value in result.breakdown.to_dict().items():
        logger.info(f"  {dimension}: {value:.4f}")
        if not 0 <= value <= 1:
            logger.error(f"  {dimension} out of range")
            ok = False

    # =========================================================================
    # TEST 2: Empty bundles
    # =========================================================================
    logger.info("\nTEST 2: Empty bundles")
    empty = calculate_compatibility_score({}, {})
    logger.info(f"  Overall with no data: {empty.overall:.4f}")
    logger.info(f"  Breakdown: {empty.breakdown.to_dict()}")

    # =========================================================================
    # TEST 3: Ranking
    # =========================================================================
    logger.info("\nTEST 3: Ranking")
    scorer = create_scorer_from_config(config)
    teachers = [
        create_mock_teacher("teacher_a", {"E": 65, "S": 45, "T": 50, "J": 55}, load=8),
        create_mock_teacher("teacher_b", {"E": 10, "S": 90, "T": 20, "J": 5}, load=25),
        create_mock_teacher("teacher_c", {"E": 70, "S": 40, "T": 55, "J": 60}, load=15),
    ]
    ranking = scorer.rank(student, teachers)
    for subject_id, score in ranking:
        logger.info(f"  {subject_id}: {score.overall_percent}")
    overalls = [score.overall for _, score in ranking]
    if overalls != sorted(overalls, reverse=True):
        logger.error("  Ranking is not sorted")
        ok = False

    # =========================================================================
    # TEST 4: Fairness
    # =========================================================================
    logger.info("\nTEST 4: Fairness metrics")
    assignments = [
        Assignment(student_id=f"s{i}", teacher_id=subject_id, score=score.overall_percent)
        for i, (subject_id, score) in enumerate(ranking)
    ]
    metrics = calculate_fairness_metrics(assignments)
    logger.info("\n" + metrics.summary())

    logger.info("\n" + "=" * 60)
    logger.info("SMOKE TEST PASSED" if ok else "SMOKE TEST FAILED")
    logger.info("=" * 60)
    return ok


if __name__ == "__main__":
    sys.exit(0 if run_smoke_test() else 1)
