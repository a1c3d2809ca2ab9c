"""
Command-line entrypoint for compatibility scoring.

Usage:
    python -m compatibility.run --pair pair.json
    python -m compatibility.run --rank candidates.json --top-k 3
    python -m compatibility.run --fairness assignments.json

Input files:
- pair:       {"teacher": {...}, "student": {...}}
- rank:       {"student": {...}, "teachers": [{...}, ...]}
- fairness:   {"assignments": [{"student_id", "teacher_id", "score"}, ...],
               "student_groups": {"<student_id>": "<school>", ...}}

Each subject bundle may carry "saju", "mbti", "name", "learning_style",
"current_load" and "subject_id"; any of them may be missing.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Any, Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def _load_json(filepath: str) -> Dict[str, Any]:
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {filepath}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_settings(config_path: Optional[str]) -> Dict[str, Any]:
    """Load and validate the config file; an absent path means code defaults."""
    from .configs import load_config, validate_config

    if config_path is None:
        return {}

    config = load_config(config_path)
    for issue in validate_config(config):
        logger.warning(f"Config issue: {issue}")

    setup_logging(config.get("global", {}).get("log_level", "INFO"))
    return config


def run_pair(config: Dict[str, Any], pair_path: str) -> Dict[str, Any]:
    """Score one teacher-student pair."""
    from .scoring import create_scorer_from_config

    data = _load_json(pair_path)
    scorer = create_scorer_from_config(config)
    result = scorer.score(data.get("teacher", {}), data.get("student", {}))

    logger.info(f"Overall compatibility: {result.overall_percent}")
    for dimension, value in result.breakdown.to_dict().items():
        logger.info(f"  {dimension}: {value:.4f}")

    return result.to_dict()


def run_rank(config: Dict[str, Any], rank_path: str, top_k: Optional[int]) -> Dict[str, Any]:
    """Rank candidate teachers for one student."""
    from .scoring import create_scorer_from_config

    data = _load_json(rank_path)
    scorer = create_scorer_from_config(config)
    ranking = scorer.rank(data.get("student", {}), data.get("teachers", []), top_k=top_k)

    return {
        "ranking": [
            {"subject_id": subject_id, **score.to_dict()}
            for subject_id, score in ranking
        ]
    }


def run_fairness(config: Dict[str, Any], fairness_path: str) -> Dict[str, Any]:
    """Compute fairness metrics for a list of assignments."""
    from .evaluation import Assignment, FairnessThresholds, calculate_fairness_metrics

    data = _load_json(fairness_path)
    assignments = [
        Assignment(
            student_id=str(a["student_id"]),
            teacher_id=str(a["teacher_id"]),
            score=float(a["score"])
        )
        for a in data.get("assignments", [])
    ]
    metrics = calculate_fairness_metrics(
        assignments,
        student_groups=data.get("student_groups"),
        thresholds=FairnessThresholds.from_config(config)
    )
    logger.info("\n" + metrics.summary())
    return metrics.to_dict()


def main(argv=None):
    """Main entry point for compatibility scoring."""
    parser = argparse.ArgumentParser(
        description="Score teacher-student compatibility"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file (code defaults if omitted)"
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--pair", type=str, help="JSON file with a teacher and a student")
    mode.add_argument("--rank", type=str, help="JSON file with a student and candidate teachers")
    mode.add_argument("--fairness", type=str, help="JSON file with assignments")
    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        help="Number of candidates to keep when ranking"
    )

    args = parser.parse_args(argv)

    try:
        config = _load_settings(args.config)
        if args.pair:
            output = run_pair(config, args.pair)
        elif args.rank:
            output = run_rank(config, args.rank, args.top_k)
        else:
            output = run_fairness(config, args.fairness)
    except Exception as e:
        logger.exception(f"Scoring failed with error: {e}")
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
