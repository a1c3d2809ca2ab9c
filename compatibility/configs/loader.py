"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates the scoring weights and fairness thresholds.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ["global", "scoring", "fairness"]

WEIGHT_KEYS = ["mbti", "learning_style", "saju", "name", "load_balance"]


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is empty
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    for section in REQUIRED_SECTIONS:
        if section not in config:
            issues.append(f"Missing required section: {section}")

    # Weights must be non-negative and sum to 1
    weights = get_config_value(config, "scoring.weights")
    if weights is None:
        if "scoring" in config:
            issues.append("Missing scoring.weights")
    else:
        for key, value in weights.items():
            if key not in WEIGHT_KEYS:
                issues.append(f"Unknown scoring weight: {key}")
            elif not isinstance(value, (int, float)) or value < 0:
                issues.append(f"Weight {key} must be a non-negative number, got {value}")
        numeric = [v for v in weights.values() if isinstance(v, (int, float))]
        total = sum(numeric)
        if abs(total - 1.0) > 0.01:
            issues.append(f"Scoring weights don't sum to 1: {total}")

    # Fairness thresholds are fractions
    thresholds = get_config_value(config, "fairness.thresholds", {})
    for key, value in thresholds.items():
        if not isinstance(value, (int, float)) or not 0 <= value <= 1:
            issues.append(f"Fairness threshold {key} must be in [0, 1], got {value}")

    bins = get_config_value(config, "fairness.histogram_bins")
    if bins is not None and (not isinstance(bins, int) or bins < 1):
        issues.append(f"fairness.histogram_bins must be a positive integer, got {bins}")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "scoring.weights.mbti")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value
