"""MBTI and VARK questionnaire scoring."""

from .schema import MbtiQuestion, VarkQuestion, MbtiResult, VarkResult
from .scoring import score_mbti, score_vark, determine_vark_type, calculate_progress

__all__ = [
    "MbtiQuestion",
    "VarkQuestion",
    "MbtiResult",
    "VarkResult",
    "score_mbti",
    "score_vark",
    "determine_vark_type",
    "calculate_progress",
]
