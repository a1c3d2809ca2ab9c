"""
Questionnaire schema for MBTI and VARK scoring.

Questions are answered on a Likert scale; responses are keyed by the
question id (as string or int).
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Mapping

from ..models.schema import MbtiPercentages, LearningStyleScores

MBTI_POLES = ["e", "i", "s", "n", "t", "f", "j", "p"]

VARK_TYPES = ["v", "a", "r", "k"]


@dataclass(frozen=True)
class MbtiQuestion:
    """
    One MBTI questionnaire item.

    Attributes:
        id: Question id
        dimension: Axis label (e.g., "EI")
        pole: Pole the answer adds to (one of e/i/s/n/t/f/j/p, any case)
        text: Question text
    """
    id: int
    dimension: str
    pole: str
    text: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MbtiQuestion":
        return cls(
            id=int(data["id"]),
            dimension=data.get("dimension", ""),
            pole=data["pole"],
            text=data.get("text", "")
        )


@dataclass(frozen=True)
class VarkQuestion:
    """One VARK questionnaire item; ``type`` is one of v/a/r/k (any case)."""
    id: int
    type: str
    text: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VarkQuestion":
        return cls(id=int(data["id"]), type=data["type"], text=data.get("text", ""))


@dataclass
class MbtiResult:
    """
    Scored MBTI questionnaire.

    Attributes:
        scores: Raw response sums per pole (e, i, s, n, t, f, j, p)
        mbti_type: Letters for every answered axis
        percentages: Pole percentages (E, I, S, N, T, F, J, P); 0 for unanswered axes
    """
    scores: Dict[str, float]
    mbti_type: str
    percentages: Dict[str, int] = field(default_factory=dict)

    def to_percentages(self) -> MbtiPercentages:
        """Stored-pole percentages for compatibility scoring."""
        return MbtiPercentages(
            E=self.percentages["E"],
            S=self.percentages["S"],
            T=self.percentages["T"],
            J=self.percentages["J"]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scores": dict(self.scores),
            "mbti_type": self.mbti_type,
            "percentages": dict(self.percentages)
        }


@dataclass
class VarkResult:
    """
    Scored VARK questionnaire.

    Attributes:
        scores: Raw response sums per type (v, a, r, k)
        vark_type: Dominant type letters, or "VARK" for multimodal profiles
        percentages: Type percentages (V, A, R, K) summing to 100
    """
    scores: Dict[str, float]
    vark_type: str
    percentages: Dict[str, int] = field(default_factory=dict)

    def to_learning_style_scores(self) -> LearningStyleScores:
        return LearningStyleScores(
            visual=self.percentages["V"],
            auditory=self.percentages["A"],
            read_write=self.percentages["R"],
            kinesthetic=self.percentages["K"]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scores": dict(self.scores),
            "vark_type": self.vark_type,
            "percentages": dict(self.percentages)
        }
