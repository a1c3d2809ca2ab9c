"""
Value objects for compatibility scoring.

Defines the analysis records consumed by the similarity functions
(element distributions, MBTI percentages, name-numerology grids,
learning-style scores) and the results produced by the aggregator.

Records usually arrive as plain dictionaries from the analysis storage
layer, so every type offers ``from_dict`` and ``to_dict``.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List, Mapping, Tuple

# Fixed element order for Saju vectors: wood, fire, earth, metal, water
ELEMENT_ORDER: Tuple[str, ...] = ("wood", "fire", "earth", "metal", "water")

# Stored Saju results use Korean element labels
KOREAN_ELEMENT_LABELS: Dict[str, str] = {
    "목": "wood",
    "화": "fire",
    "토": "earth",
    "금": "metal",
    "수": "water",
}

# Dominant style tie-break priority follows this order
LEARNING_STYLE_ORDER: Tuple[str, ...] = ("visual", "auditory", "read_write", "kinesthetic")

_LEARNING_STYLE_ALIASES: Dict[str, str] = {
    "readWrite": "read_write",
    "reading": "read_write",
    "read": "read_write",
}


@dataclass(frozen=True)
class ElementDistribution:
    """
    Five-element (wood/fire/earth/metal/water) distribution from a Saju analysis.

    All weights are non-negative and may all be zero.
    """
    wood: float = 0.0
    fire: float = 0.0
    earth: float = 0.0
    metal: float = 0.0
    water: float = 0.0

    def to_vector(self) -> List[float]:
        """Return weights in ELEMENT_ORDER."""
        return [float(getattr(self, label)) for label in ELEMENT_ORDER]

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ElementDistribution":
        """
        Create from a mapping keyed by English or Korean element labels.

        Missing labels default to 0, unknown keys are ignored.
        """
        values = {}
        for key, value in data.items():
            label = KOREAN_ELEMENT_LABELS.get(key, key)
            if label in ELEMENT_ORDER and value is not None:
                values[label] = float(value)
        return cls(**values)


@dataclass(frozen=True)
class MbtiPercentages:
    """
    MBTI pole strengths as percentages in [0, 100].

    Only one pole per axis is stored; the opposite pole is ``100 - value``.
    """
    E: float
    S: float
    T: float
    J: float

    @property
    def I(self) -> float:
        return 100 - self.E

    @property
    def N(self) -> float:
        return 100 - self.S

    @property
    def F(self) -> float:
        return 100 - self.T

    @property
    def P(self) -> float:
        return 100 - self.J

    @property
    def mbti_type(self) -> str:
        """Four-letter type; a 50/50 split resolves to the stored pole."""
        return "".join([
            "E" if self.E >= 50 else "I",
            "S" if self.S >= 50 else "N",
            "T" if self.T >= 50 else "F",
            "J" if self.J >= 50 else "P",
        ])

    def to_vector(self) -> List[float]:
        return [float(self.E), float(self.S), float(self.T), float(self.J)]

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MbtiPercentages":
        """Create from a 4-key or 8-key mapping; only E/S/T/J are read."""
        return cls(
            E=float(data["E"]),
            S=float(data["S"]),
            T=float(data["T"]),
            J=float(data["J"]),
        )


@dataclass(frozen=True)
class NameNumerologyGrids:
    """Four stroke-count grids (won/hyung/yi/jeong), conventionally 1-81."""
    won: int
    hyung: int
    yi: int
    jeong: int

    def to_vector(self) -> List[int]:
        return [self.won, self.hyung, self.yi, self.jeong]

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NameNumerologyGrids":
        return cls(
            won=int(data["won"]),
            hyung=int(data["hyung"]),
            yi=int(data["yi"]),
            jeong=int(data["jeong"]),
        )


@dataclass(frozen=True)
class NameNumerologyResult:
    """Stored name analysis; ``grids`` is absent for incomplete analyses."""
    grids: Optional[NameNumerologyGrids] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"grids": self.grids.to_dict() if self.grids else None}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NameNumerologyResult":
        """Create from ``{"grids": {...}}`` or from a bare grids mapping."""
        if "grids" not in data and "won" in data:
            return cls(grids=NameNumerologyGrids.from_dict(data))
        grids = data.get("grids")
        if grids is None or isinstance(grids, NameNumerologyGrids):
            return cls(grids=grids)
        return cls(grids=NameNumerologyGrids.from_dict(grids))


@dataclass(frozen=True)
class LearningStyleScores:
    """VARK learning-style weights, all non-negative."""
    visual: float = 0.0
    auditory: float = 0.0
    read_write: float = 0.0
    kinesthetic: float = 0.0

    def to_vector(self) -> List[float]:
        return [float(getattr(self, style)) for style in LEARNING_STYLE_ORDER]

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LearningStyleScores":
        """Create from a mapping; accepts ``readWrite``/``reading`` aliases."""
        values = {}
        for key, value in data.items():
            style = _LEARNING_STYLE_ALIASES.get(key, key)
            if style in LEARNING_STYLE_ORDER and value is not None:
                values[style] = float(value)
        return cls(**values)


@dataclass
class SubjectAnalysis:
    """
    Analysis bundle for one subject (teacher or student).

    Any analysis may be missing. ``current_load`` is the number of students
    currently assigned and only makes sense for teachers.

    Attributes:
        saju: Element distribution from the Saju analysis
        mbti: MBTI percentages
        name: Name numerology result
        learning_style: Explicit VARK scores (derived from MBTI when absent)
        current_load: Number of students currently assigned
        subject_id: Optional identifier of the subject
    """
    saju: Optional[ElementDistribution] = None
    mbti: Optional[MbtiPercentages] = None
    name: Optional[NameNumerologyResult] = None
    learning_style: Optional[LearningStyleScores] = None
    current_load: Optional[int] = None
    subject_id: Optional[str] = None

    def __post_init__(self):
        """Coerce nested mappings into value objects."""
        if isinstance(self.saju, Mapping):
            elements = self.saju.get("elements", self.saju)
            self.saju = None if elements is None else ElementDistribution.from_dict(elements)
        if isinstance(self.mbti, Mapping):
            percentages = self.mbti.get("percentages", self.mbti)
            self.mbti = None if percentages is None else MbtiPercentages.from_dict(percentages)
        if isinstance(self.name, Mapping):
            self.name = NameNumerologyResult.from_dict(self.name)
        if isinstance(self.learning_style, Mapping):
            self.learning_style = LearningStyleScores.from_dict(self.learning_style)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subject_id": self.subject_id,
            "saju": self.saju.to_dict() if self.saju else None,
            "mbti": self.mbti.to_dict() if self.mbti else None,
            "name": self.name.to_dict() if self.name else None,
            "learning_style": self.learning_style.to_dict() if self.learning_style else None,
            "current_load": self.current_load,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SubjectAnalysis":
        return cls(
            saju=data.get("saju"),
            mbti=data.get("mbti"),
            name=data.get("name"),
            learning_style=data.get("learning_style", data.get("learningStyle")),
            current_load=data.get("current_load", data.get("currentLoad")),
            subject_id=data.get("subject_id", data.get("id")),
        )


@dataclass(frozen=True)
class CompatibilityBreakdown:
    """Per-dimension similarity, each in [0, 1] with fallbacks applied."""
    saju: float
    mbti: float
    name: float
    learning_style: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass
class CompatibilityScore:
    """
    Result of compatibility scoring.

    Attributes:
        overall: Weighted combination of the breakdown in [0, 1]
        breakdown: Per-dimension similarities
        load_balance: Teacher load score in [0, 1]; an unknown load scores 1.0
        reasons: Human-readable recommendation reasons
    """
    overall: float
    breakdown: CompatibilityBreakdown
    load_balance: float = 1.0
    reasons: List[str] = field(default_factory=list)

    @property
    def overall_percent(self) -> float:
        """Overall score on the 0-100 display scale."""
        return round(self.overall * 100, 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall": self.overall,
            "overall_percent": self.overall_percent,
            "breakdown": self.breakdown.to_dict(),
            "load_balance": self.load_balance,
            "reasons": list(self.reasons),
        }
