from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional

ItemKind = Literal["scale", "visual"]


@dataclass(frozen=True)
class Item:
    id: str; dimension: str
    reverse: bool = False
    control_pair: Optional[str] = None
    kind: ItemKind = "scale"
    text: str = ""


@dataclass(frozen=True)
class ResponseSet:
    answers: Mapping[str, Any] = field(default_factory=dict)
    slider_value: Any = None
    condition_preference: Optional[str] = None


@dataclass(frozen=True)
class TypeResult:
    code: str
    confidence: float
    label: str = "Persona"
    blurb: str = ""


@dataclass
class ScoreResult:
    scores: Dict[str, float]
    inconsistencies: List[str]
    type: TypeResult
    archetype: str
    slider_value: float = 0.0
    condition_preference: Optional[str] = None
    derived_slider: bool = False
    version: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "scores": dict(self.scores),
            "inconsistencies": list(self.inconsistencies),
            "type": {"code": self.type.code, "confidence": self.type.confidence},
            "mbti": {
                "type": self.type.code,
                "confidence": self.type.confidence,
                "label": self.type.label,
                "blurb": self.type.blurb,
            },
            "archetype": self.archetype,
            "debug": {
                "styleVsPriceSlider": self.slider_value,
                "conditionPreference": self.condition_preference,
                "derivedStyleFromCondition": self.derived_slider,
            },
        }
