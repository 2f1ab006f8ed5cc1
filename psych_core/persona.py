# psych_core/persona.py
from __future__ import annotations
from typing import Dict, List, Mapping, Tuple

from . import config
from .scoring import round2
from .types import TypeResult

# (dimension, high-pole letter, low-pole letter) in code order
AXES: Tuple[Tuple[str, str, str], ...] = (
    ("E", "E", "I"),
    ("O", "N", "S"),
    ("A", "F", "T"),
    ("C", "J", "P"),
)

TYPE_LABELS: Dict[str, str] = {
    "ISTJ": "Inspector",
    "ISFJ": "Protector",
    "INFJ": "Sage",
    "INTJ": "Architect",
    "ISTP": "Crafter",
    "ISFP": "Artist",
    "INFP": "Idealist",
    "INTP": "Analyst",
    "ESTP": "Promoter",
    "ESFP": "Performer",
    "ENFP": "Champion",
    "ENTP": "Debater",
    "ESTJ": "Executive",
    "ESFJ": "Consul",
    "ENFJ": "Protagonist",
    "ENTJ": "Commander",
}

BUYER_GUIDE: Dict[str, str] = {
    "ISTJ": "Stable, detail-first. Prefers proven neighborhoods, low-variance costs, and strong inspection records.",
    "ISFJ": "Practical caretaker. Values safety, schools, and quiet streets; favors move-in-ready over projects.",
    "INFJ": "Purpose-driven. Wants harmony and meaningful space; calm areas and quality renovations matter.",
    "INTJ": "Planner/optimizer. Seeks value efficiency and long-term upside; ignores fluffy upgrades.",
    "ISTP": "Hands-on problem-solver. Open to light projects if priced right; needs clear scope/timeline.",
    "ISFP": "Aesthetic + comfort. Drawn to warm finishes, natural light, and cozy outdoor spots.",
    "INFP": "Idealistic. Wants character and story; needs guardrails so budget doesn't drift.",
    "INTP": "Analytical. Structure/systems/future flexibility > staging glam.",
    "ESTP": "Action-oriented. Loves lively areas and entertainment spaces; avoid payment creep.",
    "ESFP": "Experience-first. Open layouts and social hubs; size payment first, then pick the fun.",
    "ENFP": "Vision + people. Creative layouts, natural light; watch impulsive upgrades.",
    "ENTP": "Options hunter. Wants flexibility/ADU potential; negotiate hard.",
    "ESTJ": "Structured operator. Predictability, commute efficiency, and low-maintenance wins.",
    "ESFJ": "Community anchor. Schools/parks close; turnkey > fixer to keep harmony.",
    "ENFJ": "Connector. Hosting flow matters; choose move-in-ready to keep momentum.",
    "ENTJ": "Decisive strategist. Location + resale math; newish or quality reno to avoid downtime.",
}

DEFAULT_LABEL = "Persona"
DEFAULT_BLURB = "Personality informs your tradeoffs; we'll size budget first, then match how you live."


def is_high_pole(score: float) -> bool:
    high, low, tie = config.TYPE_BANDS
    # ordered bands, first hit decides the pole
    bands = (
        (score >= high, True),
        (score <= low, False),
        (score >= tie, True),
    )
    for hit, pole in bands:
        if hit:
            return pole
    return False


def axis_letter(score: float, high_letter: str, low_letter: str) -> str:
    return high_letter if is_high_pole(score) else low_letter


def axis_distance(score: float, high: bool) -> float:
    mid, span = config.TYPE_MIDPOINT, config.TYPE_SPAN
    gap = (score - mid) if high else (mid - score)
    return max(0.0, gap) / span


def derive_type(scores: Mapping[str, float]) -> TypeResult:
    letters: List[str] = []
    parts: List[float] = []
    for dim, hi_letter, lo_letter in AXES:
        s = float(scores[dim])
        high = is_high_pole(s)
        letters.append(hi_letter if high else lo_letter)
        parts.append(axis_distance(s, high))
    code = "".join(letters)
    confidence = max(config.CONFIDENCE_FLOOR, round2(sum(parts) / len(parts)))
    confidence = min(config.CONFIDENCE_CEIL, confidence)
    return TypeResult(
        code=code,
        confidence=confidence,
        label=TYPE_LABELS.get(code, DEFAULT_LABEL),
        blurb=BUYER_GUIDE.get(code, DEFAULT_BLURB),
    )
