from __future__ import annotations
from typing import Callable, List, Mapping, Tuple

from . import config

Scores = Mapping[str, float]


def hi(x: float) -> bool:
    return x >= config.ARCHETYPE_HI


def lo(x: float) -> bool:
    return x <= config.ARCHETYPE_LO


DEFAULT_ARCHETYPE = "Balanced Explorer"

# First match wins; rules overlap, so order matters.
RULES: List[Tuple[str, Callable[[Scores], bool]]] = [
    ("Visionary Host", lambda s: hi(s["O"]) and hi(s["E"])),
    ("Steady Planner", lambda s: hi(s["C"]) and not hi(s["O"]) and not hi(s["E"])),
    ("Risk-Guarded Nest-Builder", lambda s: hi(s["N"]) and lo(s["E"])),
    ("Family-First Optimizer", lambda s: hi(s["A"]) and hi(s["C"])),
    ("Design-Forward Adventurer", lambda s: hi(s["O"]) and s["N"] < config.LOW_RISK_CUTOFF),
]

ARCHETYPES: Tuple[str, ...] = tuple(label for label, _ in RULES) + (DEFAULT_ARCHETYPE,)


def classify(scores: Scores) -> str:
    for label, rule in RULES:
        if rule(scores):
            return label
    return DEFAULT_ARCHETYPE
