from __future__ import annotations
import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


SCORE_VERSION: str = "aiou.score.v1.1"

DIMENSIONS: tuple[str, ...] = ("O", "C", "E", "A", "N")
ITEM_KINDS: tuple[str, ...] = ("scale", "visual")

ANSWER_MIN: int = -5
ANSWER_MAX: int = 5

# -5..+5 onto 1..5
NORMALIZE_STEP: float = 0.4
SCORE_MIN: float = 1.0
SCORE_MAX: float = 5.0
NEUTRAL_SCORE: float = 3.0

SLIDER_DIVISOR: float = 12.5
CONDITION_SLIDER: dict[str, int] = {
    "new": 4,
    "light": 1,
    "value_add": -3,
    "value-add": -3,
    "valueadd": -3,
}

CONSISTENCY_GAP: int = 6

# (high cut, low cut, tie-break cut) shared by every type axis
TYPE_BANDS: tuple[float, float, float] = (3.75, 3.25, 3.5)
TYPE_MIDPOINT: float = 3.5
TYPE_SPAN: float = 1.5
CONFIDENCE_FLOOR: float = 0.35
CONFIDENCE_CEIL: float = 1.0

ARCHETYPE_HI: float = 4.0
ARCHETYPE_LO: float = 2.5
LOW_RISK_CUTOFF: float = 3.3

CATALOG_MIN_ITEMS_PER_DIM: int = 2

CLAMP_ANSWERS: bool = False
CATALOG_PATH: str | None = None
LOG_LEVEL: str = "INFO"
ALLOWED_ORIGINS: tuple[str, ...] = ("*",)

# // env overrides for staging/ops; defaults reproduce the quiz client exactly.
CLAMP_ANSWERS = _env_bool("PSYCH_CLAMP_ANSWERS", CLAMP_ANSWERS)
CATALOG_PATH = os.getenv("PSYCH_CATALOG_PATH") or None
CATALOG_MIN_ITEMS_PER_DIM = _env_int("PSYCH_CATALOG_MIN_ITEMS", CATALOG_MIN_ITEMS_PER_DIM)
LOG_LEVEL = (os.getenv("PSYCH_LOG_LEVEL") or LOG_LEVEL).upper()


def allowed_origins() -> list[str]:
    raw = os.getenv("PSYCH_ALLOWED_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or list(ALLOWED_ORIGINS)
