from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Optional, Tuple

from . import config
from .catalog import Catalog
from .types import Item


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def round2(x: float) -> float:
    # half-up on the exact binary value, same as the quiz client's toFixed(2)
    if not math.isfinite(x) or abs(x) >= 2 ** 52:
        # already integral (or not a number), nothing to round
        return float(x)
    return float(Decimal(x).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def coerce_answer(value: Any) -> float:
    """Raw answer as a number; anything missing or malformed is neutral 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        v = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(v):
        return 0.0
    if config.CLAMP_ANSWERS:
        v = _clamp(v, config.ANSWER_MIN, config.ANSWER_MAX)
    return v


def keyed_answer(item: Item, raw: Any) -> float:
    v = coerce_answer(raw)
    return -v if item.reverse else v


def normalize_response(raw: Any, item: Item) -> float:
    """Map a -5..+5 answer onto the 1..5 trait scale (reverse items flipped first)."""
    v = keyed_answer(item, raw)
    return ((v - config.ANSWER_MIN) * config.NORMALIZE_STEP) + 1


def condition_to_slider(condition_preference: Optional[str]) -> int:
    c = str(condition_preference or "").strip().lower()
    return config.CONDITION_SLIDER.get(c, 0)


def resolve_slider(slider_value: Any, condition_preference: Optional[str]) -> Tuple[float, bool]:
    """
    Returns (slider, derived_from_condition).
    An explicit numeric slider wins; a non-numeric one falls back to the
    condition preference mapping.
    """
    if slider_value is None:
        return float(condition_to_slider(condition_preference)), True
    if isinstance(slider_value, str) and not slider_value.strip():
        return 0.0, False
    try:
        v = float(slider_value) if not isinstance(slider_value, bool) else math.nan
    except (TypeError, ValueError, OverflowError):
        v = math.nan
    if not math.isfinite(v):
        return float(condition_to_slider(condition_preference)), False
    return v, False


def dimension_contributions(answers: Mapping[str, Any], catalog: Catalog) -> Dict[str, List[float]]:
    dims: Dict[str, List[float]] = {d: [] for d in config.DIMENSIONS}
    for it in catalog.scale_items():
        dims[it.dimension].append(normalize_response(answers.get(it.id), it))
    return dims


def dimension_mean(vals: List[float]) -> float:
    if not vals:
        return config.NEUTRAL_SCORE
    m = sum(vals) / len(vals)
    # huge answers can overflow the sum; saturate to the nearest scale end
    if math.isnan(m):
        return config.NEUTRAL_SCORE
    if math.isinf(m):
        return config.SCORE_MAX if m > 0 else config.SCORE_MIN
    return round2(m)


def aggregate_dimensions(
    answers: Mapping[str, Any],
    catalog: Catalog,
    slider_value: float = 0.0,
) -> Dict[str, float]:
    dims = dimension_contributions(answers, catalog)
    scores: Dict[str, float] = {d: dimension_mean(dims[d]) for d in config.DIMENSIONS}
    # visual slider only reaches Openness through this adjustment
    adjusted = scores["O"] + float(slider_value or 0.0) / config.SLIDER_DIVISOR
    scores["O"] = round2(_clamp(adjusted, config.SCORE_MIN, config.SCORE_MAX))
    return scores
