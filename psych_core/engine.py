# psych_core/engine.py
"""Single scoring pipeline behind every quiz evaluator.

``score_responses`` is a pure function of its arguments: it never mutates the
incoming :class:`ResponseSet`, never touches I/O beyond the one-time catalog
load, and returns a fresh :class:`ScoreResult` on every call.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Optional

from . import config
from .archetype import classify
from .catalog import Catalog, load_catalog
from .persona import derive_type
from .scoring import aggregate_dimensions, resolve_slider
from .types import ResponseSet, ScoreResult
from .validators import consistency_flags

log = logging.getLogger(__name__)

SCORE_VERSION = config.SCORE_VERSION


def score_responses(responses: ResponseSet, catalog: Optional[Catalog] = None) -> ScoreResult:
    cat = catalog if catalog is not None else load_catalog()
    answers: Mapping[str, Any] = responses.answers or {}

    unknown = [k for k in answers if k not in cat]
    if unknown:
        log.debug("ignoring answers for unknown items: %s", sorted(map(str, unknown)))

    slider, derived = resolve_slider(responses.slider_value, responses.condition_preference)
    scores = aggregate_dimensions(answers, cat, slider)
    flags = consistency_flags(answers, cat)
    persona = derive_type(scores)
    archetype = classify(scores)
    log.debug("scored type=%s archetype=%s flags=%d", persona.code, archetype, len(flags))

    return ScoreResult(
        scores=scores,
        inconsistencies=flags,
        type=persona,
        archetype=archetype,
        slider_value=slider,
        condition_preference=(
            str(responses.condition_preference) if responses.condition_preference else None
        ),
        derived_slider=derived,
        version=SCORE_VERSION,
    )


def _obj(v: Any) -> Dict[str, Any]:
    return v if isinstance(v, dict) else {}


def _first_present(*values: Any) -> Any:
    for v in values:
        if v is not None:
            return v
    return None


def parse_payload(body: Mapping[str, Any]) -> ResponseSet:
    """
    Reads the quiz payload the way the web client sends it. Answers, the
    condition preference and the style-vs-price slider may live at the top
    level or inside the intake ``brief``; the most explicit location wins.
    """
    body = _obj(body)
    brief = _obj(body.get("brief"))

    answers = next(
        (
            a
            for a in (
                body.get("answers"),
                brief.get("answers"),
                _obj(brief.get("psych")).get("answers"),
            )
            if isinstance(a, dict)
        ),
        {},
    )
    condition = _first_present(
        body.get("conditionPreference"),
        _obj(brief.get("house")).get("conditionPreference"),
        brief.get("conditionPreference"),
    )
    slider = _first_present(
        body.get("styleVsPriceSlider"),
        body.get("sliderValue"),
        _obj(brief.get("visual")).get("styleVsPriceSlider"),
        _obj(brief.get("house")).get("styleVsPriceSlider"),
        answers.get("V1"),
    )
    return ResponseSet(
        answers=dict(answers),
        slider_value=slider,
        condition_preference=str(condition) if condition else None,
    )


def score_payload(body: Mapping[str, Any], catalog: Optional[Catalog] = None) -> Dict[str, Any]:
    return score_responses(parse_payload(body), catalog=catalog).to_dict()
