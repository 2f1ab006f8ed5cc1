from __future__ import annotations

import pytest

from psych_core.persona import DEFAULT_BLURB, axis_letter, derive_type, is_high_pole


def _scores(o=3.0, c=3.0, e=3.0, a=3.0, n=3.0):
    return {"O": o, "C": c, "E": e, "A": a, "N": n}


@pytest.mark.parametrize(
    "score, high",
    [
        (5.0, True),
        (3.75, True),
        (3.74, True),   # middle band, above tie-break
        (3.5, True),
        (3.49, False),  # middle band, below tie-break
        (3.26, False),
        (3.25, False),
        (1.0, False),
    ],
)
def test_three_band_threshold(score, high):
    assert is_high_pole(score) is high


def test_axis_letters():
    assert axis_letter(3.6, "E", "I") == "E"
    assert axis_letter(3.4, "E", "I") == "I"


def test_axis_mapping_and_order():
    res = derive_type(_scores(e=4.0, o=2.0, a=4.0, c=2.0))
    assert res.code == "ESFP"
    res = derive_type(_scores(e=2.0, o=4.0, a=2.0, c=4.0))
    assert res.code == "INTJ"
    assert res.label == "Architect"
    assert res.blurb.startswith("Planner/optimizer")


def test_neutral_scores_hit_confidence_floor():
    res = derive_type(_scores())
    assert res.code == "ISTP"
    assert res.confidence == 0.35


def test_confidence_averages_axis_distances():
    # distances: E 1.0, O 1.0, A 0.5, C 0.5 -> 0.75
    res = derive_type(_scores(e=5.0, o=5.0, a=4.25, c=4.25))
    assert res.code == "ENFJ"
    assert res.confidence == 0.75


def test_confidence_capped_at_one():
    assert derive_type(_scores(o=1.0, c=1.0, e=1.0, a=1.0)).confidence == 1.0
    assert derive_type(_scores(o=5.0, c=5.0, e=5.0, a=5.0)).confidence == 1.0


def test_low_pole_in_middle_band_contributes_distance():
    # E=3.4 -> I, distance (3.5-3.4)/1.5
    res = derive_type(_scores(e=3.4, o=1.0, a=1.0, c=1.0))
    assert res.code == "ISTP"
    assert res.confidence == 1.0
    res = derive_type(_scores(e=3.4, o=3.4, a=3.4, c=3.4))
    assert res.confidence == 0.35


def test_every_code_has_label_and_blurb():
    for e in (2.0, 4.0):
        for o in (2.0, 4.0):
            for a in (2.0, 4.0):
                for c in (2.0, 4.0):
                    res = derive_type(_scores(o=o, c=c, e=e, a=a))
                    assert res.label != "Persona"
                    assert res.blurb != DEFAULT_BLURB
