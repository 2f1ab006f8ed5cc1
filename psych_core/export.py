"""Helpers to export scored quiz results in JSON/CSV formats."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple
import csv
import io

from .types import ScoreResult

_FIELDS: tuple[str, ...] = (
    "respondent",
    "O",
    "C",
    "E",
    "A",
    "N",
    "type",
    "confidence",
    "archetype",
    "inconsistencies",
)


def _row(respondent: str, result: ScoreResult) -> Dict[str, Any]:
    out: Dict[str, Any] = {"respondent": respondent}
    for dim in ("O", "C", "E", "A", "N"):
        out[dim] = f"{float(result.scores.get(dim, 0.0)):.2f}"
    out["type"] = result.type.code
    out["confidence"] = f"{result.type.confidence:.2f}"
    out["archetype"] = result.archetype
    out["inconsistencies"] = ";".join(result.inconsistencies)
    return out


def to_json(result: ScoreResult) -> Dict[str, Any]:
    """Return a JSON-safe payload for one result."""

    return {"ok": True, **result.to_dict()}


def to_csv(results: Iterable[Tuple[str, ScoreResult]]) -> str:
    """Render (respondent, result) pairs as CSV with a fixed header."""

    rows: List[Dict[str, Any]] = [_row(str(rid), res) for rid, res in results]
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=_FIELDS)
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return buf.getvalue()


__all__ = ["to_json", "to_csv"]
