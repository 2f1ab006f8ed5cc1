from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from . import config
from .catalog import CatalogError, load_catalog
from .types import Item

log = logging.getLogger(__name__)


def _blank_dimension() -> dict[str, int]:
    return {"scale": 0, "reverse": 0, "control_pairs": 0}


def audit_items(items: Iterable[Item]) -> dict[str, object]:
    coverage: dict[str, dict[str, int]] = {dim: _blank_dimension() for dim in config.DIMENSIONS}
    totals = {"scale": 0, "visual": 0, "control_pairs": 0}

    for item in items:
        if item.kind == "visual":
            totals["visual"] += 1
            continue
        data = coverage.setdefault(item.dimension, _blank_dimension())
        data["scale"] += 1
        totals["scale"] += 1
        if item.reverse:
            data["reverse"] += 1
        if item.control_pair:
            # each pair has two members
            data["control_pairs"] += 1
            totals["control_pairs"] += 1

    for data in coverage.values():
        data["control_pairs"] //= 2
    totals["control_pairs"] //= 2

    warnings: list[str] = []
    for dim, data in coverage.items():
        if data["scale"] == 0:
            warnings.append(f"{dim} has no scale items (scores default to {config.NEUTRAL_SCORE})")
            continue
        if data["scale"] < config.CATALOG_MIN_ITEMS_PER_DIM:
            warnings.append(
                f"{dim} has {data['scale']} scale items (<{config.CATALOG_MIN_ITEMS_PER_DIM})"
            )
        if data["reverse"] == 0:
            warnings.append(f"{dim} has no reverse-keyed item")
    if totals["visual"] == 0:
        warnings.append("catalog has no visual slider item")

    return {"coverage": coverage, "warnings": warnings, "totals": totals}


def print_report(summary: dict[str, object]) -> None:
    coverage: dict[str, dict[str, int]] = summary["coverage"]  # type: ignore[assignment]
    print("=== Catalog Coverage ===")
    for dim in config.DIMENSIONS:
        data = coverage.get(dim, _blank_dimension())
        print(
            f"  {dim}: scale {data['scale']:2d} | reverse {data['reverse']:2d} | pairs {data['control_pairs']:2d}"
        )

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")

    print("\nTotals:", summary["totals"])


def write_summary(summary: dict[str, object], path: Path) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")
    return text


def main(argv: list[str] | None = None) -> int:
    import argparse

    ap = argparse.ArgumentParser(description="Audit the quiz item catalog.")
    ap.add_argument("--catalog", default=None, help="catalog JSON (bundled file by default)")
    ap.add_argument("--out", default=None, help="write the JSON summary here")
    a = ap.parse_args(argv)

    try:
        catalog = load_catalog(a.catalog)
    except CatalogError as e:
        log.error("catalog invalid: %s", e)
        print(f"Catalog invalid: {e}")
        return 1
    summary = audit_items(catalog.list_all())
    print_report(summary)
    if a.out:
        write_summary(summary, Path(a.out))
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
