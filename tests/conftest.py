from __future__ import annotations

import json
from pathlib import Path

import pytest

from psych_core.catalog import Catalog, clear_cache, load_catalog
from psych_core.types import Item


def build_catalog(
    *,
    dimensions: tuple[str, ...] = ("O", "C", "E", "A", "N"),
    per_dimension: int = 2,
    with_pairs: bool = True,
    with_visual: bool = True,
) -> Catalog:
    """Create a small deterministic catalog for tests.

    Each dimension gets ``per_dimension`` scale items; when ``with_pairs`` is
    set the first two items of a dimension form a control pair with the
    second one reverse-keyed.
    """

    items: list[Item] = []
    if with_visual:
        items.append(Item(id="V", dimension="O", kind="visual", text="slider"))
    for dim in dimensions:
        for idx in range(per_dimension):
            pair = None
            if with_pairs and per_dimension >= 2 and idx < 2:
                pair = f"{dim}{1 - idx}"
            items.append(
                Item(
                    id=f"{dim}{idx}",
                    dimension=dim,
                    reverse=(idx == 1),
                    control_pair=pair,
                    text=f"{dim} statement #{idx}",
                )
            )
    return Catalog(items)


def write_catalog(path: Path, rows: object) -> Path:
    path.write_text(json.dumps(rows), encoding="utf-8")
    return path


@pytest.fixture
def catalog() -> Catalog:
    return load_catalog()


@pytest.fixture
def small_catalog() -> Catalog:
    return build_catalog()


@pytest.fixture(autouse=True)
def _fresh_catalog_cache():
    clear_cache()
    yield
    clear_cache()
