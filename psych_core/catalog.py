"""Item catalog shared by every evaluator of the buyer psychology quiz.

The catalog is a static JSON file bundled with the package.  It is loaded and
validated once per path and then handed out as an immutable :class:`Catalog`;
the HTTP service, the terminal quiz and the batch scorer all read the same
file so their results cannot drift apart.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from . import config
from .types import Item

log = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.json"

_CACHE: Dict[str, "Catalog"] = {}


class CatalogError(RuntimeError):
    """The item catalog is missing or structurally invalid."""


class Catalog:
    """Ordered, read-only collection of quiz items."""

    def __init__(self, items: Iterable[Item]):
        self._items: Tuple[Item, ...] = tuple(items)
        self._by_id: Dict[str, Item] = {}
        for it in self._items:
            if it.id in self._by_id:
                raise CatalogError(f"duplicate item id {it.id!r}")
            self._by_id[it.id] = it
        _check_items(self._items, self._by_id)

    def lookup(self, item_id: str) -> Optional[Item]:
        return self._by_id.get(item_id)

    def list_all(self) -> Tuple[Item, ...]:
        return self._items

    def scale_items(self) -> List[Item]:
        return [it for it in self._items if it.kind == "scale"]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)


def _check_items(items: Tuple[Item, ...], by_id: Dict[str, Item]) -> None:
    if not items:
        raise CatalogError("catalog is empty")
    for it in items:
        if it.dimension not in config.DIMENSIONS:
            raise CatalogError(f"item {it.id!r} has unknown dimension {it.dimension!r}")
        if it.kind not in config.ITEM_KINDS:
            raise CatalogError(f"item {it.id!r} has unknown kind {it.kind!r}")
        if it.control_pair is None:
            continue
        mate = by_id.get(it.control_pair)
        if mate is None or mate.id == it.id:
            raise CatalogError(f"item {it.id!r} pairs with missing item {it.control_pair!r}")
        if mate.control_pair != it.id:
            raise CatalogError(f"control pair {it.id}/{mate.id} is not symmetric")


def _item_from_row(row: object) -> Item:
    if not isinstance(row, dict) or not row.get("id"):
        raise CatalogError(f"malformed catalog row: {row!r}")
    reverse = row.get("reverse", False)
    if not isinstance(reverse, bool):
        raise CatalogError(f"item {row['id']!r} has non-boolean reverse flag {reverse!r}")
    pair = row.get("control_pair") or None
    if pair is not None and not isinstance(pair, str):
        raise CatalogError(f"item {row['id']!r} has malformed control pair {pair!r}")
    return Item(
        id=str(row["id"]),
        dimension=str(row.get("dimension", "")),
        reverse=reverse,
        control_pair=pair,
        kind=row.get("kind", "scale"),
        text=str(row.get("text", "")),
    )


def _resolve_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    if config.CATALOG_PATH:
        return Path(config.CATALOG_PATH)
    return DEFAULT_CATALOG_PATH


def load_catalog(path: str | Path | None = None) -> Catalog:
    """Load, validate and cache the catalog at ``path`` (bundled file by default)."""

    p = _resolve_path(path)
    key = str(p.resolve())
    cached = _CACHE.get(key)
    if cached is not None:
        return cached
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogError(f"catalog not found at {p}") from e
    except (OSError, ValueError) as e:
        raise CatalogError(f"catalog at {p} is unreadable: {e}") from e
    if not isinstance(raw, list):
        raise CatalogError(f"catalog at {p} must be a JSON list")
    catalog = Catalog(_item_from_row(r) for r in raw)
    log.info("loaded item catalog %s (%d items)", p, len(catalog))
    _CACHE[key] = catalog
    return catalog


def clear_cache() -> None:
    _CACHE.clear()
