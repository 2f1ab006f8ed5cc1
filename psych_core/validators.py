from __future__ import annotations
from typing import Any, List, Mapping, Set
from . import config
from .catalog import Catalog
from .scoring import keyed_answer


def consistency_flags(answers: Mapping[str, Any], catalog: Catalog) -> List[str]:
    """Control pairs ("A/B") whose keyed answers sit CONSISTENCY_GAP or more apart."""
    flags: List[str] = []
    seen: Set[str] = set()
    for it in catalog.list_all():
        if not it.control_pair or it.id in seen:
            continue
        mate = catalog.lookup(it.control_pair)
        seen.add(it.id); seen.add(it.control_pair)
        if mate is None:
            continue
        a = keyed_answer(it, answers.get(it.id))
        b = keyed_answer(mate, answers.get(mate.id))
        if abs(a - b) >= config.CONSISTENCY_GAP:
            flags.append(f"{it.id}/{mate.id}")
    return flags
