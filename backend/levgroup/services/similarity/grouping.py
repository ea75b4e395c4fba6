#grouping.py - Public entry point: extract keys, sort, normalize, then cluster.

from __future__ import annotations
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from levgroup.models.schemas import GroupingOptions
from .clustering import SimilarityGroup, cluster_items
from .normalizer import normalize_key

T = TypeVar("T")
R = TypeVar("R")
O = TypeVar("O")


def _identity(item: Any) -> Any:
    return item


def group_by(
    source: Iterable[T],
    options: Optional[GroupingOptions] = None,
    key: Callable[[T], str] = str,
    payload: Callable[[T], R] = _identity,
) -> List[SimilarityGroup[R]]:
    """
    Group ``source`` into clusters of similar keys.

    Steps:
    1. Extract ``(key(item), payload(item))`` for every item
    2. Sort the pairs by raw key (codepoint order, stable for ties)
    3. Normalize each key with the options' strip flags
    4. Cluster greedily within the options' tolerance

    Without options, items are grouped by exact key equality. Errors raised
    by ``key`` or ``payload`` propagate to the caller.
    """
    options = options or GroupingOptions()

    pairs = [(key(item), payload(item)) for item in source]
    pairs.sort(key=lambda pair: pair[0])

    normalized = [
        (normalize_key(raw_key, options.strip_digits, options.strip_identifiers), value)
        for raw_key, value in pairs
    ]
    return cluster_items(normalized, options.unit, options.tolerance)


def group_by_result(
    source: Iterable[T],
    result: Callable[[str, List[R]], O],
    options: Optional[GroupingOptions] = None,
    key: Callable[[T], str] = str,
    payload: Callable[[T], R] = _identity,
) -> List[O]:
    """Like group_by, but maps every group through ``result(key, items)``."""
    return [result(g.key, g.items) for g in group_by(source, options, key, payload)]
