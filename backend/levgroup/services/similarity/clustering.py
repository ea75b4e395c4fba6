#clustering.py - Walks sorted keys once and drops each item into the first close-enough group.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterable, Iterator, List, Tuple, TypeVar

from levgroup.core.logging import get_logger
from levgroup.models.schemas import DistanceUnit
from .distance import is_within_distance
from .tolerance import allowed_distance

logger = get_logger(__name__)

R = TypeVar("R")


# A cluster keyed by the normalized key of the item that founded it.
@dataclass
class SimilarityGroup(Generic[R]):
    key: str
    items: List[R] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[R]:
        return iter(self.items)


def cluster_items(
    items: Iterable[Tuple[str, Any]],
    unit: DistanceUnit,
    tolerance: int,
) -> List[SimilarityGroup]:
    """
    Greedy single pass over ``(key, payload)`` pairs that are already sorted
    by key.

    Representatives are scanned newest first and the first one within the
    allowed distance takes the payload; there is no search for a closer one.
    An item that matches nothing founds a new group and its key is put at
    the front of the scan list. Groups come back in founding order.
    """
    groups: Dict[str, SimilarityGroup] = {}
    representatives: List[str] = []

    for key, payload in items:
        match = None
        for rep in representatives:
            if is_within_distance(key, rep, allowed_distance(unit, tolerance, key, rep)):
                match = rep
                break

        if match is not None:
            groups[match].items.append(payload)
        else:
            representatives.insert(0, key)
            groups[key] = SimilarityGroup(key=key, items=[payload])

    logger.debug(f"Clustered into {len(groups)} groups (unit={unit.value}, tolerance={tolerance})")
    return list(groups.values())
