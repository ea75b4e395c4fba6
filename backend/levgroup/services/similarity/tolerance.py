#tolerance.py - Turns the configured tolerance into an allowed edit count for one pair of keys.

from __future__ import annotations
from levgroup.models.schemas import DistanceUnit


def allowed_distance(unit: DistanceUnit, tolerance: int, key_a: str, key_b: str) -> int:
    """
    ABSOLUTE returns the tolerance as is. PERCENTAGE takes that share of the
    longer key's length, truncated: ``max_len * tolerance // 100``.
    """
    if unit == DistanceUnit.PERCENTAGE:
        return max(len(key_a), len(key_b)) * tolerance // 100
    return tolerance
