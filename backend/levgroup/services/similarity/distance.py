#distance.py - Counts how many single-character edits separate two strings (Levenshtein distance).

from __future__ import annotations
from typing import List, Optional


def _edge_case_distance(a: str, b: str) -> Optional[int]:
    # Empty inputs and identical strings never need the table.
    if not a:
        return len(b)
    if not b:
        return len(a)
    if a == b:
        return 0
    return None


def _build_table(a: str, b: str) -> List[List[int]]:
    # Row 0 and column 0 hold the plain insert / delete costs.
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        table[i][0] = i
    for j in range(len(b) + 1):
        table[0][j] = j
    return table


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions needed to turn ``a`` into ``b``.

    Characters are compared exactly as given: no case folding and no
    Unicode normalization.
    """
    edge = _edge_case_distance(a, b)
    if edge is not None:
        return edge

    table = _build_table(a, b)
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            substitution = 0 if a[i - 1] == b[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,                 # deletion
                table[i][j - 1] + 1,                 # insertion
                table[i - 1][j - 1] + substitution,  # match or substitution
            )

    return table[len(a)][len(b)]


# A zero allowance means exact equality, which also skips the O(n*m) table.
def is_within_distance(a: str, b: str, allowed: int) -> bool:
    if allowed == 0:
        return a == b
    return levenshtein_distance(a, b) <= allowed
