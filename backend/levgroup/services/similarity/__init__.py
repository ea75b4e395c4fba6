# Similarity grouping: edit distance, key normalization and greedy clustering
from .distance import levenshtein_distance, is_within_distance
from .normalizer import normalize_key, strip_digits, strip_identifiers
from .tolerance import allowed_distance
from .clustering import SimilarityGroup, cluster_items
from .grouping import group_by, group_by_result

__all__ = [
    "levenshtein_distance",
    "is_within_distance",
    "normalize_key",
    "strip_digits",
    "strip_identifiers",
    "allowed_distance",
    "SimilarityGroup",
    "cluster_items",
    "group_by",
    "group_by_result",
]
