# levgroup - group similar strings by Levenshtein distance
from levgroup.models.schemas import DistanceUnit, GroupingOptions
from levgroup.services.similarity import (
    SimilarityGroup,
    group_by,
    group_by_result,
    levenshtein_distance,
    normalize_key,
)

__version__ = "1.0.0"

__all__ = [
    "DistanceUnit",
    "GroupingOptions",
    "SimilarityGroup",
    "group_by",
    "group_by_result",
    "levenshtein_distance",
    "normalize_key",
    "__version__",
]
