from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime, timezone
from enum import Enum


# ============================================================================
# Grouping Options
# ============================================================================

class DistanceUnit(str, Enum):
    """How a grouping tolerance is measured."""
    ABSOLUTE = "absolute"
    PERCENTAGE = "percentage"


class GroupingOptions(BaseModel):
    """
    Immutable configuration for similarity grouping.

    ``tolerance`` is an edit count for ABSOLUTE and parts-per-hundred of the
    longer key's length for PERCENTAGE. A negative tolerance is rejected here,
    before any grouping starts.
    """
    model_config = ConfigDict(frozen=True)

    unit: DistanceUnit = DistanceUnit.ABSOLUTE
    tolerance: int = Field(default=0, ge=0)
    strip_digits: bool = False
    strip_identifiers: bool = False

    @classmethod
    def absolute(
        cls,
        tolerance: int,
        strip_digits: bool = False,
        strip_identifiers: bool = False,
    ) -> "GroupingOptions":
        return cls(
            unit=DistanceUnit.ABSOLUTE,
            tolerance=tolerance,
            strip_digits=strip_digits,
            strip_identifiers=strip_identifiers,
        )

    @classmethod
    def percentage(
        cls,
        tolerance: int,
        strip_digits: bool = False,
        strip_identifiers: bool = False,
    ) -> "GroupingOptions":
        return cls(
            unit=DistanceUnit.PERCENTAGE,
            tolerance=tolerance,
            strip_digits=strip_digits,
            strip_identifiers=strip_identifiers,
        )


# ============================================================================
# Grouping API Models
# ============================================================================

class GroupRequest(BaseModel):
    """Items to group plus the options to group them with."""
    items: List[str]
    options: GroupingOptions = Field(default_factory=GroupingOptions)


class GroupOut(BaseModel):
    """One similarity group: its representative key and member items."""
    key: str
    count: int
    items: List[str]


class GroupResponse(BaseModel):
    """Response from POST /api/group."""
    num_items: int
    num_groups: int
    groups: List[GroupOut]


class DistanceRequest(BaseModel):
    """Two strings to compare."""
    a: str
    b: str
    options: GroupingOptions = Field(default_factory=GroupingOptions)


class DistanceResponse(BaseModel):
    """Response from POST /api/distance."""
    normalized_a: str
    normalized_b: str
    distance: int
    allowed_distance: int
    within_tolerance: bool


# ============================================================================
# Log Analysis Models
# ============================================================================

class LogClusterSummary(BaseModel):
    """A cluster of near-duplicate log messages."""
    cluster_id: str
    service: str
    level: str
    error: str
    representative: str
    count: int
    first_seen: Optional[str] = None
    last_seen: Optional[str] = None
    time_window_minutes: int = 0
    sample_messages: List[str] = Field(default_factory=list)


class AnalyzeResponse(BaseModel):
    """Response from POST /api/analyze."""
    run_id: str
    created_at: str
    filename: str
    num_lines: int
    num_records: int
    num_clusters: int
    options: GroupingOptions
    clusters: List[LogClusterSummary]


# ============================================================================
# Service Models
# ============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str
    request_id: Optional[str] = None
