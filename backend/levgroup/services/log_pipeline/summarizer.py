#summarizer.py - Turns log clusters into flat summaries for the API and the CLI.

from __future__ import annotations
from dataclasses import dataclass, asdict, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from .grouping import LogGroup


@dataclass(frozen=True)
class ClusterSummary:
    cluster_id: str
    service: str
    level: str
    error: str
    representative: str
    count: int
    first_seen: Optional[str]
    last_seen: Optional[str]
    time_window_minutes: int
    sample_messages: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _minutes_between(a: datetime, b: datetime) -> int:
    return max(0, int((b - a).total_seconds() // 60))


def summarize_groups(groups: List[LogGroup], top_k: int = 20) -> List[ClusterSummary]:
    summaries: List[ClusterSummary] = []

    for g in groups[:top_k]:
        first_dt = min(g.timestamps) if g.timestamps else None
        last_dt = max(g.timestamps) if g.timestamps else None

        summaries.append(
            ClusterSummary(
                cluster_id=g.group_id,
                service=g.service,
                level=g.level,
                error=g.error_signature,
                representative=g.representative,
                count=g.count,
                first_seen=first_dt.isoformat() if first_dt else None,
                last_seen=last_dt.isoformat() if last_dt else None,
                time_window_minutes=_minutes_between(first_dt, last_dt) if first_dt and last_dt else 0,
                sample_messages=list(g.sample_messages),
            )
        )

    return summaries
