#grouping.py - Collapses near-duplicate log messages of one service and level into clusters.

from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from levgroup.core.logging import get_logger
from levgroup.models.schemas import GroupingOptions
from levgroup.services.similarity import group_by
from .parser import LogRecord

logger = get_logger(__name__)

ERROR_TYPE_RE = re.compile(r"^([A-Za-z_]\w*(?:Exception|Error|Fault))\b")
GROUP_ID_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9:_\-]+")
MAX_SAMPLES = 3
MAX_SAMPLE_LEN = 300


def extract_error_signature(msg: str) -> str:
    """
    Compact 'error type' for display.
    Example: 'TokenExpiredException: blah' -> 'TokenExpiredException'
    """
    msg = msg.strip()
    m = ERROR_TYPE_RE.match(msg)
    if m:
        return m.group(1)
    tokens = msg.split()
    return " ".join(tokens[:6]) if tokens else "unknown_error"


def build_group_id(service: str, level: str, representative: str) -> str:
    base = f"{service}::{level}::{representative}"
    return GROUP_ID_UNSAFE_RE.sub("_", base)[:120]


# Cluster of similar log records
@dataclass
class LogGroup:
    group_id: str
    service: str
    level: str
    error_signature: str
    representative: str
    count: int
    timestamps: List[datetime]
    sample_messages: List[str]


def _sample_messages(records: List[LogRecord]) -> List[str]:
    seen = set()
    samples: List[str] = []
    for r in records:
        msg = r.message.strip()
        if msg and msg not in seen:
            samples.append(msg[:MAX_SAMPLE_LEN])
            seen.add(msg)
        if len(samples) >= MAX_SAMPLES:
            break
    return samples


def _latest(group: LogGroup) -> datetime:
    return max(group.timestamps) if group.timestamps else datetime.min.replace(tzinfo=timezone.utc)


def group_logs(records: List[LogRecord], options: Optional[GroupingOptions] = None) -> List[LogGroup]:
    """
    Partition by (service, level), then cluster each partition's messages
    by edit distance. Sorted by count, then most recent occurrence.
    """
    options = options or GroupingOptions()

    partitions: Dict[Tuple[str, str], List[LogRecord]] = {}
    for r in records:
        partitions.setdefault((r.service or "unknown", r.level or "UNKNOWN"), []).append(r)

    groups: List[LogGroup] = []
    for (service, level), members in partitions.items():
        clusters = group_by(members, options, key=lambda r: r.message, payload=lambda r: r)
        for cluster in clusters:
            items = sorted(cluster.items, key=lambda r: r.timestamp)
            groups.append(
                LogGroup(
                    group_id=build_group_id(service, level, cluster.key),
                    service=service,
                    level=level,
                    error_signature=extract_error_signature(items[0].message),
                    representative=cluster.key,
                    count=len(items),
                    timestamps=[r.timestamp for r in items],
                    sample_messages=_sample_messages(items),
                )
            )

    logger.debug(f"Grouped {len(records)} records into {len(groups)} clusters across {len(partitions)} partitions")

    groups.sort(key=lambda g: (g.count, _latest(g)), reverse=True)
    return groups
