#pipeline.py - raw log text -> parser.py -> grouping.py -> summarizer.py -> cluster summaries.

from __future__ import annotations
from typing import Any, Dict, List, Optional

from levgroup.core.config import settings
from levgroup.models.schemas import GroupingOptions
from .parser import parse_logs_from_text
from .grouping import group_logs
from .summarizer import summarize_groups


def process_logs(raw_log_text: str, options: Optional[GroupingOptions] = None, top_k: int = 20) -> List[Dict[str, Any]]:
    """
    Main entrypoint:
    raw_log_text (string) -> list of cluster summaries (dicts)
    Without options, the configured defaults are used.
    """
    options = options or settings.default_options
    records = parse_logs_from_text(raw_log_text)
    groups = group_logs(records, options)
    summaries = summarize_groups(groups, top_k=top_k)
    return [s.to_dict() for s in summaries]
