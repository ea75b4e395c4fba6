#parser.py - Turns raw log lines (JSON or plain text) into uniform LogRecord entries.

from __future__ import annotations
import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


LEVELS = {"TRACE", "DEBUG", "INFO", "WARN", "WARNING", "ERROR", "FATAL", "CRITICAL"}

# Candidate field names, first non-empty wins.
TIMESTAMP_FIELDS = ("timestamp", "time", "@timestamp", "ts")
LEVEL_FIELDS = ("level", "severity", "log_level")
SERVICE_FIELDS = ("service", "svc", "app", "component")
MESSAGE_FIELDS = ("message", "msg", "event", "error")

# Example: 2026-01-17 14:32:10 ERROR auth-service TokenExpiredException: ...
TEXT_LOG_RE = re.compile(
    r"""
    ^
    (?P<date>\d{4}[-/]\d{2}[-/]\d{2})      # YYYY-mm-dd or YYYY/mm/dd
    [ T]
    (?P<time>\d{2}:\d{2}:\d{2})            # HH:MM:SS
    (?:\.\d+)?                             # optional fraction
    \s+
    (?P<level>[A-Za-z]+)
    \s+
    (?P<service>[\w\-./]+)
    \s+
    (?P<message>.*)
    $
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class LogRecord:
    timestamp: datetime
    service: str
    level: str
    message: str
    raw: str


def _now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_level(level: str) -> str:
    level = str(level).strip().upper() or "UNKNOWN"
    return "WARN" if level == "WARNING" else level


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Best-effort timestamp parsing into an aware UTC datetime.
    Accepts ISO 8601 (with 'Z' or an offset) and 'YYYY-mm-dd HH:MM:SS'
    with either '-' or '/' as the date separator.
    """
    value = value.strip()
    if not value:
        return None

    if value.endswith("Z"):
        value = value[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        dt = None
        for fmt in ("%Y-%m-%d %H:%M:%S", "%Y/%m/%d %H:%M:%S"):
            try:
                dt = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue
        if dt is None:
            return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError:
        # offset pushes the instant past datetime.min / datetime.max
        return None


def _first_field(obj: Dict[str, Any], names: tuple, default: Any) -> Any:
    for name in names:
        value = obj.get(name)
        if value:
            return value
    return default


def _load_json_object(line: str) -> Optional[Dict[str, Any]]:
    line = line.strip()
    if not (line.startswith("{") and line.endswith("}")):
        return None
    try:
        obj = json.loads(line)
    except json.JSONDecodeError:
        return None
    return obj if isinstance(obj, dict) else None


def _record_from_json(obj: Dict[str, Any], raw: str) -> LogRecord:
    ts = parse_timestamp(str(_first_field(obj, TIMESTAMP_FIELDS, "")))
    return LogRecord(
        timestamp=ts or _now(),
        service=str(_first_field(obj, SERVICE_FIELDS, "unknown")).strip() or "unknown",
        level=normalize_level(_first_field(obj, LEVEL_FIELDS, "UNKNOWN")),
        message=str(_first_field(obj, MESSAGE_FIELDS, raw)).strip(),
        raw=raw,
    )


def _record_from_text(raw: str) -> LogRecord:
    line = raw.strip()
    m = TEXT_LOG_RE.match(line)
    if m:
        ts = parse_timestamp(f"{m.group('date')} {m.group('time')}")
        return LogRecord(
            timestamp=ts or _now(),
            service=m.group("service"),
            level=normalize_level(m.group("level")),
            message=m.group("message").strip() or line,
            raw=raw,
        )

    # Unstructured line: pick up a level word if there is one.
    level = next((t.upper() for t in line.split() if t.upper() in LEVELS), "UNKNOWN")
    return LogRecord(
        timestamp=_now(),
        service="unknown",
        level=normalize_level(level),
        message=line,
        raw=raw,
    )


def parse_log_line(line: str) -> LogRecord:
    raw = line.rstrip("\n")
    obj = _load_json_object(raw)
    if obj is not None:
        return _record_from_json(obj, raw)
    return _record_from_text(raw)


def parse_logs_from_text(log_text: str) -> List[LogRecord]:
    """One record per non-blank line."""
    return [parse_log_line(line) for line in log_text.splitlines() if line.strip()]
