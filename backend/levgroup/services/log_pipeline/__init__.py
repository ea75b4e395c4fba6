# Log parsing and similarity clustering module
from .parser import LogRecord, parse_log_line, parse_logs_from_text
from .grouping import LogGroup, group_logs
from .summarizer import ClusterSummary, summarize_groups
from .pipeline import process_logs

__all__ = [
    "LogRecord",
    "parse_log_line",
    "parse_logs_from_text",
    "LogGroup",
    "group_logs",
    "ClusterSummary",
    "summarize_groups",
    "process_logs",
]
