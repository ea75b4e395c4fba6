import uuid
import time
from datetime import datetime, timezone
from typing import Optional
from levgroup.core.config import settings
from levgroup.core.logging import get_logger
from levgroup.models.schemas import AnalyzeResponse, GroupingOptions, LogClusterSummary
from levgroup.services.log_pipeline import parse_logs_from_text, group_logs, summarize_groups

logger = get_logger(__name__)


class PipelineTimings:
    """Track timing metrics for pipeline stages."""

    def __init__(self):
        self.start_time = time.time()
        self.decode_ms: float = 0
        self.parse_ms: float = 0
        self.cluster_ms: float = 0
        self.total_ms: float = 0

    def log_summary(self, request_id: str):
        self.total_ms = (time.time() - self.start_time) * 1000
        logger.info(
            f"[{request_id}] Pipeline completed - "
            f"decode: {self.decode_ms:.1f}ms, "
            f"parse: {self.parse_ms:.1f}ms, "
            f"cluster: {self.cluster_ms:.1f}ms, "
            f"total: {self.total_ms:.1f}ms"
        )


def analyze_log_file(
    file_bytes: bytes,
    filename: str,
    options: Optional[GroupingOptions] = None,
    top_k: Optional[int] = None,
) -> AnalyzeResponse:
    """
    Collapse an uploaded log file into clusters of near-duplicate messages.

    Stages:
    1. Decode bytes
    2. Parse lines into records
    3. Cluster per service / level and summarize
    """
    options = options or settings.default_options
    top_k = settings.top_k if top_k is None else top_k
    run_id = str(uuid.uuid4())
    request_id = run_id[:8]
    timings = PipelineTimings()

    logger.info(
        f"[{request_id}] Starting analysis for {filename} "
        f"(unit={options.unit.value}, tolerance={options.tolerance}, "
        f"strip_digits={options.strip_digits}, strip_identifiers={options.strip_identifiers})")

    try:
        t0 = time.time()
        raw_text = _decode_file(file_bytes)
        num_lines = len(raw_text.splitlines())
        timings.decode_ms = (time.time() - t0) * 1000

        t0 = time.time()
        records = parse_logs_from_text(raw_text)
        timings.parse_ms = (time.time() - t0) * 1000

        logger.info(
            f"[{request_id}] Parsed {len(records)} records from {num_lines} raw lines")

        t0 = time.time()
        groups = group_logs(records, options)
        summaries = summarize_groups(groups, top_k=top_k)
        timings.cluster_ms = (time.time() - t0) * 1000

        logger.info(
            f"[{request_id}] Collapsed {len(records)} records into {len(groups)} clusters")

        timings.log_summary(request_id)

        return AnalyzeResponse(
            run_id=run_id,
            created_at=datetime.now(timezone.utc).isoformat(),
            filename=filename,
            num_lines=num_lines,
            num_records=len(records),
            num_clusters=len(groups),
            options=options,
            clusters=[LogClusterSummary(**s.to_dict()) for s in summaries],
        )

    except Exception as e:
        logger.error(f"[{request_id}] Pipeline failed: {e}", exc_info=True)
        raise


def _decode_file(file_bytes: bytes) -> str:
    """Decode file bytes to string with fallback encodings."""
    # utf-8-sig first so a BOM does not end up in the first message
    encodings = ['utf-8-sig', 'cp1252']

    for encoding in encodings:
        try:
            return file_bytes.decode(encoding)
        except UnicodeDecodeError:
            continue

    # latin-1 maps every byte
    return file_bytes.decode('latin-1')
