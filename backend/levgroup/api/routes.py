from fastapi import APIRouter, UploadFile, File, HTTPException, Query
from typing import Optional
from levgroup.models.schemas import (
    AnalyzeResponse, DistanceRequest, DistanceResponse, DistanceUnit,
    GroupingOptions, GroupOut, GroupRequest, GroupResponse,
    HealthResponse, ErrorResponse
)
from levgroup.services.orchestrator import analyze_log_file
from levgroup.services.similarity import (
    allowed_distance, group_by, levenshtein_distance, normalize_key
)
from levgroup.core.config import settings
from levgroup.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/health", response_model=HealthResponse)
async def health():
    """Liveness probe."""
    return HealthResponse()


@router.post(
    "/group",
    response_model=GroupResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Grouping error"}
    }
)
def group_items(request: GroupRequest):
    """
    Group a list of strings by edit-distance similarity.

    Items are sorted, normalized according to the options and clustered
    greedily; each group reports its representative key and members.
    """
    try:
        groups = group_by(request.items, request.options)
    except Exception as e:
        logger.error(f"Grouping failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=500, detail=f"Grouping failed: {str(e)}")

    logger.info(f"Grouped {len(request.items)} items into {len(groups)} groups")

    return GroupResponse(
        num_items=len(request.items),
        num_groups=len(groups),
        groups=[
            GroupOut(key=g.key, count=g.count, items=g.items)
            for g in groups
        ]
    )


@router.post("/distance", response_model=DistanceResponse)
def distance(request: DistanceRequest):
    """
    Edit distance between two strings after normalization, and whether
    they would land in the same group under the given options.
    """
    opts = request.options
    a = normalize_key(request.a, opts.strip_digits, opts.strip_identifiers)
    b = normalize_key(request.b, opts.strip_digits, opts.strip_identifiers)
    value = levenshtein_distance(a, b)
    allowed = allowed_distance(opts.unit, opts.tolerance, a, b)

    return DistanceResponse(
        normalized_a=a,
        normalized_b=b,
        distance=value,
        allowed_distance=allowed,
        within_tolerance=value <= allowed
    )


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid file"},
        413: {"model": ErrorResponse, "description": "File too large"},
        500: {"model": ErrorResponse, "description": "Processing error"}
    }
)
def analyze_logs(
    file: UploadFile = File(...),
    unit: DistanceUnit = Query(default=settings.default_unit),
    tolerance: int = Query(default=settings.default_tolerance, ge=0),
    strip_digits: bool = Query(default=settings.strip_digits),
    strip_identifiers: bool = Query(default=settings.strip_identifiers),
    top_k: Optional[int] = Query(default=None, ge=1),
):
    """
    Upload a log file and collapse its near-duplicate messages.

    Accepts multipart file upload; grouping options come from the query
    string and fall back to the configured defaults.
    """
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    try:
        file_bytes = file.file.read()

        if len(file_bytes) == 0:
            raise HTTPException(status_code=400, detail="Empty file")

        if len(file_bytes) > settings.max_upload_bytes:
            raise HTTPException(
                status_code=413,
                detail=f"File exceeds {settings.max_upload_bytes} bytes")

        logger.info(
            f"Received file: {file.filename}, size: {len(file_bytes)} bytes")

        options = GroupingOptions(
            unit=unit,
            tolerance=tolerance,
            strip_digits=strip_digits,
            strip_identifiers=strip_identifiers
        )
        return analyze_log_file(file_bytes, file.filename, options, top_k)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=500, detail=f"Analysis failed: {str(e)}")
