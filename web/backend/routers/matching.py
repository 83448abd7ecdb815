#!/usr/bin/env python3
"""
Matching endpoints - trigger match generation sweeps.

Called by a scheduler (cron) with `Authorization: Bearer <cron_secret>`.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from core.config_loader import AppConfig, get_config
from pipeline.control import PipelineController
from pipeline.runner import generate_all_matches, generate_matches_for_show
from ..dependencies import get_app_config, require_cron_secret
from ..exceptions import SweepLockedException
from ..models.responses import SweepRunResponse, ShowSweepResponse
from .matches import validate_uuid

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(
    prefix="/api/matching",
    tags=["matching"],
    dependencies=[Depends(require_cron_secret)]
)


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"success": False, "error": str(exc), "type": "RateLimitExceeded"}
    )


def _run_limit() -> str:
    return get_config().web.run_rate_limit


@router.post("/run", response_model=SweepRunResponse)
@limiter.limit(_run_limit)
def run_all_matches(request: Request, config: AppConfig = Depends(get_app_config)):
    """
    Generate matches for every OPEN show.

    Runs synchronously and returns the number of shows processed. Only one
    full sweep may run at a time.
    """
    controller = PipelineController(config.sweep.lock_file)
    if not controller.acquire_lock("cron"):
        raise SweepLockedException("A match sweep is already running")

    try:
        result = generate_all_matches(
            min_score=config.sweep.min_score,
            max_workers=config.sweep.max_workers
        )
    finally:
        controller.release_lock()

    return SweepRunResponse(processed=result["processed"])


@router.post("/shows/{show_id}/run", response_model=ShowSweepResponse)
@limiter.limit(_run_limit)
def run_show_matches(request: Request, show_id: str, config: AppConfig = Depends(get_app_config)):
    """Generate matches for a single show. Missing or non-open shows are skipped."""
    validate_uuid(show_id, "show_id")
    result = generate_matches_for_show(show_id, min_score=config.sweep.min_score)

    return ShowSweepResponse(
        success=True,
        show_id=result.show_id,
        skipped=result.skipped,
        skip_reason=result.skip_reason,
        created=result.created,
        updated=result.updated,
        out_of_range=result.out_of_range,
        below_threshold=result.below_threshold,
        failed=result.failed
    )
