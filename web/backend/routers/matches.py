#!/usr/bin/env python3
"""
Match endpoints - view matches and record artist/venue decisions.
"""

import uuid
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.orm import Session

from database.models import MatchStatus
from ..dependencies import get_db
from ..services.match_service import MatchService
from ..models.requests import LikeMatchRequest
from ..models.responses import (
    MatchesResponse,
    MatchStatusResponse,
    MatchExplanationResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


def validate_uuid(value: str, name: str = "match_id") -> str:
    """Validate that value is a valid UUID format."""
    try:
        uuid.UUID(value)
        return value
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {name} format: {value}. Must be a valid UUID."
        )


@router.get("", response_model=MatchesResponse)
def get_matches(
    show_id: Optional[str] = Query(default=None, description="Only matches for this show"),
    artist_id: Optional[str] = Query(default=None, description="Only matches for this artist"),
    status: Optional[MatchStatus] = Query(default=None, description="Only matches in this status"),
    min_score: Optional[int] = Query(default=None, ge=0, le=100, description="Minimum score filter"),
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum results to return"),
    db: Session = Depends(get_db)
):
    """
    List matches sorted by score (highest first).
    """
    if show_id:
        validate_uuid(show_id, "show_id")
    if artist_id:
        validate_uuid(artist_id, "artist_id")

    service = MatchService(db)
    matches = service.get_matches(
        show_id=show_id,
        artist_id=artist_id,
        status=status.value if status else None,
        min_score=min_score,
        limit=limit
    )

    return MatchesResponse(
        success=True,
        count=len(matches),
        matches=matches
    )


@router.post("/{match_id}/like", response_model=MatchStatusResponse)
def like_match(
    match_id: str,
    body: LikeMatchRequest,
    db: Session = Depends(get_db)
):
    """
    Like a match from the artist or venue side.

    A like from the second side makes the match MUTUAL.
    """
    validate_uuid(match_id)
    match = MatchService(db).like(match_id, body.side)
    return MatchStatusResponse(success=True, match_id=match_id, status=match.status)


@router.post("/{match_id}/pass", response_model=MatchStatusResponse)
def pass_match(
    match_id: str,
    db: Session = Depends(get_db)
):
    validate_uuid(match_id)
    match = MatchService(db).pass_match(match_id)
    return MatchStatusResponse(success=True, match_id=match_id, status=match.status)


@router.post("/{match_id}/reconsider", response_model=MatchStatusResponse)
def reconsider_match(
    match_id: str,
    db: Session = Depends(get_db)
):
    """Move a match back to SUGGESTED (also used by admins to reset a match)."""
    validate_uuid(match_id)
    match = MatchService(db).reconsider(match_id)
    return MatchStatusResponse(success=True, match_id=match_id, status=match.status)


@router.get("/{match_id}/explanation", response_model=MatchExplanationResponse)
def get_match_explanation(
    match_id: str,
    db: Session = Depends(get_db)
):
    """
    Score breakdown for a match, recomputed from the current artist and show data.
    """
    validate_uuid(match_id)
    return MatchService(db).get_match_explanation(match_id)
