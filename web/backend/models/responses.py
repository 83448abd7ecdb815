#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class MatchSummary(BaseModel):
    """Summary of an artist/show match."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "match_id": "550e8400-e29b-41d4-a716-446655440000",
                "artist_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "show_id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
                "score": 86,
                "status": "SUGGESTED",
                "created_at": "2026-03-01T12:00:00",
                "updated_at": "2026-03-02T12:00:00"
            }
        }
    )

    match_id: str
    artist_id: str
    show_id: str
    score: int = Field(ge=0, le=100)
    status: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class MatchesResponse(BaseModel):
    success: bool
    count: int
    matches: List[MatchSummary]


class MatchStatusResponse(BaseModel):
    success: bool
    match_id: str
    status: str


class ScoreComponents(BaseModel):
    """Component scores, each 0-1."""
    genre: float = Field(ge=0, le=1)
    location: float = Field(ge=0, le=1)
    capacity_draw: float = Field(ge=0, le=1)
    availability: float = Field(ge=0, le=1)
    compensation: float = Field(ge=0, le=1)


class MatchExplanationResponse(BaseModel):
    """Freshly computed score breakdown for a stored match."""
    success: bool
    match_id: str
    stored_score: int
    current_score: int
    within_match_distance: bool
    components: ScoreComponents
    weights: ScoreComponents


class SweepRunResponse(BaseModel):
    processed: int


class ShowSweepResponse(BaseModel):
    success: bool
    show_id: str
    skipped: bool
    skip_reason: Optional[str] = None
    created: int = 0
    updated: int = 0
    out_of_range: int = 0
    below_threshold: int = 0
    failed: int = 0
