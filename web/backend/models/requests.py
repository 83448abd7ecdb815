#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field

from core.match_status import MatchSide


class LikeMatchRequest(BaseModel):
    """Which side of the match is liking it."""
    side: MatchSide = Field(..., description="ARTIST or VENUE")
