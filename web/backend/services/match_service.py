#!/usr/bin/env python3
"""
Match service - business logic for match record operations.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from core.match_status import MatchSide, status_after_like, status_after_pass, status_after_reconsider
from core.scorer import WEIGHTS, is_within_match_distance, score_breakdown, total_score
from database.models import Match
from database.repositories import MatchRepository
from pipeline.runner import build_artist_profile, build_show_context
from ..models.responses import MatchSummary, MatchExplanationResponse, ScoreComponents
from ..exceptions import MatchNotFoundException

logger = logging.getLogger(__name__)


def _iso(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _to_summary(match: Match) -> MatchSummary:
    return MatchSummary(
        match_id=str(match.id),
        artist_id=str(match.artist_id),
        show_id=str(match.show_id),
        score=match.score,
        status=match.status,
        created_at=_iso(match.created_at),
        updated_at=_iso(match.updated_at)
    )


class MatchService:
    """Service for reading matches and applying user decisions."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = MatchRepository(db)

    def _get_or_raise(self, match_id: str) -> Match:
        match = self.repo.get_by_id(uuid.UUID(match_id))
        if match is None:
            raise MatchNotFoundException(f"Match not found: {match_id}")
        return match

    def get_matches(
        self,
        show_id: Optional[str] = None,
        artist_id: Optional[str] = None,
        status: Optional[str] = None,
        min_score: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[MatchSummary]:
        """
        Get matches sorted by score (highest first).

        Args:
            show_id: Only matches for this show.
            artist_id: Only matches for this artist.
            status: Only matches in this status.
            min_score: Minimum score filter.
            limit: Maximum number of results to return.
        """
        matches = self.repo.get_matches(
            show_id=uuid.UUID(show_id) if show_id else None,
            artist_id=uuid.UUID(artist_id) if artist_id else None,
            status=status,
            min_score=min_score,
            limit=limit
        )
        return [_to_summary(m) for m in matches]

    def like(self, match_id: str, side: MatchSide) -> MatchSummary:
        match = self._get_or_raise(match_id)
        self.repo.set_status(match, status_after_like(match.status, side))
        self.db.commit()
        return _to_summary(match)

    def pass_match(self, match_id: str) -> MatchSummary:
        match = self._get_or_raise(match_id)
        self.repo.set_status(match, status_after_pass(match.status))
        self.db.commit()
        return _to_summary(match)

    def reconsider(self, match_id: str) -> MatchSummary:
        match = self._get_or_raise(match_id)
        self.repo.set_status(match, status_after_reconsider(match.status))
        self.db.commit()
        return _to_summary(match)

    def get_match_explanation(self, match_id: str) -> MatchExplanationResponse:
        """Recompute the score breakdown of a stored match from current profile data."""
        match = self._get_or_raise(match_id)
        artist = build_artist_profile(match.artist)
        show = build_show_context(match.show)
        breakdown = score_breakdown(artist, show)

        return MatchExplanationResponse(
            success=True,
            match_id=match_id,
            stored_score=match.score,
            current_score=total_score(breakdown),
            within_match_distance=is_within_match_distance(artist, show),
            components=ScoreComponents(**breakdown.as_dict()),
            weights=ScoreComponents(**WEIGHTS)
        )
