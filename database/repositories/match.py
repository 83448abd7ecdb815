import logging
from typing import List, Optional, Any

from sqlalchemy import select, update

from database.models import Match, MatchStatus
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def get_by_id(self, match_id: Any) -> Optional[Match]:
        stmt = select(Match).where(Match.id == match_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def update_score(self, artist_id: Any, show_id: Any, score: int) -> int:
        """
        Set the score of an existing match, leaving status untouched.

        Returns the number of rows updated (0 or 1).
        """
        stmt = (
            update(Match)
            .where(
                Match.artist_id == artist_id,
                Match.show_id == show_id
            )
            .values(score=score)
        )
        return self.db.execute(stmt).rowcount

    def create_match(self, artist_id: Any, show_id: Any, score: int) -> Match:
        match = Match(
            artist_id=artist_id,
            show_id=show_id,
            score=score,
            status=MatchStatus.SUGGESTED.value
        )
        self.db.add(match)
        self.db.flush()
        return match

    def get_matches(
        self,
        show_id: Optional[Any] = None,
        artist_id: Optional[Any] = None,
        status: Optional[str] = None,
        min_score: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[Match]:
        stmt = select(Match)

        if show_id is not None:
            stmt = stmt.where(Match.show_id == show_id)
        if artist_id is not None:
            stmt = stmt.where(Match.artist_id == artist_id)
        if status is not None:
            stmt = stmt.where(Match.status == status)
        if min_score is not None:
            stmt = stmt.where(Match.score >= min_score)

        stmt = stmt.order_by(Match.score.desc(), Match.created_at)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def set_status(self, match: Match, status: MatchStatus) -> Match:
        new_status = MatchStatus(status).value
        if match.status != new_status:
            logger.info(f"Match {match.id}: {match.status} -> {new_status}")
            match.status = new_status
            self.db.flush()
        return match
