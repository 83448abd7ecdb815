from sqlalchemy.orm import Session

from database.repositories import ShowRepository, ArtistRepository, MatchRepository


class MatchingRepository:
    """Repositories needed by match generation, bound to one Session."""

    def __init__(self, db: Session):
        self.db = db
        self.shows = ShowRepository(db)
        self.artists = ArtistRepository(db)
        self.matches = MatchRepository(db)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
