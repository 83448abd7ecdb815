import enum
import uuid

from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, UniqueConstraint, Index, Uuid, func
from sqlalchemy.orm import relationship

from .base import Base


class MatchStatus(str, enum.Enum):
    SUGGESTED = "SUGGESTED"
    LIKED_BY_ARTIST = "LIKED_BY_ARTIST"
    LIKED_BY_VENUE = "LIKED_BY_VENUE"
    MUTUAL = "MUTUAL"
    PASSED = "PASSED"


class Match(Base):
    """
    Candidate pairing of an artist with a show.

    `score` is owned by the generation sweep and recomputed on every run.
    `status` is owned by the interaction layer; the sweep only sets it on
    insert.
    """
    __tablename__ = 'match'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    artist_id = Column(Uuid, ForeignKey('artist_profile.id', ondelete='CASCADE'), nullable=False)
    show_id = Column(Uuid, ForeignKey('show.id', ondelete='CASCADE'), nullable=False)

    score = Column(Integer, nullable=False)
    status = Column(Text, nullable=False, default=MatchStatus.SUGGESTED.value)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    artist = relationship("ArtistProfile", back_populates="matches")
    show = relationship("Show", back_populates="matches")

    __table_args__ = (
        UniqueConstraint('artist_id', 'show_id', name='uq_match_artist_show'),
        Index('idx_match_show', 'show_id'),
        Index('idx_match_score', 'score'),
        Index('idx_match_status', 'status'),
    )
