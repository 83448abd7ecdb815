import uuid

from sqlalchemy import Column, Text, Integer, Float, TIMESTAMP, Uuid, Index, func
from sqlalchemy.orm import relationship

from core.scorer.models import AvailabilityPreference
from .base import Base
from .genre import artist_genre


class ArtistProfile(Base):
    """
    Performing artist available for booking.

    Coordinates are resolved from `location` upstream (geocoding) and may
    be unset.
    """
    __tablename__ = 'artist_profile'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    location = Column(Text, nullable=False, default='')
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    draw_estimate = Column(Integer, nullable=True)
    availability_preference = Column(
        Text, nullable=False, default=AvailabilityPreference.ANY_NIGHT.value
    )  # ANY_NIGHT|WEEKENDS|WEEKNIGHTS|SPECIFIC_DATES

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    genres = relationship("Genre", secondary=artist_genre, lazy="selectin")
    matches = relationship("Match", back_populates="artist", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_artist_profile_location', 'location'),
    )
