import enum
import uuid

from sqlalchemy import Column, Text, Integer, Float, Date, TIMESTAMP, ForeignKey, Uuid, Index, func
from sqlalchemy.orm import relationship

from .base import Base
from .genre import show_genre


class ShowStatus(str, enum.Enum):
    OPEN = "OPEN"
    FILLED = "FILLED"
    CANCELLED = "CANCELLED"


class Venue(Base):
    __tablename__ = 'venue'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    city = Column(Text, nullable=False, default='')
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    capacity = Column(Integer, nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    shows = relationship("Show", back_populates="venue", cascade="all, delete-orphan")


class Show(Base):
    """A dated booking slot at a venue. Only OPEN shows get matches generated."""
    __tablename__ = 'show'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    venue_id = Column(Uuid, ForeignKey('venue.id', ondelete='CASCADE'), nullable=False)

    date = Column(Date, nullable=False)
    title = Column(Text, nullable=True)
    compensation_type = Column(Text, nullable=True)  # DOOR_SPLIT|GUARANTEE|GUARANTEE_PLUS_DOOR_SPLIT|OTHER, free-form
    status = Column(Text, nullable=False, default=ShowStatus.OPEN.value)  # OPEN|FILLED|CANCELLED

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    venue = relationship("Venue", back_populates="shows", lazy="joined")
    genres = relationship("Genre", secondary=show_genre, lazy="selectin")
    matches = relationship("Match", back_populates="show", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_show_status', 'status'),
        Index('idx_show_date', 'date'),
        Index('idx_show_venue', 'venue_id'),
    )
