import re
import uuid

from sqlalchemy import Column, Text, ForeignKey, Table, Uuid, Index

from .base import Base


artist_genre = Table(
    'artist_genre',
    Base.metadata,
    Column('artist_id', Uuid, ForeignKey('artist_profile.id', ondelete='CASCADE'), primary_key=True),
    Column('genre_id', Uuid, ForeignKey('genre.id', ondelete='CASCADE'), primary_key=True),
)

show_genre = Table(
    'show_genre',
    Base.metadata,
    Column('show_id', Uuid, ForeignKey('show.id', ondelete='CASCADE'), primary_key=True),
    Column('genre_id', Uuid, ForeignKey('genre.id', ondelete='CASCADE'), primary_key=True),
)


def generate_genre_slug(name: str) -> str:
    """'Indie Rock' -> 'indie-rock', 'R&B' -> 'r-b'."""
    return re.sub(r'[^a-z0-9]+', '-', name.lower())


class Genre(Base):
    """Genre tag shared by artists and shows. Matching compares slugs."""
    __tablename__ = 'genre'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    slug = Column(Text, nullable=False, unique=True)

    __table_args__ = (
        Index('idx_genre_name', 'name'),
    )
