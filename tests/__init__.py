#!/usr/bin/env python3
"""
Test suite configuration and utilities.

    # Run all tests
    python -m pytest tests/ -v

    # Skip tests that open a database session
    python -m pytest tests/ -v -m "not db"

Database tests run against an in-memory SQLite database built from the
ORM metadata, so no external services are needed.
"""

import uuid
from datetime import date
from typing import Iterable, Optional

from sqlalchemy import create_engine, event, select
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from database.models import (
    Base, Genre, ArtistProfile, Venue, Show, Match, ShowStatus, MatchStatus, generate_genre_slug
)

# Reference coordinates
COLUMBUS = (39.9612, -82.9988)
NEW_YORK = (40.7128, -74.0060)

SATURDAY = date(2026, 3, 14)
WEDNESDAY = date(2026, 3, 11)


def create_test_engine():
    """In-memory SQLite engine shared across sessions, with working SAVEPOINTs."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # pysqlite defers BEGIN on its own, which breaks SAVEPOINT; let SQLAlchemy emit it.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(engine)
    return engine


def create_session_factory(engine=None):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine or create_test_engine())


def get_or_create_genres(session: Session, names: Iterable[str]):
    genres = []
    for name in names:
        slug = generate_genre_slug(name)
        genre = session.execute(select(Genre).where(Genre.slug == slug)).scalar_one_or_none()
        if genre is None:
            genre = Genre(name=name, slug=slug)
            session.add(genre)
            session.flush()
        genres.append(genre)
    return genres


def seed_show(
    session: Session,
    genres=("Punk", "Hardcore"),
    coords=COLUMBUS,
    capacity: int = 80,
    show_date: date = SATURDAY,
    status: ShowStatus = ShowStatus.OPEN,
    compensation_type: Optional[str] = "DOOR_SPLIT",
) -> Show:
    venue = Venue(
        name="Ace of Cups",
        city="Columbus, OH",
        latitude=coords[0] if coords else None,
        longitude=coords[1] if coords else None,
        capacity=capacity,
    )
    show = Show(
        venue=venue,
        date=show_date,
        compensation_type=compensation_type,
        status=status.value,
        genres=get_or_create_genres(session, genres),
    )
    session.add_all([venue, show])
    session.flush()
    return show


def seed_artist(
    session: Session,
    name: str = "The Vandals",
    genres=("Punk", "Hardcore"),
    coords=COLUMBUS,
    draw_estimate: Optional[int] = 60,
    availability_preference: str = "ANY_NIGHT",
) -> ArtistProfile:
    artist = ArtistProfile(
        name=name,
        location="Columbus, OH",
        latitude=coords[0] if coords else None,
        longitude=coords[1] if coords else None,
        draw_estimate=draw_estimate,
        availability_preference=availability_preference,
        genres=get_or_create_genres(session, genres),
    )
    session.add(artist)
    session.flush()
    return artist


def seed_match(
    session: Session,
    artist: ArtistProfile,
    show: Show,
    score: int = 50,
    status: MatchStatus = MatchStatus.SUGGESTED,
) -> Match:
    match = Match(artist_id=artist.id, show_id=show.id, score=score, status=status.value)
    session.add(match)
    session.flush()
    return match


def random_id() -> str:
    return str(uuid.uuid4())
