#!/usr/bin/env python3
"""
Scoring Models - Inputs and intermediate results for match scoring.

ArtistMatchProfile and ShowMatchContext are read-only views built from the
persisted artist/show/venue rows at sweep time. MatchScoreBreakdown only
lives for the duration of a single scoring call.
"""

import enum
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import FrozenSet, Optional, Union


class AvailabilityPreference(str, enum.Enum):
    """Which nights an artist is generally willing to play."""
    ANY_NIGHT = "ANY_NIGHT"
    WEEKENDS = "WEEKENDS"
    WEEKNIGHTS = "WEEKNIGHTS"
    SPECIFIC_DATES = "SPECIFIC_DATES"


@dataclass(frozen=True)
class ArtistMatchProfile:
    """Artist side of a scoring call."""
    genres: FrozenSet[str] = field(default_factory=frozenset)
    location: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    draw_estimate: Optional[int] = None
    availability_preference: Union[AvailabilityPreference, str] = AvailabilityPreference.ANY_NIGHT


@dataclass(frozen=True)
class ShowMatchContext:
    """Show side of a scoring call (show + its venue)."""
    show_date: Union[date, datetime]
    venue_capacity: Optional[int]
    genres: FrozenSet[str] = field(default_factory=frozenset)
    venue_city: str = ""
    venue_latitude: Optional[float] = None
    venue_longitude: Optional[float] = None
    compensation_type: Optional[str] = None


@dataclass(frozen=True)
class MatchScoreBreakdown:
    """Component scores, each in [0.0, 1.0]."""
    genre: float = 0.0
    location: float = 0.0
    capacity_draw: float = 0.0
    availability: float = 0.0
    compensation: float = 0.0

    def as_dict(self) -> dict:
        return {
            'genre': self.genre,
            'location': self.location,
            'capacity_draw': self.capacity_draw,
            'availability': self.availability,
            'compensation': self.compensation,
        }
