#!/usr/bin/env python3
"""
Distance Calculations - Great-circle distance and location scoring.

Coordinates are decimal degrees. Any missing coordinate means "no location
signal": the location component scores 0.0, while the distance pre-filter
lets the pair through so the remaining components can still be scored.
"""

import math
from typing import Optional

from core.scorer.models import ArtistMatchProfile, ShowMatchContext

EARTH_RADIUS_MILES = 3958.8
MAX_MATCH_DISTANCE_MILES = 150


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points, in miles."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _has_coordinates(*values: Optional[float]) -> bool:
    return all(v is not None for v in values)


def location_score(
    artist_lat: Optional[float],
    artist_lng: Optional[float],
    venue_lat: Optional[float],
    venue_lng: Optional[float],
) -> float:
    """
    Linear decay from 1.0 (co-located) to 0.0 at MAX_MATCH_DISTANCE_MILES.

    Returns 0.0 when any coordinate is missing.
    """
    if not _has_coordinates(artist_lat, artist_lng, venue_lat, venue_lng):
        return 0.0

    distance = haversine_distance(artist_lat, artist_lng, venue_lat, venue_lng)
    if distance >= MAX_MATCH_DISTANCE_MILES:
        return 0.0
    return 1.0 - distance / MAX_MATCH_DISTANCE_MILES


def is_within_match_distance(artist: ArtistMatchProfile, show: ShowMatchContext) -> bool:
    """
    Cheap pre-filter applied before scoring.

    Fails open: if either side lacks coordinates the pair is allowed and
    left to score-based filtering.
    """
    if not _has_coordinates(artist.latitude, artist.longitude, show.venue_latitude, show.venue_longitude):
        return True
    distance = haversine_distance(
        artist.latitude, artist.longitude,
        show.venue_latitude, show.venue_longitude,
    )
    return distance <= MAX_MATCH_DISTANCE_MILES
