#!/usr/bin/env python3
"""
Component Scores - Genre, capacity/draw, availability and compensation.

Each function returns a float in [0.0, 1.0]. Inputs are not validated:
None or zero numeric inputs mean "no signal" and score 0.
"""

from datetime import date, datetime, timezone
from typing import Iterable, Optional, Union

from core.scorer.models import AvailabilityPreference

# Draw as a fraction of venue capacity
SWEET_SPOT_MIN_RATIO = 0.6
SWEET_SPOT_MAX_RATIO = 0.9
IDEAL_RATIO = 0.75

# Placeholders until calendar matching and compensation preferences exist
SPECIFIC_DATES_SCORE = 0.5
NEUTRAL_COMPENSATION_SCORE = 0.5

# date.weekday(): Monday == 0 ... Sunday == 6
WEEKEND_DAYS = frozenset({4, 5, 6})
WEEKNIGHT_DAYS = frozenset({0, 1, 2, 3})


def genre_score(artist_genres: Iterable[str], show_genres: Iterable[str]) -> float:
    """
    Jaccard similarity of two genre sets.

    Returns 0.0 if either set is empty.
    """
    a = set(artist_genres)
    b = set(show_genres)
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def capacity_draw_score(draw: Optional[int], capacity: Optional[int]) -> float:
    """
    How well an artist's expected draw fits the room.

    Full marks when draw is 60-90% of capacity. Overselling (ratio > 1.0)
    decays twice as fast as underselling around the 0.75 ideal.
    """
    if not draw or not capacity:
        return 0.0

    ratio = draw / capacity

    if SWEET_SPOT_MIN_RATIO <= ratio <= SWEET_SPOT_MAX_RATIO:
        return 1.0

    if ratio > 1.0:
        return max(0.0, 1.0 - (ratio - 1.0) * 2)

    return max(0.0, 1.0 - abs(ratio - IDEAL_RATIO) * 2)


def _utc_weekday(show_date: Union[date, datetime]) -> int:
    if isinstance(show_date, datetime):
        if show_date.tzinfo is not None:
            show_date = show_date.astimezone(timezone.utc)
        return show_date.weekday()
    return show_date.weekday()


def availability_score(
    preference: Union[AvailabilityPreference, str, None],
    show_date: Union[date, datetime],
) -> float:
    """
    Match the artist's night preference against the show's UTC weekday.

    WEEKENDS covers Fri/Sat/Sun, WEEKNIGHTS covers Mon-Thu. SPECIFIC_DATES
    and unknown values get a neutral 0.5.
    """
    try:
        preference = AvailabilityPreference(preference)
    except ValueError:
        return SPECIFIC_DATES_SCORE

    if preference is AvailabilityPreference.ANY_NIGHT:
        return 1.0

    weekday = _utc_weekday(show_date)

    if preference is AvailabilityPreference.WEEKENDS:
        return 1.0 if weekday in WEEKEND_DAYS else 0.0
    if preference is AvailabilityPreference.WEEKNIGHTS:
        return 1.0 if weekday in WEEKNIGHT_DAYS else 0.0

    return SPECIFIC_DATES_SCORE


def compensation_score(show_compensation_type: Optional[str]) -> float:
    """Neutral for every input; artist compensation preferences are not modeled yet."""
    return NEUTRAL_COMPENSATION_SCORE
