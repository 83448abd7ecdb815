#!/usr/bin/env python3
"""
Match status transitions applied by the interaction layer.

The generation sweep never changes a match's status; these rules are what
artists, venues and admins use to move a match through its lifecycle:

    SUGGESTED --artist like--> LIKED_BY_ARTIST --venue like--> MUTUAL
    SUGGESTED --venue like---> LIKED_BY_VENUE  --artist like-> MUTUAL
    any --pass--> PASSED
    any --reconsider / admin reset--> SUGGESTED
"""

import enum
from typing import Union

from database.models import MatchStatus


class MatchSide(str, enum.Enum):
    ARTIST = "ARTIST"
    VENUE = "VENUE"


_LIKE_TRANSITIONS = {
    MatchSide.ARTIST: {
        MatchStatus.SUGGESTED: MatchStatus.LIKED_BY_ARTIST,
        MatchStatus.LIKED_BY_VENUE: MatchStatus.MUTUAL,
    },
    MatchSide.VENUE: {
        MatchStatus.SUGGESTED: MatchStatus.LIKED_BY_VENUE,
        MatchStatus.LIKED_BY_ARTIST: MatchStatus.MUTUAL,
    },
}


def status_after_like(
    current: Union[MatchStatus, str],
    side: Union[MatchSide, str],
) -> MatchStatus:
    """Status after one side likes the match. Unlisted statuses are unchanged."""
    current = MatchStatus(current)
    return _LIKE_TRANSITIONS[MatchSide(side)].get(current, current)


def status_after_pass(current: Union[MatchStatus, str]) -> MatchStatus:
    return MatchStatus.PASSED


def status_after_reconsider(current: Union[MatchStatus, str]) -> MatchStatus:
    return MatchStatus.SUGGESTED
