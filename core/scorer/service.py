#!/usr/bin/env python3
"""
Scoring Service - Weighted combination of the component scores.

total_score() and compute_match_score() are pure and safe to call from any
number of threads. ScoringService adds the distance pre-filter and the
persistence threshold on top, for use by the match generation sweep.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from core.scorer.models import ArtistMatchProfile, ShowMatchContext, MatchScoreBreakdown
from core.scorer.components import (
    genre_score,
    capacity_draw_score,
    availability_score,
    compensation_score,
)
from core.scorer.distance import location_score, is_within_match_distance

logger = logging.getLogger(__name__)

WEIGHTS = {
    'genre': 0.30,
    'location': 0.25,
    'capacity_draw': 0.20,
    'availability': 0.15,
    'compensation': 0.10,
}

MIN_MATCH_SCORE = 10


def total_score(breakdown: MatchScoreBreakdown) -> int:
    """
    Weighted sum of the components scaled to 0-100.

    Rounds half up (2.5 -> 3), unlike Python's round().
    """
    weighted = (
        breakdown.genre * WEIGHTS['genre']
        + breakdown.location * WEIGHTS['location']
        + breakdown.capacity_draw * WEIGHTS['capacity_draw']
        + breakdown.availability * WEIGHTS['availability']
        + breakdown.compensation * WEIGHTS['compensation']
    )
    score = int(math.floor(weighted * 100 + 0.5))
    return max(0, min(100, score))


def score_breakdown(artist: ArtistMatchProfile, show: ShowMatchContext) -> MatchScoreBreakdown:
    return MatchScoreBreakdown(
        genre=genre_score(artist.genres, show.genres),
        location=location_score(
            artist.latitude,
            artist.longitude,
            show.venue_latitude,
            show.venue_longitude,
        ),
        capacity_draw=capacity_draw_score(artist.draw_estimate, show.venue_capacity),
        availability=availability_score(artist.availability_preference, show.show_date),
        compensation=compensation_score(show.compensation_type),
    )


def compute_match_score(artist: ArtistMatchProfile, show: ShowMatchContext) -> int:
    """Overall match score (0-100) for an artist/show pair."""
    return total_score(score_breakdown(artist, show))


@dataclass
class PairEvaluation:
    """Outcome of evaluating one artist/show pair during a sweep."""
    within_distance: bool
    score: Optional[int] = None
    qualifies: bool = False


class ScoringService:
    """
    Applies the distance pre-filter, scores the pair and checks the
    persistence threshold.
    """

    def __init__(self, min_score: int = MIN_MATCH_SCORE):
        self.min_score = min_score

    def evaluate(self, artist: ArtistMatchProfile, show: ShowMatchContext) -> PairEvaluation:
        if not is_within_match_distance(artist, show):
            return PairEvaluation(within_distance=False)

        breakdown = score_breakdown(artist, show)
        score = total_score(breakdown)
        logger.debug(f"Pair scored {score}: {breakdown.as_dict()}")

        return PairEvaluation(
            within_distance=True,
            score=score,
            qualifies=score >= self.min_score,
        )
