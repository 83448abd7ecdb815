#!/usr/bin/env python3
"""
Scoring Module - Artist/show compatibility scoring.

Public API:
- compute_match_score: Overall 0-100 score for an artist/show pair
- is_within_match_distance: Geographic pre-filter (fails open)
- ScoringService: Pre-filter + score + threshold, used by the sweep

Submodules:

- models.py: Inputs (ArtistMatchProfile, ShowMatchContext) and MatchScoreBreakdown
- components.py: Genre, capacity/draw, availability and compensation scores
- distance.py: Haversine distance and location score
- service.py: Weights, total score and ScoringService
- persistence.py: Score-only upsert of match records
"""

from core.scorer.models import (
    AvailabilityPreference,
    ArtistMatchProfile,
    ShowMatchContext,
    MatchScoreBreakdown,
)
from core.scorer.components import (
    genre_score,
    capacity_draw_score,
    availability_score,
    compensation_score,
)
from core.scorer.distance import (
    MAX_MATCH_DISTANCE_MILES,
    haversine_distance,
    location_score,
    is_within_match_distance,
)
from core.scorer.service import (
    MIN_MATCH_SCORE,
    WEIGHTS,
    ScoringService,
    total_score,
    score_breakdown,
    compute_match_score,
)

__all__ = [
    'AvailabilityPreference',
    'ArtistMatchProfile',
    'ShowMatchContext',
    'MatchScoreBreakdown',
    'genre_score',
    'capacity_draw_score',
    'availability_score',
    'compensation_score',
    'MAX_MATCH_DISTANCE_MILES',
    'haversine_distance',
    'location_score',
    'is_within_match_distance',
    'MIN_MATCH_SCORE',
    'WEIGHTS',
    'ScoringService',
    'total_score',
    'score_breakdown',
    'compute_match_score',
]
