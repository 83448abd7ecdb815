#!/usr/bin/env python3
"""
Unit tests for weighted totals and end-to-end pair scoring.
"""

import unittest
from datetime import date

from core.scorer import (
    ArtistMatchProfile,
    ShowMatchContext,
    MatchScoreBreakdown,
    ScoringService,
    WEIGHTS,
    total_score,
    score_breakdown,
    compute_match_score,
)

COLUMBUS = (39.9612, -82.9988)
NEW_YORK = (40.7128, -74.0060)


class TestTotalScore(unittest.TestCase):

    def test_weights_sum_to_one(self):
        self.assertAlmostEqual(sum(WEIGHTS.values()), 1.0)
        self.assertEqual(set(WEIGHTS), {'genre', 'location', 'capacity_draw', 'availability', 'compensation'})

    def test_all_ones(self):
        self.assertEqual(total_score(MatchScoreBreakdown(1.0, 1.0, 1.0, 1.0, 1.0)), 100)

    def test_all_zeros(self):
        self.assertEqual(total_score(MatchScoreBreakdown()), 0)

    def test_single_components(self):
        self.assertEqual(total_score(MatchScoreBreakdown(genre=1.0)), 30)
        self.assertEqual(total_score(MatchScoreBreakdown(location=1.0)), 25)
        self.assertEqual(total_score(MatchScoreBreakdown(capacity_draw=1.0)), 20)
        self.assertEqual(total_score(MatchScoreBreakdown(availability=1.0)), 15)
        self.assertEqual(total_score(MatchScoreBreakdown(compensation=1.0)), 10)

    def test_rounds_half_up(self):
        # 0.25 * 10 = 2.5 -> 3 (round() would give 2)
        self.assertEqual(total_score(MatchScoreBreakdown(compensation=0.25)), 3)
        # 0.5 * 15 = 7.5 -> 8
        self.assertEqual(total_score(MatchScoreBreakdown(availability=0.5)), 8)

    def test_returns_int(self):
        self.assertIsInstance(total_score(MatchScoreBreakdown(genre=1 / 3)), int)


class TestComputeMatchScore(unittest.TestCase):
    """End-to-end scenarios for an artist/show pair."""

    def test_great_match(self):
        artist = ArtistMatchProfile(
            genres=frozenset({"punk", "hardcore"}),
            location="Columbus, OH",
            latitude=COLUMBUS[0],
            longitude=COLUMBUS[1],
            draw_estimate=60,
            availability_preference="ANY_NIGHT",
        )
        show = ShowMatchContext(
            genres=frozenset({"punk", "hardcore"}),
            venue_city="Columbus, OH",
            venue_latitude=COLUMBUS[0],
            venue_longitude=COLUMBUS[1],
            venue_capacity=80,
            show_date=date(2026, 3, 14),
            compensation_type="DOOR_SPLIT",
        )
        # 30 + 25 + 20 + 15 + 5
        score = compute_match_score(artist, show)
        self.assertGreater(score, 80)
        self.assertEqual(score, 95)

    def test_poor_match(self):
        artist = ArtistMatchProfile(
            genres=frozenset({"jazz", "blues"}),
            location="New York, NY",
            latitude=NEW_YORK[0],
            longitude=NEW_YORK[1],
            draw_estimate=500,
            availability_preference="WEEKENDS",
        )
        show = ShowMatchContext(
            genres=frozenset({"punk", "hardcore"}),
            venue_city="Columbus, OH",
            venue_latitude=COLUMBUS[0],
            venue_longitude=COLUMBUS[1],
            venue_capacity=50,
            show_date=date(2026, 3, 11),  # Wednesday
            compensation_type="GUARANTEE",
        )
        # Only the neutral compensation score contributes
        score = compute_match_score(artist, show)
        self.assertLess(score, 20)
        self.assertEqual(score, 5)

    def test_partial_match(self):
        artist = ArtistMatchProfile(
            genres=frozenset({"punk", "rock"}),
            latitude=COLUMBUS[0],
            longitude=COLUMBUS[1],
            draw_estimate=30,
            availability_preference="WEEKENDS",
        )
        show = ShowMatchContext(
            genres=frozenset({"punk", "hardcore"}),
            venue_latitude=COLUMBUS[0],
            venue_longitude=COLUMBUS[1],
            venue_capacity=200,
            show_date=date(2026, 3, 14),  # Saturday
            compensation_type="DOOR_SPLIT",
        )
        # genre 1/3, location 1, capacity 0 (ratio 0.15), availability 1, compensation 0.5
        score = compute_match_score(artist, show)
        self.assertGreater(score, 30)
        self.assertLess(score, 70)
        self.assertEqual(score, 55)

    def test_missing_data_still_scores_other_components(self):
        artist = ArtistMatchProfile(genres=frozenset({"punk"}), draw_estimate=None)
        show = ShowMatchContext(show_date=date(2026, 3, 14), venue_capacity=100, genres=frozenset({"punk"}))
        breakdown = score_breakdown(artist, show)
        self.assertEqual(breakdown.location, 0.0)
        self.assertEqual(breakdown.capacity_draw, 0.0)
        self.assertEqual(breakdown.genre, 1.0)
        # 30 + 0 + 0 + 15 + 5
        self.assertEqual(compute_match_score(artist, show), 50)

    def test_deterministic(self):
        artist = ArtistMatchProfile(genres=frozenset({"emo", "punk"}), draw_estimate=45)
        show = ShowMatchContext(show_date=date(2026, 3, 12), venue_capacity=60, genres=frozenset({"emo"}))
        scores = {compute_match_score(artist, show) for _ in range(10)}
        self.assertEqual(len(scores), 1)


class TestScoringService(unittest.TestCase):

    def setUp(self):
        self.service = ScoringService(min_score=10)
        self.show = ShowMatchContext(
            genres=frozenset({"punk"}),
            venue_latitude=COLUMBUS[0],
            venue_longitude=COLUMBUS[1],
            venue_capacity=100,
            show_date=date(2026, 3, 14),
        )

    def test_out_of_range_pair_is_not_scored(self):
        artist = ArtistMatchProfile(genres=frozenset({"punk"}), latitude=NEW_YORK[0], longitude=NEW_YORK[1])
        evaluation = self.service.evaluate(artist, self.show)
        self.assertFalse(evaluation.within_distance)
        self.assertIsNone(evaluation.score)
        self.assertFalse(evaluation.qualifies)

    def test_below_threshold(self):
        artist = ArtistMatchProfile(genres=frozenset({"jazz"}), availability_preference="WEEKNIGHTS")
        evaluation = self.service.evaluate(artist, self.show)
        self.assertTrue(evaluation.within_distance)
        self.assertEqual(evaluation.score, 5)
        self.assertFalse(evaluation.qualifies)

    def test_threshold_is_inclusive(self):
        artist = ArtistMatchProfile(genres=frozenset({"jazz"}), availability_preference="SPECIFIC_DATES")
        # 0 + 0 + 0 + 7.5 + 5 = 12.5 -> 13
        evaluation = ScoringService(min_score=13).evaluate(artist, self.show)
        self.assertEqual(evaluation.score, 13)
        self.assertTrue(evaluation.qualifies)


if __name__ == '__main__':
    unittest.main(verbosity=2)
