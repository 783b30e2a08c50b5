"""Tests for the annual-probability lookup table."""

import pytest

from hazardrisk.services.probability import INSUFFICIENT_DATA, estimate


class TestEstimate:
    @pytest.mark.parametrize(
        "score, text",
        [
            (0, "< 0.1%"),
            (5, "< 0.1%"),
            (15, "~0.1–0.5%"),
            (30, "~0.5–2%"),
            (50, "~2–5%"),
            (70, "~5–15%"),
            (85, "~15–30%"),
            (85.01, "> 30%"),
            (100, "> 30%"),
        ],
    )
    def test_boundary_table(self, score, text):
        assert estimate(score).text == text

    def test_bucket_carries_fixed_detail_and_odds(self):
        result = estimate(42.3)
        assert result.detail == "Roughly 1 in 20 to 1 in 50 per year"
        assert result.odds == pytest.approx(0.035)

    def test_odds_are_fixed_per_bucket(self):
        assert estimate(16).odds == estimate(29.9).odds

    def test_absent_score_is_insufficient_data(self):
        result = estimate(None)
        assert result is INSUFFICIENT_DATA
        assert result.detail == ""
        assert result.odds is None
        assert not result.has_data

    def test_negative_score_is_insufficient_data(self):
        assert estimate(-1) is INSUFFICIENT_DATA

    def test_idempotent(self):
        assert estimate(63.0) == estimate(63.0)
