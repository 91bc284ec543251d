"""Tests for tier resolution and per-tier lookups."""

from decimal import Decimal

import pytest

from ratecard.domain.types import TIER_ORDER, CreatorTier, tier_rank
from ratecard.pricing.tiers import (
    get_base_rate,
    get_engagement_benchmark,
    get_event_day_rate,
    get_market_benchmark,
    get_minimum_acceptable_percentage,
    resolve_tier,
)


class TestResolveTier:
    """Tests for follower-count to tier mapping."""

    @pytest.mark.parametrize(
        ("reach", "tier"),
        [
            (0, CreatorTier.NANO),
            (9_999, CreatorTier.NANO),
            (10_000, CreatorTier.MICRO),
            (49_999, CreatorTier.MICRO),
            (50_000, CreatorTier.MID),
            (100_000, CreatorTier.RISING),
            (250_000, CreatorTier.MACRO),
            (500_000, CreatorTier.MEGA),
            (999_999, CreatorTier.MEGA),
            (1_000_000, CreatorTier.CELEBRITY),
            (50_000_000, CreatorTier.CELEBRITY),
        ],
        ids=[
            "zero",
            "nano_top",
            "micro_floor",
            "micro_top",
            "mid_floor",
            "rising_floor",
            "macro_floor",
            "mega_floor",
            "mega_top",
            "celebrity_floor",
            "huge",
        ],
    )
    def test_boundaries_belong_to_higher_tier(self, reach: int, tier: CreatorTier):
        assert resolve_tier(reach) == tier

    @pytest.mark.parametrize("reach", [None, -5, float("nan")], ids=["none", "negative", "nan"])
    def test_invalid_reach_is_nano(self, reach):
        assert resolve_tier(reach) == CreatorTier.NANO

    def test_monotonic(self):
        reaches = [0, 5_000, 10_000, 20_000, 50_000, 75_000, 100_000, 300_000, 600_000, 2_000_000]
        ranks = [tier_rank(resolve_tier(r)) for r in reaches]
        assert ranks == sorted(ranks)
        assert {resolve_tier(r) for r in reaches} == set(TIER_ORDER)


class TestTierLookups:
    """Tests for per-tier benchmark lookups."""

    def test_base_rates(self):
        assert get_base_rate(CreatorTier.MICRO) == Decimal("400")
        assert get_base_rate(CreatorTier.RISING) == Decimal("1500")
        assert get_base_rate(CreatorTier.MEGA) == Decimal("6000")

    def test_market_benchmark(self):
        assert get_market_benchmark(CreatorTier.MID) == Decimal("800")

    def test_minimum_percentage_strictly_increasing(self):
        percentages = [get_minimum_acceptable_percentage(t) for t in TIER_ORDER]
        assert all(a < b for a, b in zip(percentages, percentages[1:]))
        assert percentages[0] == Decimal("0.60")
        assert percentages[-1] == Decimal("0.90")

    def test_engagement_benchmark(self):
        assert get_engagement_benchmark(CreatorTier.MICRO) == Decimal("3.5")

    def test_event_day_rate(self):
        assert get_event_day_rate(CreatorTier.MACRO) == Decimal("1500")
