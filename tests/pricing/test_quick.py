"""Tests for the follower-count-only quick estimate."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from ratecard.domain.types import ContentFormat, CreatorTier, Platform
from ratecard.pricing.engine import price
from ratecard.pricing.quick import (
    BRAND_WORK_FACTOR,
    COMPLEX_PRODUCTION,
    DEMOGRAPHICS_FACTOR,
    ENGAGEMENT_FACTOR,
    EXCLUSIVITY,
    GROWTH_FACTOR,
    HIGH_ENGAGEMENT,
    LOCATION_FACTOR,
    NICHE_AUTHORITY_FACTOR,
    Q4_HOLIDAY,
    QUALITY_FACTOR,
    USAGE_RIGHTS,
    WHITELISTING,
    calculate_percentile,
    missing_factors,
    quick_estimate,
    relevant_factors,
)


class TestQuickEstimate:
    """Golden estimates and result shape."""

    @pytest.mark.parametrize(
        ("followers", "platform", "content_format", "niche", "expected"),
        [
            (25_000, Platform.INSTAGRAM, ContentFormat.STATIC, "lifestyle", "400"),
            (25_000, Platform.TIKTOK, ContentFormat.STATIC, "lifestyle", "360"),
            (25_000, Platform.INSTAGRAM, ContentFormat.STATIC, "finance", "800"),
            (25_000, Platform.INSTAGRAM, ContentFormat.STATIC, "business", "720"),
            (25_000, Platform.INSTAGRAM, ContentFormat.STATIC, "tech", "680"),
            (25_000, Platform.INSTAGRAM, ContentFormat.STATIC, "beauty", "520"),
            (25_000, Platform.INSTAGRAM, ContentFormat.STATIC, "gaming", "380"),
            (100_000, Platform.YOUTUBE, ContentFormat.VIDEO, "tech", "4820"),
        ],
        ids=["baseline", "tiktok", "finance", "business", "tech", "beauty", "gaming", "rising"],
    )
    def test_golden_values(self, followers, platform, content_format, niche, expected):
        estimate = quick_estimate(followers, platform, content_format, niche)
        assert estimate.base_rate == Decimal(expected)

    def test_baseline_shape(self):
        estimate = quick_estimate(25_000, Platform.INSTAGRAM, ContentFormat.STATIC, "lifestyle")

        assert estimate.tier == CreatorTier.MICRO
        assert estimate.tier_name == "Micro"
        assert (estimate.min_rate, estimate.max_rate) == (Decimal("320"), Decimal("480"))
        assert estimate.percentile == 50
        assert estimate.top_performer_range == (Decimal("550"), Decimal("750"))
        assert estimate.potential_with_full_profile == Decimal("1248")
        assert estimate.factors == [HIGH_ENGAGEMENT, USAGE_RIGHTS, EXCLUSIVITY, Q4_HOLIDAY]
        assert estimate.missing_factors == [
            ENGAGEMENT_FACTOR,
            LOCATION_FACTOR,
            BRAND_WORK_FACTOR,
            NICHE_AUTHORITY_FACTOR,
        ]

    def test_accepts_string_enums(self):
        estimate = quick_estimate(25_000, "tiktok", "reel")
        assert estimate.platform == Platform.TIKTOK
        assert estimate.niche is None

    def test_negative_followers_rejected(self):
        with pytest.raises(ValidationError):
            quick_estimate(-1, Platform.INSTAGRAM, ContentFormat.STATIC)

    def test_unknown_platform_rejected(self):
        with pytest.raises(ValidationError):
            quick_estimate(1_000, "myspace", ContentFormat.STATIC)

    @pytest.mark.parametrize(
        ("followers", "platform", "content_format", "niche"),
        [
            (3_000, Platform.TIKTOK, ContentFormat.REEL, "beauty"),
            (25_000, Platform.INSTAGRAM, ContentFormat.STATIC, "lifestyle"),
            (60_000, Platform.INSTAGRAM, ContentFormat.CAROUSEL, "fitness"),
            (100_000, Platform.YOUTUBE, ContentFormat.VIDEO, "tech"),
            (300_000, Platform.INSTAGRAM, ContentFormat.STATIC, "lifestyle"),
            (600_000, Platform.TIKTOK, ContentFormat.REEL, "finance"),
            (2_000_000, Platform.INSTAGRAM, ContentFormat.STATIC, "lifestyle"),
        ],
        ids=["nano", "micro", "mid", "rising", "macro", "mega", "celebrity"],
    )
    def test_agrees_with_price_at_assumed_engagement(
        self, make_profile, make_brief, followers, platform, content_format, niche
    ):
        profile = make_profile(
            followers=followers, platform=platform, engagement=Decimal("3"), niches=(niche,)
        )
        brief = make_brief(platform=platform, content_format=content_format)

        estimate = quick_estimate(followers, platform, content_format, niche)

        assert estimate.base_rate == price(profile, brief).price_per_deliverable

    @pytest.mark.parametrize(
        ("followers", "expected"),
        [(300_000, "3900"), (600_000, "7800"), (2_000_000, "19200")],
        ids=["macro_1_3x", "mega_1_3x", "celebrity_1_6x"],
    )
    def test_three_percent_lifts_low_benchmark_tiers(self, followers: int, expected: str):
        estimate = quick_estimate(followers, Platform.INSTAGRAM, ContentFormat.STATIC, "lifestyle")
        assert estimate.base_rate == Decimal(expected)


class TestFactors:
    """Tests for rate influencers and missing factors."""

    def test_nano_reel_factors(self):
        assert relevant_factors(CreatorTier.NANO, ContentFormat.REEL) == [
            HIGH_ENGAGEMENT,
            USAGE_RIGHTS,
            WHITELISTING,
            Q4_HOLIDAY,
        ]

    def test_video_factors_truncated_to_four(self):
        factors = relevant_factors(CreatorTier.MID, ContentFormat.VIDEO)
        assert len(factors) == 4
        assert COMPLEX_PRODUCTION not in factors

    def test_live_includes_complex_production_for_nano(self):
        assert relevant_factors(CreatorTier.NANO, ContentFormat.LIVE) == [
            HIGH_ENGAGEMENT,
            USAGE_RIGHTS,
            Q4_HOLIDAY,
            COMPLEX_PRODUCTION,
        ]

    def test_nano_tiktok_reel_missing(self):
        assert missing_factors(CreatorTier.NANO, Platform.TIKTOK, ContentFormat.REEL) == [
            ENGAGEMENT_FACTOR,
            LOCATION_FACTOR,
            GROWTH_FACTOR,
            QUALITY_FACTOR,
        ]

    def test_linkedin_skips_location_and_adds_demographics(self):
        assert missing_factors(CreatorTier.MID, Platform.LINKEDIN, ContentFormat.STORY) == [
            ENGAGEMENT_FACTOR,
            BRAND_WORK_FACTOR,
            DEMOGRAPHICS_FACTOR,
        ]


class TestPercentile:
    """Tests for percentile interpolation (micro: 275/400/550/750)."""

    @pytest.mark.parametrize(
        ("rate", "expected"),
        [("275", 25), ("400", 50), ("550", 75), ("750", 90), ("1500", 99), ("0", 0)],
        ids=["p25", "p50", "p75", "p90", "capped", "zero"],
    )
    def test_interpolation(self, rate: str, expected: int):
        assert calculate_percentile(Decimal(rate), CreatorTier.MICRO) == expected
