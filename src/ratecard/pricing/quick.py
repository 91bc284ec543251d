"""Instant rate estimate from a follower count alone.

Used where no profile or brief exists yet.  The estimate assumes an average
3% engagement rate, a US audience and a neutral deal, then applies the same
tier, engagement, platform, niche and format rules as the full engine, so a
neutral ``price`` call at 3% engagement and ``quick_estimate`` always agree on
the base rate.  A +/-20% range covers everything the estimate cannot see.
"""

from decimal import ROUND_HALF_UP, Decimal

import structlog
from pydantic import BaseModel, ConfigDict, Field

from ratecard.domain.types import (
    TIER_DISPLAY_NAMES,
    ContentFormat,
    CreatorTier,
    Platform,
)
from ratecard.pricing.benchmarks import (
    FORMAT_PREMIUMS,
    PLATFORM_MULTIPLIERS,
    get_niche_premium,
    require_coverage,
)
from ratecard.pricing.engine import engagement_multiplier
from ratecard.pricing.rounding import round_money
from ratecard.pricing.tiers import get_base_rate, resolve_tier

logger = structlog.get_logger()

# Industry average engagement, compared to the tier benchmark like any profile
ASSUMED_ENGAGEMENT_RATE = Decimal("3")

ESTIMATE_RANGE = Decimal("0.2")

# High engagement (1.6x), usage rights (+50%) and exclusivity (+30%)
FULL_PROFILE_UPLIFT = Decimal("1.6") * Decimal("1.5") * Decimal("1.3")

MAX_LISTED_FACTORS = 4


class RateInfluencer(BaseModel, frozen=True):
    """Something that could push the creator's rate above the estimate."""

    name: str
    description: str
    potential_increase: str


class MissingFactor(BaseModel, frozen=True):
    """Information the estimate had to assume and a full profile would supply."""

    name: str
    impact: str
    description: str


class TierPercentiles(BaseModel, frozen=True):
    """Estimated per-deliverable rate percentiles for a tier."""

    p25: Decimal
    p50: Decimal
    p75: Decimal
    p90: Decimal


def _percentiles(p25: str, p50: str, p75: str, p90: str) -> TierPercentiles:
    return TierPercentiles(
        p25=Decimal(p25), p50=Decimal(p50), p75=Decimal(p75), p90=Decimal(p90)
    )


# Industry estimates, not aggregated user data
ESTIMATED_TIER_RANGES = require_coverage(
    "ESTIMATED_TIER_RANGES",
    {
        CreatorTier.NANO: _percentiles("100", "150", "225", "350"),
        CreatorTier.MICRO: _percentiles("275", "400", "550", "750"),
        CreatorTier.MID: _percentiles("550", "800", "1100", "1500"),
        CreatorTier.RISING: _percentiles("1000", "1500", "2100", "3000"),
        CreatorTier.MACRO: _percentiles("2000", "3000", "4500", "6500"),
        CreatorTier.MEGA: _percentiles("4000", "6000", "9000", "14000"),
        CreatorTier.CELEBRITY: _percentiles("8000", "12000", "20000", "35000"),
    },
    CreatorTier,
)

HIGH_ENGAGEMENT = RateInfluencer(
    name="High Engagement",
    description="Engagement rate above 5% commands premium rates",
    potential_increase="+20-60%",
)
USAGE_RIGHTS = RateInfluencer(
    name="Usage Rights",
    description="Brands using your content in ads pay more",
    potential_increase="+25-100%",
)
EXCLUSIVITY = RateInfluencer(
    name="Exclusivity",
    description="Not working with competitors justifies higher rates",
    potential_increase="+30-50%",
)
WHITELISTING = RateInfluencer(
    name="Whitelisting",
    description="Allowing brands to run your content as ads",
    potential_increase="+50-200%",
)
Q4_HOLIDAY = RateInfluencer(
    name="Q4 Holiday Season",
    description="Brands pay more during peak shopping seasons",
    potential_increase="+15-25%",
)
COMPLEX_PRODUCTION = RateInfluencer(
    name="Complex Production",
    description="Multi-location shoots or professional editing",
    potential_increase="+15-50%",
)

RATE_INFLUENCERS: tuple[RateInfluencer, ...] = (
    HIGH_ENGAGEMENT,
    USAGE_RIGHTS,
    EXCLUSIVITY,
    WHITELISTING,
    Q4_HOLIDAY,
    COMPLEX_PRODUCTION,
)

ENGAGEMENT_FACTOR = MissingFactor(
    name="Your Actual Engagement",
    impact="±30%",
    description=(
        f"High engagement means higher rates. We assumed {ASSUMED_ENGAGEMENT_RATE}% average."
    ),
)
LOCATION_FACTOR = MissingFactor(
    name="Audience Location",
    impact="+40%",
    description="US and UK audiences pay significantly more than the global average.",
)
BRAND_WORK_FACTOR = MissingFactor(
    name="Past Brand Work",
    impact="+15-25%",
    description="A portfolio with recognizable brands justifies premium rates.",
)
QUALITY_FACTOR = MissingFactor(
    name="Content Quality",
    impact="+20-50%",
    description="Professional production value commands higher rates.",
)
DEMOGRAPHICS_FACTOR = MissingFactor(
    name="Audience Demographics",
    impact="+20-35%",
    description="Age, income level and interests affect brand value.",
)
GROWTH_FACTOR = MissingFactor(
    name="Growth Velocity",
    impact="+10-20%",
    description="Fast-growing accounts command premium rates.",
)
NICHE_AUTHORITY_FACTOR = MissingFactor(
    name="Niche Authority",
    impact="+15-30%",
    description="Being a recognized expert in your niche adds value.",
)

VIDEO_FORMATS = frozenset({ContentFormat.REEL, ContentFormat.VIDEO, ContentFormat.LIVE})
STILL_FORMATS = frozenset({ContentFormat.STATIC, ContentFormat.CAROUSEL})


class QuickEstimateInput(BaseModel):
    """The minimal inputs a quick estimate accepts."""

    model_config = ConfigDict(frozen=True)

    follower_count: int = Field(ge=0)
    platform: Platform
    content_format: ContentFormat
    niche: str | None = None


class QuickEstimate(BaseModel, frozen=True):
    """A rate range with the factors that could move it.

    Attributes:
        base_rate: Point estimate, rounded to the nearest $5.
        min_rate: Low end of the +/-20% range.
        max_rate: High end of the +/-20% range.
        percentile: Where ``base_rate`` falls among creators of the tier,
            from industry estimates.
        top_performer_range: (p75, p90) rates for the tier.
        potential_with_full_profile: Rate with high engagement, usage
            rights and exclusivity.
    """

    tier: CreatorTier
    tier_name: str
    platform: Platform
    content_format: ContentFormat
    niche: str | None
    base_rate: Decimal
    min_rate: Decimal
    max_rate: Decimal
    factors: list[RateInfluencer]
    missing_factors: list[MissingFactor]
    percentile: int
    top_performer_range: tuple[Decimal, Decimal]
    potential_with_full_profile: Decimal


def _round_whole(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_percentile(rate: Decimal, tier: CreatorTier) -> int:
    """Estimate the percentile of ``rate`` among creators of the same tier.

    Interpolates linearly between the tier's p25, p50, p75 and p90 rates and
    caps the result at 99.
    """
    r = ESTIMATED_TIER_RANGES[tier]
    if rate <= r.p25:
        return _round_whole(rate / r.p25 * 25)
    if rate <= r.p50:
        return 25 + _round_whole((rate - r.p25) / (r.p50 - r.p25) * 25)
    if rate <= r.p75:
        return 50 + _round_whole((rate - r.p50) / (r.p75 - r.p50) * 25)
    if rate <= r.p90:
        return 75 + _round_whole((rate - r.p75) / (r.p90 - r.p75) * 15)
    return min(99, 90 + _round_whole((rate - r.p90) / r.p90 * 9))


def relevant_factors(tier: CreatorTier, content_format: ContentFormat) -> list[RateInfluencer]:
    """Pick up to four rate influencers that apply to this creator."""
    factors = [HIGH_ENGAGEMENT, USAGE_RIGHTS]
    if tier is not CreatorTier.NANO:
        factors.append(EXCLUSIVITY)
    if content_format in (ContentFormat.REEL, ContentFormat.VIDEO):
        factors.append(WHITELISTING)
    factors.append(Q4_HOLIDAY)
    if content_format in (ContentFormat.VIDEO, ContentFormat.LIVE):
        factors.append(COMPLEX_PRODUCTION)
    return factors[:MAX_LISTED_FACTORS]


def missing_factors(
    tier: CreatorTier, platform: Platform, content_format: ContentFormat
) -> list[MissingFactor]:
    """Pick up to four assumptions a full profile would replace."""
    factors = [ENGAGEMENT_FACTOR]
    if platform is not Platform.LINKEDIN:
        factors.append(LOCATION_FACTOR)
    factors.append(GROWTH_FACTOR if tier is CreatorTier.NANO else BRAND_WORK_FACTOR)
    if content_format in VIDEO_FORMATS:
        factors.append(QUALITY_FACTOR)
    elif content_format in STILL_FORMATS:
        factors.append(NICHE_AUTHORITY_FACTOR)
    if tier not in (CreatorTier.NANO, CreatorTier.MICRO):
        factors.append(DEMOGRAPHICS_FACTOR)
    return factors[:MAX_LISTED_FACTORS]


def quick_estimate(
    follower_count: int,
    platform: Platform | str,
    content_format: ContentFormat | str,
    niche: str | None = None,
) -> QuickEstimate:
    """Estimate a per-deliverable rate from minimal inputs.

    Formula: base(tier) x platform x engagement(3%, tier) x niche x (1 +
    format premium), rounded to the nearest $5, with a +/-20% range.

    Args:
        follower_count: Total followers. Must not be negative.
        platform: Platform the content runs on.
        content_format: Content format.
        niche: Optional free-text niche; unlisted niches are neutral.

    Returns:
        QuickEstimate with the range, percentile and the factors that could
        change it.

    Raises:
        pydantic.ValidationError: If the follower count is negative or the
            platform or format is unknown.
    """
    request = QuickEstimateInput(
        follower_count=follower_count,
        platform=platform,
        content_format=content_format,
        niche=niche,
    )
    tier = resolve_tier(request.follower_count)

    rate = (
        get_base_rate(tier)
        * PLATFORM_MULTIPLIERS[request.platform]
        * engagement_multiplier(ASSUMED_ENGAGEMENT_RATE, tier)
        * get_niche_premium(request.niche)
        * (1 + FORMAT_PREMIUMS[request.content_format])
    )
    base_rate = round_money(rate)
    ranges = ESTIMATED_TIER_RANGES[tier]

    estimate = QuickEstimate(
        tier=tier,
        tier_name=TIER_DISPLAY_NAMES[tier],
        platform=request.platform,
        content_format=request.content_format,
        niche=request.niche,
        base_rate=base_rate,
        min_rate=round_money(rate * (1 - ESTIMATE_RANGE)),
        max_rate=round_money(rate * (1 + ESTIMATE_RANGE)),
        factors=relevant_factors(tier, request.content_format),
        missing_factors=missing_factors(tier, request.platform, request.content_format),
        percentile=calculate_percentile(base_rate, tier),
        top_performer_range=(ranges.p75, ranges.p90),
        potential_with_full_profile=Decimal(_round_whole(base_rate * FULL_PROFILE_UPLIFT)),
    )

    logger.debug(
        "quick_estimate_complete",
        tier=tier.value,
        platform=request.platform.value,
        base_rate=str(base_rate),
    )
    return estimate
