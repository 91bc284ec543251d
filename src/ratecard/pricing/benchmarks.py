"""Static benchmark tables for creator pricing.

Every table maps a closed enumeration to an exact ``Decimal`` factor and is
wrapped in ``MappingProxyType`` so it cannot be mutated at runtime.  Each
table is checked for total coverage of its enumeration when this module is
imported, so a new platform, niche or tier without a rate fails loudly at
startup instead of silently pricing at a default.

Premiums are stored as additive fractions (``Decimal("0.25")`` means +25%);
multipliers are stored as the factor itself (``Decimal("1.4")`` means 1.4x).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from types import MappingProxyType
from typing import TypeVar

from ratecard.domain.errors import BenchmarkTableError
from ratecard.domain.types import (
    AffiliateCategory,
    ComplexityLevel,
    ContentFormat,
    CreatorTier,
    CurrencyCode,
    DealLength,
    ExclusivityLevel,
    Niche,
    Platform,
    QualityLevel,
    Region,
    SeasonalPeriod,
    UGCFormat,
    WhitelistingType,
)

K = TypeVar("K", bound=StrEnum)
V = TypeVar("V")


def require_coverage(name: str, table: dict[K, V], enum: type[K]) -> Mapping[K, V]:
    """Freeze a table after checking it has an entry for every enum member.

    Args:
        name: Table name used in the error message.
        table: The mapping to validate.
        enum: The enumeration the table must cover.

    Returns:
        A read-only view of ``table``.

    Raises:
        BenchmarkTableError: If any member of ``enum`` is missing.
    """
    missing = [member for member in enum if member not in table]
    if missing:
        raise BenchmarkTableError(name, missing)
    return MappingProxyType(table)


# -- Tier tables --------------------------------------------------------------

# Lower follower bound (inclusive) of each tier
TIER_THRESHOLDS = require_coverage(
    "TIER_THRESHOLDS",
    {
        CreatorTier.NANO: 0,
        CreatorTier.MICRO: 10_000,
        CreatorTier.MID: 50_000,
        CreatorTier.RISING: 100_000,
        CreatorTier.MACRO: 250_000,
        CreatorTier.MEGA: 500_000,
        CreatorTier.CELEBRITY: 1_000_000,
    },
    CreatorTier,
)

BASE_RATES = require_coverage(
    "BASE_RATES",
    {
        CreatorTier.NANO: Decimal("150"),
        CreatorTier.MICRO: Decimal("400"),
        CreatorTier.MID: Decimal("800"),
        CreatorTier.RISING: Decimal("1500"),
        CreatorTier.MACRO: Decimal("3000"),
        CreatorTier.MEGA: Decimal("6000"),
        CreatorTier.CELEBRITY: Decimal("12000"),
    },
    CreatorTier,
)

# Reference rates for above/at/below market comparisons.  Kept separate from
# BASE_RATES so the two can diverge without touching the layer chain.
MARKET_BENCHMARKS = require_coverage(
    "MARKET_BENCHMARKS",
    {
        CreatorTier.NANO: Decimal("150"),
        CreatorTier.MICRO: Decimal("400"),
        CreatorTier.MID: Decimal("800"),
        CreatorTier.RISING: Decimal("1500"),
        CreatorTier.MACRO: Decimal("3000"),
        CreatorTier.MEGA: Decimal("6000"),
        CreatorTier.CELEBRITY: Decimal("12000"),
    },
    CreatorTier,
)

# Share of the quoted total a creator should hold firm on
MINIMUM_RATE_PERCENTAGES = require_coverage(
    "MINIMUM_RATE_PERCENTAGES",
    {
        CreatorTier.NANO: Decimal("0.60"),
        CreatorTier.MICRO: Decimal("0.65"),
        CreatorTier.MID: Decimal("0.70"),
        CreatorTier.RISING: Decimal("0.75"),
        CreatorTier.MACRO: Decimal("0.80"),
        CreatorTier.MEGA: Decimal("0.85"),
        CreatorTier.CELEBRITY: Decimal("0.90"),
    },
    CreatorTier,
)

# Expected engagement rate (percent) for each tier
ENGAGEMENT_BENCHMARKS = require_coverage(
    "ENGAGEMENT_BENCHMARKS",
    {
        CreatorTier.NANO: Decimal("5.0"),
        CreatorTier.MICRO: Decimal("3.5"),
        CreatorTier.MID: Decimal("2.5"),
        CreatorTier.RISING: Decimal("2.0"),
        CreatorTier.MACRO: Decimal("1.8"),
        CreatorTier.MEGA: Decimal("1.5"),
        CreatorTier.CELEBRITY: Decimal("1.2"),
    },
    CreatorTier,
)

EVENT_DAY_RATES = require_coverage(
    "EVENT_DAY_RATES",
    {
        CreatorTier.NANO: Decimal("500"),
        CreatorTier.MICRO: Decimal("750"),
        CreatorTier.MID: Decimal("1000"),
        CreatorTier.RISING: Decimal("1250"),
        CreatorTier.MACRO: Decimal("1500"),
        CreatorTier.MEGA: Decimal("1750"),
        CreatorTier.CELEBRITY: Decimal("2000"),
    },
    CreatorTier,
)

# -- Market tables ------------------------------------------------------------

PLATFORM_MULTIPLIERS = require_coverage(
    "PLATFORM_MULTIPLIERS",
    {
        Platform.INSTAGRAM: Decimal("1.0"),
        Platform.TIKTOK: Decimal("0.9"),
        Platform.YOUTUBE: Decimal("1.4"),
        Platform.YOUTUBE_SHORTS: Decimal("0.7"),
        Platform.TWITTER: Decimal("0.7"),
        Platform.THREADS: Decimal("0.6"),
        Platform.PINTEREST: Decimal("0.8"),
        Platform.LINKEDIN: Decimal("1.3"),
        Platform.BLUESKY: Decimal("0.5"),
        Platform.LEMON8: Decimal("0.6"),
        Platform.SNAPCHAT: Decimal("0.75"),
        Platform.TWITCH: Decimal("1.1"),
    },
    Platform,
)

REGIONAL_MULTIPLIERS = require_coverage(
    "REGIONAL_MULTIPLIERS",
    {
        Region.UNITED_STATES: Decimal("1.0"),
        Region.UNITED_KINGDOM: Decimal("0.95"),
        Region.CANADA: Decimal("0.9"),
        Region.AUSTRALIA: Decimal("0.9"),
        Region.WESTERN_EUROPE: Decimal("0.85"),
        Region.UAE_GULF: Decimal("1.1"),
        Region.SINGAPORE_HK: Decimal("0.95"),
        Region.JAPAN: Decimal("0.8"),
        Region.SOUTH_KOREA: Decimal("0.75"),
        Region.BRAZIL: Decimal("0.6"),
        Region.MEXICO: Decimal("0.55"),
        Region.INDIA: Decimal("0.4"),
        Region.SOUTHEAST_ASIA: Decimal("0.5"),
        Region.EASTERN_EUROPE: Decimal("0.5"),
        Region.AFRICA: Decimal("0.4"),
        Region.OTHER: Decimal("0.7"),
    },
    Region,
)

NICHE_PREMIUMS = require_coverage(
    "NICHE_PREMIUMS",
    {
        Niche.FINANCE: Decimal("2.0"),
        Niche.BUSINESS: Decimal("1.8"),
        Niche.TECH: Decimal("1.7"),
        Niche.LEGAL: Decimal("1.7"),
        Niche.MEDICAL: Decimal("1.7"),
        Niche.LUXURY: Decimal("1.5"),
        Niche.BEAUTY: Decimal("1.3"),
        Niche.FITNESS: Decimal("1.2"),
        Niche.FOOD: Decimal("1.15"),
        Niche.TRAVEL: Decimal("1.15"),
        Niche.PARENTING: Decimal("1.1"),
        Niche.LIFESTYLE: Decimal("1.0"),
        Niche.ENTERTAINMENT: Decimal("1.0"),
        Niche.COMEDY: Decimal("1.0"),
        Niche.MUSIC: Decimal("1.0"),
        Niche.GAMING: Decimal("0.95"),
    },
    Niche,
)

DEFAULT_NICHE_PREMIUM = Decimal("1.0")

# Free-text niche spellings that map onto a priced niche
NICHE_ALIASES: Mapping[str, Niche] = MappingProxyType(
    {
        "investing": Niche.FINANCE,
        "personal finance": Niche.FINANCE,
        "b2b": Niche.BUSINESS,
        "entrepreneurship": Niche.BUSINESS,
        "software": Niche.TECH,
        "technology": Niche.TECH,
        "healthcare": Niche.MEDICAL,
        "high-end fashion": Niche.LUXURY,
        "skincare": Niche.BEAUTY,
        "cosmetics": Niche.BEAUTY,
        "makeup": Niche.BEAUTY,
        "wellness": Niche.FITNESS,
        "health": Niche.FITNESS,
        "cooking": Niche.FOOD,
        "recipes": Niche.FOOD,
        "family": Niche.PARENTING,
        "motherhood": Niche.PARENTING,
        "esports": Niche.GAMING,
    }
)

FORMAT_PREMIUMS = require_coverage(
    "FORMAT_PREMIUMS",
    {
        ContentFormat.STATIC: Decimal("0"),
        ContentFormat.CAROUSEL: Decimal("0.15"),
        ContentFormat.STORY: Decimal("-0.15"),
        ContentFormat.REEL: Decimal("0.25"),
        ContentFormat.VIDEO: Decimal("0.35"),
        ContentFormat.LIVE: Decimal("0.40"),
        ContentFormat.UGC: Decimal("0"),
    },
    ContentFormat,
)

# -- Usage rights -------------------------------------------------------------

# (maximum days, premium); durations beyond the last entry get EXTENDED_USAGE_PREMIUM
DURATION_PREMIUMS: tuple[tuple[int, Decimal], ...] = (
    (0, Decimal("0")),
    (30, Decimal("0.25")),
    (60, Decimal("0.35")),
    (90, Decimal("0.45")),
    (180, Decimal("0.60")),
    (365, Decimal("0.80")),
)
EXTENDED_USAGE_PREMIUM = Decimal("1.0")

EXCLUSIVITY_PREMIUMS = require_coverage(
    "EXCLUSIVITY_PREMIUMS",
    {
        ExclusivityLevel.NONE: Decimal("0"),
        ExclusivityLevel.CATEGORY: Decimal("0.30"),
        ExclusivityLevel.FULL: Decimal("0.50"),
    },
    ExclusivityLevel,
)

WHITELISTING_PREMIUMS = require_coverage(
    "WHITELISTING_PREMIUMS",
    {
        WhitelistingType.NONE: Decimal("0"),
        WhitelistingType.ORGANIC: Decimal("0.50"),
        WhitelistingType.PAID_SOCIAL: Decimal("1.0"),
        WhitelistingType.FULL_MEDIA: Decimal("2.0"),
    },
    WhitelistingType,
)

# -- UGC ----------------------------------------------------------------------

UGC_BASE_RATES = require_coverage(
    "UGC_BASE_RATES",
    {
        UGCFormat.VIDEO: Decimal("175"),
        UGCFormat.PHOTO: Decimal("100"),
    },
    UGCFormat,
)

UGC_FORMAT_COMPLEXITY = require_coverage(
    "UGC_FORMAT_COMPLEXITY",
    {
        UGCFormat.VIDEO: ComplexityLevel.STANDARD,
        UGCFormat.PHOTO: ComplexityLevel.SIMPLE,
    },
    UGCFormat,
)

COMPLEXITY_PREMIUMS = require_coverage(
    "COMPLEXITY_PREMIUMS",
    {
        ComplexityLevel.SIMPLE: Decimal("0"),
        ComplexityLevel.STANDARD: Decimal("0.15"),
        ComplexityLevel.COMPLEX: Decimal("0.30"),
        ComplexityLevel.PRODUCTION: Decimal("0.50"),
    },
    ComplexityLevel,
)

# -- Seasonal -----------------------------------------------------------------

SEASONAL_PREMIUMS = require_coverage(
    "SEASONAL_PREMIUMS",
    {
        SeasonalPeriod.Q4_HOLIDAY: Decimal("0.25"),
        SeasonalPeriod.BACK_TO_SCHOOL: Decimal("0.15"),
        SeasonalPeriod.VALENTINES: Decimal("0.10"),
        SeasonalPeriod.SUMMER: Decimal("0.05"),
        SeasonalPeriod.STANDARD: Decimal("0"),
    },
    SeasonalPeriod,
)

# -- Deal quality -------------------------------------------------------------

QUALITY_PRICE_ADJUSTMENTS = require_coverage(
    "QUALITY_PRICE_ADJUSTMENTS",
    {
        QualityLevel.EXCELLENT: Decimal("0.25"),
        QualityLevel.GOOD: Decimal("0.15"),
        QualityLevel.FAIR: Decimal("0"),
        QualityLevel.CAUTION: Decimal("-0.10"),
    },
    QualityLevel,
)

# -- Affiliate ----------------------------------------------------------------


@dataclass(frozen=True)
class CommissionRange:
    """Typical affiliate commission range for a product category, in percent."""

    minimum: Decimal
    maximum: Decimal
    default: Decimal


AFFILIATE_COMMISSION_RATES = require_coverage(
    "AFFILIATE_COMMISSION_RATES",
    {
        AffiliateCategory.FASHION_APPAREL: CommissionRange(
            Decimal("10"), Decimal("20"), Decimal("15")
        ),
        AffiliateCategory.BEAUTY_SKINCARE: CommissionRange(
            Decimal("15"), Decimal("25"), Decimal("20")
        ),
        AffiliateCategory.TECH_ELECTRONICS: CommissionRange(
            Decimal("5"), Decimal("10"), Decimal("7")
        ),
        AffiliateCategory.HOME_LIFESTYLE: CommissionRange(
            Decimal("8"), Decimal("15"), Decimal("12")
        ),
        AffiliateCategory.FOOD_BEVERAGE: CommissionRange(
            Decimal("10"), Decimal("15"), Decimal("12")
        ),
        AffiliateCategory.HEALTH_SUPPLEMENTS: CommissionRange(
            Decimal("15"), Decimal("30"), Decimal("22")
        ),
        AffiliateCategory.DIGITAL_PRODUCTS: CommissionRange(
            Decimal("20"), Decimal("40"), Decimal("30")
        ),
        AffiliateCategory.SERVICES_SUBSCRIPTIONS: CommissionRange(
            Decimal("15"), Decimal("25"), Decimal("20")
        ),
        AffiliateCategory.OTHER: CommissionRange(
            Decimal("10"), Decimal("15"), Decimal("12")
        ),
    },
    AffiliateCategory,
)

# Share of the full flat fee guaranteed in a hybrid deal
HYBRID_BASE_FEE_SHARE = Decimal("0.5")

# -- Retainers ----------------------------------------------------------------

VOLUME_DISCOUNTS = require_coverage(
    "VOLUME_DISCOUNTS",
    {
        DealLength.ONE_TIME: Decimal("0"),
        DealLength.MONTHLY: Decimal("0"),
        DealLength.THREE_MONTH: Decimal("0.15"),
        DealLength.SIX_MONTH: Decimal("0.25"),
        DealLength.TWELVE_MONTH: Decimal("0.35"),
    },
    DealLength,
)

CONTRACT_MONTHS = require_coverage(
    "CONTRACT_MONTHS",
    {
        DealLength.ONE_TIME: 1,
        DealLength.MONTHLY: 1,
        DealLength.THREE_MONTH: 3,
        DealLength.SIX_MONTH: 6,
        DealLength.TWELVE_MONTH: 12,
    },
    DealLength,
)

AMBASSADOR_EXCLUSIVITY_PREMIUMS = require_coverage(
    "AMBASSADOR_EXCLUSIVITY_PREMIUMS",
    {
        ExclusivityLevel.NONE: Decimal("0"),
        ExclusivityLevel.CATEGORY: Decimal("0.5"),
        ExclusivityLevel.FULL: Decimal("1.0"),
    },
    ExclusivityLevel,
)

# Rate of each retainer deliverable relative to one standard deliverable
DELIVERABLE_MULTIPLIERS: Mapping[str, Decimal] = MappingProxyType(
    {
        "posts": Decimal("1.0"),
        "stories": Decimal("0.3"),
        "reels": Decimal("1.25"),
        "videos": Decimal("1.5"),
    }
)

# -- Currency -----------------------------------------------------------------

CURRENCY_SYMBOLS = require_coverage(
    "CURRENCY_SYMBOLS",
    {
        CurrencyCode.USD: "$",
        CurrencyCode.GBP: "£",
        CurrencyCode.EUR: "€",
        CurrencyCode.CAD: "C$",
        CurrencyCode.AUD: "A$",
        CurrencyCode.BRL: "R$",
        CurrencyCode.INR: "₹",
        CurrencyCode.MXN: "MX$",
    },
    CurrencyCode,
)

QUOTE_VALID_DAYS = 14


def normalize_niche(niche: str | None) -> Niche | None:
    """Map a free-text niche onto a priced ``Niche``.

    Args:
        niche: Niche as typed by the creator, e.g. ``"Personal Finance"``.

    Returns:
        The matching ``Niche``, or None for blank or unlisted niches.
    """
    if not niche:
        return None
    key = niche.strip().lower()
    try:
        return Niche(key)
    except ValueError:
        return NICHE_ALIASES.get(key)


def get_niche_premium(niche: str | None) -> Decimal:
    """Return the niche multiplier, defaulting to neutral for unlisted niches."""
    resolved = normalize_niche(niche)
    if resolved is None:
        return DEFAULT_NICHE_PREMIUM
    return NICHE_PREMIUMS[resolved]


def get_duration_premium(duration_days: int) -> Decimal:
    """Return the usage-rights duration premium for a usage window in days."""
    for max_days, premium in DURATION_PREMIUMS:
        if duration_days <= max_days:
            return premium
    return EXTENDED_USAGE_PREMIUM
