"""Tier resolution and per-tier benchmark lookups."""

import math
from decimal import Decimal

from ratecard.domain.types import TIER_ORDER, CreatorTier, tier_rank
from ratecard.pricing.benchmarks import (
    BASE_RATES,
    ENGAGEMENT_BENCHMARKS,
    EVENT_DAY_RATES,
    MARKET_BENCHMARKS,
    MINIMUM_RATE_PERCENTAGES,
    TIER_THRESHOLDS,
)

__all__ = [
    "get_base_rate",
    "get_engagement_benchmark",
    "get_event_day_rate",
    "get_market_benchmark",
    "get_minimum_acceptable_percentage",
    "resolve_tier",
    "tier_rank",
]


def resolve_tier(total_reach: float | int | None) -> CreatorTier:
    """Map total audience reach to a creator tier.

    Each tier's lower bound is inclusive, so a reach of exactly 10,000 is
    micro, not nano.  Negative, NaN or missing reach is treated as zero.

    Args:
        total_reach: Sum of follower counts across platforms.

    Returns:
        The largest tier whose lower bound does not exceed ``total_reach``.
    """
    if total_reach is None or math.isnan(total_reach) or total_reach < 0:
        total_reach = 0

    resolved = CreatorTier.NANO
    for tier in TIER_ORDER:
        if total_reach >= TIER_THRESHOLDS[tier]:
            resolved = tier
    return resolved


def get_base_rate(tier: CreatorTier) -> Decimal:
    """Return the starting per-deliverable rate for a tier."""
    return BASE_RATES[tier]


def get_market_benchmark(tier: CreatorTier) -> Decimal:
    """Return the market reference rate for a tier."""
    return MARKET_BENCHMARKS[tier]


def get_minimum_acceptable_percentage(tier: CreatorTier) -> Decimal:
    """Return the share of a quote below which a creator should walk away.

    Larger tiers hold firmer, so the percentage rises with tier rank.
    """
    return MINIMUM_RATE_PERCENTAGES[tier]


def get_engagement_benchmark(tier: CreatorTier) -> Decimal:
    """Return the expected engagement rate (percent) for a tier."""
    return ENGAGEMENT_BENCHMARKS[tier]


def get_event_day_rate(tier: CreatorTier) -> Decimal:
    """Return the default day rate for an in-person event appearance."""
    return EVENT_DAY_RATES[tier]
