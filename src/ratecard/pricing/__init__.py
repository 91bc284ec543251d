"""Pricing engine, benchmark tables and quick estimates.

Re-exports key functions and types for convenient access:
    from ratecard.pricing import price, replay_layers, PricingResult
"""

from ratecard.pricing.engine import engagement_multiplier, price, replay_layers
from ratecard.pricing.models import (
    AffiliateEarnings,
    AmbassadorBreakdown,
    DeliverableRates,
    HybridBreakdown,
    PerformanceBreakdown,
    PricingLayer,
    PricingResult,
    RetainerBreakdown,
)
from ratecard.pricing.quick import QuickEstimate, quick_estimate
from ratecard.pricing.rounding import format_money, round_money
from ratecard.pricing.tiers import (
    get_base_rate,
    get_market_benchmark,
    get_minimum_acceptable_percentage,
    resolve_tier,
)

__all__ = [
    "AffiliateEarnings",
    "AmbassadorBreakdown",
    "DeliverableRates",
    "HybridBreakdown",
    "PerformanceBreakdown",
    "PricingLayer",
    "PricingResult",
    "QuickEstimate",
    "RetainerBreakdown",
    "engagement_multiplier",
    "format_money",
    "get_base_rate",
    "get_market_benchmark",
    "get_minimum_acceptable_percentage",
    "price",
    "quick_estimate",
    "replay_layers",
    "resolve_tier",
]
