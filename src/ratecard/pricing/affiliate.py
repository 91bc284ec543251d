"""Commission-based pricing: hybrid, affiliate-only and performance deals."""

from decimal import Decimal

from ratecard.domain.models import AffiliateConfig, PerformanceConfig
from ratecard.domain.types import (
    AFFILIATE_CATEGORY_DISPLAY_NAMES,
    AffiliateCategory,
    LayerOperation,
)
from ratecard.pricing.benchmarks import (
    AFFILIATE_COMMISSION_RATES,
    HYBRID_BASE_FEE_SHARE,
    CommissionRange,
)
from ratecard.pricing.models import (
    AffiliateEarnings,
    CommissionRangeInfo,
    HybridBreakdown,
    PerformanceBreakdown,
    PricingLayer,
)
from ratecard.pricing.rounding import format_money, round_money


def get_commission_range(category: AffiliateCategory | None) -> CommissionRange:
    """Return the typical commission range for a product category.

    Unknown categories use the ``other`` range.
    """
    return AFFILIATE_COMMISSION_RATES[category or AffiliateCategory.OTHER]


def estimate_affiliate_earnings(config: AffiliateConfig) -> AffiliateEarnings:
    """Project commission earnings for an affiliate configuration.

    Formula: estimated_sales * average_order_value * commission_rate / 100,
    rounded to the nearest $5.

    Args:
        config: Commission rate, expected sales and order value.

    Returns:
        AffiliateEarnings with the projection and, when a category is
        given, its typical commission range.
    """
    raw = (
        Decimal(config.estimated_sales)
        * config.average_order_value
        * config.commission_rate
        / 100
    )
    category_range = None
    if config.category is not None:
        typical = get_commission_range(config.category)
        category_range = CommissionRangeInfo(
            category=AFFILIATE_CATEGORY_DISPLAY_NAMES[config.category],
            minimum=typical.minimum,
            maximum=typical.maximum,
        )
    return AffiliateEarnings(
        commission_rate=config.commission_rate,
        estimated_sales=config.estimated_sales,
        average_order_value=config.average_order_value,
        estimated_earnings=round_money(raw),
        category_range=category_range,
    )


def hybrid_fee_layer() -> PricingLayer:
    """Layer that reduces the flat fee to the hybrid guaranteed share."""
    share = int(HYBRID_BASE_FEE_SHARE * 100)
    return PricingLayer(
        name="Hybrid Base Fee",
        operation=LayerOperation.MULTIPLY,
        value=HYBRID_BASE_FEE_SHARE,
        rationale=f"{share}% of the flat fee guaranteed; the rest comes from commission",
    )


def build_hybrid_breakdown(
    full_rate: Decimal, base_fee: Decimal, config: AffiliateConfig
) -> HybridBreakdown:
    """Combine the guaranteed fee with the projected commission.

    Args:
        full_rate: The flat fee the deal would command without commission.
        base_fee: The guaranteed fee actually quoted.
        config: Commission terms.

    Returns:
        HybridBreakdown with a rounded combined estimate.
    """
    earnings = estimate_affiliate_earnings(config)
    return HybridBreakdown(
        base_fee=base_fee,
        full_rate=full_rate,
        base_discount_percent=int((1 - HYBRID_BASE_FEE_SHARE) * 100),
        affiliate=earnings,
        combined_estimate=round_money(base_fee + earnings.estimated_earnings),
    )


def commission_only_layers(config: AffiliateConfig, symbol: str) -> list[PricingLayer]:
    """Layers for a deal with no guaranteed fee."""
    earnings = estimate_affiliate_earnings(config)
    return [
        PricingLayer(
            name="Commission Only",
            operation=LayerOperation.BASE,
            value=Decimal("0"),
            rationale=(
                f"No guaranteed fee; {config.estimated_sales} sales x "
                f"{format_money(config.average_order_value, symbol)} AOV x "
                f"{config.commission_rate}% = "
                f"{format_money(earnings.estimated_earnings, symbol)} projected"
            ),
        )
    ]


def build_performance_breakdown(
    base_fee: Decimal, config: PerformanceConfig
) -> PerformanceBreakdown:
    """Describe the full fee plus the bonus available at the target."""
    bonus = round_money(config.bonus_amount)
    return PerformanceBreakdown(
        base_fee=base_fee,
        bonus_threshold=config.bonus_threshold,
        bonus_metric=config.bonus_metric,
        bonus_amount=bonus,
        potential_total=round_money(base_fee + bonus),
    )
