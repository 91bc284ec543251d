"""Layered pricing engine.

Composes the benchmark tables, the creator's metrics and the deal terms into
a per-deliverable price.  Every step is recorded as a ``PricingLayer`` so the
quote can be audited and replayed:

    Base Rate -> Engagement -> Platform -> Regional -> Format -> Niche
    -> Deal Quality -> Usage Rights -> Whitelisting -> Seasonal

The running price stays exact until the end; only the per-deliverable price
and the branch breakdown figures are rounded.
"""

from decimal import Decimal
from typing import assert_never

import structlog

from ratecard.domain.errors import InvalidDealError
from ratecard.domain.models import (
    AffiliateTerms,
    CreatorProfile,
    DealBrief,
    FlatFeeTerms,
    HybridTerms,
    PerformanceTerms,
    RetainerTerms,
    UGCTerms,
    UsageRights,
)
from ratecard.domain.types import (
    FORMAT_DISPLAY_NAMES,
    PLATFORM_DISPLAY_NAMES,
    REGION_DISPLAY_NAMES,
    TIER_DISPLAY_NAMES,
    WHITELISTING_DISPLAY_NAMES,
    CreatorTier,
    LayerOperation,
    PricingModel,
    UGCFormat,
)
from ratecard.pricing.affiliate import (
    build_hybrid_breakdown,
    build_performance_breakdown,
    commission_only_layers,
    estimate_affiliate_earnings,
    hybrid_fee_layer,
)
from ratecard.pricing.benchmarks import (
    COMPLEXITY_PREMIUMS,
    CURRENCY_SYMBOLS,
    EXCLUSIVITY_PREMIUMS,
    FORMAT_PREMIUMS,
    PLATFORM_MULTIPLIERS,
    QUOTE_VALID_DAYS,
    REGIONAL_MULTIPLIERS,
    UGC_BASE_RATES,
    UGC_FORMAT_COMPLEXITY,
    WHITELISTING_PREMIUMS,
    get_duration_premium,
    get_niche_premium,
)
from ratecard.pricing.models import PricingLayer, PricingResult
from ratecard.pricing.retainer import price_retainer
from ratecard.pricing.rounding import format_money, round_money
from ratecard.pricing.seasonal import describe_period, get_seasonal_premium
from ratecard.pricing.tiers import get_base_rate, get_engagement_benchmark
from ratecard.scoring.models import ScoreResult

logger = structlog.get_logger()

NEUTRAL = Decimal("1.0")


def engagement_multiplier(engagement_rate: Decimal, tier: CreatorTier) -> Decimal:
    """Return the engagement multiplier relative to the tier's expected rate.

    Args:
        engagement_rate: Average engagement rate in percent.
        tier: Creator tier whose benchmark the rate is compared against.

    Returns:
        0.8 below half the benchmark, 1.0 up to 1.5x, then 1.3, 1.6 and 2.0
        for 2x, 3x and anything higher.  Zero engagement is neutral.
    """
    if engagement_rate <= 0:
        return NEUTRAL
    ratio = engagement_rate / get_engagement_benchmark(tier)
    if ratio < Decimal("0.5"):
        return Decimal("0.8")
    if ratio <= Decimal("1.5"):
        return NEUTRAL
    if ratio <= Decimal("2.0"):
        return Decimal("1.3")
    if ratio <= Decimal("3.0"):
        return Decimal("1.6")
    return Decimal("2.0")


def replay_layers(layers: tuple[PricingLayer, ...] | list[PricingLayer]) -> Decimal:
    """Recompute the unrounded price from a recorded layer list.

    The running price starts at zero; ``base`` layers set it, ``multiply``
    layers scale it and ``add`` layers shift it.
    """
    running = Decimal("0")
    for layer in layers:
        match layer.operation:
            case LayerOperation.BASE:
                running = layer.value
            case LayerOperation.MULTIPLY:
                running *= layer.value
            case LayerOperation.ADD:
                running += layer.value
            case _:
                assert_never(layer.operation)
    return running


def _multiply(name: str, value: Decimal, rationale: str) -> PricingLayer:
    return PricingLayer(
        name=name, operation=LayerOperation.MULTIPLY, value=value, rationale=rationale
    )


def _usage_rights_layer(rights: UsageRights) -> PricingLayer:
    duration = get_duration_premium(rights.duration_days)
    exclusivity = EXCLUSIVITY_PREMIUMS[rights.exclusivity]
    if rights.duration_days == 0 and exclusivity == 0:
        rationale = "Organic posting only, no paid usage or exclusivity"
    else:
        parts = []
        if rights.duration_days:
            parts.append(f"{rights.duration_days}-day usage (+{duration:.0%})")
        if exclusivity:
            parts.append(f"{rights.exclusivity.value} exclusivity (+{exclusivity:.0%})")
        rationale = ", ".join(parts)
    return _multiply("Usage Rights", 1 + duration + exclusivity, rationale)


def _standard_layers(
    profile: CreatorProfile, brief: DealBrief, score: ScoreResult | None
) -> list[PricingLayer]:
    tier = profile.tier
    content = brief.content
    engagement = profile.avg_engagement_rate

    layers = [
        PricingLayer(
            name="Base Rate",
            operation=LayerOperation.BASE,
            value=get_base_rate(tier),
            rationale=(
                f"{TIER_DISPLAY_NAMES[tier]} creator with "
                f"{profile.total_reach:,} followers"
            ),
        )
    ]

    engagement_factor = engagement_multiplier(engagement, tier)
    if engagement <= 0:
        engagement_note = "No engagement data, priced at the tier norm"
    else:
        engagement_note = (
            f"{engagement}% engagement vs {get_engagement_benchmark(tier)}% "
            f"expected for the tier"
        )
    layers.append(_multiply("Engagement", engagement_factor, engagement_note))

    layers.append(
        _multiply(
            "Platform",
            PLATFORM_MULTIPLIERS[content.platform],
            f"{PLATFORM_DISPLAY_NAMES[content.platform]} rate",
        )
    )
    layers.append(
        _multiply(
            "Regional",
            REGIONAL_MULTIPLIERS[profile.region],
            f"{REGION_DISPLAY_NAMES[profile.region]} audience market",
        )
    )

    format_premium = FORMAT_PREMIUMS[content.format]
    layers.append(
        _multiply(
            "Format",
            1 + format_premium,
            f"{FORMAT_DISPLAY_NAMES[content.format]} ({format_premium:+.0%})",
        )
    )

    niche = profile.primary_niche
    layers.append(
        _multiply(
            "Niche",
            get_niche_premium(niche),
            f"{niche} niche" if niche else "No niche listed, neutral premium",
        )
    )

    if score is None:
        layers.append(_multiply("Deal Quality", NEUTRAL, "Deal not scored"))
    else:
        layers.append(
            _multiply(
                "Deal Quality",
                1 + score.price_adjustment,
                f"{score.quality_level.value.title()} deal "
                f"({score.total_score}/100, {score.price_adjustment:+.0%})",
            )
        )

    layers.append(_usage_rights_layer(brief.usage_rights))

    whitelisting = brief.usage_rights.effective_whitelisting
    layers.append(
        _multiply(
            "Whitelisting",
            1 + WHITELISTING_PREMIUMS[whitelisting],
            WHITELISTING_DISPLAY_NAMES[whitelisting],
        )
    )

    period, seasonal = get_seasonal_premium(
        brief.campaign_date, disabled=brief.disable_seasonal_pricing
    )
    layers.append(
        _multiply("Seasonal", 1 + seasonal, f"{describe_period(period)} ({seasonal:+.0%})")
    )
    return layers


def _ugc_layers(brief: DealBrief, ugc_format: UGCFormat) -> list[PricingLayer]:
    complexity = UGC_FORMAT_COMPLEXITY[ugc_format]
    return [
        PricingLayer(
            name="UGC Base Rate",
            operation=LayerOperation.BASE,
            value=UGC_BASE_RATES[ugc_format],
            rationale=f"Flat UGC {ugc_format.value} rate, independent of audience size",
        ),
        _usage_rights_layer(brief.usage_rights),
        _multiply(
            "Complexity",
            1 + COMPLEXITY_PREMIUMS[complexity],
            f"{complexity.value.title()} production",
        ),
    ]


def build_formula(layers: list[PricingLayer], price: Decimal, symbol: str) -> str:
    """Render the layer chain as ``$base × m1 × ... = $price``."""
    parts: list[str] = []
    for layer in layers:
        match layer.operation:
            case LayerOperation.BASE:
                parts = [format_money(layer.value, symbol)]
            case LayerOperation.MULTIPLY:
                parts.append(f"× {layer.value:.2f}")
            case LayerOperation.ADD:
                parts.append(f"+ {format_money(layer.value, symbol)}")
            case _:
                assert_never(layer.operation)
    return f"{' '.join(parts)} = {format_money(price, symbol)}"


def price(
    profile: CreatorProfile,
    brief: DealBrief,
    score: ScoreResult | None = None,
    *,
    valid_days: int = QUOTE_VALID_DAYS,
) -> PricingResult:
    """Price a deal brief for a creator.

    Args:
        profile: The creator being priced.
        brief: The partnership offer.
        score: Deal-quality score whose price adjustment becomes a layer.
            Pricing without a score treats the deal as neutral.
        valid_days: How long the quote stays valid.

    Returns:
        PricingResult with the audit trail and any branch breakdown.

    Raises:
        InvalidDealError: If the brief's quantity is below 1.  Validated
            briefs never reach this; it guards briefs built with
            ``model_construct``.
    """
    quantity = brief.content.quantity
    if quantity < 1:
        raise InvalidDealError("content.quantity", quantity, "must be at least 1")

    symbol = CURRENCY_SYMBOLS[profile.currency]
    extras: dict[str, object] = {}

    match brief.deal:
        case FlatFeeTerms():
            model = PricingModel.FLAT_FEE
            layers = _standard_layers(profile, brief, score)
            ppd = round_money(replay_layers(layers))
            total = ppd * quantity
        case HybridTerms(affiliate=config):
            model = PricingModel.HYBRID
            layers = _standard_layers(profile, brief, score)
            full_ppd = round_money(replay_layers(layers))
            layers.append(hybrid_fee_layer())
            ppd = round_money(replay_layers(layers))
            total = ppd * quantity
            extras["hybrid"] = build_hybrid_breakdown(full_ppd * quantity, total, config)
        case AffiliateTerms(affiliate=config):
            model = PricingModel.AFFILIATE
            layers = commission_only_layers(config, symbol)
            ppd = round_money(replay_layers(layers))
            total = ppd * quantity
            extras["affiliate"] = estimate_affiliate_earnings(config)
        case PerformanceTerms(performance=config):
            model = PricingModel.PERFORMANCE
            layers = _standard_layers(profile, brief, score)
            ppd = round_money(replay_layers(layers))
            total = ppd * quantity
            extras["performance"] = build_performance_breakdown(total, config)
        case UGCTerms(ugc_format=ugc_format):
            model = PricingModel.UGC
            layers = _ugc_layers(brief, ugc_format)
            ppd = round_money(replay_layers(layers))
            total = ppd * quantity
        case RetainerTerms(retainer=config):
            model = PricingModel.RETAINER
            layers = _standard_layers(profile, brief, score)
            ppd = round_money(replay_layers(layers))
            breakdown = price_retainer(ppd, config, profile.tier)
            quantity = breakdown.contract_months
            total = breakdown.total_contract_value
            extras["retainer"] = breakdown
        case _:
            assert_never(brief.deal)

    result = PricingResult(
        price_per_deliverable=ppd,
        quantity=quantity,
        total_price=total,
        currency=profile.currency,
        currency_symbol=symbol,
        valid_days=valid_days,
        layers=tuple(layers),
        formula=build_formula(layers, ppd, symbol),
        pricing_model=model,
        **extras,
    )

    logger.debug(
        "pricing_complete",
        pricing_model=model.value,
        tier=profile.tier.value,
        price_per_deliverable=str(ppd),
        total_price=str(total),
        layers=len(layers),
    )
    return result
