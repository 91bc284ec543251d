"""Retainer and ambassador pricing.

A retainer values a month of content at per-deliverable rates derived from
the creator's standard quote, discounts it for the commitment length, adds
ambassador perks and multiplies out to a contract total.
"""

from decimal import Decimal

from ratecard.domain.models import AmbassadorPerks, MonthlyDeliverables, RetainerConfig
from ratecard.domain.types import CreatorTier, ExclusivityLevel
from ratecard.pricing.benchmarks import (
    AMBASSADOR_EXCLUSIVITY_PREMIUMS,
    CONTRACT_MONTHS,
    DELIVERABLE_MULTIPLIERS,
    VOLUME_DISCOUNTS,
)
from ratecard.pricing.models import AmbassadorBreakdown, DeliverableRates, RetainerBreakdown
from ratecard.pricing.rounding import round_money
from ratecard.pricing.tiers import get_event_day_rate


def calculate_deliverable_rates(rate: Decimal) -> DeliverableRates:
    """Derive post, story, reel and video rates from one deliverable rate."""
    return DeliverableRates(
        post=round_money(rate * DELIVERABLE_MULTIPLIERS["posts"]),
        story=round_money(rate * DELIVERABLE_MULTIPLIERS["stories"]),
        reel=round_money(rate * DELIVERABLE_MULTIPLIERS["reels"]),
        video=round_money(rate * DELIVERABLE_MULTIPLIERS["videos"]),
    )


def apply_volume_discount(rates: DeliverableRates, discount: Decimal) -> DeliverableRates:
    """Discount every deliverable rate by ``discount`` (a fraction)."""
    factor = 1 - discount
    return DeliverableRates(
        post=round_money(rates.post * factor),
        story=round_money(rates.story * factor),
        reel=round_money(rates.reel * factor),
        video=round_money(rates.video * factor),
    )


def monthly_content_value(
    deliverables: MonthlyDeliverables, rates: DeliverableRates
) -> Decimal:
    """Value of one month of deliverables at the given rates."""
    return (
        deliverables.posts * rates.post
        + deliverables.stories * rates.story
        + deliverables.reels * rates.reel
        + deliverables.videos * rates.video
    )


def calculate_ambassador_perks(
    perks: AmbassadorPerks,
    tier: CreatorTier,
    monthly_value: Decimal,
    contract_months: int,
) -> AmbassadorBreakdown:
    """Value the perks bundled into an ambassador deal.

    The exclusivity premium is a share of the discounted monthly content
    value for every contract month.  Requiring exclusivity without naming a
    scope prices it as category exclusivity.  Event appearances use the
    perk's day rate, or the tier default when it is zero.

    Args:
        perks: The ambassador perks requested.
        tier: Creator tier, for the default event day rate.
        monthly_value: Discounted monthly content value.
        contract_months: Length of the contract.

    Returns:
        AmbassadorBreakdown with cash perks totalled separately from product
        seeding.
    """
    scope = perks.exclusivity_type
    if perks.exclusivity_required and scope is ExclusivityLevel.NONE:
        scope = ExclusivityLevel.CATEGORY
    exclusivity_premium = round_money(
        monthly_value * AMBASSADOR_EXCLUSIVITY_PREMIUMS[scope] * contract_months
    )

    product_value = perks.product_value if perks.product_seeding else Decimal("0")

    day_rate = Decimal("0")
    if perks.events_included > 0:
        day_rate = perks.event_day_rate or get_event_day_rate(tier)
    events_value = round_money(perks.events_included * day_rate)

    return AmbassadorBreakdown(
        exclusivity_type=scope,
        exclusivity_premium=exclusivity_premium,
        product_seeding_value=product_value,
        events_included=perks.events_included,
        event_day_rate=day_rate,
        event_appearances_value=events_value,
        total_perks_value=exclusivity_premium + events_value,
    )


def price_retainer(
    rate: Decimal, config: RetainerConfig, tier: CreatorTier
) -> RetainerBreakdown:
    """Price a retainer from a standard per-deliverable rate.

    Args:
        rate: The creator's rounded standard per-deliverable price.
        config: Contract length, monthly deliverables and perks.
        tier: Creator tier.

    Returns:
        RetainerBreakdown including the undiscounted monthly value so the
        savings can be shown.
    """
    discount = VOLUME_DISCOUNTS[config.deal_length]
    months = CONTRACT_MONTHS[config.deal_length]

    full_rates = calculate_deliverable_rates(rate)
    discounted_rates = apply_volume_discount(full_rates, discount)

    value_full = monthly_content_value(config.monthly_deliverables, full_rates)
    value_discounted = monthly_content_value(config.monthly_deliverables, discounted_rates)
    monthly_rate = round_money(value_discounted)

    ambassador = None
    perks_value = Decimal("0")
    if config.ambassador_perks is not None:
        ambassador = calculate_ambassador_perks(
            config.ambassador_perks, tier, value_discounted, months
        )
        perks_value = ambassador.total_perks_value

    return RetainerBreakdown(
        deal_length=config.deal_length,
        contract_months=months,
        volume_discount_percent=int(discount * 100),
        full_rates=full_rates,
        discounted_rates=discounted_rates,
        monthly_value_full=round_money(value_full),
        monthly_value_discounted=round_money(value_discounted),
        monthly_savings=round_money(value_full - value_discounted),
        monthly_rate=monthly_rate,
        total_contract_value=round_money(monthly_rate * months + perks_value),
        ambassador=ambassador,
    )
