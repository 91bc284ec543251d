"""Negotiation talking points built from a finished quote.

Turns a ``PricingResult`` into four sections: a justification to share with
the brand, private market context for the creator, counter-offer scripts
with a floor rate, and a ready-to-send reply.  Nothing here changes the
price; every figure is read from the quote or the creator's profile.
"""

from decimal import ROUND_HALF_UP, Decimal

import structlog

from ratecard.domain.models import CreatorProfile, DealBrief
from ratecard.domain.types import (
    FORMAT_DISPLAY_NAMES,
    PLATFORM_DISPLAY_NAMES,
    MarketPosition,
)
from ratecard.negotiation.models import (
    ConfidenceBoosters,
    CounterOfferScript,
    NegotiationTalkingPoints,
    PushBack,
    QuickResponse,
    RateJustification,
    WhyThisRate,
)
from ratecard.pricing.benchmarks import get_niche_premium
from ratecard.pricing.models import PricingResult
from ratecard.pricing.rounding import format_money, round_cents, round_money
from ratecard.pricing.tiers import (
    get_engagement_benchmark,
    get_market_benchmark,
    get_minimum_acceptable_percentage,
)

logger = structlog.get_logger()

ABOVE_MARKET_PERCENT = 105
AT_MARKET_PERCENT = 95

USAGE_CONCESSION_SHARE = Decimal("0.85")
SCOPE_CONCESSION_SHARE = Decimal("0.90")

NEGOTIATION_LEVERS: tuple[str, ...] = (
    "Remove or shorten usage rights duration",
    "Remove exclusivity requirements",
    "Reduce number of deliverables",
    "Simplify content format (Reel to Post)",
    "Remove whitelisting or paid amplification rights",
    "Adjust timeline (rush fees can be removed)",
)

CLOSING_CTA = (
    "I'd love to learn more about the campaign and discuss how we can work "
    "together. Are you available for a quick call this week?"
)


def _whole_percent(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _niche_display(niches: list[str]) -> str:
    if not niches:
        return "content"
    if len(niches) == 1:
        return niches[0]
    return f"{', '.join(niches[:-1])} and {niches[-1]}"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count > 1 else ''}"


def _engagement_lift(profile: CreatorProfile) -> int | None:
    """Percent by which engagement beats the tier benchmark, or None."""
    benchmark = get_engagement_benchmark(profile.tier)
    if profile.avg_engagement_rate <= benchmark:
        return None
    return _whole_percent((profile.avg_engagement_rate - benchmark) / benchmark * 100)


def _clamp(amount: Decimal, floor: Decimal, ceiling: Decimal) -> Decimal:
    return max(floor, min(ceiling, amount))


def build_why_this_rate(
    pricing: PricingResult, profile: CreatorProfile, brief: DealBrief
) -> WhyThisRate:
    """Build three or four justification bullets and a summary.

    The niche bullet is left out when the creator lists no niches.
    """
    tier = profile.tier
    lift = _engagement_lift(profile)
    bullets: list[RateJustification] = []

    if lift is not None:
        bullets.append(
            RateJustification(
                point=f"Above-average engagement rate of {profile.avg_engagement_rate}%",
                supporting=(
                    f"{lift}% higher than the {tier} tier benchmark of "
                    f"{get_engagement_benchmark(tier)}%"
                ),
            )
        )
    else:
        bullets.append(
            RateJustification(
                point=f"Consistent engagement rate of {profile.avg_engagement_rate}%",
                supporting="Delivering reliable audience interaction for brand content",
            )
        )

    bullets.append(
        RateJustification(
            point=f"Authentic audience of {profile.total_reach:,} engaged followers",
            supporting=f"Active community in the {_niche_display(profile.niches)} space",
        )
    )

    if profile.niches:
        premium = get_niche_premium(profile.primary_niche)
        focus = brief.brand.industry or brief.brand.name
        bullets.append(
            RateJustification(
                point=f"Established expertise in {_niche_display(profile.niches)}",
                supporting=(
                    f"{profile.primary_niche} content carries a {premium}x market premium "
                    f"and aligns with {brief.brand.name}'s {focus} focus"
                ),
            )
        )

    format_name = FORMAT_DISPLAY_NAMES[brief.content.format]
    bullets.append(
        RateJustification(
            point=f"Professional {format_name} content production",
            supporting=(
                f"{_plural(brief.content.quantity, 'high-quality deliverable')} "
                "that reflect well on brand partners"
            ),
        )
    )

    engagement_word = "above-average" if lift is not None else "consistent"
    summary = (
        f"This rate reflects my {tier}-tier audience value, {engagement_word} "
        "engagement, and professional content production capabilities."
    )
    return WhyThisRate(bullet_points=bullets, summary=summary)


def market_position(
    price_per_deliverable: Decimal, profile: CreatorProfile
) -> tuple[MarketPosition, int]:
    """Compare a per-deliverable price to the tier's market benchmark.

    Returns:
        Tuple of (position, price as a whole percentage of the benchmark).
        Within 95-104% counts as at market.
    """
    percentage = _whole_percent(
        price_per_deliverable / get_market_benchmark(profile.tier) * 100
    )
    if percentage >= ABOVE_MARKET_PERCENT:
        return MarketPosition.ABOVE, percentage
    if percentage >= AT_MARKET_PERCENT:
        return MarketPosition.AT, percentage
    return MarketPosition.BELOW, percentage


def build_confidence(
    pricing: PricingResult, profile: CreatorProfile, brief: DealBrief
) -> ConfidenceBoosters:
    """Build the creator's private market comparison and reminders."""
    tier = profile.tier
    position, percentage = market_position(pricing.price_per_deliverable, profile)

    match position:
        case MarketPosition.ABOVE:
            comparison = (
                f"Your rate is {percentage - 100}% above the market average for {tier} "
                "creators. You've earned this premium through your content quality "
                "and engagement."
            )
        case MarketPosition.AT:
            comparison = (
                f"Your rate is right at market value for {tier} creators. This is a "
                "fair, competitive rate that reflects your worth."
            )
        case MarketPosition.BELOW:
            comparison = (
                f"Your rate is {100 - percentage}% below the market average for {tier} "
                "creators. Consider this a competitive offer; you could even charge more."
            )

    reminders: list[str] = []
    lift = _engagement_lift(profile)
    if lift is not None:
        reminders.append(
            f"Your {profile.avg_engagement_rate}% engagement rate is {lift}% above "
            "average. Brands pay more for engaged audiences."
        )
    reminders.append(
        f"{profile.total_reach:,} real followers who trust your recommendations."
    )
    if profile.niches:
        reminders.append(
            f"Your expertise in {_niche_display(profile.niches)} makes you valuable "
            "to brands in this space."
        )
    reminders.append(
        "Brands approach creators because they need your authentic voice, "
        "and that has real value."
    )

    encouragements = (
        f"You bring unique value that {brief.brand.name} can't get elsewhere. Own that.",
        "This rate reflects real market data. You're not guessing; you're informed.",
        "Remember: brands that value quality expect to pay fair rates. This is professional.",
        "Your audience trusts you. That trust is what makes your content valuable.",
    )

    return ConfidenceBoosters(
        market_position=position,
        market_percentage=percentage,
        market_comparison=comparison,
        value_reminders=reminders,
        encouragement=encouragements[profile.total_reach % len(encouragements)],
    )


def build_push_back(
    pricing: PricingResult, profile: CreatorProfile, brief: DealBrief
) -> PushBack:
    """Build the floor rate, two or three counter-offers and walk-away text.

    Counter-offers, in order:
    1. Drop the usage rights for 85% of the total, when any are requested.
    2. Drop one deliverable, when there is more than one.
    3. Simplify the scope for 90% of the total, when neither of the above
       applies.
    4. Hold at the minimum rate, always.

    Every adjusted rate is clamped to [minimum rate, total].
    """
    total = pricing.total_price
    symbol = pricing.currency_symbol
    share = get_minimum_acceptable_percentage(profile.tier)
    minimum = round_cents(total * share)
    minimum_display = format_money(minimum, symbol)
    format_name = FORMAT_DISPLAY_NAMES[brief.content.format]
    quantity = brief.content.quantity

    def offer(scenario: str, concession: str, amount: Decimal, script: str) -> CounterOfferScript:
        rate = _clamp(amount, minimum, total)
        display = format_money(rate, symbol)
        return CounterOfferScript(
            scenario=scenario,
            script=script.format(rate=display),
            concession=concession,
            adjusted_rate=rate,
            adjusted_rate_display=display,
        )

    scripts: list[CounterOfferScript] = []
    if not brief.usage_rights.is_trivial:
        scripts.append(
            offer(
                "They say the rate is too high",
                "Remove extended usage rights",
                round_money(total * USAGE_CONCESSION_SHARE),
                "I understand budget constraints. If we remove the extended usage "
                "rights and keep it to an organic post only, I can offer {rate}. This "
                "keeps the core deliverable while fitting your budget.",
            )
        )
    if quantity > 1:
        reduced = quantity - 1
        scripts.append(
            offer(
                "Budget is firm and below your rate",
                f"Reduce to {_plural(reduced, 'deliverable')}",
                pricing.price_per_deliverable * reduced,
                f"Let's find a middle ground. Instead of {quantity} deliverables, we "
                f"could do {_plural(reduced, format_name)} for {{rate}}. This maintains "
                "quality while working with your budget.",
            )
        )
    if not scripts:
        scripts.append(
            offer(
                "They ask for a lower price on the same brief",
                "Simplify the creative scope",
                round_money(total * SCOPE_CONCESSION_SHARE),
                "I'm flexible on the creative approach. With a simpler concept and a "
                "single round of revisions, I can do this for {rate}.",
            )
        )
    scripts.append(
        offer(
            "They want to pay significantly less",
            "Smaller scope or performance-based bonus",
            minimum,
            "I want to make this work. My minimum for this scope is {rate}. "
            "Alternatively, we could do a smaller initial project to build the "
            "relationship, with the opportunity to expand if the content performs well.",
        )
    )

    percentage = _whole_percent(share * 100)
    walk_away = (
        f"If they can't meet {minimum_display} ({percentage}% of your quoted rate), "
        "it's likely not worth your time. A brand that significantly undervalues "
        "your work may also be difficult to work with. It's okay to politely decline."
    )

    return PushBack(
        quoted_total=total,
        minimum_rate=minimum,
        minimum_rate_percentage=percentage,
        counter_offer_scripts=scripts,
        walk_away_point=walk_away,
        negotiation_levers=list(NEGOTIATION_LEVERS),
    )


def build_quick_response(
    pricing: PricingResult, profile: CreatorProfile, brief: DealBrief
) -> QuickResponse:
    """Build the copy-ready reply, signed with the creator's name or handle."""
    platform = PLATFORM_DISPLAY_NAMES[brief.content.platform]
    deliverables = _plural(brief.content.quantity, FORMAT_DISPLAY_NAMES[brief.content.format])
    total = format_money(pricing.total_price, pricing.currency_symbol)

    greeting = f"Hi {brief.brand.name} team,"
    rate_statement = f"For {deliverables} on {platform}, my rate is {total}."

    days = brief.usage_rights.duration_days
    rights = f"{days} days of usage rights" if days > 0 else "Standard posting rights"

    signature = profile.display_name or (f"@{profile.handle}" if profile.handle else "")
    sign_off = f"Best,\n{signature}" if signature else "Best,"

    full_message = (
        f"{greeting}\n\n"
        f"Thank you for reaching out! I'm excited about the opportunity to work "
        f"with {brief.brand.name}.\n\n"
        f"{rate_statement}\n\n"
        "This includes:\n"
        f"- {deliverables}\n"
        f"- {rights}\n"
        "- Professional content creation and editing\n\n"
        f"{CLOSING_CTA}\n\n"
        f"{sign_off}"
    )
    return QuickResponse(
        greeting=greeting,
        rate_statement=rate_statement,
        closing_cta=CLOSING_CTA,
        full_message=full_message,
    )


def generate_negotiation_talking_points(
    pricing: PricingResult, profile: CreatorProfile, brief: DealBrief
) -> NegotiationTalkingPoints:
    """Generate the full set of negotiation talking points for a quote.

    Args:
        pricing: The finished quote.
        profile: The creator the quote was made for.
        brief: The brief that was priced.

    Returns:
        NegotiationTalkingPoints whose minimum rate never exceeds the
        quoted total.
    """
    talking_points = NegotiationTalkingPoints(
        why_this_rate=build_why_this_rate(pricing, profile, brief),
        confidence=build_confidence(pricing, profile, brief),
        push_back=build_push_back(pricing, profile, brief),
        quick_response=build_quick_response(pricing, profile, brief),
    )
    logger.debug(
        "talking_points_generated",
        market_position=talking_points.confidence.market_position.value,
        minimum_rate=str(talking_points.push_back.minimum_rate),
        scripts=len(talking_points.push_back.counter_offer_scripts),
    )
    return talking_points
