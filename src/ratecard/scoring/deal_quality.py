"""Six-dimension deal-quality scoring.

Scores a proposed deal out of 100 from the creator's point of view:

=================  ======
Dimension          Points
=================  ======
Rate fairness          25
Brand legitimacy       20
Portfolio value        20
Growth potential       15
Terms fairness         10
Creative freedom       10
=================  ======

Every signal in ``DealQualityInput`` is optional.  Unknown signals earn
partial, mid-range credit, so missing data pulls a score toward "fair"
rather than raising.
"""

from decimal import ROUND_HALF_UP, Decimal

import structlog

from ratecard.domain.errors import ScoringError
from ratecard.domain.models import CreatorProfile, DealBrief, DealQualityInput
from ratecard.domain.types import (
    ApprovalProcess,
    BrandTier,
    DealLength,
    ExclusivityLevel,
    PaymentTerms,
    QualityLevel,
    Recommendation,
)
from ratecard.pricing.benchmarks import QUALITY_PRICE_ADJUSTMENTS
from ratecard.pricing.tiers import get_market_benchmark
from ratecard.scoring.models import ScoreBreakdown, ScoreComponent, ScoreResult

logger = structlog.get_logger()

RATE_FAIRNESS_POINTS = 25
BRAND_LEGITIMACY_POINTS = 20
PORTFOLIO_VALUE_POINTS = 20
GROWTH_POTENTIAL_POINTS = 15
TERMS_FAIRNESS_POINTS = 10
CREATIVE_FREEDOM_POINTS = 10

ONE_DECIMAL = Decimal("0.1")

# (offered / benchmark ratio, share of rate-fairness points) anchors of the
# piecewise-linear rate curve.  Ratios outside the range clamp to the ends.
RATE_FAIRNESS_CURVE: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal("0.4"), Decimal("0")),
    (Decimal("0.6"), Decimal("0.10")),
    (Decimal("0.8"), Decimal("0.35")),
    (Decimal("1.0"), Decimal("0.85")),
    (Decimal("1.2"), Decimal("1.0")),
)

# Offered rates below this share of the benchmark raise a red flag
LOW_RATE_RATIO = Decimal("0.8")

# (minimum score, level, recommendation, recommendation text), highest first
QUALITY_LEVELS: tuple[tuple[int, QualityLevel, Recommendation, str], ...] = (
    (
        85,
        QualityLevel.EXCELLENT,
        Recommendation.TAKE_DEAL,
        "Excellent opportunity! This deal is worth pursuing.",
    ),
    (
        70,
        QualityLevel.GOOD,
        Recommendation.TAKE_DEAL,
        "Good deal. Consider accepting with minor negotiations.",
    ),
    (
        50,
        QualityLevel.FAIR,
        Recommendation.NEGOTIATE,
        "Fair deal. Negotiate for better terms before accepting.",
    ),
    (
        0,
        QualityLevel.CAUTION,
        Recommendation.DECLINE,
        "Proceed with caution. Consider declining or major renegotiation.",
    ),
)

# Brand industries and the creator niches that align with them
INDUSTRY_NICHES: dict[str, tuple[str, ...]] = {
    "fashion": ("fashion", "style", "clothing", "beauty", "lifestyle", "luxury"),
    "fitness": ("fitness", "health", "wellness", "sports", "gym", "nutrition"),
    "technology": ("tech", "gaming", "gadgets", "software", "apps", "ai"),
    "food": ("food", "cooking", "recipes", "restaurants", "foodie", "chef"),
    "travel": ("travel", "adventure", "destinations", "hotels", "wanderlust"),
    "beauty": ("beauty", "makeup", "skincare", "cosmetics", "hair", "nails"),
    "finance": ("finance", "investing", "money", "business", "crypto", "stocks"),
    "education": ("education", "learning", "tutorials", "courses", "teaching"),
    "entertainment": ("entertainment", "movies", "music", "celebrity", "pop culture"),
    "parenting": ("parenting", "family", "kids", "motherhood", "fatherhood"),
    "automotive": ("automotive", "cars", "vehicles", "racing", "motorcycles"),
    "gaming": ("gaming", "esports", "games", "streaming", "twitch"),
    "home": ("home", "decor", "diy", "interior", "garden", "renovation"),
    "pets": ("pets", "dogs", "cats", "animals", "pet care"),
}

HIGH_PRESTIGE_INDUSTRIES = frozenset(
    {"luxury", "fashion", "beauty", "technology", "finance", "automotive"}
)

MAX_INSIGHTS = 5


def _component(points: Decimal | int, max_points: int, rationale: str) -> ScoreComponent:
    clamped = min(max(Decimal(points), Decimal("0")), Decimal(max_points))
    return ScoreComponent(
        score=clamped,
        max_points=max_points,
        weight=Decimal(max_points) / 100,
        rationale=rationale,
    )


def _percent_off(ratio: Decimal) -> int:
    return int(((1 - ratio).copy_abs() * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def rate_fairness_share(ratio: Decimal) -> Decimal:
    """Return the share (0-1) of rate-fairness points a rate ratio earns.

    Linear interpolation between the anchors of ``RATE_FAIRNESS_CURVE``, so
    a small change in the offered rate never causes a step jump in score.

    Args:
        ratio: Offered rate divided by the tier's market benchmark.

    Returns:
        The earned share of the rate-fairness allocation.
    """
    first_ratio, first_share = RATE_FAIRNESS_CURVE[0]
    if ratio <= first_ratio:
        return first_share
    for (low_ratio, low_share), (high_ratio, high_share) in zip(
        RATE_FAIRNESS_CURVE, RATE_FAIRNESS_CURVE[1:]
    ):
        if ratio <= high_ratio:
            span = (ratio - low_ratio) / (high_ratio - low_ratio)
            return low_share + span * (high_share - low_share)
    return RATE_FAIRNESS_CURVE[-1][1]


def _rate_ratio(profile: CreatorProfile, signals: DealQualityInput) -> Decimal | None:
    if signals.offered_rate is None:
        return None
    return signals.offered_rate / get_market_benchmark(profile.tier)


def _score_rate_fairness(
    profile: CreatorProfile, signals: DealQualityInput
) -> ScoreComponent:
    ratio = _rate_ratio(profile, signals)
    tier = profile.tier
    if ratio is None:
        points = (rate_fairness_share(Decimal("1")) * RATE_FAIRNESS_POINTS).quantize(
            ONE_DECIMAL, rounding=ROUND_HALF_UP
        )
        return _component(
            points,
            RATE_FAIRNESS_POINTS,
            f"No rate offered yet; scored against the {tier} tier market benchmark.",
        )

    points = (rate_fairness_share(ratio) * RATE_FAIRNESS_POINTS).quantize(
        ONE_DECIMAL, rounding=ROUND_HALF_UP
    )
    if ratio >= Decimal("1.2"):
        rationale = (
            f"Excellent! This rate is {_percent_off(ratio)}% above market average "
            f"for {tier} creators."
        )
    elif ratio >= 1:
        rationale = "Good rate. This is at or slightly above the market average for your tier."
    elif ratio >= LOW_RATE_RATIO:
        rationale = (
            f"Fair rate, but {_percent_off(ratio)}% below market average. "
            "Consider negotiating."
        )
    elif ratio >= Decimal("0.6"):
        rationale = (
            f"Below market rate by {_percent_off(ratio)}%. Significant negotiation needed."
        )
    else:
        rationale = (
            f"Warning: This rate is {_percent_off(ratio)}% below market value. "
            "Major red flag."
        )
    return _component(points, RATE_FAIRNESS_POINTS, rationale)


def _score_brand_legitimacy(signals: DealQualityInput) -> ScoreComponent:
    points = 0
    factors: list[str] = []

    match signals.brand_tier:
        case BrandTier.MAJOR:
            points += 8
            factors.append("major brand")
        case BrandTier.ESTABLISHED:
            points += 6
            factors.append("established brand")
        case BrandTier.EMERGING:
            points += 3
            factors.append("emerging brand")
        case _:
            points += 1

    if signals.has_website is True:
        points += 4
        factors.append("has website")
    elif signals.has_website is None:
        points += 2

    followers = signals.brand_followers
    if followers is None:
        points += 2
    elif followers >= 100_000:
        points += 4
        factors.append(f"{followers // 1000}K followers")
    elif followers >= 10_000:
        points += 3
        factors.append(f"{followers // 1000}K followers")
    elif followers >= 1_000:
        points += 2

    if signals.has_worked_with_creators is True:
        points += 4
        factors.append("works with creators")
    elif signals.has_worked_with_creators is False:
        points += 1
    else:
        points += 2

    if points >= 16:
        rationale = f"Legitimate brand: {', '.join(factors)}."
    elif points >= 10:
        rationale = "Brand appears legitimate."
        if factors:
            rationale += f" Positive signals: {', '.join(factors)}."
    elif points >= 5:
        rationale = "Limited brand verification. Research before committing."
    else:
        rationale = "Unverified brand. Proceed with significant caution."
    return _component(points, BRAND_LEGITIMACY_POINTS, rationale)


def has_niche_match(creator_niches: list[str], brand_industry: str) -> bool:
    """Return True when any creator niche aligns with the brand's industry.

    A niche aligns when it contains, or is contained in, one of the
    industry's related niches.
    """
    related = INDUSTRY_NICHES.get(brand_industry.strip().lower(), ())
    normalized = [niche.strip().lower() for niche in creator_niches]
    return any(
        rel in niche or niche in rel for niche in normalized if niche for rel in related
    )


def _score_portfolio_value(
    profile: CreatorProfile, brief: DealBrief, signals: DealQualityInput
) -> ScoreComponent:
    points = 0
    factors: list[str] = []
    industry = brief.brand.industry.strip().lower()

    if has_niche_match(profile.niches, industry):
        points += 8
        factors.append("niche alignment")
    else:
        points += 2

    if signals.brand_tier is BrandTier.MAJOR:
        points += 8
        factors.append("major brand prestige")
    elif signals.brand_tier is BrandTier.ESTABLISHED:
        points += 6
        factors.append("established brand")
    elif industry in HIGH_PRESTIGE_INDUSTRIES:
        points += 5
        factors.append(f"{industry} industry")
    elif signals.brand_tier is BrandTier.EMERGING:
        points += 3
    else:
        points += 2

    if signals.is_category_leader:
        points += 4
        factors.append("category leader")
    else:
        points += 2

    if points >= 16:
        rationale = f"Excellent portfolio addition: {', '.join(factors)}."
    elif points >= 10:
        rationale = "Good portfolio value."
        if factors:
            rationale += f" {', '.join(factors).capitalize()}."
    else:
        rationale = "Limited portfolio value. Consider if this fits your content style."
    return _component(points, PORTFOLIO_VALUE_POINTS, rationale)


def _score_growth_potential(brief: DealBrief, signals: DealQualityInput) -> ScoreComponent:
    points = 0
    factors: list[str] = []
    retainer = brief.retainer

    ongoing = signals.ongoing_partnership is True or (
        retainer is not None
        and retainer.deal_length not in (DealLength.ONE_TIME, DealLength.MONTHLY)
    )
    if ongoing:
        points += 6
        factors.append("ongoing partnership potential")
    else:
        points += 2

    if signals.is_category_leader:
        points += 5
        factors.append("category leader")
    elif signals.brand_tier is BrandTier.MAJOR:
        points += 4
    elif signals.brand_tier is BrandTier.ESTABLISHED:
        points += 3
    else:
        points += 1

    match retainer.deal_length if retainer is not None else None:
        case DealLength.TWELVE_MONTH:
            points += 4
            factors.append("12-month commitment")
        case DealLength.SIX_MONTH:
            points += 3
            factors.append("6-month commitment")
        case DealLength.THREE_MONTH:
            points += 2
            factors.append("3-month commitment")
        case _:
            points += 1

    if points >= 12:
        rationale = f"Strong growth potential: {', '.join(factors)}."
    elif points >= 7:
        rationale = "Some growth potential. Ask about future collaboration."
    else:
        rationale = "One-off engagement with limited growth potential."
    return _component(points, GROWTH_POTENTIAL_POINTS, rationale)


def _score_terms_fairness(brief: DealBrief, signals: DealQualityInput) -> ScoreComponent:
    points = 0
    concerns: list[str] = []

    match signals.payment_terms:
        case PaymentTerms.UPFRONT | PaymentTerms.NET_15:
            points += 4
        case PaymentTerms.NET_30:
            points += 3
        case PaymentTerms.NET_60:
            points += 1
            concerns.append("slow payment (Net-60)")
        case PaymentTerms.NET_90:
            concerns.append("very slow payment (Net-90)")
        case _:
            points += 2

    duration = brief.usage_rights.duration_days
    if duration == 0:
        points += 3
    elif duration <= 90:
        points += 2
    elif duration <= 365:
        points += 1
        concerns.append(f"{duration}-day usage rights")
    else:
        concerns.append("perpetual usage rights")

    match brief.usage_rights.exclusivity:
        case ExclusivityLevel.NONE:
            points += 3
        case ExclusivityLevel.CATEGORY:
            points += 1
            concerns.append("category exclusivity")
        case ExclusivityLevel.FULL:
            concerns.append("full exclusivity")

    if not concerns:
        rationale = "Fair terms: prompt payment and limited usage restrictions."
    else:
        rationale = f"Terms need review: {', '.join(concerns)}."
    return _component(points, TERMS_FAIRNESS_POINTS, rationale)


def _score_creative_freedom(signals: DealQualityInput) -> ScoreComponent:
    points = 0
    concerns: list[str] = []

    if signals.requires_strict_script is False:
        points += 4
    elif signals.requires_strict_script is True:
        points += 1
        concerns.append("strict script")
    else:
        points += 2

    revisions = signals.revision_rounds
    if revisions is None:
        points += 2
    elif revisions <= 1:
        points += 3
    elif revisions == 2:
        points += 2
    elif revisions == 3:
        points += 1
    else:
        concerns.append(f"{revisions} revision rounds")

    match signals.approval_process:
        case ApprovalProcess.SIMPLE:
            points += 3
        case ApprovalProcess.MODERATE:
            points += 2
        case ApprovalProcess.COMPLEX:
            concerns.append("complex approval process")
        case _:
            points += 1

    if not concerns:
        rationale = "Good creative freedom to keep content authentic."
    else:
        rationale = f"Creative constraints: {', '.join(concerns)}."
    return _component(points, CREATIVE_FREEDOM_POINTS, rationale)


def quality_band(total_score: Decimal) -> tuple[QualityLevel, Recommendation, str]:
    """Map a total score to its quality level, recommendation and advice text."""
    for min_score, level, recommendation, text in QUALITY_LEVELS:
        if total_score >= min_score:
            return level, recommendation, text
    _, level, recommendation, text = QUALITY_LEVELS[-1]
    return level, recommendation, text


def _detect_red_flags(
    profile: CreatorProfile,
    brief: DealBrief,
    signals: DealQualityInput,
    breakdown: ScoreBreakdown,
) -> list[str]:
    flags: list[str] = []
    ratio = _rate_ratio(profile, signals)
    rights = brief.usage_rights

    if ratio is not None and ratio < LOW_RATE_RATIO:
        flags.append(f"Offered rate is {_percent_off(ratio)}% below market value")
    if breakdown.brand_legitimacy.percentage < 30:
        flags.append("Unverified or suspicious brand")
    if signals.payment_terms in (PaymentTerms.NET_60, PaymentTerms.NET_90):
        flags.append("Payment terms of Net-60 or slower")
    if rights.duration_days >= 365 and rights.exclusivity is ExclusivityLevel.FULL:
        flags.append("Perpetual usage combined with full exclusivity")
    elif rights.exclusivity is ExclusivityLevel.FULL:
        flags.append("Full exclusivity restricts all other brand work")
    if signals.revision_rounds is not None and signals.revision_rounds > 3:
        flags.append("Excessive revision rounds")
    return flags


def _detect_green_flags(
    profile: CreatorProfile, brief: DealBrief, signals: DealQualityInput
) -> list[str]:
    flags: list[str] = []
    ratio = _rate_ratio(profile, signals)
    rights = brief.usage_rights
    retainer = brief.retainer

    if ratio is not None and ratio >= 1:
        flags.append("Rate at or above market value")
    if signals.brand_tier is BrandTier.MAJOR:
        flags.append("Major brand opportunity")
    if signals.is_category_leader:
        flags.append("Category-leading brand")
    if signals.payment_terms in (PaymentTerms.UPFRONT, PaymentTerms.NET_15):
        flags.append("Fast payment terms")
    if rights.exclusivity is ExclusivityLevel.NONE and rights.duration_days <= 30:
        flags.append("Minimal usage rights restrictions")
    if signals.ongoing_partnership:
        flags.append("Potential for ongoing partnership")
    if retainer is not None and retainer.deal_length in (
        DealLength.SIX_MONTH,
        DealLength.TWELVE_MONTH,
    ):
        flags.append("Long-term partnership commitment")
    return flags


def _build_insights(
    brief: DealBrief,
    level: QualityLevel,
    breakdown: ScoreBreakdown,
    red_flags: list[str],
    green_flags: list[str],
) -> list[str]:
    match level:
        case QualityLevel.EXCELLENT:
            summary = "Excellent deal!"
            if green_flags:
                summary += f" Key strengths: {', '.join(green_flags[:2])}."
        case QualityLevel.GOOD:
            summary = f"Good opportunity with {brief.brand.name}. Minor improvements possible."
        case QualityLevel.FAIR:
            summary = f"Fair deal with {brief.brand.name}. Review areas for negotiation."
        case QualityLevel.CAUTION:
            summary = "Significant concerns with this deal."
            if red_flags:
                summary += f" Issues: {', '.join(red_flags[:2])}."

    weakest = sorted(
        (component for _, component in breakdown.items()),
        key=lambda component: component.percentage,
    )
    commentary = [c.rationale for c in weakest[:3] if c.percentage < 70]

    insights: list[str] = []
    for line in [summary, *red_flags, *commentary, *green_flags]:
        if line not in insights:
            insights.append(line)
    return insights[:MAX_INSIGHTS]


def score(
    profile: CreatorProfile,
    brief: DealBrief,
    signals: DealQualityInput | None = None,
) -> ScoreResult:
    """Score how favorable a deal is to the creator.

    Args:
        profile: The creator being offered the deal.
        brief: The deal being offered.
        signals: Optional facts about the brand and terms. Defaults to no
            signals, which scores every unknown at mid-range.

    Returns:
        ScoreResult whose ``total_score`` is the exact sum of its six
        components.

    Raises:
        ScoringError: If ``signals`` carries a negative offered rate.
    """
    signals = signals or DealQualityInput()
    if signals.offered_rate is not None and signals.offered_rate < 0:
        raise ScoringError(f"offered_rate must not be negative, got {signals.offered_rate}")

    breakdown = ScoreBreakdown(
        rate_fairness=_score_rate_fairness(profile, signals),
        brand_legitimacy=_score_brand_legitimacy(signals),
        portfolio_value=_score_portfolio_value(profile, brief, signals),
        growth_potential=_score_growth_potential(brief, signals),
        terms_fairness=_score_terms_fairness(brief, signals),
        creative_freedom=_score_creative_freedom(signals),
    )
    total = sum((component.score for _, component in breakdown.items()), Decimal("0"))
    level, recommendation, recommendation_text = quality_band(total)

    red_flags = _detect_red_flags(profile, brief, signals, breakdown)
    green_flags = _detect_green_flags(profile, brief, signals)

    logger.debug(
        "deal_scored",
        brand=brief.brand.name,
        total_score=str(total),
        quality_level=level,
        red_flags=len(red_flags),
    )

    return ScoreResult(
        total_score=total,
        breakdown=breakdown,
        quality_level=level,
        recommendation=recommendation,
        recommendation_text=recommendation_text,
        price_adjustment=QUALITY_PRICE_ADJUSTMENTS[level],
        red_flags=red_flags,
        green_flags=green_flags,
        insights=_build_insights(brief, level, breakdown, red_flags, green_flags),
    )
