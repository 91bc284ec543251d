"""Legacy five-dimension fit-score view of a deal-quality score.

Older consumers expect a fit score with five 0-100 dimensions.  This module
derives that shape from a ``ScoreResult`` without re-scoring anything:

==================  ==========================================  ======
Fit dimension       Source (percentage of max points)           Weight
==================  ==========================================  ======
niche_match         mean of rate_fairness and terms_fairness    0.30
demographic_match   brand_legitimacy                            0.25
platform_match      portfolio_value                             0.20
engagement_quality  growth_potential                            0.15
content_capability  creative_freedom                            0.10
==================  ==========================================  ======

The total score and price adjustment carry over unchanged, and the quality
level maps one-to-one onto a fit level.
"""

from decimal import ROUND_HALF_UP, Decimal

from ratecard.domain.types import FitLevel, QualityLevel
from ratecard.scoring.models import (
    FitComponent,
    FitScoreBreakdown,
    FitScoreResult,
    ScoreComponent,
    ScoreResult,
)

FIT_LEVELS: dict[QualityLevel, FitLevel] = {
    QualityLevel.EXCELLENT: FitLevel.PERFECT,
    QualityLevel.GOOD: FitLevel.HIGH,
    QualityLevel.FAIR: FitLevel.MEDIUM,
    QualityLevel.CAUTION: FitLevel.LOW,
}


def _pct(component: ScoreComponent) -> Decimal:
    return component.percentage.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def to_fit_score(result: ScoreResult) -> FitScoreResult:
    """Project a six-dimension deal-quality score onto the legacy fit score.

    Args:
        result: A finished deal-quality score.

    Returns:
        The equivalent ``FitScoreResult``.
    """
    b = result.breakdown
    niche_pct = (
        (b.rate_fairness.percentage + b.terms_fairness.percentage) / 2
    ).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)

    breakdown = FitScoreBreakdown(
        niche_match=FitComponent(
            score=niche_pct,
            weight=Decimal("0.30"),
            insight=f"{b.rate_fairness.rationale} {b.terms_fairness.rationale}",
        ),
        demographic_match=FitComponent(
            score=_pct(b.brand_legitimacy),
            weight=Decimal("0.25"),
            insight=b.brand_legitimacy.rationale,
        ),
        platform_match=FitComponent(
            score=_pct(b.portfolio_value),
            weight=Decimal("0.20"),
            insight=b.portfolio_value.rationale,
        ),
        engagement_quality=FitComponent(
            score=_pct(b.growth_potential),
            weight=Decimal("0.15"),
            insight=b.growth_potential.rationale,
        ),
        content_capability=FitComponent(
            score=_pct(b.creative_freedom),
            weight=Decimal("0.10"),
            insight=b.creative_freedom.rationale,
        ),
    )

    return FitScoreResult(
        total_score=result.total_score,
        fit_level=FIT_LEVELS[result.quality_level],
        price_adjustment=result.price_adjustment,
        breakdown=breakdown,
        insights=list(result.insights),
    )
