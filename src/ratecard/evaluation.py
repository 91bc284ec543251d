"""One-call deal evaluation: score, price and talking points together."""

import structlog
from pydantic import BaseModel, ConfigDict

from ratecard.domain.models import CreatorProfile, DealBrief, DealQualityInput
from ratecard.negotiation.models import NegotiationTalkingPoints
from ratecard.negotiation.talking_points import generate_negotiation_talking_points
from ratecard.pricing.benchmarks import QUOTE_VALID_DAYS
from ratecard.pricing.engine import price
from ratecard.pricing.models import PricingResult
from ratecard.scoring.deal_quality import score
from ratecard.scoring.fit_score import to_fit_score
from ratecard.scoring.models import FitScoreResult, ScoreResult

logger = structlog.get_logger()


class DealEvaluation(BaseModel):
    """Everything the engine says about one deal."""

    model_config = ConfigDict(frozen=True)

    score: ScoreResult
    fit_score: FitScoreResult
    pricing: PricingResult
    talking_points: NegotiationTalkingPoints


def evaluate_deal(
    profile: CreatorProfile,
    brief: DealBrief,
    signals: DealQualityInput | None = None,
    *,
    valid_days: int = QUOTE_VALID_DAYS,
) -> DealEvaluation:
    """Score a deal, price it with the score's adjustment and build talking points.

    Args:
        profile: The creator being priced.
        brief: The partnership offer.
        signals: Optional brand and terms signals for scoring.
        valid_days: How long the quote stays valid.

    Returns:
        DealEvaluation combining the four results.
    """
    deal_score = score(profile, brief, signals)
    pricing = price(profile, brief, deal_score, valid_days=valid_days)
    evaluation = DealEvaluation(
        score=deal_score,
        fit_score=to_fit_score(deal_score),
        pricing=pricing,
        talking_points=generate_negotiation_talking_points(pricing, profile, brief),
    )
    logger.info(
        "deal_evaluated",
        brand=brief.brand.name,
        tier=profile.tier.value,
        pricing_model=pricing.pricing_model.value,
        total_score=str(deal_score.total_score),
        total_price=str(pricing.total_price),
    )
    return evaluation
