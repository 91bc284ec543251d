"""Deal valuation engine for creator brand partnerships.

Re-exports the public API:
    from ratecard import score, price, generate_negotiation_talking_points
"""

from ratecard.domain.errors import (
    BenchmarkTableError,
    InvalidDealError,
    PricingError,
    RateCardError,
    ScoringError,
)
from ratecard.domain.models import CreatorProfile, DealBrief, DealQualityInput
from ratecard.evaluation import DealEvaluation, evaluate_deal
from ratecard.negotiation.talking_points import generate_negotiation_talking_points
from ratecard.pricing.engine import price, replay_layers
from ratecard.pricing.quick import quick_estimate
from ratecard.pricing.tiers import (
    get_base_rate,
    get_market_benchmark,
    get_minimum_acceptable_percentage,
    resolve_tier,
)
from ratecard.scoring.deal_quality import score
from ratecard.scoring.fit_score import to_fit_score

__all__ = [
    "BenchmarkTableError",
    "CreatorProfile",
    "DealBrief",
    "DealEvaluation",
    "DealQualityInput",
    "InvalidDealError",
    "PricingError",
    "RateCardError",
    "ScoringError",
    "evaluate_deal",
    "generate_negotiation_talking_points",
    "get_base_rate",
    "get_market_benchmark",
    "get_minimum_acceptable_percentage",
    "price",
    "quick_estimate",
    "replay_layers",
    "resolve_tier",
    "score",
    "to_fit_score",
]
