"""Negotiation talking points derived from a finished quote."""

from ratecard.negotiation.models import (
    ConfidenceBoosters,
    CounterOfferScript,
    NegotiationTalkingPoints,
    PushBack,
    QuickResponse,
    RateJustification,
    WhyThisRate,
)
from ratecard.negotiation.talking_points import (
    generate_negotiation_talking_points,
    market_position,
)

__all__ = [
    "ConfidenceBoosters",
    "CounterOfferScript",
    "NegotiationTalkingPoints",
    "PushBack",
    "QuickResponse",
    "RateJustification",
    "WhyThisRate",
    "generate_negotiation_talking_points",
    "market_position",
]
