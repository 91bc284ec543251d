"""Pydantic v2 models for creator-facing negotiation guidance."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ratecard.domain.types import MarketPosition


class RateJustification(BaseModel):
    """One reason the quote is fair, citing a concrete input figure."""

    model_config = ConfigDict(frozen=True)

    point: str
    supporting: str


class WhyThisRate(BaseModel):
    """Justification the creator can share with the brand."""

    model_config = ConfigDict(frozen=True)

    bullet_points: list[RateJustification] = Field(min_length=3, max_length=4)
    summary: str


class ConfidenceBoosters(BaseModel):
    """Private market context for the creator, not meant for the brand."""

    model_config = ConfigDict(frozen=True)

    market_position: MarketPosition
    market_percentage: int
    market_comparison: str
    value_reminders: list[str]
    encouragement: str


class CounterOfferScript(BaseModel):
    """A ready-made reply for one push-back scenario.

    ``adjusted_rate`` always lies between the minimum rate and the quoted
    total.
    """

    model_config = ConfigDict(frozen=True)

    scenario: str
    script: str
    concession: str
    adjusted_rate: Decimal
    adjusted_rate_display: str


class PushBack(BaseModel):
    """Floor rate, counter-offers and walk-away guidance."""

    model_config = ConfigDict(frozen=True)

    quoted_total: Decimal
    minimum_rate: Decimal
    minimum_rate_percentage: int
    counter_offer_scripts: list[CounterOfferScript] = Field(min_length=2, max_length=3)
    walk_away_point: str
    negotiation_levers: list[str]

    @model_validator(mode="after")
    def rates_within_floor_and_quote(self) -> "PushBack":
        """Ensure the floor and every counter-offer sit within the quote."""
        if self.minimum_rate > self.quoted_total:
            raise ValueError(
                f"minimum_rate ({self.minimum_rate}) must not exceed "
                f"quoted_total ({self.quoted_total})"
            )
        for offer in self.counter_offer_scripts:
            if not self.minimum_rate <= offer.adjusted_rate <= self.quoted_total:
                raise ValueError(
                    f"counter-offer rate ({offer.adjusted_rate}) must lie between "
                    f"{self.minimum_rate} and {self.quoted_total}"
                )
        return self


class QuickResponse(BaseModel):
    """Copy-ready reply to the brand."""

    model_config = ConfigDict(frozen=True)

    greeting: str
    rate_statement: str
    closing_cta: str
    full_message: str


class NegotiationTalkingPoints(BaseModel):
    """Everything a creator needs to defend a quote."""

    model_config = ConfigDict(frozen=True)

    why_this_rate: WhyThisRate
    confidence: ConfidenceBoosters
    push_back: PushBack
    quick_response: QuickResponse
