"""Result models produced by the pricing engine."""

from decimal import Decimal

from pydantic import BaseModel, Field

from ratecard.domain.types import (
    BonusMetric,
    CurrencyCode,
    DealLength,
    ExclusivityLevel,
    LayerOperation,
    PricingModel,
)


class PricingLayer(BaseModel, frozen=True):
    """One recorded step of the pricing computation.

    Attributes:
        name: Short layer label, e.g. ``"Platform"``.
        operation: Whether ``value`` replaces, multiplies or is added to the
            running price.
        value: The base amount, multiplier or additive delta.
        rationale: Human-readable explanation of why this value applies.
    """

    name: str
    operation: LayerOperation
    value: Decimal
    rationale: str


class CommissionRangeInfo(BaseModel, frozen=True):
    """Typical commission range for the deal's product category, in percent."""

    category: str
    minimum: Decimal
    maximum: Decimal


class AffiliateEarnings(BaseModel, frozen=True):
    """Projected affiliate commission for a deal."""

    commission_rate: Decimal
    estimated_sales: int
    average_order_value: Decimal
    estimated_earnings: Decimal
    category_range: CommissionRangeInfo | None = None


class HybridBreakdown(BaseModel, frozen=True):
    """Guaranteed fee plus projected commission for a hybrid deal."""

    base_fee: Decimal
    full_rate: Decimal
    base_discount_percent: int
    affiliate: AffiliateEarnings
    combined_estimate: Decimal


class PerformanceBreakdown(BaseModel, frozen=True):
    """Base fee plus a bonus paid when a performance target is reached."""

    base_fee: Decimal
    bonus_threshold: int
    bonus_metric: BonusMetric
    bonus_amount: Decimal
    potential_total: Decimal


class DeliverableRates(BaseModel, frozen=True):
    """Per-deliverable rates used to value a retainer month."""

    post: Decimal
    story: Decimal
    reel: Decimal
    video: Decimal


class AmbassadorBreakdown(BaseModel, frozen=True):
    """Value of the perks bundled into an ambassador retainer.

    ``product_seeding_value`` is product the creator receives, so it is
    reported but not part of ``total_perks_value``.
    """

    exclusivity_type: ExclusivityLevel
    exclusivity_premium: Decimal
    product_seeding_value: Decimal
    events_included: int
    event_day_rate: Decimal
    event_appearances_value: Decimal
    total_perks_value: Decimal


class RetainerBreakdown(BaseModel, frozen=True):
    """Monthly and contract-level figures for a retainer deal."""

    deal_length: DealLength
    contract_months: int
    volume_discount_percent: int
    full_rates: DeliverableRates
    discounted_rates: DeliverableRates
    monthly_value_full: Decimal
    monthly_value_discounted: Decimal
    monthly_savings: Decimal
    monthly_rate: Decimal
    total_contract_value: Decimal
    ambassador: AmbassadorBreakdown | None = None


class PricingResult(BaseModel, frozen=True):
    """A complete quote with its layer-by-layer audit trail.

    ``total_price`` is ``price_per_deliverable * quantity`` except for
    retainers, where ``quantity`` is the contract length in months and
    ``total_price`` is the total contract value.

    Attributes:
        price_per_deliverable: Rounded price of one deliverable.
        quantity: Number of deliverables, or months for a retainer.
        total_price: Amount the creator quotes.
        currency: Currency of every amount in the result.
        currency_symbol: Display symbol for ``currency``.
        valid_days: How long the quote stays valid.
        layers: Ordered pricing layers; replaying them reproduces
            ``price_per_deliverable`` before rounding.
        formula: Human-readable summary of the computation.
        pricing_model: Branch that produced the quote.
    """

    price_per_deliverable: Decimal
    quantity: int
    total_price: Decimal
    currency: CurrencyCode
    currency_symbol: str
    valid_days: int
    layers: tuple[PricingLayer, ...] = Field(default_factory=tuple)
    formula: str = ""
    pricing_model: PricingModel
    hybrid: HybridBreakdown | None = None
    affiliate: AffiliateEarnings | None = None
    performance: PerformanceBreakdown | None = None
    retainer: RetainerBreakdown | None = None
