"""Pydantic v2 input models for the deal valuation engine.

Every model is frozen: profiles, briefs and deal signals are built once by
the caller and never mutated while a valuation runs.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)

from ratecard.domain.types import (
    AffiliateCategory,
    ApprovalProcess,
    BonusMetric,
    BrandTier,
    ContentFormat,
    CreatorTier,
    CurrencyCode,
    DealLength,
    ExclusivityLevel,
    PaymentTerms,
    Platform,
    Region,
    UGCFormat,
    WhitelistingType,
)

MAX_NICHES = 5


def _reject_float(v: object) -> object:
    if isinstance(v, float):
        raise ValueError("Use Decimal or string, not float, for monetary values")
    return v


class PlatformMetrics(BaseModel):
    """Audience metrics for a single platform account."""

    model_config = ConfigDict(frozen=True)

    followers: int = 0
    engagement_rate: Decimal = Decimal("0")
    avg_likes: int = Field(default=0, ge=0)
    avg_comments: int = Field(default=0, ge=0)
    avg_views: int = Field(default=0, ge=0)

    @field_validator("followers")
    @classmethod
    def followers_must_not_be_negative(cls, v: int) -> int:
        """Ensure follower counts are zero or greater."""
        if v < 0:
            raise ValueError(f"followers must not be negative, got {v}")
        return v

    @field_validator("engagement_rate")
    @classmethod
    def engagement_must_not_be_negative(cls, v: Decimal) -> Decimal:
        """Ensure the engagement rate percentage is zero or greater."""
        if v < 0:
            raise ValueError(f"engagement_rate must not be negative, got {v}")
        return v


class AudienceDemographics(BaseModel):
    """Who the creator's audience is. Every field may be left empty."""

    model_config = ConfigDict(frozen=True)

    age_range: str = ""
    gender_split: dict[str, Decimal] = Field(default_factory=dict)
    top_locations: list[str] = Field(default_factory=list)


class CreatorProfile(BaseModel):
    """Valuation inputs describing a creator.

    ``total_reach`` and ``tier`` are derived from the platform metrics and
    cannot be supplied independently, so the tier always agrees with the
    follower counts it was computed from.
    """

    model_config = ConfigDict(frozen=True)

    display_name: str = ""
    handle: str = ""
    platforms: dict[Platform, PlatformMetrics] = Field(default_factory=dict)
    audience: AudienceDemographics = Field(default_factory=AudienceDemographics)
    niches: list[str] = Field(default_factory=list)
    region: Region = Region.UNITED_STATES
    currency: CurrencyCode = CurrencyCode.USD

    @field_validator("niches")
    @classmethod
    def niches_within_limit(cls, v: list[str]) -> list[str]:
        """Cap the niche list at five entries and drop blank ones."""
        cleaned = [niche.strip() for niche in v if niche.strip()]
        if len(cleaned) > MAX_NICHES:
            raise ValueError(f"at most {MAX_NICHES} niches are allowed, got {len(cleaned)}")
        return cleaned

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_reach(self) -> int:
        """Sum of follower counts across every populated platform."""
        return sum(metrics.followers for metrics in self.platforms.values())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tier(self) -> CreatorTier:
        """Creator tier resolved from ``total_reach``."""
        from ratecard.pricing.tiers import resolve_tier

        return resolve_tier(self.total_reach)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def avg_engagement_rate(self) -> Decimal:
        """Follower-weighted engagement rate across platforms, in percent."""
        if not self.platforms:
            return Decimal("0")
        metrics = list(self.platforms.values())
        reach = self.total_reach
        if reach == 0:
            total = sum((m.engagement_rate for m in metrics), Decimal("0"))
            return (total / len(metrics)).quantize(Decimal("0.01"))
        weighted = sum(
            (m.engagement_rate * m.followers for m in metrics), Decimal("0")
        )
        return (weighted / reach).quantize(Decimal("0.01"))

    @property
    def primary_niche(self) -> str | None:
        """The first listed niche, or None when the creator lists none."""
        return self.niches[0] if self.niches else None


class BrandInfo(BaseModel):
    """The brand making an offer."""

    model_config = ConfigDict(frozen=True)

    name: str
    industry: str = ""
    product: str = ""


class CampaignInfo(BaseModel):
    """Free-text campaign details lifted from the brief."""

    model_config = ConfigDict(frozen=True)

    objective: str = ""
    target_audience: str = ""
    budget_range: str = ""


class ContentSpec(BaseModel):
    """What the creator is asked to produce."""

    model_config = ConfigDict(frozen=True)

    platform: Platform
    format: ContentFormat
    quantity: int = 1
    creative_direction: str = ""

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        """Ensure quantity is at least 1."""
        if v < 1:
            raise ValueError("quantity must be at least 1")
        return v


class UsageRights(BaseModel):
    """Rights the brand requests over the content.

    The defaults describe an organic-only post: no paid usage window, no
    exclusivity, no whitelisting.
    """

    model_config = ConfigDict(frozen=True)

    duration_days: int = Field(default=0, ge=0)
    exclusivity: ExclusivityLevel = ExclusivityLevel.NONE
    paid_amplification: bool = False
    whitelisting: WhitelistingType = WhitelistingType.NONE

    @property
    def effective_whitelisting(self) -> WhitelistingType:
        """Whitelisting tier to price, treating bare paid amplification as paid social."""
        if self.whitelisting is WhitelistingType.NONE and self.paid_amplification:
            return WhitelistingType.PAID_SOCIAL
        return self.whitelisting

    @property
    def is_trivial(self) -> bool:
        """True when the brief asks for nothing beyond an organic post."""
        return (
            self.duration_days == 0
            and self.exclusivity is ExclusivityLevel.NONE
            and self.effective_whitelisting is WhitelistingType.NONE
        )


class AffiliateConfig(BaseModel):
    """Commission terms for affiliate and hybrid deals."""

    model_config = ConfigDict(frozen=True)

    commission_rate: Decimal
    estimated_sales: int = Field(default=0, ge=0)
    average_order_value: Decimal = Decimal("0")
    category: AffiliateCategory | None = None

    @field_validator("commission_rate", "average_order_value", mode="before")
    @classmethod
    def reject_float_inputs(cls, v: object) -> object:
        """Reject float inputs for monetary fields to prevent precision errors."""
        return _reject_float(v)

    @field_validator("commission_rate")
    @classmethod
    def commission_within_percent_range(cls, v: Decimal) -> Decimal:
        """Ensure the commission is a percentage in (0, 100]."""
        if v <= 0 or v > 100:
            raise ValueError(f"commission_rate must be in (0, 100], got {v}")
        return v

    @field_validator("average_order_value")
    @classmethod
    def order_value_must_not_be_negative(cls, v: Decimal) -> Decimal:
        """Ensure the average order value is zero or greater."""
        if v < 0:
            raise ValueError("average_order_value must not be negative")
        return v


class PerformanceConfig(BaseModel):
    """Bonus paid on top of the base fee when a target is reached."""

    model_config = ConfigDict(frozen=True)

    bonus_threshold: int = Field(ge=1)
    bonus_metric: BonusMetric
    bonus_amount: Decimal

    @field_validator("bonus_amount", mode="before")
    @classmethod
    def reject_float_inputs(cls, v: object) -> object:
        """Reject float inputs for monetary fields to prevent precision errors."""
        return _reject_float(v)

    @field_validator("bonus_amount")
    @classmethod
    def bonus_must_not_be_negative(cls, v: Decimal) -> Decimal:
        """Ensure the bonus is zero or greater."""
        if v < 0:
            raise ValueError("bonus_amount must not be negative")
        return v


class MonthlyDeliverables(BaseModel):
    """Content produced each month of a retainer."""

    model_config = ConfigDict(frozen=True)

    posts: int = Field(default=0, ge=0)
    stories: int = Field(default=0, ge=0)
    reels: int = Field(default=0, ge=0)
    videos: int = Field(default=0, ge=0)


class AmbassadorPerks(BaseModel):
    """Extras bundled into an ambassador retainer."""

    model_config = ConfigDict(frozen=True)

    exclusivity_required: bool = False
    exclusivity_type: ExclusivityLevel = ExclusivityLevel.NONE
    product_seeding: bool = False
    product_value: Decimal = Decimal("0")
    events_included: int = Field(default=0, ge=0)
    event_day_rate: Decimal = Decimal("0")

    @field_validator("product_value", "event_day_rate", mode="before")
    @classmethod
    def reject_float_inputs(cls, v: object) -> object:
        """Reject float inputs for monetary fields to prevent precision errors."""
        return _reject_float(v)

    @field_validator("product_value", "event_day_rate")
    @classmethod
    def amounts_must_not_be_negative(cls, v: Decimal) -> Decimal:
        """Ensure perk values are zero or greater."""
        if v < 0:
            raise ValueError("perk values must not be negative")
        return v


class RetainerConfig(BaseModel):
    """Multi-month retainer terms."""

    model_config = ConfigDict(frozen=True)

    deal_length: DealLength
    monthly_deliverables: MonthlyDeliverables = Field(default_factory=MonthlyDeliverables)
    ambassador_perks: AmbassadorPerks | None = None


class FlatFeeTerms(BaseModel):
    """One-off sponsored content paid as a flat fee."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["flat_fee"] = "flat_fee"


class HybridTerms(BaseModel):
    """Reduced guaranteed fee plus affiliate commission."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hybrid"] = "hybrid"
    affiliate: AffiliateConfig


class AffiliateTerms(BaseModel):
    """Commission only, no guaranteed fee."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["affiliate"] = "affiliate"
    affiliate: AffiliateConfig


class PerformanceTerms(BaseModel):
    """Full fee plus a bonus when a performance target is met."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["performance"] = "performance"
    performance: PerformanceConfig


class UGCTerms(BaseModel):
    """Content made for the brand's own channels, priced per asset."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ugc"] = "ugc"
    ugc_format: UGCFormat = UGCFormat.VIDEO


class RetainerTerms(BaseModel):
    """Recurring monthly engagement, optionally as a brand ambassador."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["retainer"] = "retainer"
    retainer: RetainerConfig


DealTerms = Annotated[
    FlatFeeTerms
    | HybridTerms
    | AffiliateTerms
    | PerformanceTerms
    | UGCTerms
    | RetainerTerms,
    Field(discriminator="kind"),
]


class DealBrief(BaseModel):
    """One partnership offer, as produced by the brief-parsing layer.

    Missing optional blocks fall back to neutral defaults: no usage rights,
    a flat-fee deal, and no campaign date (standard seasonal period).
    """

    model_config = ConfigDict(frozen=True)

    brand: BrandInfo
    campaign: CampaignInfo = Field(default_factory=CampaignInfo)
    content: ContentSpec
    usage_rights: UsageRights = Field(default_factory=UsageRights)
    deal: DealTerms = Field(default_factory=FlatFeeTerms)
    campaign_date: date | None = None
    disable_seasonal_pricing: bool = False

    @property
    def retainer(self) -> RetainerConfig | None:
        """Retainer terms when this is a retainer deal."""
        if isinstance(self.deal, RetainerTerms):
            return self.deal.retainer
        return None


class DealQualityInput(BaseModel):
    """Optional signals about the counterpart brand and its terms.

    Every field may be None. Unknown signals score at mid-range defaults
    rather than failing.
    """

    model_config = ConfigDict(frozen=True)

    brand_tier: BrandTier | None = None
    has_website: bool | None = None
    brand_followers: int | None = Field(default=None, ge=0)
    has_worked_with_creators: bool | None = None
    is_category_leader: bool | None = None
    payment_terms: PaymentTerms | None = None
    requires_strict_script: bool | None = None
    revision_rounds: int | None = Field(default=None, ge=0)
    approval_process: ApprovalProcess | None = None
    ongoing_partnership: bool | None = None
    offered_rate: Decimal | None = None

    @field_validator("offered_rate", mode="before")
    @classmethod
    def reject_float_inputs(cls, v: object) -> object:
        """Reject float inputs for monetary fields to prevent precision errors."""
        return _reject_float(v)

    @model_validator(mode="after")
    def offered_rate_must_not_be_negative(self) -> "DealQualityInput":
        """Ensure an offered rate, when given, is zero or greater."""
        if self.offered_rate is not None and self.offered_rate < 0:
            raise ValueError(f"offered_rate must not be negative, got {self.offered_rate}")
        return self
