"""Domain types, models, and errors for the deal valuation engine."""

from ratecard.domain.errors import (
    BenchmarkTableError,
    InvalidDealError,
    PricingError,
    RateCardError,
    ScoringError,
)
from ratecard.domain.models import (
    AffiliateConfig,
    AffiliateTerms,
    AmbassadorPerks,
    AudienceDemographics,
    BrandInfo,
    CampaignInfo,
    ContentSpec,
    CreatorProfile,
    DealBrief,
    DealQualityInput,
    DealTerms,
    FlatFeeTerms,
    HybridTerms,
    MonthlyDeliverables,
    PerformanceConfig,
    PerformanceTerms,
    PlatformMetrics,
    RetainerConfig,
    RetainerTerms,
    UGCTerms,
    UsageRights,
)
from ratecard.domain.types import (
    TIER_ORDER,
    AffiliateCategory,
    ApprovalProcess,
    BonusMetric,
    BrandTier,
    ComplexityLevel,
    ContentFormat,
    CreatorTier,
    CurrencyCode,
    DealLength,
    ExclusivityLevel,
    FitLevel,
    LayerOperation,
    MarketPosition,
    Niche,
    PaymentTerms,
    Platform,
    PricingModel,
    QualityLevel,
    Recommendation,
    Region,
    SeasonalPeriod,
    UGCFormat,
    WhitelistingType,
    tier_rank,
)

__all__ = [
    "TIER_ORDER",
    "AffiliateCategory",
    "AffiliateConfig",
    "AffiliateTerms",
    "AmbassadorPerks",
    "ApprovalProcess",
    "AudienceDemographics",
    "BenchmarkTableError",
    "BonusMetric",
    "BrandInfo",
    "BrandTier",
    "CampaignInfo",
    "ComplexityLevel",
    "ContentFormat",
    "ContentSpec",
    "CreatorProfile",
    "CreatorTier",
    "CurrencyCode",
    "DealBrief",
    "DealLength",
    "DealQualityInput",
    "DealTerms",
    "ExclusivityLevel",
    "FitLevel",
    "FlatFeeTerms",
    "HybridTerms",
    "InvalidDealError",
    "LayerOperation",
    "MarketPosition",
    "MonthlyDeliverables",
    "Niche",
    "PaymentTerms",
    "PerformanceConfig",
    "PerformanceTerms",
    "Platform",
    "PlatformMetrics",
    "PricingError",
    "PricingModel",
    "QualityLevel",
    "RateCardError",
    "Recommendation",
    "Region",
    "RetainerConfig",
    "RetainerTerms",
    "ScoringError",
    "SeasonalPeriod",
    "UGCFormat",
    "UGCTerms",
    "UsageRights",
    "WhitelistingType",
    "tier_rank",
]
