"""Tests for the layered pricing engine across every deal branch."""

from datetime import date
from decimal import Decimal

import pytest

from ratecard.domain.errors import InvalidDealError
from ratecard.domain.models import (
    AffiliateConfig,
    AffiliateTerms,
    AmbassadorPerks,
    ContentSpec,
    DealBrief,
    DealQualityInput,
    HybridTerms,
    MonthlyDeliverables,
    PerformanceConfig,
    PerformanceTerms,
    RetainerConfig,
    RetainerTerms,
    UGCTerms,
    UsageRights,
)
from ratecard.domain.types import (
    ApprovalProcess,
    BonusMetric,
    BrandTier,
    ContentFormat,
    CreatorTier,
    CurrencyCode,
    DealLength,
    ExclusivityLevel,
    LayerOperation,
    PaymentTerms,
    Platform,
    PricingModel,
    Region,
    UGCFormat,
)
from ratecard.pricing.engine import engagement_multiplier, price, replay_layers
from ratecard.pricing.models import PricingLayer
from ratecard.pricing.rounding import round_money
from ratecard.scoring.deal_quality import score

STANDARD_LAYER_NAMES = [
    "Base Rate",
    "Engagement",
    "Platform",
    "Regional",
    "Format",
    "Niche",
    "Deal Quality",
    "Usage Rights",
    "Whitelisting",
    "Seasonal",
]


class TestGoldenScenarios:
    """Reference quotes every release must reproduce."""

    def test_micro_instagram_static_lifestyle(self, micro_profile, static_brief):
        result = price(micro_profile, static_brief)

        assert result.price_per_deliverable == Decimal("400")
        assert result.total_price == Decimal("400")
        assert result.pricing_model == PricingModel.FLAT_FEE
        assert [layer.name for layer in result.layers] == STANDARD_LAYER_NAMES
        assert result.layers[0].operation == LayerOperation.BASE
        assert result.layers[0].value == Decimal("400")
        assert all(layer.value == 1 for layer in result.layers[1:])
        assert result.formula == "$400 " + " ".join(["× 1.00"] * 9) + " = $400"

    def test_tiktok(self, micro_profile, make_brief):
        result = price(micro_profile, make_brief(platform=Platform.TIKTOK))
        assert result.price_per_deliverable == Decimal("360")

    def test_finance_niche(self, make_profile, static_brief):
        result = price(make_profile(niches=("finance",)), static_brief)
        assert result.price_per_deliverable == Decimal("800")

    def test_reel_format(self, micro_profile, make_brief):
        result = price(micro_profile, make_brief(content_format=ContentFormat.REEL))
        assert result.price_per_deliverable == Decimal("500")

    @pytest.mark.parametrize(
        ("niche", "expected"),
        [("tech", "4820"), ("finance", "5670")],
        ids=["tech", "finance"],
    )
    def test_rising_youtube_video(self, make_profile, make_brief, niche: str, expected: str):
        profile = make_profile(followers=100_000, platform=Platform.YOUTUBE, niches=(niche,))
        brief = make_brief(platform=Platform.YOUTUBE, content_format=ContentFormat.VIDEO)

        result = price(profile, brief)

        assert profile.tier == CreatorTier.RISING
        assert result.price_per_deliverable == Decimal(expected)

    def test_mega_ambassador_retainer(self, make_profile, make_brief):
        profile = make_profile(followers=500_000)
        brief = make_brief(
            deal=RetainerTerms(
                retainer=RetainerConfig(
                    deal_length=DealLength.TWELVE_MONTH,
                    monthly_deliverables=MonthlyDeliverables(posts=2, stories=4, reels=2),
                    ambassador_perks=AmbassadorPerks(
                        exclusivity_required=True,
                        exclusivity_type=ExclusivityLevel.CATEGORY,
                        events_included=2,
                        event_day_rate=Decimal("1500"),
                    ),
                )
            )
        )

        result = price(profile, brief)
        retainer = result.retainer

        assert result.pricing_model == PricingModel.RETAINER
        assert result.price_per_deliverable == Decimal("6000")
        assert retainer is not None
        assert retainer.volume_discount_percent == 35
        assert retainer.contract_months == 12
        assert retainer.monthly_value_full == Decimal("34200")
        assert retainer.monthly_rate == Decimal("22230")
        assert retainer.ambassador is not None
        assert retainer.ambassador.event_appearances_value == Decimal("3000")
        assert retainer.ambassador.exclusivity_premium == Decimal("133380")
        assert retainer.total_contract_value == Decimal("403140")
        assert result.quantity == 12
        assert result.total_price == Decimal("403140")


class TestEngagementMultiplier:
    """Tests for engagement relative to the tier benchmark (micro = 3.5%)."""

    @pytest.mark.parametrize(
        ("rate", "expected"),
        [
            ("0", "1.0"),
            ("1.5", "0.8"),
            ("1.75", "1.0"),
            ("5.25", "1.0"),
            ("7", "1.3"),
            ("10.5", "1.6"),
            ("11", "2.0"),
        ],
        ids=["no_data", "low", "half", "one_and_half", "double", "triple", "above_triple"],
    )
    def test_bands(self, rate: str, expected: str):
        assert engagement_multiplier(Decimal(rate), CreatorTier.MICRO) == Decimal(expected)

    def test_high_engagement_raises_price(self, make_profile, static_brief):
        result = price(make_profile(engagement=Decimal("8")), static_brief)
        assert result.price_per_deliverable == Decimal("640")


class TestLayerModifiers:
    """Tests for region, rights, whitelisting, seasonal and score layers."""

    def test_region_multiplier(self, make_profile, static_brief):
        result = price(make_profile(region=Region.INDIA), static_brief)
        assert result.price_per_deliverable == Decimal("160")

    def test_usage_and_category_exclusivity(self, micro_profile, make_brief):
        brief = make_brief(
            usage_rights=UsageRights(duration_days=30, exclusivity=ExclusivityLevel.CATEGORY)
        )
        result = price(micro_profile, brief)

        usage = next(layer for layer in result.layers if layer.name == "Usage Rights")
        assert usage.value == Decimal("1.55")
        assert result.price_per_deliverable == Decimal("620")

    def test_paid_amplification_counts_as_paid_social(self, micro_profile, make_brief):
        result = price(micro_profile, make_brief(usage_rights=UsageRights(paid_amplification=True)))
        assert result.price_per_deliverable == Decimal("800")

    def test_q4_campaign_date(self, micro_profile, make_brief):
        result = price(micro_profile, make_brief(campaign_date=date(2026, 12, 1)))
        assert result.price_per_deliverable == Decimal("500")

    def test_seasonal_pricing_can_be_disabled(self, micro_profile, make_brief):
        brief = make_brief(campaign_date=date(2026, 12, 1), disable_seasonal_pricing=True)
        assert price(micro_profile, brief).price_per_deliverable == Decimal("400")

    def test_excellent_score_adds_premium(self, micro_profile, make_brief):
        brief = make_brief(industry="fashion")
        signals = DealQualityInput(
            offered_rate=Decimal("480"),
            brand_tier=BrandTier.MAJOR,
            has_website=True,
            brand_followers=200_000,
            has_worked_with_creators=True,
            is_category_leader=True,
            ongoing_partnership=True,
            payment_terms=PaymentTerms.UPFRONT,
            requires_strict_script=False,
            revision_rounds=1,
            approval_process=ApprovalProcess.SIMPLE,
        )
        result = price(micro_profile, brief, score(micro_profile, brief, signals))

        quality = next(layer for layer in result.layers if layer.name == "Deal Quality")
        assert quality.value == Decimal("1.25")
        assert result.price_per_deliverable == Decimal("500")

    def test_quantity_multiplies_total(self, micro_profile, make_brief):
        result = price(micro_profile, make_brief(quantity=3))
        assert result.quantity == 3
        assert result.total_price == Decimal("1200")

    def test_currency_symbol(self, make_profile, static_brief):
        result = price(make_profile(currency=CurrencyCode.GBP), static_brief)
        assert result.currency == CurrencyCode.GBP
        assert result.currency_symbol == "£"
        assert result.formula.startswith("£400")


class TestCommissionBranches:
    """Tests for hybrid, affiliate-only and performance deals."""

    @pytest.fixture
    def affiliate_config(self) -> AffiliateConfig:
        return AffiliateConfig(
            commission_rate=Decimal("10"),
            estimated_sales=50,
            average_order_value=Decimal("40"),
        )

    def test_hybrid_halves_the_fee(self, micro_profile, make_brief, affiliate_config):
        brief = make_brief(quantity=2, deal=HybridTerms(affiliate=affiliate_config))
        result = price(micro_profile, brief)

        assert result.pricing_model == PricingModel.HYBRID
        assert result.layers[-1].name == "Hybrid Base Fee"
        assert result.price_per_deliverable == Decimal("200")
        assert result.total_price == Decimal("400")
        assert result.hybrid is not None
        assert result.hybrid.full_rate == Decimal("800")
        assert result.hybrid.base_discount_percent == 50
        assert result.hybrid.affiliate.estimated_earnings == Decimal("200")
        assert result.hybrid.combined_estimate == Decimal("600")

    def test_affiliate_only_has_no_guaranteed_fee(
        self, micro_profile, make_brief, affiliate_config
    ):
        result = price(micro_profile, make_brief(deal=AffiliateTerms(affiliate=affiliate_config)))

        assert result.pricing_model == PricingModel.AFFILIATE
        assert result.price_per_deliverable == Decimal("0")
        assert result.total_price == Decimal("0")
        assert [layer.name for layer in result.layers] == ["Commission Only"]
        assert result.affiliate is not None
        assert result.affiliate.estimated_earnings == Decimal("200")

    def test_performance_bonus(self, micro_profile, make_brief):
        brief = make_brief(
            deal=PerformanceTerms(
                performance=PerformanceConfig(
                    bonus_threshold=50_000,
                    bonus_metric=BonusMetric.VIEWS,
                    bonus_amount=Decimal("250"),
                )
            )
        )
        result = price(micro_profile, brief)

        assert result.pricing_model == PricingModel.PERFORMANCE
        assert result.total_price == Decimal("400")
        assert result.performance is not None
        assert result.performance.potential_total == Decimal("650")


class TestUGC:
    """Tests for flat UGC asset pricing."""

    @pytest.mark.parametrize(
        ("ugc_format", "expected"),
        [(UGCFormat.VIDEO, "200"), (UGCFormat.PHOTO, "100")],
        ids=["video", "photo"],
    )
    def test_base_rates(self, micro_profile, make_brief, ugc_format: UGCFormat, expected: str):
        brief = make_brief(content_format=ContentFormat.UGC, deal=UGCTerms(ugc_format=ugc_format))
        result = price(micro_profile, brief)

        assert result.pricing_model == PricingModel.UGC
        assert result.price_per_deliverable == Decimal(expected)
        assert [layer.name for layer in result.layers] == [
            "UGC Base Rate",
            "Usage Rights",
            "Complexity",
        ]

    def test_usage_rights_apply(self, micro_profile, make_brief):
        brief = make_brief(deal=UGCTerms(), usage_rights=UsageRights(duration_days=30))
        assert price(micro_profile, brief).price_per_deliverable == Decimal("250")

    @pytest.mark.parametrize(
        "followers", [500, 25_000, 2_000_000], ids=["nano", "micro", "celebrity"]
    )
    def test_independent_of_follower_count(self, make_profile, make_brief, followers: int):
        result = price(make_profile(followers=followers), make_brief(deal=UGCTerms()))
        assert result.price_per_deliverable == Decimal("200")


class TestInvariants:
    """Properties that hold for every quote."""

    @pytest.mark.parametrize(
        ("followers", "platform", "content_format", "niche"),
        [
            (25_000, Platform.INSTAGRAM, ContentFormat.STATIC, "lifestyle"),
            (8_000, Platform.TIKTOK, ContentFormat.REEL, "beauty"),
            (100_000, Platform.YOUTUBE, ContentFormat.VIDEO, "tech"),
            (700_000, Platform.LINKEDIN, ContentFormat.CAROUSEL, "business"),
        ],
        ids=["micro", "nano_reel", "rising_video", "mega_linkedin"],
    )
    def test_replay_reproduces_price(
        self, make_profile, make_brief, followers, platform, content_format, niche
    ):
        profile = make_profile(followers=followers, platform=platform, niches=(niche,))
        brief = make_brief(platform=platform, content_format=content_format, quantity=2)

        result = price(profile, brief)

        assert round_money(replay_layers(result.layers)) == result.price_per_deliverable
        assert result.total_price == result.price_per_deliverable * result.quantity

    def test_idempotent(self, micro_profile, static_brief):
        first = price(micro_profile, static_brief)
        second = price(micro_profile, static_brief)
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_valid_days_passthrough(self, micro_profile, static_brief):
        assert price(micro_profile, static_brief).valid_days == 14
        assert price(micro_profile, static_brief, valid_days=30).valid_days == 30

    def test_unvalidated_quantity_rejected(self, micro_profile):
        content = ContentSpec.model_construct(
            platform=Platform.INSTAGRAM, format=ContentFormat.STATIC, quantity=0
        )
        brief = DealBrief.model_construct(
            brand=None,
            content=content,
            usage_rights=UsageRights(),
        )

        with pytest.raises(InvalidDealError, match="content.quantity") as exc_info:
            price(micro_profile, brief)
        assert exc_info.value.field == "content.quantity"
        assert exc_info.value.value == 0


class TestReplayLayers:
    """Tests for replaying a recorded layer list."""

    def test_base_multiply_add(self):
        layers = [
            PricingLayer(
                name="Base", operation=LayerOperation.BASE, value=Decimal("100"), rationale=""
            ),
            PricingLayer(
                name="Double", operation=LayerOperation.MULTIPLY, value=Decimal("2"), rationale=""
            ),
            PricingLayer(
                name="Fee", operation=LayerOperation.ADD, value=Decimal("15"), rationale=""
            ),
        ]
        assert replay_layers(layers) == Decimal("215")

    def test_empty_is_zero(self):
        assert replay_layers([]) == Decimal("0")
