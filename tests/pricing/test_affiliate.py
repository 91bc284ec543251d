"""Tests for commission projections and the hybrid, affiliate and performance helpers."""

from decimal import Decimal

import pytest

from ratecard.domain.models import AffiliateConfig, PerformanceConfig
from ratecard.domain.types import AffiliateCategory, BonusMetric, LayerOperation
from ratecard.pricing.affiliate import (
    build_hybrid_breakdown,
    build_performance_breakdown,
    commission_only_layers,
    estimate_affiliate_earnings,
    get_commission_range,
    hybrid_fee_layer,
)


def _config(**overrides) -> AffiliateConfig:
    values = {
        "commission_rate": Decimal("10"),
        "estimated_sales": 50,
        "average_order_value": Decimal("40"),
    }
    values.update(overrides)
    return AffiliateConfig(**values)


class TestCommissionRange:
    """Tests for category commission lookups."""

    def test_known_category(self):
        typical = get_commission_range(AffiliateCategory.DIGITAL_PRODUCTS)
        assert (typical.minimum, typical.maximum) == (Decimal("20"), Decimal("40"))

    def test_missing_category_uses_other(self):
        assert get_commission_range(None) == get_commission_range(AffiliateCategory.OTHER)


class TestEstimateAffiliateEarnings:
    """Tests for projected commission."""

    def test_sales_times_aov_times_rate(self):
        earnings = estimate_affiliate_earnings(_config())
        assert earnings.estimated_earnings == Decimal("200")
        assert earnings.category_range is None

    def test_rounds_to_five(self):
        earnings = estimate_affiliate_earnings(
            _config(
                commission_rate=Decimal("12.5"),
                estimated_sales=7,
                average_order_value=Decimal("33"),
            )
        )
        # 7 * 33 * 12.5% = 28.875
        assert earnings.estimated_earnings == Decimal("30")

    def test_no_sales_projects_zero(self):
        assert estimate_affiliate_earnings(_config(estimated_sales=0)).estimated_earnings == 0

    def test_category_range_uses_display_name(self):
        earnings = estimate_affiliate_earnings(
            _config(category=AffiliateCategory.BEAUTY_SKINCARE)
        )
        assert earnings.category_range is not None
        assert earnings.category_range.category == "Beauty & Skincare"
        assert earnings.category_range.minimum == Decimal("15")
        assert earnings.category_range.maximum == Decimal("25")


class TestHybrid:
    """Tests for the hybrid fee layer and breakdown."""

    def test_fee_layer_halves(self):
        layer = hybrid_fee_layer()
        assert layer.operation == LayerOperation.MULTIPLY
        assert layer.value == Decimal("0.5")

    def test_breakdown(self):
        breakdown = build_hybrid_breakdown(Decimal("800"), Decimal("400"), _config())
        assert breakdown.base_discount_percent == 50
        assert breakdown.combined_estimate == Decimal("600")


class TestCommissionOnly:
    """Tests for affiliate-only layers."""

    def test_single_zero_base_layer(self):
        layers = commission_only_layers(_config(), "$")
        assert len(layers) == 1
        assert layers[0].operation == LayerOperation.BASE
        assert layers[0].value == Decimal("0")
        assert "$200 projected" in layers[0].rationale


class TestPerformance:
    """Tests for the performance breakdown."""

    @pytest.mark.parametrize(
        ("bonus", "potential"),
        [("250", "650"), ("0", "400"), ("102", "500")],
        ids=["round_bonus", "no_bonus", "bonus_rounded"],
    )
    def test_potential_total(self, bonus: str, potential: str):
        config = PerformanceConfig(
            bonus_threshold=10_000,
            bonus_metric=BonusMetric.CONVERSIONS,
            bonus_amount=Decimal(bonus),
        )
        breakdown = build_performance_breakdown(Decimal("400"), config)
        assert breakdown.potential_total == Decimal(potential)
        assert breakdown.bonus_metric == BonusMetric.CONVERSIONS
