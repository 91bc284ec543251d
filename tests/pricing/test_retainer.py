"""Tests for retainer and ambassador pricing."""

from decimal import Decimal

import pytest

from ratecard.domain.models import AmbassadorPerks, MonthlyDeliverables, RetainerConfig
from ratecard.domain.types import CreatorTier, DealLength, ExclusivityLevel
from ratecard.pricing.models import DeliverableRates
from ratecard.pricing.retainer import (
    apply_volume_discount,
    calculate_ambassador_perks,
    calculate_deliverable_rates,
    monthly_content_value,
    price_retainer,
)


class TestDeliverableRates:
    """Tests for deriving per-deliverable rates."""

    def test_from_standard_rate(self):
        rates = calculate_deliverable_rates(Decimal("6000"))
        assert rates == DeliverableRates(
            post=Decimal("6000"),
            story=Decimal("1800"),
            reel=Decimal("7500"),
            video=Decimal("9000"),
        )

    def test_rounds_each_rate(self):
        rates = calculate_deliverable_rates(Decimal("400"))
        assert rates.story == Decimal("120")
        assert rates.reel == Decimal("500")

    def test_volume_discount(self):
        rates = apply_volume_discount(calculate_deliverable_rates(Decimal("6000")), Decimal("0.35"))
        assert rates == DeliverableRates(
            post=Decimal("3900"),
            story=Decimal("1170"),
            reel=Decimal("4875"),
            video=Decimal("5850"),
        )

    def test_monthly_value(self):
        rates = calculate_deliverable_rates(Decimal("6000"))
        deliverables = MonthlyDeliverables(posts=2, stories=4, reels=2)
        assert monthly_content_value(deliverables, rates) == Decimal("34200")


class TestAmbassadorPerks:
    """Tests for perk valuation."""

    def test_event_day_rate_defaults_to_tier(self):
        perks = AmbassadorPerks(events_included=2)
        breakdown = calculate_ambassador_perks(perks, CreatorTier.MEGA, Decimal("1000"), 6)
        assert breakdown.event_day_rate == Decimal("1750")
        assert breakdown.event_appearances_value == Decimal("3500")

    def test_no_events_has_no_day_rate(self):
        breakdown = calculate_ambassador_perks(
            AmbassadorPerks(), CreatorTier.MEGA, Decimal("1000"), 6
        )
        assert breakdown.event_day_rate == Decimal("0")
        assert breakdown.total_perks_value == Decimal("0")

    def test_required_exclusivity_without_scope_is_category(self):
        perks = AmbassadorPerks(exclusivity_required=True)
        breakdown = calculate_ambassador_perks(perks, CreatorTier.MICRO, Decimal("1000"), 3)
        assert breakdown.exclusivity_type == ExclusivityLevel.CATEGORY
        assert breakdown.exclusivity_premium == Decimal("1500")

    def test_full_exclusivity_doubles_monthly_value(self):
        perks = AmbassadorPerks(exclusivity_type=ExclusivityLevel.FULL)
        breakdown = calculate_ambassador_perks(perks, CreatorTier.MICRO, Decimal("1000"), 3)
        assert breakdown.exclusivity_premium == Decimal("3000")

    def test_product_seeding_reported_but_not_totalled(self):
        perks = AmbassadorPerks(product_seeding=True, product_value=Decimal("800"))
        breakdown = calculate_ambassador_perks(perks, CreatorTier.MICRO, Decimal("1000"), 3)
        assert breakdown.product_seeding_value == Decimal("800")
        assert breakdown.total_perks_value == Decimal("0")

    def test_product_value_ignored_without_seeding(self):
        perks = AmbassadorPerks(product_value=Decimal("800"))
        breakdown = calculate_ambassador_perks(perks, CreatorTier.MICRO, Decimal("1000"), 3)
        assert breakdown.product_seeding_value == Decimal("0")


class TestPriceRetainer:
    """Tests for the full retainer breakdown."""

    @pytest.mark.parametrize(
        ("deal_length", "months", "discount"),
        [
            (DealLength.ONE_TIME, 1, 0),
            (DealLength.MONTHLY, 1, 0),
            (DealLength.THREE_MONTH, 3, 15),
            (DealLength.SIX_MONTH, 6, 25),
            (DealLength.TWELVE_MONTH, 12, 35),
        ],
        ids=["one_time", "monthly", "3_month", "6_month", "12_month"],
    )
    def test_length_sets_months_and_discount(
        self, deal_length: DealLength, months: int, discount: int
    ):
        config = RetainerConfig(
            deal_length=deal_length, monthly_deliverables=MonthlyDeliverables(posts=1)
        )
        breakdown = price_retainer(Decimal("400"), config, CreatorTier.MICRO)
        assert breakdown.contract_months == months
        assert breakdown.volume_discount_percent == discount

    def test_three_month_micro(self):
        config = RetainerConfig(
            deal_length=DealLength.THREE_MONTH,
            monthly_deliverables=MonthlyDeliverables(posts=2, stories=3),
        )
        breakdown = price_retainer(Decimal("400"), config, CreatorTier.MICRO)

        # posts 400 -> 340, stories 120 -> 100 (102 rounded)
        assert breakdown.monthly_value_full == Decimal("1160")
        assert breakdown.monthly_value_discounted == Decimal("980")
        assert breakdown.monthly_savings == Decimal("180")
        assert breakdown.total_contract_value == Decimal("2940")
        assert breakdown.ambassador is None

    def test_perks_added_to_contract(self):
        config = RetainerConfig(
            deal_length=DealLength.SIX_MONTH,
            monthly_deliverables=MonthlyDeliverables(posts=1),
            ambassador_perks=AmbassadorPerks(events_included=1, event_day_rate=Decimal("500")),
        )
        breakdown = price_retainer(Decimal("400"), config, CreatorTier.MICRO)
        # 300/month x 6 + 500 event
        assert breakdown.total_contract_value == Decimal("2300")
