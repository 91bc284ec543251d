"""Seasonal demand windows for campaign pricing."""

from datetime import date
from decimal import Decimal

from ratecard.domain.types import SEASONAL_DISPLAY_NAMES, SeasonalPeriod
from ratecard.pricing.benchmarks import SEASONAL_PREMIUMS


def get_seasonal_period(campaign_date: date | None) -> SeasonalPeriod:
    """Return the demand window a campaign date falls in.

    Windows, checked in order:
    1. Q4 Holiday: Nov 1 - Dec 31
    2. Back to School: Aug 1 - Sep 15
    3. Valentine's: Feb 1 - 14
    4. Summer: Jun 1 - Jul 31
    Any other date, or no date at all, is the standard period.

    Args:
        campaign_date: Planned publish date, if known.

    Returns:
        The matching ``SeasonalPeriod``.
    """
    if campaign_date is None:
        return SeasonalPeriod.STANDARD

    month, day = campaign_date.month, campaign_date.day
    if month in (11, 12):
        return SeasonalPeriod.Q4_HOLIDAY
    if month == 8 or (month == 9 and day <= 15):
        return SeasonalPeriod.BACK_TO_SCHOOL
    if month == 2 and day <= 14:
        return SeasonalPeriod.VALENTINES
    if month in (6, 7):
        return SeasonalPeriod.SUMMER
    return SeasonalPeriod.STANDARD


def get_seasonal_premium(
    campaign_date: date | None, disabled: bool = False
) -> tuple[SeasonalPeriod, Decimal]:
    """Return the seasonal period and its additive premium.

    Args:
        campaign_date: Planned publish date, if known.
        disabled: When True the standard period is used regardless of date.

    Returns:
        Tuple of (period, premium fraction).
    """
    period = SeasonalPeriod.STANDARD if disabled else get_seasonal_period(campaign_date)
    return period, SEASONAL_PREMIUMS[period]


def describe_period(period: SeasonalPeriod) -> str:
    """Return the display name of a seasonal period."""
    return SEASONAL_DISPLAY_NAMES[period]
