"""Monetary rounding policy.

Layer multipliers stay exact; amounts are rounded only where a price is
presented: the per-deliverable price, branch breakdown figures and the
contract total.  Quotes round half-up to the nearest $5.
"""

from decimal import ROUND_HALF_UP, Decimal

# Granularity of presented prices
PRICE_INCREMENT = Decimal("5")

# Precision for cent-level figures such as floor rates
TWO_PLACES = Decimal("0.01")


def round_money(amount: Decimal, increment: Decimal = PRICE_INCREMENT) -> Decimal:
    """Round an amount half-up to the nearest ``increment``.

    Args:
        amount: The exact amount.
        increment: Rounding granularity. Defaults to $5.

    Returns:
        The rounded amount as a whole-unit Decimal when ``increment`` is whole.
    """
    units = (amount / increment).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return units * increment


def round_cents(amount: Decimal) -> Decimal:
    """Quantize an amount to two decimal places, half-up."""
    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal, symbol: str = "$") -> str:
    """Render an amount with a currency symbol and thousands separators.

    Whole amounts are shown without decimals (``$4,820``); fractional
    amounts keep cents (``$1,234.50``).
    """
    if amount == amount.to_integral_value():
        return f"{symbol}{amount:,.0f}"
    return f"{symbol}{amount:,.2f}"
