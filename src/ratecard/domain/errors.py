"""Domain-specific exception classes for the deal valuation engine."""

from enum import StrEnum


class RateCardError(Exception):
    """Base class for all domain errors in the deal valuation engine."""


class PricingError(RateCardError):
    """Raised when a pricing calculation fails."""


class InvalidDealError(PricingError):
    """Raised when a deal brief carries a value the engine cannot price.

    Attributes:
        field: Dotted path of the offending brief field.
        value: The rejected value.
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid value {value!r} for '{field}': {reason}")


class ScoringError(RateCardError):
    """Raised when deal-quality signals cannot be scored."""


class BenchmarkTableError(RateCardError):
    """Raised when a benchmark table does not cover its whole enumeration.

    Attributes:
        table: Name of the incomplete table.
        missing: Enum members with no entry in the table.
    """

    def __init__(self, table: str, missing: list[StrEnum]) -> None:
        self.table = table
        self.missing = missing
        names = ", ".join(str(member) for member in missing)
        super().__init__(f"Benchmark table '{table}' is missing entries for: {names}")
