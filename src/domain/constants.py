"""Domain constants for payment planning and net worth."""

from decimal import Decimal

DEFAULT_PRIME_RATE = Decimal("8.5")
MIN_PRIME_RATE = Decimal("0")
MAX_PRIME_RATE = Decimal("30")

DEFAULT_MINIMUM_PAYMENT_FLOOR = Decimal("40")
DEFAULT_MINIMUM_PAYMENT_PERCENT = Decimal("0.01")
DEFAULT_INTEREST_DAYS = 30
DAYS_PER_YEAR = 365

LONG_PAY_PERIOD_DAYS = 45
NET_WORTH_HISTORY_MONTHS = 12
MIN_PLOTTABLE_POINTS = 2

DEFAULT_SAFETY_BUFFER = Decimal("500")


__all__ = [
    "DEFAULT_PRIME_RATE",
    "MIN_PRIME_RATE",
    "MAX_PRIME_RATE",
    "DEFAULT_MINIMUM_PAYMENT_FLOOR",
    "DEFAULT_MINIMUM_PAYMENT_PERCENT",
    "DEFAULT_INTEREST_DAYS",
    "DAYS_PER_YEAR",
    "LONG_PAY_PERIOD_DAYS",
    "NET_WORTH_HISTORY_MONTHS",
    "MIN_PLOTTABLE_POINTS",
    "DEFAULT_SAFETY_BUFFER",
]
