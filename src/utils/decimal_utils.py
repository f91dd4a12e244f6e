"""Helpers for exact Decimal arithmetic.

All money and rate math goes through a single decimal context so results are
reproducible regardless of the caller's thread-local context.
"""

from decimal import ROUND_HALF_EVEN, Context, Decimal

DECIMAL_CONTEXT = Context(prec=38, rounding=ROUND_HALF_EVEN)
ZERO = Decimal("0")
ONE = Decimal("1")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def add(left, right) -> Decimal:
    """Return left + right."""
    return DECIMAL_CONTEXT.add(coerce_decimal(left), coerce_decimal(right))


def subtract(left, right) -> Decimal:
    """Return left - right."""
    return DECIMAL_CONTEXT.subtract(
        coerce_decimal(left),
        coerce_decimal(right),
    )


def multiply(left, right) -> Decimal:
    """Return left * right."""
    return DECIMAL_CONTEXT.multiply(
        coerce_decimal(left),
        coerce_decimal(right),
    )


def divide(dividend, divisor) -> Decimal:
    """Return dividend / divisor.

    Args:
        dividend: Numerator.
        divisor: Denominator, must not be zero.

    Returns:
        Decimal: Quotient in the shared context precision.

    Raises:
        ZeroDivisionError: If the divisor is zero.
    """
    divisor = coerce_decimal(divisor)
    if divisor == 0:
        raise ZeroDivisionError("Decimal division by zero")
    return DECIMAL_CONTEXT.divide(coerce_decimal(dividend), divisor)


def power(base, exponent: int) -> Decimal:
    """Raise a Decimal to a non-negative integer power.

    Uses exponentiation by squaring.

    Args:
        base: Value to raise.
        exponent: Non-negative integer exponent.

    Returns:
        Decimal: base ** exponent.

    Raises:
        ValueError: If the exponent is negative.
    """
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    result = ONE
    factor = coerce_decimal(base)
    remaining = exponent
    while remaining > 0:
        if remaining % 2 == 1:
            result = multiply(result, factor)
        factor = multiply(factor, factor)
        remaining //= 2
    return result


def sum_decimals(values) -> Decimal:
    """Return the exact sum of an iterable of amounts."""
    total = ZERO
    for value in values:
        total = add(total, value)
    return total


__all__ = [
    "DECIMAL_CONTEXT",
    "ZERO",
    "ONE",
    "coerce_decimal",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "sum_decimals",
]
