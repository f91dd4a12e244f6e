"""Domain normalization helpers for stored account fields."""

from decimal import Decimal
from logging import Logger

from src.domain.models.accounts import (
    AccountKind,
    AprMode,
    AprType,
    FixedApr,
    FlatMinimum,
    MinimumPaymentRule,
    PercentMinimum,
    VariableApr,
)


def normalize_account_kind(raw_kind: str) -> AccountKind:
    """Map a stored kind label to an AccountKind.

    Accepts either the display value ("Credit Card") or the member name
    ("CREDIT_CARD"), case-insensitively.

    Args:
        raw_kind: Raw account kind value from a repository.

    Returns:
        AccountKind: Matching kind.

    Raises:
        ValueError: If the label does not match any kind.
    """
    cleaned = raw_kind.strip()
    for kind in AccountKind:
        if cleaned.lower() in (kind.value.lower(), kind.name.lower()):
            return kind
    raise ValueError(f"Unknown account kind: {raw_kind}")


def build_apr_mode(
    apr_type: str | None,
    fixed_rate: Decimal | None,
    margin: Decimal | None,
    cap: Decimal | None,
    *,
    logger: Logger,
) -> AprMode | None:
    """Build the APR configuration from flat stored fields.

    Args:
        apr_type: "Fixed", "Variable", or None.
        fixed_rate: Fixed APR in percent.
        margin: Margin over prime in percent.
        cap: Optional maximum APR for variable rates.
        logger: Logger used for warnings.

    Returns:
        AprMode | None: APR configuration, or None when incomplete or the
        type label is unknown.
    """
    if not apr_type:
        return None
    try:
        mode = AprType(apr_type.strip().capitalize())
    except ValueError:
        logger.warning(f"Unknown APR type ignored: {apr_type}")
        return None
    if mode == AprType.FIXED:
        return FixedApr(rate=fixed_rate) if fixed_rate is not None else None
    if margin is None:
        return None
    return VariableApr(margin=margin, cap=cap)


def build_minimum_payment_rule(
    flat_amount: Decimal | None,
    percent: Decimal | None,
) -> MinimumPaymentRule | None:
    """Build the minimum payment rule; a flat amount wins over a percent."""
    if flat_amount is not None:
        return FlatMinimum(amount=flat_amount)
    if percent is not None:
        return PercentMinimum(rate=percent)
    return None


__all__ = [
    "normalize_account_kind",
    "build_apr_mode",
    "build_minimum_payment_rule",
]
