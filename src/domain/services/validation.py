"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.constants import MAX_PRIME_RATE, MIN_PRIME_RATE
from src.domain.models.accounts import Account, BalanceSnapshot


def validate_snapshot_amount(
    snapshot: BalanceSnapshot,
    logger: Logger,
) -> None:
    """Warn when a snapshot violates the non-negative amount convention.

    Args:
        snapshot: Balance snapshot to check.
        logger: Logger used for warnings.
    """
    if snapshot.amount < 0:
        logger.warning(
            f"Balance snapshot {snapshot.snapshot_id} for account "
            f"{snapshot.account_id} is negative: {snapshot.amount}"
        )


def validate_account_configuration(account: Account, logger: Logger) -> None:
    """Warn when fields are set on a kind that ignores them.

    Args:
        account: Account to check.
        logger: Logger used for warnings.
    """
    kind = account.kind
    if account.credit_limit is not None and not kind.has_credit_limit:
        logger.warning(
            f"Credit limit ignored for account {account.account_id} "
            f"of kind {kind.value}"
        )
    if account.apr is not None and not kind.has_apr:
        logger.warning(
            f"APR ignored for account {account.account_id} "
            f"of kind {kind.value}"
        )
    if account.minimum_payment is not None and not kind.has_minimum_payment:
        logger.warning(
            f"Minimum payment ignored for account {account.account_id} "
            f"of kind {kind.value}"
        )


def validate_prime_rate(rate: Decimal) -> Decimal:
    """Return the rate when it lies within the accepted bounds.

    Raises:
        ValueError: If the rate is outside 0..30 percent.
    """
    if not MIN_PRIME_RATE <= rate <= MAX_PRIME_RATE:
        raise ValueError(
            f"Prime rate must be between {MIN_PRIME_RATE}% and "
            f"{MAX_PRIME_RATE}%, got {rate}"
        )
    return rate


__all__ = [
    "validate_snapshot_amount",
    "validate_account_configuration",
    "validate_prime_rate",
]
