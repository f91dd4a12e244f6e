"""Domain services for fleet-wide finance aggregates."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import DEFAULT_INTEREST_DAYS
from src.domain.models import (
    ASSET_KINDS,
    DEBT_KINDS,
    Account,
    AccountKind,
    BalanceSnapshot,
    FinancialOverview,
)
from src.domain.services.account_finance import (
    available_credit,
    effective_balance,
    latest_snapshots,
    minimum_payment,
)
from src.domain.services.validation import validate_snapshot_amount
from src.utils.decimal_utils import (
    ZERO,
    add,
    divide,
    multiply,
    subtract,
)


def compute_financial_overview(
    accounts: Iterable[Account],
    snapshots: Iterable[BalanceSnapshot],
    *,
    prime_rate: Decimal,
    logger: Logger,
    interest_days: int = DEFAULT_INTEREST_DAYS,
) -> FinancialOverview:
    """Compute debt, asset, credit and minimum payment totals.

    Only active accounts are considered, each through its most recently
    entered snapshot. Accounts without a snapshot contribute nothing except
    their credit limit to the utilization denominator.

    Args:
        accounts: Tracked accounts.
        snapshots: Balance snapshots for those accounts.
        prime_rate: Prime rate used to resolve variable APRs.
        logger: Logger used for warnings.
        interest_days: Interest period used for minimum payments.

    Returns:
        FinancialOverview: Aggregated totals.
    """
    active = [account for account in accounts if account.is_active]
    latest = latest_snapshots(snapshots)

    total_debt = ZERO
    total_assets = ZERO
    total_available = ZERO
    total_minimums = ZERO
    card_balances = ZERO
    card_limits = ZERO

    for account in active:
        if (
            account.kind == AccountKind.CREDIT_CARD
            and account.credit_limit is not None
            and account.credit_limit > 0
        ):
            card_limits = add(card_limits, account.credit_limit)
        snapshot = latest.get(account.account_id)
        if snapshot is None:
            continue
        validate_snapshot_amount(snapshot, logger)
        balance = effective_balance(account, snapshot)

        if account.kind in DEBT_KINDS:
            total_debt = add(total_debt, balance)
        elif account.kind in ASSET_KINDS:
            total_assets = add(total_assets, balance)

        if account.kind == AccountKind.CREDIT_CARD:
            card_balances = add(card_balances, balance)
            available = available_credit(account, balance)
            if available is not None:
                total_available = add(total_available, available)

        if account.kind.has_minimum_payment:
            total_minimums = add(
                total_minimums,
                minimum_payment(account, balance, prime_rate, interest_days),
            )

    utilization = None
    if card_limits > 0:
        utilization = multiply(divide(card_balances, card_limits), 100)

    return FinancialOverview(
        total_debt=total_debt,
        total_assets=total_assets,
        net_worth=subtract(total_assets, total_debt),
        total_available_credit=total_available,
        total_minimum_payments=total_minimums,
        credit_utilization=utilization,
    )


__all__ = ["compute_financial_overview"]
