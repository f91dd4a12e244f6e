"""Per-account finance computations.

Every function is a pure function of an account and explicit inputs. Values
gated by a capability the account kind lacks come back as ``None`` (or zero
for amounts) instead of raising.
"""

import calendar
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    DAYS_PER_YEAR,
    DEFAULT_INTEREST_DAYS,
    DEFAULT_MINIMUM_PAYMENT_FLOOR,
    DEFAULT_MINIMUM_PAYMENT_PERCENT,
)
from src.domain.models.accounts import (
    Account,
    AccountKind,
    AccountPosition,
    BalanceSnapshot,
    FixedApr,
    FlatMinimum,
    PercentMinimum,
    VariableApr,
)
from src.utils.decimal_utils import (
    ONE,
    ZERO,
    add,
    divide,
    multiply,
    power,
    subtract,
)


def current_apr(account: Account, prime_rate: Decimal) -> Decimal | None:
    """Resolve the account's annual percentage rate.

    Args:
        account: Account to evaluate.
        prime_rate: Prime rate in percent, used for variable APRs.

    Returns:
        Decimal | None: APR in percent, or None when the kind has no APR or
        no APR is configured.
    """
    if not account.kind.has_apr:
        return None
    mode = account.apr
    if isinstance(mode, FixedApr):
        return mode.rate
    if isinstance(mode, VariableApr):
        calculated = add(prime_rate, mode.margin)
        if mode.cap is not None:
            return min(calculated, mode.cap)
        return calculated
    return None


def monthly_interest(
    account: Account,
    balance: Decimal,
    prime_rate: Decimal,
    days: int = DEFAULT_INTEREST_DAYS,
) -> Decimal:
    """Return interest accrued on ``balance`` with daily compounding.

    ``balance * (1 + apr / 365 / 100) ** days - balance``

    Args:
        account: Account providing the APR.
        balance: Outstanding balance.
        prime_rate: Prime rate in percent.
        days: Number of days to compound over.

    Returns:
        Decimal: Interest amount, zero when no APR resolves.
    """
    apr = current_apr(account, prime_rate)
    if apr is None:
        return ZERO
    daily_rate = divide(divide(apr, DAYS_PER_YEAR), 100)
    compounded = multiply(balance, power(add(ONE, daily_rate), days))
    return subtract(compounded, balance)


def minimum_payment(
    account: Account,
    balance: Decimal,
    prime_rate: Decimal,
    days: int = DEFAULT_INTEREST_DAYS,
) -> Decimal:
    """Return the minimum required payment.

    ``balance * percent + interest``, floored at the flat minimum and capped
    at the balance. A flat rule only sets the floor; the percent path always
    runs.

    Args:
        account: Account to evaluate.
        balance: Outstanding balance.
        prime_rate: Prime rate in percent.
        days: Interest period in days.

    Returns:
        Decimal: Minimum payment, zero for kinds without minimum payments.
    """
    if not account.kind.has_minimum_payment:
        return ZERO
    rule = account.minimum_payment
    percent = DEFAULT_MINIMUM_PAYMENT_PERCENT
    floor = DEFAULT_MINIMUM_PAYMENT_FLOOR
    if isinstance(rule, PercentMinimum):
        percent = rule.rate
    elif isinstance(rule, FlatMinimum):
        floor = rule.amount

    interest = monthly_interest(account, balance, prime_rate, days)
    calculated = add(multiply(balance, percent), interest)
    return min(max(calculated, floor), balance)


def credit_utilization(account: Account, balance: Decimal) -> Decimal | None:
    """Return ``balance / limit * 100`` for accounts with a positive limit."""
    if not account.kind.has_credit_limit:
        return None
    limit = account.credit_limit
    if limit is None or limit <= 0:
        return None
    return multiply(divide(balance, limit), 100)


def available_credit(account: Account, balance: Decimal) -> Decimal | None:
    """Return ``limit - balance`` for credit-limit capable accounts."""
    if not account.kind.has_credit_limit or account.credit_limit is None:
        return None
    return subtract(account.credit_limit, balance)


def next_due_date(account: Account, from_date: date) -> date | None:
    """Return the next payment due date on or after ``from_date``.

    A due day past the end of a month falls on that month's last day.

    Args:
        account: Account providing the due day.
        from_date: Reference date.

    Returns:
        date | None: Next due date, or None when no due day is configured.
    """
    due_day = account.payment_due_day
    if due_day is None:
        return None
    if from_date.day <= due_day:
        year, month = from_date.year, from_date.month
    elif from_date.month == 12:
        year, month = from_date.year + 1, 1
    else:
        year, month = from_date.year, from_date.month + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(due_day, last_day))


def is_due_between(account: Account, start: date, end: date) -> bool:
    """Return True when the next due date from ``start`` is in [start, end]."""
    due = next_due_date(account, start)
    if due is None:
        return False
    return start <= due <= end


def effective_balance(account: Account, snapshot: BalanceSnapshot) -> Decimal:
    """Return the authoritative balance of a snapshot.

    Credit cards with a recorded available credit and a credit limit derive
    the balance as ``limit - available``; other snapshots use the stored
    amount.
    """
    if (
        account.kind == AccountKind.CREDIT_CARD
        and snapshot.available_credit is not None
        and account.credit_limit is not None
    ):
        return subtract(account.credit_limit, snapshot.available_credit)
    return snapshot.amount


def effective_available_credit(
    account: Account,
    snapshot: BalanceSnapshot,
) -> Decimal | None:
    """Return the available credit to display for a credit card snapshot."""
    if account.kind != AccountKind.CREDIT_CARD:
        return None
    if snapshot.available_credit is not None:
        return snapshot.available_credit
    if account.credit_limit is not None:
        return subtract(account.credit_limit, snapshot.amount)
    return None


def latest_snapshots(
    snapshots: Iterable[BalanceSnapshot],
) -> dict[str, BalanceSnapshot]:
    """Return the most recently entered snapshot per account.

    Ties on the entry timestamp fall back to the as-of date, then the
    snapshot identifier.
    """
    latest: dict[str, BalanceSnapshot] = {}
    for snapshot in snapshots:
        current = latest.get(snapshot.account_id)
        if current is None or _entry_key(snapshot) > _entry_key(current):
            latest[snapshot.account_id] = snapshot
    return latest


def current_positions(
    accounts: Iterable[Account],
    snapshots: Iterable[BalanceSnapshot],
) -> list[AccountPosition]:
    """Pair each active account with its current effective balance.

    Accounts without any snapshot are left out.
    """
    latest = latest_snapshots(snapshots)
    positions: list[AccountPosition] = []
    for account in accounts:
        if not account.is_active:
            continue
        snapshot = latest.get(account.account_id)
        if snapshot is None:
            continue
        positions.append(
            AccountPosition(
                account=account,
                balance=effective_balance(account, snapshot),
            )
        )
    return positions


def _entry_key(snapshot: BalanceSnapshot) -> tuple:
    return (snapshot.entered_at, snapshot.as_of, snapshot.snapshot_id)


__all__ = [
    "current_apr",
    "monthly_interest",
    "minimum_payment",
    "credit_utilization",
    "available_credit",
    "next_due_date",
    "is_due_between",
    "effective_balance",
    "effective_available_credit",
    "latest_snapshots",
    "current_positions",
]
