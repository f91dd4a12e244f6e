"""Monthly net worth series for trend display."""

from collections.abc import Iterable
from datetime import date
from logging import Logger

from src.domain.constants import MIN_PLOTTABLE_POINTS, NET_WORTH_HISTORY_MONTHS
from src.domain.models import (
    ASSET_KINDS,
    DEBT_KINDS,
    Account,
    BalanceSnapshot,
    NetWorthPoint,
)
from src.domain.services.account_finance import effective_balance
from src.domain.services.validation import validate_snapshot_amount
from src.utils.decimal_utils import ZERO, add, subtract


def compute_net_worth_history(
    accounts: Iterable[Account],
    snapshots: Iterable[BalanceSnapshot],
    *,
    logger: Logger,
    max_months: int = NET_WORTH_HISTORY_MONTHS,
) -> list[NetWorthPoint]:
    """Compute net worth per calendar month of snapshot as-of dates.

    For every month holding at least one snapshot, each active account
    contributes the snapshot with the latest as-of date inside that month.
    Accounts with no snapshot in a month are left out of it. Asset kinds add,
    debt kinds subtract, other kinds are ignored.

    Args:
        accounts: Tracked accounts; inactive ones are skipped.
        snapshots: Full snapshot history.
        logger: Logger used for warnings.
        max_months: Number of most recent months to keep.

    Returns:
        list[NetWorthPoint]: Points sorted by month ascending.
    """
    accounts = list(accounts)
    known = {account.account_id for account in accounts}
    active = {
        account.account_id: account
        for account in accounts
        if account.is_active
    }
    # month -> account_id -> latest snapshot in that month
    buckets: dict[date, dict[str, BalanceSnapshot]] = {}
    for snapshot in snapshots:
        if snapshot.account_id not in known:
            logger.warning(
                f"Balance snapshot {snapshot.snapshot_id} references "
                f"unknown account {snapshot.account_id}"
            )
            continue
        if snapshot.account_id not in active:
            continue
        validate_snapshot_amount(snapshot, logger)
        month = snapshot.as_of.replace(day=1)
        per_account = buckets.setdefault(month, {})
        current = per_account.get(snapshot.account_id)
        if current is None or _as_of_key(snapshot) > _as_of_key(current):
            per_account[snapshot.account_id] = snapshot

    points: list[NetWorthPoint] = []
    for month in sorted(buckets):
        net_worth = ZERO
        for account_id, snapshot in buckets[month].items():
            account = active[account_id]
            balance = effective_balance(account, snapshot)
            if account.kind in ASSET_KINDS:
                net_worth = add(net_worth, balance)
            elif account.kind in DEBT_KINDS:
                net_worth = subtract(net_worth, balance)
        points.append(NetWorthPoint(month=month, net_worth=net_worth))

    if max_months <= 0:
        return []
    return points[-max_months:]


def is_plottable(points: list[NetWorthPoint]) -> bool:
    """Return True when the series has enough points for a trend line."""
    return len(points) >= MIN_PLOTTABLE_POINTS


def _as_of_key(snapshot: BalanceSnapshot) -> tuple:
    return (snapshot.as_of, snapshot.entered_at, snapshot.snapshot_id)


__all__ = ["compute_net_worth_history", "is_plottable"]
