"""Two-tier, shortfall-aware payment allocation.

A planning run covers the cash available now against the next one to two
pay periods:

1. Accounts due before the next paycheck (period 1) get their minimum as an
   urgent payment, whatever the cash on hand.
2. If the minimums due between the next and second paycheck (period 2)
   exceed the next paycheck, the single top-priority period-2 account gets
   an urgent shortfall payment out of the remaining cash.
3. Remaining cash is spread over every other debt account in strategy
   order, never past an account's balance.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import LONG_PAY_PERIOD_DAYS
from src.domain.models import (
    AccountPosition,
    PaymentPlan,
    PaymentPlanRequest,
    PaymentPriority,
    PaymentStrategy,
    PlannedPayment,
)
from src.domain.services.account_finance import (
    current_apr,
    is_due_between,
    minimum_payment,
)
from src.utils.decimal_utils import ZERO, subtract, sum_decimals


def compute_available_cash(
    checking_balance: Decimal,
    safety_buffer: Decimal,
) -> Decimal:
    """Return cash usable for payments once the safety buffer is held back."""
    return max(ZERO, subtract(checking_balance, safety_buffer))


def compute_period_shortfall(
    minimums: Iterable[Decimal],
    paycheck_amount: Decimal,
) -> Decimal:
    """Return how much the minimums exceed the paycheck, never negative."""
    return max(ZERO, subtract(sum_decimals(minimums), paycheck_amount))


def is_long_pay_period(start: date, end: date) -> bool:
    """Return True when a pay period spans more than the advisory limit."""
    return (end - start).days > LONG_PAY_PERIOD_DAYS


def partition_by_due_window(
    positions: Iterable[AccountPosition],
    today: date,
    next_paycheck_date: date,
    second_paycheck_date: date,
) -> tuple[
    list[AccountPosition],
    list[AccountPosition],
    list[AccountPosition],
]:
    """Split positions into period 1, period 2, and everything else.

    An account due in both windows lands in period 1.

    Returns:
        tuple: (period 1, period 2, remaining) in input order.
    """
    period1: list[AccountPosition] = []
    period2: list[AccountPosition] = []
    remaining: list[AccountPosition] = []
    for position in positions:
        account = position.account
        if is_due_between(account, today, next_paycheck_date):
            period1.append(position)
        elif is_due_between(account, next_paycheck_date, second_paycheck_date):
            period2.append(position)
        else:
            remaining.append(position)
    return period1, period2, remaining


def prioritize(
    positions: Iterable[AccountPosition],
    strategy: PaymentStrategy,
    prime_rate: Decimal,
) -> list[AccountPosition]:
    """Order positions by strategy.

    Avalanche puts the highest APR first (no APR counts as zero), snowball
    the lowest balance first. Equal keys keep account identifier order.
    """
    ordered = sorted(positions, key=lambda item: item.account.account_id)
    if strategy == PaymentStrategy.AVALANCHE:
        return sorted(
            ordered,
            key=lambda item: current_apr(item.account, prime_rate) or ZERO,
            reverse=True,
        )
    return sorted(ordered, key=lambda item: item.balance)


def generate_payment_plan(request: PaymentPlanRequest) -> PaymentPlan:
    """Allocate available cash across debt accounts for one cycle.

    Args:
        request: Positions, strategy, cash and pay period boundaries.

    Returns:
        PaymentPlan: Payments with a positive suggested amount, in tier
        order, plus shortfall and advisory figures.

    Raises:
        ValueError: If the paycheck dates are out of order.
    """
    _check_dates(request)
    prime_rate = request.prime_rate
    days = request.interest_days
    period1, period2, remaining = partition_by_due_window(
        request.positions,
        request.today,
        request.next_paycheck_date,
        request.second_paycheck_date,
    )
    cash = max(ZERO, request.available_cash)
    payments: list[PlannedPayment] = []

    for position in period1:
        minimum = minimum_payment(
            position.account,
            position.balance,
            prime_rate,
            days,
        )
        payments.append(
            _planned_payment(
                position,
                prime_rate,
                minimum=minimum,
                suggested=minimum,
                priority=PaymentPriority.URGENT,
            )
        )
        cash = max(ZERO, subtract(cash, minimum))

    period2_minimums = {
        position.account.account_id: minimum_payment(
            position.account,
            position.balance,
            prime_rate,
            days,
        )
        for position in period2
    }
    shortfall = compute_period_shortfall(
        period2_minimums.values(),
        request.next_paycheck_amount,
    )
    if shortfall > 0 and cash > 0 and period2:
        target = prioritize(period2, request.strategy, prime_rate)[0]
        amount = min(shortfall, cash)
        payments.append(
            _planned_payment(
                target,
                prime_rate,
                minimum=period2_minimums[target.account.account_id],
                suggested=amount,
                priority=PaymentPriority.URGENT,
                is_shortfall_allocation=True,
            )
        )
        cash = subtract(cash, amount)

    for position in prioritize(remaining, request.strategy, prime_rate):
        amount = max(ZERO, min(cash, position.balance))
        payments.append(
            _planned_payment(
                position,
                prime_rate,
                minimum=minimum_payment(
                    position.account,
                    position.balance,
                    prime_rate,
                    days,
                ),
                suggested=amount,
                priority=PaymentPriority.STRATEGIC,
            )
        )
        cash = subtract(cash, amount)

    return PaymentPlan(
        payments=[item for item in payments if item.suggested_amount > 0],
        strategy=request.strategy,
        available_cash=max(ZERO, request.available_cash),
        remaining_cash=cash,
        period2_shortfall=shortfall,
        long_pay_period=(
            is_long_pay_period(request.today, request.next_paycheck_date)
            or is_long_pay_period(
                request.next_paycheck_date,
                request.second_paycheck_date,
            )
        ),
        is_debt_free=not any(
            position.balance > 0 for position in request.positions
        ),
    )


def _planned_payment(
    position: AccountPosition,
    prime_rate: Decimal,
    *,
    minimum: Decimal,
    suggested: Decimal,
    priority: PaymentPriority,
    is_shortfall_allocation: bool = False,
) -> PlannedPayment:
    account = position.account
    return PlannedPayment(
        account_id=account.account_id,
        institution=account.institution,
        label=account.label,
        balance=position.balance,
        apr=current_apr(account, prime_rate),
        minimum_amount=minimum,
        suggested_amount=suggested,
        priority=priority,
        is_shortfall_allocation=is_shortfall_allocation,
    )


def _check_dates(request: PaymentPlanRequest) -> None:
    if request.next_paycheck_date < request.today:
        raise ValueError(
            f"next_paycheck_date {request.next_paycheck_date} is before "
            f"today {request.today}"
        )
    if request.second_paycheck_date < request.next_paycheck_date:
        raise ValueError(
            f"second_paycheck_date {request.second_paycheck_date} is before "
            f"next_paycheck_date {request.next_paycheck_date}"
        )


__all__ = [
    "compute_available_cash",
    "compute_period_shortfall",
    "is_long_pay_period",
    "partition_by_due_window",
    "prioritize",
    "generate_payment_plan",
]
