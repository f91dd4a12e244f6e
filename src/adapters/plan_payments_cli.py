"""CLI adapter printing this cycle's recommended debt payments.

Paycheck inputs come from environment variables:

* ``PLANNER_NEXT_PAYCHECK`` and ``PLANNER_SECOND_PAYCHECK`` (YYYY-MM-DD);
* ``PLANNER_PAYCHECK_AMOUNT``;
* ``PLANNER_STRATEGY`` / ``PLANNER_SAFETY_BUFFER`` through PlannerSettings.
"""

from datetime import date, timedelta
from decimal import Decimal, InvalidOperation
import os

from src.domain.constants import LONG_PAY_PERIOD_DAYS
from src.infrastructure.container import (
    build_household_repository,
    build_payment_plan_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import PlannerSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _parse_amount(value: str | None, logger) -> Decimal:
    if not value:
        return Decimal("0")
    try:
        return Decimal(value)
    except InvalidOperation:
        logger.warning(f"Invalid amount '{value}'. Using 0.")
        return Decimal("0")


def main() -> None:
    """Generate and print a payment plan."""
    logger = get_app_logger()
    settings = PlannerSettings.from_env()
    today = date.today()
    next_paycheck = (
        _parse_date(os.getenv("PLANNER_NEXT_PAYCHECK"), logger)
        or today + timedelta(days=14)
    )
    second_paycheck = (
        _parse_date(os.getenv("PLANNER_SECOND_PAYCHECK"), logger)
        or next_paycheck + timedelta(days=14)
    )
    paycheck_amount = _parse_amount(
        os.getenv("PLANNER_PAYCHECK_AMOUNT"),
        logger,
    )

    use_case = build_payment_plan_use_case(
        build_household_repository(),
        settings,
    )
    try:
        plan = use_case.execute(
            strategy=settings.strategy,
            today=today,
            next_paycheck_date=next_paycheck,
            second_paycheck_date=second_paycheck,
            next_paycheck_amount=paycheck_amount,
        )
    except ValueError as exc:
        logger.error(str(exc))
        return

    print(
        f"Payment plan ({plan.strategy.value}, "
        f"cash={plan.available_cash:.2f}, next paycheck={next_paycheck})"
    )
    if plan.is_debt_free:
        print("Nothing to pay: debt free.")
    elif not plan.payments:
        print("No payment fits the available cash this cycle.")
    for payment in plan.payments:
        tag = "shortfall" if payment.is_shortfall_allocation else (
            payment.priority.value
        )
        print(
            f"[{tag}] {payment.institution} {payment.label}: "
            f"pay {payment.suggested_amount:.2f} "
            f"(balance {payment.balance:.2f}, "
            f"minimum {payment.minimum_amount:.2f})"
        )
    if plan.payments:
        print(f"Total: {plan.total_suggested:.2f}")
    if plan.period2_shortfall > 0:
        print(f"Shortfall next period: {plan.period2_shortfall:.2f}")
    if plan.long_pay_period:
        print(
            f"Warning: pay period exceeds {LONG_PAY_PERIOD_DAYS} days; "
            "plan is approximate."
        )


if __name__ == "__main__":  # pragma: no cover
    main()
