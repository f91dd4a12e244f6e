"""Domain models for planner outputs and financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.constants import DEFAULT_INTEREST_DAYS
from src.domain.models.accounts import AccountPosition
from src.domain.models.subscriptions import SubscriptionCategory
from src.utils.decimal_utils import sum_decimals


class PaymentStrategy(str, Enum):
    """Debt payoff prioritization strategy."""

    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"


class PaymentPriority(str, Enum):
    """Why a planned payment is in the plan."""

    URGENT = "urgent"
    STRATEGIC = "strategic"


@dataclass(frozen=True)
class FinancialOverview:
    """Fleet-wide rollups over active accounts and their latest balances.

    Attributes:
        total_debt: Sum of debt-kind effective balances.
        total_assets: Sum of asset-kind effective balances.
        net_worth: Assets minus debt.
        total_available_credit: Sum of available credit over credit cards.
        total_minimum_payments: Sum of minimum payments.
        credit_utilization: Card balances over card limits, in percent.
            None when no card has a positive limit.
    """

    total_debt: Decimal
    total_assets: Decimal
    net_worth: Decimal
    total_available_credit: Decimal
    total_minimum_payments: Decimal
    credit_utilization: Decimal | None


@dataclass(frozen=True)
class PlannedPayment:
    """A recommended payment for one account."""

    account_id: str
    institution: str
    label: str
    balance: Decimal
    apr: Decimal | None
    minimum_amount: Decimal
    suggested_amount: Decimal
    priority: PaymentPriority
    is_shortfall_allocation: bool = False


@dataclass(frozen=True)
class PaymentPlanRequest:
    """Inputs for one allocation cycle.

    Attributes:
        positions: Debt accounts with their current balances.
        prime_rate: Prime rate used to resolve variable APRs.
        strategy: Strategy used for shortfall and strategic ordering.
        available_cash: Cash available after the safety buffer.
        today: Start of the first pay period.
        next_paycheck_date: End of period 1, start of period 2.
        second_paycheck_date: End of period 2.
        next_paycheck_amount: Expected amount of the next paycheck.
        interest_days: Days used for interest in minimum payments.
    """

    positions: list[AccountPosition]
    prime_rate: Decimal
    strategy: PaymentStrategy
    available_cash: Decimal
    today: date
    next_paycheck_date: date
    second_paycheck_date: date
    next_paycheck_amount: Decimal
    interest_days: int = DEFAULT_INTEREST_DAYS


@dataclass(frozen=True)
class PaymentPlan:
    """Result of a planning run.

    `is_debt_free` reflects the input positions, not the payments: a plan
    can be empty while debt remains when no cash is available.
    """

    payments: list[PlannedPayment]
    strategy: PaymentStrategy
    available_cash: Decimal
    remaining_cash: Decimal
    period2_shortfall: Decimal
    long_pay_period: bool
    is_debt_free: bool = False

    @property
    def total_suggested(self) -> Decimal:
        """Return the sum of suggested amounts."""
        return sum_decimals(
            payment.suggested_amount for payment in self.payments
        )


@dataclass(frozen=True)
class NetWorthPoint:
    """Net worth for one calendar month."""

    month: date
    net_worth: Decimal


@dataclass(frozen=True)
class CategoryCost:
    """Monthly cost aggregated for a subscription category."""

    category: SubscriptionCategory
    monthly_cost: Decimal


@dataclass(frozen=True)
class SubscriptionSummary:
    """Monthly subscription totals."""

    total_monthly_cost: Decimal
    categories: list[CategoryCost] = field(default_factory=list)


__all__ = [
    "PaymentStrategy",
    "PaymentPriority",
    "FinancialOverview",
    "PlannedPayment",
    "PaymentPlanRequest",
    "PaymentPlan",
    "NetWorthPoint",
    "CategoryCost",
    "SubscriptionSummary",
]
