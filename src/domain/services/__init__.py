"""Domain services package."""

from .account_finance import (
    available_credit,
    credit_utilization,
    current_apr,
    current_positions,
    effective_available_credit,
    effective_balance,
    is_due_between,
    latest_snapshots,
    minimum_payment,
    monthly_interest,
    next_due_date,
)
from .finance import compute_financial_overview
from .net_worth_history import compute_net_worth_history, is_plottable
from .normalization import (
    build_apr_mode,
    build_minimum_payment_rule,
    normalize_account_kind,
)
from .payment_plan import (
    compute_available_cash,
    compute_period_shortfall,
    generate_payment_plan,
    is_long_pay_period,
    partition_by_due_window,
    prioritize,
)
from .subscriptions import monthly_cost, summarize_subscriptions
from .validation import (
    validate_account_configuration,
    validate_prime_rate,
    validate_snapshot_amount,
)

__all__ = [
    "available_credit",
    "credit_utilization",
    "current_apr",
    "current_positions",
    "effective_available_credit",
    "effective_balance",
    "is_due_between",
    "latest_snapshots",
    "minimum_payment",
    "monthly_interest",
    "next_due_date",
    "compute_financial_overview",
    "compute_net_worth_history",
    "is_plottable",
    "build_apr_mode",
    "build_minimum_payment_rule",
    "normalize_account_kind",
    "compute_available_cash",
    "compute_period_shortfall",
    "generate_payment_plan",
    "is_long_pay_period",
    "partition_by_due_window",
    "prioritize",
    "monthly_cost",
    "summarize_subscriptions",
    "validate_account_configuration",
    "validate_prime_rate",
    "validate_snapshot_amount",
]
