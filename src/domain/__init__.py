"""Domain package for payment planning rules and core models."""

from .models import (
    Account,
    AccountKind,
    AccountPosition,
    BalanceSnapshot,
    FinancialOverview,
    GlobalSettings,
    NetWorthPoint,
    PaymentPlan,
    PaymentPlanRequest,
    PaymentPriority,
    PaymentStrategy,
    PlannedPayment,
    Subscription,
    SubscriptionSummary,
)
from .services import (
    compute_financial_overview,
    compute_net_worth_history,
    generate_payment_plan,
    summarize_subscriptions,
)

__all__ = [
    "Account",
    "AccountKind",
    "AccountPosition",
    "BalanceSnapshot",
    "FinancialOverview",
    "GlobalSettings",
    "NetWorthPoint",
    "PaymentPlan",
    "PaymentPlanRequest",
    "PaymentPriority",
    "PaymentStrategy",
    "PlannedPayment",
    "Subscription",
    "SubscriptionSummary",
    "compute_financial_overview",
    "compute_net_worth_history",
    "generate_payment_plan",
    "summarize_subscriptions",
]
