"""Domain models package."""

from .accounts import (
    ACCOUNT_KIND_CAPABILITIES,
    ASSET_KINDS,
    DEBT_KINDS,
    Account,
    AccountCapabilities,
    AccountKind,
    AccountPosition,
    AprMode,
    AprType,
    BalanceSnapshot,
    FixedApr,
    FlatMinimum,
    MinimumPaymentRule,
    PercentMinimum,
    VariableApr,
)
from .finance import (
    CategoryCost,
    FinancialOverview,
    NetWorthPoint,
    PaymentPlan,
    PaymentPlanRequest,
    PaymentPriority,
    PaymentStrategy,
    PlannedPayment,
    SubscriptionSummary,
)
from .settings import GlobalSettings
from .subscriptions import Subscription, SubscriptionCategory

__all__ = [
    "ACCOUNT_KIND_CAPABILITIES",
    "ASSET_KINDS",
    "DEBT_KINDS",
    "Account",
    "AccountCapabilities",
    "AccountKind",
    "AccountPosition",
    "AprMode",
    "AprType",
    "BalanceSnapshot",
    "FixedApr",
    "FlatMinimum",
    "MinimumPaymentRule",
    "PercentMinimum",
    "VariableApr",
    "CategoryCost",
    "FinancialOverview",
    "NetWorthPoint",
    "PaymentPlan",
    "PaymentPlanRequest",
    "PaymentPriority",
    "PaymentStrategy",
    "PlannedPayment",
    "SubscriptionSummary",
    "GlobalSettings",
    "Subscription",
    "SubscriptionCategory",
]
