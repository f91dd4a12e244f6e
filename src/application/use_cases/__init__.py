"""Application use cases package."""

from .generate_payment_plan import GeneratePaymentPlanUseCase, PaymentPlan
from .get_financial_overview import (
    FinancialOverview,
    GetFinancialOverviewUseCase,
)
from .get_net_worth_history import GetNetWorthHistoryUseCase, NetWorthPoint
from .get_subscription_summary import (
    GetSubscriptionSummaryUseCase,
    SubscriptionSummary,
)
from .manage_global_settings import (
    EnsureGlobalSettingsUseCase,
    UpdatePrimeRateUseCase,
)

__all__ = [
    "GeneratePaymentPlanUseCase",
    "PaymentPlan",
    "GetFinancialOverviewUseCase",
    "FinancialOverview",
    "GetNetWorthHistoryUseCase",
    "NetWorthPoint",
    "GetSubscriptionSummaryUseCase",
    "SubscriptionSummary",
    "EnsureGlobalSettingsUseCase",
    "UpdatePrimeRateUseCase",
]
