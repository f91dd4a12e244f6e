"""Subscription cost rollups."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import (
    CategoryCost,
    Subscription,
    SubscriptionCategory,
    SubscriptionSummary,
)
from src.utils.decimal_utils import ZERO, add, divide, multiply


def monthly_cost(subscription: Subscription) -> Decimal:
    """Return ``amount * times_per_year / 12``."""
    return divide(
        multiply(subscription.amount, subscription.times_per_year),
        12,
    )


def summarize_subscriptions(
    subscriptions: Iterable[Subscription],
) -> SubscriptionSummary:
    """Total the monthly cost of active subscriptions, overall and by category.

    Categories with no active subscription are omitted; the rest follow the
    category declaration order.
    """
    totals: dict[SubscriptionCategory, Decimal] = {}
    total = ZERO
    for subscription in subscriptions:
        if not subscription.is_active:
            continue
        cost = monthly_cost(subscription)
        total = add(total, cost)
        totals[subscription.category] = add(
            totals.get(subscription.category, ZERO),
            cost,
        )
    categories = [
        CategoryCost(category=category, monthly_cost=totals[category])
        for category in SubscriptionCategory
        if category in totals
    ]
    return SubscriptionSummary(total_monthly_cost=total, categories=categories)


__all__ = ["monthly_cost", "summarize_subscriptions"]
