"""Tests for the GetSubscriptionSummaryUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_subscription_summary import (
    GetSubscriptionSummaryUseCase,
)
from src.domain.models import Subscription, SubscriptionCategory
from src.utils.decimal_utils import add, divide


def test_execute_summarizes_repository_subscriptions(
    make_repository,
) -> None:
    repository = make_repository(
        subscriptions=[
            Subscription(
                "s1", "Music", Decimal("10.99"), 12, SubscriptionCategory.MUSIC
            ),
            Subscription(
                "s2", "Cloud", Decimal("29.99"), 4,
                SubscriptionCategory.CLOUD_STORAGE,
            ),
        ]
    )
    logger = MagicMock()

    use_case = GetSubscriptionSummaryUseCase(repository, logger=logger)

    summary = use_case.execute()

    expected = add(Decimal("10.99"), divide(Decimal("119.96"), 12))
    assert summary.total_monthly_cost == expected
    assert [c.category for c in summary.categories] == [
        SubscriptionCategory.MUSIC,
        SubscriptionCategory.CLOUD_STORAGE,
    ]
    logger.info.assert_called_once()
