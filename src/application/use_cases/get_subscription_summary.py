"""Use case to total recurring subscription costs."""

from src.application.ports.household_repository import HouseholdRepositoryPort
from src.domain.models import SubscriptionSummary
from src.domain.services.subscriptions import summarize_subscriptions
from src.infrastructure.logging.logger import get_app_logger


class GetSubscriptionSummaryUseCase:
    """Compute the monthly cost of active subscriptions."""

    def __init__(
        self,
        household_repository: HouseholdRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = household_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> SubscriptionSummary:
        summary = summarize_subscriptions(
            self._repository.fetch_subscriptions()
        )
        self._logger.info(
            f"Subscriptions total {summary.total_monthly_cost}/month"
        )
        return summary


__all__ = ["GetSubscriptionSummaryUseCase", "SubscriptionSummary"]
