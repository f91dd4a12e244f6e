"""Use case to compute the monthly net worth trend."""

from src.application.ports.household_repository import HouseholdRepositoryPort
from src.domain.models import NetWorthPoint
from src.domain.services.net_worth_history import compute_net_worth_history
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthHistoryUseCase:
    """Compute net worth per month from the snapshot history."""

    def __init__(
        self,
        household_repository: HouseholdRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = household_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> list[NetWorthPoint]:
        """Return up to the last 12 monthly points, oldest first."""
        points = compute_net_worth_history(
            self._repository.fetch_accounts(),
            self._repository.fetch_balance_snapshots(),
            logger=self._logger,
        )
        self._logger.info(f"Net worth history computed: {len(points)} months")
        return points


__all__ = ["GetNetWorthHistoryUseCase", "NetWorthPoint"]
