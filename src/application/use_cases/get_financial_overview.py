"""Use case to compute the dashboard's financial overview."""

from src.application.ports.household_repository import HouseholdRepositoryPort
from src.application.use_cases.prime_rate import resolve_prime_rate
from src.domain.constants import DEFAULT_INTEREST_DAYS
from src.domain.models import FinancialOverview
from src.domain.services.finance import compute_financial_overview
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialOverviewUseCase:
    """Compute debt, asset, credit and minimum payment totals."""

    def __init__(
        self,
        household_repository: HouseholdRepositoryPort,
        logger=None,
        interest_days: int = DEFAULT_INTEREST_DAYS,
    ) -> None:
        """Initialize the use case.

        Args:
            household_repository: Port providing accounts and balances.
            logger: Optional logger compatible with logging.Logger-like API.
            interest_days: Interest period used for minimum payments.
        """
        self._repository = household_repository
        self._logger = logger or get_app_logger()
        self._interest_days = interest_days

    def execute(self) -> FinancialOverview:
        """Return the overview for the current balances.

        Returns:
            FinancialOverview: Aggregated totals for display.
        """
        prime_rate = resolve_prime_rate(self._repository)
        accounts = self._repository.fetch_accounts()
        snapshots = self._repository.fetch_balance_snapshots()
        overview = compute_financial_overview(
            accounts,
            snapshots,
            prime_rate=prime_rate,
            logger=self._logger,
            interest_days=self._interest_days,
        )
        self._logger.info(
            f"Overview computed: assets={overview.total_assets}, "
            f"debt={overview.total_debt}, net_worth={overview.net_worth}"
        )
        return overview


__all__ = ["GetFinancialOverviewUseCase", "FinancialOverview"]
