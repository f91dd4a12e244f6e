"""Tests for the GetFinancialOverviewUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_financial_overview import (
    GetFinancialOverviewUseCase,
)
from src.domain.models import (
    Account,
    AccountKind,
    BalanceSnapshot,
    GlobalSettings,
    VariableApr,
)


def test_execute_returns_overview_totals(
    make_repository,
) -> None:
    """Use case should aggregate the repository data."""
    repository = make_repository(
        accounts=[
            Account("chk", "Bank", "Checking", AccountKind.CHECKING),
            Account(
                "loan",
                "Bank",
                "Loan",
                AccountKind.LOAN,
                apr=VariableApr(margin=Decimal("0")),
            ),
        ],
        snapshots=[
            BalanceSnapshot(
                "s1", "chk", Decimal("3000"), datetime(2024, 3, 1),
                date(2024, 3, 1),
            ),
            BalanceSnapshot(
                "s2", "loan", Decimal("0"), datetime(2024, 3, 1),
                date(2024, 3, 1),
            ),
        ],
        settings=GlobalSettings(prime_rate=Decimal("0")),
    )
    logger = MagicMock()

    overview = GetFinancialOverviewUseCase(repository, logger=logger).execute()

    assert overview.total_assets == Decimal("3000")
    assert overview.total_debt == 0
    assert overview.net_worth == Decimal("3000")
    assert overview.total_minimum_payments == 0
    logger.info.assert_called_once()
