"""Tests for the GetNetWorthHistoryUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_net_worth_history import (
    GetNetWorthHistoryUseCase,
)
from src.domain.models import Account, AccountKind, BalanceSnapshot


def test_execute_returns_monthly_points(
    make_repository,
) -> None:
    repository = make_repository(
        accounts=[
            Account("sav", "Bank", "Savings", AccountKind.SAVINGS),
            Account("mort", "Bank", "Home", AccountKind.MORTGAGE),
        ],
        snapshots=[
            BalanceSnapshot(
                "1", "sav", Decimal("5000"), datetime(2024, 4, 1),
                date(2024, 3, 31),
            ),
            BalanceSnapshot(
                "2", "mort", Decimal("2000"), datetime(2024, 4, 1),
                date(2024, 3, 31),
            ),
            BalanceSnapshot(
                "3", "sav", Decimal("5500"), datetime(2024, 5, 1),
                date(2024, 4, 30),
            ),
        ],
    )

    use_case = GetNetWorthHistoryUseCase(repository, logger=MagicMock())

    points = use_case.execute()

    assert [(p.month, p.net_worth) for p in points] == [
        (date(2024, 3, 1), Decimal("3000")),
        (date(2024, 4, 1), Decimal("5500")),
    ]
