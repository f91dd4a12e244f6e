from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import (
    Account,
    AccountKind,
    BalanceSnapshot,
    FixedApr,
    PercentMinimum,
)
from src.domain.services.validation import (
    validate_account_configuration,
    validate_prime_rate,
    validate_snapshot_amount,
)


def _snapshot(amount: str) -> BalanceSnapshot:
    return BalanceSnapshot(
        snapshot_id="s1",
        account_id="a1",
        amount=Decimal(amount),
        entered_at=datetime(2024, 1, 1),
        as_of=date(2024, 1, 1),
    )


def test_validate_snapshot_amount_warns_on_negative() -> None:
    logger = MagicMock()

    validate_snapshot_amount(_snapshot("0"), logger)
    logger.warning.assert_not_called()

    validate_snapshot_amount(_snapshot("-1"), logger)
    logger.warning.assert_called_once()


def test_validate_account_configuration_warns_on_ignored_fields() -> None:
    logger = MagicMock()
    savings = Account(
        account_id="sav",
        institution="Bank",
        label="Savings",
        kind=AccountKind.SAVINGS,
        credit_limit=Decimal("100"),
        apr=FixedApr(rate=Decimal("4")),
        minimum_payment=PercentMinimum(rate=Decimal("0.01")),
    )

    validate_account_configuration(savings, logger)

    assert logger.warning.call_count == 3


def test_validate_account_configuration_accepts_card_fields() -> None:
    logger = MagicMock()
    card = Account(
        account_id="card",
        institution="Bank",
        label="Card",
        kind=AccountKind.CREDIT_CARD,
        credit_limit=Decimal("100"),
        apr=FixedApr(rate=Decimal("24")),
    )

    validate_account_configuration(card, logger)

    logger.warning.assert_not_called()


@pytest.mark.parametrize("rate", ["0", "8.5", "30"])
def test_validate_prime_rate_accepts_bounds(rate) -> None:
    assert validate_prime_rate(Decimal(rate)) == Decimal(rate)


@pytest.mark.parametrize("rate", ["-0.01", "30.01", "100"])
def test_validate_prime_rate_rejects_out_of_range(rate) -> None:
    with pytest.raises(ValueError):
        validate_prime_rate(Decimal(rate))
