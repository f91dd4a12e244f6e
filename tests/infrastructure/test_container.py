"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import PaymentStrategy
from src.infrastructure import container as container_module
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.household_repository import (
    SqlAlchemyHouseholdRepository,
)
from src.infrastructure.settings import PlannerSettings


def test_build_household_repository_uses_given_port(monkeypatch) -> None:
    logger = MagicMock()
    monkeypatch.setattr(container_module, "get_app_logger", lambda: logger)
    db_port = MagicMock()

    repository = container_module.build_household_repository(db_port)

    assert isinstance(repository, SqlAlchemyHouseholdRepository)
    assert repository._db_port is db_port
    assert repository._logger is logger


def test_build_household_repository_defaults_to_sqlalchemy_adapter(
    monkeypatch,
) -> None:
    monkeypatch.setattr(container_module, "get_app_logger", MagicMock)
    repository = container_module.build_household_repository()

    assert isinstance(repository._db_port, SqlAlchemyDatabaseEngineAdapter)


def test_build_payment_plan_use_case_applies_settings(monkeypatch) -> None:
    """Settings should flow into the use case configuration."""
    logger = MagicMock()
    monkeypatch.setattr(container_module, "get_app_logger", lambda: logger)
    repository = MagicMock()
    settings = PlannerSettings(
        safety_buffer=Decimal("250"),
        strategy=PaymentStrategy.SNOWBALL,
        interest_days=31,
    )

    use_case = container_module.build_payment_plan_use_case(
        repository,
        settings,
    )

    assert use_case._repository is repository
    assert use_case._logger is logger
    assert use_case._safety_buffer == Decimal("250")
    assert use_case._interest_days == 31
