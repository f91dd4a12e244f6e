"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.household_repository import HouseholdRepositoryPort
from src.application.use_cases.generate_payment_plan import (
    GeneratePaymentPlanUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.household_repository import (
    SqlAlchemyHouseholdRepository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import PlannerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_household_repository(
    db_port: DatabaseEnginePort | None = None,
) -> HouseholdRepositoryPort:
    """Return the household repository for planner reads."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyHouseholdRepository(resolved_db, logger=get_app_logger())


def build_payment_plan_use_case(
    repository: HouseholdRepositoryPort | None = None,
    settings: PlannerSettings | None = None,
) -> GeneratePaymentPlanUseCase:
    """Return the payment plan use case configured from the environment."""
    resolved_settings = settings or PlannerSettings.from_env()
    return GeneratePaymentPlanUseCase(
        repository or build_household_repository(),
        logger=get_app_logger(),
        safety_buffer=resolved_settings.safety_buffer,
        interest_days=resolved_settings.interest_days,
    )


__all__ = [
    "build_database_adapter",
    "build_household_repository",
    "build_payment_plan_use_case",
]
