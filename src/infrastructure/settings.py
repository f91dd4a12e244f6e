"""Settings helpers for the payment planner."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

from src.domain.constants import DEFAULT_INTEREST_DAYS, DEFAULT_SAFETY_BUFFER
from src.domain.models import PaymentStrategy
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PlannerSettings:
    """Settings for payment planning runs.

    Attributes:
        safety_buffer: Checking cash never allocated to payments.
        strategy: Default payoff strategy.
        interest_days: Interest period used for minimum payments.
    """

    safety_buffer: Decimal = DEFAULT_SAFETY_BUFFER
    strategy: PaymentStrategy = PaymentStrategy.AVALANCHE
    interest_days: int = DEFAULT_INTEREST_DAYS

    @classmethod
    def from_env(cls) -> "PlannerSettings":
        """Build settings from environment variables.

        Returns:
            PlannerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        safety_buffer = cls._parse_buffer(
            os.getenv("PLANNER_SAFETY_BUFFER"),
            logger=logger,
        )
        strategy = cls._parse_strategy(
            os.getenv("PLANNER_STRATEGY"),
            logger=logger,
        )
        interest_days = cls._parse_days(
            os.getenv("PLANNER_INTEREST_DAYS"),
            logger=logger,
        )
        return cls(
            safety_buffer=safety_buffer,
            strategy=strategy,
            interest_days=interest_days,
        )

    @staticmethod
    def _parse_buffer(raw_value: str | None, logger) -> Decimal:
        """Parse the safety buffer amount.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            Decimal: Parsed non-negative buffer or the default.
        """
        if not raw_value:
            return DEFAULT_SAFETY_BUFFER
        try:
            value = Decimal(raw_value.strip())
        except InvalidOperation:
            logger.warning(
                f"Invalid PLANNER_SAFETY_BUFFER '{raw_value}'. "
                f"Using {DEFAULT_SAFETY_BUFFER}."
            )
            return DEFAULT_SAFETY_BUFFER
        if value < 0:
            logger.warning(
                f"Negative PLANNER_SAFETY_BUFFER '{raw_value}'. Using 0."
            )
            return Decimal("0")
        return value

    @staticmethod
    def _parse_strategy(raw_value: str | None, logger) -> PaymentStrategy:
        if not raw_value:
            return PaymentStrategy.AVALANCHE
        try:
            return PaymentStrategy(raw_value.strip().lower())
        except ValueError:
            logger.warning(
                f"Unknown PLANNER_STRATEGY '{raw_value}'. Using avalanche."
            )
            return PaymentStrategy.AVALANCHE

    @staticmethod
    def _parse_days(raw_value: str | None, logger) -> int:
        if not raw_value:
            return DEFAULT_INTEREST_DAYS
        try:
            days = int(raw_value)
        except ValueError:
            days = 0
        if days <= 0:
            logger.warning(
                f"Invalid PLANNER_INTEREST_DAYS '{raw_value}'. "
                f"Using {DEFAULT_INTEREST_DAYS}."
            )
            return DEFAULT_INTEREST_DAYS
        return days


__all__ = ["PlannerSettings"]
