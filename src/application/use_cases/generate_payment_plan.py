"""Use case to recommend this cycle's debt payments."""

from datetime import date
from decimal import Decimal

from src.application.ports.household_repository import HouseholdRepositoryPort
from src.application.use_cases.prime_rate import resolve_prime_rate
from src.domain.constants import (
    DEFAULT_INTEREST_DAYS,
    DEFAULT_SAFETY_BUFFER,
    LONG_PAY_PERIOD_DAYS,
)
from src.domain.models import (
    DEBT_KINDS,
    AccountKind,
    PaymentPlan,
    PaymentPlanRequest,
    PaymentStrategy,
)
from src.domain.services.account_finance import current_positions
from src.domain.services.payment_plan import (
    compute_available_cash,
    generate_payment_plan,
)
from src.domain.services.validation import validate_account_configuration
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import sum_decimals


class GeneratePaymentPlanUseCase:
    """Allocate checking cash across debts for the next pay periods."""

    def __init__(
        self,
        household_repository: HouseholdRepositoryPort,
        logger=None,
        safety_buffer: Decimal = DEFAULT_SAFETY_BUFFER,
        interest_days: int = DEFAULT_INTEREST_DAYS,
    ) -> None:
        """Initialize the use case.

        Args:
            household_repository: Port providing accounts and balances.
            logger: Optional logger compatible with logging.Logger-like API.
            safety_buffer: Checking cash always held back.
            interest_days: Interest period used for minimum payments.
        """
        self._repository = household_repository
        self._logger = logger or get_app_logger()
        self._safety_buffer = safety_buffer
        self._interest_days = interest_days

    def execute(
        self,
        *,
        strategy: PaymentStrategy,
        today: date,
        next_paycheck_date: date,
        second_paycheck_date: date,
        next_paycheck_amount: Decimal,
    ) -> PaymentPlan:
        """Return the payment plan for the current balances.

        Args:
            strategy: Avalanche or snowball.
            today: First day of the planning window.
            next_paycheck_date: Date of the next paycheck.
            second_paycheck_date: Date of the paycheck after that.
            next_paycheck_amount: Expected amount of the next paycheck.

        Returns:
            PaymentPlan: Ordered planned payments and advisories.
        """
        prime_rate = resolve_prime_rate(self._repository)
        accounts = self._repository.fetch_accounts()
        for account in accounts:
            validate_account_configuration(account, self._logger)
        positions = current_positions(
            accounts,
            self._repository.fetch_balance_snapshots(),
        )

        checking_balance = sum_decimals(
            position.balance
            for position in positions
            if position.account.kind == AccountKind.CHECKING
        )
        available_cash = compute_available_cash(
            checking_balance,
            self._safety_buffer,
        )
        debt_positions = [
            position
            for position in positions
            if position.account.kind in DEBT_KINDS
        ]

        plan = generate_payment_plan(
            PaymentPlanRequest(
                positions=debt_positions,
                prime_rate=prime_rate,
                strategy=strategy,
                available_cash=available_cash,
                today=today,
                next_paycheck_date=next_paycheck_date,
                second_paycheck_date=second_paycheck_date,
                next_paycheck_amount=next_paycheck_amount,
                interest_days=self._interest_days,
            )
        )
        self._logger.info(
            f"Payment plan generated: strategy={strategy.value}, "
            f"cash={available_cash}, payments={len(plan.payments)}, "
            f"shortfall={plan.period2_shortfall}"
        )
        if plan.long_pay_period:
            self._logger.warning(
                f"Pay period longer than {LONG_PAY_PERIOD_DAYS} days; "
                "plan accuracy is reduced"
            )
        return plan


__all__ = ["GeneratePaymentPlanUseCase", "PaymentPlan"]
