"""Domain models for tracked accounts and balance snapshots."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class AccountKind(str, Enum):
    """Kind of a tracked account."""

    CHECKING = "Checking"
    SAVINGS = "Savings"
    CREDIT_CARD = "Credit Card"
    LOAN = "Loan"
    MORTGAGE = "Mortgage"
    IRA = "IRA"
    RETIREMENT_401K = "401(k)"
    BROKERAGE = "Brokerage"
    OTHER = "Other"

    @property
    def capabilities(self) -> "AccountCapabilities":
        return ACCOUNT_KIND_CAPABILITIES[self]

    @property
    def has_apr(self) -> bool:
        return self.capabilities.has_apr

    @property
    def has_minimum_payment(self) -> bool:
        return self.capabilities.has_minimum_payment

    @property
    def has_credit_limit(self) -> bool:
        return self.capabilities.has_credit_limit


@dataclass(frozen=True)
class AccountCapabilities:
    """Computations an account kind supports."""

    has_apr: bool = False
    has_minimum_payment: bool = False
    has_credit_limit: bool = False


_NONE = AccountCapabilities()
_DEBT = AccountCapabilities(has_apr=True, has_minimum_payment=True)

ACCOUNT_KIND_CAPABILITIES: dict[AccountKind, AccountCapabilities] = {
    AccountKind.CHECKING: _NONE,
    AccountKind.SAVINGS: _NONE,
    AccountKind.CREDIT_CARD: AccountCapabilities(
        has_apr=True,
        has_minimum_payment=True,
        has_credit_limit=True,
    ),
    AccountKind.LOAN: _DEBT,
    AccountKind.MORTGAGE: _DEBT,
    AccountKind.IRA: _NONE,
    AccountKind.RETIREMENT_401K: _NONE,
    AccountKind.BROKERAGE: _NONE,
    AccountKind.OTHER: _NONE,
}

DEBT_KINDS = (
    AccountKind.CREDIT_CARD,
    AccountKind.LOAN,
    AccountKind.MORTGAGE,
)

ASSET_KINDS = (
    AccountKind.CHECKING,
    AccountKind.SAVINGS,
    AccountKind.IRA,
    AccountKind.RETIREMENT_401K,
    AccountKind.BROKERAGE,
)


class AprType(str, Enum):
    """Stored APR mode labels."""

    FIXED = "Fixed"
    VARIABLE = "Variable"


@dataclass(frozen=True)
class FixedApr:
    """APR fixed at a given annual percentage."""

    rate: Decimal


@dataclass(frozen=True)
class VariableApr:
    """APR indexed to prime: prime + margin, optionally capped."""

    margin: Decimal
    cap: Decimal | None = None


AprMode = FixedApr | VariableApr


@dataclass(frozen=True)
class FlatMinimum:
    """Minimum payment floor expressed as a flat amount."""

    amount: Decimal


@dataclass(frozen=True)
class PercentMinimum:
    """Minimum payment expressed as a fraction of balance (0.01 = 1%)."""

    rate: Decimal


MinimumPaymentRule = FlatMinimum | PercentMinimum


@dataclass(frozen=True)
class Account:
    """A tracked financial account.

    Attributes:
        account_id: Stable identifier.
        institution: Institution (bank) name.
        label: Account label shown to the user.
        kind: Account kind driving capabilities.
        last_four: Optional last four digits.
        credit_limit: Credit limit, meaningful for credit cards only.
        apr: Optional APR configuration.
        payment_due_day: Optional due day of month (1-31).
        minimum_payment: Optional minimum payment rule.
        late_fee: Optional late fee.
        is_active: False for archived accounts.
        notes: Free-text notes.
    """

    account_id: str
    institution: str
    label: str
    kind: AccountKind
    last_four: str | None = None
    credit_limit: Decimal | None = None
    apr: AprMode | None = None
    payment_due_day: int | None = None
    minimum_payment: MinimumPaymentRule | None = None
    late_fee: Decimal | None = None
    is_active: bool = True
    notes: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.payment_due_day is not None and not (
            1 <= self.payment_due_day <= 31
        ):
            raise ValueError(
                f"payment_due_day must be between 1 and 31, "
                f"got {self.payment_due_day}"
            )


@dataclass(frozen=True)
class BalanceSnapshot:
    """Point-in-time balance record for one account.

    ``amount`` is stored non-negative. For credit cards ``available_credit``
    is authoritative when present.
    """

    snapshot_id: str
    account_id: str
    amount: Decimal
    entered_at: datetime
    as_of: date
    available_credit: Decimal | None = None


@dataclass(frozen=True)
class AccountPosition:
    """An account paired with its current effective balance."""

    account: Account
    balance: Decimal


__all__ = [
    "AccountKind",
    "AccountCapabilities",
    "ACCOUNT_KIND_CAPABILITIES",
    "DEBT_KINDS",
    "ASSET_KINDS",
    "AprType",
    "FixedApr",
    "VariableApr",
    "AprMode",
    "FlatMinimum",
    "PercentMinimum",
    "MinimumPaymentRule",
    "Account",
    "BalanceSnapshot",
    "AccountPosition",
]
