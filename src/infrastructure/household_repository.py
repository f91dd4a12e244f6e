"""SQLAlchemy-backed repository for household accounts and balances."""

from datetime import date, datetime
from logging import Logger

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.household_repository import HouseholdRepositoryPort
from src.domain.models import (
    Account,
    BalanceSnapshot,
    GlobalSettings,
    Subscription,
    SubscriptionCategory,
)
from src.domain.services.normalization import (
    build_apr_mode,
    build_minimum_payment_rule,
    normalize_account_kind,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal

GLOBAL_SETTINGS_ID = "global"

CREATE_SCHEMA_SQL = (
    """
    CREATE TABLE IF NOT EXISTS accounts (
        id TEXT PRIMARY KEY,
        bank_name TEXT NOT NULL,
        account_name TEXT NOT NULL,
        account_type TEXT NOT NULL,
        last_four_digits TEXT,
        credit_limit NUMERIC,
        apr_type TEXT,
        fixed_apr NUMERIC,
        margin_apr NUMERIC,
        max_apr NUMERIC,
        payment_due_day INTEGER,
        minimum_payment_amount NUMERIC,
        minimum_payment_percent NUMERIC,
        late_fee NUMERIC,
        is_active BOOLEAN NOT NULL DEFAULT TRUE,
        notes TEXT,
        created_at TIMESTAMP,
        updated_at TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS balance_entries (
        id TEXT PRIMARY KEY,
        account_id TEXT NOT NULL REFERENCES accounts (id),
        amount NUMERIC NOT NULL,
        entry_date TIMESTAMP NOT NULL,
        as_of_date DATE NOT NULL,
        available_credit NUMERIC
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS subscriptions (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        amount NUMERIC NOT NULL,
        times_per_year INTEGER NOT NULL,
        category TEXT NOT NULL,
        notes TEXT,
        is_active BOOLEAN NOT NULL DEFAULT TRUE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS global_settings (
        id TEXT PRIMARY KEY,
        current_prime_rate NUMERIC NOT NULL,
        last_updated TIMESTAMP
    )
    """,
)

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, bank_name, account_name, account_type, last_four_digits,
           credit_limit, apr_type, fixed_apr, margin_apr, max_apr,
           payment_due_day, minimum_payment_amount, minimum_payment_percent,
           late_fee, is_active, notes, created_at, updated_at
    FROM accounts
    ORDER BY bank_name, account_name, id
    """
)

SELECT_BALANCE_ENTRIES_SQL = text(
    """
    SELECT id, account_id, amount, entry_date, as_of_date, available_credit
    FROM balance_entries
    ORDER BY entry_date DESC, id
    """
)

SELECT_SUBSCRIPTIONS_SQL = text(
    """
    SELECT id, name, amount, times_per_year, category, notes, is_active
    FROM subscriptions
    ORDER BY name, id
    """
)

SELECT_GLOBAL_SETTINGS_SQL = text(
    """
    SELECT current_prime_rate, last_updated
    FROM global_settings
    WHERE id = :id
    """
)

DELETE_GLOBAL_SETTINGS_SQL = text(
    "DELETE FROM global_settings WHERE id = :id"
)

INSERT_GLOBAL_SETTINGS_SQL = text(
    """
    INSERT INTO global_settings (id, current_prime_rate, last_updated)
    VALUES (:id, :current_prime_rate, :last_updated)
    """
)


class SqlAlchemyHouseholdRepository(HouseholdRepositoryPort):
    """Repository backed by SQLAlchemy for household data."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the store engine.
            logger: Logger for data quality warnings.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def create_schema(self) -> None:
        """Create the store tables when they do not exist."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            for statement in CREATE_SCHEMA_SQL:
                conn.exec_driver_sql(statement)

    def fetch_accounts(self) -> list[Account]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
        return [
            Account(
                account_id=str(row.id),
                institution=row.bank_name,
                label=row.account_name,
                kind=normalize_account_kind(row.account_type),
                last_four=row.last_four_digits,
                credit_limit=_optional_decimal(row.credit_limit),
                apr=build_apr_mode(
                    row.apr_type,
                    _optional_decimal(row.fixed_apr),
                    _optional_decimal(row.margin_apr),
                    _optional_decimal(row.max_apr),
                    logger=self._logger,
                ),
                payment_due_day=row.payment_due_day,
                minimum_payment=build_minimum_payment_rule(
                    _optional_decimal(row.minimum_payment_amount),
                    _optional_decimal(row.minimum_payment_percent),
                ),
                late_fee=_optional_decimal(row.late_fee),
                is_active=bool(row.is_active),
                notes=row.notes or "",
                created_at=_coerce_datetime(row.created_at),
                updated_at=_coerce_datetime(row.updated_at),
            )
            for row in rows
        ]

    def fetch_balance_snapshots(self) -> list[BalanceSnapshot]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_BALANCE_ENTRIES_SQL).all()
        return [
            BalanceSnapshot(
                snapshot_id=str(row.id),
                account_id=str(row.account_id),
                amount=coerce_decimal(row.amount),
                entered_at=_coerce_datetime(row.entry_date),
                as_of=_coerce_date(row.as_of_date),
                available_credit=_optional_decimal(row.available_credit),
            )
            for row in rows
        ]

    def fetch_subscriptions(self) -> list[Subscription]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_SUBSCRIPTIONS_SQL).all()
        return [
            Subscription(
                subscription_id=str(row.id),
                name=row.name,
                amount=coerce_decimal(row.amount),
                times_per_year=int(row.times_per_year),
                category=SubscriptionCategory(row.category),
                is_active=bool(row.is_active),
                notes=row.notes or "",
            )
            for row in rows
        ]

    def fetch_global_settings(self) -> GlobalSettings | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_GLOBAL_SETTINGS_SQL,
                {"id": GLOBAL_SETTINGS_ID},
            ).first()
        if row is None:
            return None
        return GlobalSettings(
            prime_rate=coerce_decimal(row.current_prime_rate),
            last_updated=_coerce_datetime(row.last_updated),
        )

    def save_global_settings(self, settings: GlobalSettings) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                DELETE_GLOBAL_SETTINGS_SQL,
                {"id": GLOBAL_SETTINGS_ID},
            )
            conn.execute(
                INSERT_GLOBAL_SETTINGS_SQL,
                {
                    "id": GLOBAL_SETTINGS_ID,
                    "current_prime_rate": str(settings.prime_rate),
                    "last_updated": (
                        settings.last_updated.isoformat()
                        if settings.last_updated
                        else None
                    ),
                },
            )


def _optional_decimal(value):
    if value is None:
        return None
    return coerce_decimal(value)


def _coerce_datetime(value) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(str(value))


def _coerce_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


__all__ = ["SqlAlchemyHouseholdRepository", "CREATE_SCHEMA_SQL"]
