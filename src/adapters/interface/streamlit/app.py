"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.use_cases.generate_payment_plan import PaymentPlan
from src.application.use_cases.get_financial_overview import (
    FinancialOverview,
    GetFinancialOverviewUseCase,
)
from src.application.use_cases.get_net_worth_history import (
    GetNetWorthHistoryUseCase,
    NetWorthPoint,
)
from src.application.use_cases.get_subscription_summary import (
    GetSubscriptionSummaryUseCase,
    SubscriptionSummary,
)
from src.application.use_cases.manage_global_settings import (
    EnsureGlobalSettingsUseCase,
    UpdatePrimeRateUseCase,
)
from src.domain.constants import (
    LONG_PAY_PERIOD_DAYS,
    MAX_PRIME_RATE,
    MIN_PRIME_RATE,
)
from src.domain.models import PaymentStrategy
from src.domain.services.net_worth_history import is_plottable
from src.infrastructure.container import (
    build_household_repository,
    build_payment_plan_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import PlannerSettings

_STRATEGY_LABELS = {
    PaymentStrategy.AVALANCHE: "Avalanche (Highest APR)",
    PaymentStrategy.SNOWBALL: "Snowball (Lowest Balance)",
}


def _fetch_overview() -> FinancialOverview:
    """Fetch the financial overview from the store."""
    use_case = GetFinancialOverviewUseCase(build_household_repository())
    return use_case.execute()


def _fetch_subscription_summary() -> SubscriptionSummary:
    """Fetch the monthly subscription totals from the store."""
    use_case = GetSubscriptionSummaryUseCase(build_household_repository())
    return use_case.execute()


def _fetch_net_worth_history() -> list[NetWorthPoint]:
    """Fetch the monthly net worth series from the store."""
    use_case = GetNetWorthHistoryUseCase(build_household_repository())
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_net_worth_history(schema_version: int = 1) -> list[NetWorthPoint]:
    """Cached wrapper around _fetch_net_worth_history."""
    _ = schema_version
    return _fetch_net_worth_history()


def _ensure_settings() -> Decimal:
    """Create the settings singleton on first load and return the prime."""
    use_case = EnsureGlobalSettingsUseCase(build_household_repository())
    return use_case.execute().prime_rate


def _update_prime_rate(prime_rate: Decimal) -> Decimal:
    """Persist a new prime rate and return the stored value."""
    use_case = UpdatePrimeRateUseCase(build_household_repository())
    return use_case.execute(prime_rate).prime_rate


def _generate_plan(
    strategy: PaymentStrategy,
    today: date,
    next_paycheck: date,
    second_paycheck: date,
    paycheck_amount: Decimal,
    safety_buffer: Decimal,
) -> PaymentPlan:
    """Run the payment plan use case with the sidebar inputs."""
    defaults = PlannerSettings.from_env()
    use_case = build_payment_plan_use_case(
        settings=PlannerSettings(
            safety_buffer=safety_buffer,
            strategy=strategy,
            interest_days=defaults.interest_days,
        )
    )
    return use_case.execute(
        strategy=strategy,
        today=today,
        next_paycheck_date=next_paycheck,
        second_paycheck_date=second_paycheck,
        next_paycheck_amount=paycheck_amount,
    )


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _format_percent(value: Decimal | None) -> str:
    """Format a percentage, or a dash when undefined."""
    if value is None:
        return "N/A"
    return f"{value:.1f}%"


def _render_overview(
    overview: FinancialOverview,
    subscriptions: SubscriptionSummary,
) -> None:
    """Render the metric cards."""
    st.subheader("Financial Overview")
    debt_col, assets_col, net_worth_col = st.columns(3)
    debt_col.metric("Total Debt", _format_currency(overview.total_debt))
    assets_col.metric("Total Assets", _format_currency(overview.total_assets))
    net_worth_col.metric("Net Worth", _format_currency(overview.net_worth))

    credit_col, minimums_col, utilization_col = st.columns(3)
    credit_col.metric(
        "Available Credit",
        _format_currency(overview.total_available_credit),
    )
    minimums_col.metric(
        "Monthly Minimums",
        _format_currency(overview.total_minimum_payments),
    )
    utilization_col.metric(
        "Credit Utilization",
        _format_percent(overview.credit_utilization),
    )
    st.metric(
        "Monthly Subscriptions",
        _format_currency(subscriptions.total_monthly_cost),
    )


def _plan_rows(plan: PaymentPlan) -> list[dict[str, str]]:
    """Convert planned payments to table rows."""
    rows = []
    for payment in plan.payments:
        priority = "Shortfall" if payment.is_shortfall_allocation else (
            payment.priority.value.capitalize()
        )
        rows.append(
            {
                "Account": f"{payment.institution} {payment.label}",
                "Priority": priority,
                "Balance": _format_currency(payment.balance),
                "APR": _format_percent(payment.apr),
                "Minimum": _format_currency(payment.minimum_amount),
                "Suggested": _format_currency(payment.suggested_amount),
            }
        )
    return rows


def _render_payment_plan(plan: PaymentPlan) -> None:
    """Render a generated plan with its advisories."""
    st.subheader("Payment Plan")
    st.caption(
        f"Available after safety buffer: "
        f"{_format_currency(plan.available_cash)}"
    )
    if plan.long_pay_period:
        st.warning(
            f"A pay period is longer than {LONG_PAY_PERIOD_DAYS} days; "
            "the plan is approximate."
        )
    if plan.period2_shortfall > 0:
        st.warning(
            "Next paycheck does not cover the following period's minimums "
            f"(shortfall {_format_currency(plan.period2_shortfall)})."
        )
    if plan.is_debt_free:
        st.success("Debt free: nothing to pay this cycle.")
        return
    if not plan.payments:
        st.info("No payment fits the available cash this cycle.")
        return
    st.dataframe(_plan_rows(plan), width="stretch", hide_index=True)
    st.metric("Total Payment", _format_currency(plan.total_suggested))


def _prepare_trend_data(
    points: Sequence[NetWorthPoint],
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows for the net worth trend."""
    return [
        {
            "month": point.month.isoformat(),
            "net_worth": float(point.net_worth),
            "net_worth_label": _format_currency(point.net_worth),
        }
        for point in points
    ]


def _render_net_worth_chart(points: Sequence[NetWorthPoint]) -> None:
    """Render the monthly net worth line, or explain why it is missing."""
    st.subheader("Net Worth Trend")
    if not is_plottable(list(points)):
        st.info(
            "Enter balances for at least 2 different months to see your "
            "net worth trend."
        )
        return
    chart = (
        alt.Chart(alt.Data(values=_prepare_trend_data(points)))
        .mark_line(point=True, interpolate="monotone")
        .encode(
            x=alt.X("month:T", title="Month"),
            y=alt.Y("net_worth:Q", title="Net Worth"),
            tooltip=[
                alt.Tooltip("month:T", format="%b %Y"),
                alt.Tooltip("net_worth_label:N", title="Net Worth"),
            ],
        )
        .properties(height=240)
    )
    st.altair_chart(chart, width="stretch")


def _render_plan_page(defaults: PlannerSettings) -> None:
    """Collect plan inputs from the sidebar and render the plan."""
    today = date.today()
    strategy = st.sidebar.selectbox(
        "Strategy",
        options=list(_STRATEGY_LABELS),
        index=list(_STRATEGY_LABELS).index(defaults.strategy),
        format_func=lambda item: _STRATEGY_LABELS[item],
    )
    next_paycheck = st.sidebar.date_input(
        "Next paycheck",
        value=today + timedelta(days=14),
    )
    second_paycheck = st.sidebar.date_input(
        "Second paycheck",
        value=next_paycheck + timedelta(days=14),
    )
    paycheck_amount = st.sidebar.number_input(
        "Next paycheck amount",
        min_value=0.0,
        value=0.0,
        step=100.0,
    )
    safety_buffer = st.sidebar.number_input(
        "Safety buffer",
        min_value=0.0,
        value=float(defaults.safety_buffer),
        step=50.0,
    )
    try:
        plan = _generate_plan(
            strategy,
            today,
            next_paycheck,
            second_paycheck,
            Decimal(str(paycheck_amount)),
            Decimal(str(safety_buffer)),
        )
    except ValueError as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(
        f"Plan generated: strategy={strategy.value}, "
        f"payments={len(plan.payments)}"
    )
    _render_payment_plan(plan)


def _render_prime_rate_editor(prime_rate: Decimal) -> Decimal:
    """Let the user change the prime rate from the sidebar.

    Returns:
        Decimal: The saved rate, or the current one when nothing changed.
    """
    value = st.sidebar.number_input(
        "Prime rate (%)",
        min_value=float(MIN_PRIME_RATE),
        max_value=float(MAX_PRIME_RATE),
        value=float(prime_rate),
        step=0.25,
    )
    if not st.sidebar.button("Save prime rate"):
        return prime_rate
    try:
        saved = _update_prime_rate(Decimal(str(value)))
    except ValueError as exc:
        st.sidebar.error(str(exc))
        return prime_rate
    get_usage_logger().info(f"Prime rate updated: {saved}")
    st.sidebar.success(f"Prime rate saved: {saved}%")
    return saved


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Napkin", layout="wide")
    st.title("Napkin")

    prime_rate = _render_prime_rate_editor(_ensure_settings())
    st.sidebar.caption(f"Prime rate: {prime_rate}%")
    page = st.sidebar.selectbox(
        "Page",
        ["Overview", "Payment Plan", "Net Worth Trend"],
    )
    get_usage_logger().info(f"Page viewed: {page}")

    if page == "Overview":
        _render_overview(_fetch_overview(), _fetch_subscription_summary())
    elif page == "Payment Plan":
        _render_plan_page(PlannerSettings.from_env())
    else:
        _render_net_worth_chart(_load_net_worth_history())


if __name__ == "__main__":  # pragma: no cover
    main()
