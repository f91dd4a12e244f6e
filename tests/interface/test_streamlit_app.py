"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal

from src.adapters.interface.streamlit import app
from src.domain.models import (
    FinancialOverview,
    NetWorthPoint,
    PaymentPlan,
    PaymentPriority,
    PaymentStrategy,
    PlannedPayment,
    SubscriptionSummary,
)


def test_fetch_overview_invokes_use_case(monkeypatch):
    """_fetch_overview should build the repository and use case."""
    fake_overview = object()

    class _FakeUseCase:
        def __init__(self, repository):
            self.repository = repository

        def execute(self):
            return fake_overview

    monkeypatch.setattr(app, "build_household_repository", lambda: "repo")
    monkeypatch.setattr(app, "GetFinancialOverviewUseCase", _FakeUseCase)

    assert app._fetch_overview() is fake_overview


def test_load_net_worth_history_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_net_worth_history."""
    points = ["cached"]
    monkeypatch.setattr(app, "_fetch_net_worth_history", lambda: points)

    assert app._load_net_worth_history(schema_version=99) == points


def test_format_helpers():
    assert app._format_currency(Decimal("1234.5")) == "$1,234.50"
    assert app._format_currency(Decimal("-7500")) == "-$7,500.00"
    assert app._format_percent(Decimal("20")) == "20.0%"
    assert app._format_percent(None) == "N/A"


def _plan(payments, **kwargs):
    values = {
        "strategy": PaymentStrategy.AVALANCHE,
        "available_cash": Decimal("250"),
        "remaining_cash": Decimal("0"),
        "period2_shortfall": Decimal("0"),
        "long_pay_period": False,
    }
    values.update(kwargs)
    return PaymentPlan(payments=payments, **values)


def _payment(account_id, amount, shortfall=False):
    return PlannedPayment(
        account_id=account_id,
        institution="Chase",
        label=account_id,
        balance=Decimal("1000"),
        apr=None,
        minimum_amount=Decimal("40"),
        suggested_amount=Decimal(amount),
        priority=(
            PaymentPriority.URGENT if shortfall else PaymentPriority.STRATEGIC
        ),
        is_shortfall_allocation=shortfall,
    )


def test_plan_rows_label_priorities():
    rows = app._plan_rows(
        _plan([_payment("Loan", "200", True), _payment("Card", "50")])
    )

    assert rows[0]["Priority"] == "Shortfall"
    assert rows[0]["Account"] == "Chase Loan"
    assert rows[1]["Priority"] == "Strategic"
    assert rows[1]["Suggested"] == "$50.00"
    assert rows[1]["APR"] == "N/A"


def test_prepare_trend_data():
    rows = app._prepare_trend_data(
        [NetWorthPoint(month=date(2024, 1, 1), net_worth=Decimal("-250.5"))]
    )

    assert rows == [
        {
            "month": "2024-01-01",
            "net_worth": -250.5,
            "net_worth_label": "-$250.50",
        }
    ]


class _FakeColumn:
    def __init__(self, sink: list) -> None:
        self._sink = sink

    def metric(self, label, value):
        self._sink.append((label, value))


class _FakeSidebar:
    def __init__(self, page: str) -> None:
        self.page = page
        self.captions: list[str] = []
        self.prime_input = None
        self.save_clicked = False
        self.number_inputs: list[tuple[str, dict]] = []
        self.errors: list[str] = []
        self.successes: list[str] = []

    def caption(self, text: str):
        self.captions.append(text)

    def selectbox(self, label, options, **_kwargs):
        return self.page

    def number_input(self, label, **kwargs):
        self.number_inputs.append((label, kwargs))
        if self.prime_input is None:
            return kwargs["value"]
        return self.prime_input

    def button(self, label):
        return self.save_clicked

    def error(self, text: str):
        self.errors.append(text)

    def success(self, text: str):
        self.successes.append(text)


class _FakeStreamlit:
    def __init__(self, page: str = "Overview") -> None:
        self.sidebar = _FakeSidebar(page)
        self.config_called = False
        self.title_text = None
        self.metrics: list[tuple[str, str]] = []
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.successes: list[str] = []
        self.captions: list[str] = []
        self.dataframe_payload = None
        self.chart = None

    def set_page_config(self, **kwargs):
        self.config_called = True
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def subheader(self, text: str):
        pass

    def caption(self, text: str):
        self.captions.append(text)

    def columns(self, count: int):
        return [_FakeColumn(self.metrics) for _ in range(count)]

    def metric(self, label, value):
        self.metrics.append((label, value))

    def info(self, text: str):
        self.infos.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def success(self, text: str):
        self.successes.append(text)

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)

    def altair_chart(self, chart, **_kwargs):
        self.chart = chart


class _UsageLogger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def info(self, msg: str) -> None:
        self.messages.append(msg)


def _patch_main(monkeypatch, fake_st) -> _UsageLogger:
    usage = _UsageLogger()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_ensure_settings", lambda: Decimal("8.5"))
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage)
    return usage


def test_main_renders_overview_metrics(monkeypatch):
    """main should render the metric cards on the overview page."""
    fake_st = _FakeStreamlit("Overview")
    usage = _patch_main(monkeypatch, fake_st)
    overview = FinancialOverview(
        total_debt=Decimal("11000"),
        total_assets=Decimal("3500"),
        net_worth=Decimal("-7500"),
        total_available_credit=Decimal("4000"),
        total_minimum_payments=Decimal("140"),
        credit_utilization=None,
    )
    monkeypatch.setattr(app, "_fetch_overview", lambda: overview)
    monkeypatch.setattr(
        app,
        "_fetch_subscription_summary",
        lambda: SubscriptionSummary(total_monthly_cost=Decimal("65.98")),
    )

    app.main()

    metrics = dict(fake_st.metrics)
    assert fake_st.config_called
    assert fake_st.title_text == "Napkin"
    assert fake_st.sidebar.captions == ["Prime rate: 8.5%"]
    assert metrics["Net Worth"] == "-$7,500.00"
    assert metrics["Credit Utilization"] == "N/A"
    assert metrics["Monthly Subscriptions"] == "$65.98"
    assert usage.messages == ["Page viewed: Overview"]


def test_main_explains_missing_trend(monkeypatch):
    """A single month of history should show guidance instead of a chart."""
    fake_st = _FakeStreamlit("Net Worth Trend")
    _patch_main(monkeypatch, fake_st)
    monkeypatch.setattr(
        app,
        "_load_net_worth_history",
        lambda: [NetWorthPoint(date(2024, 1, 1), Decimal("10"))],
    )

    app.main()

    assert fake_st.chart is None
    assert "at least 2 different months" in fake_st.infos[0]


def test_main_draws_trend_chart(monkeypatch):
    fake_st = _FakeStreamlit("Net Worth Trend")
    _patch_main(monkeypatch, fake_st)
    monkeypatch.setattr(
        app,
        "_load_net_worth_history",
        lambda: [
            NetWorthPoint(date(2024, 1, 1), Decimal("10")),
            NetWorthPoint(date(2024, 2, 1), Decimal("25")),
        ],
    )

    app.main()

    assert fake_st.chart is not None
    assert fake_st.infos == []


def test_render_payment_plan_shows_advisories(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    plan = _plan(
        [_payment("Loan", "200", True)],
        period2_shortfall=Decimal("200"),
        long_pay_period=True,
    )

    app._render_payment_plan(plan)

    assert len(fake_st.warnings) == 2
    rows, kwargs = fake_st.dataframe_payload
    assert rows[0]["Suggested"] == "$200.00"
    assert kwargs["hide_index"] is True
    assert dict(fake_st.metrics)["Total Payment"] == "$200.00"


def test_render_payment_plan_celebrates_debt_free(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_payment_plan(_plan([], is_debt_free=True))

    assert fake_st.successes
    assert fake_st.dataframe_payload is None


def test_render_payment_plan_keeps_shortfall_when_nothing_fits(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    plan = _plan(
        [],
        available_cash=Decimal("0"),
        period2_shortfall=Decimal("90"),
    )

    app._render_payment_plan(plan)

    assert fake_st.successes == []
    assert len(fake_st.warnings) == 1
    assert "$90.00" in fake_st.warnings[0]
    assert fake_st.infos == ["No payment fits the available cash this cycle."]
    assert fake_st.dataframe_payload is None


def test_main_saves_prime_rate_from_sidebar(monkeypatch):
    fake_st = _FakeStreamlit("Net Worth Trend")
    usage = _patch_main(monkeypatch, fake_st)
    fake_st.sidebar.prime_input = 9.25
    fake_st.sidebar.save_clicked = True
    saved: list[Decimal] = []

    def _update(rate):
        saved.append(rate)
        return rate

    monkeypatch.setattr(app, "_update_prime_rate", _update)
    monkeypatch.setattr(app, "_load_net_worth_history", lambda: [])

    app.main()

    label, kwargs = fake_st.sidebar.number_inputs[0]
    assert label == "Prime rate (%)"
    assert kwargs["value"] == 8.5
    assert kwargs["max_value"] == 30.0
    assert saved == [Decimal("9.25")]
    assert fake_st.sidebar.successes == ["Prime rate saved: 9.25%"]
    assert fake_st.sidebar.captions == ["Prime rate: 9.25%"]
    assert "Prime rate updated: 9.25" in usage.messages


def test_main_reports_rejected_prime_rate(monkeypatch):
    fake_st = _FakeStreamlit("Net Worth Trend")
    usage = _patch_main(monkeypatch, fake_st)
    fake_st.sidebar.save_clicked = True

    def _reject(rate):
        raise ValueError(f"Prime rate must be between 0% and 30%, got {rate}")

    monkeypatch.setattr(app, "_update_prime_rate", _reject)
    monkeypatch.setattr(app, "_load_net_worth_history", lambda: [])

    app.main()

    assert fake_st.sidebar.errors == [
        "Prime rate must be between 0% and 30%, got 8.5"
    ]
    assert fake_st.sidebar.captions == ["Prime rate: 8.5%"]
    assert usage.messages == ["Page viewed: Net Worth Trend"]


def test_update_prime_rate_invokes_use_case(monkeypatch):
    class _Settings:
        prime_rate = Decimal("7.75")

    class _FakeUseCase:
        def __init__(self, repository):
            self.repository = repository

        def execute(self, prime_rate):
            assert prime_rate == Decimal("7.75")
            return _Settings()

    monkeypatch.setattr(app, "build_household_repository", lambda: "repo")
    monkeypatch.setattr(app, "UpdatePrimeRateUseCase", _FakeUseCase)

    assert app._update_prime_rate(Decimal("7.75")) == Decimal("7.75")
