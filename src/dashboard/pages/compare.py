"""Comparison page: buy vs lease net worth over the projection horizon."""

import logging
from decimal import Decimal

import dash
from dash import html, dcc, callback, Input, Output, State, no_update
import plotly.graph_objects as go
from pydantic import ValidationError

from src.api.schemas import ProjectionRequest
from src.data.presets import get_preset, list_presets
from src.engine.comparison import compare_outcomes
from src.engine.projection import run_projection
from src.models.investment import BENCHMARKS, CUSTOM_KEY
from src.models.parameters import LOAN_TERMS
from src.models.results import CalculationResults

logger = logging.getLogger(__name__)

dash.register_page(__name__, path="/", name="Compare")

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

EMPTY_MSG_STYLE = {"color": "#888", "padding": "2rem 0"}

BUY_COLOR = "#1a1a2e"
LEASE_COLOR = "#e94560"

# Preset field -> input id
PRESET_INPUTS = {
    "vehicle_price": "buy-price",
    "down_payment_pct": "buy-down",
    "loan_rate_pct": "buy-rate",
    "loan_term_years": "buy-term",
    "depreciation_pct": "buy-depreciation",
    "insurance_registration_pct": "buy-insurance",
    "maintenance_pct": "buy-maintenance",
    "fixed_annual_costs": "buy-fixed",
    "monthly_lease": "lease-monthly",
    "lease_growth_pct": "lease-growth",
}


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "140px"})


def _number(input_id, value, step=1):
    return dcc.Input(id=input_id, type="number", value=value, step=step, style=FIELD_STYLE)


def _row(*fields):
    return html.Div(list(fields), style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"})


layout = html.Div([
    html.H2("Buy vs Lease & Invest"),

    _row(
        _field("Vehicle Preset", dcc.Dropdown(
            id="preset",
            options=[{"label": p.name, "value": p.id} for p in list_presets()],
            value="default",
            clearable=False,
        )),
    ),

    html.H3("Buy"),
    _row(
        _field("Vehicle Price ($)", _number("buy-price", 35000, 1000)),
        _field("Down Payment (%)", _number("buy-down", 20)),
        _field("Loan Rate (%)", _number("buy-rate", 5.5, 0.25)),
        _field("Loan Term", dcc.Dropdown(
            id="buy-term",
            options=[{"label": f"{t} years", "value": t} for t in LOAN_TERMS],
            value=5,
            clearable=False,
        )),
        _field("Depreciation (%/yr)", _number("buy-depreciation", 15)),
    ),
    _row(
        _field("Dealer Fees (%)", _number("buy-dealer", 3, 0.5)),
        _field("Selling Costs (%)", _number("buy-selling", 5, 0.5)),
        _field("Insurance & Registration (%/yr)", _number("buy-insurance", 2.5, 0.1)),
        _field("Maintenance (%/yr)", _number("buy-maintenance", 1.5, 0.1)),
        _field("Fuel & Fixed Costs ($/yr)", _number("buy-fixed", 2000, 100)),
    ),
    _row(
        _field("Marginal Tax Rate (%)", _number("buy-marginal", 24)),
        _field("Vehicle Capital Gains (%)", _number("buy-cg", 15)),
        _field("Loan Interest", dcc.Checklist(
            id="buy-deduct",
            options=[{"label": " Deduct interest", "value": "deduct"}],
            value=[],
        )),
    ),

    html.H3("Lease & Invest"),
    _row(
        _field("Monthly Lease ($)", _number("lease-monthly", 500, 50)),
        _field("Lease Growth (%/yr)", _number("lease-growth", 3, 0.5)),
        _field("Investment", dcc.Dropdown(
            id="lease-investment",
            options=[
                {"label": f"{b.name} ({b.annual_return_pct}%)", "value": symbol}
                for symbol, b in BENCHMARKS.items()
            ] + [{"label": "Custom", "value": CUSTOM_KEY}],
            value="SPY",
            clearable=False,
        )),
        _field("Custom Return (%)", _number("lease-custom", 10, 0.25)),
        _field("Investment Capital Gains (%)", _number("lease-cg", 15)),
    ),
    _row(
        _field("Lease Growth", dcc.Checklist(
            id="lease-mirror",
            options=[{"label": " Same as vehicle depreciation", "value": "mirror"}],
            value=[],
        )),
        _field("Projection Years", _number("projection-years", 5)),
        _field("Display", dcc.Checklist(
            id="display-modes",
            options=[
                {"label": " Yearly detail", "value": "yearly"},
                {"label": " Cash out", "value": "cash_out"},
            ],
            value=[],
        )),
    ),

    html.Button("Compare", id="compare-btn", n_clicks=0, style=BTN_STYLE),
    html.Div(id="compare-content", style={"marginTop": "2rem"}),
])


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


@callback(
    [Output(input_id, "value") for input_id in PRESET_INPUTS.values()],
    Input("preset", "value"),
    prevent_initial_call=True,
)
def load_preset(preset_id):
    try:
        preset = get_preset(preset_id)
    except KeyError:
        return [no_update] * len(PRESET_INPUTS)
    values = {**preset.buy, **preset.lease}
    return [
        float(values[field]) if isinstance(values.get(field), Decimal) else values.get(field, no_update)
        for field in PRESET_INPUTS
    ]


def _dec(v) -> str | None:
    return None if v is None else str(v)


@callback(
    Output("compare-content", "children"),
    Output("projection-store", "data"),
    Input("compare-btn", "n_clicks"),
    State("buy-price", "value"),
    State("buy-down", "value"),
    State("buy-rate", "value"),
    State("buy-term", "value"),
    State("buy-depreciation", "value"),
    State("buy-dealer", "value"),
    State("buy-selling", "value"),
    State("buy-insurance", "value"),
    State("buy-maintenance", "value"),
    State("buy-fixed", "value"),
    State("buy-marginal", "value"),
    State("buy-cg", "value"),
    State("buy-deduct", "value"),
    State("lease-monthly", "value"),
    State("lease-growth", "value"),
    State("lease-investment", "value"),
    State("lease-custom", "value"),
    State("lease-cg", "value"),
    State("lease-mirror", "value"),
    State("projection-years", "value"),
    State("display-modes", "value"),
)
def run_comparison(
    n_clicks, price, down, rate, term, depreciation, dealer, selling, insurance,
    maintenance, fixed, marginal, vehicle_cg, deduct, monthly, growth, investment,
    custom, investment_cg, mirror, years, modes,
):
    payload = {
        "buy": {
            "vehicle_price": _dec(price),
            "down_payment_pct": _dec(down),
            "loan_rate_pct": _dec(rate),
            "loan_term_years": term,
            "depreciation_pct": _dec(depreciation),
            "dealer_fee_pct": _dec(dealer),
            "selling_cost_pct": _dec(selling),
            "insurance_registration_pct": _dec(insurance),
            "maintenance_pct": _dec(maintenance),
            "fixed_annual_costs": _dec(fixed),
            "marginal_tax_pct": _dec(marginal),
            "deduct_loan_interest": "deduct" in (deduct or []),
            "vehicle_capital_gains_pct": _dec(vehicle_cg),
        },
        "lease": {
            "monthly_lease": _dec(monthly),
            "lease_growth_pct": _dec(growth),
            "mirror_depreciation": "mirror" in (mirror or []),
            "investment_option": investment,
            "custom_return_pct": _dec(custom),
            "investment_capital_gains_pct": _dec(investment_cg),
        },
        "settings": {
            "projection_years": years,
            "show_yearly_detail": "yearly" in (modes or []),
            "show_cash_out": "cash_out" in (modes or []),
        },
    }

    try:
        req = ProjectionRequest.model_validate(payload)
        buy, lease, projection = req.to_parameters()
    except (ValidationError, KeyError) as e:
        logger.warning("Rejected dashboard inputs: %s", e)
        return html.Div(
            "Some inputs are missing or out of range. Please check the form.",
            style=EMPTY_MSG_STYLE,
        ), no_update

    result = run_projection(buy, lease, projection)
    return html.Div([
        _build_outcome(result, projection.show_cash_out),
        dcc.Graph(figure=_build_net_worth_chart(result, projection.show_cash_out)),
        _build_table(result, projection.show_cash_out, projection.show_yearly_detail),
    ]), req.model_dump(mode="json")


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _money(v) -> str:
    return f"${float(v):,.0f}"


def _build_outcome(result: CalculationResults, cash_out: bool):
    outcome = compare_outcomes(result, cash_out=cash_out)
    if outcome.winner == "tie":
        headline = "Both strategies finish level."
    else:
        label = "Buying" if outcome.winner == "buy" else "Leasing & investing"
        headline = f"{label} comes out ahead by {_money(abs(outcome.difference))}."

    return html.Div([
        html.H3(headline),
        html.P(
            f"Year {outcome.year} net worth ({'cash out' if cash_out else 'hold'}): "
            f"buy {_money(outcome.buy_net_worth)}, lease {_money(outcome.lease_net_worth)}. "
            f"Monthly loan payment {_money(result.preliminary.monthly_payment)}."
        ),
    ])


def _build_net_worth_chart(result: CalculationResults, cash_out: bool):
    years = [0] + [y.year for y in result.yearly]
    if cash_out:
        buy = [y.buy.net_worth_cash_out for y in result.yearly]
        lease = [y.lease.net_worth_cash_out for y in result.yearly]
    else:
        buy = [y.buy.net_worth_hold for y in result.yearly]
        lease = [y.lease.net_worth_hold for y in result.yearly]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=years, y=[0] + [float(v) for v in buy],
        mode="lines+markers",
        name="Buy",
        line=dict(color=BUY_COLOR, width=3),
    ))
    fig.add_trace(go.Scatter(
        x=years, y=[0] + [float(v) for v in lease],
        mode="lines+markers",
        name="Lease & Invest",
        line=dict(color=LEASE_COLOR, width=3),
    ))
    fig.update_layout(
        title="Net Worth (Cash Out)" if cash_out else "Net Worth (Hold)",
        xaxis_title="Year",
        yaxis_title="Net Worth ($)",
        hovermode="x unified",
    )
    return fig


def _build_table(result: CalculationResults, cash_out: bool, yearly_detail: bool):
    rows = result.yearly if yearly_detail else result.yearly[-1:]

    header = ["Year", "Vehicle Value", "Loan Balance", "Buy Outflow", "Side Portfolio",
              "Buy Net Worth", "Lease Outflow", "Invested", "Portfolio", "Lease Net Worth"]

    body = []
    for y in rows:
        b, ls = y.buy, y.lease
        body.append(html.Tr([
            html.Td(y.year),
            html.Td(_money(b.vehicle_value)),
            html.Td(_money(b.loan_balance)),
            html.Td(_money(b.adjusted_cash_outflow)),
            html.Td(_money(b.excess_portfolio)),
            html.Td(_money(b.net_worth_cash_out if cash_out else b.net_worth_hold)),
            html.Td(_money(ls.cash_outflow)),
            html.Td(_money(ls.invested_this_year)),
            html.Td(_money(ls.portfolio_value)),
            html.Td(_money(ls.net_worth_cash_out if cash_out else ls.net_worth_hold)),
        ]))

    return html.Table(
        [html.Thead(html.Tr([html.Th(h) for h in header])), html.Tbody(body)],
        style={"width": "100%", "textAlign": "right", "fontSize": "0.9rem"},
    )
