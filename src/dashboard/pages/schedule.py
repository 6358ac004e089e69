"""Loan schedule page: yearly amortization for the last compared inputs."""

import dash
from dash import html, dcc, callback, Input, Output
import plotly.graph_objects as go

from src.api.schemas import ProjectionRequest
from src.engine.debt import amortization_schedule
from src.engine.formulas import build_formulas
from src.engine.preliminary import resolve_preliminary_values

dash.register_page(__name__, path="/schedule", name="Loan Schedule")

EMPTY_MSG_STYLE = {"color": "#888", "padding": "2rem 0"}


layout = html.Div([
    html.H2("Auto Loan Schedule"),
    html.Div(id="schedule-content"),
])


def _money(v) -> str:
    return f"${float(v):,.2f}"


@callback(
    Output("schedule-content", "children"),
    Input("projection-store", "data"),
)
def render_schedule(data):
    if not data:
        return html.Div(
            "Run a comparison from the Compare page to see the loan schedule.",
            style=EMPTY_MSG_STYLE,
        )

    buy, lease, projection = ProjectionRequest.model_validate(data).to_parameters()
    preliminary = resolve_preliminary_values(buy, lease)
    schedule = amortization_schedule(
        principal=preliminary.loan_amount,
        annual_rate_pct=buy.loan_rate_pct,
        term_years=buy.loan_term_years,
        projection_years=projection.projection_years,
    )
    formulas = build_formulas(buy, lease, preliminary)

    years = [row.year for row in schedule]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=years, y=[float(row.interest_paid) for row in schedule],
        name="Interest", marker_color="#e94560",
    ))
    fig.add_trace(go.Bar(
        x=years, y=[float(row.principal_paid) for row in schedule],
        name="Principal", marker_color="#1a1a2e",
    ))
    fig.add_trace(go.Scatter(
        x=years, y=[float(row.ending_balance) for row in schedule],
        mode="lines+markers", name="Balance", line=dict(color="#2ecc71", width=3),
    ))
    fig.update_layout(
        barmode="stack",
        title="Interest, Principal and Remaining Balance",
        xaxis_title="Year",
        yaxis_title="Amount ($)",
        hovermode="x unified",
    )

    return html.Div([
        html.P(formulas.monthly_payment, style={"fontFamily": "monospace"}),
        dcc.Graph(figure=fig),
        html.Table([
            html.Thead(html.Tr([
                html.Th(h) for h in ["Year", "Interest", "Principal", "Balance", "Total Paid"]
            ])),
            html.Tbody([
                html.Tr([
                    html.Td(row.year),
                    html.Td(_money(row.interest_paid)),
                    html.Td(_money(row.principal_paid)),
                    html.Td(_money(row.ending_balance)),
                    html.Td(_money(row.total_paid)),
                ])
                for row in schedule
            ]),
        ], style={"width": "100%", "textAlign": "right", "fontSize": "0.9rem"}),
    ])
