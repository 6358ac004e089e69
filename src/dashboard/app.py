"""Plotly Dash application: multi-page layout."""

import sys
from pathlib import Path

# Ensure project root is on sys.path so `src.*` imports work
# even when Dash's reloader spawns a child process.
_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import dash
from dash import Dash, html, dcc, page_container

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="Buy vs Lease Analyzer",
)

app.layout = html.Div([
    # Last validated request, shared across pages
    dcc.Store(id="projection-store", storage_type="session"),

    # Navigation
    html.Nav([
        html.Div([
            html.H1("Buy vs Lease Analyzer", style={"fontSize": "1.5rem", "margin": "0"}),
            html.Div([
                dcc.Link("Compare", href="/", style={"marginRight": "1rem"}),
                dcc.Link("Loan Schedule", href="/schedule", style={"marginRight": "1rem"}),
            ]),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1200px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    # Page content
    html.Div(
        page_container,
        style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"},
    ),
])


if __name__ == "__main__":
    app.run(debug=True, port=8050)
