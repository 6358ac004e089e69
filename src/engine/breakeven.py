"""Break-even lease payment using scipy.

Finds the base monthly lease at which both strategies end with the same
net worth. Pure functions. No I/O.
"""

from dataclasses import replace
from decimal import Decimal, ROUND_HALF_UP

from scipy.optimize import brentq

from src.config import settings as app_settings
from src.engine.comparison import compare_outcomes
from src.engine.projection import run_projection
from src.models.parameters import BuyParameters, LeaseParameters, ProjectionSettings

TWO_PLACES = Decimal("0.01")


def breakeven_monthly_lease(
    buy: BuyParameters,
    lease: LeaseParameters,
    settings: ProjectionSettings,
    cash_out: bool = True,
    ceiling: Decimal | None = None,
) -> Decimal:
    """Base monthly lease where final buy and lease net worth are equal.

    Buy net worth rises with the lease payment (more side investment) while
    lease net worth falls, so the difference has at most one root.
    Uses Brent's method over [0, ceiling]; the ceiling defaults to the
    configured ``breakeven_lease_ceiling``.

    Raises ValueError if the difference does not change sign on the bracket.
    """
    if ceiling is None:
        ceiling = app_settings.breakeven_lease_ceiling
    upper = float(ceiling)

    def difference(monthly: float) -> float:
        trial = replace(lease, monthly_lease=Decimal(str(monthly)))
        outcome = compare_outcomes(run_projection(buy, trial, settings), cash_out=cash_out)
        return float(outcome.difference)

    root = brentq(difference, 0.0, upper, xtol=1e-6, maxiter=200)
    return Decimal(str(root)).quantize(TWO_PLACES, ROUND_HALF_UP)
