"""Final-year outcome of buy vs lease.

Pure functions. No I/O.
"""

from decimal import Decimal

from src.models.results import CalculationResults, OutcomeSummary

TIE_TOLERANCE = Decimal("0.01")


def compare_outcomes(results: CalculationResults, cash_out: bool = False) -> OutcomeSummary:
    """Compare final-year net worth of both strategies.

    With ``cash_out`` the liquidation figures (after selling costs and taxes)
    are compared instead of the hold figures.
    """
    final = results.yearly[-1]
    if cash_out:
        buy_nw = final.buy.net_worth_cash_out
        lease_nw = final.lease.net_worth_cash_out
    else:
        buy_nw = final.buy.net_worth_hold
        lease_nw = final.lease.net_worth_hold

    difference = buy_nw - lease_nw
    if abs(difference) < TIE_TOLERANCE:
        winner = "tie"
    elif difference > 0:
        winner = "buy"
    else:
        winner = "lease"

    return OutcomeSummary(
        year=final.year,
        cash_out=cash_out,
        buy_net_worth=buy_nw,
        lease_net_worth=lease_nw,
        difference=difference,
        winner=winner,
        total_buy_outflow=sum((y.buy.adjusted_cash_outflow for y in results.yearly), Decimal("0")),
        total_lease_outflow=sum((y.lease.cash_outflow for y in results.yearly), Decimal("0")),
    )
