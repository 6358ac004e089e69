"""Lease-and-invest scenario: one projection year.

The lessee invests whatever the buyer would have spent beyond the lease
payments. Pure functions. No I/O.
"""

from decimal import Decimal

from src.models.parameters import LeaseParameters
from src.models.results import PreliminaryValues, YearlyBuyRecord, YearlyLeaseRecord

ZERO = Decimal("0")


def monthly_lease(lease: LeaseParameters, year: int) -> Decimal:
    """Monthly lease payment for a given year. Year 1 is the base payment."""
    return lease.monthly_lease * (1 + lease.lease_growth_pct / 100) ** (year - 1)


def lease_year(
    year: int,
    lease: LeaseParameters,
    buy_record: YearlyBuyRecord,
    previous: YearlyLeaseRecord | None,
    preliminary: PreliminaryValues,
) -> YearlyLeaseRecord:
    """Compute the lease scenario for a single year (1-indexed).

    ``buy_record`` is the buy scenario for the same year; only its
    tax-adjusted cash outflow is read.
    """
    monthly = monthly_lease(lease, year)
    annual_cost = monthly * 12
    cash_outflow = annual_cost

    # Only a positive surplus is invested; leasing never borrows to invest
    invested = max(ZERO, buy_record.adjusted_cash_outflow - cash_outflow)

    prior_portfolio = previous.portfolio_value if previous else ZERO
    prior_invested = previous.total_invested if previous else ZERO

    before_growth = prior_portfolio + invested
    investment_return = before_growth * preliminary.investment_return_pct / 100
    portfolio_value = before_growth + investment_return
    total_invested = prior_invested + invested

    capital_gain = portfolio_value - total_invested
    taxable_gain = max(ZERO, capital_gain)
    tax_on_gain = taxable_gain * lease.investment_capital_gains_pct / 100

    return YearlyLeaseRecord(
        year=year,
        monthly_lease=monthly,
        annual_lease_cost=annual_cost,
        cash_outflow=cash_outflow,
        invested_this_year=invested,
        portfolio_before_growth=before_growth,
        investment_return=investment_return,
        portfolio_value=portfolio_value,
        total_invested=total_invested,
        net_worth_hold=portfolio_value,
        net_worth_cash_out=portfolio_value - tax_on_gain,
        capital_gain=capital_gain,
        taxable_gain=taxable_gain,
        tax_on_gain=tax_on_gain,
    )
