"""Projection orchestrator: runs both scenarios year by year.

Each year is reconciled in two passes. The buy scenario is computed without
lease feedback, the lease scenario invests against that buy outflow, and the
buy scenario is recomputed with the lease outflow to fill its side portfolio.
Core buy costs do not depend on the lease, so both buy passes agree on them.

Pure computation. No I/O.
"""

import logging
from dataclasses import replace

from src.models.parameters import BuyParameters, LeaseParameters, ProjectionSettings
from src.models.results import (
    CalculationResults,
    YearlyBuyRecord,
    YearlyCalculation,
    YearlyLeaseRecord,
)

from src.engine.debt import amortization_schedule
from src.engine.preliminary import resolve_preliminary_values
from src.engine.buy import buy_year
from src.engine.lease import lease_year

logger = logging.getLogger(__name__)


def effective_lease(buy: BuyParameters, lease: LeaseParameters) -> LeaseParameters:
    """Apply the mirror-depreciation option to the lease growth rate."""
    if lease.mirror_depreciation:
        return replace(lease, lease_growth_pct=buy.depreciation_pct)
    return lease


def run_projection(
    buy: BuyParameters,
    lease: LeaseParameters,
    settings: ProjectionSettings,
) -> CalculationResults:
    """Run the complete buy vs lease projection.

    Returns CalculationResults with one YearlyCalculation per projection year.
    """
    lease = effective_lease(buy, lease)
    preliminary = resolve_preliminary_values(buy, lease)

    schedule = amortization_schedule(
        principal=preliminary.loan_amount,
        annual_rate_pct=buy.loan_rate_pct,
        term_years=buy.loan_term_years,
        projection_years=settings.projection_years,
    )

    yearly: list[YearlyCalculation] = []
    prior_buy: YearlyBuyRecord | None = None
    prior_lease: YearlyLeaseRecord | None = None

    for year in range(1, settings.projection_years + 1):
        debt_year = schedule[year - 1]

        # Pass 1: buy costs alone
        initial_buy = buy_year(year, buy, debt_year, preliminary, previous=prior_buy)

        lease_record = lease_year(year, lease, initial_buy, prior_lease, preliminary)

        # Pass 2: side portfolio funded against the lease outflow
        final_buy = buy_year(
            year,
            buy,
            debt_year,
            preliminary,
            lease_cash_outflow=lease_record.cash_outflow,
            previous=prior_buy,
        )

        yearly.append(YearlyCalculation(year=year, buy=final_buy, lease=lease_record))
        prior_buy = final_buy
        prior_lease = lease_record

    logger.debug(
        "Projected %d years: loan %s at %s%%, lease %s/mo",
        settings.projection_years,
        preliminary.loan_amount,
        buy.loan_rate_pct,
        lease.monthly_lease,
    )

    return CalculationResults(
        preliminary=preliminary,
        yearly=tuple(yearly),
        projection_years=settings.projection_years,
    )
