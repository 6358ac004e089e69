"""Canonical test fixtures used across all engine tests.

Fixture: $35K vehicle, 20% down, 5.5% rate, 5yr loan, 15% annual depreciation.
Lease: $500/mo growing 3%/yr, invested in the S&P 500 benchmark (12.5%).
"""

import pytest
from decimal import Decimal

from src.models.investment import BENCHMARKS
from src.models.parameters import BuyParameters, LeaseParameters, ProjectionSettings


@pytest.fixture
def canonical_buy() -> BuyParameters:
    """$35K vehicle with default holding costs and no interest deduction."""
    return BuyParameters(
        vehicle_price=Decimal("35000"),
        down_payment_pct=Decimal("20"),
        loan_rate_pct=Decimal("5.5"),
        loan_term_years=5,
        depreciation_pct=Decimal("15"),
        dealer_fee_pct=Decimal("3"),
        selling_cost_pct=Decimal("5"),
        insurance_registration_pct=Decimal("2.5"),
        maintenance_pct=Decimal("1.5"),
        fixed_annual_costs=Decimal("2000"),
        marginal_tax_pct=Decimal("24"),
        deduct_loan_interest=False,
        vehicle_capital_gains_pct=Decimal("15"),
    )


@pytest.fixture
def canonical_lease() -> LeaseParameters:
    return LeaseParameters(
        monthly_lease=Decimal("500"),
        lease_growth_pct=Decimal("3"),
        mirror_depreciation=False,
        investment=BENCHMARKS["SPY"],
        investment_capital_gains_pct=Decimal("15"),
    )


@pytest.fixture
def five_years() -> ProjectionSettings:
    return ProjectionSettings(projection_years=5)


@pytest.fixture
def seven_years() -> ProjectionSettings:
    """Horizon that outlives the 5-year loan."""
    return ProjectionSettings(projection_years=7)
