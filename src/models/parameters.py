from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from src.models.investment import BENCHMARKS, InvestmentChoice

LOAN_TERMS = (3, 5, 7, 10)


class FilingStatus(Enum):
    SINGLE = "single"
    MARRIED = "married"


@dataclass(frozen=True)
class BuyParameters:
    """Purchase scenario inputs. All rates are percentages (5.5 = 5.5%)."""

    # Essentials
    vehicle_price: Decimal = Decimal("35000")
    down_payment_pct: Decimal = Decimal("20")
    loan_rate_pct: Decimal = Decimal("5.5")  # Annual
    loan_term_years: int = 5  # One of LOAN_TERMS
    depreciation_pct: Decimal = Decimal("15")  # Annual, compounding

    # Transaction costs
    dealer_fee_pct: Decimal = Decimal("3")  # % of price, paid up front
    selling_cost_pct: Decimal = Decimal("5")  # % of value at sale

    # Holding costs (percentages apply to the original price)
    insurance_registration_pct: Decimal = Decimal("2.5")
    maintenance_pct: Decimal = Decimal("1.5")
    fixed_annual_costs: Decimal = Decimal("2000")  # Fuel etc., flat per year

    # Tax
    marginal_tax_pct: Decimal = Decimal("24")
    deduct_loan_interest: bool = False  # Usually not deductible for personal use
    vehicle_capital_gains_pct: Decimal = Decimal("15")
    filing_status: FilingStatus = FilingStatus.MARRIED  # Reserved for bracket display


@dataclass(frozen=True)
class LeaseParameters:
    """Lease-and-invest scenario inputs."""

    monthly_lease: Decimal = Decimal("500")
    lease_growth_pct: Decimal = Decimal("3")
    mirror_depreciation: bool = False  # Use the vehicle depreciation rate as lease growth
    investment: InvestmentChoice = field(default_factory=lambda: BENCHMARKS["SPY"])
    investment_capital_gains_pct: Decimal = Decimal("15")


@dataclass(frozen=True)
class ProjectionSettings:
    projection_years: int = 5

    # Presentation only; never read by the engine
    show_yearly_detail: bool = False
    show_cash_out: bool = False
