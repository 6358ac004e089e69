from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PreliminaryValues:
    loan_amount: Decimal
    down_payment: Decimal
    dealer_fees: Decimal
    monthly_payment: Decimal
    investment_return_pct: Decimal
    tax_free_gain_threshold: Decimal = Decimal("0")  # No exclusion for vehicles


@dataclass(frozen=True)
class AmortizationYearRecord:
    year: int
    interest_paid: Decimal
    principal_paid: Decimal
    ending_balance: Decimal
    total_paid: Decimal  # Cumulative


@dataclass(frozen=True)
class YearlyBuyRecord:
    year: int

    # Vehicle
    vehicle_value: Decimal = Decimal("0")

    # Holding costs
    insurance_registration: Decimal = Decimal("0")
    maintenance: Decimal = Decimal("0")
    fixed_costs: Decimal = Decimal("0")
    total_holding_costs: Decimal = Decimal("0")

    # Loan
    loan_payment: Decimal = Decimal("0")
    loan_interest: Decimal = Decimal("0")
    loan_principal: Decimal = Decimal("0")
    loan_balance: Decimal = Decimal("0")

    # Cash flow
    tax_savings: Decimal = Decimal("0")
    cash_outflow: Decimal = Decimal("0")
    adjusted_cash_outflow: Decimal = Decimal("0")  # Net of tax savings

    # Net worth
    net_worth_hold: Decimal = Decimal("0")
    net_worth_cash_out: Decimal = Decimal("0")

    # Sale of the vehicle
    capital_gain: Decimal = Decimal("0")  # Negative = loss
    taxable_gain: Decimal = Decimal("0")
    tax_on_gain: Decimal = Decimal("0")

    # Leftover cash invested on the buy side
    excess_portfolio: Decimal = Decimal("0")
    excess_cost_basis: Decimal = Decimal("0")
    excess_gain: Decimal = Decimal("0")
    tax_on_excess_gain: Decimal = Decimal("0")


@dataclass(frozen=True)
class YearlyLeaseRecord:
    year: int

    monthly_lease: Decimal = Decimal("0")
    annual_lease_cost: Decimal = Decimal("0")
    cash_outflow: Decimal = Decimal("0")

    # Portfolio
    invested_this_year: Decimal = Decimal("0")
    portfolio_before_growth: Decimal = Decimal("0")
    investment_return: Decimal = Decimal("0")
    portfolio_value: Decimal = Decimal("0")
    total_invested: Decimal = Decimal("0")  # Cost basis

    # Net worth
    net_worth_hold: Decimal = Decimal("0")
    net_worth_cash_out: Decimal = Decimal("0")

    # Liquidation
    capital_gain: Decimal = Decimal("0")
    taxable_gain: Decimal = Decimal("0")
    tax_on_gain: Decimal = Decimal("0")


@dataclass(frozen=True)
class YearlyCalculation:
    year: int
    buy: YearlyBuyRecord
    lease: YearlyLeaseRecord


@dataclass(frozen=True)
class CalculationResults:
    preliminary: PreliminaryValues
    yearly: tuple[YearlyCalculation, ...]
    projection_years: int


@dataclass(frozen=True)
class OutcomeSummary:
    """Final-year comparison of both strategies."""

    year: int
    cash_out: bool
    buy_net_worth: Decimal
    lease_net_worth: Decimal
    difference: Decimal  # Buy - lease
    winner: str  # "buy", "lease" or "tie"
    total_buy_outflow: Decimal
    total_lease_outflow: Decimal
