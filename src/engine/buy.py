"""Buy scenario: one projection year of owning a financed vehicle.

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.models.parameters import BuyParameters
from src.models.results import AmortizationYearRecord, PreliminaryValues, YearlyBuyRecord

ZERO = Decimal("0")


@dataclass(frozen=True)
class HoldingCosts:
    insurance_registration: Decimal
    maintenance: Decimal
    fixed_costs: Decimal

    @property
    def total(self) -> Decimal:
        return self.insurance_registration + self.maintenance + self.fixed_costs


def vehicle_value(buy: BuyParameters, year: int) -> Decimal:
    """Value at end of year after compounding depreciation."""
    return buy.vehicle_price * (1 - buy.depreciation_pct / 100) ** year


def holding_costs(buy: BuyParameters) -> HoldingCosts:
    """Annual running costs. Percentage components apply to the original price."""
    return HoldingCosts(
        insurance_registration=buy.vehicle_price * buy.insurance_registration_pct / 100,
        maintenance=buy.vehicle_price * buy.maintenance_pct / 100,
        fixed_costs=buy.fixed_annual_costs,
    )


def buy_year(
    year: int,
    buy: BuyParameters,
    debt_year: AmortizationYearRecord,
    preliminary: PreliminaryValues,
    lease_cash_outflow: Decimal | None = None,
    previous: YearlyBuyRecord | None = None,
) -> YearlyBuyRecord:
    """Compute the buy scenario for a single year (1-indexed).

    Args:
        year: Projection year
        buy: Purchase inputs
        debt_year: This year's amortization record
        preliminary: Run-wide starting values
        lease_cash_outflow: The lease scenario's outflow for the same year.
            When given, cash the buyer saves relative to leasing is invested
            in a side portfolio; when omitted the side portfolio stays empty.
        previous: Prior year's final buy record, carrying the side portfolio
    """
    value = vehicle_value(buy, year)
    costs = holding_costs(buy)

    # Loan service from the schedule (zero once the loan is retired)
    loan_payment = debt_year.interest_paid + debt_year.principal_paid
    tax_savings = (
        debt_year.interest_paid * buy.marginal_tax_pct / 100
        if buy.deduct_loan_interest
        else ZERO
    )

    cash_outflow = loan_payment + costs.total
    if year == 1:
        cash_outflow += preliminary.down_payment + preliminary.dealer_fees
    adjusted_cash_outflow = cash_outflow - tax_savings

    # Side portfolio funded by what leasing would have cost beyond buying
    excess_portfolio = ZERO
    excess_cost_basis = ZERO
    if lease_cash_outflow is not None:
        contribution = max(ZERO, lease_cash_outflow - adjusted_cash_outflow)
        prior_portfolio = previous.excess_portfolio if previous else ZERO
        prior_basis = previous.excess_cost_basis if previous else ZERO

        before_growth = prior_portfolio + contribution
        excess_cost_basis = prior_basis + contribution
        growth = before_growth * preliminary.investment_return_pct / 100
        excess_portfolio = before_growth + growth

    balance = debt_year.ending_balance
    net_worth_hold = value - balance + excess_portfolio

    # Cash out: sell the vehicle, repay the loan, liquidate the side portfolio
    sale_proceeds = value * (1 - buy.selling_cost_pct / 100)
    capital_gain = value - buy.vehicle_price
    taxable_gain = max(ZERO, capital_gain - preliminary.tax_free_gain_threshold)
    tax_on_gain = taxable_gain * buy.vehicle_capital_gains_pct / 100

    excess_gain = max(ZERO, excess_portfolio - excess_cost_basis)
    tax_on_excess_gain = excess_gain * buy.vehicle_capital_gains_pct / 100

    net_worth_cash_out = (
        sale_proceeds
        - balance
        - tax_on_gain
        + excess_portfolio
        - tax_on_excess_gain
    )

    return YearlyBuyRecord(
        year=year,
        vehicle_value=value,
        insurance_registration=costs.insurance_registration,
        maintenance=costs.maintenance,
        fixed_costs=costs.fixed_costs,
        total_holding_costs=costs.total,
        loan_payment=loan_payment,
        loan_interest=debt_year.interest_paid,
        loan_principal=debt_year.principal_paid,
        loan_balance=balance,
        tax_savings=tax_savings,
        cash_outflow=cash_outflow,
        adjusted_cash_outflow=adjusted_cash_outflow,
        net_worth_hold=net_worth_hold,
        net_worth_cash_out=net_worth_cash_out,
        capital_gain=capital_gain,
        taxable_gain=taxable_gain,
        tax_on_gain=tax_on_gain,
        excess_portfolio=excess_portfolio,
        excess_cost_basis=excess_cost_basis,
        excess_gain=excess_gain,
        tax_on_excess_gain=tax_on_excess_gain,
    )
