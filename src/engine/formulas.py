"""Human-readable formulas with the run's values plugged in.

Display only: nothing here feeds back into the projection.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.models.parameters import BuyParameters, LeaseParameters
from src.models.results import PreliminaryValues


@dataclass(frozen=True)
class FormulaSet:
    monthly_payment: str
    vehicle_depreciation: str
    investment_growth: str
    loan_interest_deduction: str
    vehicle_capital_gains: str
    investment_capital_gains: str


def _money(v: Decimal) -> str:
    return f"${float(v):,.2f}"


def _rate(v: Decimal) -> str:
    return f"{float(v):g}%"


def build_formulas(
    buy: BuyParameters,
    lease: LeaseParameters,
    preliminary: PreliminaryValues,
) -> FormulaSet:
    monthly_rate = float(buy.loan_rate_pct) / 12
    n = buy.loan_term_years * 12
    i = f"{monthly_rate:.4f}%"

    return FormulaSet(
        monthly_payment=(
            f"M = {_money(preliminary.loan_amount)} × [{i} × (1 + {i})^{n}] / "
            f"[(1 + {i})^{n} - 1] = {_money(preliminary.monthly_payment)}"
        ),
        vehicle_depreciation=(
            f"Vehicle Value = {_money(buy.vehicle_price)} × (1 - {_rate(buy.depreciation_pct)})^Year"
        ),
        investment_growth=(
            f"Portfolio Value = (Previous Value + New Investment) × "
            f"(1 + {_rate(preliminary.investment_return_pct)})"
        ),
        loan_interest_deduction=(
            f"Tax Savings = Annual Interest × {_rate(buy.marginal_tax_pct)}"
            if buy.deduct_loan_interest
            else "Tax Savings = $0 (loan interest deduction not claimed)"
        ),
        vehicle_capital_gains=(
            f"Vehicle Tax = max(0, (Sale Price - {_money(buy.vehicle_price)}) - "
            f"{_money(preliminary.tax_free_gain_threshold)}) × {_rate(buy.vehicle_capital_gains_pct)}"
        ),
        investment_capital_gains=(
            f"Investment Tax = max(0, Portfolio Value - Total Invested) × "
            f"{_rate(lease.investment_capital_gains_pct)}"
        ),
    )
