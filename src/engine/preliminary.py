"""One-time starting values shared by both scenario calculators."""

from decimal import Decimal

from src.engine.debt import monthly_payment
from src.models.parameters import BuyParameters, LeaseParameters
from src.models.results import PreliminaryValues

# Vehicles have no tax-free capital gains exclusion (unlike a primary residence)
VEHICLE_TAX_FREE_GAIN = Decimal("0")


def resolve_preliminary_values(buy: BuyParameters, lease: LeaseParameters) -> PreliminaryValues:
    down_payment = buy.vehicle_price * buy.down_payment_pct / 100
    loan_amount = buy.vehicle_price - down_payment
    dealer_fees = buy.vehicle_price * buy.dealer_fee_pct / 100

    return PreliminaryValues(
        loan_amount=loan_amount,
        down_payment=down_payment,
        dealer_fees=dealer_fees,
        monthly_payment=monthly_payment(loan_amount, buy.loan_rate_pct, buy.loan_term_years),
        investment_return_pct=lease.investment.annual_return_pct,
        tax_free_gain_threshold=VEHICLE_TAX_FREE_GAIN,
    )
