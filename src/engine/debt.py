"""Auto loan payment and yearly amortization schedule.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from decimal import Decimal

from src.models.results import AmortizationYearRecord

ZERO = Decimal("0")

# Residual balance below half a cent counts as paid off
PAID_OFF_TOLERANCE = Decimal("0.005")


def monthly_payment(principal: Decimal, annual_rate_pct: Decimal, term_years: int) -> Decimal:
    """Fixed monthly payment: M = P * [i(1+i)^n] / [(1+i)^n - 1].

    A non-positive principal or rate yields 0. Zero-rate loans are not
    amortized straight-line; the payment is simply 0. A rate too small to
    move ``1 + i`` at Decimal precision is repaid straight-line.
    """
    if principal <= 0 or annual_rate_pct <= 0:
        return ZERO

    r = annual_rate_pct / 100 / 12
    n = term_years * 12
    factor = (1 + r) ** n
    if factor == 1:
        return principal / n
    return principal * (r * factor) / (factor - 1)


def amortization_schedule(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_years: int,
    projection_years: int,
) -> list[AmortizationYearRecord]:
    """Year-by-year loan breakdown over the projection horizon.

    Always returns exactly ``projection_years`` records. Years after payoff
    carry zero interest and principal with a frozen cumulative total; a term
    longer than the horizon is cut off at the horizon. A loan with a zero
    payment (zero rate) is never paid down: its balance stays outstanding.
    """
    pmt = monthly_payment(principal, annual_rate_pct, term_years)
    r = annual_rate_pct / 100 / 12

    balance = principal
    total_paid = ZERO
    schedule: list[AmortizationYearRecord] = []

    for year in range(1, projection_years + 1):
        year_interest = ZERO
        year_principal = ZERO

        for _ in range(12):
            if balance <= 0:
                break
            interest = balance * r
            principal_paid = min(pmt - interest, balance)
            if balance - principal_paid < PAID_OFF_TOLERANCE:
                principal_paid = balance

            year_interest += interest
            year_principal += principal_paid
            balance -= principal_paid
            total_paid += pmt

        schedule.append(AmortizationYearRecord(
            year=year,
            interest_paid=year_interest,
            principal_paid=year_principal,
            ending_balance=max(ZERO, balance),
            total_paid=total_paid,
        ))

    return schedule
