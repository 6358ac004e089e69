"""Pydantic schemas for API request/response models.

Request schemas are the input boundary: values are range-checked here so the
engine can assume well-formed inputs.
"""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from src.config import settings
from src.models.investment import investment_choice
from src.models.parameters import (
    BuyParameters,
    FilingStatus,
    LeaseParameters,
    ProjectionSettings,
)


# ---- Request schemas ----

class BuyInputs(BaseModel):
    vehicle_price: Decimal = Field(Decimal("35000"), ge=0)
    down_payment_pct: Decimal = Field(Decimal("20"), ge=0, le=100)
    loan_rate_pct: Decimal = Field(Decimal("5.5"), ge=0, le=100)
    loan_term_years: Literal[3, 5, 7, 10] = 5
    depreciation_pct: Decimal = Field(Decimal("15"), ge=0, lt=100)

    dealer_fee_pct: Decimal = Field(Decimal("3"), ge=0, le=100)
    selling_cost_pct: Decimal = Field(Decimal("5"), ge=0, le=100)

    insurance_registration_pct: Decimal = Field(Decimal("2.5"), ge=0, le=100)
    maintenance_pct: Decimal = Field(Decimal("1.5"), ge=0, le=100)
    fixed_annual_costs: Decimal = Field(Decimal("2000"), ge=0)

    marginal_tax_pct: Decimal = Field(Decimal("24"), ge=0, le=100)
    deduct_loan_interest: bool = False
    vehicle_capital_gains_pct: Decimal = Field(Decimal("15"), ge=0, le=100)
    filing_status: Literal["single", "married"] = "married"


class LeaseInputs(BaseModel):
    monthly_lease: Decimal = Field(Decimal("500"), ge=0)
    lease_growth_pct: Decimal = Field(Decimal("3"), ge=0, le=100)
    mirror_depreciation: bool = False
    investment_option: str = Field("SPY", description="Benchmark symbol (SPY, QQQ) or 'custom'")
    custom_return_pct: Decimal | None = Field(None, ge=0, le=100)
    investment_capital_gains_pct: Decimal = Field(Decimal("15"), ge=0, le=100)


class SettingsInputs(BaseModel):
    projection_years: int = Field(
        settings.default_projection_years, ge=1, le=settings.max_projection_years
    )
    show_yearly_detail: bool = False
    show_cash_out: bool = False


class ProjectionRequest(BaseModel):
    buy: BuyInputs = Field(default_factory=BuyInputs)
    lease: LeaseInputs = Field(default_factory=LeaseInputs)
    settings: SettingsInputs = Field(default_factory=SettingsInputs)

    def to_parameters(self) -> tuple[BuyParameters, LeaseParameters, ProjectionSettings]:
        """Convert validated inputs into engine parameters.

        Raises KeyError for an investment option outside the catalog.
        """
        b, ls, s = self.buy, self.lease, self.settings
        buy = BuyParameters(
            vehicle_price=b.vehicle_price,
            down_payment_pct=b.down_payment_pct,
            loan_rate_pct=b.loan_rate_pct,
            loan_term_years=b.loan_term_years,
            depreciation_pct=b.depreciation_pct,
            dealer_fee_pct=b.dealer_fee_pct,
            selling_cost_pct=b.selling_cost_pct,
            insurance_registration_pct=b.insurance_registration_pct,
            maintenance_pct=b.maintenance_pct,
            fixed_annual_costs=b.fixed_annual_costs,
            marginal_tax_pct=b.marginal_tax_pct,
            deduct_loan_interest=b.deduct_loan_interest,
            vehicle_capital_gains_pct=b.vehicle_capital_gains_pct,
            filing_status=FilingStatus(b.filing_status),
        )
        lease = LeaseParameters(
            monthly_lease=ls.monthly_lease,
            lease_growth_pct=ls.lease_growth_pct,
            mirror_depreciation=ls.mirror_depreciation,
            investment=investment_choice(ls.investment_option, ls.custom_return_pct),
            investment_capital_gains_pct=ls.investment_capital_gains_pct,
        )
        projection = ProjectionSettings(
            projection_years=s.projection_years,
            show_yearly_detail=s.show_yearly_detail,
            show_cash_out=s.show_cash_out,
        )
        return buy, lease, projection


class BreakevenRequest(ProjectionRequest):
    cash_out: bool = True


# ---- Response schemas ----

class PreliminaryResponse(BaseModel):
    loan_amount: Decimal
    down_payment: Decimal
    dealer_fees: Decimal
    monthly_payment: Decimal
    investment_return_pct: Decimal
    tax_free_gain_threshold: Decimal


class AmortizationYearResponse(BaseModel):
    year: int
    interest_paid: Decimal
    principal_paid: Decimal
    ending_balance: Decimal
    total_paid: Decimal


class YearlyBuyResponse(BaseModel):
    year: int
    vehicle_value: Decimal
    insurance_registration: Decimal
    maintenance: Decimal
    fixed_costs: Decimal
    total_holding_costs: Decimal
    loan_payment: Decimal
    loan_interest: Decimal
    loan_principal: Decimal
    loan_balance: Decimal
    tax_savings: Decimal
    cash_outflow: Decimal
    adjusted_cash_outflow: Decimal
    net_worth_hold: Decimal
    net_worth_cash_out: Decimal
    capital_gain: Decimal
    taxable_gain: Decimal
    tax_on_gain: Decimal
    excess_portfolio: Decimal
    excess_cost_basis: Decimal
    excess_gain: Decimal
    tax_on_excess_gain: Decimal


class YearlyLeaseResponse(BaseModel):
    year: int
    monthly_lease: Decimal
    annual_lease_cost: Decimal
    cash_outflow: Decimal
    invested_this_year: Decimal
    portfolio_before_growth: Decimal
    investment_return: Decimal
    portfolio_value: Decimal
    total_invested: Decimal
    net_worth_hold: Decimal
    net_worth_cash_out: Decimal
    capital_gain: Decimal
    taxable_gain: Decimal
    tax_on_gain: Decimal


class YearlyCalculationResponse(BaseModel):
    year: int
    buy: YearlyBuyResponse
    lease: YearlyLeaseResponse


class FormulasResponse(BaseModel):
    monthly_payment: str
    vehicle_depreciation: str
    investment_growth: str
    loan_interest_deduction: str
    vehicle_capital_gains: str
    investment_capital_gains: str


class OutcomeResponse(BaseModel):
    year: int
    cash_out: bool
    buy_net_worth: Decimal
    lease_net_worth: Decimal
    difference: Decimal
    winner: str
    total_buy_outflow: Decimal
    total_lease_outflow: Decimal


class ProjectionResponse(BaseModel):
    projection_years: int
    show_yearly_detail: bool
    show_cash_out: bool
    preliminary: PreliminaryResponse
    yearly_results: list[YearlyCalculationResponse]
    formulas: FormulasResponse
    outcome: OutcomeResponse


class ScheduleResponse(BaseModel):
    monthly_payment: Decimal
    loan_amount: Decimal
    schedule: list[AmortizationYearResponse]


class BreakevenResponse(BaseModel):
    breakeven_monthly_lease: Decimal
    current_monthly_lease: Decimal
    cash_out: bool


class PresetResponse(BaseModel):
    id: str
    name: str
    buy: dict[str, Decimal | int | bool]
    lease: dict[str, Decimal | int | bool]
