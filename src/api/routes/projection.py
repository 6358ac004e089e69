"""Projection routes: the primary API entry point."""

import logging
from dataclasses import asdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_settings
from src.api.schemas import (
    BreakevenRequest,
    BreakevenResponse,
    FormulasResponse,
    OutcomeResponse,
    PreliminaryResponse,
    ProjectionRequest,
    ProjectionResponse,
    ScheduleResponse,
    YearlyCalculationResponse,
)
from src.config import Settings
from src.engine.breakeven import breakeven_monthly_lease
from src.engine.comparison import compare_outcomes
from src.engine.debt import amortization_schedule
from src.engine.formulas import build_formulas
from src.engine.preliminary import resolve_preliminary_values
from src.engine.projection import effective_lease, run_projection
from src.models.parameters import (
    BuyParameters,
    LeaseParameters,
    ProjectionSettings,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/projection", tags=["projection"])

TWO_PLACES = Decimal("0.01")


def _cents(values: dict[str, Any]) -> dict[str, Any]:
    """Round every Decimal in a flat record to cents for display."""
    return {
        k: v.quantize(TWO_PLACES, ROUND_HALF_UP) if isinstance(v, Decimal) else v
        for k, v in values.items()
    }


def _build_parameters(
    req: ProjectionRequest,
) -> tuple[BuyParameters, LeaseParameters, ProjectionSettings]:
    try:
        return req.to_parameters()
    except KeyError:
        logger.warning("Rejected unknown investment option: %s", req.lease.investment_option)
        raise HTTPException(
            status_code=422,
            detail=f"Unknown investment option: {req.lease.investment_option}",
        )


@router.post("", response_model=ProjectionResponse)
async def project(req: ProjectionRequest):
    """Full buy vs lease projection with formulas and the final-year outcome."""
    buy, lease, projection = _build_parameters(req)
    result = run_projection(buy, lease, projection)
    outcome = compare_outcomes(result, cash_out=projection.show_cash_out)
    formulas = build_formulas(buy, effective_lease(buy, lease), result.preliminary)

    logger.info(
        "Projection served: %d years, winner=%s", projection.projection_years, outcome.winner
    )

    return ProjectionResponse(
        projection_years=result.projection_years,
        show_yearly_detail=projection.show_yearly_detail,
        show_cash_out=projection.show_cash_out,
        preliminary=PreliminaryResponse(**_cents(asdict(result.preliminary))),
        yearly_results=[
            YearlyCalculationResponse(
                year=y.year,
                buy=_cents(asdict(y.buy)),
                lease=_cents(asdict(y.lease)),
            )
            for y in result.yearly
        ],
        formulas=FormulasResponse(**asdict(formulas)),
        outcome=OutcomeResponse(**_cents(asdict(outcome))),
    )


@router.post("/schedule", response_model=ScheduleResponse)
async def schedule(req: ProjectionRequest):
    """Loan amortization schedule over the projection horizon."""
    buy, lease, projection = _build_parameters(req)
    preliminary = resolve_preliminary_values(buy, lease)
    rows = amortization_schedule(
        principal=preliminary.loan_amount,
        annual_rate_pct=buy.loan_rate_pct,
        term_years=buy.loan_term_years,
        projection_years=projection.projection_years,
    )
    return ScheduleResponse(
        monthly_payment=preliminary.monthly_payment.quantize(TWO_PLACES, ROUND_HALF_UP),
        loan_amount=preliminary.loan_amount.quantize(TWO_PLACES, ROUND_HALF_UP),
        schedule=[_cents(asdict(row)) for row in rows],
    )


@router.post("/breakeven", response_model=BreakevenResponse)
def breakeven(
    req: BreakevenRequest,
    app_settings: Settings = Depends(get_settings),
):
    """Base monthly lease at which both strategies finish level."""
    buy, lease, projection = _build_parameters(req)
    try:
        monthly = breakeven_monthly_lease(
            buy,
            lease,
            projection,
            cash_out=req.cash_out,
            ceiling=app_settings.breakeven_lease_ceiling,
        )
    except ValueError as e:
        logger.warning("Break-even search failed: %s", e)
        raise HTTPException(
            status_code=422,
            detail="No break-even lease payment within the search range",
        )

    return BreakevenResponse(
        breakeven_monthly_lease=monthly,
        current_monthly_lease=lease.monthly_lease,
        cash_out=req.cash_out,
    )
