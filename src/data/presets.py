"""Vehicle archetype presets.

Each preset overrides a subset of the buy and lease inputs; anything it does
not name keeps the caller's value.
"""

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any

from src.models.parameters import BuyParameters, LeaseParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VehiclePreset:
    id: str
    name: str
    buy: dict[str, Any] = field(default_factory=dict)
    lease: dict[str, Any] = field(default_factory=dict)


def _preset(
    preset_id: str,
    name: str,
    price: str,
    rate: str,
    depreciation: str,
    insurance: str,
    maintenance: str,
    fixed_costs: str,
    monthly_lease: str,
) -> VehiclePreset:
    return VehiclePreset(
        id=preset_id,
        name=name,
        buy={
            "vehicle_price": Decimal(price),
            "down_payment_pct": Decimal("20"),
            "loan_rate_pct": Decimal(rate),
            "loan_term_years": 5,
            "depreciation_pct": Decimal(depreciation),
            "insurance_registration_pct": Decimal(insurance),
            "maintenance_pct": Decimal(maintenance),
            "fixed_annual_costs": Decimal(fixed_costs),
        },
        lease={
            "monthly_lease": Decimal(monthly_lease),
            "lease_growth_pct": Decimal("3"),
            "mirror_depreciation": False,
        },
    )


PRESETS: dict[str, VehiclePreset] = {
    p.id: p
    for p in (
        _preset("default", "Default", "35000", "5.5", "15", "2.5", "1.5", "2000", "500"),
        _preset("economy", "Economy Car", "25000", "5.0", "20", "2.0", "1.0", "1500", "350"),
        _preset("midrange", "Mid-Range Car", "40000", "5.5", "15", "2.5", "1.5", "2000", "550"),
        _preset("luxury", "Luxury Car", "60000", "6.0", "12", "3.0", "2.0", "2500", "800"),
        _preset("suv", "SUV", "45000", "5.5", "18", "2.8", "1.8", "3000", "600"),
    )
}


def list_presets() -> list[VehiclePreset]:
    return list(PRESETS.values())


def get_preset(preset_id: str) -> VehiclePreset:
    """Look up a preset by id. Raises KeyError if unknown."""
    try:
        return PRESETS[preset_id]
    except KeyError:
        logger.warning("Unknown vehicle preset: %s", preset_id)
        raise


def apply_preset(
    preset: VehiclePreset,
    buy: BuyParameters | None = None,
    lease: LeaseParameters | None = None,
) -> tuple[BuyParameters, LeaseParameters]:
    """Overlay a preset onto existing inputs (defaults when omitted)."""
    return (
        replace(buy or BuyParameters(), **preset.buy),
        replace(lease or LeaseParameters(), **preset.lease),
    )
