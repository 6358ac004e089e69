"""Vehicle preset routes."""

from fastapi import APIRouter, HTTPException

from src.api.schemas import PresetResponse
from src.data.presets import VehiclePreset, get_preset, list_presets

router = APIRouter(prefix="/api/v1/presets", tags=["presets"])


def _to_response(preset: VehiclePreset) -> PresetResponse:
    return PresetResponse(id=preset.id, name=preset.name, buy=preset.buy, lease=preset.lease)


@router.get("", response_model=list[PresetResponse])
async def presets():
    return [_to_response(p) for p in list_presets()]


@router.get("/{preset_id}", response_model=PresetResponse)
async def preset(preset_id: str):
    try:
        return _to_response(get_preset(preset_id))
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown preset: {preset_id}")
