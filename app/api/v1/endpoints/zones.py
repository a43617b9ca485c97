from fastapi import APIRouter, HTTPException

from app.schemas.zone import ZoneRead
from app.services.zones import GROW_ZONES, get_zone

router = APIRouter(prefix="/zones", tags=["zones"])


@router.get("", response_model=list[ZoneRead])
async def list_zones():
    return [ZoneRead.model_validate(z) for z in GROW_ZONES]


@router.get("/{code}", response_model=ZoneRead)
async def get_zone_detail(code: str):
    zone = get_zone(code)
    if zone is None:
        raise HTTPException(status_code=404, detail=f"Unknown grow zone '{code}'")
    return ZoneRead.model_validate(zone)
