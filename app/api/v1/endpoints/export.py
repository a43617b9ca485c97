import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_db
from app.models.garden import Garden, GardenPlant
from app.schemas.export import ExportGardenPlant, GardenExport
from app.schemas.garden import GardenRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/export", tags=["export"])


@router.get("", response_model=GardenExport)
async def export_data(db: AsyncSession = Depends(get_db)):
    """Download every garden and garden plant as a JSON attachment."""
    gardens = (await db.execute(select(Garden).order_by(Garden.id))).scalars().all()
    garden_plants = (await db.execute(select(GardenPlant).order_by(GardenPlant.id))).scalars().all()

    now = datetime.now(timezone.utc)
    payload = GardenExport(
        gardens=[GardenRead.model_validate(g) for g in gardens],
        garden_plants=[ExportGardenPlant.model_validate(gp) for gp in garden_plants],
        export_date=now,
    )
    logger.info("export: %d gardens, %d garden plants", len(gardens), len(garden_plants))

    filename = f"garden-tracker-data-{now.date().isoformat()}.json"
    return JSONResponse(
        content=payload.model_dump(mode="json"),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
