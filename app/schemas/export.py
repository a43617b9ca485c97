from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.garden import GardenRead


class ExportGardenPlant(BaseModel):
    id: int
    garden_id: int
    plant_id: int
    status: str
    planted_date: date
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class GardenExport(BaseModel):
    gardens: list[GardenRead]
    garden_plants: list[ExportGardenPlant]
    export_date: datetime
