from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from app.schemas.plant import PlantSummary


class GardenPlantStatus(str, Enum):
    planned = "planned"
    seedling = "seedling"
    growing = "growing"
    flowering = "flowering"
    fruiting = "fruiting"
    harvesting = "harvesting"
    dormant = "dormant"
    removed = "removed"


class GardenPlantCreate(BaseModel):
    plant_id: int
    status: GardenPlantStatus = GardenPlantStatus.planned
    planted_date: Optional[date] = None
    notes: Optional[str] = None


class GardenPlantUpdate(BaseModel):
    status: Optional[GardenPlantStatus] = None
    planted_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator("status")
    @classmethod
    def status_not_null(cls, v: Optional[GardenPlantStatus]) -> Optional[GardenPlantStatus]:
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class GardenPlantRead(BaseModel):
    id: int
    garden_id: int
    plant_id: int
    status: str
    planted_date: date
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    plant: Optional[PlantSummary] = None

    model_config = {"from_attributes": True}
