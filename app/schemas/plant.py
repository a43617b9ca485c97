from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PlantSummary(BaseModel):
    id: int
    name: str
    scientific_name: Optional[str] = None
    plant_type: str
    category: Optional[str] = None
    days_to_maturity: Optional[int] = None
    sun_requirements: Optional[str] = None
    water_requirements: Optional[str] = None

    model_config = {"from_attributes": True}


class PlantCreate(BaseModel):
    name: str
    plant_type: str
    scientific_name: Optional[str] = None
    category: Optional[str] = None
    days_to_maturity: Optional[int] = Field(None, ge=1, le=3650)
    spacing_inches: Optional[float] = None
    sun_requirements: Optional[str] = None
    water_requirements: Optional[str] = None
    soil_ph_min: Optional[float] = None
    soil_ph_max: Optional[float] = None
    frost_tolerance: Optional[str] = None
    description: Optional[str] = None


class PlantRead(BaseModel):
    id: int
    name: str
    scientific_name: Optional[str] = None
    plant_type: str
    category: Optional[str] = None
    days_to_maturity: Optional[int] = None
    spacing_inches: Optional[float] = None
    sun_requirements: Optional[str] = None
    water_requirements: Optional[str] = None
    soil_ph_min: Optional[float] = None
    soil_ph_max: Optional[float] = None
    frost_tolerance: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PlantListResponse(BaseModel):
    items: list[PlantSummary]
    total: int
    page: int
    per_page: int
