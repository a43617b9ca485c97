from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.services.zones import is_known_zone


def _check_zone(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not is_known_zone(value):
        raise ValueError(f"Unknown grow zone '{value}'")
    return value


class GardenCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    location: str = Field(min_length=1, max_length=200)
    grow_zone: str
    size: Optional[str] = None
    description: Optional[str] = None

    @field_validator("grow_zone")
    @classmethod
    def validate_zone(cls, v: str) -> str:
        return _check_zone(v)


class GardenUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    grow_zone: Optional[str] = None
    size: Optional[str] = None
    description: Optional[str] = None

    @field_validator("name", "location", "grow_zone")
    @classmethod
    def not_null(cls, v: Optional[str]) -> Optional[str]:
        # Omitted fields keep their default without validation; only an explicit null lands here.
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

    @field_validator("grow_zone")
    @classmethod
    def validate_zone(cls, v: Optional[str]) -> Optional[str]:
        return _check_zone(v)


class GardenRead(BaseModel):
    id: int
    name: str
    location: str
    grow_zone: str
    size: Optional[str]
    description: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class GardenSummary(GardenRead):
    """Garden with the number of plants placed in it."""
    plant_count: int = 0
