from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from app.models.schedule import LABEL_FIELDS
from app.services.month_labels import format_window, is_valid_month_label
from app.services.zones import is_known_zone


def _check_label(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        return None
    if not is_valid_month_label(value):
        raise ValueError(f"'{value}' is not a 'Month Day' label such as 'Mar 15'")
    return value


class ScheduleWindows(BaseModel):
    sow_indoor_start: Optional[str] = None
    sow_indoor_end: Optional[str] = None
    sow_outdoor_start: Optional[str] = None
    sow_outdoor_end: Optional[str] = None
    transplant_start: Optional[str] = None
    transplant_end: Optional[str] = None
    harvest_start: Optional[str] = None
    harvest_end: Optional[str] = None

    @field_validator(*LABEL_FIELDS)
    @classmethod
    def validate_label(cls, v: Optional[str]) -> Optional[str]:
        return _check_label(v)


class ScheduleCreate(ScheduleWindows):
    plant_id: int
    grow_zone: str

    @field_validator("grow_zone")
    @classmethod
    def validate_zone(cls, v: str) -> str:
        v = v.strip()
        if not is_known_zone(v):
            raise ValueError(f"Unknown grow zone '{v}'")
        return v


class ScheduleUpdate(ScheduleWindows):
    pass


class ScheduleRead(BaseModel):
    id: int
    plant_id: int
    grow_zone: str
    sow_indoor_start: Optional[str]
    sow_indoor_end: Optional[str]
    sow_outdoor_start: Optional[str]
    sow_outdoor_end: Optional[str]
    transplant_start: Optional[str]
    transplant_end: Optional[str]
    harvest_start: Optional[str]
    harvest_end: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PlantScheduleRead(BaseModel):
    """Schedule windows formatted for plant detail display."""
    id: int
    grow_zone: str
    sow_indoor: str
    sow_outdoor: str
    transplant: str
    harvest: str

    @model_validator(mode="before")
    @classmethod
    def format_windows(cls, data):
        """Convert ORM object → dict of "Mar 15 - Apr 1" ranges."""
        if hasattr(data, "grow_zone"):
            return {
                "id": data.id,
                "grow_zone": data.grow_zone,
                "sow_indoor": format_window(data.sow_indoor_start, data.sow_indoor_end),
                "sow_outdoor": format_window(data.sow_outdoor_start, data.sow_outdoor_end),
                "transplant": format_window(data.transplant_start, data.transplant_end),
                "harvest": format_window(data.harvest_start, data.harvest_end),
            }
        return data
