from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel

EventType = Literal["sow-indoor", "sow-outdoor", "transplant", "harvest", "planted"]


class CalendarEventRead(BaseModel):
    id: str
    title: str
    type: EventType
    date: date
    plant_name: str
    garden_name: Optional[str] = None
    garden_id: Optional[int] = None
    description: str

    model_config = {"from_attributes": True}


class CalendarStats(BaseModel):
    gardens: int
    garden_plants: int
    active_garden_plants: int
    library_plants: int
    upcoming_events: int
