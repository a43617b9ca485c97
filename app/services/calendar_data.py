"""
Calendar data access.

The event deriver only ever sees plain collections. CalendarRepository is the
one place that reads them from the database; it is handed to API routes
through a FastAPI dependency so tests can substitute their own.

Every call to load_snapshot() reads fresh rows. Calendars are recomputed per
request and nothing is cached between requests.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Optional, Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.garden import Garden, GardenPlant
from app.models.plant import Plant
from app.models.schedule import PlantingSchedule
from app.services.calendar_events import (
    ALL_GARDENS,
    CalendarEvent,
    dedupe_events,
    derive_calendar_events,
    upcoming_events,
)


@dataclass(frozen=True)
class CalendarSnapshot:
    gardens: tuple[Any, ...] = ()
    plants: tuple[Any, ...] = ()
    schedules: tuple[Any, ...] = ()
    garden_plants: tuple[Any, ...] = ()

    def has_garden(self, garden_id: int) -> bool:
        return any(g.id == garden_id for g in self.gardens)


class CalendarRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _all(self, model) -> tuple:
        result = await self.db.execute(select(model).order_by(model.id))
        return tuple(result.scalars().all())

    async def load_snapshot(self) -> CalendarSnapshot:
        return CalendarSnapshot(
            gardens=await self._all(Garden),
            plants=await self._all(Plant),
            schedules=await self._all(PlantingSchedule),
            garden_plants=await self._all(GardenPlant),
        )


def build_calendar(
    snapshot: CalendarSnapshot,
    garden_filter: Union[str, int, None] = ALL_GARDENS,
    reference_year: Optional[int] = None,
) -> list[CalendarEvent]:
    return derive_calendar_events(
        snapshot.gardens,
        snapshot.plants,
        snapshot.schedules,
        snapshot.garden_plants,
        garden_filter=garden_filter,
        reference_year=reference_year,
    )


def build_upcoming(
    snapshot: CalendarSnapshot,
    start: date,
    days: int,
    limit: int,
    garden_filter: Union[str, int, None] = ALL_GARDENS,
) -> list[CalendarEvent]:
    """
    Upcoming events from start. Schedule windows are year-relative, so a
    window that crosses New Year derives both years and merges them.
    """
    end_year = (start + timedelta(days=days)).year
    events: list[CalendarEvent] = []
    for year in range(start.year, end_year + 1):
        events.extend(build_calendar(snapshot, garden_filter, year))
    return upcoming_events(dedupe_events(events), start, days=days, limit=limit)
