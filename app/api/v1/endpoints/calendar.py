from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.deps import Calendar, get_db
from app.models.garden import Garden, GardenPlant
from app.models.plant import Plant
from app.schemas.calendar import CalendarEventRead, CalendarStats
from app.services.calendar_data import CalendarSnapshot, build_calendar, build_upcoming
from app.services.calendar_events import ALL_GARDENS, events_in_month, events_on, sort_events

router = APIRouter(prefix="/calendar", tags=["calendar"])
stats_router = APIRouter(prefix="/stats", tags=["stats"])


def _garden_filter(snapshot: CalendarSnapshot, garden_id: Optional[int]):
    if garden_id is None:
        return ALL_GARDENS
    if not snapshot.has_garden(garden_id):
        raise HTTPException(status_code=404, detail="Garden not found")
    return garden_id


@router.get("/events", response_model=list[CalendarEventRead])
async def list_events(
    calendar: Calendar,
    garden_id: Optional[int] = Query(None, description="Only events for this garden; all gardens when omitted"),
    year: Optional[int] = Query(None, ge=1, le=9999, description="Reference year for schedule windows (default: current year)"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Only events in this month of the reference year"),
):
    snapshot = await calendar.load_snapshot()
    reference_year = year or date.today().year
    events = build_calendar(snapshot, _garden_filter(snapshot, garden_id), reference_year)
    if month is not None:
        return events_in_month(events, reference_year, month)
    return sort_events(events)


@router.get("/upcoming", response_model=list[CalendarEventRead])
async def list_upcoming(
    calendar: Calendar,
    garden_id: Optional[int] = Query(None),
    days: int = Query(settings.CALENDAR_UPCOMING_DAYS, ge=1, le=366),
    limit: int = Query(settings.CALENDAR_UPCOMING_LIMIT, ge=1, le=100),
):
    snapshot = await calendar.load_snapshot()
    return build_upcoming(
        snapshot, date.today(), days=days, limit=limit,
        garden_filter=_garden_filter(snapshot, garden_id),
    )


@router.get("/day/{day}", response_model=list[CalendarEventRead])
async def list_day_events(day: date, calendar: Calendar, garden_id: Optional[int] = Query(None)):
    snapshot = await calendar.load_snapshot()
    events = build_calendar(snapshot, _garden_filter(snapshot, garden_id), day.year)
    return events_on(events, day)


# ── Dashboard stats ───────────────────────────────────────────────────────────


@stats_router.get("", response_model=CalendarStats)
async def get_stats(calendar: Calendar, db: AsyncSession = Depends(get_db)):
    gardens_count = await db.scalar(select(func.count(Garden.id)))
    garden_plants_count = await db.scalar(select(func.count(GardenPlant.id)))
    active_count = await db.scalar(
        select(func.count(GardenPlant.id)).where(GardenPlant.status.not_in(["removed", "dormant"]))
    )
    plants_count = await db.scalar(select(func.count(Plant.id)))

    snapshot = await calendar.load_snapshot()
    upcoming = build_upcoming(
        snapshot, date.today(),
        days=settings.CALENDAR_UPCOMING_DAYS,
        limit=settings.CALENDAR_UPCOMING_LIMIT,
    )

    return CalendarStats(
        gardens=gardens_count or 0,
        garden_plants=garden_plants_count or 0,
        active_garden_plants=active_count or 0,
        library_plants=plants_count or 0,
        upcoming_events=len(upcoming),
    )
