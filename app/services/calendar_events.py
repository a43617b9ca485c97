"""
Planting calendar event derivation.

Builds the calendar shown to gardeners from four record sets:

- garden plants → a "planted" event, plus a projected "harvest" event when
  the plant has a days-to-maturity value
- zone planting schedules → start/end events for the sow-indoor, sow-outdoor
  and transplant windows of every garden in the schedule's grow zone

Pure and synchronous: no I/O, no shared state. Inputs are any objects with
the model attributes (ORM rows, pydantic models, dataclasses). Never raises:
rows that cannot be read are skipped and logged; the result is always a list
(may be empty).
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Optional, Union

from app.services.month_labels import parse_month_label

logger = logging.getLogger(__name__)

ALL_GARDENS = "all"

EVENT_TYPES = ("sow-indoor", "sow-outdoor", "transplant", "harvest", "planted")

# (event type, action label, start field, end field)
# Schedule harvest windows never become events; harvest dates come only from
# days-to-maturity projection.
SCHEDULE_WINDOWS = [
    ("sow-indoor", "Start Seeds Indoor", "sow_indoor_start", "sow_indoor_end"),
    ("sow-outdoor", "Direct Sow", "sow_outdoor_start", "sow_outdoor_end"),
    ("transplant", "Transplant", "transplant_start", "transplant_end"),
]


@dataclass(frozen=True)
class CalendarEvent:
    id: str
    title: str
    type: str        # one of EVENT_TYPES
    date: date
    plant_name: str
    description: str
    garden_name: Optional[str] = None
    garden_id: Optional[Any] = None


# ── Helpers ───────────────────────────────────────────────────────────────────


def _index_by_id(rows: Iterable[Any], kind: str) -> dict:
    """id → row, first occurrence wins. Rows without a usable id are dropped."""
    index: dict = {}
    for row in rows or ():
        try:
            index.setdefault(row.id, row)
        except (AttributeError, TypeError) as exc:
            logger.warning("derive_calendar_events: unreadable %s row %r: %s", kind, row, exc)
    return index


def _as_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def _positive_days(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _passes_filter(garden: Any, garden_filter: Union[str, int, None]) -> bool:
    if garden_filter is None or garden_filter == ALL_GARDENS:
        return True
    return garden.id == garden_filter


# ── Pass A: realized plantings ────────────────────────────────────────────────


def _planting_events(garden_plant: Any, garden: Any, plant: Any) -> list[CalendarEvent]:
    planted_on = _as_date(garden_plant.planted_date)
    if planted_on is None:
        logger.debug("derive_calendar_events: garden plant %s has no planted date", garden_plant.id)
        return []

    events = [
        CalendarEvent(
            id=f"planted-{garden_plant.id}",
            title=f"Planted {plant.name}",
            type="planted",
            date=planted_on,
            plant_name=plant.name,
            garden_name=garden.name,
            garden_id=garden.id,
            description=f"{plant.name} was planted in {garden.name}",
        )
    ]

    days = _positive_days(getattr(plant, "days_to_maturity", None))
    if days is None:
        return events

    try:
        harvest_on = planted_on + timedelta(days=days)
    except (OverflowError, ValueError) as exc:
        logger.warning(
            "derive_calendar_events: garden plant %s harvest out of range (%s + %s days): %s",
            garden_plant.id, planted_on, days, exc,
        )
        return events

    events.append(
        CalendarEvent(
            id=f"harvest-{garden_plant.id}",
            title=f"Harvest {plant.name}",
            type="harvest",
            date=harvest_on,
            plant_name=plant.name,
            garden_name=garden.name,
            garden_id=garden.id,
            description=f"Expected harvest date for {plant.name} in {garden.name}",
        )
    )
    return events


# ── Pass B: zone schedule windows ─────────────────────────────────────────────


def _window_events(schedule: Any, garden: Any, plant: Any, year: int) -> list[CalendarEvent]:
    events: list[CalendarEvent] = []
    for event_type, action, start_field, end_field in SCHEDULE_WINDOWS:
        start_label = getattr(schedule, start_field, None)
        end_label = getattr(schedule, end_field, None)
        if not start_label or not end_label:
            continue

        start = parse_month_label(start_label, year)
        end = parse_month_label(end_label, year)
        if start is None or end is None:
            logger.warning(
                "derive_calendar_events: schedule %s has unparseable %s window (%r, %r), skipped",
                schedule.id, event_type, start_label, end_label,
            )
            continue

        verb = action.lower()
        events.append(
            CalendarEvent(
                id=f"{event_type}-{schedule.id}-start",
                title=f"{action} {plant.name} (Start)",
                type=event_type,
                date=start,
                plant_name=plant.name,
                garden_name=garden.name,
                garden_id=garden.id,
                description=f"Optimal time to {verb} {plant.name} in {garden.name}",
            )
        )
        events.append(
            CalendarEvent(
                id=f"{event_type}-{schedule.id}-end",
                title=f"{action} {plant.name} (End)",
                type=event_type,
                date=end,
                plant_name=plant.name,
                garden_name=garden.name,
                garden_id=garden.id,
                description=f"Last optimal time to {verb} {plant.name} in {garden.name}",
            )
        )
    return events


# ── Service function ──────────────────────────────────────────────────────────


def derive_calendar_events(
    gardens: Iterable[Any],
    plants: Iterable[Any],
    schedules: Iterable[Any],
    garden_plants: Iterable[Any],
    garden_filter: Union[str, int, None] = ALL_GARDENS,
    reference_year: Optional[int] = None,
) -> list[CalendarEvent]:
    """
    Return every calendar event visible under garden_filter for reference_year.

    garden_filter is ALL_GARDENS (or None) or a garden id. reference_year
    defaults to the current year and only affects schedule windows; planted
    and harvest events keep their own dates.

    Orphaned references (a garden plant whose garden or plant is missing, a
    schedule whose plant is missing) contribute no events. Output order
    follows input order, planted/harvest events first; callers sort.
    """
    year = reference_year or date.today().year
    gardens = list(gardens or ())
    plants_by_id = _index_by_id(plants, "plant")
    gardens_by_id = _index_by_id(gardens, "garden")

    events: list[CalendarEvent] = []

    for garden_plant in garden_plants or ():
        try:
            garden = gardens_by_id.get(garden_plant.garden_id)
            plant = plants_by_id.get(garden_plant.plant_id)
            if garden is None or plant is None:
                continue
            if not _passes_filter(garden, garden_filter):
                continue
            events.extend(_planting_events(garden_plant, garden, plant))
        except Exception as exc:
            logger.warning("derive_calendar_events: skipping garden plant %r: %s", garden_plant, exc)

    schedules = list(schedules or ())
    for garden in gardens:
        try:
            if not _passes_filter(garden, garden_filter):
                continue
            zone = garden.grow_zone
        except Exception as exc:
            logger.warning("derive_calendar_events: skipping garden %r: %s", garden, exc)
            continue

        for schedule in schedules:
            try:
                if schedule.grow_zone != zone:
                    continue
                plant = plants_by_id.get(schedule.plant_id)
                if plant is None:
                    continue
                events.extend(_window_events(schedule, garden, plant, year))
            except Exception as exc:
                logger.warning("derive_calendar_events: skipping schedule %r: %s", schedule, exc)

    return events


# ── Views over derived events ─────────────────────────────────────────────────


def _sort_key(event: CalendarEvent):
    return (event.date, event.id, str(event.garden_id))


def sort_events(events: Iterable[CalendarEvent]) -> list[CalendarEvent]:
    return sorted(events, key=_sort_key)


def dedupe_events(events: Iterable[CalendarEvent]) -> list[CalendarEvent]:
    """Drop repeats of the same (id, garden_id, date), keeping the first."""
    seen = set()
    unique = []
    for event in events:
        key = (event.id, event.garden_id, event.date)
        if key in seen:
            continue
        seen.add(key)
        unique.append(event)
    return unique


def upcoming_events(
    events: Iterable[CalendarEvent], start: date, days: int = 30, limit: int = 10
) -> list[CalendarEvent]:
    """Events dated start..start+days inclusive, soonest first, at most limit."""
    end = start + timedelta(days=days)
    window = [e for e in events if start <= e.date <= end]
    return sort_events(window)[:limit]


def events_on(events: Iterable[CalendarEvent], day: date) -> list[CalendarEvent]:
    return sort_events(e for e in events if e.date == day)


def events_in_month(events: Iterable[CalendarEvent], year: int, month: int) -> list[CalendarEvent]:
    return sort_events(e for e in events if e.date.year == year and e.date.month == month)
