"""
ARQ task: seed the shared plant library and its zone planting schedules.

The built-in library covers common vegetables and herbs. Schedules are
written for zone 6 and shifted for the other seeded zones: every zone colder
than 6 moves each window later by ZONE_SHIFT_DAYS, every warmer zone earlier.

Idempotent: plants are matched by name and schedules by (plant, zone);
existing rows are never modified. Each run records a PipelineRun, marked
"skipped" when the library was already complete.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import AsyncSessionLocal
from app.models.logs import PipelineRun
from app.models.plant import Plant
from app.models.schedule import PlantingSchedule

logger = logging.getLogger(__name__)

BASE_ZONE = 6
SEEDED_ZONES = ["4", "5", "6", "7", "8", "9"]
ZONE_SHIFT_DAYS = 10

# Non-leap year used to shift "Month Day" labels.
_LABEL_YEAR = 2023


@dataclass
class LibraryPlant:
    name: str
    scientific_name: str
    plant_type: str
    category: str
    days_to_maturity: int
    spacing_inches: float
    sun_requirements: str
    water_requirements: str
    frost_tolerance: str
    # zone-6 windows as (start, end) labels; None when the method does not apply
    sow_indoor: Optional[tuple[str, str]] = None
    sow_outdoor: Optional[tuple[str, str]] = None
    transplant: Optional[tuple[str, str]] = None
    harvest: Optional[tuple[str, str]] = None


# ── Library table ─────────────────────────────────────────────────────────────

LIBRARY: list[LibraryPlant] = [
    LibraryPlant("Tomato", "Solanum lycopersicum", "vegetable", "fruiting", 75, 24,
                 "Full sun", "Regular", "None",
                 sow_indoor=("Mar 1", "Mar 31"), transplant=("May 10", "Jun 1"),
                 harvest=("Jul 20", "Sep 30")),
    LibraryPlant("Pepper", "Capsicum annuum", "vegetable", "fruiting", 70, 18,
                 "Full sun", "Regular", "None",
                 sow_indoor=("Feb 20", "Mar 20"), transplant=("May 15", "Jun 5"),
                 harvest=("Jul 25", "Sep 30")),
    LibraryPlant("Lettuce", "Lactuca sativa", "vegetable", "leafy green", 45, 8,
                 "Partial shade", "Regular", "Light frost",
                 sow_indoor=("Feb 15", "Mar 15"), sow_outdoor=("Mar 25", "May 1"),
                 transplant=("Apr 1", "Apr 30"), harvest=("May 1", "Jun 30")),
    LibraryPlant("Spinach", "Spinacia oleracea", "vegetable", "leafy green", 40, 4,
                 "Partial shade", "Regular", "Hard frost",
                 sow_outdoor=("Mar 15", "Apr 20"), harvest=("Apr 25", "Jun 10")),
    LibraryPlant("Kale", "Brassica oleracea var. sabellica", "vegetable", "leafy green", 55, 16,
                 "Full sun", "Regular", "Hard frost",
                 sow_indoor=("Feb 15", "Mar 10"), sow_outdoor=("Apr 1", "May 1"),
                 transplant=("Apr 1", "Apr 25"), harvest=("May 20", "Nov 15")),
    LibraryPlant("Broccoli", "Brassica oleracea var. italica", "vegetable", "brassica", 70, 18,
                 "Full sun", "Regular", "Light frost",
                 sow_indoor=("Feb 10", "Mar 10"), transplant=("Apr 1", "Apr 25"),
                 harvest=("Jun 1", "Jul 1")),
    LibraryPlant("Carrot", "Daucus carota", "vegetable", "root", 70, 3,
                 "Full sun", "Regular", "Light frost",
                 sow_outdoor=("Apr 1", "Jun 15"), harvest=("Jun 15", "Oct 15")),
    LibraryPlant("Radish", "Raphanus sativus", "vegetable", "root", 28, 2,
                 "Full sun", "Regular", "Light frost",
                 sow_outdoor=("Mar 20", "May 15"), harvest=("Apr 20", "Jun 15")),
    LibraryPlant("Peas", "Pisum sativum", "vegetable", "legume", 60, 3,
                 "Full sun", "Regular", "Light frost",
                 sow_outdoor=("Mar 15", "Apr 15"), harvest=("May 20", "Jul 1")),
    LibraryPlant("Bush Bean", "Phaseolus vulgaris", "vegetable", "legume", 55, 4,
                 "Full sun", "Regular", "None",
                 sow_outdoor=("May 10", "Jul 1"), harvest=("Jul 5", "Sep 15")),
    LibraryPlant("Cucumber", "Cucumis sativus", "vegetable", "cucurbit", 60, 12,
                 "Full sun", "High", "None",
                 sow_indoor=("Apr 10", "May 1"), sow_outdoor=("May 20", "Jun 20"),
                 transplant=("May 20", "Jun 10"), harvest=("Jul 15", "Sep 15")),
    LibraryPlant("Zucchini", "Cucurbita pepo", "vegetable", "cucurbit", 50, 36,
                 "Full sun", "High", "None",
                 sow_indoor=("Apr 10", "May 1"), sow_outdoor=("May 20", "Jun 15"),
                 transplant=("May 20", "Jun 10"), harvest=("Jul 5", "Sep 20")),
    LibraryPlant("Basil", "Ocimum basilicum", "herb", "culinary herb", 60, 10,
                 "Full sun", "Regular", "None",
                 sow_indoor=("Mar 25", "Apr 20"), sow_outdoor=("May 20", "Jun 15"),
                 transplant=("May 20", "Jun 10"), harvest=("Jun 20", "Sep 30")),
    LibraryPlant("Cilantro", "Coriandrum sativum", "herb", "culinary herb", 45, 6,
                 "Partial shade", "Regular", "Light frost",
                 sow_outdoor=("Apr 1", "May 15"), harvest=("May 15", "Jul 1")),
]


# ── Label shifting ────────────────────────────────────────────────────────────


def shift_label(label: str, days: int) -> str:
    """Move a zone-6 "Mon D" label by days, wrapping across the year."""
    start = datetime.strptime(f"{label} {_LABEL_YEAR}", "%b %d %Y").date()
    shifted = start + timedelta(days=days)
    return f"{shifted:%b} {shifted.day}"


def zone_windows(entry: LibraryPlant, zone: str) -> dict[str, Optional[str]]:
    offset = (BASE_ZONE - int(zone)) * ZONE_SHIFT_DAYS
    windows: dict[str, Optional[str]] = {}
    for prefix in ("sow_indoor", "sow_outdoor", "transplant", "harvest"):
        pair = getattr(entry, prefix)
        windows[f"{prefix}_start"] = shift_label(pair[0], offset) if pair else None
        windows[f"{prefix}_end"] = shift_label(pair[1], offset) if pair else None
    return windows


# ── Seeding ───────────────────────────────────────────────────────────────────


async def seed_into(db: AsyncSession) -> int:
    """Insert missing library rows. Returns the number of rows inserted."""
    inserted = 0

    existing = await db.execute(select(Plant))
    plants_by_name = {p.name.lower(): p for p in existing.scalars().all()}

    for entry in LIBRARY:
        plant = plants_by_name.get(entry.name.lower())
        if plant is None:
            plant = Plant(
                name=entry.name,
                scientific_name=entry.scientific_name,
                plant_type=entry.plant_type,
                category=entry.category,
                days_to_maturity=entry.days_to_maturity,
                spacing_inches=entry.spacing_inches,
                sun_requirements=entry.sun_requirements,
                water_requirements=entry.water_requirements,
                frost_tolerance=entry.frost_tolerance,
            )
            db.add(plant)
            await db.flush()
            plants_by_name[entry.name.lower()] = plant
            inserted += 1

        result = await db.execute(
            select(PlantingSchedule.grow_zone).where(PlantingSchedule.plant_id == plant.id)
        )
        seeded_zones = set(result.scalars().all())
        for zone in SEEDED_ZONES:
            if zone in seeded_zones:
                continue
            db.add(PlantingSchedule(plant_id=plant.id, grow_zone=zone, **zone_windows(entry, zone)))
            inserted += 1

    await db.commit()
    return inserted


async def seed_library(ctx: dict) -> int:
    logger.info("seed_library: starting")
    started_at = datetime.now(timezone.utc)

    async with AsyncSessionLocal() as db:
        pipeline = PipelineRun(
            pipeline_name="library_seed",
            status="running",
            started_at=started_at,
        )
        db.add(pipeline)
        await db.commit()
        await db.refresh(pipeline)

        try:
            inserted = await seed_into(db)

            finished_at = datetime.now(timezone.utc)
            pipeline.status = "success" if inserted else "skipped"
            pipeline.finished_at = finished_at
            pipeline.duration_ms = int((finished_at - started_at).total_seconds() * 1000)
            pipeline.records_processed = inserted
            await db.commit()

        except Exception as exc:
            logger.exception("seed_library: unexpected error")
            await db.rollback()
            finished_at = datetime.now(timezone.utc)
            pipeline.status = "failed"
            pipeline.finished_at = finished_at
            pipeline.duration_ms = int((finished_at - started_at).total_seconds() * 1000)
            pipeline.error_message = str(exc)
            db.add(pipeline)
            await db.commit()
            raise

    logger.info("seed_library: complete, %d rows inserted", inserted)
    return inserted
