from sqlalchemy import func, select

from app.models import PipelineRun, Plant, PlantingSchedule
from app.tasks import seed_library as seed_module
from app.tasks.seed_library import LIBRARY, SEEDED_ZONES, shift_label, zone_windows


def test_shift_label_wraps_months():
    assert shift_label("Mar 25", 10) == "Apr 4"
    assert shift_label("Mar 1", -10) == "Feb 19"
    assert shift_label("Dec 28", 10) == "Jan 7"


def test_zone_windows_shift_by_zone():
    tomato = next(p for p in LIBRARY if p.name == "Tomato")
    assert zone_windows(tomato, "6")["sow_indoor_start"] == "Mar 1"
    assert zone_windows(tomato, "5")["sow_indoor_start"] == "Mar 11"
    assert zone_windows(tomato, "8")["sow_indoor_start"] == "Feb 9"
    assert zone_windows(tomato, "6")["sow_outdoor_start"] is None


async def test_seed_library_is_idempotent(db, session_factory, monkeypatch):
    monkeypatch.setattr(seed_module, "AsyncSessionLocal", session_factory)

    inserted = await seed_module.seed_library(ctx={})
    assert inserted == len(LIBRARY) * (1 + len(SEEDED_ZONES))

    again = await seed_module.seed_library(ctx={})
    assert again == 0

    assert await db.scalar(select(func.count(Plant.id))) == len(LIBRARY)
    assert await db.scalar(select(func.count(PlantingSchedule.id))) == len(LIBRARY) * len(SEEDED_ZONES)

    runs = (await db.execute(
        select(PipelineRun).where(PipelineRun.pipeline_name == "library_seed").order_by(PipelineRun.id)
    )).scalars().all()
    assert [r.status for r in runs] == ["success", "skipped"]
    assert [r.records_processed for r in runs] == [inserted, 0]


async def test_seed_library_keeps_existing_plants(db, session_factory, monkeypatch):
    monkeypatch.setattr(seed_module, "AsyncSessionLocal", session_factory)
    db.add(Plant(name="tomato", plant_type="vegetable", days_to_maturity=99))
    await db.commit()

    await seed_module.seed_library(ctx={})

    plants = (await db.execute(select(Plant).where(func.lower(Plant.name) == "tomato"))).scalars().all()
    assert len(plants) == 1
    assert plants[0].days_to_maturity == 99


async def test_seeded_schedules_all_parse(db, session_factory, monkeypatch):
    from app.tasks.audit_schedules import find_bad_labels

    monkeypatch.setattr(seed_module, "AsyncSessionLocal", session_factory)
    await seed_module.seed_library(ctx={})

    schedules = (await db.execute(select(PlantingSchedule))).scalars().all()
    assert find_bad_labels(schedules) == []
