from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_db
from app.models.plant import Plant
from app.models.schedule import PlantingSchedule
from app.schemas.schedule import ScheduleCreate, ScheduleRead, ScheduleUpdate

router = APIRouter(prefix="/schedules", tags=["schedules"])


# ── Helpers ────────────────────────────────────────────────────────────────────


async def _get_schedule(db: AsyncSession, schedule_id: int) -> PlantingSchedule:
    schedule = await db.scalar(select(PlantingSchedule).where(PlantingSchedule.id == schedule_id))
    if not schedule:
        raise HTTPException(status_code=404, detail="Schedule not found")
    return schedule


# ── Schedule endpoints ─────────────────────────────────────────────────────────


@router.get("", response_model=list[ScheduleRead])
async def list_schedules(
    db: AsyncSession = Depends(get_db),
    grow_zone: Optional[str] = Query(None, description="Only schedules for this grow zone"),
    plant_id: Optional[int] = Query(None),
):
    q = select(PlantingSchedule)
    if grow_zone:
        q = q.where(PlantingSchedule.grow_zone == grow_zone)
    if plant_id:
        q = q.where(PlantingSchedule.plant_id == plant_id)

    result = await db.execute(q.order_by(PlantingSchedule.plant_id, PlantingSchedule.grow_zone))
    return result.scalars().all()


@router.post("", response_model=ScheduleRead, status_code=status.HTTP_201_CREATED)
async def create_schedule(data: ScheduleCreate, db: AsyncSession = Depends(get_db)):
    plant_exists = await db.scalar(select(Plant.id).where(Plant.id == data.plant_id))
    if not plant_exists:
        raise HTTPException(status_code=404, detail="Plant not found")

    existing = await db.scalar(
        select(PlantingSchedule.id).where(
            PlantingSchedule.plant_id == data.plant_id,
            PlantingSchedule.grow_zone == data.grow_zone,
        )
    )
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Plant {data.plant_id} already has a schedule for zone {data.grow_zone}",
        )

    schedule = PlantingSchedule(**data.model_dump())
    db.add(schedule)
    await db.commit()
    await db.refresh(schedule)
    return schedule


@router.get("/{schedule_id}", response_model=ScheduleRead)
async def get_schedule(schedule_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_schedule(db, schedule_id)


@router.patch("/{schedule_id}", response_model=ScheduleRead)
async def update_schedule(schedule_id: int, data: ScheduleUpdate, db: AsyncSession = Depends(get_db)):
    schedule = await _get_schedule(db, schedule_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(schedule, field, value)
    await db.commit()
    await db.refresh(schedule)
    return schedule


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule(schedule_id: int, db: AsyncSession = Depends(get_db)):
    schedule = await _get_schedule(db, schedule_id)
    await db.delete(schedule)
    await db.commit()
