from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.deps import get_db
from app.models.garden import Garden, GardenPlant
from app.models.plant import Plant
from app.schemas.garden import GardenCreate, GardenSummary, GardenUpdate
from app.schemas.garden_plant import GardenPlantCreate, GardenPlantRead, GardenPlantUpdate

router = APIRouter(prefix="/gardens", tags=["gardens"])
garden_plants_router = APIRouter(prefix="/garden-plants", tags=["garden-plants"])


# ── Gardens ──────────────────────────────────────────────────────────────────


@router.get("", response_model=list[GardenSummary])
async def list_gardens(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Garden).order_by(Garden.created_at.desc(), Garden.id.desc()))
    gardens = result.scalars().all()
    counts = await _plant_counts(db, [g.id for g in gardens])
    return [_summary(g, counts.get(g.id, 0)) for g in gardens]


@router.post("", response_model=GardenSummary, status_code=status.HTTP_201_CREATED)
async def create_garden(data: GardenCreate, db: AsyncSession = Depends(get_db)):
    garden = Garden(**data.model_dump())
    db.add(garden)
    await db.commit()
    await db.refresh(garden)
    return _summary(garden, 0)


@router.get("/{garden_id}", response_model=GardenSummary)
async def get_garden(garden_id: int, db: AsyncSession = Depends(get_db)):
    garden = await _get_garden(db, garden_id)
    counts = await _plant_counts(db, [garden.id])
    return _summary(garden, counts.get(garden.id, 0))


@router.patch("/{garden_id}", response_model=GardenSummary)
async def update_garden(garden_id: int, data: GardenUpdate, db: AsyncSession = Depends(get_db)):
    garden = await _get_garden(db, garden_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(garden, field, value)
    await db.commit()
    await db.refresh(garden)
    counts = await _plant_counts(db, [garden.id])
    return _summary(garden, counts.get(garden.id, 0))


@router.delete("/{garden_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_garden(garden_id: int, db: AsyncSession = Depends(get_db)):
    garden = await _get_garden(db, garden_id)
    await db.delete(garden)
    await db.commit()


# ── Garden plants ────────────────────────────────────────────────────────────


@router.get("/{garden_id}/plants", response_model=list[GardenPlantRead])
async def list_garden_plants(garden_id: int, db: AsyncSession = Depends(get_db)):
    await _get_garden(db, garden_id)
    result = await db.execute(
        select(GardenPlant)
        .where(GardenPlant.garden_id == garden_id)
        .options(selectinload(GardenPlant.plant))
        .order_by(GardenPlant.planted_date, GardenPlant.id)
    )
    return result.scalars().all()


@router.post("/{garden_id}/plants", response_model=GardenPlantRead, status_code=status.HTTP_201_CREATED)
async def add_garden_plant(garden_id: int, data: GardenPlantCreate, db: AsyncSession = Depends(get_db)):
    await _get_garden(db, garden_id)
    plant_exists = await db.scalar(select(Plant.id).where(Plant.id == data.plant_id))
    if not plant_exists:
        raise HTTPException(status_code=404, detail="Plant not found")

    garden_plant = GardenPlant(**data.model_dump(), garden_id=garden_id)
    if garden_plant.planted_date is None:
        garden_plant.planted_date = date.today()
    db.add(garden_plant)
    await db.commit()
    return await _load_garden_plant(db, garden_plant.id)


@garden_plants_router.get("/{garden_plant_id}", response_model=GardenPlantRead)
async def get_garden_plant(garden_plant_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_garden_plant(db, garden_plant_id)


@garden_plants_router.patch("/{garden_plant_id}", response_model=GardenPlantRead)
async def update_garden_plant(
    garden_plant_id: int, data: GardenPlantUpdate, db: AsyncSession = Depends(get_db)
):
    garden_plant = await _get_garden_plant(db, garden_plant_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        if field == "planted_date" and value is None:
            continue
        setattr(garden_plant, field, value)
    await db.commit()
    return await _load_garden_plant(db, garden_plant.id)


@garden_plants_router.delete("/{garden_plant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_garden_plant(garden_plant_id: int, db: AsyncSession = Depends(get_db)):
    garden_plant = await _get_garden_plant(db, garden_plant_id)
    await db.delete(garden_plant)
    await db.commit()


# ── Helpers ───────────────────────────────────────────────────────────────────


async def _get_garden(db: AsyncSession, garden_id: int) -> Garden:
    result = await db.execute(select(Garden).where(Garden.id == garden_id))
    garden = result.scalar_one_or_none()
    if not garden:
        raise HTTPException(status_code=404, detail="Garden not found")
    return garden


async def _get_garden_plant(db: AsyncSession, garden_plant_id: int) -> GardenPlant:
    result = await db.execute(
        select(GardenPlant)
        .where(GardenPlant.id == garden_plant_id)
        .options(selectinload(GardenPlant.plant))
    )
    garden_plant = result.scalar_one_or_none()
    if not garden_plant:
        raise HTTPException(status_code=404, detail="Garden plant not found")
    return garden_plant


async def _load_garden_plant(db: AsyncSession, garden_plant_id: int) -> GardenPlant:
    result = await db.execute(
        select(GardenPlant)
        .where(GardenPlant.id == garden_plant_id)
        .options(selectinload(GardenPlant.plant))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one()


async def _plant_counts(db: AsyncSession, garden_ids: list[int]) -> dict[int, int]:
    if not garden_ids:
        return {}
    result = await db.execute(
        select(GardenPlant.garden_id, func.count(GardenPlant.id))
        .where(GardenPlant.garden_id.in_(garden_ids))
        .group_by(GardenPlant.garden_id)
    )
    return {garden_id: count for garden_id, count in result.all()}


def _summary(garden: Garden, plant_count: int) -> GardenSummary:
    summary = GardenSummary.model_validate(garden)
    summary.plant_count = plant_count
    return summary
