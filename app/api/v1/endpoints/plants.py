from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_db
from app.models.plant import Plant
from app.models.schedule import PlantingSchedule
from app.schemas.plant import PlantCreate, PlantListResponse, PlantRead, PlantSummary
from app.schemas.schedule import PlantScheduleRead

router = APIRouter(prefix="/plants", tags=["plants"])


@router.get("", response_model=PlantListResponse)
async def list_plants(
    db: AsyncSession = Depends(get_db),
    search: Optional[str] = Query(None, description="Partial match on name, type, category or scientific name"),
    plant_type: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
):
    query = select(Plant)

    if search:
        pattern = f"%{search.lower()}%"
        query = query.where(
            or_(
                func.lower(Plant.name).like(pattern),
                func.lower(Plant.plant_type).like(pattern),
                func.lower(Plant.category).like(pattern),
                func.lower(Plant.scientific_name).like(pattern),
            )
        )
    if plant_type:
        query = query.where(Plant.plant_type == plant_type)
    if category:
        query = query.where(Plant.category == category)

    count_result = await db.scalar(select(func.count()).select_from(query.subquery()))
    total = count_result or 0

    offset = (page - 1) * per_page
    result = await db.execute(query.order_by(Plant.name, Plant.id).offset(offset).limit(per_page))
    items = [PlantSummary.model_validate(p) for p in result.scalars().all()]

    return PlantListResponse(items=items, total=total, page=page, per_page=per_page)


@router.get("/types", response_model=list[str])
async def list_plant_types(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Plant.plant_type).distinct().order_by(Plant.plant_type))
    return [t for t in result.scalars().all() if t]


@router.get("/categories", response_model=list[str])
async def list_categories(db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Plant.category).where(Plant.category.isnot(None)).distinct().order_by(Plant.category)
    )
    return [c for c in result.scalars().all() if c]


@router.post("", response_model=PlantRead, status_code=status.HTTP_201_CREATED)
async def create_plant(data: PlantCreate, db: AsyncSession = Depends(get_db)):
    plant = Plant(**data.model_dump())
    db.add(plant)
    await db.commit()
    await db.refresh(plant)
    return plant


@router.get("/{plant_id}", response_model=PlantRead)
async def get_plant(plant_id: int, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Plant).where(Plant.id == plant_id))
    plant = result.scalar_one_or_none()
    if not plant:
        raise HTTPException(status_code=404, detail="Plant not found")
    return plant


@router.get("/{plant_id}/schedules", response_model=list[PlantScheduleRead])
async def list_plant_schedules(
    plant_id: int,
    db: AsyncSession = Depends(get_db),
    grow_zone: Optional[str] = Query(None),
):
    plant_exists = await db.scalar(select(Plant.id).where(Plant.id == plant_id))
    if not plant_exists:
        raise HTTPException(status_code=404, detail="Plant not found")

    query = select(PlantingSchedule).where(PlantingSchedule.plant_id == plant_id)
    if grow_zone:
        query = query.where(PlantingSchedule.grow_zone == grow_zone)
    result = await db.execute(query.order_by(PlantingSchedule.id))
    return [PlantScheduleRead.model_validate(s) for s in result.scalars().all()]
