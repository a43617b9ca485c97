from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.services.calendar_data import CalendarRepository


async def get_calendar_repository(db: AsyncSession = Depends(get_db)) -> CalendarRepository:
    return CalendarRepository(db)


Calendar = Annotated[CalendarRepository, Depends(get_calendar_repository)]
