from fastapi import APIRouter

from app.api.v1.endpoints import calendar, export, gardens, plants, schedules, zones

api_router = APIRouter()

api_router.include_router(calendar.router)
api_router.include_router(calendar.stats_router)
api_router.include_router(gardens.router)
api_router.include_router(gardens.garden_plants_router)
api_router.include_router(plants.router)
api_router.include_router(schedules.router)
api_router.include_router(zones.router)
api_router.include_router(export.router)
