from app.models.garden import Garden, GardenPlant
from app.models.plant import Plant
from app.models.schedule import PlantingSchedule
from app.models.logs import PipelineRun, ApiRequestLog

__all__ = [
    "Garden",
    "GardenPlant",
    "Plant",
    "PlantingSchedule",
    "PipelineRun",
    "ApiRequestLog",
]
