from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    DATABASE_URL: str

    # Redis (ARQ worker)
    REDIS_URL: str = "redis://redis:6379/0"

    # Email (operator notifications)
    EMAIL_FROM: str = "noreply@garden-tracker.local"
    EMAIL_HOST: str = ""
    EMAIL_PORT: int = 587
    EMAIL_USERNAME: str = ""
    EMAIL_PASSWORD: str = ""
    EMAIL_TO: str = ""

    # Calendar
    CALENDAR_UPCOMING_DAYS: int = 30
    CALENDAR_UPCOMING_LIMIT: int = 10

    # App
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: str = "http://localhost:5173,http://localhost:5174"
    REQUEST_LOGGING_ENABLED: bool = True

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]


settings = Settings()
