from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Plant(Base):
    __tablename__ = "plants"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200), index=True)
    scientific_name: Mapped[Optional[str]] = mapped_column(String(200))
    plant_type: Mapped[str] = mapped_column(String(50), index=True)
    category: Mapped[Optional[str]] = mapped_column(String(50), index=True)

    # Growing
    days_to_maturity: Mapped[Optional[int]] = mapped_column(Integer)
    spacing_inches: Mapped[Optional[float]] = mapped_column(Float)
    sun_requirements: Mapped[Optional[str]] = mapped_column(String(100))
    water_requirements: Mapped[Optional[str]] = mapped_column(String(100))
    soil_ph_min: Mapped[Optional[float]] = mapped_column(Float)
    soil_ph_max: Mapped[Optional[float]] = mapped_column(Float)
    frost_tolerance: Mapped[Optional[str]] = mapped_column(String(50))
    description: Mapped[Optional[str]] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    schedules: Mapped[list["PlantingSchedule"]] = relationship(
        back_populates="plant", cascade="all, delete-orphan"
    )
    garden_plants: Mapped[list["GardenPlant"]] = relationship(back_populates="plant")
