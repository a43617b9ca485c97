from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

LABEL_FIELDS = (
    "sow_indoor_start", "sow_indoor_end",
    "sow_outdoor_start", "sow_outdoor_end",
    "transplant_start", "transplant_end",
    "harvest_start", "harvest_end",
)


class PlantingSchedule(Base):
    __tablename__ = "planting_schedules"
    __table_args__ = (UniqueConstraint("plant_id", "grow_zone", name="uq_planting_schedule_plant_zone"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    plant_id: Mapped[int] = mapped_column(ForeignKey("plants.id", ondelete="CASCADE"), index=True)
    grow_zone: Mapped[str] = mapped_column(String(10), index=True)

    # Window boundaries as "Month Day" labels, e.g. "Mar 15"
    sow_indoor_start: Mapped[Optional[str]] = mapped_column(String(20))
    sow_indoor_end: Mapped[Optional[str]] = mapped_column(String(20))
    sow_outdoor_start: Mapped[Optional[str]] = mapped_column(String(20))
    sow_outdoor_end: Mapped[Optional[str]] = mapped_column(String(20))
    transplant_start: Mapped[Optional[str]] = mapped_column(String(20))
    transplant_end: Mapped[Optional[str]] = mapped_column(String(20))
    harvest_start: Mapped[Optional[str]] = mapped_column(String(20))
    harvest_end: Mapped[Optional[str]] = mapped_column(String(20))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    plant: Mapped["Plant"] = relationship(back_populates="schedules")
