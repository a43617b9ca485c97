"""
ARQ task: report planting schedule labels the calendar cannot read.

The calendar silently drops a window whose "Month Day" label does not parse.
New writes are validated at the API, but rows loaded before validation (or
written straight to the database) can still carry bad labels. This job scans
every schedule, logs each bad label, records a PipelineRun with the count and
emails the operator a summary when anything is found.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable

from sqlalchemy import select

from app.db.session import AsyncSessionLocal
from app.models.logs import PipelineRun
from app.models.schedule import LABEL_FIELDS, PlantingSchedule
from app.services.email import send_email
from app.services.month_labels import is_valid_month_label

logger = logging.getLogger(__name__)


@dataclass
class BadLabel:
    schedule_id: int
    plant_id: int
    grow_zone: str
    field: str
    label: str


def find_bad_labels(schedules: Iterable[Any]) -> list[BadLabel]:
    """Every present-but-unparseable label across the given schedules."""
    bad = []
    for schedule in schedules:
        for field in LABEL_FIELDS:
            label = getattr(schedule, field, None)
            if not label:
                continue
            if not is_valid_month_label(label):
                bad.append(BadLabel(schedule.id, schedule.plant_id, schedule.grow_zone, field, label))
    return bad


def _summary(bad: list[BadLabel]) -> str:
    lines = [f"{len(bad)} planting schedule label(s) could not be parsed:", ""]
    for b in bad:
        lines.append(
            f"  schedule {b.schedule_id} (plant {b.plant_id}, zone {b.grow_zone}): "
            f"{b.field} = {b.label!r}"
        )
    lines += ["", "These windows are left off the planting calendar until corrected."]
    return "\n".join(lines)


async def audit_schedule_labels(ctx: dict) -> int:
    """Scan stored schedules for unparseable labels. Runs daily at 03:00."""
    logger.info("audit_schedule_labels: starting")
    started_at = datetime.now(timezone.utc)

    async with AsyncSessionLocal() as db:
        pipeline = PipelineRun(
            pipeline_name="schedule_label_audit",
            status="running",
            started_at=started_at,
        )
        db.add(pipeline)
        await db.commit()
        await db.refresh(pipeline)

        try:
            result = await db.execute(select(PlantingSchedule).order_by(PlantingSchedule.id))
            bad = find_bad_labels(result.scalars().all())

            for b in bad:
                logger.warning(
                    "audit_schedule_labels: schedule %d %s has unparseable label %r",
                    b.schedule_id, b.field, b.label,
                )

            finished_at = datetime.now(timezone.utc)
            pipeline.status = "success"
            pipeline.finished_at = finished_at
            pipeline.duration_ms = int((finished_at - started_at).total_seconds() * 1000)
            pipeline.records_processed = len(bad)
            await db.commit()

        except Exception as exc:
            logger.exception("audit_schedule_labels: unexpected error")
            finished_at = datetime.now(timezone.utc)
            pipeline.status = "failed"
            pipeline.finished_at = finished_at
            pipeline.duration_ms = int((finished_at - started_at).total_seconds() * 1000)
            pipeline.error_message = str(exc)
            await db.commit()
            raise

    if bad:
        await send_email("Garden Tracker: Schedule Label Audit", _summary(bad))

    logger.info("audit_schedule_labels: complete, %d bad labels", len(bad))
    return len(bad)
