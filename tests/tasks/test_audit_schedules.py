from types import SimpleNamespace

import pytest
from sqlalchemy import select

from app.models import PipelineRun, Plant, PlantingSchedule
from app.tasks import audit_schedules as audit_module
from app.tasks.audit_schedules import find_bad_labels


def _schedule(id, **labels):
    fields = dict.fromkeys(
        ["sow_indoor_start", "sow_indoor_end", "sow_outdoor_start", "sow_outdoor_end",
         "transplant_start", "transplant_end", "harvest_start", "harvest_end"]
    )
    fields.update(labels)
    return SimpleNamespace(id=id, plant_id=1, grow_zone="6", **fields)


def test_find_bad_labels():
    schedules = [
        _schedule(1, sow_indoor_start="Mar 1", sow_indoor_end="Mar 31"),
        _schedule(2, transplant_start="Smarch 5", transplant_end="Jun 1", harvest_end="Feb 30"),
    ]
    bad = find_bad_labels(schedules)
    assert [(b.schedule_id, b.field, b.label) for b in bad] == [
        (2, "transplant_start", "Smarch 5"),
        (2, "harvest_end", "Feb 30"),
    ]


def test_missing_labels_are_not_bad():
    assert find_bad_labels([_schedule(1)]) == []


@pytest.fixture
def sent_emails(monkeypatch):
    sent = []

    async def fake_send_email(subject, body):
        sent.append((subject, body))
        return True

    monkeypatch.setattr(audit_module, "send_email", fake_send_email)
    return sent


async def test_audit_records_run_and_emails(db, session_factory, monkeypatch, sent_emails):
    monkeypatch.setattr(audit_module, "AsyncSessionLocal", session_factory)

    plant = Plant(name="Tomato", plant_type="vegetable")
    db.add(plant)
    await db.flush()
    # Legacy rows written before label validation existed.
    db.add(PlantingSchedule(plant_id=plant.id, grow_zone="6", sow_indoor_start="Smarch 5", sow_indoor_end="Apr 1"))
    db.add(PlantingSchedule(plant_id=plant.id, grow_zone="7", transplant_start="May 1", transplant_end="Mayday"))
    db.add(PlantingSchedule(plant_id=plant.id, grow_zone="8", sow_outdoor_start="Apr 1", sow_outdoor_end="May 1"))
    await db.commit()

    count = await audit_module.audit_schedule_labels(ctx={})
    assert count == 2

    run = await db.scalar(select(PipelineRun).where(PipelineRun.pipeline_name == "schedule_label_audit"))
    assert run.status == "success"
    assert run.records_processed == 2

    assert len(sent_emails) == 1
    subject, body = sent_emails[0]
    assert "Schedule Label Audit" in subject
    assert "'Smarch 5'" in body
    assert "'Mayday'" in body


async def test_clean_audit_sends_nothing(db, session_factory, monkeypatch, sent_emails):
    monkeypatch.setattr(audit_module, "AsyncSessionLocal", session_factory)

    count = await audit_module.audit_schedule_labels(ctx={})
    assert count == 0
    assert sent_emails == []
