from datetime import date, timedelta

from httpx import AsyncClient

from app.core.deps import get_calendar_repository
from app.main import app
from app.models import Garden, Plant, PlantingSchedule
from app.services.calendar_data import CalendarSnapshot


async def _setup(client: AsyncClient, zone: str = "6") -> dict:
    garden = (await client.post(
        "/api/v1/gardens", json={"name": "Back Plot", "location": "Backyard", "grow_zone": zone}
    )).json()
    plant = (await client.post(
        "/api/v1/plants", json={"name": "Pepper", "plant_type": "vegetable", "days_to_maturity": 60}
    )).json()
    await client.post("/api/v1/schedules", json={
        "plant_id": plant["id"], "grow_zone": "6",
        "sow_indoor_start": "Mar 15", "sow_indoor_end": "Apr 1",
        "harvest_start": "Jul 1", "harvest_end": "Sep 1",
    })
    return {"garden": garden, "plant": plant}


async def test_events_from_zone_schedule(client: AsyncClient):
    ids = await _setup(client)
    res = await client.get("/api/v1/calendar/events", params={"year": 2025})
    assert res.status_code == 200
    events = res.json()
    assert [(e["type"], e["date"]) for e in events] == [
        ("sow-indoor", "2025-03-15"),
        ("sow-indoor", "2025-04-01"),
    ]
    first = events[0]
    assert first["title"] == "Start Seeds Indoor Pepper (Start)"
    assert first["garden_name"] == "Back Plot"
    assert first["garden_id"] == ids["garden"]["id"]
    assert first["plant_name"] == "Pepper"


async def test_events_include_planting_and_projected_harvest(client: AsyncClient):
    ids = await _setup(client)
    gp = (await client.post(
        f"/api/v1/gardens/{ids['garden']['id']}/plants",
        json={"plant_id": ids["plant"]["id"], "planted_date": "2024-03-01"},
    )).json()

    res = await client.get("/api/v1/calendar/events", params={"year": 2024})
    by_id = {e["id"]: e for e in res.json()}
    assert by_id[f"planted-{gp['id']}"]["date"] == "2024-03-01"
    assert by_id[f"harvest-{gp['id']}"]["date"] == "2024-04-30"


async def test_events_for_other_zone_garden_are_empty(client: AsyncClient):
    await _setup(client, zone="8")
    res = await client.get("/api/v1/calendar/events", params={"year": 2025})
    assert res.json() == []


async def test_events_month_filter(client: AsyncClient):
    await _setup(client)
    res = await client.get("/api/v1/calendar/events", params={"year": 2025, "month": 4})
    assert [e["date"] for e in res.json()] == ["2025-04-01"]


async def test_events_garden_filter(client: AsyncClient):
    ids = await _setup(client)
    other = (await client.post(
        "/api/v1/gardens", json={"name": "Side Plot", "location": "Side yard", "grow_zone": "6"}
    )).json()

    res = await client.get("/api/v1/calendar/events", params={"year": 2025})
    assert len(res.json()) == 4

    res = await client.get(
        "/api/v1/calendar/events", params={"year": 2025, "garden_id": other["id"]}
    )
    events = res.json()
    assert len(events) == 2
    assert {e["garden_id"] for e in events} == {other["id"]}
    assert ids["garden"]["id"] != other["id"]


async def test_unknown_garden_404(client: AsyncClient):
    for path in ("/api/v1/calendar/events", "/api/v1/calendar/upcoming", "/api/v1/calendar/day/2025-03-15"):
        res = await client.get(path, params={"garden_id": 999})
        assert res.status_code == 404, path


async def test_day_events(client: AsyncClient):
    await _setup(client)
    res = await client.get("/api/v1/calendar/day/2025-03-15")
    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == [res.json()[0]["id"]]
    assert res.json()[0]["id"].endswith("-start")

    res = await client.get("/api/v1/calendar/day/2025-03-16")
    assert res.json() == []


async def test_upcoming_events(client: AsyncClient):
    ids = await _setup(client)
    today = date.today()
    await client.post(
        f"/api/v1/gardens/{ids['garden']['id']}/plants",
        json={"plant_id": ids["plant"]["id"], "planted_date": (today + timedelta(days=2)).isoformat()},
    )
    await client.post(
        f"/api/v1/gardens/{ids['garden']['id']}/plants",
        json={"plant_id": ids["plant"]["id"], "planted_date": (today - timedelta(days=5)).isoformat()},
    )

    res = await client.get("/api/v1/calendar/upcoming", params={"days": 10})
    assert res.status_code == 200
    events = res.json()
    planted = [e for e in events if e["type"] == "planted"]
    assert [e["date"] for e in planted] == [(today + timedelta(days=2)).isoformat()]
    assert all(today.isoformat() <= e["date"] <= (today + timedelta(days=10)).isoformat() for e in events)

    res = await client.get("/api/v1/calendar/upcoming", params={"days": 10, "limit": 1})
    assert len(res.json()) == 1


async def test_repository_can_be_overridden(client: AsyncClient):
    class StaticRepository:
        async def load_snapshot(self):
            return CalendarSnapshot(
                gardens=(Garden(id=7, name="Fixture", location="Nowhere", grow_zone="5"),),
                plants=(Plant(id=1, name="Kale", plant_type="vegetable"),),
                schedules=(PlantingSchedule(
                    id=3, plant_id=1, grow_zone="5",
                    transplant_start="Apr 10", transplant_end="Apr 20",
                ),),
            )

    app.dependency_overrides[get_calendar_repository] = lambda: StaticRepository()
    res = await client.get("/api/v1/calendar/events", params={"year": 2025, "garden_id": 7})
    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == ["transplant-3-start", "transplant-3-end"]
