from datetime import date, timedelta

from httpx import AsyncClient


async def _garden_with_plants(client: AsyncClient) -> dict:
    garden = (await client.post(
        "/api/v1/gardens", json={"name": "Back Plot", "location": "Backyard", "grow_zone": "6"}
    )).json()
    plant = (await client.post(
        "/api/v1/plants", json={"name": "Tomato", "plant_type": "vegetable", "days_to_maturity": 75}
    )).json()
    await client.post(f"/api/v1/gardens/{garden['id']}/plants", json={
        "plant_id": plant["id"], "planted_date": (date.today() + timedelta(days=1)).isoformat(),
    })
    await client.post(f"/api/v1/gardens/{garden['id']}/plants", json={
        "plant_id": plant["id"], "status": "removed", "planted_date": "2023-05-01",
    })
    return garden


async def test_export_payload(client: AsyncClient):
    garden = await _garden_with_plants(client)
    res = await client.get("/api/v1/export")
    assert res.status_code == 200

    disposition = res.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="garden-tracker-data-')
    assert disposition.endswith('.json"')

    data = res.json()
    assert set(data) == {"gardens", "garden_plants", "export_date"}
    assert [g["id"] for g in data["gardens"]] == [garden["id"]]
    assert len(data["garden_plants"]) == 2
    assert {gp["status"] for gp in data["garden_plants"]} == {"planned", "removed"}


async def test_export_empty(client: AsyncClient):
    res = await client.get("/api/v1/export")
    assert res.json()["gardens"] == []
    assert res.json()["garden_plants"] == []


async def test_stats_counts(client: AsyncClient):
    await _garden_with_plants(client)
    res = await client.get("/api/v1/stats")
    assert res.status_code == 200
    assert res.json() == {
        "gardens": 1,
        "garden_plants": 2,
        "active_garden_plants": 1,
        "library_plants": 1,
        "upcoming_events": 1,
    }


async def test_zones_and_health(client: AsyncClient):
    res = await client.get("/api/v1/zones")
    assert res.status_code == 200
    zones = res.json()
    assert zones[0] == {"code": "3", "label": "Zone 3 (-40°F to -30°F)", "temperature_range": "-40°F to -30°F"}
    assert len(zones) == 9

    res = await client.get("/api/health")
    assert res.json() == {"status": "ok"}
