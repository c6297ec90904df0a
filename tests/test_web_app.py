"""Mini README: Tests for the FastAPI planning service.

Uses FastAPI's test client against a small open-sky mission.
"""

from __future__ import annotations

import asyncio
import time

import httpx
from fastapi.testclient import TestClient

from dronepath.interface import create_application
from dronepath.route_planning import MissionAssembler

OPEN_SKY = {
    "name": "central",
    "vertices": [
        {"lng": -3.20, "lat": 55.93},
        {"lng": -3.17, "lat": 55.93},
        {"lng": -3.17, "lat": 55.96},
        {"lng": -3.20, "lat": 55.96},
    ],
}
RESTAURANT = {
    "name": "Next Door",
    "location": {"lng": -3.186074, "lat": 55.944494},
    "menu": [{"name": "Margherita", "priceInPence": 1000}],
}


def test_health() -> None:
    client = TestClient(create_application())
    assert client.get("/health").json() == {"status": "ok"}


def test_plan_mission_returns_path_geojson_and_deliveries() -> None:
    client = TestClient(create_application())
    payload = {
        "centralArea": OPEN_SKY,
        "noFlyZones": [],
        "restaurants": [RESTAURANT],
        "orders": [
            {"orderNo": "A", "priceTotalInPence": 1100, "pizzasInOrder": [{"name": "Margherita"}]},
            {"orderNo": "X", "orderStatus": "INVALID", "pizzasInOrder": [{"name": "Margherita"}]},
        ],
    }

    response = client.post("/plan-mission", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["flightPath"]
    assert {record["orderNo"] for record in body["flightPath"]} == {"A"}
    assert body["flightPath"][-1]["angle"] == 999.0
    line = body["geojson"]["features"][0]["geometry"]
    assert len(line["coordinates"]) == len(body["flightPath"])
    assert [(d["orderNo"], d["orderStatus"]) for d in body["deliveries"]] == [
        ("A", "DELIVERED"),
        ("X", "INVALID"),
    ]


def test_plan_mission_rejects_degenerate_region() -> None:
    client = TestClient(create_application())
    payload = {
        "centralArea": {"name": "line", "vertices": [{"lng": 0, "lat": 0}, {"lng": 1, "lat": 1}]},
        "restaurants": [RESTAURANT],
        "orders": [],
    }

    response = client.post("/plan-mission", json=payload)

    assert response.status_code == 400
    assert "at least 3 vertices" in response.json()["detail"]


def test_plan_mission_rejects_unknown_pizza() -> None:
    client = TestClient(create_application())
    payload = {
        "centralArea": OPEN_SKY,
        "restaurants": [RESTAURANT],
        "orders": [{"orderNo": "A", "pizzasInOrder": [{"name": "Unknown"}]}],
    }

    response = client.post("/plan-mission", json=payload)

    assert response.status_code == 400


def test_health_answers_while_a_mission_is_planning(monkeypatch) -> None:
    planning_seconds = 1.0
    original = MissionAssembler.generate_full_path

    def slow_generate_full_path(self, orders):
        time.sleep(planning_seconds)
        return original(self, orders)

    monkeypatch.setattr(MissionAssembler, "generate_full_path", slow_generate_full_path)
    payload = {
        "centralArea": OPEN_SKY,
        "restaurants": [RESTAURANT],
        "orders": [{"orderNo": "A", "pizzasInOrder": [{"name": "Margherita"}]}],
    }

    async def scenario() -> float:
        transport = httpx.ASGITransport(app=create_application())
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            planning = asyncio.create_task(client.post("/plan-mission", json=payload))
            await asyncio.sleep(0.05)
            started = time.perf_counter()
            health = await client.get("/health")
            latency = time.perf_counter() - started
            assert health.json() == {"status": "ok"}
            assert not planning.done()
            assert (await planning).status_code == 200
            return latency

    assert asyncio.run(scenario()) < planning_seconds / 2
