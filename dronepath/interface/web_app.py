"""Mini README: FastAPI-powered planning service for Dronepath.

Structure:
    * create_application - application factory wiring the planning routes.

The service accepts a complete mission (regions, restaurants and validated
orders) in one request and returns the planned flight path, a GeoJSON
preview and per-order delivery results. Every request gets its own
``MissionAssembler`` so route caches never leak between missions.
"""

from __future__ import annotations

from typing import Dict

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..export import FlightPathExporter
from ..ingestion import MissionPayload, mission_from_payload
from ..logging_utils import get_logger
from ..route_planning import MissionAssembler

LOGGER = get_logger(__name__)


def create_application() -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="Dronepath Mission Planner", version="0.1.0")
    exporter = FlightPathExporter()
    settings = get_settings()

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/plan-mission")
    def plan_mission(payload: MissionPayload) -> JSONResponse:
        """Plan every routable order in the payload.

        Route search is CPU-bound, so the handler is synchronous and FastAPI
        runs it in its threadpool, leaving the event loop free for other requests.
        """

        try:
            mission = mission_from_payload(payload)
            assembler = MissionAssembler(
                mission.central_area,
                mission.no_fly_zones,
                mission.restaurants,
                planning_budget_ms=settings.planning_budget_ms,
            )
            plan = assembler.generate_full_path(mission.routable_orders)
        except (ValueError, LookupError) as error:
            raise HTTPException(status_code=400, detail=str(error)) from error

        rejected = [order for order in mission.orders if not order.is_valid]
        LOGGER.info(
            "Planned mission with %s nodes for %s orders",
            len(plan.flight_path),
            len(plan.deliveries),
        )
        return JSONResponse(
            {
                "flightPath": exporter.flight_path_records(plan.flight_path),
                "geojson": exporter.flight_path_geojson(plan.flight_path),
                "deliveries": exporter.delivery_records(plan, rejected),
            }
        )

    return app
