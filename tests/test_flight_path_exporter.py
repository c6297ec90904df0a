"""Mini README: Tests for flight path and delivery exports.

Builds small mission plans by hand so the expected records are obvious.
"""

from __future__ import annotations

import json
from pathlib import Path

from dronepath.deliveries import DeliveryOutcome, Order, OrderStatus, Pizza
from dronepath.export import FlightPathExporter
from dronepath.geometry import Coordinate, Travel
from dronepath.route_planning import DeliveryRecord, FlightPathNode, MissionPlan


def _plan() -> MissionPlan:
    delivered = Order("A", (Pizza("Margherita"),), price_total_in_pence=1100)
    stranded = Order("B", (Pizza("Calzone"),), price_total_in_pence=1500)
    path = [
        FlightPathNode("A", Coordinate(0.0, 0.0), Travel(90.0), Coordinate(0.0, 1.0)),
        FlightPathNode.hover("A", Coordinate(0.0, 1.0)),
    ]
    return MissionPlan(
        deliveries=[
            DeliveryRecord(delivered, DeliveryOutcome.DELIVERED, path),
            DeliveryRecord(stranded, DeliveryOutcome.VALID_BUT_NOT_DELIVERED),
        ],
        flight_path=path,
    )


def test_flight_path_records_keep_order_and_hover_angle() -> None:
    records = FlightPathExporter().flight_path_records(_plan().flight_path)

    assert [record["angle"] for record in records] == [90.0, 999.0]
    assert records[0]["orderNo"] == "A"
    assert records[0]["toLatitude"] == 1.0
    assert records[1]["fromLatitude"] == records[1]["toLatitude"]
    assert isinstance(records[0]["ticksSinceStartOfCalculation"], int)


def test_geojson_line_uses_from_coordinates() -> None:
    geojson = FlightPathExporter().flight_path_geojson(_plan().flight_path)

    feature = geojson["features"][0]
    assert geojson["type"] == "FeatureCollection"
    assert feature["geometry"]["type"] == "LineString"
    assert feature["geometry"]["coordinates"] == [[0.0, 0.0], [0.0, 1.0]]
    assert feature["properties"] == {"name": "Flight Path"}


def test_delivery_records_include_rejected_orders() -> None:
    rejected = Order(
        "C",
        (Pizza("Margherita"),),
        status=OrderStatus.INVALID,
        validation_code="CVV_INVALID",
        price_total_in_pence=1100,
    )

    records = FlightPathExporter().delivery_records(_plan(), [rejected])

    assert records == [
        {"orderNo": "A", "orderStatus": "DELIVERED", "orderValidationCode": "NO_ERROR", "costInPence": 1100},
        {"orderNo": "B", "orderStatus": "VALID_BUT_NOT_DELIVERED", "orderValidationCode": "NO_ERROR", "costInPence": 1500},
        {"orderNo": "C", "orderStatus": "INVALID", "orderValidationCode": "CVV_INVALID", "costInPence": 1100},
    ]


def test_export_writes_three_files(tmp_path: Path) -> None:
    written = FlightPathExporter().export(_plan(), label="2023-09-01", output_directory=tmp_path / "results")

    assert [path.name for path in written] == [
        "flightpath-2023-09-01.json",
        "drone-2023-09-01.geojson",
        "deliveries-2023-09-01.json",
    ]
    flight_path = json.loads(written[0].read_text())
    assert len(flight_path) == 2
    deliveries = json.loads(written[2].read_text())
    assert deliveries[0]["orderStatus"] == "DELIVERED"
