"""Mini README: Export planned missions to JSON and GeoJSON files.

Structure:
    * FlightPathExporter - converts a MissionPlan into per-node records, a
      GeoJSON line and a per-order delivery summary, and writes them to disk.

Node order is preserved in every output because both the record list and
the GeoJSON line are read as polylines. Hover nodes carry the wire angle
999 that downstream viewers expect.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from ..deliveries import Order
from ..logging_utils import get_logger
from ..route_planning import FlightPathNode, MissionPlan

LOGGER = get_logger(__name__)


class FlightPathExporter:
    """Serialise mission plans for downstream tools."""

    def flight_path_records(self, nodes: Sequence[FlightPathNode]) -> List[Dict[str, object]]:
        """One JSON record per node, in flying order."""

        return [
            {
                "orderNo": node.order_no,
                "fromLongitude": node.from_coordinate.lng,
                "fromLatitude": node.from_coordinate.lat,
                "angle": node.move.wire_angle,
                "toLongitude": node.to_coordinate.lng,
                "toLatitude": node.to_coordinate.lat,
                "ticksSinceStartOfCalculation": node.tick,
            }
            for node in nodes
        ]

    def flight_path_geojson(self, nodes: Sequence[FlightPathNode]) -> Dict[str, object]:
        """A FeatureCollection holding the path as a single LineString."""

        return {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "LineString",
                        "coordinates": [node.from_coordinate.as_pair() for node in nodes],
                    },
                    "properties": {"name": "Flight Path"},
                }
            ],
        }

    def delivery_records(
        self, plan: MissionPlan, rejected_orders: Iterable[Order] = ()
    ) -> List[Dict[str, object]]:
        """Delivery status for every planned order followed by the rejected ones."""

        records = [
            _delivery_record(record.order, record.outcome.order_status.value)
            for record in plan.deliveries
        ]
        records.extend(_delivery_record(order, order.status.value) for order in rejected_orders)
        return records

    def export(
        self,
        plan: MissionPlan,
        *,
        label: str,
        output_directory: Path,
        rejected_orders: Iterable[Order] = (),
    ) -> List[Path]:
        """Write the three result files and return their paths."""

        output_directory.mkdir(parents=True, exist_ok=True)
        documents = {
            f"flightpath-{label}.json": self.flight_path_records(plan.flight_path),
            f"drone-{label}.geojson": self.flight_path_geojson(plan.flight_path),
            f"deliveries-{label}.json": self.delivery_records(plan, rejected_orders),
        }
        written: List[Path] = []
        for filename, document in documents.items():
            destination = output_directory / filename
            destination.write_text(json.dumps(document, indent=2), encoding="utf-8")
            LOGGER.info("Wrote %s", destination)
            written.append(destination)
        return written


def _delivery_record(order: Order, status: str) -> Dict[str, object]:
    return {
        "orderNo": order.order_no,
        "orderStatus": status,
        "orderValidationCode": order.validation_code,
        "costInPence": order.price_total_in_pence,
    }
