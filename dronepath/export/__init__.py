"""Mini README: Export utilities for Dronepath mission plans.

Exposes the exporter that writes flight path records, GeoJSON previews and
delivery summaries. Future formats can be added alongside it.
"""

from .flight_path_exporter import FlightPathExporter

__all__ = ["FlightPathExporter"]
