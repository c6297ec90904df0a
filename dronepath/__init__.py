"""Mini README: Core package initializer for the Dronepath mission planner.

Dronepath plans delivery drone flights over a city: each validated order is
turned into a base -> restaurant -> base round trip that avoids no-fly
zones and never leaves the central area once inside it. Subpackages:
``geometry`` (coordinates and polygons), ``route_planning`` (geofence,
A* search, mission assembly), ``deliveries`` (domain records),
``ingestion`` (input loading), ``export`` (result files) and ``interface``
(HTTP service).
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
