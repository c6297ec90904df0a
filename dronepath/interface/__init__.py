"""Mini README: Interactive interfaces for Dronepath.

Exports the FastAPI application factory behind the planning service. The
command line entry point lives in ``main_mission_planner.py`` at the
repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
