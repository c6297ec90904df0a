"""Mini README: Centralised configuration models and helpers for Dronepath.

Structure:
    * DronepathSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables such as the
    aggregate planning budget, the result file directory and service ports.
    Drone physics (step length, proximity radius, base location) are fixed
    constants in ``dronepath.geometry`` and deliberately not configurable.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class DronepathSettings(BaseSettings):
    """Runtime configuration for the Dronepath mission planner."""

    output_directory: Path = Field(
        Path("resultfiles"),
        description="Directory where flight path, GeoJSON and delivery files are written.",
    )
    planning_budget_ms: int = Field(
        20_000,
        description=(
            "Aggregate wall-clock budget for route searches. Each restaurant"
            " receives an equal share of it."
        ),
        gt=0,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level used by the CLI and web entry points.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the planning service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the planning service exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "DRONEPATH_"
        env_file = ".env"
        case_sensitive = False

    @validator("output_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path


@lru_cache()
def get_settings() -> DronepathSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return DronepathSettings()
