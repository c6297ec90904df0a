"""Mini README: Entry point CLI for the Dronepath mission planner.

This script exposes a Typer CLI with two commands: ``plan`` reads a mission
directory, plans every validated order and writes the result files, while
``serve`` starts the FastAPI planning service through uvicorn. Settings are
drawn from ``DRONEPATH_`` environment variables when options are omitted.
"""

from __future__ import annotations

from pathlib import Path

import typer
import uvicorn

from dronepath.configuration import get_settings
from dronepath.export import FlightPathExporter
from dronepath.ingestion import MissionDataError, load_mission_directory
from dronepath.logging_utils import configure_root_logger
from dronepath.route_planning import MissionAssembler, RestaurantResolutionError

cli = typer.Typer(help="Plan delivery drone missions and serve the planning API.")


@cli.command()
def plan(
    input_directory: Path = typer.Argument(
        ..., exists=True, file_okay=False, help="Directory holding the mission JSON files."
    ),
    label: str = typer.Option("mission", help="Suffix used in the result file names."),
    output_directory: Path = typer.Option(None, help="Directory for the result files."),
) -> None:
    """Plan every validated order in INPUT_DIRECTORY and write the result files."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    try:
        mission = load_mission_directory(input_directory)
        assembler = MissionAssembler(
            mission.central_area,
            mission.no_fly_zones,
            mission.restaurants,
            planning_budget_ms=settings.planning_budget_ms,
        )
    except (MissionDataError, ValueError) as error:
        typer.echo(f"Could not load mission: {error}", err=True)
        raise typer.Exit(code=1) from error

    routable = mission.routable_orders
    typer.echo(f"Fetched {len(mission.orders)} orders. {len(routable)} are valid.")
    try:
        mission_plan = assembler.generate_full_path(routable)
    except RestaurantResolutionError as error:
        typer.echo(f"Could not plan mission: {error}", err=True)
        raise typer.Exit(code=1) from error
    rejected = [order for order in mission.orders if not order.is_valid]
    written = FlightPathExporter().export(
        mission_plan,
        label=label,
        output_directory=output_directory or settings.output_directory,
        rejected_orders=rejected,
    )
    typer.echo(
        f"Delivered {len(mission_plan.delivered)} of {len(routable)} orders "
        f"using {len(mission_plan.flight_path)} moves."
    )
    for path in written:
        typer.echo(f"Wrote {path}")


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI planning service using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 wildcard; point them at localhost instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting Dronepath on "
        f"{effective_host}:{effective_port}.\n"
        "API docs at "
        f"http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "dronepath.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
