"""Mini README: Tests for the ``plan`` command of the Typer CLI.

Mission directories are written to ``tmp_path`` and the command is invoked
through Typer's ``CliRunner``.
"""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from main_mission_planner import cli

CENTRAL_AREA = {
    "name": "central",
    "vertices": [
        {"lng": -3.20, "lat": 55.93},
        {"lng": -3.17, "lat": 55.93},
        {"lng": -3.17, "lat": 55.96},
        {"lng": -3.20, "lat": 55.96},
    ],
}
RESTAURANTS = [
    {
        "name": "Next Door",
        "location": {"lng": -3.186074, "lat": 55.944494},
        "menu": [{"name": "Margherita", "priceInPence": 1000}],
    }
]


def _write_mission(directory: Path, pizza: str) -> Path:
    documents = {
        "centralArea.json": CENTRAL_AREA,
        "noFlyZones.json": [],
        "restaurants.json": RESTAURANTS,
        "orders.json": [{"orderNo": "A", "pizzasInOrder": [{"name": pizza}]}],
    }
    for filename, document in documents.items():
        (directory / filename).write_text(json.dumps(document))
    return directory


def test_plan_writes_result_files(tmp_path: Path) -> None:
    (tmp_path / "mission").mkdir()
    mission = _write_mission(tmp_path / "mission", "Margherita")
    output = tmp_path / "results"

    result = CliRunner().invoke(
        cli, ["plan", str(mission), "--label", "test", "--output-directory", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert "Delivered 1 of 1 orders" in result.output
    assert sorted(path.name for path in output.iterdir()) == [
        "deliveries-test.json",
        "drone-test.geojson",
        "flightpath-test.json",
    ]


def test_plan_reports_unserved_pizza_and_exits_non_zero(tmp_path: Path) -> None:
    mission = _write_mission(tmp_path, "Unknown")

    result = CliRunner().invoke(cli, ["plan", str(mission), "--output-directory", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "Could not plan mission" in result.output
    assert not isinstance(result.exception, LookupError)
