"""Door placement check against a seeded campus."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from campus.application.dtos import DoorPositionInput
from campus.cli.commands.validate import load_campus


def check_door_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration describing the campus"),
    ],
    floor: Annotated[str, typer.Option("--floor", help="Floor id the room is on")],
    initial_x: Annotated[int, typer.Option("--initial-x", help="Left column of the room")],
    initial_y: Annotated[int, typer.Option("--initial-y", help="Top row of the room")],
    final_x: Annotated[int, typer.Option("--final-x", help="Right column of the room")],
    final_y: Annotated[int, typer.Option("--final-y", help="Bottom row of the room")],
    door_x: Annotated[int, typer.Option("--door-x", help="Door column")],
    door_y: Annotated[int, typer.Option("--door-y", help="Door row")],
    orientation: Annotated[
        str, typer.Option("--orientation", help="NORTH, SOUTH, WEST or EAST")
    ],
) -> None:
    """Check whether a room door may be placed on a floor.

    Exit codes:
        0 - Door position is valid
        1 - Door position is invalid or the campus cannot be loaded

    Example:
        campus check-door campus.json --floor a1 --initial-x 1 --initial-y 1 \\
            --final-x 3 --final-y 3 --door-x 3 --door-y 2 --orientation EAST
    """
    _, factory, errors = load_campus(config_file)
    for error in errors:
        typer.echo(f"Warning: seed item rejected: {error}", err=True)

    result = asyncio.run(
        factory.get_door_service().validate_door(
            DoorPositionInput(
                floor_id=floor,
                initial_x=initial_x,
                initial_y=initial_y,
                final_x=final_x,
                final_y=final_y,
                door_x=door_x,
                door_y=door_y,
                door_orientation=orientation,
            )
        )
    )
    if result.is_failure:
        typer.echo(f"Door position is invalid: {result.error}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Door position is valid.")
