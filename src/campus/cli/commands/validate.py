"""Validate command for checking campus configuration files.

This module provides the `validate` command. It loads a JSON configuration
file, seeds its campus section into a fresh in-memory campus and reports
every building, floor or passage that was rejected.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

from campus.application.config import (
    CampusConfiguration,
    ConfigError,
    load_config,
    seed_campus,
)
from campus.application.factory import ServiceFactory


def configure_logging(level: str) -> None:
    """Configure root logging for CLI commands."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "<root>"
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def load_campus(
    config_file: Path,
) -> tuple[CampusConfiguration, ServiceFactory, list[str]]:
    """Load a configuration and seed it into a new factory.

    Raises:
        typer.Exit: With code 1 if the configuration cannot be loaded.

    Returns:
        The configuration, the seeded factory and the seeding errors.
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    configure_logging(config.logging.level)
    factory = ServiceFactory()
    errors = asyncio.run(seed_campus(config, factory))
    return config, factory, errors


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a campus configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, unknown references, etc.)
    - Campus rules (building codes, passage placement, duplicate passages)

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors

    Example:
        campus validate campus.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    config, _, errors = load_campus(config_file)

    if errors:
        typer.echo("Errors:", err=True)
        for error in errors:
            typer.echo(f"  {error}", err=True)
        typer.echo()
        typer.echo(f"Validation failed: {len(errors)} error(s)", err=True)
        raise typer.Exit(code=1)

    campus = config.campus
    if campus is None:
        typer.echo("Validation passed. Configuration has no campus section.")
    else:
        typer.echo(
            f"Validation passed. {len(campus.buildings)} building(s), "
            f"{len(campus.floors)} floor(s), {len(campus.passages)} passage(s)."
        )
    raise typer.Exit(code=0)
