"""Typer CLI for the campus passages service."""

import logging
import os
from pathlib import Path
from typing import Annotated

import typer

from campus.application.config import ConfigError, load_config
from campus.cli.commands import check_door_command, configure_logging, validate_command
from campus.cli.commands.validate import display_load_error
from campus.web.app import CONFIG_ENV_VAR

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="campus",
    help="Manage passages between campus buildings.",
)

app.command(name="validate")(validate_command)
app.command(name="check-door")(check_door_command)


@app.command()
def serve(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="JSON configuration to seed on startup"),
    ] = None,
    host: Annotated[
        str | None, typer.Option("--host", help="Bind address (overrides config)")
    ] = None,
    port: Annotated[
        int | None, typer.Option("--port", help="Bind port (overrides config)")
    ] = None,
) -> None:
    """Run the REST API with uvicorn.

    Example:
        campus serve --config campus.json --port 8080
    """
    import uvicorn

    bind_host, bind_port, log_level = "127.0.0.1", 8000, "INFO"
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            display_load_error(e)
            raise typer.Exit(code=1)
        bind_host, bind_port = config.server.host, config.server.port
        log_level = config.logging.level
        os.environ[CONFIG_ENV_VAR] = str(config_file.resolve())

    configure_logging(log_level)
    bind_host = host or bind_host
    bind_port = port or bind_port
    logger.info(f"Serving campus API on {bind_host}:{bind_port}")
    uvicorn.run("campus.web.app:app", host=bind_host, port=bind_port, log_level=log_level.lower())


if __name__ == "__main__":
    app()
