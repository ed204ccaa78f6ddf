#!/usr/bin/env python3
"""
Main CLI entry point for the Pokedex API server.
"""

import os
import sys

import click
import uvicorn

from pokedex import __version__
from pokedex.config import settings
from pokedex.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="pokedex")
def cli() -> None:
    """Pokedex CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to (defaults to $PORT or 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Pokedex API server."""

    configure_logging(
        debug=(log_level == "debug"), json_output=settings.json_logs, level=log_level
    )

    logger.info(
        "Starting Pokedex API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Environment carries the settings into the reloader subprocess
    settings.api_port = port
    os.environ["POKEDEX_API_PORT"] = str(port)
    if log_level == "debug":
        os.environ["POKEDEX_DEBUG"] = "true"
        os.environ["POKEDEX_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("POKEDEX_DEBUG", "false")
        os.environ.setdefault("POKEDEX_LOG_LEVEL", log_level)

    try:
        if reload:
            uvicorn.run(
                "pokedex.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            # A single process keeps a single store
            from pokedex.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from pokedex.graphql.schema import schema as graphql_schema

    click.echo(graphql_schema.as_str())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
