"""
Command Line Entry Point - Main Layer

    govee-web check     # Validate settings from the environment
    govee-web server    # Start the HTTP server
"""

import sys

import click
import uvicorn
from pydantic import ValidationError

from govee_web import __version__
from govee_web.main.config import get_settings
from govee_web.shared import get_logger, update_logging_from_settings

logger = get_logger(__name__)


def _load_settings():
    try:
        return get_settings()
    except ValidationError as e:
        click.echo(f"Invalid settings:\n{e}", err=True)
        sys.exit(1)


@click.group(context_settings={"max_content_width": 120})
@click.version_option(version=__version__, prog_name="govee-web")
def cli() -> None:
    """A small web service for controlling Govee light strips."""


@cli.command()
def check() -> None:
    """Check that the settings are valid (env and .env file)."""
    settings = _load_settings()
    click.echo(f"Settings OK\n\n{settings.summary()}")


@cli.command()
def server() -> None:
    """Start the govee-web server."""
    settings = _load_settings()

    update_logging_from_settings(settings)

    logger.info(
        "server.starting",
        bind_addr=settings.server.bind_addr,
        port=settings.server.port,
    )

    # Factory string so uvicorn owns the app lifespan
    uvicorn.run(
        "govee_web.main.app:create_app",
        factory=True,
        host=settings.server.bind_addr,
        port=settings.server.port,
        log_config=None,
    )


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
