"""
Main CLI application using Typer.

This module provides the command-line interface for servicesync. Command
groups live in ``cli.commands`` and call the usecases directly.
"""

from __future__ import annotations

import typer

from ..infra.logging import configure_logging
from ..infra.settings import settings
from .commands import services

app = typer.Typer(help="Service file reconciliation CLI")

app.add_typer(
    services.app,
    name="services",
    help="Checks between the legacy services document and the services folder",
)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
    log_format: str = typer.Option(settings.log_format, "--log-format", help="Log output format: json or console"),
):
    """servicesync - keep one YAML file per service."""
    configure_logging(level=log_level, fmt=log_format)
    ctx.ensure_object(dict)


def cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
