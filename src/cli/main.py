"""CLI entry point.

Builds the typer application, adds one sub-command per registered `CliCommand`
and runs each through `cli.dispatcher.Cli`. Embedders that need their own
override call `create_cli(override=...)` instead of `run()`.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import click
import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.sdk import Client
from cli import doctor
from cli.commands import CliCommand, all_commands
from cli.dispatcher import Cli
from core.config import AppSettings
from core.interfaces.override import CliOverride

ClientFactory = Callable[[AppSettings], Client]

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr through rich; stdout stays for command output."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_app() -> typer.Typer:
    app = typer.Typer(
        no_args_is_help=True,
        help="Command-line client for the key API.",
    )
    app.add_typer(doctor.app, name="doctor")

    @app.callback()
    def main(
        ctx: typer.Context,
        base_url: str | None = typer.Option(
            None, "--base-url", help="API base URL (overrides PARAMCTL_BASE_URL)."
        ),
        timeout: float | None = typer.Option(
            None, "--timeout", min=0.001, help="Request timeout in seconds."
        ),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
    ) -> None:
        overrides: dict[str, Any] = {}
        if base_url:
            overrides["base_url"] = base_url
        if timeout is not None:
            overrides["http_timeout_seconds"] = timeout

        settings = AppSettings(**overrides)
        configure_logging("DEBUG" if verbose else settings.log_level)
        ctx.obj = settings

    return app


async def _execute(
    command: CliCommand,
    matches: dict[str, Any],
    settings: AppSettings,
    override: CliOverride | None,
    client_factory: ClientFactory,
) -> None:
    logger.debug("Running %s against %s", command.value, settings.base_url)
    async with client_factory(settings) as client:
        await Cli(client, override).execute(command, matches)


def _bind(
    command: CliCommand,
    override: CliOverride | None,
    client_factory: ClientFactory,
) -> click.Command:
    schema = Cli.get_command(command)

    def callback(**params: Any) -> None:
        ctx = click.get_current_context()
        settings = ctx.find_object(AppSettings) or AppSettings()
        asyncio.run(_execute(command, params, settings, override, client_factory))

    schema.callback = callback
    return schema


def create_cli(
    override: CliOverride | None = None,
    client_factory: ClientFactory | None = None,
) -> click.Group:
    """Build the full command group, wiring `override` into every command."""

    group = typer.main.get_group(_build_app())
    factory = client_factory or Client.from_settings
    for command in all_commands():
        group.add_command(_bind(command, override, factory))
    return group


def run() -> None:
    create_cli()(prog_name="paramctl")
