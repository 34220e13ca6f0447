"""Command dispatcher.

`Cli` runs one command end to end:

1. fresh builder from the SDK client;
2. declared flags that were supplied are applied through the builder setters;
3. the override hook runs last and may overwrite anything;
4. the request is sent and the outcome is printed.

Notes:
- Override failures are not caught here. An exception raised by a hook aborts
  the invocation before `send()` is reached.
- Request failures (`adapters.sdk.Error`) are printed with the same `success`
  prefix as real successes; only the rendered payload tells them apart.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import click
from rich.console import Console
from rich.pretty import Pretty
from typing_extensions import assert_never

from adapters.sdk import Client, Error
from cli.commands import CliCommand, schema_for
from core.interfaces.override import CliOverride, NoOverride

logger = logging.getLogger(__name__)


class Cli:
    """Dispatch layer between parsed command-line flags and the SDK client."""

    def __init__(
        self,
        client: Client,
        override: CliOverride | None = None,
        *,
        console: Console | None = None,
    ) -> None:
        self._client = client
        self._over = override if override is not None else NoOverride()
        self._console = console or Console()

    @property
    def client(self) -> Client:
        return self._client

    @property
    def override(self) -> CliOverride:
        return self._over

    @staticmethod
    def get_command(command: CliCommand) -> click.Command:
        return schema_for(command)

    async def execute(self, command: CliCommand, matches: Mapping[str, Any]) -> None:
        logger.debug("Dispatching %s with %s", command.value, dict(matches))
        if command is CliCommand.KEY_GET:
            await self.execute_key_get(matches)
        else:
            assert_never(command)

    async def execute_key_get(self, matches: Mapping[str, Any]) -> None:
        request = self._client.key_get()

        value = matches.get("key")
        if value is not None:
            request = request.key(value)

        value = matches.get("unique_key")
        if value is not None:
            request = request.unique_key(value)

        self._over.execute_key_get(matches, request)

        try:
            result: Any = await request.send()
        except Error as exc:
            result = exc
        self._report(result)

    def _report(self, result: Any) -> None:
        self._console.print("success")
        self._console.print(Pretty(result))
