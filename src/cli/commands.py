"""Command registry.

One `CliCommand` member per API operation, and for each one a click schema that
describes how command-line flags map onto the operation's request builder.

Every member needs a `cli_<command>` schema here and a `Cli.execute_<command>`
routine in `cli.dispatcher`; the two are kept in lockstep.
"""

from __future__ import annotations

from enum import Enum

import click
from typing_extensions import assert_never


class CliCommand(str, Enum):
    """Closed set of commands known to the dispatcher."""

    KEY_GET = "key-get"


def all_commands() -> list[CliCommand]:
    """Every command exactly once, in declaration order."""

    return list(CliCommand)


def schema_for(command: CliCommand) -> click.Command:
    """Build a fresh click schema for `command`."""

    if command is CliCommand.KEY_GET:
        return cli_key_get()
    assert_never(command)


def cli_key_get() -> click.Command:
    # Both flags are optional: an absent flag leaves the builder default alone.
    # `--key` overlaps with the path-level parameter of the same name; resolving
    # that is left to the override hook.
    return click.Command(
        CliCommand.KEY_GET.value,
        help="GET /key",
        params=[
            click.Option(
                ["--key"],
                type=click.BOOL,
                is_flag=False,
                required=False,
                help="The same key parameter that overlaps with the path level parameter",
            ),
            click.Option(
                ["--unique-key"],
                type=click.STRING,
                required=False,
                help="A key parameter that will not be overridden by the path spec",
            ),
        ],
    )
