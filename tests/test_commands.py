from __future__ import annotations

import click
import pytest

from cli.commands import CliCommand, all_commands, cli_key_get, schema_for


def test_all_commands_yields_each_identifier_once_in_declaration_order() -> None:
    first = all_commands()
    second = all_commands()

    assert first == list(CliCommand)
    assert first == second
    assert len(set(first)) == len(first)


@pytest.mark.parametrize("command", list(CliCommand))
def test_every_flag_is_optional(command: CliCommand) -> None:
    schema = schema_for(command)

    options = [p for p in schema.params if isinstance(p, click.Option)]
    assert options
    assert all(not option.required for option in options)


@pytest.mark.parametrize("command", list(CliCommand))
def test_schema_is_built_fresh_on_every_call(command: CliCommand) -> None:
    assert schema_for(command) is not schema_for(command)
    assert schema_for(command).name == command.value


def test_key_get_declares_long_flags_with_help() -> None:
    schema = cli_key_get()

    by_name = {p.name: p for p in schema.params}
    assert list(by_name) == ["key", "unique_key"]
    assert by_name["key"].opts == ["--key"]
    assert by_name["unique_key"].opts == ["--unique-key"]
    assert isinstance(by_name["key"].type, click.types.BoolParamType)
    assert isinstance(by_name["unique_key"].type, click.types.StringParamType)
    assert "overlaps with the path level parameter" in by_name["key"].help
    assert "will not be overridden" in by_name["unique_key"].help


def test_key_get_parses_typed_values() -> None:
    ctx = cli_key_get().make_context("key-get", ["--key=true", "--unique-key", "abc"])

    assert ctx.params["key"] is True
    assert ctx.params["unique_key"] == "abc"


def test_key_get_absent_flags_are_none() -> None:
    ctx = cli_key_get().make_context("key-get", [])

    assert ctx.params.get("key") is None
    assert ctx.params.get("unique_key") is None


def test_key_get_rejects_non_boolean_key() -> None:
    with pytest.raises(click.BadParameter):
        cli_key_get().make_context("key-get", ["--key", "maybe"])
