"""Tests for the command table (core/commands.py) and its models.

Coverage:
* Commands are declared in order and match ``KNOWN_COMMANDS``.
* Only ``run`` and ``open`` declare flags, with the documented shapes.
* Switch options carry the ``"false"``-only coercion.
* Every command targets a field of ``Handlers``.
* Declarations are frozen.
"""

from __future__ import annotations

import dataclasses

import pytest

from cypress_cli.core.coercion import coerce_false_default_true
from cypress_cli.core.commands import COMMANDS, KNOWN_COMMANDS
from cypress_cli.core.models import (
    CommandSpec,
    Invocation,
    OptionSpec,
    ValueArity,
)
from cypress_cli.core.protocols import Handlers


def _command(name: str) -> CommandSpec:
    return next(command for command in COMMANDS if command.name == name)


def _flags(name: str) -> list[tuple[str, ...]]:
    return [option.flags for option in _command(name).options]


# ---------------------------------------------------------------------------
# Declaration order and identity
# ---------------------------------------------------------------------------

class TestDeclarations:
    def test_order(self) -> None:
        assert [c.name for c in COMMANDS] == [
            "version", "run", "open", "install", "verify",
        ]

    def test_known_commands_match_table(self) -> None:
        assert tuple(c.name for c in COMMANDS) == KNOWN_COMMANDS

    @pytest.mark.parametrize("name", ["version", "install", "verify"])
    def test_option_less_commands(self, name: str) -> None:
        assert _command(name).options == ()
        assert _command(name).usage is None

    @pytest.mark.parametrize("name", ["run", "open"])
    def test_option_commands_have_usage(self, name: str) -> None:
        assert _command(name).usage == "[options]"

    def test_handlers_exist_on_bundle(self) -> None:
        fields = {f.name for f in dataclasses.fields(Handlers)}
        for command in COMMANDS:
            assert command.handler in fields

    def test_version_targets_version_reporter(self) -> None:
        assert _command("version").handler == "versions"


# ---------------------------------------------------------------------------
# Option shapes
# ---------------------------------------------------------------------------

class TestRunOptions:
    def test_flags(self) -> None:
        assert _flags("run") == [
            ("--record",),
            ("-k", "--key"),
            ("-s", "--spec"),
            ("-r", "--reporter"),
            ("-o", "--reporter-options"),
            ("-p", "--port"),
            ("-e", "--env"),
            ("-c", "--config"),
            ("-b", "--browser"),
            ("-P", "--project"),
        ]

    def test_record_is_optional_value_switch(self) -> None:
        record = _command("run").options[0]
        assert record.arity is ValueArity.OPTIONAL
        assert record.placeholder == "bool"
        assert record.coerce is coerce_false_default_true

    def test_value_options_keep_strings(self) -> None:
        for option in _command("run").options[1:]:
            assert option.arity is ValueArity.REQUIRED
            assert option.coerce is None

    def test_reporter_options_dest(self) -> None:
        reporter_options = _command("run").options[4]
        assert reporter_options.dest == "reporter_options"


class TestOpenOptions:
    def test_flags(self) -> None:
        assert _flags("open") == [
            ("-p", "--port"),
            ("-e", "--env"),
            ("-c", "--config"),
            ("-d", "--detached"),
            ("-P", "--project"),
        ]

    def test_detached_is_optional_value_switch(self) -> None:
        detached = _command("open").options[3]
        assert detached.dest == "detached"
        assert detached.arity is ValueArity.OPTIONAL
        assert detached.coerce is coerce_false_default_true


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class TestModels:
    def test_option_spec_frozen(self) -> None:
        option = OptionSpec(long="--spec", description="d")
        with pytest.raises(dataclasses.FrozenInstanceError):
            option.long = "--other"  # type: ignore[misc]

    def test_command_spec_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            COMMANDS[0].name = "other"  # type: ignore[misc]

    def test_long_only_flags(self) -> None:
        assert OptionSpec(long="--record", description="d").flags == ("--record",)

    def test_dest_from_long_flag(self) -> None:
        option = OptionSpec(long="--cypress-version", description="d")
        assert option.dest == "cypress_version"

    def test_invocation_defaults_to_no_options(self) -> None:
        invocation = Invocation(command=None)
        assert dict(invocation.options) == {}
