"""Turn the declared command table into an argparse tree and parse argv.

Parsing is kept free of side effects apart from argparse's own
``--help`` / ``--version`` handling: :func:`parse_invocation` returns an
:class:`~cypress_cli.core.models.Invocation` and never runs a handler.
Malformed input raises :class:`~cypress_cli.exceptions.UsageError`
instead of exiting, so the caller decides the exit code.
"""

from __future__ import annotations

import argparse
from collections.abc import Collection, Sequence
from typing import Any, NoReturn

from cypress_cli.cli.logger import logger
from cypress_cli.core.commands import COMMANDS, KNOWN_COMMANDS
from cypress_cli.core.models import CommandSpec, Invocation, OptionSpec, ValueArity
from cypress_cli.exceptions import UnknownCommandError, UsageError
from cypress_cli.version import __version__

PROG: str = "cypress"

GLOBAL_FLAGS: frozenset[str] = frozenset({"-h", "--help", "-V", "--version"})
"""Leading tokens handed to argparse even though they are not commands."""


class CliArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises :class:`UsageError` instead of exiting.

    Long flags must be spelled out in full; prefixes are not expanded.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("allow_abbrev", False)
        super().__init__(*args, **kwargs)

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, help_text=self.format_help())


# ---------------------------------------------------------------------------
# Parser construction
# ---------------------------------------------------------------------------

def _add_option(parser: argparse.ArgumentParser, option: OptionSpec) -> None:
    """Register one :class:`OptionSpec` on a sub-parser.

    Unset options are suppressed so they are absent from the namespace
    rather than defaulting to ``None``.
    """
    kwargs: dict[str, Any] = {
        "dest": option.dest,
        "help": option.description,
        "default": argparse.SUPPRESS,
    }
    if option.arity is ValueArity.NONE:
        kwargs["action"] = "store_true"
    else:
        kwargs["metavar"] = option.placeholder
        if option.arity is ValueArity.OPTIONAL:
            kwargs["nargs"] = "?"
            kwargs["const"] = True
        if option.coerce is not None:
            kwargs["type"] = option.coerce
    parser.add_argument(*option.flags, **kwargs)


def _add_command(subparsers: Any, command: CommandSpec) -> None:
    sub = subparsers.add_parser(
        command.name,
        help=command.description,
        description=command.description,
        usage=f"%(prog)s {command.usage}" if command.usage else None,
    )
    for option in command.options:
        _add_option(sub, option)


def build_parser(
    commands: Sequence[CommandSpec] = COMMANDS,
) -> CliArgumentParser:
    """Construct the top-level parser with one sub-parser per command."""
    parser = CliArgumentParser(
        prog=PROG,
        description="Cypress command-line interface.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(
        dest="command",
        metavar="<command>",
        parser_class=CliArgumentParser,
    )
    for command in commands:
        _add_command(subparsers, command)
    return parser


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_invocation(
    parser: argparse.ArgumentParser,
    args: Sequence[str],
    *,
    known_commands: Collection[str] = KNOWN_COMMANDS,
) -> Invocation:
    """Parse *args* (``sys.argv[1:]``) into an :class:`Invocation`.

    Raises
    ------
    UnknownCommandError
        If the first token is neither a declared command nor a global
        flag.
    UsageError
        If argparse rejects the remaining tokens.
    """
    logger.debug("cli starts with arguments %s", list(args))
    if not args:
        return Invocation(command=None)

    first = args[0]
    if first not in known_commands and first not in GLOBAL_FLAGS:
        raise UnknownCommandError(
            f'Unknown command "{first}"',
            help_text=parser.format_help(),
        )

    namespace = parser.parse_args(list(args))
    options = vars(namespace)
    command: str | None = options.pop("command", None)
    return Invocation(command=command, options=options)
