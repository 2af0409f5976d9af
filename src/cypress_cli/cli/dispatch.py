"""Command dispatch: hand a parsed invocation to its subsystem.

Each action builds the subsystem's request, awaits the handler and maps
the outcome to an exit code.  Failures are caught at each action's own
call site, logged once, and turned into :data:`exit_codes.GENERAL_ERROR`.

Return values
-------------
``int``
    The caller must exit with this code (``run``, ``version``, failures).
``None``
    No exit is forced; the process ends naturally (``open``,
    ``install``, ``verify``).
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, TypeVar

from cypress_cli.cli import exit_codes
from cypress_cli.cli.console import console
from cypress_cli.cli.logger import log_error, logger
from cypress_cli.core.commands import COMMANDS
from cypress_cli.core.models import (
    CommandSpec,
    InstallRequest,
    Invocation,
    VerifyRequest,
)
from cypress_cli.core.options import normalize
from cypress_cli.core.protocols import Handlers

_T = TypeVar("_T")

Action = Callable[[Mapping[str, Any], Any], "int | None"]


# ---------------------------------------------------------------------------
# Outcome helpers
# ---------------------------------------------------------------------------

def outcome_exit_code(outcome: object) -> int:
    """Exit code for a settled handler outcome.

    An integer outcome is adopted as-is (``run`` reports its failure
    count this way); anything else means success.
    """
    if isinstance(outcome, int) and not isinstance(outcome, bool):
        return outcome
    return exit_codes.SUCCESS


def log_error_and_fail(exc: BaseException) -> int:
    """Log *exc* and return :data:`exit_codes.GENERAL_ERROR`."""
    log_error(exc)
    return exit_codes.GENERAL_ERROR


def _settle(awaitable: Awaitable[_T]) -> _T:
    """Block until the subsystem's coroutine settles."""

    async def _await() -> _T:
        return await awaitable

    return asyncio.run(_await())


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

def _version_action(options: Mapping[str, Any], reporter: Any) -> int | None:
    try:
        versions = _settle(reporter.versions())
    except Exception as exc:
        return log_error_and_fail(exc)
    console.out(f"Cypress package version: {versions.package}")
    console.out(f"Cypress binary version: {versions.binary}")
    return exit_codes.SUCCESS


def _run_action(options: Mapping[str, Any], handler: Any) -> int | None:
    try:
        outcome = _settle(handler.start(normalize(options)))
    except Exception as exc:
        return log_error_and_fail(exc)
    return outcome_exit_code(outcome)


def _open_action(options: Mapping[str, Any], handler: Any) -> int | None:
    # The interactive app owns the process lifetime; success forces no exit.
    try:
        _settle(handler.start(normalize(options)))
    except Exception as exc:
        return log_error_and_fail(exc)
    return None


def _install_action(options: Mapping[str, Any], handler: Any) -> int | None:
    request: InstallRequest = {"force": True}
    try:
        _settle(handler.start(request))
    except Exception as exc:
        return log_error_and_fail(exc)
    return None


def _verify_action(options: Mapping[str, Any], handler: Any) -> int | None:
    request: VerifyRequest = {"force": True, "welcome_message": False}
    try:
        _settle(handler.start(request))
    except Exception as exc:
        return log_error_and_fail(exc)
    return None


ACTIONS: Mapping[str, Action] = {
    "version": _version_action,
    "run": _run_action,
    "open": _open_action,
    "install": _install_action,
    "verify": _verify_action,
}


def dispatch(
    invocation: Invocation,
    handlers: Handlers,
    commands: Sequence[CommandSpec] = COMMANDS,
) -> int | None:
    """Run the action for ``invocation.command``.

    The collaborator handed to the action is the :class:`Handlers` field
    named by the command's :attr:`CommandSpec.handler`.

    Raises
    ------
    KeyError
        If the command is not declared or has no action.  The parser only
        produces declared commands, so this indicates a programming error.
    """
    by_name = {command.name: command for command in commands}
    command = by_name[invocation.command or ""]
    action = ACTIONS[command.name]
    logger.debug("dispatching %s with %s", command.name, dict(invocation.options))
    return action(invocation.options, getattr(handlers, command.handler))
