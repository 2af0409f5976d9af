"""CLI application entry point and error boundary for ``cypress``.

:func:`main` is the side-effect-free pipeline: parse the argument
vector, reject unknown commands, dispatch to a subsystem and return the
exit code (or ``None`` when no exit should be forced).  :func:`cli` is
the **sole** place that calls :func:`sys.exit`.

This module must be imported, never executed directly; see the guard at
the bottom of the file.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cypress_cli.cli import exit_codes
from cypress_cli.cli.console import console
from cypress_cli.cli.dispatch import dispatch
from cypress_cli.cli.logger import configure_logging, logger
from cypress_cli.cli.parser import build_parser, parse_invocation
from cypress_cli.core.protocols import Handlers
from cypress_cli.exceptions import CypressCliError, UsageError


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    handlers: Handlers | None = None,
) -> int | None:
    """Run the cypress CLI.

    Parameters
    ----------
    argv:
        Explicit argument list without the program name.  When ``None``
        (default), ``sys.argv[1:]`` is used.
    handlers:
        Subsystems to dispatch to.  Defaults to the entry-point backed
        bundle from :func:`cypress_cli.infra.handlers.load_handlers`.

    Returns
    -------
    int | None
        OS process exit code, or ``None`` when the process should end
        naturally.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    parser = build_parser()
    try:
        invocation = parse_invocation(parser, args)
    except UsageError as exc:
        console.print(str(exc), markup=False)
        if exc.help_text:
            console.out(exc.help_text)
        return exit_codes.GENERAL_ERROR

    if invocation.command is None:
        parser.print_help()
        return None

    if handlers is None:
        from cypress_cli.infra.handlers import load_handlers

        handlers = load_handlers()

    return dispatch(invocation, handlers)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Exits with the code :func:`main` returned; returns normally when it
    returned ``None``.
    """
    configure_logging()
    try:
        code = main()
    except CypressCliError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

    if code is not None:
        sys.exit(code)


# ---------------------------------------------------------------------------
# Standalone guard
# ---------------------------------------------------------------------------

def refuse_standalone() -> None:
    """Log the misuse and exit without parsing anything."""
    configure_logging()
    logger.error("This CLI module should be imported from another Python module")
    logger.error("and not executed directly")
    sys.exit(exit_codes.STANDALONE_MISUSE)


if __name__ == "__main__":
    refuse_standalone()
