"""Logging setup and user-facing error reporting.

Debug output follows the ``DEBUG`` environment-variable convention of
the wider Cypress tooling: ``DEBUG=cypress:cli`` (or a matching glob such
as ``cypress:*``) turns on debug records for this package.  Everything
else stays at WARNING.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
import sys
from collections.abc import Mapping

from cypress_cli.cli.console import console
from cypress_cli.exceptions import CypressCliError

DEBUG_NAMESPACE: str = "cypress:cli"

logger = logging.getLogger("cypress_cli")


def debug_enabled(patterns: str) -> bool:
    """Return ``True`` when any comma/space separated glob matches the namespace."""
    return any(
        fnmatch.fnmatchcase(DEBUG_NAMESPACE, pattern)
        for pattern in re.split(r"[\s,]+", patterns)
        if pattern
    )


def configure_logging(environ: Mapping[str, str] | None = None) -> None:
    """Attach a stderr handler to the package logger (idempotent)."""
    env = os.environ if environ is None else environ
    level = logging.DEBUG if debug_enabled(env.get("DEBUG", "")) else logging.WARNING
    logger.setLevel(level)

    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(name)s %(levelname)s: %(message)s"),
    )
    logger.addHandler(handler)


def log_error(exc: BaseException) -> None:
    """Show *exc* to the user once, with its hint when it carries one."""
    console.print(f"[bold red]Error:[/bold red] {exc}")
    if isinstance(exc, CypressCliError) and exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
    logger.debug("error details", exc_info=exc)
