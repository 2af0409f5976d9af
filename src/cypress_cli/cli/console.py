"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``version``)
keep working even when it is not installed.  Diagnostics go to stderr;
:meth:`_ConsoleProxy.out` is reserved for command output on stdout.
"""

from __future__ import annotations

import sys
from typing import Any

from cypress_cli.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain-text fallback."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render to stderr with Rich when available, else plain print.

        Pass ``markup=False`` for text with literal brackets, such as
        argparse help output.
        """
        self._emit(objects, stderr=True, markup=markup)

    def out(self, *objects: object, markup: bool = False) -> None:
        """Render command output to stdout."""
        self._emit(objects, stderr=False, markup=markup)

    @staticmethod
    def _emit(objects: tuple[object, ...], *, stderr: bool, markup: bool) -> None:
        try:
            rich_console = get_rich_console(stderr=stderr)
        except EnvironmentError:
            print(*objects, file=sys.stderr if stderr else sys.stdout)
            return
        rich_console.print(*objects, markup=markup)


console = _ConsoleProxy()
