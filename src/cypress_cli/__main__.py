"""Allow ``python -m cypress_cli`` invocation.

This module delegates to the CLI error-boundary entry point so that
``python -m cypress_cli`` behaves identically to the ``cypress``
console script.
"""

from __future__ import annotations

from cypress_cli.cli.app import cli

if __name__ == "__main__":
    cli()
