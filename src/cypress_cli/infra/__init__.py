"""Infrastructure layer: locating the external subsystems.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose objects satisfying the protocols in
  :mod:`cypress_cli.core.protocols`.
"""

from cypress_cli.infra.handlers import (
    HANDLER_GROUP,
    EntryPointHandler,
    EntryPointVersionReporter,
    load_handlers,
    resolve_handler,
)

__all__: list[str] = [
    "EntryPointHandler",
    "EntryPointVersionReporter",
    "HANDLER_GROUP",
    "load_handlers",
    "resolve_handler",
]
