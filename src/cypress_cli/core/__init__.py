"""Core layer: command declarations and pure option handling.

Rules
-----
* No ``print()`` calls.
* No process exit, no filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from cypress_cli.core.coercion import coerce_false_default_true
from cypress_cli.core.commands import COMMANDS, KNOWN_COMMANDS, build_commands
from cypress_cli.core.descriptions import text
from cypress_cli.core.models import (
    CommandSpec,
    InstallRequest,
    Invocation,
    NormalizedRequest,
    OptionSpec,
    ValueArity,
    VerifyRequest,
    Versions,
)
from cypress_cli.core.options import ALLOWED_KEYS, normalize
from cypress_cli.core.protocols import Handlers

__all__: list[str] = [
    "ALLOWED_KEYS",
    "COMMANDS",
    "CommandSpec",
    "Handlers",
    "InstallRequest",
    "Invocation",
    "KNOWN_COMMANDS",
    "NormalizedRequest",
    "OptionSpec",
    "ValueArity",
    "VerifyRequest",
    "Versions",
    "build_commands",
    "coerce_false_default_true",
    "normalize",
    "text",
]
