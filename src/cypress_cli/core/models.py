"""Domain models for cypress-cli.

Command and option declarations are **frozen** dataclasses built once
at import time.  The requests handed to subsystems are ``TypedDict``
structures with ``total=False`` so an option the user did not pass is
absent from the request rather than present as ``None``.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypedDict


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

class ValueArity(enum.Enum):
    """How many values an option consumes."""

    NONE = "none"
    """Plain switch, e.g. ``--force``."""

    REQUIRED = "required"
    """Always followed by a value, e.g. ``--spec <spec>``."""

    OPTIONAL = "optional"
    """Value may be omitted, e.g. ``--record [bool]``."""


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """A single flag accepted by one command."""

    long: str
    """Long flag including dashes (``--reporter-options``)."""

    description: str
    """Help text, resolved from the description registry."""

    short: str | None = None
    """Short flag including the dash (``-o``), or ``None``."""

    placeholder: str | None = None
    """Metavar shown in help output (``reporter-options``)."""

    arity: ValueArity = ValueArity.REQUIRED

    coerce: Callable[[str], Any] | None = None
    """Converter applied to an explicit value, or ``None`` to keep the string."""

    @property
    def dest(self) -> str:
        """Parsed-options key derived from the long flag."""
        return self.long.lstrip("-").replace("-", "_")

    @property
    def flags(self) -> tuple[str, ...]:
        """Flags in the order argparse expects them (short first)."""
        if self.short is None:
            return (self.long,)
        return (self.short, self.long)


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """A top-level verb with its option schema and target handler."""

    name: str
    description: str
    handler: str
    """Attribute name of the collaborator in :class:`~cypress_cli.core.protocols.Handlers`."""

    usage: str | None = None
    options: tuple[OptionSpec, ...] = ()


# ---------------------------------------------------------------------------
# Per-invocation values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Invocation:
    """Result of parsing one argument vector.

    ``command`` is ``None`` when nothing was passed and help should be
    shown instead of running anything.
    """

    command: str | None
    options: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}),
    )


@dataclass(frozen=True, slots=True)
class Versions:
    """Versions reported by ``cypress version``."""

    package: str
    binary: str


# ---------------------------------------------------------------------------
# Subsystem requests
# ---------------------------------------------------------------------------

class NormalizedRequest(TypedDict, total=False):
    """Allow-listed options handed to the run and open subsystems."""

    spec: str
    reporter: str
    reporter_options: str
    path: str
    destination: str
    port: str
    env: str
    cypress_version: str
    config: str
    record: bool
    key: str
    browser: str
    detached: bool


class InstallRequest(TypedDict):
    force: bool


class VerifyRequest(TypedDict):
    force: bool
    welcome_message: bool
