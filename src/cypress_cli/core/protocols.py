"""Protocols (interfaces) for the subsystems the CLI dispatches to.

The CLI only depends on these contracts.  Concrete implementations are
resolved by :mod:`cypress_cli.infra.handlers`; tests substitute mocks.
Every operation is a coroutine: the dispatch engine awaits it and turns
the outcome into an exit code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from cypress_cli.core.models import (
    InstallRequest,
    NormalizedRequest,
    VerifyRequest,
    Versions,
)


class RunHandler(Protocol):
    """Headless test run."""

    async def start(self, request: NormalizedRequest) -> int | None:
        """Run the tests described by *request*.

        Returns
        -------
        int | None
            Exit code the process should adopt (e.g. the number of
            failed tests), or ``None`` for success.
        """
        ...  # pragma: no cover


class OpenHandler(Protocol):
    """Interactive desktop application."""

    async def start(self, request: NormalizedRequest) -> object:
        ...  # pragma: no cover


class InstallHandler(Protocol):
    """Download and unpack the Cypress binary."""

    async def start(self, request: InstallRequest) -> object:
        ...  # pragma: no cover


class VerifyHandler(Protocol):
    """Smoke-test the installed binary."""

    async def start(self, request: VerifyRequest) -> object:
        ...  # pragma: no cover


class VersionReporter(Protocol):
    """Report the package and binary versions."""

    async def versions(self) -> Versions:
        ...  # pragma: no cover


@dataclass(frozen=True, slots=True)
class Handlers:
    """The set of subsystems one CLI invocation may dispatch to.

    Field names match :attr:`~cypress_cli.core.models.CommandSpec.handler`.
    """

    run: RunHandler
    open: OpenHandler
    install: InstallHandler
    verify: VerifyHandler
    versions: VersionReporter
