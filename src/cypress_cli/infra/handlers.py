"""Entry-point backed implementations of the subsystem protocols.

The run/open/install/verify subsystems live in separate distributions.
Each one registers an object exposing an async ``start(request)`` in the
``cypress_cli.handlers`` entry-point group, e.g.::

    [project.entry-points."cypress_cli.handlers"]
    run = "cypress_runtime.exec.run"
    open = "cypress_runtime.exec.open"
    install = "cypress_runtime.tasks.install"
    verify = "cypress_runtime.tasks.verify"
    versions = "cypress_runtime.versions"

Resolution is lazy: nothing is imported until the matching command
actually fires, and a missing registration surfaces as
:class:`~cypress_cli.exceptions.HandlerNotFoundError` from inside the
awaited call.
"""

from __future__ import annotations

import logging
from importlib import metadata
from typing import Any

from cypress_cli.core.models import Versions
from cypress_cli.core.protocols import Handlers
from cypress_cli.exceptions import HandlerNotFoundError
from cypress_cli.version import __version__

HANDLER_GROUP: str = "cypress_cli.handlers"

BINARY_NOT_INSTALLED: str = "not installed"

logger = logging.getLogger(__name__)


def resolve_handler(name: str, *, group: str = HANDLER_GROUP) -> Any:
    """Load the object registered as *name* in *group*.

    Raises
    ------
    HandlerNotFoundError
        When no entry point with that name is installed.
    """
    for entry_point in metadata.entry_points(group=group):
        if entry_point.name == name:
            logger.debug("loading %s handler from %s", name, entry_point.value)
            return entry_point.load()
    raise HandlerNotFoundError(
        f"No '{name}' handler is installed.",
        hint=(
            "Install the Cypress runtime package, or register an entry "
            f"point named '{name}' in the '{group}' group."
        ),
    )


class EntryPointHandler:
    """Forward ``start`` to the subsystem registered under *name*.

    Satisfies the run, open, install and verify protocols structurally.
    """

    def __init__(self, name: str, *, group: str = HANDLER_GROUP) -> None:
        self._name: str = name
        self._group: str = group

    def __repr__(self) -> str:
        return f"EntryPointHandler({self._name!r})"

    async def start(self, request: Any) -> Any:
        target = resolve_handler(self._name, group=self._group)
        return await target.start(request)


class EntryPointVersionReporter:
    """Report this package's version plus the installed binary's.

    The binary version comes from a ``versions`` entry point when one is
    registered; otherwise it is reported as ``"not installed"``.
    """

    def __init__(self, *, group: str = HANDLER_GROUP) -> None:
        self._group: str = group

    async def versions(self) -> Versions:
        try:
            target = resolve_handler("versions", group=self._group)
        except HandlerNotFoundError:
            return Versions(package=__version__, binary=BINARY_NOT_INSTALLED)
        reported: Versions = await target.versions()
        return Versions(package=__version__, binary=reported.binary)


def load_handlers(*, group: str = HANDLER_GROUP) -> Handlers:
    """Build the default :class:`Handlers` bundle.

    No entry point is loaded here; see :class:`EntryPointHandler`.
    """
    return Handlers(
        run=EntryPointHandler("run", group=group),
        open=EntryPointHandler("open", group=group),
        install=EntryPointHandler("install", group=group),
        verify=EntryPointHandler("verify", group=group),
        versions=EntryPointVersionReporter(group=group),
    )
