"""Custom exception hierarchy for cypress-cli.

Every error condition the CLI knows how to report inherits from
:class:`CypressCliError` so the error boundary in
:mod:`cypress_cli.cli.app` can render a clean message instead of a
stack trace.

Hierarchy
---------
CypressCliError
├── MissingDescriptionError
├── UsageError
│   └── UnknownCommandError
├── HandlerNotFoundError
└── EnvironmentError
"""

from __future__ import annotations


class CypressCliError(Exception):
    """Base exception for all cypress-cli errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command table ---------------------------------------------------------

class MissingDescriptionError(CypressCliError):
    """Raised when a declared option has no registered help text.

    This is a programming error: it fires while the command table is
    being built, so the CLI never starts with an undocumented flag.
    """


# --- User input ------------------------------------------------------------

class UsageError(CypressCliError):
    """Raised when the argument vector cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        help_text: str = "",
    ) -> None:
        super().__init__(message, hint=hint)
        self.help_text: str = help_text
        """Help output for the parser that rejected the input."""


class UnknownCommandError(UsageError):
    """Raised when the first token is not one of the known commands."""


# --- Subsystems ------------------------------------------------------------

class HandlerNotFoundError(CypressCliError):
    """Raised when no subsystem is registered for a command."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(CypressCliError):
    """Raised when an optional runtime dependency is not available."""
