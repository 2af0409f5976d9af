"""Exit-code constants used by the CLI layer.

Every exit path uses one of these values so the codes a shell script
sees are documented and tested in one place.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed without error."""

GENERAL_ERROR: int = 1
"""Usage error, or a subsystem reported failure.  The message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

STANDALONE_MISUSE: int = -1
"""The CLI module was executed directly instead of being imported."""
