"""Single source of truth for the cypress-cli package version."""

from __future__ import annotations

__version__: str = "0.4.0"
