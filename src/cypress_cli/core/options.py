"""Reduce parsed options to the keys subsystems are allowed to see.

The normalizer is a pure key filter.  It does not validate values; that
is the receiving subsystem's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from cypress_cli.core.models import NormalizedRequest

ALLOWED_KEYS: frozenset[str] = frozenset({
    "spec",
    "reporter",
    "reporter_options",
    "path",
    "destination",
    "port",
    "env",
    "cypress_version",
    "config",
    "record",
    "key",
    "browser",
    "detached",
})
"""Keys a :class:`NormalizedRequest` may carry."""


def normalize(parsed: Mapping[str, Any]) -> NormalizedRequest:
    """Copy the allow-listed keys present in *parsed*.

    Keys outside :data:`ALLOWED_KEYS` are dropped silently.  Allow-listed
    keys missing from *parsed* stay missing; nothing is defaulted.
    """
    return cast(
        NormalizedRequest,
        {key: value for key, value in parsed.items() if key in ALLOWED_KEYS},
    )
