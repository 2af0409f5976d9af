"""Pure converters from raw flag strings to typed option values."""

from __future__ import annotations


def coerce_false_default_true(raw: str) -> bool:
    """Treat a flag as enabled unless it is given the literal ``"false"``.

    The comparison is exact: no trimming and no case folding, so
    ``"False"``, ``"0"`` and ``""`` all yield ``True``.  A flag passed
    without any value never reaches this function; the parser supplies
    ``True`` for it directly.
    """
    return raw != "false"
