"""CLI layer: argument parsing, dispatch, and the error boundary.

This package is the outermost layer of the application.  It may import
from ``core`` and ``infra``, but no other layer may import from ``cli``.
It is also the only layer that turns outcomes into process exit codes.
"""
