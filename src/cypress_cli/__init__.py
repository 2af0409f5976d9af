"""cypress-cli: command-line front end for the Cypress test runner.

Parses the invocation, validates the command and hands a normalized
request to the run/open/install/verify subsystems.
"""

from cypress_cli.version import __version__

__all__: list[str] = ["__version__"]
