"""Help text for every option the command table declares.

:func:`text` is called while :mod:`cypress_cli.core.commands` builds the
command table, so a missing entry surfaces at import time rather than
the first time somebody runs ``--help``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from cypress_cli.exceptions import MissingDescriptionError

DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "record": (
        "records the run. sends test results, screenshots and videos "
        "to your Cypress Dashboard."
    ),
    "key": (
        "your secret Record Key. you can omit this if you set a "
        "CYPRESS_RECORD_KEY environment variable."
    ),
    "spec": 'runs a specific spec file. defaults to "all"',
    "reporter": (
        "runs a specific mocha reporter. pass a path to use a custom "
        'reporter. defaults to "spec"'
    ),
    "reporter_options": 'options for the mocha reporter. defaults to "null"',
    "port": (
        "runs Cypress on a specific port. overrides any value in "
        "cypress.json."
    ),
    "env": (
        "sets environment variables. separate multiple values with a "
        "comma. overrides any value in cypress.json or cypress.env.json"
    ),
    "config": (
        "sets configuration values. separate multiple values with a "
        "comma. overrides any value in cypress.json."
    ),
    "browser": (
        "runs Cypress in the browser with the given name. note: using "
        "an external browser will not record a video."
    ),
    "detached": "runs Cypress application in detached mode",
    "project": "path to the project",
})


def text(key: str) -> str:
    """Return the help text registered for *key*.

    Raises
    ------
    MissingDescriptionError
        If *key* has no entry, or its entry is empty.
    """
    description = DESCRIPTIONS.get(key)
    if not description:
        raise MissingDescriptionError(
            f"Could not find description for: {key}",
        )
    return description
