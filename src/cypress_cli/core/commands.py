"""Declarations for the fixed set of ``cypress`` commands.

The table is built once, at import time.  Every option's help text is
looked up through :func:`~cypress_cli.core.descriptions.text` while the
table is built, so an undocumented option makes importing this module
fail with :class:`~cypress_cli.exceptions.MissingDescriptionError`.
"""

from __future__ import annotations

from collections.abc import Callable

from cypress_cli.core.coercion import coerce_false_default_true
from cypress_cli.core.descriptions import text
from cypress_cli.core.models import CommandSpec, OptionSpec, ValueArity

KNOWN_COMMANDS: tuple[str, ...] = ("version", "run", "open", "install", "verify")


def build_commands(
    describe: Callable[[str], str] = text,
) -> tuple[CommandSpec, ...]:
    """Declare every command, in help order.

    Parameters
    ----------
    describe:
        Lookup used for option help text.  Defaults to the registry in
        :mod:`cypress_cli.core.descriptions`.
    """

    def opt(
        long: str,
        key: str,
        *,
        short: str | None = None,
        placeholder: str | None = None,
        arity: ValueArity = ValueArity.REQUIRED,
        coerce: Callable[[str], object] | None = None,
    ) -> OptionSpec:
        return OptionSpec(
            long=long,
            short=short,
            placeholder=placeholder,
            arity=arity,
            description=describe(key),
            coerce=coerce,
        )

    def switch(long: str, key: str, *, short: str | None = None) -> OptionSpec:
        return opt(
            long,
            key,
            short=short,
            placeholder="bool",
            arity=ValueArity.OPTIONAL,
            coerce=coerce_false_default_true,
        )

    return (
        CommandSpec(
            name="version",
            description="Prints Cypress version",
            handler="versions",
        ),
        CommandSpec(
            name="run",
            usage="[options]",
            description="Runs Cypress Headlessly",
            handler="run",
            options=(
                switch("--record", "record"),
                opt("--key", "key", short="-k", placeholder="record-key"),
                opt("--spec", "spec", short="-s", placeholder="spec"),
                opt("--reporter", "reporter", short="-r", placeholder="reporter"),
                opt(
                    "--reporter-options",
                    "reporter_options",
                    short="-o",
                    placeholder="reporter-options",
                ),
                opt("--port", "port", short="-p", placeholder="port"),
                opt("--env", "env", short="-e", placeholder="env"),
                opt("--config", "config", short="-c", placeholder="config"),
                opt("--browser", "browser", short="-b", placeholder="browser-name"),
                opt("--project", "project", short="-P", placeholder="project-path"),
            ),
        ),
        CommandSpec(
            name="open",
            usage="[options]",
            description="Opens Cypress normally, as a desktop application.",
            handler="open",
            options=(
                opt("--port", "port", short="-p", placeholder="port"),
                opt("--env", "env", short="-e", placeholder="env"),
                opt("--config", "config", short="-c", placeholder="config"),
                switch("--detached", "detached", short="-d"),
                opt("--project", "project", short="-P", placeholder="project-path"),
            ),
        ),
        CommandSpec(
            name="install",
            description="Installs the Cypress executable matching this package's version",
            handler="install",
        ),
        CommandSpec(
            name="verify",
            description="Verifies that Cypress is installed correctly and executable",
            handler="verify",
        ),
    )


COMMANDS: tuple[CommandSpec, ...] = build_commands()
