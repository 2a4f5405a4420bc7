"""Output utilities for CLI commands with clear intent.

user_output is for anything a human reads and goes to stderr.
machine_output is for anything a shell wrapper or script consumes and goes
to stdout. Keeping the two apart is what lets `--script` mode hand a single
path back to the shell wrapper.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Output informational message for human users (stderr)."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Output structured data for machine/script consumption (stdout)."""
    click.echo(message, nl=nl)
