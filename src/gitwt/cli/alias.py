"""Command alias support.

Decorate a click command with @alias("s") and register it with
register_with_aliases(); the command becomes invokable under every alias
while help shows it once as "start, s".
"""

from collections.abc import Callable
from typing import TypeVar

import click

CommandT = TypeVar("CommandT", bound=click.Command)

_ALIASES_ATTR = "_gitwt_aliases"


def alias(*names: str) -> Callable[[CommandT], CommandT]:
    """Attach short names to a command."""

    def decorator(cmd: CommandT) -> CommandT:
        setattr(cmd, _ALIASES_ATTR, names)
        return cmd

    return decorator


def get_aliases(cmd: click.Command) -> tuple[str, ...]:
    return getattr(cmd, _ALIASES_ATTR, ())


def register_with_aliases(group: click.Group, cmd: click.Command, name: str | None = None) -> None:
    """Add cmd to group under its name and each of its aliases."""
    group.add_command(cmd, name=name)
    for alias_name in get_aliases(cmd):
        group.add_command(cmd, name=alias_name)
