"""Custom Click help formatter for organized command display."""

from typing import Any

import click

from gitwt.cli.alias import get_aliases
from gitwt.cli.output import user_output


class GroupedCommandGroup(click.Group):
    """Click Group that organizes commands into logical sections in help output.

    Aliases are folded into their command's row ("start, s") instead of
    being listed as separate commands.

    Usage errors exit with status 1 like every other failure.
    """

    sections: tuple[tuple[str, tuple[str, ...]], ...] = (
        ("Lifecycle", ("start", "create", "finish", "delete", "cancel")),
        ("Navigation", ("resume", "back")),
        ("Information", ("list", "status")),
        ("Maintenance", ("prune", "sync")),
        ("Setup", ("init", "config", "shell-init", "help")),
    )

    def main(self, *args: Any, **kwargs: Any) -> Any:
        kwargs["standalone_mode"] = False
        try:
            return super().main(*args, **kwargs)
        except click.ClickException as e:
            e.show()
            raise SystemExit(1) from e
        except click.Abort:
            user_output("Aborted!")
            raise SystemExit(1) from None

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        rows_by_name: dict[str, tuple[str, click.Command]] = {}
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            if subcommand in get_aliases(cmd):
                continue
            rows_by_name[subcommand] = (subcommand, cmd)

        placed: set[str] = set()
        for title, names in self.sections:
            section = [rows_by_name[name] for name in names if name in rows_by_name]
            if section:
                with formatter.section(title):
                    self._format_command_list(formatter, section)
                placed.update(name for name, _ in section)

        remaining = [row for name, row in rows_by_name.items() if name not in placed]
        if remaining:
            with formatter.section("Other"):
                self._format_command_list(formatter, remaining)

    def _format_command_list(
        self,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        """Format a list of commands with their help text."""
        rows = []
        for name, cmd in commands:
            label = ", ".join((name, *get_aliases(cmd)))
            help_text = cmd.get_short_help_str(limit=formatter.width)
            rows.append((label, help_text))

        if rows:
            formatter.write_dl(rows)
