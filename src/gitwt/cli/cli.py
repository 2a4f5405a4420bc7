import logging
import os

import click

from gitwt.cli.alias import register_with_aliases
from gitwt.cli.commands.cancel import cancel_cmd
from gitwt.cli.commands.config import config_group
from gitwt.cli.commands.finish import delete_cmd, finish_cmd
from gitwt.cli.commands.help import help_cmd
from gitwt.cli.commands.init import init_cmd
from gitwt.cli.commands.list import list_cmd, status_cmd
from gitwt.cli.commands.maintenance import prune_cmd, sync_cmd
from gitwt.cli.commands.shell_init import shell_init_cmd
from gitwt.cli.commands.start import create_cmd, start_cmd
from gitwt.cli.commands.switch import back_cmd, resume_cmd
from gitwt.cli.help_formatter import GroupedCommandGroup
from gitwt.cli.output import user_output
from gitwt.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


def configure_logging(debug: bool) -> None:
    """Send debug records to stderr when --debug or GIT_WT_DEBUG is set."""
    if debug or os.getenv("GIT_WT_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_FORMAT)


@click.group(
    cls=GroupedCommandGroup, context_settings=CONTEXT_SETTINGS, invoke_without_command=True
)
@click.version_option(package_name="git-wt")
@click.option("-y", "--yes", "assume_yes", is_flag=True, help="Answer yes to every confirmation.")
@click.option("--debug", is_flag=True, help="Log git invocations and decisions to stderr.")
@click.pass_context
def cli(ctx: click.Context, assume_yes: bool, debug: bool) -> None:
    """Git worktree workflow wrapper.

    Keeps the main checkout in main/ and feature worktrees in trees/, and
    symlinks shared paths from main into every new worktree.
    """
    configure_logging(debug)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(assume_yes=assume_yes)
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + f"Invalid settings: {e}")
            raise SystemExit(1) from e


# Commands with @alias decorators use register_with_aliases() to auto-register aliases
register_with_aliases(cli, init_cmd)  # i
register_with_aliases(cli, start_cmd)  # s
register_with_aliases(cli, create_cmd)  # c
register_with_aliases(cli, resume_cmd)  # r
register_with_aliases(cli, back_cmd)  # b
register_with_aliases(cli, finish_cmd)  # f
register_with_aliases(cli, delete_cmd)  # d
register_with_aliases(cli, cancel_cmd)  # x
register_with_aliases(cli, list_cmd)  # l
register_with_aliases(cli, status_cmd)  # st
register_with_aliases(cli, prune_cmd)  # p
register_with_aliases(cli, help_cmd)  # h
cli.add_command(sync_cmd)
cli.add_command(config_group)
cli.add_command(shell_init_cmd)


def main() -> None:
    """CLI entry point used by the `git-wt` console script."""
    cli()
