from pathlib import Path

import click

from gitwt.cli.alias import alias
from gitwt.cli.ensure import Ensure, handle_errors
from gitwt.cli.navigation import navigate_to
from gitwt.cli.output import user_output
from gitwt.core import lifecycle
from gitwt.core.context import GitWtContext
from gitwt.core.worktree_utils import looks_like_path

START_USAGE = "Usage: git-wt start [-s|--source SOURCE] [-C|--no-cd] [PATH] BRANCH"


def parse_start_args(args: tuple[str, ...]) -> tuple[Path | None, str]:
    """Split positional arguments into (custom path, branch).

    One argument is the branch; two are PATH BRANCH. A lone argument that
    looks like a path is rejected so it is never taken as a branch name.
    """
    Ensure.invariant(len(args) > 0, f"Branch name required\n{START_USAGE}")
    Ensure.invariant(len(args) <= 2, f"Too many arguments\n{START_USAGE}")

    if len(args) == 1:
        Ensure.invariant(
            not looks_like_path(args[0]),
            f"'{args[0]}' looks like a path, provide a branch name too\n"
            "Usage: git-wt start PATH BRANCH",
        )
        return None, args[0]

    return Path(args[0]), args[1]


def _start(
    ctx: GitWtContext,
    args: tuple[str, ...],
    *,
    source: str | None,
    cd: bool,
    script: bool,
    command_name: str,
) -> None:
    custom_path, branch = parse_start_args(args)
    layout = Ensure.layout(ctx)

    result = lifecycle.start(ctx, layout, branch, source=source, custom_path=custom_path)

    if cd and result.navigate_to is not None:
        navigate_to(
            ctx,
            result.navigate_to,
            script=script,
            command_name=command_name,
            message="Changed directory to worktree",
        )
    else:
        hint = click.style("To switch to this worktree, run: ", dim=True)
        user_output(hint + f"cd {result.worktree_path}")
        user_output(click.style("Or use: ", dim=True) + f"git-wt resume {branch}")


@alias("s")
@click.command("start")
@click.option("-s", "--source", help="Source branch (default: current branch).")
@click.option("-C", "--no-cd", "no_cd", is_flag=True, help="Don't change into the new worktree.")
@click.option("--script", is_flag=True, hidden=True, help="Output shell script for integration.")
@click.argument("args", nargs=-1, metavar="[PATH] BRANCH")
@click.pass_obj
@handle_errors
def start_cmd(
    ctx: GitWtContext, source: str | None, no_cd: bool, script: bool, args: tuple[str, ...]
) -> None:
    """Create a feature branch worktree and change into it.

    PATH (starting with /, ./ or ../) places the worktree outside trees/.
    """
    _start(ctx, args, source=source, cd=not no_cd, script=script, command_name="start")


@alias("c")
@click.command("create")
@click.option("-s", "--source", help="Source branch (default: current branch).")
@click.option("--script", is_flag=True, hidden=True, help="Output shell script for integration.")
@click.argument("args", nargs=-1, metavar="[PATH] BRANCH")
@click.pass_obj
@handle_errors
def create_cmd(ctx: GitWtContext, source: str | None, script: bool, args: tuple[str, ...]) -> None:
    """Create a feature branch worktree without changing into it."""
    _start(ctx, args, source=source, cd=False, script=script, command_name="create")
