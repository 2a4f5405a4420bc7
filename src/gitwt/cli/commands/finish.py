from collections.abc import Callable
from typing import Any

import click

from gitwt.cli.alias import alias
from gitwt.cli.ensure import Ensure, handle_errors
from gitwt.cli.navigation import navigate_to
from gitwt.core import lifecycle
from gitwt.core.context import GitWtContext
from gitwt.core.lifecycle import FinishFlags, FinishResult


_FINISH_OPTIONS = (
    click.option("--pr", "create_pr", is_flag=True, help="Create a PR before finishing."),
    click.option("--keep-branch", is_flag=True, help="Never delete the branch."),
    click.option("-P", "--no-push", "no_push", is_flag=True, help="Don't push before finishing."),
    click.option(
        "--rm",
        "force_remove_branch",
        is_flag=True,
        help="Delete the branch regardless of PR state.",
    ),
    click.option("-F", "--force", is_flag=True, help="Remove even with uncommitted changes."),
)


def finish_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by finish and delete."""
    for option in reversed(_FINISH_OPTIONS):
        func = option(func)
    return func


def _after_finish(
    ctx: GitWtContext, result: FinishResult, *, script: bool, command_name: str
) -> None:
    if result.navigate_to is not None:
        navigate_to(
            ctx,
            result.navigate_to,
            script=script,
            command_name=command_name,
            message="Changed directory to main worktree",
        )


@alias("f")
@click.command("finish")
@click.argument("branch", required=False)
@finish_options
@click.option("--script", is_flag=True, hidden=True, help="Output shell script for integration.")
@click.pass_obj
@handle_errors
def finish_cmd(
    ctx: GitWtContext,
    branch: str | None,
    create_pr: bool,
    keep_branch: bool,
    no_push: bool,
    force_remove_branch: bool,
    force: bool,
    script: bool,
) -> None:
    """Push, remove the worktree and clean up the branch.

    BRANCH defaults to the branch of the current worktree. The branch is
    deleted when its PR is merged (requires gh) or with --rm.
    """
    layout = Ensure.layout(ctx)
    flags = FinishFlags(
        create_pr=create_pr,
        keep_branch=keep_branch,
        no_push=no_push,
        force_remove_branch=force_remove_branch,
        force=force,
    )
    result = lifecycle.finish(ctx, layout, branch, flags)
    _after_finish(ctx, result, script=script, command_name="finish")


@alias("d")
@click.command("delete")
@click.argument("filter_text", metavar="[FILTER]", required=False)
@finish_options
@click.option("--script", is_flag=True, hidden=True, help="Output shell script for integration.")
@click.pass_obj
@handle_errors
def delete_cmd(
    ctx: GitWtContext,
    filter_text: str | None,
    create_pr: bool,
    keep_branch: bool,
    no_push: bool,
    force_remove_branch: bool,
    force: bool,
    script: bool,
) -> None:
    """Select a worktree interactively and finish it."""
    layout = Ensure.layout(ctx)
    flags = FinishFlags(
        create_pr=create_pr,
        keep_branch=keep_branch,
        no_push=no_push,
        force_remove_branch=force_remove_branch,
        force=force,
    )
    result = lifecycle.delete(ctx, layout, filter_text, flags)
    _after_finish(ctx, result, script=script, command_name="delete")
