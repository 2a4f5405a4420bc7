import click

from gitwt.cli.alias import alias
from gitwt.cli.ensure import Ensure, handle_errors
from gitwt.cli.navigation import navigate_to
from gitwt.core import lifecycle
from gitwt.core.context import GitWtContext


@alias("x")
@click.command("cancel")
@click.argument("branch", required=False)
@click.option(
    "--delete-branch", is_flag=True, help="Also delete the branch (asks first if unmerged)."
)
@click.option("--script", is_flag=True, hidden=True, help="Output shell script for integration.")
@click.pass_obj
@handle_errors
def cancel_cmd(ctx: GitWtContext, branch: str | None, delete_branch: bool, script: bool) -> None:
    """Remove a worktree without pushing.

    Uncommitted changes are discarded after confirmation.
    """
    layout = Ensure.layout(ctx)
    result = lifecycle.cancel(ctx, layout, branch, delete_branch=delete_branch)

    if result.navigate_to is not None:
        navigate_to(
            ctx,
            result.navigate_to,
            script=script,
            command_name="cancel",
            message="Changed directory to main worktree",
        )
