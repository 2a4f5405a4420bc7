import click

from gitwt.cli.alias import alias
from gitwt.cli.ensure import Ensure, handle_errors
from gitwt.cli.navigation import navigate_to
from gitwt.cli.output import user_output
from gitwt.core.context import GitWtContext
from gitwt.core.selector import select_worktree


@alias("r")
@click.command("resume")
@click.argument("filter_text", metavar="[FILTER]", required=False)
@click.option("--script", is_flag=True, hidden=True, help="Output shell script for integration.")
@click.pass_obj
@handle_errors
def resume_cmd(ctx: GitWtContext, filter_text: str | None, script: bool) -> None:
    """Switch to an existing worktree.

    FILTER matches part of a branch name or path; a menu is shown when more
    than one worktree matches.
    """
    layout = Ensure.layout(ctx)
    selected = select_worktree(
        ctx.git.list_worktrees(layout.main_path),
        main_path=layout.main_path,
        filter_text=filter_text,
        prompter=ctx.prompter,
    )

    label = selected.branch if selected.branch is not None else selected.path.name
    message = f"Switched to worktree: {label}"
    if not script:
        user_output(click.style("Worktree: ", dim=True) + click.style(label, fg="green"))
    navigate_to(ctx, selected.path, script=script, command_name="resume", message=message)


@alias("b")
@click.command("back")
@click.option("--script", is_flag=True, hidden=True, help="Output shell script for integration.")
@click.pass_obj
@handle_errors
def back_cmd(ctx: GitWtContext, script: bool) -> None:
    """Return to the main worktree."""
    layout = Ensure.layout(ctx)
    navigate_to(
        ctx,
        layout.main_path,
        script=script,
        command_name="back",
        message=f"Switched to main worktree: {layout.main_path}",
    )
