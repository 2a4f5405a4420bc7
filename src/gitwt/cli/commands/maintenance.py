import click

from gitwt.cli.alias import alias
from gitwt.cli.ensure import Ensure, handle_errors
from gitwt.cli.navigation import navigate_to
from gitwt.cli.output import user_output
from gitwt.core.context import GitWtContext


@alias("p")
@click.command("prune")
@click.pass_obj
@handle_errors
def prune_cmd(ctx: GitWtContext) -> None:
    """Clean up metadata of worktrees deleted by hand."""
    layout = Ensure.layout(ctx)

    user_output("Pruning deleted worktrees...")
    report = ctx.git.prune_worktrees(layout.main_path)
    if report:
        user_output(report)
    user_output("Done")


@click.command("sync")
@click.option("--script", is_flag=True, hidden=True, help="Output shell script for integration.")
@click.pass_obj
@handle_errors
def sync_cmd(ctx: GitWtContext, script: bool) -> None:
    """Fetch all remotes and pull in the main worktree."""
    layout = Ensure.layout(ctx)
    main_path = layout.main_path

    user_output("Syncing main worktree: " + click.style(str(main_path), fg="cyan"))

    user_output("Fetching updates...")
    ctx.git.fetch_all(main_path)

    current_branch = ctx.git.get_current_branch(main_path)
    branch_label = current_branch if current_branch is not None else "(detached)"
    user_output("Current branch: " + click.style(branch_label, fg="green"))

    if ctx.git.has_upstream(main_path):
        user_output("Pulling updates...")
        ctx.git.pull(main_path)
    else:
        user_output(click.style("No tracking branch configured", dim=True))

    user_output("Sync complete")

    navigate_to(
        ctx,
        main_path,
        script=script,
        command_name="sync",
        message=f"Switched to main worktree: {main_path}",
    )
