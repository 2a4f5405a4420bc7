import click

from gitwt.cli.alias import alias
from gitwt.cli.ensure import Ensure, handle_errors
from gitwt.cli.output import machine_output
from gitwt.core.context import GitWtContext
from gitwt.core.git.abc import WorktreeInfo
from gitwt.core.worktree_utils import find_current_worktree

BRANCH_COLUMN_WIDTH = 20


def format_worktree_line(wt: WorktreeInfo) -> str:
    """Format one worktree row: padded branch, path, [main] marker.

    Padding is applied before styling so ANSI codes don't skew the column.
    """
    branch = wt.branch if wt.branch is not None else "(detached)"
    branch_part = click.style(f"{branch:<{BRANCH_COLUMN_WIDTH}}", fg="green")
    path_part = click.style(str(wt.path), fg="cyan")
    marker = " " + click.style("[main]", dim=True) if wt.is_primary else ""
    return f"  {branch_part} {path_part}{marker}"


@alias("l")
@click.command("list")
@click.pass_obj
@handle_errors
def list_cmd(ctx: GitWtContext) -> None:
    """Show all worktrees."""
    layout = Ensure.layout(ctx)
    worktrees = ctx.git.list_worktrees(layout.main_path)

    machine_output("Git worktrees:")
    machine_output()
    for wt in worktrees:
        machine_output(format_worktree_line(wt))


@alias("st")
@click.command("status")
@click.pass_obj
@handle_errors
def status_cmd(ctx: GitWtContext) -> None:
    """Show the current worktree and totals."""
    layout = Ensure.layout(ctx)
    worktrees = ctx.git.list_worktrees(layout.main_path)
    current = find_current_worktree(worktrees, ctx.cwd)
    current_branch = ctx.git.get_current_branch(ctx.cwd)

    machine_output("Git worktree status:")
    machine_output()

    if current is None:
        machine_output("  Current: " + click.style("(not inside a worktree)", dim=True))
    else:
        name = "main" if current.is_primary else (current.branch or "(detached)")
        machine_output("  Current: " + click.style(name, fg="green") + " worktree")
        branch_label = current_branch if current_branch is not None else "(detached)"
        machine_output("  Branch:  " + click.style(branch_label, fg="green"))
        machine_output("  Path:    " + click.style(str(current.path), fg="cyan"))
    machine_output()

    total = len(worktrees)
    feature = sum(1 for wt in worktrees if not wt.is_primary)
    main_count = total - feature
    machine_output(
        click.style(
            f"  Total worktrees: {total} ({main_count} main + {feature} feature)", dim=True
        )
    )
