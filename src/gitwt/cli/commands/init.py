from pathlib import Path

import click

from gitwt.cli.alias import alias
from gitwt.cli.ensure import handle_errors
from gitwt.cli.navigation import navigate_to
from gitwt.cli.output import user_output
from gitwt.core.context import GitWtContext
from gitwt.core.project_init import initialize_project


@alias("i")
@click.command("init")
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option("-C", "--no-cd", "no_cd", is_flag=True, help="Stay in the current directory.")
@click.option("--script", is_flag=True, hidden=True, help="Output shell script for integration.")
@click.pass_obj
@handle_errors
def init_cmd(ctx: GitWtContext, path: Path | None, no_cd: bool, script: bool) -> None:
    """Restructure an existing clone into main/ + trees/.

    PATH defaults to the current directory and must be the top of a clone.
    """
    project_path = (ctx.cwd / path).resolve() if path is not None else ctx.cwd
    result = initialize_project(ctx, project_path)

    layout = result.layout
    name = layout.root.name
    user_output()
    user_output("Done! Structure is now:")
    user_output(f"  {name}/")
    user_output(f"  ├── {layout.main_path.name}/    # your repo")
    user_output(f"  ├── {layout.trees_path.name}/   # worktrees go here")
    user_output(f"  └── {layout.shared_config_path.name}   # shared paths config")
    user_output()
    shared_name = layout.shared_config_path.name
    user_output(f"Edit {shared_name} to configure paths shared between worktrees")
    user_output()
    user_output("Create worktrees with:")
    user_output("  git-wt start <branch-name>")

    if not no_cd:
        navigate_to(
            ctx,
            layout.main_path,
            script=script,
            command_name="init",
            message="Changed directory to main worktree",
        )
