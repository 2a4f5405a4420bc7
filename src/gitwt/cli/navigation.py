"""Changing the caller's directory at the end of a command."""

from pathlib import Path

import click

from gitwt.cli.output import user_output
from gitwt.cli.shell_utils import render_cd_script
from gitwt.core.context import GitWtContext


def navigate_to(
    ctx: GitWtContext, target: Path, *, script: bool, command_name: str, message: str
) -> None:
    """Move the calling shell into target.

    In script mode a cd script is written and its path printed on stdout
    for the shell wrapper to source. Otherwise the user gets the cd command
    to run by hand.

    Args:
        ctx: Application context (for script_writer)
        target: Directory to move into
        script: Whether the shell wrapper invoked the command with --script
        command_name: Name of the command (for script naming)
        message: Message shown once the directory changed
    """
    if script:
        content = render_cd_script(
            target, comment=f"cd to {target.name}", success_message=message
        )
        result = ctx.script_writer.write_activation_script(
            content, command_name=command_name, comment=f"cd to {target.name}"
        )
        result.output_for_shell_integration()
        return

    user_output(click.style("To switch, run: ", dim=True) + f"cd {target}")
    user_output(
        click.style(
            "Enable automatic cd with: eval \"$(git-wt shell-init bash)\"", dim=True
        )
    )
