import click

from gitwt.cli.output import machine_output
from gitwt.cli.shell_utils import SUPPORTED_SHELLS, render_shell_wrapper


@click.command("shell-init")
@click.argument("shell", type=click.Choice(SUPPORTED_SHELLS), default="bash")
def shell_init_cmd(shell: str) -> None:
    """Print the shell wrapper that lets git-wt change directories.

    Add `eval "$(git-wt shell-init bash)"` (or zsh) to your shell rc file.
    """
    machine_output(render_shell_wrapper(shell), nl=False)
