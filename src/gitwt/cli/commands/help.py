import click

from gitwt.cli.alias import alias
from gitwt.cli.output import machine_output


@alias("h")
@click.command("help")
@click.pass_context
def help_cmd(ctx: click.Context) -> None:
    """Show this help message."""
    parent = ctx.parent
    if parent is None:
        return
    machine_output(parent.get_help())
