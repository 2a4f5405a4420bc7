import click

from gitwt.cli.ensure import Ensure
from gitwt.cli.output import machine_output, user_output
from gitwt.core.context import GitWtContext
from gitwt.core.settings import (
    SETTING_KEYS,
    load_settings,
    save_settings,
    settings_path,
    update_setting,
)


def _format_value(value: str | None) -> str:
    return value if value is not None else "(auto)"


@click.group("config")
def config_group() -> None:
    """Manage global git-wt settings (~/.git-wt/config.toml)."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: GitWtContext) -> None:
    """Print effective settings, including GIT_WT_* overrides."""
    user_output(click.style(f"Settings ({settings_path()}):", bold=True))
    for key in SETTING_KEYS:
        machine_output(f"  {key}={_format_value(getattr(ctx.settings, key))}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: GitWtContext, key: str) -> None:
    """Print the effective value of KEY."""
    Ensure.invariant(key in SETTING_KEYS, f"Invalid setting: {key}")
    machine_output(_format_value(getattr(ctx.settings, key)))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
def config_set(key: str, value: str) -> None:
    """Persist KEY=VALUE in the global settings file.

    An empty VALUE for trunk_branch restores auto-detection.
    """
    path = settings_path()
    # Environment overrides stay out of the file
    try:
        stored = load_settings(path, environ={})
        updated = update_setting(stored, key, value)
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    save_settings(updated, path)
    user_output(f"Set {key}={_format_value(getattr(updated, key))}")
