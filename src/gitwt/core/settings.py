"""Settings data structures and loading.

Provides immutable settings loaded from ~/.git-wt/config.toml, with
environment-variable overrides. Loaded once at the CLI entry point and
stored in GitWtContext; nothing reads process-wide state after that.
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path

import tomlkit

ENV_PREFIX = "GIT_WT_"


@dataclass(frozen=True)
class GitWtSettings:
    """Immutable layout and workflow settings.

    Attributes:
        main_dir: Directory name of the primary worktree under the project root
        trees_dir: Directory name of the feature worktree container
        marker: Sentinel file name identifying the project root
        shared_config: File name of the shared-path list at the project root
        remote: Remote used for push and remote branch deletion
        trunk_branch: Trunk used for merge checks (None = auto-detect)
        default_source: Source branch for new worktrees when HEAD is unborn/detached
    """

    main_dir: str = "main"
    trees_dir: str = "trees"
    marker: str = ".git-worktree"
    shared_config: str = ".git-worktree-shared"
    remote: str = "origin"
    trunk_branch: str | None = None
    default_source: str = "main"


SETTING_KEYS = tuple(f.name for f in fields(GitWtSettings))
_DIRECTORY_KEYS = ("main_dir", "trees_dir", "marker", "shared_config")


def settings_path() -> Path:
    """Get the path to the global settings file."""
    return Path.home() / ".git-wt" / "config.toml"


def load_settings(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> GitWtSettings:
    """Load settings: defaults, then the TOML file, then GIT_WT_* env vars.

    Args:
        path: Settings file path (defaults to ~/.git-wt/config.toml)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        GitWtSettings with every layer applied

    Raises:
        ValueError: If the file or an env var holds an invalid value
    """
    config_path = path if path is not None else settings_path()
    env = environ if environ is not None else os.environ

    settings = GitWtSettings()

    if config_path.exists():
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        for key, value in data.items():
            if key not in SETTING_KEYS:
                raise ValueError(f"Unknown setting '{key}' in {config_path}")
            settings = update_setting(settings, key, str(value))

    for key in SETTING_KEYS:
        env_value = env.get(ENV_PREFIX + key.upper())
        if env_value:
            settings = update_setting(settings, key, env_value)

    return settings


def update_setting(settings: GitWtSettings, key: str, value: str) -> GitWtSettings:
    """Return a copy of settings with one key replaced.

    Raises:
        ValueError: If the key is unknown or the value is not usable for it
    """
    if key not in SETTING_KEYS:
        raise ValueError(f"Invalid setting: {key}")

    if key in _DIRECTORY_KEYS:
        if not value or value in (".", "..") or "/" in value:
            raise ValueError(f"Invalid value for {key}: '{value}' must be a single path component")

    if key == "trunk_branch" and value == "":
        return replace(settings, trunk_branch=None)

    return replace(settings, **{key: value})


def save_settings(settings: GitWtSettings, path: Path | None = None) -> None:
    """Save settings to ~/.git-wt/config.toml, preserving comments.

    Only values that differ from the defaults are written.
    """
    config_path = path if path is not None else settings_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    if config_path.exists():
        doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
    else:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("Global git-wt configuration"))

    defaults = GitWtSettings()
    for key in SETTING_KEYS:
        value = getattr(settings, key)
        if value is None or value == getattr(defaults, key):
            if key in doc:
                del doc[key]
            continue
        doc[key] = value

    config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
