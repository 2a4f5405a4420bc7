"""Restructuring of an existing clone into the worktree layout.

    project/            project/
      .git/       ->      main/      (the original clone, unchanged)
      src/                trees/
                          .git-worktree
                          .git-worktree-shared
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from gitwt.core.context import GitWtContext
from gitwt.core.errors import Aborted, InitError
from gitwt.core.root_locator import ProjectLayout

logger = logging.getLogger(__name__)

MIGRATE_SUFFIX = ".worktree-migrate.tmp"
SUBMODULE_HEADING = "# Submodules (auto-detected)"

SHARED_CONFIG_TEMPLATE = """\
# git-wt shared paths configuration
#
# List paths (relative to repo root) that should be symlinked from main to all worktrees.
# This is useful for:
#   - Submodules (auto-detected below)
#   - Database files (.lq/, app.db)
#   - Cache directories (.cache/, node_modules/.cache)
#   - Log directories (logs/, .logs/)
#   - Build artifacts (dist/, build/)
#
# One path per line. Lines starting with # are comments.
# Paths are matched exactly; wildcards are not expanded.
#
# Example:
# .lq
# .cache
# logs

"""


@dataclass(frozen=True)
class InitResult:
    layout: ProjectLayout
    submodules_added: list[str]
    submodules_skipped: list[str]


def _validate(ctx: GitWtContext, project_path: Path) -> None:
    if not project_path.is_dir():
        raise InitError(f"Path does not exist: {project_path}")

    if not ctx.git.is_git_repo(project_path):
        raise InitError(f"Not a git repository: {project_path}")

    for name in (ctx.settings.main_dir, ctx.settings.trees_dir):
        if (project_path / name).is_dir():
            raise InitError(f"Already restructured ({name}/ exists): {project_path}")


def _partition_submodules(main_path: Path, paths: list[str]) -> tuple[list[str], list[str]]:
    initialized: list[str] = []
    skipped: list[str] = []
    for sm_path in paths:
        # .git is a file for absorbed submodules, a directory for old-style ones
        git_entry = main_path / sm_path / ".git"
        if git_entry.exists():
            initialized.append(sm_path)
        else:
            skipped.append(sm_path)
    return initialized, skipped


def initialize_project(ctx: GitWtContext, project_path: Path) -> InitResult:
    """Move the clone at project_path into project_path/main and add the layout.

    Args:
        ctx: Application context
        project_path: Absolute path of an existing clone

    Raises:
        InitError: If the path is not a clone or is already restructured
        Aborted: If the clone is dirty and the user declines to continue
    """
    _validate(ctx, project_path)

    if ctx.git.has_uncommitted_changes(project_path):
        ctx.feedback.warning("Warning: uncommitted changes detected")
        if not ctx.prompter.confirm("Continue anyway?"):
            raise Aborted()

    name = project_path.name
    settings = ctx.settings
    ctx.feedback.info(f"Restructuring: {project_path}")
    ctx.feedback.info(f"  {name}/ → {name}/{settings.main_dir}/ + {name}/{settings.trees_dir}/")

    temp_path = project_path.with_name(name + MIGRATE_SUFFIX)
    if temp_path.exists():
        raise InitError(f"Temporary path already exists: {temp_path}")

    layout = ProjectLayout.at(project_path, settings)
    logger.debug("init: %s -> %s -> %s", project_path, temp_path, layout.main_path)

    project_path.rename(temp_path)
    project_path.mkdir()
    temp_path.rename(layout.main_path)
    layout.trees_path.mkdir()
    layout.marker_path.touch()
    layout.shared_config_path.write_text(SHARED_CONFIG_TEMPLATE, encoding="utf-8")

    initialized, skipped = _partition_submodules(
        layout.main_path, ctx.git.list_submodule_paths(layout.main_path)
    )

    if initialized:
        with layout.shared_config_path.open("a", encoding="utf-8") as f:
            f.write(SUBMODULE_HEADING + "\n")
            f.write("".join(f"{sm_path}\n" for sm_path in initialized))
            f.write("\n")
        ctx.feedback.info(f"Added {len(initialized)} submodule(s) to shared paths")

    if skipped:
        ctx.feedback.warning(
            f"Skipped {len(skipped)} uninitialized submodule(s): {' '.join(skipped)}"
        )
        ctx.feedback.info(
            f"Initialize them in {settings.main_dir} and add to {settings.shared_config} manually"
        )

    return InitResult(layout=layout, submodules_added=initialized, submodules_skipped=skipped)
