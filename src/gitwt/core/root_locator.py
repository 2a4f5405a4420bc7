"""Project root discovery.

Discovers the worktree-managed project layout from any directory without
touching git, so commands can fail fast before any subprocess runs.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from gitwt.core.settings import GitWtSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectLayout:
    """A project root and the well-known paths beneath it."""

    root: Path
    main_path: Path  # <root>/main, the primary worktree
    trees_path: Path  # <root>/trees, container for feature worktrees
    marker_path: Path
    shared_config_path: Path

    @staticmethod
    def at(root: Path, settings: GitWtSettings) -> "ProjectLayout":
        return ProjectLayout(
            root=root,
            main_path=root / settings.main_dir,
            trees_path=root / settings.trees_dir,
            marker_path=root / settings.marker,
            shared_config_path=root / settings.shared_config,
        )


@dataclass(frozen=True)
class NoRootSentinel:
    """Sentinel value indicating execution outside a worktree-managed project.

    Commands that require a layout check for this sentinel and fail fast.
    """

    message: str = "Not in a git worktree-managed repository"


def _has_structure(directory: Path, settings: GitWtSettings) -> bool:
    return (directory / settings.main_dir).is_dir() and (directory / settings.trees_dir).is_dir()


def locate_root(start_dir: Path, settings: GitWtSettings) -> ProjectLayout | NoRootSentinel:
    """Walk up from `start_dir` to find the project root.

    A directory is the root if it holds the marker file, or if it holds both
    the primary worktree directory and the trees directory. The parent of
    each visited directory is checked structurally as well, so the search
    also succeeds from directly inside `main/` or `trees/`.

    The start path is made absolute but symlinks are not resolved: a shared
    path inside a feature worktree must locate the feature's project, not
    the target of the link.

    Args:
        start_dir: Directory to start the search from
        settings: Directory and marker names

    Returns:
        ProjectLayout if found, NoRootSentinel otherwise
    """
    current = start_dir.absolute()

    while current != current.parent:
        if (current / settings.marker).is_file():
            logger.debug("Found project root by marker: %s", current)
            return ProjectLayout.at(current, settings)

        if _has_structure(current, settings):
            logger.debug("Found project root by structure: %s", current)
            return ProjectLayout.at(current, settings)

        parent = current.parent
        if _has_structure(parent, settings):
            logger.debug("Found project root one level up: %s", parent)
            return ProjectLayout.at(parent, settings)

        current = parent

    return NoRootSentinel(message=f"Not in a git worktree-managed repository ({start_dir})")
