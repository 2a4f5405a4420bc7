"""Utility functions for worktree operations.

This module provides pure business logic functions for worktree operations,
separated from I/O and CLI concerns. These functions work with data objects
(WorktreeInfo) and enable fast unit testing.
"""

from pathlib import Path

from gitwt.core.git.abc import WorktreeInfo

PATH_PREFIXES = ("/", "./", "../")


def looks_like_path(argument: str) -> bool:
    """Classify a command-line argument as a filesystem path.

    An argument is a path when it starts with "/", "./" or "../". Anything
    else, including names with slashes such as "feature/login", is a branch
    name.

    Examples:
        >>> looks_like_path("../elsewhere/wt")
        True
        >>> looks_like_path("feature/login")
        False
    """
    return argument.startswith(PATH_PREFIXES)


def find_worktree_containing_path(worktrees: list[WorktreeInfo], target_path: Path) -> Path | None:
    """Find which worktree contains the given path.

    Returns the most specific (deepest) match to handle nested worktrees correctly.

    Args:
        worktrees: List of WorktreeInfo objects to search
        target_path: Path to check (should be resolved)

    Returns:
        Path to the worktree that contains target_path, or None if not found

    Examples:
        >>> worktrees = [WorktreeInfo(Path("/p/main"), "main", True),
        ...              WorktreeInfo(Path("/p/trees/feat"), "feat", False)]
        >>> find_worktree_containing_path(worktrees, Path("/p/trees/feat/src"))
        Path("/p/trees/feat")
    """
    best_match: Path | None = None
    best_match_depth = -1

    for wt in worktrees:
        wt_path = wt.path.resolve()
        if target_path.is_relative_to(wt_path):
            depth = len(wt_path.parts)
            if depth > best_match_depth:
                best_match = wt_path
                best_match_depth = depth

    return best_match


def find_current_worktree(worktrees: list[WorktreeInfo], current_dir: Path) -> WorktreeInfo | None:
    """Find the WorktreeInfo object for the worktree containing current_dir.

    Args:
        worktrees: List of WorktreeInfo objects to search
        current_dir: Current directory path

    Returns:
        WorktreeInfo object if found, None if not in any worktree
    """
    wt_path = find_worktree_containing_path(worktrees, current_dir.resolve())
    if wt_path is None:
        return None

    for wt in worktrees:
        if wt.path.resolve() == wt_path:
            return wt

    return None


def find_worktree_for_branch(worktrees: list[WorktreeInfo], branch: str) -> WorktreeInfo | None:
    """Find the worktree that has `branch` checked out."""
    for wt in worktrees:
        if wt.branch == branch:
            return wt
    return None


def is_primary_worktree(worktree_path: Path, main_path: Path) -> bool:
    """Check if a worktree path is the primary worktree.

    Examples:
        >>> is_primary_worktree(Path("/p/main"), Path("/p/main"))
        True
        >>> is_primary_worktree(Path("/p/trees/feat"), Path("/p/main"))
        False
    """
    return worktree_path.resolve() == main_path.resolve()


def is_inside(path: Path, directory: Path) -> bool:
    """Check whether path is directory itself or somewhere beneath it."""
    return path.resolve().is_relative_to(directory.resolve())
