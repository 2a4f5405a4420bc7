"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes.
"""

from gitwt.core.git.abc import Git, WorktreeInfo
from gitwt.core.git.parsing import parse_worktree_porcelain
from gitwt.core.git.real import RealGit

__all__ = [
    "Git",
    "WorktreeInfo",
    "RealGit",
    "parse_worktree_porcelain",
]
