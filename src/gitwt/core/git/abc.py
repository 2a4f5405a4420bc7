"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
codebase more testable and maintainable.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit (tests/fakes/git.py): In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class WorktreeInfo:
    """Information about a single git worktree.

    branch is None for a detached checkout.
    """

    path: Path
    branch: str | None
    is_primary: bool = False


# ============================================================================
# Abstract Interface
# ============================================================================


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def list_worktrees(self, main_path: Path) -> list[WorktreeInfo]:
        """List all worktrees registered with the repository.

        Always queries git; the registry can change outside git-wt.

        Args:
            main_path: Path to the primary worktree. Entries whose path resolves
                to it are marked is_primary.
        """
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch (None if detached or unborn)."""
        ...

    @abstractmethod
    def is_git_repo(self, path: Path) -> bool:
        """Check whether path is the top of a regular (non-worktree) clone."""
        ...

    @abstractmethod
    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Check whether a local branch exists."""
        ...

    @abstractmethod
    def get_trunk_branch(self, repo_root: Path) -> str:
        """Get the trunk branch name for the repository.

        Detects trunk by checking git's remote HEAD reference. Falls back to
        checking for existence of common trunk branch names if detection fails.
        """
        ...

    @abstractmethod
    def add_worktree(self, repo_root: Path, path: Path, *, branch: str, ref: str) -> None:
        """Create `branch` from `ref` and check it out in a new worktree at `path`.

        Raises:
            RuntimeError: If git refuses (path exists, bad ref, branch exists)
        """
        ...

    @abstractmethod
    def remove_worktree(self, repo_root: Path, path: Path, *, force: bool) -> None:
        """Remove a worktree.

        Args:
            repo_root: Path to the primary worktree
            path: Path to the worktree to remove
            force: True to force removal even if worktree has uncommitted changes

        Raises:
            RuntimeError: If git refuses to remove the worktree
        """
        ...

    @abstractmethod
    def prune_worktrees(self, repo_root: Path) -> str:
        """Prune stale worktree metadata and return git's verbose report."""
        ...

    @abstractmethod
    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check if a worktree has uncommitted changes.

        Uses git status --porcelain, so untracked files count as well: a
        non-forced `worktree remove` refuses those too.
        """
        ...

    @abstractmethod
    def get_status_lines(self, cwd: Path) -> list[str]:
        """Get `git status --short` lines for reporting modified paths."""
        ...

    @abstractmethod
    def is_branch_merged(self, repo_root: Path, branch: str, into: str) -> bool:
        """Check whether `branch` is fully merged into `into`."""
        ...

    @abstractmethod
    def list_unmerged_commits(
        self, repo_root: Path, branch: str, base: str, *, limit: int
    ) -> list[str]:
        """One-line summaries of commits on `branch` that are not on `base`."""
        ...

    @abstractmethod
    def delete_branch(self, repo_root: Path, branch: str, *, force: bool) -> None:
        """Delete a local branch.

        Args:
            repo_root: Working directory to run command in
            branch: Name of the branch to delete
            force: Use -D (force delete) instead of -d

        Raises:
            RuntimeError: If git refuses to delete the branch
        """
        ...

    @abstractmethod
    def push_branch(self, cwd: Path, remote: str, branch: str) -> bool:
        """Push `branch` to `remote` and set upstream. Returns False on failure."""
        ...

    @abstractmethod
    def delete_remote_branch(self, repo_root: Path, remote: str, branch: str) -> bool:
        """Delete `branch` on `remote`. Returns False on failure."""
        ...

    @abstractmethod
    def fetch_all(self, repo_root: Path) -> None:
        """Fetch all remotes, pruning deleted remote branches."""
        ...

    @abstractmethod
    def has_upstream(self, cwd: Path) -> bool:
        """Check whether the checked-out branch tracks an upstream."""
        ...

    @abstractmethod
    def pull(self, cwd: Path) -> None:
        """Pull the checked-out branch from its upstream."""
        ...

    @abstractmethod
    def list_submodule_paths(self, repo_root: Path) -> list[str]:
        """Submodule paths declared in .gitmodules (empty if none)."""
        ...

    @abstractmethod
    def safe_chdir(self, path: Path) -> bool:
        """Change current directory if path exists on real filesystem.

        Used before removing worktrees so the process is never left standing
        in a deleted directory. In tests (FakeGit), records the request
        instead of changing directory.

        Returns:
            True if directory change succeeded, False otherwise
        """
        ...
