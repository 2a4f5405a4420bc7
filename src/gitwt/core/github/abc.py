"""Abstract base class for GitHub operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from gitwt.core.github.types import PRInfo


class GitHub(ABC):
    """Abstract interface for the optional pull-request collaborator.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the gh CLI is installed."""
        ...

    @abstractmethod
    def create_pr(self, worktree_path: Path) -> bool:
        """Interactively create a PR for the branch checked out at worktree_path.

        Returns:
            True if gh reported success
        """
        ...

    @abstractmethod
    def get_pr_status(self, repo_root: Path, branch: str) -> PRInfo:
        """Get PR status for a specific branch.

        Returns:
            PRInfo with state "OPEN", "MERGED", "CLOSED", or "NONE" when no PR
            exists or the status cannot be determined
        """
        ...
