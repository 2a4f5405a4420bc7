"""Error taxonomy for git-wt operations.

Core modules raise these; the CLI boundary renders them as a red
``Error:`` line (plus any detail lines) and exits with status 1.
"""

from pathlib import Path


class GitWtError(Exception):
    """Base class for every condition that stops a git-wt command."""

    def __init__(self, message: str, *, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []


class RootNotFound(GitWtError):
    """No ProjectRoot is reachable from the working directory."""

    def __init__(self) -> None:
        super().__init__(
            "Not in a git worktree-managed repository",
            details=["Run 'git-wt init' to set up worktree structure"],
        )


class BranchAlreadyExists(GitWtError):
    def __init__(self, branch: str) -> None:
        super().__init__(
            f"Branch '{branch}' already exists",
            details=[f"Use 'git-wt resume {branch}' to switch to it"],
        )
        self.branch = branch


class WorktreeCreationFailed(GitWtError):
    pass


class WorktreeRemovalFailed(GitWtError):
    pass


class WorktreeNotFound(GitWtError):
    def __init__(self, branch: str | None) -> None:
        if branch is None:
            message = "Could not determine the current branch (detached HEAD?)"
        else:
            message = f"Worktree for branch '{branch}' not found"
        super().__init__(message)
        self.branch = branch


class CannotFinishPrimary(GitWtError):
    def __init__(self, action: str) -> None:
        super().__init__(
            f"Cannot {action} main worktree",
            details=["Please specify a branch name or run from a feature worktree"],
        )


class DirtyWorktree(GitWtError):
    """Uncommitted changes would be destroyed by removing the worktree."""

    def __init__(self, worktree_path: Path, status_lines: list[str]) -> None:
        super().__init__(
            "Worktree has uncommitted changes",
            details=[*status_lines, "Use --force to remove anyway"],
        )
        self.worktree_path = worktree_path
        self.status_lines = status_lines


class NoMatch(GitWtError):
    def __init__(self, filter_text: str | None) -> None:
        if filter_text:
            super().__init__(f"No worktrees matching '{filter_text}' found")
        else:
            super().__init__(
                "No worktrees found",
                details=["Use 'git-wt start BRANCH_NAME' to create one"],
            )
        self.filter_text = filter_text


class InvalidSelection(GitWtError):
    def __init__(self, answer: str) -> None:
        super().__init__(f"Invalid choice: '{answer}'")
        self.answer = answer


class Aborted(GitWtError):
    """The user declined a confirmation gate."""

    def __init__(self, message: str = "Aborted") -> None:
        super().__init__(message)


class InitError(GitWtError):
    pass
