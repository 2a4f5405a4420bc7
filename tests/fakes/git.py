"""Fake git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from gitwt.core.git.abc import Git, WorktreeInfo


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty collections).

    Mutating operations update the in-memory registry and are recorded so
    tests can assert on them through the read-only properties.
    """

    def __init__(
        self,
        *,
        worktrees: list[WorktreeInfo] | None = None,
        branches: set[str] | None = None,
        current_branches: dict[Path, str | None] | None = None,
        trunk_branch: str = "main",
        dirty_worktrees: dict[Path, list[str]] | None = None,
        merged_branches: set[str] | None = None,
        unmerged_commits: dict[str, list[str]] | None = None,
        push_succeeds: bool = True,
        remote_delete_succeeds: bool = True,
        add_worktree_raises: Exception | None = None,
        remove_worktree_raises: Exception | None = None,
        delete_branch_raises: Exception | None = None,
        upstream_configured: bool = False,
        submodule_paths: list[str] | None = None,
        git_repos: set[Path] | None = None,
        prune_report: str = "",
        create_worktree_dirs: bool = False,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            worktrees: Registered worktrees, primary first
            branches: Local branch names (branches of worktrees are added)
            current_branches: Explicit cwd -> branch mapping; other directories
                report the branch of the worktree containing them
            trunk_branch: Value for get_trunk_branch()
            dirty_worktrees: Worktree path -> `git status --short` lines
            merged_branches: Branches reported as merged into trunk
            unmerged_commits: Branch -> one-line commit summaries
            push_succeeds: Result of push_branch()
            remote_delete_succeeds: Result of delete_remote_branch()
            add_worktree_raises: Exception raised by add_worktree()
            remove_worktree_raises: Exception raised by remove_worktree()
            delete_branch_raises: Exception raised by delete_branch()
            upstream_configured: Result of has_upstream()
            submodule_paths: Result of list_submodule_paths()
            git_repos: Paths reported as clones by is_git_repo() (in addition
                to directories that really contain .git/)
            prune_report: Output returned by prune_worktrees()
            create_worktree_dirs: Create the directory in add_worktree()
        """
        self._worktrees = list(worktrees) if worktrees is not None else []
        self._branches = set(branches) if branches is not None else set()
        self._branches.update(wt.branch for wt in self._worktrees if wt.branch is not None)
        self._current_branches = current_branches if current_branches is not None else {}
        self._trunk_branch = trunk_branch
        self._dirty_worktrees = dirty_worktrees if dirty_worktrees is not None else {}
        self._merged_branches = merged_branches if merged_branches is not None else set()
        self._unmerged_commits = unmerged_commits if unmerged_commits is not None else {}
        self._push_succeeds = push_succeeds
        self._remote_delete_succeeds = remote_delete_succeeds
        self._add_worktree_raises = add_worktree_raises
        self._remove_worktree_raises = remove_worktree_raises
        self._delete_branch_raises = delete_branch_raises
        self._upstream_configured = upstream_configured
        self._submodule_paths = submodule_paths if submodule_paths is not None else []
        self._git_repos = git_repos if git_repos is not None else set()
        self._prune_report = prune_report
        self._create_worktree_dirs = create_worktree_dirs

        self._added_worktrees: list[tuple[Path, str, str]] = []
        self._removed_worktrees: list[tuple[Path, bool]] = []
        self._deleted_branches: list[tuple[str, bool]] = []
        self._pushed_branches: list[tuple[str, str]] = []
        self._deleted_remote_branches: list[tuple[str, str]] = []
        self._chdir_history: list[Path] = []
        self._fetch_calls: list[Path] = []
        self._pull_calls: list[Path] = []
        self._prune_calls: list[Path] = []

    def list_worktrees(self, main_path: Path) -> list[WorktreeInfo]:
        return list(self._worktrees)

    def _containing_worktree(self, cwd: Path) -> WorktreeInfo | None:
        best: WorktreeInfo | None = None
        for wt in self._worktrees:
            if cwd.is_relative_to(wt.path):
                if best is None or len(wt.path.parts) > len(best.path.parts):
                    best = wt
        return best

    def get_current_branch(self, cwd: Path) -> str | None:
        if cwd in self._current_branches:
            return self._current_branches[cwd]
        wt = self._containing_worktree(cwd)
        return wt.branch if wt is not None else None

    def is_git_repo(self, path: Path) -> bool:
        return path in self._git_repos or (path / ".git").is_dir()

    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        return branch in self._branches

    def get_trunk_branch(self, repo_root: Path) -> str:
        return self._trunk_branch

    def add_worktree(self, repo_root: Path, path: Path, *, branch: str, ref: str) -> None:
        if self._add_worktree_raises is not None:
            raise self._add_worktree_raises
        if branch in self._branches:
            raise RuntimeError(f"fatal: a branch named '{branch}' already exists")
        if any(wt.path == path for wt in self._worktrees):
            raise RuntimeError(f"fatal: '{path}' already exists")

        if self._create_worktree_dirs:
            path.mkdir(parents=True, exist_ok=True)
        self._branches.add(branch)
        self._worktrees.append(WorktreeInfo(path=path, branch=branch, is_primary=False))
        self._added_worktrees.append((path, branch, ref))

    def remove_worktree(self, repo_root: Path, path: Path, *, force: bool) -> None:
        if self._remove_worktree_raises is not None:
            raise self._remove_worktree_raises
        self._worktrees = [wt for wt in self._worktrees if wt.path != path]
        self._removed_worktrees.append((path, force))

    def prune_worktrees(self, repo_root: Path) -> str:
        self._prune_calls.append(repo_root)
        return self._prune_report

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        return cwd in self._dirty_worktrees

    def get_status_lines(self, cwd: Path) -> list[str]:
        return list(self._dirty_worktrees.get(cwd, []))

    def is_branch_merged(self, repo_root: Path, branch: str, into: str) -> bool:
        return branch in self._merged_branches

    def list_unmerged_commits(
        self, repo_root: Path, branch: str, base: str, *, limit: int
    ) -> list[str]:
        return self._unmerged_commits.get(branch, [])[:limit]

    def delete_branch(self, repo_root: Path, branch: str, *, force: bool) -> None:
        if self._delete_branch_raises is not None:
            raise self._delete_branch_raises
        self._branches.discard(branch)
        self._deleted_branches.append((branch, force))

    def push_branch(self, cwd: Path, remote: str, branch: str) -> bool:
        self._pushed_branches.append((remote, branch))
        return self._push_succeeds

    def delete_remote_branch(self, repo_root: Path, remote: str, branch: str) -> bool:
        self._deleted_remote_branches.append((remote, branch))
        return self._remote_delete_succeeds

    def fetch_all(self, repo_root: Path) -> None:
        self._fetch_calls.append(repo_root)

    def has_upstream(self, cwd: Path) -> bool:
        return self._upstream_configured

    def pull(self, cwd: Path) -> None:
        self._pull_calls.append(cwd)

    def list_submodule_paths(self, repo_root: Path) -> list[str]:
        return list(self._submodule_paths)

    def safe_chdir(self, path: Path) -> bool:
        self._chdir_history.append(path)
        return True

    @property
    def added_worktrees(self) -> list[tuple[Path, str, str]]:
        """(path, branch, ref) for every add_worktree() call that succeeded."""
        return list(self._added_worktrees)

    @property
    def removed_worktrees(self) -> list[tuple[Path, bool]]:
        """(path, force) for every remove_worktree() call that succeeded."""
        return list(self._removed_worktrees)

    @property
    def deleted_branches(self) -> list[tuple[str, bool]]:
        """(branch, force) for every delete_branch() call that succeeded."""
        return list(self._deleted_branches)

    @property
    def pushed_branches(self) -> list[tuple[str, str]]:
        """(remote, branch) for every push attempt."""
        return list(self._pushed_branches)

    @property
    def deleted_remote_branches(self) -> list[tuple[str, str]]:
        return list(self._deleted_remote_branches)

    @property
    def chdir_history(self) -> list[Path]:
        return list(self._chdir_history)

    @property
    def fetch_calls(self) -> list[Path]:
        return list(self._fetch_calls)

    @property
    def pull_calls(self) -> list[Path]:
        return list(self._pull_calls)

    @property
    def prune_calls(self) -> list[Path]:
        return list(self._prune_calls)
