"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import os
from pathlib import Path

from gitwt.core.git.abc import Git, WorktreeInfo
from gitwt.core.git.parsing import parse_worktree_porcelain
from gitwt.core.subprocess import run_quietly, run_subprocess_with_context

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def list_worktrees(self, main_path: Path) -> list[WorktreeInfo]:
        """List all worktrees registered with the repository."""
        result = run_subprocess_with_context(
            ["git", "worktree", "list", "--porcelain"],
            operation_context="list worktrees",
            cwd=main_path,
        )

        primary = main_path.resolve()
        return [
            WorktreeInfo(path=path, branch=branch, is_primary=path.resolve() == primary)
            for path, branch in parse_worktree_porcelain(result.stdout)
        ]

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch."""
        result = run_quietly(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd)
        if result.returncode != 0:
            return None

        branch = result.stdout.strip()
        if branch == "HEAD":
            return None

        return branch

    def is_git_repo(self, path: Path) -> bool:
        """Check whether path is the top of a regular clone."""
        return (path / ".git").is_dir()

    def branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Check whether a local branch exists."""
        result = run_quietly(
            ["git", "show-ref", "--verify", "--quiet", f"refs/heads/{branch}"], cwd=repo_root
        )
        return result.returncode == 0

    def get_trunk_branch(self, repo_root: Path) -> str:
        """Get the trunk branch name for the repository."""
        # 1. Try git symbolic-ref to detect default branch
        result = run_quietly(["git", "symbolic-ref", "refs/remotes/origin/HEAD"], cwd=repo_root)
        if result.returncode == 0:
            # Parse "refs/remotes/origin/master" -> "master"
            ref = result.stdout.strip()
            if ref.startswith("refs/remotes/origin/"):
                return ref.replace("refs/remotes/origin/", "")

        # 2. Fallback: try 'main' then 'master', use first that exists
        for candidate in ["main", "master"]:
            if self.branch_exists(repo_root, candidate):
                return candidate

        # 3. Final fallback: 'main'
        return "main"

    def add_worktree(self, repo_root: Path, path: Path, *, branch: str, ref: str) -> None:
        """Create a branch and its worktree in one git call."""
        run_subprocess_with_context(
            ["git", "worktree", "add", "-b", branch, str(path), ref],
            operation_context=f"add worktree with new branch '{branch}' at {path}",
            cwd=repo_root,
        )

    def remove_worktree(self, repo_root: Path, path: Path, *, force: bool) -> None:
        """Remove a worktree."""
        cmd = ["git", "worktree", "remove"]
        if force:
            cmd.append("--force")
        cmd.append(str(path))
        run_subprocess_with_context(
            cmd,
            operation_context=f"remove worktree at {path}",
            cwd=repo_root,
        )

    def prune_worktrees(self, repo_root: Path) -> str:
        """Prune stale worktree metadata."""
        result = run_subprocess_with_context(
            ["git", "worktree", "prune", "-v"],
            operation_context="prune worktree metadata",
            cwd=repo_root,
        )
        # git reports pruned entries on stderr
        return "\n".join(part for part in (result.stdout, result.stderr) if part).strip()

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check if a worktree has uncommitted changes."""
        result = run_quietly(["git", "status", "--porcelain"], cwd=cwd)
        if result.returncode != 0:
            return False
        return bool(result.stdout.strip())

    def get_status_lines(self, cwd: Path) -> list[str]:
        """Get `git status --short` lines."""
        result = run_quietly(["git", "status", "--short"], cwd=cwd)
        if result.returncode != 0:
            return []
        return [line for line in result.stdout.splitlines() if line.strip()]

    def is_branch_merged(self, repo_root: Path, branch: str, into: str) -> bool:
        """Check whether `branch` is fully merged into `into`."""
        result = run_quietly(
            ["git", "branch", "--merged", into, "--format=%(refname:short)"], cwd=repo_root
        )
        if result.returncode != 0:
            return False
        return branch in (line.strip() for line in result.stdout.splitlines())

    def list_unmerged_commits(
        self, repo_root: Path, branch: str, base: str, *, limit: int
    ) -> list[str]:
        """One-line summaries of commits on `branch` that are not on `base`."""
        result = run_quietly(
            ["git", "log", "--oneline", f"-{limit}", f"{base}..{branch}"], cwd=repo_root
        )
        if result.returncode != 0:
            return []
        return [line for line in result.stdout.splitlines() if line.strip()]

    def delete_branch(self, repo_root: Path, branch: str, *, force: bool) -> None:
        """Delete a local branch."""
        flag = "-D" if force else "-d"
        run_subprocess_with_context(
            ["git", "branch", flag, branch],
            operation_context=f"delete branch '{branch}'",
            cwd=repo_root,
        )

    def push_branch(self, cwd: Path, remote: str, branch: str) -> bool:
        """Push `branch` to `remote` and set upstream."""
        result = run_quietly(["git", "push", "-u", remote, branch], cwd=cwd)
        return result.returncode == 0

    def delete_remote_branch(self, repo_root: Path, remote: str, branch: str) -> bool:
        """Delete `branch` on `remote`."""
        result = run_quietly(["git", "push", remote, "--delete", branch], cwd=repo_root)
        return result.returncode == 0

    def fetch_all(self, repo_root: Path) -> None:
        """Fetch all remotes, pruning deleted remote branches."""
        run_subprocess_with_context(
            ["git", "fetch", "--all", "--prune"],
            operation_context="fetch all remotes",
            cwd=repo_root,
        )

    def has_upstream(self, cwd: Path) -> bool:
        """Check whether the checked-out branch tracks an upstream."""
        result = run_quietly(
            ["git", "rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}"], cwd=cwd
        )
        return result.returncode == 0

    def pull(self, cwd: Path) -> None:
        """Pull the checked-out branch from its upstream."""
        run_subprocess_with_context(
            ["git", "pull"],
            operation_context="pull from upstream",
            cwd=cwd,
        )

    def list_submodule_paths(self, repo_root: Path) -> list[str]:
        """Submodule paths declared in .gitmodules."""
        if not (repo_root / ".gitmodules").is_file():
            return []
        result = run_quietly(
            [
                "git",
                "config",
                "-f",
                ".gitmodules",
                "--get-regexp",
                r"^submodule\..*\.path$",
            ],
            cwd=repo_root,
        )
        if result.returncode != 0:
            return []

        paths: list[str] = []
        for line in result.stdout.splitlines():
            parts = line.split(maxsplit=1)
            if len(parts) == 2:
                paths.append(parts[1].strip())
        return paths

    def safe_chdir(self, path: Path) -> bool:
        """Change current directory if path exists on real filesystem."""
        if not path.exists():
            return False
        os.chdir(path)
        return True
