"""Production GitHub implementation using the gh CLI."""

import json
import logging
import shutil
import subprocess
from pathlib import Path

from gitwt.core.github.abc import GitHub
from gitwt.core.github.types import PRInfo

logger = logging.getLogger(__name__)

_NO_PR = PRInfo("NONE", None, None)


def _run_gh(args: list[str], cwd: Path) -> str:
    """Run gh with captured output and return stdout.

    Raises:
        RuntimeError: If gh exits non-zero
        FileNotFoundError: If gh is not on PATH
    """
    proc = subprocess.run(["gh", *args], cwd=cwd, capture_output=True, text=True, check=False)
    if proc.returncode != 0:
        detail = proc.stderr.strip() or "no output"
        raise RuntimeError(f"gh {args[0]} {args[1]} exited {proc.returncode}: {detail}")
    return proc.stdout


def _first_pr(stdout: str) -> PRInfo:
    """Turn a `gh pr list --json` array into a PRInfo for its first entry."""
    entries = json.loads(stdout)
    if not entries:
        return _NO_PR
    head = entries[0]
    return PRInfo(head["state"], head.get("number"), head.get("title"))


class RealGitHub(GitHub):
    """Production implementation using gh CLI.

    All GitHub operations execute actual gh commands via subprocess.
    """

    def is_available(self) -> bool:
        return shutil.which("gh") is not None

    def create_pr(self, worktree_path: Path) -> bool:
        """Run `gh pr create` attached to the terminal so it can prompt."""
        try:
            result = subprocess.run(["gh", "pr", "create"], cwd=worktree_path, check=False)
        except FileNotFoundError:
            return False
        return result.returncode == 0

    def get_pr_status(self, repo_root: Path, branch: str) -> PRInfo:
        """Look up a merged PR whose head is `branch`.

        Only merged PRs are queried, so a newer open or closed PR on the same
        branch does not hide an earlier merge. Any gh failure reads as NONE.
        """
        args = [
            "pr",
            "list",
            "--head",
            branch,
            "--state",
            "merged",
            "--json",
            "number,state,title",
            "--limit",
            "1",
        ]
        try:
            return _first_pr(_run_gh(args, repo_root))
        except (RuntimeError, FileNotFoundError, json.JSONDecodeError, KeyError) as e:
            logger.debug("PR status lookup for %s failed: %s", branch, e)
            return _NO_PR
