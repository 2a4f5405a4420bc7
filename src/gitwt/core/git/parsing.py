"""Parsing of `git worktree list --porcelain` output."""

from pathlib import Path

BRANCH_REF_PREFIX = "refs/heads/"


def parse_worktree_porcelain(output: str) -> list[tuple[Path, str | None]]:
    """Parse porcelain worktree records into (path, branch) pairs.

    Records are separated by blank lines. A `worktree <path>` line opens a
    record and `branch refs/heads/<name>` names its branch. Records without
    a branch line (detached HEAD, bare) are kept with branch None so
    path-based lookups still find them. The last record is flushed at end
    of input even without a trailing blank line.

    Examples:
        >>> parse_worktree_porcelain(
        ...     "worktree /p/main\\nHEAD abc\\nbranch refs/heads/main\\n\\n"
        ...     "worktree /p/trees/x\\nHEAD def\\ndetached"
        ... )
        [(Path('/p/main'), 'main'), (Path('/p/trees/x'), None)]
    """
    records: list[tuple[Path, str | None]] = []
    current_path: Path | None = None
    current_branch: str | None = None

    for raw_line in output.splitlines():
        line = raw_line.rstrip("\r")
        if line.startswith("worktree "):
            if current_path is not None:
                records.append((current_path, current_branch))
            current_path = Path(line[len("worktree ") :])
            current_branch = None
        elif line.startswith("branch "):
            if current_path is None:
                continue
            ref = line[len("branch ") :]
            current_branch = ref.removeprefix(BRANCH_REF_PREFIX)
        elif line.strip() == "" and current_path is not None:
            records.append((current_path, current_branch))
            current_path = None
            current_branch = None

    if current_path is not None:
        records.append((current_path, current_branch))

    return records
