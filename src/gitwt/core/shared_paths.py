"""Shared-path configuration and symlinking.

The shared-path file lists paths, relative to a worktree root, whose content
lives only in the primary worktree. Every new feature worktree gets a
symlink at each of those paths pointing back into the primary worktree, so
databases, caches and logs are not duplicated per branch.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)


class LinkStatus(Enum):
    LINKED = "linked"
    MISSING_SOURCE = "missing_source"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass(frozen=True)
class LinkResult:
    """Outcome of linking one shared-path entry."""

    entry: str
    status: LinkStatus
    source: Path | None
    target: Path | None
    message: str

    @property
    def ok(self) -> bool:
        return self.status is LinkStatus.LINKED


def read_shared_paths(config_path: Path) -> list[str]:
    """Read the ordered shared-path entries from `config_path`.

    Lines whose first non-whitespace character is '#' and blank lines are
    skipped. Surrounding whitespace is trimmed from the remaining lines, so
    "  logs  " and "logs" name the same path. A missing file means no
    shared paths.

    Example:
        "# comment\\n\\n.lq\\n  \\nlogs\\n" -> [".lq", "logs"]
    """
    if not config_path.exists():
        return []

    entries: list[str] = []
    for line in config_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        entries.append(stripped)
    return entries


def unsafe_entry_reason(entry: str) -> str | None:
    """Return why an entry cannot be linked, or None when it is safe.

    The target of every entry is removed before linking, so an entry must
    stay strictly inside the worktree.
    """
    pure = PurePosixPath(entry)
    if pure.is_absolute():
        return "absolute paths are not allowed"
    if ".." in pure.parts:
        return "'..' components are not allowed"
    if not pure.parts:
        return "path refers to the worktree root"
    return None


def _lexists(path: Path) -> bool:
    return path.exists() or path.is_symlink()


def _remove_existing(target: Path) -> None:
    if target.is_symlink() or not target.is_dir():
        target.unlink()
    else:
        shutil.rmtree(target)


def link_shared_path(main_path: Path, worktree_path: Path, entry: str) -> LinkResult:
    """Replace `worktree_path/entry` with a symlink to `main_path/entry`.

    Whatever the checkout put at the target is removed unconditionally: it
    was just created from versioned content. The link points at the absolute
    source path, so it resolves no matter where the worktree lives.
    """
    reason = unsafe_entry_reason(entry)
    if reason is not None:
        return LinkResult(entry, LinkStatus.REJECTED, None, None, f"Skipped {entry}: {reason}")

    source = main_path.absolute() / entry
    target = worktree_path.absolute() / entry

    if not _lexists(source):
        return LinkResult(
            entry,
            LinkStatus.MISSING_SOURCE,
            source,
            target,
            f"Shared path not found in main: {entry}",
        )

    if not target.parent.resolve().is_relative_to(worktree_path.resolve()):
        return LinkResult(
            entry,
            LinkStatus.REJECTED,
            source,
            target,
            f"Skipped {entry}: already shared through a linked parent",
        )

    try:
        if _lexists(target):
            _remove_existing(target)
        target.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(source, target)
    except OSError as e:
        return LinkResult(entry, LinkStatus.FAILED, source, target, f"Failed to link {entry}: {e}")

    return LinkResult(entry, LinkStatus.LINKED, source, target, f"Linked: {entry}")


def link_shared_paths(main_path: Path, worktree_path: Path, entries: list[str]) -> list[LinkResult]:
    """Link every entry in order; a failing entry never stops the rest.

    Re-running against an already linked worktree yields the same links.
    """
    results: list[LinkResult] = []
    for entry in entries:
        result = link_shared_path(main_path, worktree_path, entry)
        if result.ok:
            logger.debug("%s -> %s", result.target, result.source)
        else:
            logger.debug("%s (%s)", result.message, result.status.value)
        results.append(result)
    return results
