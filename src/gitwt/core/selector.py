"""Resolution of a partial worktree reference to exactly one worktree."""

import logging
from pathlib import Path

import click

from gitwt.core.errors import InvalidSelection, NoMatch
from gitwt.core.git.abc import WorktreeInfo
from gitwt.core.prompter import Prompter
from gitwt.core.worktree_utils import is_primary_worktree

logger = logging.getLogger(__name__)


def _matches(wt: WorktreeInfo, filter_text: str) -> bool:
    return (wt.branch is not None and filter_text in wt.branch) or filter_text in str(wt.path)


def filter_candidates(
    worktrees: list[WorktreeInfo], *, main_path: Path, filter_text: str | None
) -> list[WorktreeInfo]:
    """Feature worktrees whose branch or path contains filter_text, in registry order.

    The primary worktree is never a candidate.
    """
    candidates = [
        wt
        for wt in worktrees
        if not wt.is_primary and not is_primary_worktree(wt.path, main_path)
    ]
    if filter_text:
        candidates = [wt for wt in candidates if _matches(wt, filter_text)]
    return candidates


def _format_option(wt: WorktreeInfo) -> str:
    branch = wt.branch if wt.branch is not None else "(detached)"
    return f"{branch} {click.style(f'({wt.path})', dim=True)}"


def select_worktree(
    worktrees: list[WorktreeInfo],
    *,
    main_path: Path,
    filter_text: str | None,
    prompter: Prompter,
) -> WorktreeInfo:
    """Narrow worktrees down to one, prompting only when several remain.

    Raises:
        NoMatch: If no feature worktree matches
        InvalidSelection: If the menu answer is not a listed number
    """
    candidates = filter_candidates(worktrees, main_path=main_path, filter_text=filter_text)
    logger.debug("Selector: %d candidate(s) for filter %r", len(candidates), filter_text)

    if not candidates:
        raise NoMatch(filter_text)

    if len(candidates) == 1:
        return candidates[0]

    answer = prompter.choose(
        "Multiple worktrees found:",
        [_format_option(wt) for wt in candidates],
        f"Select worktree [1-{len(candidates)}]",
    )

    if not answer.isdigit():
        raise InvalidSelection(answer)

    index = int(answer)
    if index < 1 or index > len(candidates):
        raise InvalidSelection(answer)

    return candidates[index - 1]
