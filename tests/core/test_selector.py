"""Tests for the interactive worktree selector."""

from pathlib import Path

import pytest

from gitwt.core.errors import InvalidSelection, NoMatch
from gitwt.core.git.abc import WorktreeInfo
from gitwt.core.selector import filter_candidates, select_worktree
from tests.fakes.prompter import ScriptedPrompter

MAIN = Path("/p/main")
P1 = WorktreeInfo(Path("/p/trees/a"), "a", False)
P2 = WorktreeInfo(Path("/p/trees/ab"), "ab", False)
P3 = WorktreeInfo(MAIN, "main", True)
CANDIDATES = [P1, P2, P3]


def test_filter_a_requires_menu_over_both_matches() -> None:
    prompter = ScriptedPrompter(choices=["2"])

    selected = select_worktree(CANDIDATES, main_path=MAIN, filter_text="a", prompter=prompter)

    assert selected == P2
    assert len(prompter.menus) == 1
    header, options = prompter.menus[0]
    assert header == "Multiple worktrees found:"
    assert len(options) == 2
    assert options[0].startswith("a ")
    assert options[1].startswith("ab ")


def test_filter_ab_selects_without_prompt() -> None:
    prompter = ScriptedPrompter()

    selected = select_worktree(CANDIDATES, main_path=MAIN, filter_text="ab", prompter=prompter)

    assert selected == P2
    assert prompter.menus == []


def test_primary_is_never_a_candidate() -> None:
    """'main' matches only the primary worktree, which is excluded."""
    with pytest.raises(NoMatch) as exc_info:
        select_worktree(CANDIDATES, main_path=MAIN, filter_text="main", prompter=ScriptedPrompter())

    assert "main" in exc_info.value.message


def test_primary_excluded_by_path_even_if_not_flagged() -> None:
    unflagged_main = WorktreeInfo(MAIN, "main", False)

    assert filter_candidates([unflagged_main, P1], main_path=MAIN, filter_text=None) == [P1]


def test_filter_matches_path() -> None:
    custom = WorktreeInfo(Path("/elsewhere/experiment"), "exp-1", False)

    selected = select_worktree(
        [P3, P1, custom], main_path=MAIN, filter_text="elsewhere", prompter=ScriptedPrompter()
    )

    assert selected == custom


def test_no_worktrees_without_filter() -> None:
    with pytest.raises(NoMatch) as exc_info:
        select_worktree([P3], main_path=MAIN, filter_text=None, prompter=ScriptedPrompter())

    assert exc_info.value.message == "No worktrees found"


@pytest.mark.parametrize("answer", ["0", "3", "x", "", "-1", "1.5"])
def test_invalid_menu_answers(answer: str) -> None:
    prompter = ScriptedPrompter(choices=[answer])

    with pytest.raises(InvalidSelection):
        select_worktree(CANDIDATES, main_path=MAIN, filter_text=None, prompter=prompter)


def test_detached_candidate_is_listed() -> None:
    detached = WorktreeInfo(Path("/p/trees/tmp"), None, False)
    prompter = ScriptedPrompter(choices=["1"])

    selected = select_worktree(
        [P3, detached, P1], main_path=MAIN, filter_text=None, prompter=prompter
    )

    assert selected == detached
    assert prompter.menus[0][1][0].startswith("(detached)")
