"""Tests for canceling a worktree."""

from pathlib import Path

import pytest

from gitwt.core import lifecycle
from gitwt.core.context import GitWtContext
from gitwt.core.errors import Aborted, CannotFinishPrimary
from gitwt.core.root_locator import ProjectLayout
from gitwt.core.settings import GitWtSettings
from tests.fakes.git import FakeGit
from tests.fakes.prompter import ScriptedPrompter
from tests.fakes.user_feedback import FakeUserFeedback
from tests.test_utils.project_builder import build_project, feature, primary


@pytest.fixture
def layout(tmp_path: Path) -> ProjectLayout:
    return build_project(tmp_path / "proj")


def test_cancel_never_pushes_and_keeps_branch(layout: ProjectLayout) -> None:
    feat = feature(layout, "feat")
    git = FakeGit(worktrees=[primary(layout), feat])
    ctx = GitWtContext.for_test(git=git, cwd=feat.path / "src", layout=layout)

    result = lifecycle.cancel(ctx, layout, None)

    assert git.pushed_branches == []
    assert git.removed_worktrees == [(feat.path, True)]
    assert git.deleted_branches == []
    assert result.branch_deleted is False
    assert result.navigate_to == layout.main_path


def test_cancel_dirty_declined_leaves_worktree(layout: ProjectLayout) -> None:
    feat = feature(layout, "feat")
    git = FakeGit(
        worktrees=[primary(layout), feat],
        dirty_worktrees={feat.path: [" M app.py"]},
    )
    prompter = ScriptedPrompter(confirm_answers=[False])
    feedback = FakeUserFeedback()
    ctx = GitWtContext.for_test(
        git=git, prompter=prompter, feedback=feedback, cwd=layout.main_path, layout=layout
    )

    with pytest.raises(Aborted):
        lifecycle.cancel(ctx, layout, "feat")

    assert prompter.confirmations == ["Continue with removal?"]
    assert git.removed_worktrees == []
    assert "   M app.py" in feedback.of_level("info")


def test_cancel_dirty_confirmed_removes(layout: ProjectLayout) -> None:
    feat = feature(layout, "feat")
    git = FakeGit(
        worktrees=[primary(layout), feat],
        dirty_worktrees={feat.path: ["?? scratch.txt"]},
    )
    ctx = GitWtContext.for_test(git=git, cwd=layout.main_path, layout=layout)

    result = lifecycle.cancel(ctx, layout, "feat")

    assert git.removed_worktrees == [(feat.path, True)]
    assert result.navigate_to is None


def test_cancel_delete_merged_branch_uses_safe_delete(layout: ProjectLayout) -> None:
    feat = feature(layout, "feat")
    git = FakeGit(worktrees=[primary(layout), feat], merged_branches={"feat"})
    prompter = ScriptedPrompter()
    ctx = GitWtContext.for_test(git=git, prompter=prompter, cwd=feat.path, layout=layout)

    result = lifecycle.cancel(ctx, layout, None, delete_branch=True)

    assert result.branch_deleted is True
    assert git.deleted_branches == [("feat", False)]
    assert prompter.confirmations == []


def test_cancel_delete_unmerged_branch_confirmed(layout: ProjectLayout) -> None:
    feat = feature(layout, "feat")
    commits = [f"abc{i} commit {i}" for i in range(7)]
    git = FakeGit(worktrees=[primary(layout), feat], unmerged_commits={"feat": commits})
    feedback = FakeUserFeedback()
    prompter = ScriptedPrompter(confirm_answers=[True])
    ctx = GitWtContext.for_test(
        git=git, prompter=prompter, feedback=feedback, cwd=feat.path, layout=layout
    )

    result = lifecycle.cancel(ctx, layout, None, delete_branch=True)

    assert result.branch_deleted is True
    assert git.deleted_branches == [("feat", True)]
    assert prompter.confirmations == ["Force delete anyway?"]
    assert "Warning: Branch 'feat' has unmerged changes" in feedback.of_level("warning")
    shown = [msg for msg in feedback.of_level("info") if msg.startswith("  abc")]
    assert len(shown) == lifecycle.UNMERGED_COMMITS_SHOWN


def test_cancel_delete_unmerged_branch_declined(layout: ProjectLayout) -> None:
    feat = feature(layout, "feat")
    git = FakeGit(worktrees=[primary(layout), feat])
    feedback = FakeUserFeedback()
    prompter = ScriptedPrompter(confirm_answers=[False])
    ctx = GitWtContext.for_test(
        git=git, prompter=prompter, feedback=feedback, cwd=feat.path, layout=layout
    )

    result = lifecycle.cancel(ctx, layout, None, delete_branch=True)

    assert result.branch_deleted is False
    assert git.deleted_branches == []
    assert git.removed_worktrees == [(feat.path, True)]
    assert "Branch kept: feat" in feedback.of_level("info")


def test_cancel_uses_configured_trunk(tmp_path: Path) -> None:
    settings = GitWtSettings(trunk_branch="develop")
    layout = build_project(tmp_path / "proj", settings)
    feat = feature(layout, "feat")

    class RecordingGit(FakeGit):
        def __init__(self, **kwargs) -> None:
            super().__init__(**kwargs)
            self.merge_targets: list[str] = []

        def is_branch_merged(self, repo_root: Path, branch: str, into: str) -> bool:
            self.merge_targets.append(into)
            return True

    git = RecordingGit(worktrees=[primary(layout), feat])
    ctx = GitWtContext.for_test(git=git, cwd=feat.path, settings=settings, layout=layout)

    lifecycle.cancel(ctx, layout, None, delete_branch=True)

    assert git.merge_targets == ["develop"]


def test_cancel_primary_is_rejected(layout: ProjectLayout) -> None:
    git = FakeGit(worktrees=[primary(layout)])
    ctx = GitWtContext.for_test(git=git, cwd=layout.main_path, layout=layout)

    with pytest.raises(CannotFinishPrimary) as exc_info:
        lifecycle.cancel(ctx, layout, None)

    assert exc_info.value.message == "Cannot cancel main worktree"
    assert git.removed_worktrees == []
