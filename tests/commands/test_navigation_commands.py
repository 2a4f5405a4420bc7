"""Tests for git-wt resume and back."""

from pathlib import Path

from tests.fakes.git import FakeGit
from tests.fakes.prompter import ScriptedPrompter
from tests.test_utils.cli_env import cli_env
from tests.test_utils.project_builder import build_project, feature, primary


def test_resume_single_match(tmp_path: Path) -> None:
    layout = build_project(tmp_path / "proj")
    git = FakeGit(worktrees=[primary(layout), feature(layout, "login-page")])
    env = cli_env(layout, cwd=layout.main_path, git=git)

    result = env.invoke("resume", "login", "--script")

    assert result.exit_code == 0, result.output
    content = env.script_for(result)
    assert content is not None
    assert f"cd {layout.trees_path / 'login-page'}" in content
    assert "Switched to worktree: login-page" in content
    assert env.prompter.menus == []


def test_resume_menu_selection(tmp_path: Path) -> None:
    layout = build_project(tmp_path / "proj")
    git = FakeGit(
        worktrees=[primary(layout), feature(layout, "fix-a"), feature(layout, "fix-b")]
    )
    prompter = ScriptedPrompter(choices=["1"])
    env = cli_env(layout, cwd=layout.main_path, git=git, prompter=prompter)

    result = env.invoke("r", "fix", "--script")

    assert result.exit_code == 0, result.output
    header, options = prompter.menus[0]
    assert header == "Multiple worktrees found:"
    assert len(options) == 2
    content = env.script_for(result)
    assert content is not None
    assert f"cd {layout.trees_path / 'fix-a'}" in content


def test_resume_invalid_choice(tmp_path: Path) -> None:
    layout = build_project(tmp_path / "proj")
    git = FakeGit(
        worktrees=[primary(layout), feature(layout, "fix-a"), feature(layout, "fix-b")]
    )
    env = cli_env(
        layout, cwd=layout.main_path, git=git, prompter=ScriptedPrompter(choices=["9"])
    )

    result = env.invoke("resume", "--script")

    assert result.exit_code == 1
    assert "Invalid choice" in result.stderr
    assert env.script_writer.scripts == {}


def test_resume_without_feature_worktrees(tmp_path: Path) -> None:
    layout = build_project(tmp_path / "proj")
    env = cli_env(layout, cwd=layout.main_path, git=FakeGit(worktrees=[primary(layout)]))

    result = env.invoke("resume")

    assert result.exit_code == 1
    assert "No worktrees found" in result.stderr
    assert "git-wt start BRANCH_NAME" in result.stderr


def test_back_returns_to_main(tmp_path: Path) -> None:
    layout = build_project(tmp_path / "proj")
    feat = feature(layout, "feat")
    env = cli_env(layout, cwd=feat.path, git=FakeGit(worktrees=[primary(layout), feat]))

    result = env.invoke("b", "--script")

    assert result.exit_code == 0, result.output
    content = env.script_for(result)
    assert content is not None
    assert f"cd {layout.main_path}" in content


def test_back_without_script_prints_cd_hint(tmp_path: Path) -> None:
    layout = build_project(tmp_path / "proj")
    env = cli_env(layout, cwd=layout.root)

    result = env.invoke("back")

    assert result.exit_code == 0, result.output
    assert f"cd {layout.main_path}" in result.stderr
    assert "git-wt shell-init" in result.stderr
