"""Tests for git-wt init."""

from pathlib import Path

from gitwt.core.root_locator import NoRootSentinel
from tests.fakes.git import FakeGit
from tests.test_utils.cli_env import cli_env


def _make_clone(path: Path) -> Path:
    (path / ".git").mkdir(parents=True)
    return path


def test_init_current_directory_navigates_to_main(tmp_path: Path) -> None:
    project = _make_clone(tmp_path / "proj")
    env = cli_env(NoRootSentinel(), cwd=project, git=FakeGit())

    result = env.invoke("init", "--script")

    assert result.exit_code == 0, result.output
    assert (project / "main" / ".git").is_dir()
    assert "Done! Structure is now:" in result.stderr
    content = env.script_for(result)
    assert content is not None
    assert f"cd {project / 'main'}" in content


def test_init_relative_path_no_cd(tmp_path: Path) -> None:
    project = _make_clone(tmp_path / "proj")
    env = cli_env(NoRootSentinel(), cwd=tmp_path, git=FakeGit())

    result = env.invoke("i", "proj", "-C", "--script")

    assert result.exit_code == 0, result.output
    assert (project / "trees").is_dir()
    assert env.script_writer.scripts == {}
    assert result.stdout == ""


def test_init_twice_fails(tmp_path: Path) -> None:
    project = _make_clone(tmp_path / "proj")
    env = cli_env(NoRootSentinel(), cwd=project, git=FakeGit())
    env.invoke("init", "-C")

    result = env.invoke("init", "-C")

    assert result.exit_code == 1
    assert "Error: Not a git repository" in result.stderr
