"""Tests for shell script rendering."""

from pathlib import Path

from gitwt.cli.shell_utils import NAVIGATING_COMMANDS, render_cd_script, render_shell_wrapper


def test_cd_script_quotes_path() -> None:
    script = render_cd_script(
        Path("/work/my proj/trees/feat"),
        comment="git-wt resume feat",
        success_message="Switched to worktree: feat",
    )

    assert script.splitlines() == [
        "# git-wt resume feat",
        "cd '/work/my proj/trees/feat' || return 1",
        "echo 'Switched to worktree: feat' >&2",
    ]


def test_wrapper_sources_script_output() -> None:
    wrapper = render_shell_wrapper("zsh")

    assert "# git-wt shell integration (zsh)" in wrapper
    assert 'command git-wt "$@" --script' in wrapper
    assert 'source "$__gitwt_out"' in wrapper
    assert "alias gwts='git-wt start'" in wrapper


def test_wrapper_routes_every_navigating_command() -> None:
    wrapper = render_shell_wrapper("bash")
    lines = [line.strip() for line in wrapper.splitlines()]
    case_line = next(line for line in lines if line.startswith("init|"))

    assert case_line == "|".join(NAVIGATING_COMMANDS) + ")"
    assert "list" not in case_line.split("|")
