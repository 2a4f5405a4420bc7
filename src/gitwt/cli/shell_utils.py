"""Shell script rendering for shell integration."""

import shlex
from pathlib import Path

SUPPORTED_SHELLS = ("bash", "zsh")

# Subcommands (and their aliases) that may move the parent shell
NAVIGATING_COMMANDS = (
    "init",
    "i",
    "start",
    "s",
    "resume",
    "r",
    "back",
    "b",
    "finish",
    "f",
    "delete",
    "d",
    "cancel",
    "x",
    "sync",
)

SHELL_ALIASES = (
    ("gwt", "git-wt"),
    ("gwts", "git-wt start"),
    ("gwtc", "git-wt create"),
    ("gwtr", "git-wt resume"),
    ("gwtb", "git-wt back"),
    ("gwtd", "git-wt delete"),
    ("gwtl", "git-wt list"),
    ("gwtst", "git-wt status"),
)


def render_cd_script(target_path: Path, *, comment: str, success_message: str) -> str:
    """Render a script that changes the sourcing shell into target_path.

    Args:
        target_path: Directory to change into
        comment: Comment line describing the script
        success_message: Message echoed to stderr once the cd succeeded

    Returns:
        Script content for `source`
    """
    quoted = shlex.quote(str(target_path))
    return (
        f"# {comment}\n"
        f"cd {quoted} || return 1\n"
        f"echo {shlex.quote(success_message)} >&2\n"
    )


def render_shell_wrapper(shell: str) -> str:
    """Render the git-wt wrapper function and aliases for ~/.bashrc or ~/.zshrc.

    Navigating commands run with --script; the printed path is sourced so
    the cd happens in the interactive shell. Anything else on stdout (help
    text, for instance) is passed through unchanged.
    """
    commands = "|".join(NAVIGATING_COMMANDS)
    aliases = "\n".join(f"alias {name}='{command}'" for name, command in SHELL_ALIASES)
    return f"""\
# git-wt shell integration ({shell})
# Add to your shell rc file: eval "$(git-wt shell-init {shell})"
git-wt() {{
    case "$1" in
        {commands})
            local __gitwt_out __gitwt_rc
            __gitwt_out="$(command git-wt "$@" --script)"
            __gitwt_rc=$?
            if [ -n "$__gitwt_out" ] && [ -f "$__gitwt_out" ]; then
                source "$__gitwt_out"
                rm -f "$__gitwt_out"
            elif [ -n "$__gitwt_out" ]; then
                printf '%s\\n' "$__gitwt_out"
            fi
            return $__gitwt_rc
            ;;
        *)
            command git-wt "$@"
            ;;
    esac
}}

{aliases}
"""
