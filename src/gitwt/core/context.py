"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from gitwt.core.git.abc import Git
from gitwt.core.git.real import RealGit
from gitwt.core.github.abc import GitHub
from gitwt.core.github.real import RealGitHub
from gitwt.core.prompter import AutoConfirmPrompter, InteractivePrompter, Prompter
from gitwt.core.root_locator import NoRootSentinel, ProjectLayout, locate_root
from gitwt.core.script_writer import RealScriptWriter, ScriptWriter
from gitwt.core.settings import GitWtSettings, load_settings
from gitwt.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class GitWtContext:
    """Immutable context holding all dependencies for git-wt operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    github: GitHub
    prompter: Prompter
    script_writer: ScriptWriter
    feedback: UserFeedback
    cwd: Path  # Current working directory at CLI invocation
    settings: GitWtSettings
    layout: ProjectLayout | NoRootSentinel

    @staticmethod
    def for_test(
        git: Git | None = None,
        github: GitHub | None = None,
        prompter: Prompter | None = None,
        script_writer: ScriptWriter | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        settings: GitWtSettings | None = None,
        layout: ProjectLayout | NoRootSentinel | None = None,
    ) -> "GitWtContext":
        """Create test context with optional pre-configured integration classes.

        Args:
            git: Optional Git implementation. If None, creates empty FakeGit.
            github: Optional GitHub implementation. If None, creates FakeGitHub
                (gh not available).
            prompter: Optional Prompter. If None, creates a ScriptedPrompter that
                answers every confirmation with yes.
            script_writer: Optional ScriptWriter. If None, creates FakeScriptWriter.
            feedback: Optional UserFeedback. If None, creates FakeUserFeedback.
            cwd: Optional current working directory. If None, uses
                Path("/test/default/cwd").
            settings: Optional GitWtSettings. If None, uses defaults.
            layout: Optional ProjectLayout or NoRootSentinel. If None, the layout
                is discovered from cwd.

        Returns:
            Frozen GitWtContext for use in tests
        """
        from tests.fakes.git import FakeGit
        from tests.fakes.github import FakeGitHub
        from tests.fakes.prompter import ScriptedPrompter
        from tests.fakes.script_writer import FakeScriptWriter
        from tests.fakes.user_feedback import FakeUserFeedback

        resolved_cwd = cwd if cwd is not None else Path("/test/default/cwd")
        resolved_settings = settings if settings is not None else GitWtSettings()
        if layout is None:
            layout = locate_root(resolved_cwd, resolved_settings)

        return GitWtContext(
            git=git if git is not None else FakeGit(),
            github=github if github is not None else FakeGitHub(),
            prompter=prompter if prompter is not None else ScriptedPrompter(),
            script_writer=script_writer if script_writer is not None else FakeScriptWriter(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            cwd=resolved_cwd,
            settings=resolved_settings,
            layout=layout,
        )


def logical_cwd() -> Path:
    """Current directory as the shell names it.

    $PWD keeps symlinked components (e.g. a shared path linked into a feature
    worktree), which getcwd() would resolve into the primary worktree.
    """
    physical = Path.cwd()
    pwd = os.environ.get("PWD")
    if pwd and os.path.isabs(pwd) and os.path.exists(pwd) and os.path.samefile(pwd, physical):
        return Path(pwd)
    return physical


def create_context(*, assume_yes: bool = False) -> GitWtContext:
    """Create production context with real implementations.

    Called once at CLI entry point. Settings are loaded here and nowhere
    else.

    Args:
        assume_yes: Answer every confirmation with yes (automation mode)

    Raises:
        ValueError: If the settings file or a GIT_WT_* variable is invalid
    """
    cwd = logical_cwd()
    settings = load_settings()

    return GitWtContext(
        git=RealGit(),
        github=RealGitHub(),
        prompter=AutoConfirmPrompter() if assume_yes else InteractivePrompter(),
        script_writer=RealScriptWriter(),
        feedback=InteractiveFeedback(),
        cwd=cwd,
        settings=settings,
        layout=locate_root(cwd, settings),
    )
