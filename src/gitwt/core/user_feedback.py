"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from gitwt.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output.

    Core operations report progress through ctx.feedback instead of printing
    directly, so they stay testable and never write to stdout (which is
    reserved for the activation script path in --script mode).

    Usage:
        ctx.feedback.info("Creating worktree...")
        ctx.feedback.success("✓ Worktree created")
        ctx.feedback.warning("Warning: failed to push branch")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show a soft-failure warning."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Styled output to stderr."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
