"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages, and the handle_errors decorator
that renders core exceptions the same way. All errors use a red "Error:"
prefix and exit with status 1.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import click

from gitwt.cli.output import user_output
from gitwt.core.context import GitWtContext
from gitwt.core.errors import GitWtError, RootNotFound
from gitwt.core.root_locator import NoRootSentinel, ProjectLayout

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _fail(message: str, details: list[str] | None = None) -> NoReturn:
    user_output(click.style("Error: ", fg="red") + message)
    for line in details or []:
        user_output(f"  {line}")
    raise SystemExit(1)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            _fail(error_message)

    @staticmethod
    def layout(ctx: GitWtContext) -> ProjectLayout:
        """Ensure the command runs inside a worktree-managed project.

        Raises:
            SystemExit: If no project root was found (with exit code 1)
        """
        if isinstance(ctx.layout, NoRootSentinel):
            error = RootNotFound()
            _fail(error.message, error.details)
        return ctx.layout


def handle_errors(func: F) -> F:
    """Render GitWtError and external tool failures as "Error:" and exit 1.

    Core code raises; this is the one place that turns exceptions into
    user output and an exit status.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except GitWtError as e:
            logger.debug("%s: %s", type(e).__name__, e.message)
            _fail(e.message, e.details)
        except RuntimeError as e:
            # Failed git/gh invocation; the message carries command and stderr
            _fail(str(e))

    return wrapper  # type: ignore[return-value]
