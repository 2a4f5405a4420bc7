"""Interactive decision policy.

Every confirmation gate and menu in git-wt goes through a Prompter so that
automation and tests can substitute scripted answers for terminal input.
"""

from abc import ABC, abstractmethod

import click


class Prompter(ABC):
    """Answers yes/no gates and numbered menus."""

    @abstractmethod
    def confirm(self, message: str, *, default: bool = False) -> bool:
        """Ask a yes/no question."""

    @abstractmethod
    def choose(self, header: str, options: list[str], prompt: str) -> str:
        """Show a numbered menu and return the raw answer.

        Validation of the answer belongs to the caller.
        """


class InteractivePrompter(Prompter):
    """Reads answers from the terminal.

    Prompts are written to stderr so stdout stays reserved for the
    activation script path in --script mode.
    """

    def confirm(self, message: str, *, default: bool = False) -> bool:
        return click.confirm(message, default=default, err=True)

    def choose(self, header: str, options: list[str], prompt: str) -> str:
        click.echo(header, err=True)
        for index, option in enumerate(options, start=1):
            click.echo(f"  {index}) {option}", err=True)
        return click.prompt(prompt, default="", show_default=False, err=True).strip()


class AutoConfirmPrompter(InteractivePrompter):
    """Answers every confirmation with a fixed value; menus still prompt."""

    def __init__(self, answer: bool = True) -> None:
        self._answer = answer

    def confirm(self, message: str, *, default: bool = False) -> bool:
        click.echo(f"{message} [{'yes' if self._answer else 'no'}]", err=True)
        return self._answer
