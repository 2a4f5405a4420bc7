"""Writing of shell scripts sourced by the git-wt shell wrapper.

A Python process cannot change the working directory of the shell that
started it. Navigating commands therefore write a small script to a temp
file and print its path; the wrapper function from `git-wt shell-init`
sources that file in the parent shell.
"""

import logging
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from gitwt.cli.output import machine_output

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScriptResult:
    """A written script and the content it holds."""

    path: Path
    content: str

    def output_for_shell_integration(self) -> None:
        """Emit the script path on stdout without newline for the wrapper to capture."""
        machine_output(str(self.path), nl=False)


class ScriptWriter(ABC):
    """Writes activation scripts somewhere the shell wrapper can source them."""

    @abstractmethod
    def write_activation_script(
        self, content: str, *, command_name: str, comment: str
    ) -> ScriptResult:
        """Persist content and return where it was written."""


class RealScriptWriter(ScriptWriter):
    """Writes scripts into the system temp directory."""

    def write_activation_script(
        self, content: str, *, command_name: str, comment: str
    ) -> ScriptResult:
        header = f"# git-wt {command_name}: {comment}\n"
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            prefix=f"git-wt-{command_name}-",
            suffix=".sh",
            delete=False,
        ) as f:
            f.write(header + content)
            path = Path(f.name)

        logger.debug("Wrote %s script to %s", command_name, path)
        return ScriptResult(path=path, content=header + content)
