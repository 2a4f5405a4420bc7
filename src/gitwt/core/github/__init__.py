"""GitHub (gh CLI) operations subpackage."""

from gitwt.core.github.abc import GitHub
from gitwt.core.github.real import RealGitHub
from gitwt.core.github.types import PRInfo, PRState

__all__ = ["GitHub", "PRInfo", "PRState", "RealGitHub"]
