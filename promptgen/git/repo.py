"""Git work tree discovery."""

from __future__ import annotations

from pathlib import Path

from ..errors import GitError
from .runner import GitRunner, default_runner


class GitRepository:
    """Answers questions about the work tree enclosing a path."""

    def __init__(self, runner: GitRunner | None = None) -> None:
        self._runner = runner or default_runner

    def toplevel(self, path: Path) -> Path:
        """Return the root of the work tree containing ``path``."""
        cwd = path if path.is_dir() else path.parent
        output = self._runner(
            ["git", "rev-parse", "--show-toplevel"], cwd=cwd, capture_output=True
        ).strip()
        if not output:
            raise GitError(f"{path} is not inside a git repository")
        return Path(output).resolve()
