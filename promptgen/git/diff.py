"""Per-file comparison against another branch."""

from __future__ import annotations

from pathlib import Path

from ..logging import get_logger
from .runner import GitRunner, default_runner


class BranchDiff:
    """Produces ``git diff <branch> -- <file>`` output for single files."""

    def __init__(self, branch: str, runner: GitRunner | None = None) -> None:
        self.branch = branch
        self._runner = runner or default_runner
        self.logger = get_logger("git.diff")

    def diff(self, path: Path) -> str:
        """Return the diff text; empty when the file matches the branch."""
        output = self._runner(
            ["git", "diff", self.branch, "--", path.name],
            cwd=path.parent,
            capture_output=True,
        )
        if output.strip():
            self.logger.debug("%s differs from %s", path.name, self.branch)
        return output
