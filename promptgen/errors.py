"""Exception hierarchy for prompt generation failures."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class PromptGenError(RuntimeError):
    """Base class for fatal promptgen errors."""


class InstructionNotFoundError(PromptGenError):
    """Raised when no file in the repository carries an instruction marker."""

    def __init__(self, root: Path) -> None:
        super().__init__(
            f"No TODO instruction found under {root}. "
            "Add a line such as `// TODO: - <question>` to exactly one file."
        )
        self.root = root


class AmbiguousInstructionError(PromptGenError):
    """Raised when more than one file carries an instruction marker."""

    def __init__(self, paths: Sequence[Path]) -> None:
        listing = "\n".join(f"  - {path}" for path in paths)
        super().__init__(
            f"Found TODO instructions in {len(paths)} files; keep exactly one:\n{listing}"
        )
        self.paths = tuple(paths)


class UnsupportedModeError(PromptGenError):
    """Raised when a mode is requested for a file type that cannot honour it."""


class InvalidFlagError(PromptGenError):
    """Raised for flag combinations argparse cannot reject on its own."""


class PatternCompileError(PromptGenError):
    """Raised when a generated search pattern fails to compile."""


class GitError(PromptGenError):
    """Raised when a git command fails or the path is not in a work tree."""


__all__ = [
    "AmbiguousInstructionError",
    "GitError",
    "InstructionNotFoundError",
    "InvalidFlagError",
    "PatternCompileError",
    "PromptGenError",
    "UnsupportedModeError",
]
