"""Locate the single instruction marker in a repository."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from .errors import AmbiguousInstructionError, InstructionNotFoundError
from .logging import get_logger
from .models import InstructionMarker, MarkerKind, SourceFile
from .repo_scanner import RepoScanner

MARKER_PATTERN = re.compile(r"// TODO: (ChatGPT: |- )")

_DECLARATION_PATTERN = re.compile(
    r"\b(?:class|struct|enum|protocol|extension|actor)\s+([A-Za-z_][A-Za-z0-9_]*)"
)


def find_marker(source: SourceFile) -> Optional[InstructionMarker]:
    """Return the first marker line in ``source`` or None."""
    for line in source.text.splitlines():
        match = MARKER_PATTERN.search(line)
        if match is None:
            continue
        kind = MarkerKind.CHATGPT if match.group(1) == "ChatGPT: " else MarkerKind.LEGACY
        return InstructionMarker(path=source.path, kind=kind, raw_line=line.lstrip())
    return None


class InstructionLocator:
    """Finds the one file that carries a TODO instruction."""

    def __init__(self, scanner: RepoScanner | None = None) -> None:
        self.scanner = scanner or RepoScanner()
        self.logger = get_logger("instruction")

    def locate(self, root: Path) -> InstructionMarker:
        """Return the marker of the only qualifying file under ``root``.

        Raises InstructionNotFoundError when no file qualifies and
        AmbiguousInstructionError when several do. Several marker lines inside
        one file are allowed; the first one wins.
        """
        found: List[InstructionMarker] = []
        for path in self.scanner.iter_files(root):
            marker = find_marker(SourceFile(path))
            if marker is not None:
                self.logger.debug("Instruction marker in %s", path)
                found.append(marker)

        if not found:
            raise InstructionNotFoundError(root)
        if len(found) > 1:
            raise AmbiguousInstructionError([marker.path for marker in found])
        return found[0]


def extract_enclosing_type(path: Path) -> Optional[str]:
    """Return the last type declared at or above the marker line."""
    enclosing: Optional[str] = None
    for line in SourceFile(path).text.splitlines():
        stripped = line.strip()
        if not stripped.startswith("//"):
            match = _DECLARATION_PATTERN.search(stripped)
            if match is not None:
                enclosing = match.group(1)
        if MARKER_PATTERN.search(line):
            return enclosing
    return None


__all__ = ["InstructionLocator", "MARKER_PATTERN", "extract_enclosing_type", "find_marker"]
