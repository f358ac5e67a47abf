"""Usage-site search for a single type name."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from ..config import RunOptions
from ..errors import PatternCompileError
from ..logging import get_logger
from ..models import SourceFile
from ..repo_scanner import RepoScanner
from .definitions import collect_matches
from .scope import ScopeResolver


class ReferenceFinder:
    """Finds every file that mentions a type name as a whole word."""

    def __init__(self, options: RunOptions | None = None) -> None:
        self.options = options or RunOptions()
        self.scanner = RepoScanner(self.options)
        self.scope = ScopeResolver()
        self.logger = get_logger("symbols.references")

    def find(self, type_name: str, root: Path) -> List[Path]:
        try:
            pattern = re.compile(rf"\b{re.escape(type_name)}\b")
        except re.error as exc:  # pragma: no cover - escaped input always compiles
            raise PatternCompileError(f"Error compiling reference pattern: {exc}") from exc

        def _mentions(source: SourceFile) -> bool:
            return pattern.search(source.text) is not None

        found = collect_matches(
            self.scope.search_roots(root),
            self.scanner,
            _mentions,
            workers=self.options.workers,
        )
        self.logger.debug("Files referencing %s: %d", type_name, len(found))
        return found
