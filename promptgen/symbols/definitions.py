"""Lexical search for files that declare candidate types."""

from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Set

from ..config import RunOptions
from ..errors import PatternCompileError
from ..logging import get_logger
from ..models import SearchRoot, SourceFile
from ..repo_scanner import RepoScanner
from .base import DefinitionMatcher
from .scope import ScopeResolver

DECLARATION_KEYWORDS = ("class", "struct", "enum", "protocol", "typealias")


def build_declaration_pattern(type_names: Sequence[str]) -> re.Pattern[str]:
    """Compile ``\\b(?:class|struct|...)\\s+(?:A|B|...)\\b`` for the names."""
    names = [name.strip() for name in type_names if name.strip()]
    if not names:
        # Nothing to look for: a pattern that can never match.
        return re.compile(r"(?!)")
    alternation = "|".join(re.escape(name) for name in names)
    keywords = "|".join(DECLARATION_KEYWORDS)
    pattern = rf"\b(?:{keywords})\s+(?:{alternation})\b"
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternCompileError(f"Error compiling declaration pattern: {exc}") from exc


class RegexDefinitionMatcher(DefinitionMatcher):
    """Declaration keyword followed by any candidate name, anywhere in the text.

    Over-matches on comments and multi-declaration lines; callers accept that.
    """

    def __init__(self) -> None:
        self.pattern: Optional[re.Pattern[str]] = None

    def prepare(self, type_names: Sequence[str]) -> None:
        self.pattern = build_declaration_pattern(type_names)

    def matches(self, source: SourceFile) -> bool:
        if self.pattern is None:
            raise RuntimeError("prepare() must be called before matches()")
        return self.pattern.search(source.text) is not None


def collect_matches(
    roots: Iterable[SearchRoot],
    scanner: RepoScanner,
    predicate: Callable[[SourceFile], bool],
    *,
    workers: int = 1,
) -> List[Path]:
    """Run ``predicate`` over every source file below ``roots``.

    Returns sorted, de-duplicated absolute paths. With ``workers`` above one
    the per-file checks run on a thread pool; ordering never depends on it.
    Files are streamed, so only the ones being checked hold their text.
    """
    logger = get_logger("symbols")

    def _check(source: SourceFile) -> Optional[Path]:
        return source.path if predicate(source) else None

    found: Set[Path] = set()
    for root in roots:
        logger.debug("Searching in directory: %s", root.path)
        sources = scanner.iter_source_files(root.path)
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                matched = [path for path in pool.map(_check, sources) if path is not None]
        else:
            matched = [path for path in map(_check, sources) if path is not None]
        for path in matched:
            logger.debug("Matched: %s", path)
            found.add(path)
    return sorted(found)


class DefinitionFinder:
    """Finds files declaring any of the candidate type names."""

    def __init__(
        self,
        options: RunOptions | None = None,
        matcher: DefinitionMatcher | None = None,
    ) -> None:
        self.options = options or RunOptions()
        self.matcher = matcher or RegexDefinitionMatcher()
        self.scanner = RepoScanner(self.options)
        self.scope = ScopeResolver()
        self.logger = get_logger("symbols.definitions")

    def find(self, type_names: Sequence[str], root: Path) -> List[Path]:
        self.matcher.prepare(type_names)
        if isinstance(self.matcher, RegexDefinitionMatcher) and self.matcher.pattern is not None:
            self.logger.debug("Final regex pattern: %s", self.matcher.pattern.pattern)

        roots = self.scope.search_roots(root)
        self.logger.debug("Search roots (%d):", len(roots))
        for search_root in roots:
            self.logger.debug("  - %s (%s)", search_root.path, search_root.scope.value)

        found = collect_matches(
            roots, self.scanner, self.matcher.matches, workers=self.options.workers
        )
        self.logger.debug("Total unique files found: %d", len(found))
        return found
