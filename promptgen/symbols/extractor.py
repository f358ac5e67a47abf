"""Heuristic extraction of candidate type names from source text."""

from __future__ import annotations

import re
from typing import Iterable, Set, Tuple

from ..models import SourceFile

_TYPE_TOKEN = re.compile(r"^[A-Z][A-Za-z0-9]+$")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")

# Capitalised keywords that never name a user type.
_KEYWORDS = frozenset({"Self", "Type", "Protocol", "Any", "AnyObject"})


def extract_type_names(text: str) -> Tuple[str, ...]:
    """Return the sorted, de-duplicated capitalised tokens found in ``text``.

    Punctuation is blanked out first, so ``[Item]`` and ``Item?`` both yield
    ``Item``. Import lines contribute nothing; comments do, so types named in the
    instruction itself become candidates. Spurious
    words are expected; later stages simply find no declaration for them.
    """
    names: Set[str] = set()
    for raw_line in text.splitlines():
        line = _NON_ALNUM.sub(" ", raw_line).strip()
        if not line or line.startswith("import "):
            continue
        for token in line.split():
            if token in _KEYWORDS:
                continue
            if _TYPE_TOKEN.match(token):
                names.add(token)
    return tuple(sorted(names))


class TypeNameExtractor:
    """Derives candidate type identifiers for a file."""

    def extract(self, source: SourceFile) -> Tuple[str, ...]:
        return extract_type_names(source.text)


def write_type_names(names: Iterable[str]) -> str:
    """Render names in the newline-delimited list format."""
    return "".join(f"{name}\n" for name in names)
