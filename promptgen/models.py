"""Core data models shared across promptgen components."""

from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from pathlib import Path
from typing import Optional, Tuple

from .logging import get_logger

_LOGGER = get_logger("models")


class MarkerKind(Enum):
    """Accepted spellings of the instruction marker."""

    LEGACY = "// TODO: - "
    CHATGPT = "// TODO: ChatGPT: "


CANONICAL_MARKER = MarkerKind.CHATGPT.value


class ScopeKind(Enum):
    """Whether a search root is a package boundary or the whole tree."""

    PACKAGE_LOCAL = "package"
    GLOBAL = "global"


@dataclass(frozen=True)
class SourceFile:
    """A repository file whose text is read on first access."""

    path: Path

    @property
    def extension(self) -> str:
        return self.path.suffix.lstrip(".").lower()

    @property
    def basename(self) -> str:
        return self.path.name

    @cached_property
    def text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            _LOGGER.debug("Unable to read %s: %s", self.path, exc)
            return ""


@dataclass(frozen=True)
class InstructionMarker:
    """The single instruction line that drives a run."""

    path: Path
    kind: MarkerKind
    raw_line: str


@dataclass(frozen=True)
class SearchRoot:
    """Directory in which definition search is performed."""

    path: Path
    scope: ScopeKind


@dataclass(frozen=True)
class BundleSection:
    """Rendered block for one file in the bundle."""

    path: Path
    content: str
    diff: Optional[str] = None

    @property
    def basename(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class ContentBundle:
    """Final prompt text plus the pieces it was built from."""

    sections: Tuple[BundleSection, ...]
    instruction: str
    text: str
    warning: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.text)
