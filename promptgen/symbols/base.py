"""Base classes for declaration matchers."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..models import SourceFile


class DefinitionMatcher(ABC):
    """Contract for strategies deciding whether a file declares a type."""

    @abstractmethod
    def prepare(self, type_names: Sequence[str]) -> None:
        """Compile whatever state is needed for the given candidate names."""

    @abstractmethod
    def matches(self, source: SourceFile) -> bool:
        """Return True when ``source`` declares at least one candidate."""
