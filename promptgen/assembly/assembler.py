"""Assembles the final prompt text from the resolved files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from ..config import RunOptions
from ..logging import get_logger
from ..models import CANONICAL_MARKER, BundleSection, ContentBundle, MarkerKind, SourceFile
from .filters import unique_sorted
from .regions import RegionFilter

SEPARATOR = "-" * 50


class DiffProvider(Protocol):
    """Anything that can describe how a file differs from a reference."""

    def diff(self, path: Path) -> str:
        ...


def size_warning(size: int, threshold: int) -> Optional[str]:
    """Return the oversize warning, or None when ``size`` is within bounds."""
    if size <= threshold:
        return None
    return (
        f"WARNING: The prompt is {size} characters long. "
        "This may exceed what the AI can handle effectively."
    )


class ContentAssembler:
    """Builds a ContentBundle; output depends only on the inputs."""

    def __init__(
        self,
        options: RunOptions | None = None,
        differ: DiffProvider | None = None,
        region_filter: RegionFilter | None = None,
    ) -> None:
        self.options = options or RunOptions()
        self.differ = differ
        self.region_filter = region_filter or RegionFilter(self.options.region_markers)
        self.logger = get_logger("assembly")

    def assemble(self, files: Sequence[Path], instruction: str) -> ContentBundle:
        sections: List[BundleSection] = []
        blocks: List[str] = []
        for path in unique_sorted(files):
            content = self.region_filter.apply(SourceFile(path).text).rstrip("\n")
            blocks.append(
                f"The contents of {path.name} is as follows:\n\n{content}\n\n{SEPARATOR}\n"
            )
            diff = self._diff_for(path)
            if diff:
                blocks.append(
                    f"The diff for {path.name} (against branch `{self.options.diff_with}`)"
                    f" is as follows:\n\n{diff}\n\n{SEPARATOR}\n"
                )
            sections.append(BundleSection(path=path, content=content, diff=diff))

        body = "".join(blocks).replace(MarkerKind.LEGACY.value, CANONICAL_MARKER)
        text = f"{body}\n{instruction}"
        warning = size_warning(len(text), self.options.size_threshold)
        if warning:
            self.logger.debug("Bundle exceeds %d characters", self.options.size_threshold)
        return ContentBundle(
            sections=tuple(sections),
            instruction=instruction,
            text=text,
            warning=warning,
        )

    def _diff_for(self, path: Path) -> Optional[str]:
        if self.differ is None or not self.options.diff_with:
            return None
        diff = self.differ.diff(path).rstrip("\n")
        return diff or None
