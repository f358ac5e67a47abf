"""File list filters applied before assembly."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence


def unique_sorted(paths: Iterable[Path]) -> List[Path]:
    """Return paths de-duplicated and sorted, as the bundle order requires."""
    return sorted(set(paths))


def filter_slim(
    paths: Iterable[Path], instruction_path: Path, keywords: Sequence[str]
) -> List[Path]:
    """Keep the instruction file and "model" files.

    A file is dropped when its basename contains any keyword, which screens
    out view, controller and coordination types.
    """
    kept: List[Path] = []
    for path in paths:
        if path == instruction_path or not any(keyword in path.name for keyword in keywords):
            kept.append(path)
    return kept


def filter_excluded(paths: Iterable[Path], basenames: Sequence[str]) -> List[Path]:
    """Drop files whose basename is listed in ``basenames``."""
    excluded = set(basenames)
    return [path for path in paths if path.name not in excluded]
