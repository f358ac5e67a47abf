"""Repository traversal shared by the locator and the symbol finders."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from .config import RunOptions
from .models import SourceFile

_EXCLUDED_FILES = {
    ".DS_Store",
    "Thumbs.db",
}


def resolve_root(root: str | Path) -> Path:
    """Return the absolute repository path, rejecting missing or non-directory roots."""
    root_path = Path(root).expanduser().resolve()
    if not root_path.exists():
        raise FileNotFoundError(f"Repository path not found: {root}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Repository path is not a directory: {root}")
    return root_path


class RepoScanner:
    """Walks a directory tree, pruning build-artifact and vendor directories."""

    def __init__(self, options: RunOptions | None = None) -> None:
        self.options = options or RunOptions()

    def iter_files(self, root: Path) -> Iterator[Path]:
        """Yield every regular file under ``root`` in a stable order."""
        excluded = self.options.excluded_dirs
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(name for name in dirnames if name not in excluded)
            current_dir = Path(dirpath)
            for filename in sorted(filenames):
                if filename in _EXCLUDED_FILES:
                    continue
                path = current_dir / filename
                if path.is_file():
                    yield path

    def iter_source_files(self, root: Path) -> Iterator[SourceFile]:
        """Yield files whose extension is on the allow-list."""
        allowed = {ext.lower() for ext in self.options.extensions}
        for path in self.iter_files(root):
            source = SourceFile(path)
            if source.extension in allowed:
                yield source
