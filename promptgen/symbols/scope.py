"""Search root selection that respects package boundaries."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Set

from ..config import BUILD_ARTIFACT_DIR, PACKAGE_MANIFEST
from ..models import ScopeKind, SearchRoot


def resolve_search_roots(root: Path) -> List[SearchRoot]:
    """Return the directories definition search should cover.

    A root that is itself a package is searched alone. Otherwise the root
    (unless it is a build-artifact directory) is searched together with every
    nested package, ignoring manifests that live under build artifacts.
    """
    if (root / PACKAGE_MANIFEST).is_file():
        return [SearchRoot(path=root, scope=ScopeKind.PACKAGE_LOCAL)]

    roots: List[SearchRoot] = []
    if root.name != BUILD_ARTIFACT_DIR:
        roots.append(SearchRoot(path=root, scope=ScopeKind.GLOBAL))

    packages: Set[Path] = set()
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [name for name in dirnames if name != BUILD_ARTIFACT_DIR]
        if PACKAGE_MANIFEST not in filenames:
            continue
        manifest = Path(dirpath) / PACKAGE_MANIFEST
        if f"/{BUILD_ARTIFACT_DIR}/" in manifest.as_posix():
            continue
        packages.add(Path(dirpath))

    for package in packages:
        if package != root:
            roots.append(SearchRoot(path=package, scope=ScopeKind.PACKAGE_LOCAL))
    return sorted(roots, key=lambda item: item.path)


def find_package_root(path: Path, stop_at: Path) -> Optional[Path]:
    """Return the nearest ancestor of ``path`` holding a package manifest.

    The walk stops at ``stop_at`` (inclusive); None means the file does not
    belong to any package below that directory.
    """
    current = path if path.is_dir() else path.parent
    while True:
        if (current / PACKAGE_MANIFEST).is_file():
            return current
        if current == stop_at or current.parent == current:
            return None
        current = current.parent


class ScopeResolver:
    """Resolves search roots and the package a file belongs to."""

    def search_roots(self, root: Path) -> List[SearchRoot]:
        return resolve_search_roots(root)

    def package_root(self, path: Path, stop_at: Path) -> Optional[Path]:
        return find_package_root(path, stop_at)
