"""Git helpers: work tree discovery and branch diffs."""

from .diff import BranchDiff
from .repo import GitRepository
from .runner import GitRunner, default_runner

__all__ = ["BranchDiff", "GitRepository", "GitRunner", "default_runner"]
