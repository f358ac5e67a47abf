"""Bundle assembly: filtering, region trimming and formatting."""

from .assembler import SEPARATOR, ContentAssembler, DiffProvider, size_warning
from .filters import filter_excluded, filter_slim, unique_sorted
from .regions import RegionFilter

__all__ = [
    "ContentAssembler",
    "DiffProvider",
    "RegionFilter",
    "SEPARATOR",
    "filter_excluded",
    "filter_slim",
    "size_warning",
    "unique_sorted",
]
