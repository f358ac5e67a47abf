"""Configuration loading for promptgen (.promptgen.yml) and per-run options."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, Tuple

import yaml

from .errors import PromptGenError

CONFIG_FILENAME = ".promptgen.yml"

DEFAULT_EXCLUDED_DIRS: FrozenSet[str] = frozenset(
    {".build", "Pods", ".git", "node_modules", "DerivedData"}
)
DEFAULT_EXTENSIONS: Tuple[str, ...] = ("swift", "h", "m", "js")
DEFAULT_SLIM_KEYWORDS: Tuple[str, ...] = (
    "ViewController",
    "Manager",
    "Presenter",
    "Configurator",
    "Router",
    "DataSource",
    "Delegate",
    "View",
)
DEFAULT_SIZE_THRESHOLD = 100_000
PACKAGE_MANIFEST = "Package.swift"
BUILD_ARTIFACT_DIR = ".build"


class ConfigError(PromptGenError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class RegionMarkers:
    """Comment tokens delimiting the retained part of a file."""

    start: str = "// v"
    end: str = "// ^"
    placeholder: str = "// ..."


@dataclass
class PromptGenConfig:
    """Represents the settings defined in .promptgen.yml."""

    root: Path
    exclude_dirs: List[str] = field(default_factory=list)
    extensions: List[str] = field(default_factory=list)
    slim_keywords: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    diff_with: Optional[str] = None
    size_threshold: Optional[int] = None
    workers: Optional[int] = None
    region_markers: Optional[RegionMarkers] = None


@dataclass(frozen=True)
class RunOptions:
    """Immutable settings threaded through every pipeline stage."""

    slim: bool = False
    singular: bool = False
    force_global: bool = False
    include_references: bool = False
    diff_with: Optional[str] = None
    excludes: Tuple[str, ...] = ()
    verbose: bool = False
    excluded_dirs: FrozenSet[str] = DEFAULT_EXCLUDED_DIRS
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    slim_keywords: Tuple[str, ...] = DEFAULT_SLIM_KEYWORDS
    size_threshold: int = DEFAULT_SIZE_THRESHOLD
    workers: int = 1
    region_markers: RegionMarkers = RegionMarkers()

    def with_singular(self) -> "RunOptions":
        return replace(self, singular=True)


def load_config(config_path: Path) -> PromptGenConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PromptGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    markers = None
    marker_data = _as_dict(data.get("region_markers"))
    if marker_data:
        defaults = RegionMarkers()
        markers = RegionMarkers(
            start=_as_str(marker_data.get("start")) or defaults.start,
            end=_as_str(marker_data.get("end")) or defaults.end,
            placeholder=_as_str(marker_data.get("placeholder")) or defaults.placeholder,
        )

    return PromptGenConfig(
        root=root,
        exclude_dirs=_as_str_list(data.get("exclude_dirs")),
        extensions=[ext.lstrip(".").lower() for ext in _as_str_list(data.get("extensions"))],
        slim_keywords=_as_str_list(data.get("slim_keywords")),
        exclude=_as_str_list(data.get("exclude")),
        diff_with=_as_str(data.get("diff_with")),
        size_threshold=_as_int(data.get("size_threshold")),
        workers=_as_int(data.get("workers")),
        region_markers=markers,
    )


def build_run_options(
    config: PromptGenConfig,
    *,
    slim: bool = False,
    singular: bool = False,
    force_global: bool = False,
    include_references: bool = False,
    diff_with: Optional[str] = None,
    excludes: Sequence[str] = (),
    verbose: bool = False,
) -> RunOptions:
    """Merge command-line flags over file settings."""
    merged_excludes: List[str] = []
    for name in [*config.exclude, *excludes]:
        if name not in merged_excludes:
            merged_excludes.append(name)

    workers = config.workers if config.workers and config.workers > 0 else 1
    return RunOptions(
        slim=slim,
        singular=singular,
        force_global=force_global,
        include_references=include_references,
        diff_with=diff_with or config.diff_with,
        excludes=tuple(merged_excludes),
        verbose=verbose,
        excluded_dirs=DEFAULT_EXCLUDED_DIRS.union(config.exclude_dirs),
        extensions=tuple(config.extensions) or DEFAULT_EXTENSIONS,
        slim_keywords=tuple(config.slim_keywords) or DEFAULT_SLIM_KEYWORDS,
        size_threshold=config.size_threshold or DEFAULT_SIZE_THRESHOLD,
        workers=workers,
        region_markers=config.region_markers or RegionMarkers(),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
