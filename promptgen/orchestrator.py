"""Pipeline orchestration from repository path to finished prompt."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from .assembly import ContentAssembler, filter_excluded, filter_slim, unique_sorted
from .config import RunOptions
from .errors import UnsupportedModeError
from .git import BranchDiff, GitRepository, GitRunner
from .instruction import InstructionLocator, extract_enclosing_type
from .logging import get_logger
from .models import ContentBundle, InstructionMarker, SourceFile
from .repo_scanner import RepoScanner, resolve_root
from .symbols import (
    DefinitionFinder,
    DefinitionMatcher,
    ReferenceFinder,
    ScopeResolver,
    TypeNameExtractor,
    write_type_names,
)

PRIMARY_EXTENSION = ".swift"
SINGULAR_ONLY_EXTENSIONS = (".js",)


@dataclass
class RunResult:
    """Everything a caller may want to report about a run."""

    marker: InstructionMarker
    git_root: Path
    search_root: Path
    type_names: Tuple[str, ...]
    files: List[Path]
    bundle: ContentBundle
    options: RunOptions


class Orchestrator:
    """Coordinates locating, resolving and assembling for a single run."""

    def __init__(
        self,
        git_runner: GitRunner | None = None,
        matcher: DefinitionMatcher | None = None,
        extractor: TypeNameExtractor | None = None,
    ) -> None:
        self._git_runner = git_runner
        self._matcher = matcher
        self.extractor = extractor or TypeNameExtractor()
        self.repository = GitRepository(runner=git_runner)
        self.scope = ScopeResolver()
        self.logger = get_logger("orchestrator")

    def git_root(self, path: str | Path) -> Path:
        """Return the work tree root enclosing ``path``."""
        return self.repository.toplevel(resolve_root(path))

    def run(self, path: str | Path, options: RunOptions | None = None) -> RunResult:
        options = options or RunOptions()
        git_root = self.git_root(path)
        self.logger.info("Git root: %s", git_root)

        locator = InstructionLocator(RepoScanner(options))
        marker = locator.locate(git_root)
        instruction_path = marker.path
        self.logger.info("Found exactly one instruction in %s", instruction_path)

        if instruction_path.suffix in SINGULAR_ONLY_EXTENSIONS and not options.singular:
            self.logger.warning(
                "JavaScript support is currently in beta. Singular mode will be enforced, "
                "so only the file containing the TODO instruction will be used for context."
            )
            options = options.with_singular()

        if options.include_references and instruction_path.suffix != PRIMARY_EXTENSION:
            raise UnsupportedModeError(
                "The --include-references option is currently only supported for Swift files. "
                f"The TODO instruction was found in a non-Swift file: {instruction_path.name}"
            )

        search_root = self._search_root(instruction_path, git_root, options)

        type_names: Tuple[str, ...] = ()
        if options.singular:
            self.logger.info("Singular mode enabled: only including the TODO file")
            files = [instruction_path]
        else:
            type_names = self.extractor.extract(SourceFile(instruction_path))
            finder = DefinitionFinder(options, matcher=self._matcher)
            files = finder.find(type_names, search_root)
            files.append(instruction_path)
            if options.slim:
                self.logger.info(
                    "Slim mode enabled: filtering files to include only the TODO file and model files"
                )
                files = filter_slim(files, instruction_path, options.slim_keywords)

        if options.include_references:
            files.extend(self._reference_files(instruction_path, search_root, options))

        if options.excludes:
            self.logger.info("Excluding files matching: %s", " ".join(options.excludes))
            files = filter_excluded(files, options.excludes)

        files = unique_sorted(files)
        if type_names:
            self.logger.info("Types found:\n%s", write_type_names(type_names).rstrip("\n"))
        self.logger.info("Files (final list):\n%s", "\n".join(path.name for path in files))

        differ = BranchDiff(options.diff_with, runner=self._git_runner) if options.diff_with else None
        assembler = ContentAssembler(options, differ=differ)
        bundle = assembler.assemble(files, marker.raw_line)

        return RunResult(
            marker=marker,
            git_root=git_root,
            search_root=search_root,
            type_names=type_names,
            files=files,
            bundle=bundle,
            options=options,
        )

    def _search_root(self, instruction_path: Path, git_root: Path, options: RunOptions) -> Path:
        if options.force_global:
            self.logger.info(
                "Force global enabled: ignoring package boundaries and using Git root for context."
            )
            return git_root
        package_root = self.scope.package_root(instruction_path, git_root)
        if package_root is not None:
            self.logger.info("Found package root: %s", package_root)
            return package_root
        return git_root

    def _reference_files(
        self, instruction_path: Path, search_root: Path, options: RunOptions
    ) -> List[Path]:
        self.logger.info("Including files that reference the enclosing type...")
        enclosing: Optional[str] = extract_enclosing_type(instruction_path)
        if not enclosing:
            self.logger.info(
                "No enclosing type found in %s, skipping reference search.", instruction_path.name
            )
            return []
        self.logger.info(
            "Found enclosing type '%s'. Searching for files that reference '%s' in: %s",
            enclosing,
            enclosing,
            search_root,
        )
        return ReferenceFinder(options).find(enclosing, search_root)
