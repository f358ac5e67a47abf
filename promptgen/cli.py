"""CLI entrypoint for promptgen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .clipboard import copy_to_clipboard
from .config import build_run_options, load_config
from .errors import InvalidFlagError, PromptGenError
from .logging import configure_logging
from .orchestrator import Orchestrator, RunResult

_RULE = "-" * 50


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptgen",
        description=(
            "Find the single `// TODO: - ` instruction in a repository, gather the files "
            "defining the types it mentions, and copy a ready-made prompt to the clipboard."
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path inside the repository (defaults to current directory).",
    )
    parser.add_argument(
        "--slim",
        action="store_true",
        help="Only include the TODO file and model files (skip views, managers, delegates, ...).",
    )
    parser.add_argument(
        "--singular",
        action="store_true",
        help="Only include the file that contains the TODO instruction.",
    )
    parser.add_argument(
        "--force-global",
        action="store_true",
        help="Search the whole git repository even if the TODO file is inside a package.",
    )
    parser.add_argument(
        "--include-references",
        action="store_true",
        help="Also include files that reference the enclosing type (Swift only, experimental).",
    )
    parser.add_argument(
        "--diff-with",
        metavar="BRANCH",
        help="Append a diff against BRANCH for every included file that differs from it.",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="FILENAME",
        help="Exclude files with this basename (repeatable).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a .promptgen.yml file (defaults to the one at the repository root).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="FILE",
        help="Also write log records to FILE.",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the prompt instead of copying it to the clipboard.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def _validate(args: argparse.Namespace) -> None:
    if args.diff_with is not None and not args.diff_with.strip():
        raise InvalidFlagError("Usage: promptgen [--diff-with <branch>]")
    if any(not name.strip() for name in args.exclude):
        raise InvalidFlagError("Usage: promptgen [--exclude <filename>]")


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entrypoint for promptgen."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        _validate(args)
        orchestrator = Orchestrator()
        config = load_config(args.config or orchestrator.git_root(args.path))
        options = build_run_options(
            config,
            slim=args.slim,
            singular=args.singular,
            force_global=args.force_global,
            include_references=args.include_references,
            diff_with=args.diff_with,
            excludes=args.exclude,
            verbose=bool(args.verbose),
        )
        result = orchestrator.run(args.path, options)
        if args.stdout:
            print(result.bundle.text)
        else:
            copy_to_clipboard(result.bundle.text)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except PromptGenError as exc:
        parser.exit(1, f"Error: {exc}\n")

    _report(result, to_stdout=bool(args.stdout))


def _report(result: RunResult, *, to_stdout: bool) -> None:
    out = sys.stderr if to_stdout else sys.stdout
    print(_RULE, file=out)
    print("", file=out)
    print("Success:", file=out)
    print("", file=out)
    print(result.marker.raw_line, file=out)
    if result.options.include_references:
        print("", file=out)
        print(
            "Warning: The --include-references option is experimental and may produce "
            "unexpected results.",
            file=out,
        )
    print("", file=out)
    print(_RULE, file=out)
    if result.bundle.warning:
        print(result.bundle.warning, file=out)


if __name__ == "__main__":
    main(sys.argv[1:])
