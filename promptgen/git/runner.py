"""Subprocess runner shared by the git helpers."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable

from ..errors import GitError

GitRunner = Callable[..., str]


def default_runner(
    args: Iterable[str],
    *,
    cwd: Path,
    capture_output: bool = False,
) -> str:
    command = list(args)
    try:
        completed = subprocess.run(
            command,
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
        )
    except FileNotFoundError as exc:
        raise GitError("git executable not found on PATH") from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise GitError(f"`{' '.join(command)}` failed: {detail}") from exc
    return completed.stdout if capture_output else ""
