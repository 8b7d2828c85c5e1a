"""Search-path lookup and blocking execution of external programs."""

from __future__ import annotations

import shutil
import subprocess
from typing import Optional, Sequence

from jbshell.errors import CommandNotFoundError


def resolve_executable(command: str, *, search_path: Optional[str] = None) -> str:
    """Return the executable ``command`` names on ``search_path``.

    ``search_path`` defaults to ``$PATH``. Raises
    :class:`CommandNotFoundError` when nothing matches.
    """

    path = shutil.which(command, path=search_path)
    if path is None:
        raise CommandNotFoundError(command)
    return path


def run_executable(path: str, command: str, args: Sequence[str]) -> int:
    """Run ``path`` with ``command`` as argv[0] and wait for it to exit.

    The child inherits the shell's standard streams. Returns the exit status,
    negative when the child was killed by a signal.
    """

    completed = subprocess.run([command, *args], executable=path, check=False)
    return completed.returncode


__all__ = ["resolve_executable", "run_executable"]
