"""Helpers for running external commands and probing the local interpreter."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from .errors import CommandNotFoundError, ProcessError

__all__ = ["DEFAULT_PYTHON_VERSION", "PYTHON_CANDIDATES", "detect_system_python", "run"]


LOGGER = logging.getLogger(__name__)

DEFAULT_PYTHON_VERSION = "3.11.0"
PYTHON_CANDIDATES = ("python3", "python")
_VERSION_SCRIPT = "import sys;print('.'.join(map(str, sys.version_info[:3])))"
_PROBE_TIMEOUT = 10


def run(command: str, args: Sequence[str], cwd: str | Path) -> None:
    """Run ``command`` with ``args`` inside ``cwd`` and wait for it to finish.

    Standard input is closed and the child's output streams go straight to the
    terminal. A non-zero exit status raises :class:`ProcessError`; a command
    that cannot be started raises :class:`CommandNotFoundError`.
    """

    argv = [command, *args]
    LOGGER.info("running %s (cwd=%s)", " ".join(argv), cwd)
    try:
        completed = subprocess.run(argv, cwd=cwd, stdin=subprocess.DEVNULL, check=False)
    except OSError as exc:
        raise CommandNotFoundError(command, args, str(exc)) from exc

    if completed.returncode != 0:
        raise ProcessError(command, args, completed.returncode)


def _find_python() -> str | None:
    for candidate in PYTHON_CANDIDATES:
        found = shutil.which(candidate)
        if found:
            return found
    return None


def detect_system_python() -> str:
    """Return the ``X.Y.Z`` version of the interpreter found on ``PATH``.

    Falls back to :data:`DEFAULT_PYTHON_VERSION` when no interpreter is found or
    the probe fails in any way.
    """

    binary = _find_python()
    if binary is None:
        LOGGER.debug("no python interpreter on PATH, using %s", DEFAULT_PYTHON_VERSION)
        return DEFAULT_PYTHON_VERSION

    try:
        completed = subprocess.run(
            [binary, "-c", _VERSION_SCRIPT],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            timeout=_PROBE_TIMEOUT,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        LOGGER.debug("probing %s failed: %s", binary, exc)
        return DEFAULT_PYTHON_VERSION

    version = completed.stdout.strip()
    if not version:
        LOGGER.debug("%s printed no version, using %s", binary, DEFAULT_PYTHON_VERSION)
        return DEFAULT_PYTHON_VERSION
    return version
