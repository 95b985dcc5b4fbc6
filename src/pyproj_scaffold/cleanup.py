"""Removal of caches and whole projects."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable, Iterable

from .config import CACHE_PATHS
from .errors import ConfirmationRequiredError, ScaffoldIOError

__all__ = ["clean_project", "delete_project"]


LOGGER = logging.getLogger(__name__)

_COVERAGE_FILE = ".coverage"


def clean_project(
    root: str | Path,
    *,
    paths: Iterable[str] = CACHE_PATHS,
    echo: Callable[[str], None] = print,
) -> list[tuple[Path, OSError]]:
    """Remove the known cache directories (and the ``.coverage`` file) under ``root``.

    Removal is best effort: a failure is logged and collected, and the remaining
    entries are still processed. Returns the ``(path, error)`` pairs that could
    not be removed.
    """

    root = Path(root)
    failures: list[tuple[Path, OSError]] = []
    for relative in paths:
        target = root / relative
        if target.is_symlink():
            # Only the link goes; whatever it points at is left in place.
            remover = Path.unlink
        elif target.is_dir():
            remover = shutil.rmtree
        elif relative == _COVERAGE_FILE and target.is_file():
            remover = Path.unlink
        else:
            LOGGER.debug("nothing to remove at %s", target)
            continue

        echo(f"🧹 Removing {target}")
        try:
            remover(target)
        except OSError as exc:
            LOGGER.warning("could not remove %s: %s", target, exc)
            failures.append((target, exc))
    return failures


def delete_project(
    root: str | Path,
    *,
    confirm: bool = False,
    echo: Callable[[str], None] = print,
) -> bool:
    """Delete ``root`` and everything below it.

    Raises :class:`ConfirmationRequiredError` unless ``confirm`` is true. Returns
    ``False`` when there was nothing to delete.
    """

    root = Path(root)
    if not confirm:
        raise ConfirmationRequiredError(
            f"refusing to delete {root} without confirmation; re-run with --yes"
        )

    if not root.exists():
        echo(f"⏭️  {root} does not exist, nothing to delete")
        return False

    echo(f"🗑️  Deleting {root}")
    try:
        if root.is_dir() and not root.is_symlink():
            shutil.rmtree(root)
        else:
            root.unlink()
    except OSError as exc:
        raise ScaffoldIOError("cannot delete project", root) from exc
    return True
