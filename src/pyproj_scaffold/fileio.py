"""Filesystem primitive used for every generated file."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import ScaffoldIOError

__all__ = ["write"]


LOGGER = logging.getLogger(__name__)


def write(path: str | Path, content: str | bytes) -> Path:
    """Write ``content`` to ``path``, creating missing parent directories.

    Existing files are truncated. Text is encoded as UTF-8. The write is not
    atomic: a failure part way through may leave a truncated file behind.
    """

    destination = Path(path)
    data = content.encode("utf-8") if isinstance(content, str) else bytes(content)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ScaffoldIOError("cannot create directory", destination.parent) from exc

    try:
        with destination.open("wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise ScaffoldIOError("cannot write file", destination) from exc

    LOGGER.debug("wrote %d bytes to %s", len(data), destination)
    return destination
