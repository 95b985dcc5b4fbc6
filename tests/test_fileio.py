from __future__ import annotations

from pathlib import Path

import pytest

from pyproj_scaffold.errors import ScaffoldIOError
from pyproj_scaffold.fileio import write


def test_write_creates_missing_parents(tmp_path: Path):
    target = tmp_path / "a" / "b" / "c.txt"

    assert write(target, "héllo") == target
    assert target.read_bytes() == "héllo".encode("utf-8")


def test_write_truncates_existing_file(tmp_path: Path):
    target = tmp_path / "file.txt"
    target.write_text("a much longer original content", encoding="utf-8")

    write(target, b"short")

    assert target.read_bytes() == b"short"


def test_write_empty_content(tmp_path: Path):
    target = tmp_path / "pkg" / "__init__.py"
    write(target, "")
    assert target.read_bytes() == b""


def test_write_reports_path_on_failure(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")

    with pytest.raises(ScaffoldIOError) as excinfo:
        write(blocker / "child.txt", "x")

    assert str(blocker) in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)
