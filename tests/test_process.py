from __future__ import annotations

import re
import subprocess
import sys
from pathlib import Path

import pytest

from pyproj_scaffold import process
from pyproj_scaffold.errors import CommandNotFoundError, ProcessError


def test_run_succeeds_in_working_directory(tmp_path: Path):
    process.run(
        sys.executable,
        ["-c", "import pathlib; pathlib.Path('marker').write_text('ok')"],
        tmp_path,
    )

    assert (tmp_path / "marker").read_text() == "ok"


def test_run_closes_stdin(tmp_path: Path):
    process.run(
        sys.executable,
        ["-c", "import sys; assert sys.stdin.read() == ''"],
        tmp_path,
    )


def test_run_raises_on_non_zero_exit(tmp_path: Path):
    with pytest.raises(ProcessError) as excinfo:
        process.run(sys.executable, ["-c", "raise SystemExit(3)"], tmp_path)

    assert excinfo.value.returncode == 3
    assert excinfo.value.command == sys.executable
    assert "exit status 3" in str(excinfo.value)


def test_run_raises_when_command_is_missing(tmp_path: Path):
    with pytest.raises(CommandNotFoundError) as excinfo:
        process.run("definitely-not-a-real-binary-xyz", ["--help"], tmp_path)

    assert excinfo.value.returncode is None
    assert "definitely-not-a-real-binary-xyz --help" in str(excinfo.value)


def test_detect_system_python_reports_a_version():
    assert re.fullmatch(r"\d+\.\d+\.\d+", process.detect_system_python())


def test_detect_system_python_falls_back_without_interpreter(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(process.shutil, "which", lambda name: None)

    assert process.detect_system_python() == "3.11.0"


def test_detect_system_python_prefers_python3(monkeypatch: pytest.MonkeyPatch):
    looked_up: list[str] = []

    def which(name: str):
        looked_up.append(name)
        return None

    monkeypatch.setattr(process.shutil, "which", which)
    process.detect_system_python()

    assert looked_up == ["python3", "python"]


def test_detect_system_python_falls_back_on_probe_errors(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(process.shutil, "which", lambda name: "/usr/bin/python3")

    def broken_run(*args, **kwargs):
        raise subprocess.TimeoutExpired(cmd="python3", timeout=1)

    monkeypatch.setattr(process.subprocess, "run", broken_run)

    assert process.detect_system_python() == "3.11.0"


def test_detect_system_python_falls_back_on_empty_output(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(process.shutil, "which", lambda name: "/usr/bin/python3")
    monkeypatch.setattr(
        process.subprocess,
        "run",
        lambda *args, **kwargs: subprocess.CompletedProcess(args, 0, stdout="  \n", stderr=""),
    )

    assert process.detect_system_python() == "3.11.0"
