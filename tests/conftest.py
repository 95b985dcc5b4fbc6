from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class CommandRecorder:
    """Stand-in for the process runner that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[str, ...], Path]] = []

    def __call__(self, command: str, args, cwd) -> None:
        self.calls.append((command, tuple(args), Path(cwd)))


@pytest.fixture(autouse=True)
def recorded_commands(monkeypatch: pytest.MonkeyPatch) -> CommandRecorder:
    """Keep the scaffolder from invoking the real ``uv`` binary."""

    recorder = CommandRecorder()
    monkeypatch.setattr("pyproj_scaffold.scaffold.run", recorder)
    return recorder
