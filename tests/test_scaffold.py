from __future__ import annotations

import json
import tomllib
from pathlib import Path

import pytest

from pyproj_scaffold.config import ScaffoldPlan
from pyproj_scaffold.errors import ProcessError, ScaffoldIOError
from pyproj_scaffold.scaffold import GENERATED_FILES, ProjectScaffolder

EMPTY_FILES = {"src/__init__.py", "src/app_logging/__init__.py"}


@pytest.fixture()
def scaffolder() -> ProjectScaffolder:
    return ProjectScaffolder(echo=lambda message: None)


@pytest.fixture()
def plan(tmp_path: Path) -> ScaffoldPlan:
    return ScaffoldPlan(root=tmp_path / "demo", project="demo", py_full="3.13.5")


def _tree(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in root.rglob("*")
        if path.is_file()
    }


def test_scaffolder_creates_expected_file_set(scaffolder: ProjectScaffolder, plan: ScaffoldPlan):
    scaffolder.create(plan)

    files = _tree(plan.root)
    assert set(files) == set(GENERATED_FILES)
    for name, content in files.items():
        if name in EMPTY_FILES:
            assert content == b"", name
        else:
            assert content, f"{name} should not be empty"


def test_scaffolder_creates_skeleton_dirs(scaffolder: ProjectScaffolder, plan: ScaffoldPlan):
    scaffolder.create(plan)

    for directory in ("src", "tests", "Notebooks", ".vscode", "src/app_logging"):
        assert (plan.root / directory).is_dir()


def test_generated_configs_carry_plan_values(scaffolder: ProjectScaffolder, plan: ScaffoldPlan):
    scaffolder.create(plan)

    pyproject = tomllib.loads((plan.root / "pyproject.toml").read_text(encoding="utf-8"))
    pyrefly = tomllib.loads((plan.root / "pyrefly.toml").read_text(encoding="utf-8"))
    pyright = json.loads((plan.root / "pyrightconfig.json").read_text(encoding="utf-8"))
    readme = (plan.root / "README.md").read_text(encoding="utf-8")

    assert pyproject["project"]["name"] == "demo"
    assert pyproject["tool"]["ruff"]["target-version"] == "py313"
    assert pyrefly["project"]["name"] == "demo"
    assert pyrefly["project"]["python"] == "3.13.5"
    assert pyright["pythonVersion"] == "3.13"
    assert readme.splitlines()[0] == "# demo"


def test_create_is_idempotent(scaffolder: ProjectScaffolder, plan: ScaffoldPlan):
    scaffolder.create(plan)
    first = _tree(plan.root)
    (plan.root / "README.md").write_text("edited", encoding="utf-8")

    scaffolder.create(plan)

    assert _tree(plan.root) == first


def test_toolchain_is_provisioned_last(
    scaffolder: ProjectScaffolder, plan: ScaffoldPlan, recorded_commands
):
    scaffolder.create(plan)

    assert recorded_commands.calls == [
        ("uv", ("python", "install", "3.13.5"), plan.root),
        ("uv", ("venv", "--python", "3.13.5", ".venv"), plan.root),
    ]


def test_provision_can_be_skipped(
    scaffolder: ProjectScaffolder, plan: ScaffoldPlan, recorded_commands
):
    scaffolder.create(plan, provision=False)

    assert recorded_commands.calls == []
    assert (plan.root / "pyproject.toml").exists()


def test_provisioning_failure_keeps_files(plan: ScaffoldPlan):
    def failing_runner(command, args, cwd):
        raise ProcessError(command, args, 2)

    scaffolder = ProjectScaffolder(runner=failing_runner, echo=lambda message: None)

    with pytest.raises(ProcessError):
        scaffolder.create(plan)

    assert set(_tree(plan.root)) == set(GENERATED_FILES)


def test_unwritable_root_aborts(scaffolder: ProjectScaffolder, tmp_path: Path, recorded_commands):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    plan = ScaffoldPlan(root=blocker / "demo", project="demo", py_full="3.12.0")

    with pytest.raises(ScaffoldIOError):
        scaffolder.create(plan)

    assert recorded_commands.calls == []


@pytest.mark.parametrize("project", ["café", "demo🚀", 'say "hi"'])
def test_non_ascii_project_names_stay_verbatim(
    scaffolder: ProjectScaffolder, tmp_path: Path, project: str
):
    plan = ScaffoldPlan(root=tmp_path / "out", project=project, py_full="3.13.5")
    scaffolder.create(plan, provision=False)

    for name in ("pyproject.toml", "pyrefly.toml"):
        text = (plan.root / name).read_text(encoding="utf-8")
        assert tomllib.loads(text)["project"]["name"] == project
        if '"' not in project:
            assert f'name = "{project}"' in text
    readme = (plan.root / "README.md").read_text(encoding="utf-8")
    assert readme.splitlines()[0] == f"# {project}"
