"""Render a :class:`ScaffoldPlan` into a project tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from . import templates
from .config import LOGGING_PACKAGE, SKELETON_DIRS, UV_COMMAND, VENV_DIR, ScaffoldPlan
from .errors import ScaffoldIOError
from .fileio import write
from .process import run

__all__ = ["GENERATED_FILES", "ProjectScaffolder"]


LOGGER = logging.getLogger(__name__)

Runner = Callable[[str, Sequence[str], Path], None]

GENERATED_FILES = (
    "src/__init__.py",
    "src/main.py",
    ".vscode/launch.json",
    ".vscode/settings.json",
    ".vscode/tasks.json",
    ".env",
    ".envrc",
    "pyrefly.toml",
    "pyrightconfig.json",
    "pyproject.toml",
    ".gitignore",
    "README.md",
    "Makefile",
    *(f"{LOGGING_PACKAGE}/{name}" for name, _ in templates.APP_LOGGING_FILES),
)


@dataclass(slots=True)
class ProjectScaffolder:
    """Write the boilerplate files of a project and provision its toolchain.

    ``runner`` executes external commands and defaults to
    :func:`pyproj_scaffold.process.run`; ``echo`` receives the progress lines
    shown to the user.
    """

    runner: Runner | None = None
    echo: Callable[[str], None] = field(default=print)

    def create(self, plan: ScaffoldPlan, *, provision: bool = True) -> Path:
        """Generate the whole project described by ``plan``.

        The toolchain is provisioned last so every file exists even when ``uv``
        fails. Any error aborts the run and propagates.
        """

        LOGGER.info("scaffolding %s (python %s) in %s", plan.project, plan.py_full, plan.root)
        self.make_skeleton(plan)
        self.write_basic_src(plan)
        self.write_vscode(plan)
        self.write_envs(plan)
        self.write_pyrefly(plan)
        self.write_pyright(plan)
        self.write_pyproject(plan)
        self.write_gitignore(plan)
        self.write_readme(plan)
        self.write_makefile(plan)
        self.write_app_logging(plan)
        if provision:
            self.install_uv_toolchain(plan)
        else:
            LOGGER.info("skipping toolchain provisioning")
        return plan.root

    def make_skeleton(self, plan: ScaffoldPlan) -> None:
        for relative in SKELETON_DIRS:
            directory = plan.root / relative
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise ScaffoldIOError("cannot create directory", directory) from exc

    def write_basic_src(self, plan: ScaffoldPlan) -> None:
        write(plan.root / "src/__init__.py", "")
        write(plan.root / "src/main.py", templates.main_py())

    def write_vscode(self, plan: ScaffoldPlan) -> None:
        write(plan.root / ".vscode/launch.json", templates.vscode_launch_json())
        write(plan.root / ".vscode/settings.json", templates.vscode_settings_json())
        write(plan.root / ".vscode/tasks.json", templates.vscode_tasks_json())

    def write_envs(self, plan: ScaffoldPlan) -> None:
        write(plan.root / ".env", templates.dotenv())
        write(plan.root / ".envrc", templates.envrc())

    def write_pyrefly(self, plan: ScaffoldPlan) -> None:
        write(plan.root / "pyrefly.toml", templates.pyrefly_toml(plan.context()))

    def write_pyright(self, plan: ScaffoldPlan) -> None:
        write(plan.root / "pyrightconfig.json", templates.pyrightconfig_json(plan.context()))

    def write_pyproject(self, plan: ScaffoldPlan) -> None:
        write(plan.root / "pyproject.toml", templates.pyproject_toml(plan.context()))

    def write_gitignore(self, plan: ScaffoldPlan) -> None:
        write(plan.root / ".gitignore", templates.gitignore())

    def write_readme(self, plan: ScaffoldPlan) -> None:
        write(plan.root / "README.md", templates.readme_md(plan.context()))

    def write_makefile(self, plan: ScaffoldPlan) -> None:
        write(plan.root / "Makefile", templates.makefile())

    def write_app_logging(self, plan: ScaffoldPlan) -> None:
        base = plan.root / LOGGING_PACKAGE
        for name, content in templates.APP_LOGGING_FILES:
            write(base / name, content())

    def install_uv_toolchain(self, plan: ScaffoldPlan) -> None:
        runner = self.runner or run
        self.echo(f"⚙️  Installing Python {plan.py_full} via uv …")
        runner(UV_COMMAND, ["python", "install", plan.py_full], plan.root)
        self.echo("🧪 Creating uv venv …")
        runner(UV_COMMAND, ["venv", "--python", plan.py_full, VENV_DIR], plan.root)
