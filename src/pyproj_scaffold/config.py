"""Resolved parameters for a single scaffolding run."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .process import DEFAULT_PYTHON_VERSION, detect_system_python

__all__ = [
    "CACHE_PATHS",
    "DEFAULT_PYTHON_VERSION",
    "LOGGING_PACKAGE",
    "SKELETON_DIRS",
    "ScaffoldPlan",
    "UV_COMMAND",
    "VENV_DIR",
    "default_project_name",
    "minor_version",
]


UV_COMMAND = "uv"
VENV_DIR = ".venv"
LOGGING_PACKAGE = "src/app_logging"

SKELETON_DIRS = ("src", "tests", "Notebooks", ".vscode", LOGGING_PACKAGE)

CACHE_PATHS = (
    VENV_DIR,
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
    ".ipynb_checkpoints",
    "build",
    "dist",
    "htmlcov",
    ".coverage",
    ".cache",
    "src/__pycache__",
    "tests/__pycache__",
    "Notebooks/.ipynb_checkpoints",
)


def minor_version(py_full: str) -> str:
    """Return the ``X.Y`` part of an ``X.Y.Z`` version string."""

    return ".".join(py_full.split(".")[:2])


def default_project_name(cwd: str | Path | None = None) -> str:
    """Return ``<name of cwd>_proj``, resolving symlinks in ``cwd`` first."""

    base = Path(cwd) if cwd is not None else Path.cwd()
    return f"{base.resolve().name}_proj"


class ScaffoldPlan(BaseModel):
    """Everything the scaffolder needs to know about the project it generates.

    Attributes
    ----------
    root:
        Directory the project is written into. It may already exist.
    project:
        Project name, used verbatim in generated files.
    py_full:
        Full interpreter version such as ``3.13.5``. Only loosely checked; the
        derived :attr:`mm` and :attr:`mm_nodec` values are computed from it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Path = Field(..., description="Target directory of the generated project.")
    project: str = Field(..., description="Project name embedded in the generated files.")
    py_full: str = Field(
        default=DEFAULT_PYTHON_VERSION,
        description="Full Python version in X.Y.Z form.",
    )

    @field_validator("project")
    @classmethod
    def _project_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be empty")
        return value

    @field_validator("py_full")
    @classmethod
    def _version_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("python version must not be empty")
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mm(self) -> str:
        """Major and minor version, e.g. ``3.13``."""

        return minor_version(self.py_full)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def mm_nodec(self) -> str:
        """Major and minor version without the dot, e.g. ``313``."""

        return self.mm.replace(".", "")

    @classmethod
    def from_options(
        cls,
        *,
        project: str | None = None,
        outdir: str | Path | None = None,
        python: str | None = None,
        cwd: str | Path | None = None,
    ) -> "ScaffoldPlan":
        """Build a plan from command line options, filling in the defaults.

        The project name defaults to ``<cwd name>_proj``, the root to
        ``cwd / project`` and the python version to the interpreter found on
        ``PATH``.
        """

        base = Path(cwd) if cwd is not None else Path.cwd()
        name = project if project is not None else default_project_name(base)
        root = Path(outdir).expanduser() if outdir is not None else base / name
        py_full = python if python is not None else detect_system_python()
        return cls(root=root, project=name, py_full=py_full)

    def context(self) -> Mapping[str, str]:
        """Return the values exposed to the templates."""

        return {
            "project": self.project,
            "py_full": self.py_full,
            "mm": self.mm,
            "mm_nodec": self.mm_nodec,
        }
