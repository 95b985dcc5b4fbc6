"""Scaffold uv managed Python projects.

The package renders a fixed set of templates (sources, VS Code settings, lint
and type-checker configuration, a logging helper package) into a project
directory and asks ``uv`` to provision the virtual environment. It can be used
programmatically through :class:`ScaffoldPlan` and :class:`ProjectScaffolder`
or from the ``py-proj`` command line.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .cleanup import clean_project, delete_project
from .config import ScaffoldPlan
from .errors import (
    CommandNotFoundError,
    ConfirmationRequiredError,
    ProcessError,
    ScaffoldError,
    ScaffoldIOError,
)
from .process import detect_system_python
from .scaffold import ProjectScaffolder

__all__ = [
    "CommandNotFoundError",
    "ConfirmationRequiredError",
    "ProcessError",
    "ProjectScaffolder",
    "ScaffoldError",
    "ScaffoldIOError",
    "ScaffoldPlan",
    "clean_project",
    "delete_project",
    "detect_system_python",
]
