"""Catalog of the text files written into a generated project."""

from __future__ import annotations

from .app_logging import (
    APP_LOGGING_FILES,
    app_logging_config07_json,
    app_logging_constants_py,
    app_logging_glogger_py,
    app_logging_my_colored_formatter_py,
    app_logging_my_custom_json_class01_py,
    app_logging_my_filters_py,
)
from .project import (
    dotenv,
    envrc,
    gitignore,
    main_py,
    makefile,
    pyproject_toml,
    pyrefly_toml,
    pyrightconfig_json,
    readme_md,
)
from .vscode import vscode_launch_json, vscode_settings_json, vscode_tasks_json

__all__ = [
    "APP_LOGGING_FILES",
    "app_logging_config07_json",
    "app_logging_constants_py",
    "app_logging_glogger_py",
    "app_logging_my_colored_formatter_py",
    "app_logging_my_custom_json_class01_py",
    "app_logging_my_filters_py",
    "dotenv",
    "envrc",
    "gitignore",
    "main_py",
    "makefile",
    "pyproject_toml",
    "pyrefly_toml",
    "pyrightconfig_json",
    "readme_md",
    "vscode_launch_json",
    "vscode_settings_json",
    "vscode_tasks_json",
]
