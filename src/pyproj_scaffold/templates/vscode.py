"""Editor configuration written under ``.vscode/``."""

from __future__ import annotations

__all__ = ["vscode_launch_json", "vscode_settings_json", "vscode_tasks_json"]


LAUNCH_JSON = """{
  "version": "0.2.0",
  "configurations": [
    {
      "name": "Python: Current file",
      "type": "debugpy",
      "request": "launch",
      "program": "${file}",
      "cwd": "${workspaceFolder}",
      "env": {
        "PYTHONPATH": "${workspaceFolder}:${workspaceFolder}/src:${workspaceFolder}/Notebooks"
      },
      "console": "integratedTerminal",
      "justMyCode": true,
      "subProcess": true
    },
    {
      "name": "Python: Module src.main",
      "type": "debugpy",
      "request": "launch",
      "module": "src.main",
      "cwd": "${workspaceFolder}",
      "env": {
        "PYTHONPATH": "${workspaceFolder}:${workspaceFolder}/src:${workspaceFolder}/Notebooks"
      },
      "console": "integratedTerminal",
      "justMyCode": true,
      "subProcess": true
    }
  ]
}
"""

SETTINGS_JSON = """{
  "python.defaultInterpreterPath": "${workspaceFolder}/.venv/bin/python",
  "python.terminal.activateEnvironment": true,
  "python.analysis.extraPaths": [
    "${workspaceFolder}",
    "${workspaceFolder}/src",
    "${workspaceFolder}/Notebooks"
  ],
  "python.envFile": "${workspaceFolder}/.env",
  "jupyter.envFile": "${workspaceFolder}/.env",
  "[python]": {
    "editor.defaultFormatter": "ms-python.black-formatter",
    "editor.formatOnSave": true
  },
  "black-formatter.importStrategy": "fromEnvironment",
  "black-formatter.path": ["${workspaceFolder}/.venv/bin/black"],
  "black-formatter.args": ["--line-length", "100"],
  "ruff.interpreter": ["${workspaceFolder}/.venv/bin/python"],
  "notebook.defaultFormatter": "ms-python.black-formatter"
}
"""

TASKS_JSON = """{
  "version": "2.0.0",
  "tasks": [
    {
      "label": "Run (uv): src.main",
      "type": "shell",
      "command": "uv run python -m src.main",
      "options": {
        "cwd": "${workspaceFolder}",
        "env": { "PYTHONPATH": "${workspaceFolder}" }
      },
      "problemMatcher": []
    }
  ]
}
"""


def vscode_launch_json() -> str:
    return LAUNCH_JSON


def vscode_settings_json() -> str:
    return SETTINGS_JSON


def vscode_tasks_json() -> str:
    return TASKS_JSON
