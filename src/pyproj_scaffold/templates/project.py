"""Top level files of a generated project.

Parametrized templates use ``{{ name }}`` placeholders filled from
:meth:`pyproj_scaffold.config.ScaffoldPlan.context`; the rest are returned as is.
"""

from __future__ import annotations

from typing import Mapping

from ..template import render

__all__ = [
    "dotenv",
    "envrc",
    "gitignore",
    "main_py",
    "makefile",
    "pyproject_toml",
    "pyrefly_toml",
    "pyrightconfig_json",
    "readme_md",
]


MAIN_PY = '''def main() -> None:
    print("Hello from src.main!")


if __name__ == "__main__":
    main()
'''

DOTENV = "PYTHONPATH=.:./src:./Notebooks\nENV=dev\n"

ENVRC = """export PYTHONPATH="${PYTHONPATH}:$PWD:$PWD/src:$PWD/Notebooks"
if [ -f ./.env ]; then
  set -a
  . ./.env
  set +a
fi
"""

PYREFLY_TOML = """[project]
name = {{ project|quote }}
python = {{ py_full|quote }}

[paths]
src = "src"
notebooks = "Notebooks"
venv = ".venv"
env = ".env"

[imports]
import_roots = ["src"]

[lint]
enable = ["ruff"]
format = ["black"]

[test]
runner = "pytest"
coverage = true
"""

PYRIGHTCONFIG_JSON = """{
  "pythonVersion": {{ mm|quote }},
  "pythonPlatform": "Darwin",
  "typeCheckingMode": "basic",
  "reportMissingImports": "warning",
  "useLibraryCodeForTypes": true,
  "include": [".", "src/"],
  "exclude": ["**/__pycache__", ".venv"],
  "venvPath": ".",
  "venv": ".venv",
  "executionEnvironments": [
    {
      "root": ".",
      "extraPaths": [
        "./src",
        "./Notebooks/",
        ".venv/lib/python{{ mm|escape }}/site-packages"
      ]
    }
  ]
}
"""

PYPROJECT_TOML = """[project]
name = {{ project|quote }}
version = "0.1.0"
description = "Minimal project template"
readme = "README.md"
requires-python = ">={{ mm|escape }}"
authors = [{ name = "Your Name" }]
dependencies = []

[tool.uv]

[project.optional-dependencies]
dev = [
  "ruff>=0.6.0",
  "black>=24.0.0",
  "pyright>=1.1.380",
  "pytest>=8.0.0",
  "pytest-cov>=5.0.0",
  "ipykernel>=6.0.0",
  "rich>=13.0.0"
]
test = [
  "pytest>=8.0.0",
  "pytest-cov>=5.0.0"
]

[tool.ruff]
line-length = 100
target-version = "py{{ mm_nodec|escape }}"
extend-exclude = [".venv"]
fix = true

[tool.ruff.lint]
select = ["E", "F", "I", "W", "UP", "B", "C90"]
ignore = []

[tool.ruff.format]
quote-style = "double"
indent-style = "space"

[tool.black]
line-length = 100
target-version = ["py{{ mm_nodec|escape }}"]

[tool.pytest.ini_options]
addopts = "-ra -q --cov=src --cov-report=term-missing"
testpaths = ["tests"]

[tool.coverage.run]
source = ["src"]
branch = true

[tool.coverage.report]
fail_under = 0
show_missing = true
"""

GITIGNORE = """.venv/
__pycache__/
*.pyc
.env
.ipynb_checkpoints/
.coverage
htmlcov/
.mypy_cache/
.pytest_cache/
.ruff_cache/
.cache/
dist/
build/
*.egg-info/
"""

README_MD = """# {{ project }}

Generated by PY-PROJ scaffolder.

## Setup

```bash
cd {{ project }}
direnv allow     # or: source .venv/bin/activate
uv pip install -e ".[dev]"
```

## Running

```bash
uv run python -m src.main
```

## Development

```bash
# Format code
uvx black .

# Lint code
uvx ruff check --fix

# Run tests
uv run pytest

# Type checking
uvx pyright
```

## Structure

- `src/` - Main source code
- `src/app_logging/` - Logging helpers (`from app_logging.glogger import get_logger`)
- `tests/` - Test files
- `Notebooks/` - Jupyter notebooks
- `.vscode/` - VS Code configuration
- `pyproject.toml` - Project configuration
- `pyrefly.toml` - Custom project metadata
"""

# Recipes must be indented with tabs.
MAKEFILE = (
    ".PHONY: help run format lint test typecheck\n"
    "\n"
    "help:\n"
    "\t@echo \"Targets: run format lint test typecheck\"\n"
    "\n"
    "run:\n"
    "\tuv run python -m src.main\n"
    "\n"
    "format:\n"
    "\tuvx black .\n"
    "\tuvx ruff check --fix .\n"
    "\n"
    "lint:\n"
    "\tuvx ruff check .\n"
    "\n"
    "test:\n"
    "\tuv run pytest\n"
    "\n"
    "typecheck:\n"
    "\tuvx pyright\n"
)


def main_py() -> str:
    return MAIN_PY


def dotenv() -> str:
    return DOTENV


def envrc() -> str:
    return ENVRC


def pyrefly_toml(context: Mapping[str, str]) -> str:
    return render(PYREFLY_TOML, context)


def pyrightconfig_json(context: Mapping[str, str]) -> str:
    return render(PYRIGHTCONFIG_JSON, context)


def pyproject_toml(context: Mapping[str, str]) -> str:
    return render(PYPROJECT_TOML, context)


def gitignore() -> str:
    return GITIGNORE


def readme_md(context: Mapping[str, str]) -> str:
    return render(README_MD, context)


def makefile() -> str:
    return MAKEFILE
