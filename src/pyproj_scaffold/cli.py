"""Command line interface of the project scaffolder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Sequence

from . import __version__
from .cleanup import clean_project, delete_project
from .config import ScaffoldPlan, default_project_name
from .errors import ScaffoldError
from .process import detect_system_python
from .scaffold import ProjectScaffolder

PROG = "py-proj"

BANNER = r"""
  _ \ _ \   _ \     | __|   __| __ __|
  __/   /  (   | \  | _|   (       |
 _|  _|_\ \___/ \__/ ___| \___|   _|

  _ )  |  | _ _|  |     _ \  __|  _ \
  _ \  |  |   |   |     |  | _|     /
 ___/ \__/  ___| ____| ___/ ___| _|_\

┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
┃  🐍  PY-PROJ • Minimal uv + VS Code project scaffolder      ┃
┃  ⚙️  Venv, VS Code, Pyright, Ruff, Pytest, PyRefly, Jupyter ┃
┃  📦  Batteries included — zero cruft, zero fuss             ┃
┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛
"""

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Scaffold a uv managed Python project with VS Code, lint and logging setup",
        add_help=False,
    )

    actions = parser.add_argument_group("actions")
    actions.add_argument(
        "--create_project", action="store_true", help="Generate the project and its virtualenv"
    )
    actions.add_argument(
        "--clean_project", action="store_true", help="Remove caches and build artifacts"
    )
    actions.add_argument(
        "--delete_project",
        action="store_true",
        help="Delete the whole project directory (requires --yes)",
    )

    options = parser.add_argument_group("options")
    options.add_argument("-p", "--project", help="Project name (default: <cwd>_proj)")
    options.add_argument(
        "-P", "--python", help="Python version in X.Y.Z form (default: the one on PATH)"
    )
    options.add_argument(
        "--outdir", type=Path, help="Project directory (default: ./<project>)"
    )
    options.add_argument(
        "-y", "--yes", action="store_true", help="Confirm destructive actions"
    )
    options.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Prompt for the project name and Python version",
    )
    options.add_argument(
        "--no-venv",
        dest="provision",
        action="store_false",
        help="Only write files, do not run uv",
    )
    options.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging"
    )
    options.add_argument("-h", "--help", action="store_true", help="Show this help and exit")
    options.add_argument("-V", "--version", action="store_true", help="Show the version and exit")

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _prompt(label: str, default: str, ask: Callable[[str], str]) -> str:
    answer = ask(f"{label} [{default}]: ").strip()
    return answer or default


def _ask_interactively(
    args: argparse.Namespace, ask: Callable[[str], str] = input
) -> argparse.Namespace:
    """Fill ``project`` and ``python`` from prompts, showing the defaults."""

    default_project = args.project or default_project_name()
    default_python = args.python or detect_system_python()
    args.project = _prompt("Project name", default_project, ask)
    args.python = _prompt("Python version (e.g. 3.13.5)", default_python, ask)
    return args


def _plan_from_args(args: argparse.Namespace) -> ScaffoldPlan:
    try:
        return ScaffoldPlan.from_options(
            project=args.project, outdir=args.outdir, python=args.python
        )
    except ValueError as exc:
        raise ScaffoldError(f"invalid project options: {exc}") from exc


def _handle_create(plan: ScaffoldPlan, args: argparse.Namespace) -> None:
    print(f"📁 Creating project `{plan.project}` (Python {plan.py_full}) in {plan.root}")
    ProjectScaffolder().create(plan, provision=args.provision)
    print(f"\n🎉 Project `{plan.project}` created in {plan.root}\n")
    print(
        "Next:\n"
        f"  cd {plan.root}\n"
        "  direnv allow   # or: source .venv/bin/activate\n"
        '  uv pip install -e ".[dev]"\n'
        "  uv run python -m src.main\n"
        "  uvx ruff check --fix\n"
    )


def _handle_clean(plan: ScaffoldPlan) -> None:
    print(f"🧽 Cleaning caches in {plan.root}")
    failures = clean_project(plan.root)
    if failures:
        print(f"⚠️  {len(failures)} path(s) could not be removed")


def _handle_delete(plan: ScaffoldPlan, args: argparse.Namespace) -> None:
    delete_project(plan.root, confirm=args.yes)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"{PROG} {__version__}")
        return 0

    if args.help or not (args.create_project or args.clean_project or args.delete_project):
        print(BANNER)
        parser.print_help()
        return 0

    _configure_logging(args.verbose)

    try:
        if args.interactive:
            _ask_interactively(args)
        plan = _plan_from_args(args)
        LOGGER.debug("resolved plan: %s", plan.model_dump())

        if args.create_project:
            _handle_create(plan, args)
        if args.clean_project:
            _handle_clean(plan)
        if args.delete_project:
            _handle_delete(plan, args)
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("error: aborted", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
