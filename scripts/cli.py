"""Run the planting calendar scripts through one entry point.

Usage::

    python -m scripts <command> [args]

``python -m scripts --help`` lists every command together with the first line
of its module docstring, e.g. ``planting-schedule`` and ``garden-calendar``.
"""

from __future__ import annotations

import argparse
import ast
import pkgutil
import runpy
import sys
from pathlib import Path
from typing import Dict

SCRIPTS_DIR = Path(__file__).resolve().parent
_SKIP = {"cli", "__init__", "__main__"}


def _discover_commands() -> Dict[str, str]:
    """Return mapping of command names to module paths."""
    commands: Dict[str, str] = {}
    for mod in pkgutil.iter_modules([str(SCRIPTS_DIR)]):
        if mod.ispkg or mod.name in _SKIP:
            continue
        commands[mod.name.replace("_", "-")] = f"scripts.{mod.name}"
    return commands


def _command_summary(module_name: str) -> str:
    """Return the first docstring line of ``module_name`` without importing it."""
    path = SCRIPTS_DIR / f"{module_name.rsplit('.', 1)[-1]}.py"
    doc = ast.get_docstring(ast.parse(path.read_text(encoding="utf-8")))
    return doc.strip().splitlines()[0] if doc else ""


def _epilog(commands: Dict[str, str]) -> str:
    width = max(len(name) for name in commands)
    lines = ["commands:"]
    for name in sorted(commands):
        lines.append(f"  {name.ljust(width)}  {_command_summary(commands[name])}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    """Run a planting calendar subcommand."""
    commands = _discover_commands()
    parser = argparse.ArgumentParser(
        description="Planting calendar utilities",
        epilog=_epilog(commands),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("command", choices=sorted(commands), metavar="command")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    ns = parser.parse_args(argv)

    module_name = commands[ns.command]
    sys.argv = [module_name] + ns.args
    runpy.run_module(module_name, run_name="__main__", alter_sys=True)


if __name__ == "__main__":  # pragma: no cover - manual execution
    main()
