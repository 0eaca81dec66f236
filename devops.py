"""DevOps tasks for fsops.

Usage: uv run devops.py <task>
Tasks: fmt, test, clean
"""

import subprocess
import sys
from pathlib import Path

_CACHE_DIRS = ("__pycache__", ".pytest_cache", ".ruff_cache", ".mypy_cache")
_ARTIFACTS = (".coverage", "htmlcov", "dist", "build")


def _run(commands: list[list[str]]) -> None:
    """Execute a sequence of shell commands, exiting on first failure."""
    for cmd in commands:
        try:
            subprocess.run(cmd, check=True)  # nosec: B603, B607
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def format_code() -> None:
    """Format the codebase with Ruff."""
    print("🎨 Formatting with Ruff...\n")
    _run([["ruff", "format", "."], ["ruff", "check", "--fix", "."]])


def test() -> None:
    """Run tests with PyTest."""
    print("🧪 Testing with PyTest...\n")
    _run([["uv", "run", "pytest", "-q"]])


def clean() -> None:
    """Remove caches and build artifacts using fsops' own best-effort delete."""
    from fsops.filesystem import delete_best_effort

    print("🧹 Cleaning the project...\n")
    root = Path(__file__).parent
    targets = [
        p
        for name in _CACHE_DIRS
        for p in root.rglob(name)
        if ".venv" not in p.relative_to(root).parts
    ]
    targets += [root / name for name in _ARTIFACTS]
    failed = [str(t) for t in targets if not delete_best_effort(t)]
    for path in failed:
        print(f"Could not remove {path}", file=sys.stderr)
    print("\n🟢 Caches & Artifacts → ✅ All fresh now")


TASKS = {"fmt": format_code, "test": test, "clean": clean}


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    TASKS[sys.argv[1]]()
