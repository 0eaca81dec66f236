"""Directory tree commands.

Provides commands to create directories, delete trees with either
failure policy, and clear expired entries from a directory.
"""

import re
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from fsops.filesystem.deletion import clear_all, clear_expired, delete, delete_best_effort
from fsops.filesystem.directories import create_directory, ensure_parent_dirs
from fsops.filesystem.models import ClearResult
from fsops.utils.formatting import console, print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Create, delete, and clear directory trees.",
    no_args_is_help=True,
)

_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*(ms|s|m|h|d)?\s*$")

_UNIT_MS: dict[str, int] = {
    "ms": 1,
    "s": 1000,
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
}


def parse_duration(value: str) -> int:
    """Convert a duration such as ``90s`` or ``7d`` to milliseconds.

    A bare number is taken as milliseconds.

    Raises:
        typer.BadParameter: If the value is not a recognised duration.
    """
    match = _DURATION_PATTERN.match(value)
    if match is None:
        msg = f"Invalid duration '{value}' (use e.g. 500ms, 90s, 15m, 12h, 7d)"
        raise typer.BadParameter(msg)
    amount, unit = match.groups()
    return int(amount) * _UNIT_MS[unit or "ms"]


def _is_quiet(ctx: typer.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("quiet"))


@app.command()
def mkdir(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Directory to create.")],
    parents_only: Annotated[
        bool,
        typer.Option("--parents-only", help="Only create the directories containing PATH."),
    ] = False,
) -> None:
    """Create a directory and any missing ancestors."""
    if parents_only:
        if not ensure_parent_dirs(str(path)):
            print_error(f"Cannot create parent directories of {path}")
            raise typer.Exit(code=1)
        if not _is_quiet(ctx):
            print_success(f"Parent directories of {path} exist.")
        return

    created = create_directory(path)
    if created is None:
        print_error(f"Cannot create directory {path}")
        raise typer.Exit(code=1)
    if not _is_quiet(ctx):
        print_success(f"Directory {created} exists.")


@app.command()
def rm(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="File or directory to delete.")],
    best_effort: Annotated[
        bool,
        typer.Option(
            "--best-effort",
            help="Keep deleting past entries that cannot be removed.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete a file or a whole directory tree.

    By default the deletion stops at the first entry that cannot be
    removed. With --best-effort every entry is attempted.
    """
    if not (path.exists() or path.is_symlink()):
        print_info(f"Nothing to delete: {path} does not exist.")
        return

    if path.is_dir() and not yes:
        confirmed = typer.confirm(f"Delete directory tree {path}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    removed = delete_best_effort(path) if best_effort else delete(path)
    if not removed:
        print_error(f"Could not delete {path}")
        raise typer.Exit(code=1)
    if not _is_quiet(ctx):
        print_success(f"Deleted {path}")


@app.command()
def clear(
    ctx: typer.Context,
    directory: Annotated[Path, typer.Argument(help="Directory to clear.")],
    older_than: Annotated[
        str | None,
        typer.Option(
            "--older-than",
            "-o",
            help="Only delete entries older than this (e.g. 90s, 12h, 7d).",
        ),
    ] = None,
    all_entries: Annotated[
        bool,
        typer.Option("--all", help="Delete every entry regardless of age."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete entries inside a directory, keeping the directory itself."""
    if (older_than is None) == (not all_entries):
        print_error("Pass exactly one of --older-than or --all.")
        raise typer.Exit(code=2)

    max_age_ms = parse_duration(older_than) if older_than is not None else None

    if not directory.is_dir():
        print_info(f"Nothing to clear: {directory} is not a directory.")
        return

    if not yes:
        scope = "all entries" if max_age_ms is None else f"entries older than {older_than}"
        confirmed = typer.confirm(f"Delete {scope} in {directory}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    result = clear_all(directory) if max_age_ms is None else clear_expired(directory, max_age_ms)
    _print_clear_result(result, quiet=_is_quiet(ctx))

    if result.failures:
        raise typer.Exit(code=1)


# === Private helper functions ===


def _print_clear_result(result: ClearResult, *, quiet: bool) -> None:
    """Display the outcome of a clear operation."""
    if result.failures:
        table = Table(title="Could Not Delete", show_lines=False)
        table.add_column("Path", style="bold")
        for failed in result.failures:
            table.add_row(failed)
        console.print(table)
        print_warning(f"{result.deleted} deleted, {len(result.failures)} failed")
    elif not quiet:
        print_success(f"Deleted {result.deleted} entr{'y' if result.deleted == 1 else 'ies'}.")
