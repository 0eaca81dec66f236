"""File transfer commands.

Provides commands to copy (optionally with a progress bar), move,
and size files.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.progress import BarColumn, DownloadColumn, Progress, TextColumn, TransferSpeedColumn

from fsops.filesystem.errors import FileOperationError
from fsops.filesystem.queries import file_size
from fsops.filesystem.streams import copy_file, copy_with_progress, move
from fsops.utils.formatting import console, format_size, print_error, print_success

app = typer.Typer(
    help="Copy, move, and inspect files.",
    no_args_is_help=True,
)


@app.command()
def cp(
    source: Annotated[Path, typer.Argument(help="File to copy.")],
    destination: Annotated[Path, typer.Argument(help="Destination file.")],
    append: Annotated[
        bool,
        typer.Option("--append", "-a", help="Append to the destination instead of replacing it."),
    ] = False,
    progress: Annotated[
        bool,
        typer.Option("--progress", "-p", help="Show a progress bar."),
    ] = False,
) -> None:
    """Copy a file, creating the destination's directories if needed."""
    if not source.is_file():
        print_error(f"Source is not a file: {source}")
        raise typer.Exit(code=1)

    if progress:
        _copy_with_progress_bar(source, destination, append)
    else:
        try:
            copy_file(source, destination, append)
        except FileOperationError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    print_success(f"Copied {source} -> {destination}")


@app.command()
def mv(
    source: Annotated[Path, typer.Argument(help="File or directory to move.")],
    destination: Annotated[Path, typer.Argument(help="New location.")],
) -> None:
    """Move a file or directory, copying across devices when needed."""
    if not (source.exists() or source.is_symlink()):
        print_error(f"Source does not exist: {source}")
        raise typer.Exit(code=1)

    try:
        source_removed = move(source, destination)
    except FileOperationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not source_removed:
        print_error(f"Copied to {destination} but could not remove {source}")
        raise typer.Exit(code=1)
    print_success(f"Moved {source} -> {destination}")


@app.command()
def size(
    path: Annotated[Path, typer.Argument(help="File to measure.")],
    raw: Annotated[
        bool,
        typer.Option("--bytes", "-b", help="Print the size in bytes."),
    ] = False,
) -> None:
    """Print the size of a regular file."""
    size_bytes = file_size(path)
    if size_bytes < 0:
        print_error(f"Not a file: {path}")
        raise typer.Exit(code=1)
    console.print(str(size_bytes) if raw else format_size(size_bytes))


# === Private helper functions ===


def _copy_with_progress_bar(source: Path, destination: Path, append: bool) -> None:
    """Copy ``source`` while rendering a Rich progress bar."""
    total = file_size(source)
    columns = (
        TextColumn("[info]{task.description}[/]"),
        BarColumn(),
        DownloadColumn(),
        TransferSpeedColumn(),
    )
    with Progress(*columns, console=console, transient=True) as bar:
        task = bar.add_task(source.name, total=total)

        def on_progress(chunk: int, _remaining: int) -> None:
            bar.advance(task, chunk)

        try:
            stream = open(source, "rb")
        except OSError as e:
            print_error(f"Cannot open {source}: {e}")
            raise typer.Exit(code=1) from e
        result = copy_with_progress(stream, destination, total, on_progress, append)

    if not result:
        print_error(f"Copy failed: {result.error}")
        raise typer.Exit(code=1)
