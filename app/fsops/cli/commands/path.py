"""Path inspection commands.

Shows how a path string splits into parent, name, stem, and extension.
"""

import json
import os
from dataclasses import asdict
from enum import Enum
from typing import Annotated

import typer

from fsops.filesystem.components import components
from fsops.utils.formatting import console, create_components_table

app = typer.Typer(
    help="Inspect path components.",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for path inspection."""

    TABLE = "table"
    JSON = "json"


@app.command()
def show(
    path: Annotated[str, typer.Argument(help="Path string to decompose.")],
    sep: Annotated[
        str,
        typer.Option("--sep", help="Path separator to split on."),
    ] = os.sep,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the parent, name, stem, and extension of a path.

    The path is parsed as a string only; it does not need to exist.

    Examples:
        fsops path show /home/admin/a.txt/b.mp3
        fsops path show 'c:a.txt\\a' --sep '\\'
    """
    if not sep:
        raise typer.BadParameter("Separator cannot be empty", param_hint="--sep")

    parts = components(path, sep=sep)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps({"path": path, **asdict(parts)}))
        return

    console.print(create_components_table(path, parts))
