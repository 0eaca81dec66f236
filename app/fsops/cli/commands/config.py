"""Settings commands.

Provides commands to write the default settings file and to show the
settings currently in effect.
"""

from typing import Annotated

import tomli_w
import typer

from fsops.core.config import ConfigError, Settings, get_settings, save_config
from fsops.core.paths import get_config_path
from fsops.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Manage fsops settings.",
    no_args_is_help=True,
)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write the default settings to ~/.config/fsops/config.toml."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Settings file already exists: {config_path} (use --force to overwrite)")
        return

    try:
        saved = save_config(Settings(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")


@app.command()
def show() -> None:
    """Show the settings currently in effect as TOML."""
    settings = get_settings()
    console.print(tomli_w.dumps(settings.model_dump(mode="json")), markup=False, highlight=False)
