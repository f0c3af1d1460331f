"""Settings commands.

Provides commands to display the effective settings and to set or
clear the recycle bin excluded from unmapped folder scans.
"""

from typing import Annotated

import typer
from rich.table import Table

from rootkeeper.cli.types import require_settings
from rootkeeper.core.paths import get_settings_path
from rootkeeper.core.settings import SettingsError, save_settings
from rootkeeper.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and change rootkeeper settings.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective settings."""
    settings = require_settings()

    table = Table(
        title=f"Settings ({get_settings_path()})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="text")
    table.add_column("Value", style="info")

    table.add_row("recycle_bin", settings.recycle_bin or "[muted](not set)[/muted]")
    table.add_row("path_flavor", f"{settings.path_flavor} ({settings.effective_flavor.value})")
    table.add_row("store_path", str(settings.effective_store_path))
    table.add_row("inventory_path", str(settings.effective_inventory_path))

    console.print(table)


@app.command("recycle-bin")
def recycle_bin(
    path: Annotated[
        str | None,
        typer.Argument(help="Recycle bin directory to exclude from scans."),
    ] = None,
    clear: Annotated[
        bool,
        typer.Option("--clear", help="Stop excluding a recycle bin."),
    ] = False,
) -> None:
    """Show, set or clear the recycle bin path."""
    settings = require_settings()

    if path is None and not clear:
        if settings.recycle_bin:
            console.print(settings.recycle_bin)
        else:
            print_info("No recycle bin configured.")
        return

    if path is not None and clear:
        print_error("Pass either a path or --clear, not both.")
        raise typer.Exit(code=1)

    updated = settings.model_copy(update={"recycle_bin": None if clear else path})
    try:
        saved_to = save_settings(updated)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if clear:
        print_success(f"Recycle bin cleared ({saved_to}).")
    else:
        print_success(f"Recycle bin set to {path} ({saved_to}).")
