"""Root folder commands.

Provides commands to register, remove, list and inspect library
root folders, including their unmapped subdirectories.
"""

import json
from typing import Annotated, NoReturn

import typer

from rootkeeper.cli.types import OutputFormat, create_manager
from rootkeeper.providers.inventory import InventoryError
from rootkeeper.rootfolders.errors import RootFolderError
from rootkeeper.rootfolders.models import RootFolder
from rootkeeper.utils.formatting import (
    console,
    create_root_folder_table,
    create_unmapped_table,
    format_size,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Manage library root folders.",
    no_args_is_help=True,
)


@app.command()
def add(
    path: Annotated[str, typer.Argument(help="Absolute path of the directory to register.")],
) -> None:
    """Register a directory as a library root folder."""
    manager = create_manager()
    try:
        folder = manager.add(RootFolder(path=path))
    except RootFolderError as e:
        _fail(e)

    print_success(f"Added root folder {folder.id}: {folder.path}")


@app.command()
def remove(
    folder_id: Annotated[int, typer.Argument(help="Id of the root folder to remove.")],
) -> None:
    """Unregister a root folder. Files on disk are left untouched."""
    manager = create_manager()
    try:
        manager.remove(folder_id)
    except RootFolderError as e:
        _fail(e)

    print_success(f"Removed root folder {folder_id}.")


@app.command("list")
def list_folders(
    unmapped: Annotated[
        bool,
        typer.Option("--unmapped", "-u", help="Count unmapped folders in each root."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """List registered root folders."""
    manager = create_manager()
    try:
        folders = manager.get_all(include_unmapped=unmapped)
    except (RootFolderError, InventoryError, OSError) as e:
        _fail(e)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([f.to_dict() for f in folders]))
        return

    if not folders:
        print_info("No root folders registered. Add one with 'rootkeeper roots add PATH'.")
        return

    console.print(create_root_folder_table(folders))


@app.command()
def show(
    folder_id: Annotated[int, typer.Argument(help="Id of the root folder.")],
    no_unmapped: Annotated[
        bool,
        typer.Option("--no-unmapped", help="Skip the unmapped folder scan."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """Show a root folder with its volume space and unmapped folders."""
    manager = create_manager()
    try:
        folder = manager.get(folder_id, include_unmapped=not no_unmapped, include_details=True)
    except (RootFolderError, InventoryError, OSError) as e:
        _fail(e)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(folder.to_dict()))
        return

    console.print(f"[bold_header]Root folder {folder.id}[/]: [folder_path]{folder.path}[/]")
    if folder.accessible is False:
        console.print("[inaccessible]Folder is not accessible.[/]")
    else:
        console.print(
            f"[muted]Free space: {format_size(folder.free_space)}"
            f" / Total: {format_size(folder.total_space)}[/]"
        )

    if folder.unmapped_folders is None:
        return
    if not folder.unmapped_folders:
        print_success("All folders are mapped to library items.")
        return

    console.print(create_unmapped_table(folder.unmapped_folders))
    console.print(f"\n[dim]{len(folder.unmapped_folders)} unmapped folder(s)[/dim]")


def _fail(error: Exception) -> NoReturn:
    """Print an error and exit with a non-zero code."""
    print_error(str(error))
    raise typer.Exit(code=1) from error
