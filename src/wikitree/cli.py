"""Main CLI entry point for the wikitree tool."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.markup import escape
from rich.table import Table

from wikitree import core
from wikitree.cli_helpers import (
    build_rich_tree,
    configure_logging,
    console,
    handle_wikitree_error,
)
from wikitree.exceptions import FolderOperationError, WikiTreeError
from wikitree.manager import FolderManager

app = typer.Typer(
    name="wikitree",
    help="wikitree CLI - Inspect and manage amWiki library folders",
    add_completion=False,
)


def _resolve_start(path: Optional[Path]) -> str:
    return str((path or Path.cwd()).resolve())


def _scan_library_at(path: Optional[Path]):
    """Locate the library for path and scan it, aborting on failure."""
    try:
        library = core.find_library(_resolve_start(path))
    except WikiTreeError as e:
        handle_wikitree_error(e)
        raise typer.Abort()

    return library, FolderManager().scan_library(library)


# Global options callback
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """Main callback - shows help if no command provided."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("tree")
def show_tree(
    path: Optional[Path] = typer.Argument(
        None,
        help="Path inside a wiki project (default: current directory)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the tree as JSON (false for files, objects for folders)",
    ),
) -> None:
    """Show the folder tree of a wiki library."""
    library, result = _scan_library_at(path)

    if as_json:
        typer.echo(json.dumps(result.tree.to_dict(), ensure_ascii=False, indent=2))
        return

    console.print(build_rich_tree(library, result.tree))


@app.command("list")
def list_entries(
    path: Optional[Path] = typer.Argument(
        None,
        help="Path inside a wiki project (default: current directory)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the entries as a JSON list",
    ),
) -> None:
    """List every folder and file of a wiki library with its depth."""
    library, result = _scan_library_at(path)

    if as_json:
        entries = [entry.to_dict() for entry in result.entries]
        typer.echo(json.dumps(entries, ensure_ascii=False, indent=2))
        return

    if not result.entries:
        console.print(f"[yellow]No entries found in {escape(library)}[/yellow]")
        return

    table = Table(title=f"Entries in {escape(library)}", box=box.ROUNDED)
    table.add_column("Depth", justify="right", style="cyan", no_wrap=True)
    table.add_column("Type", style="magenta", no_wrap=True)
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Folder", style="yellow")

    for entry in result.entries:
        table.add_row(
            str(entry.depth),
            entry.type.value,
            escape(entry.name),
            escape(entry.path),
        )

    console.print()
    console.print(table)


@app.command("files")
def list_files(
    path: Optional[Path] = typer.Argument(
        None,
        help="Path inside a wiki project (default: current directory)",
    ),
) -> None:
    """Print the path of every file in a wiki library, one per line."""
    _, result = _scan_library_at(path)

    for file_path in result.files:
        typer.echo(file_path)


@app.command("root")
def show_root(
    path: Optional[Path] = typer.Argument(
        None,
        help="Path inside a wiki project (default: current directory)",
    ),
) -> None:
    """Print the root folder of the amWiki project containing a path."""
    try:
        project = core.find_wiki_root(_resolve_start(path))
    except WikiTreeError as e:
        handle_wikitree_error(e)
        raise typer.Abort()

    typer.echo(project)


@app.command("level1")
def show_level1_id(
    path: Path = typer.Argument(..., help="File or folder inside a library"),
) -> None:
    """Print the id of the top-level library folder a path belongs to."""
    level1_id = FolderManager().get_level1_id(str(path.resolve()))
    if not level1_id:
        console.print(f"[yellow]Not inside a library folder: {escape(str(path))}[/yellow]")
        raise typer.Exit(code=1)

    typer.echo(level1_id)


@app.command("clean")
def clean(
    path: Path = typer.Argument(..., help="Folder to empty"),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Delete everything inside a folder except hidden folders."""
    target = path.resolve()
    if not target.is_dir():
        handle_wikitree_error(FolderOperationError("clean folder", f"Not a folder: {target}"))
        raise typer.Abort()

    if not force and not typer.confirm(f"Delete everything inside {target}?"):
        console.print("[green]Nothing deleted[/green]")
        raise typer.Abort()

    try:
        FolderManager().clean_folder(str(target))
    except OSError as e:
        handle_wikitree_error(FolderOperationError("clean folder", str(e)))
        raise typer.Abort()

    console.print(f"[green]✓ Cleaned {escape(str(target))}[/green]")


@app.command("mkdir")
def make_folder(
    path: Path = typer.Argument(..., help="Folder to create, parents included"),
) -> None:
    """Create a folder and any missing parent folders."""
    target = path.resolve()
    try:
        FolderManager().create_folder(str(target))
    except OSError as e:
        handle_wikitree_error(FolderOperationError("create folder", str(e)))
        raise typer.Abort()

    console.print(f"[green]✓ Created {escape(str(target))}[/green]")


@app.command()
def version() -> None:
    """Show the version number."""
    from wikitree import __version__

    typer.echo(f"wikitree version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
