"""Shared helper functions for the wikitree CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.tree import Tree

from wikitree.exceptions import (
    FolderOperationError,
    InvalidPathError,
    LibraryNotFoundError,
    WikiNotFoundError,
    WikiTreeError,
)
from wikitree.models import FileNode, FolderNode

console = Console()
err_console = Console(stderr=True)

_HANDLER_ATTR = "_wikitree_handler"


def configure_logging(verbose: bool = False) -> None:
    """Send wikitree log records to stderr through rich.

    Safe to call more than once: the handler is installed a single time and
    only the level changes afterwards.

    Args:
        verbose: Log debug messages when True, warnings and above otherwise.
    """
    logger = logging.getLogger("wikitree")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if any(getattr(handler, _HANDLER_ATTR, False) for handler in logger.handlers):
        return

    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)


def handle_wikitree_error(error: WikiTreeError) -> None:
    """Handle wikitree errors with user-friendly messages.

    Args:
        error: The wikitree error to handle.
    """
    if isinstance(error, LibraryNotFoundError):
        console.print(f"[red]Error: {escape(error.message)}[/red]")
        console.print(
            "[yellow]Run the command from inside a wiki project or pass its path[/yellow]",
        )
    elif isinstance(error, WikiNotFoundError):
        console.print(f"[red]Error: {escape(error.message)}[/red]")
    elif isinstance(error, InvalidPathError):
        console.print(f"[red]Error: {escape(error.message)}[/red]")
    elif isinstance(error, FolderOperationError):
        console.print(f"[red]Error: Failed to {error.operation}[/red]")
        console.print(f"[red]{escape(error.message)}[/red]")
    else:
        console.print(f"[red]Error: {escape(str(error))}[/red]")


def build_rich_tree(label: str, folder: FolderNode) -> Tree:
    """Build a rich Tree mirroring a scanned folder.

    Args:
        label: Label for the root node.
        folder: Scanned folder.

    Returns:
        Renderable tree, children in scan order.
    """
    root = Tree(f"[bold blue]{escape(label)}[/bold blue]")
    _add_children(root, folder)
    return root


def _add_children(branch: Tree, folder: FolderNode) -> None:
    for name, node in folder.children.items():
        if isinstance(node, FileNode):
            branch.add(escape(name))
        else:
            _add_children(branch.add(f"[bold blue]{escape(name)}/[/bold blue]"), node)
