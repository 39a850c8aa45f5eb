"""Custom exceptions for wikitree operations."""


class WikiTreeError(Exception):
    """Base exception for wikitree operations."""

    pass


class LibraryNotFoundError(WikiTreeError):
    """Raised when no library folder can be found above a path."""

    def __init__(self, path: str):
        self.path = path
        self.message = f"No library folder found at or above {path}"
        super().__init__(self.message)


class WikiNotFoundError(WikiTreeError):
    """Raised when a path does not belong to an amWiki project."""

    def __init__(self, path: str):
        self.path = path
        self.message = (
            f"{path} is not inside an amWiki project. "
            "Expected library/, amWiki/, config.json and index.html at the project root."
        )
        super().__init__(self.message)


class InvalidPathError(WikiTreeError):
    """Raised when a path has no segment to work with."""

    def __init__(self, path: str):
        self.path = path
        self.message = f"Invalid path: {path!r}. Expected at least one '/'-separated segment."
        super().__init__(self.message)


class FolderOperationError(WikiTreeError):
    """Raised when a folder operation fails."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"Failed to {operation}: {message}")
