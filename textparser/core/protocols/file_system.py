"""File system protocol for dependency injection."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemProtocol(Protocol):
    """Protocol for listing and reading template files."""

    def list_entries(self, directory: str) -> list[str]:
        """List entries of a directory.

        Args:
            directory: Directory path.

        Returns:
            Entry paths, in a stable order.
        """
        ...

    def read_text(self, path: str) -> str:
        """Read a file as text.

        Args:
            path: File path.

        Returns:
            File contents.
        """
        ...
