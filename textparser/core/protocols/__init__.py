"""Protocol interfaces for dependency injection."""
from .file_system import FileSystemProtocol

__all__ = ["FileSystemProtocol"]
