"""Exceptions raised by the file system."""

from constants import TEXT_ENCODING


class FileSystemError(Exception):
    """Base class for all file system failures."""


class CapacityExhausted(FileSystemError):
    """Raised when every inode is already in use."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"No free inodes available ({capacity} in use)")


class NotFound(FileSystemError):
    """Raised when no used inode carries the requested name."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"File '{_display(name)}' not found")


class ValueTooLarge(FileSystemError, ValueError):
    """Raised when a name or content does not fit its fixed buffer."""

    def __init__(self, field: str, length: int, limit: int):
        self.field = field
        self.length = length
        self.limit = limit
        super().__init__(f"{field} is {length} bytes, limit is {limit}")


def _display(name) -> str:
    if isinstance(name, (bytes, bytearray)):
        return bytes(name).rstrip(b'\x00').decode(TEXT_ENCODING, errors='replace')
    return str(name)
