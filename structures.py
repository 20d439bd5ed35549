"""Data structures for the file system."""

from typing import NamedTuple

from constants import MAX_FILES, FILENAME_LENGTH, CONTENT_LENGTH, TEXT_ENCODING


class FileSystemInfo(NamedTuple):
    """Read-only copy of the superblock counters."""
    capacity: int
    occupied_count: int
    free_count: int


class SuperBlock:
    """Represents the file system superblock."""

    def __init__(self, total_inodes: int = MAX_FILES):
        self._total_inodes = total_inodes
        self._used_inodes = 0
        self._free_inodes = total_inodes

    @property
    def capacity(self) -> int:
        return self._total_inodes

    @property
    def occupied_count(self) -> int:
        return self._used_inodes

    @property
    def free_count(self) -> int:
        return self._free_inodes

    def increment_occupied(self):
        """Account for one inode taken into use."""
        self._used_inodes += 1
        self._free_inodes -= 1

    def decrement_occupied(self):
        """Account for one inode released."""
        self._used_inodes -= 1
        self._free_inodes += 1

    def snapshot(self) -> FileSystemInfo:
        return FileSystemInfo(self._total_inodes, self._used_inodes, self._free_inodes)

    def __repr__(self):
        return (f"SuperBlock(total={self._total_inodes}, "
                f"used={self._used_inodes}, free={self._free_inodes})")


class Inode:
    """Represents a single fixed-size file slot."""

    def __init__(self, filename_length: int = FILENAME_LENGTH,
                 content_length: int = CONTENT_LENGTH):
        self._filename = bytes(filename_length)
        self._content = bytes(content_length)
        self._size = 0  # Bytes of content in use; the rest is padding
        self._is_used = False

    @property
    def filename(self) -> bytes:
        return self._filename

    @filename.setter
    def filename(self, value: bytes):
        if len(value) != len(self._filename):
            raise ValueError(f"filename buffer must be {len(self._filename)} bytes")
        self._filename = bytes(value)

    @property
    def content(self) -> bytes:
        return self._content

    @content.setter
    def content(self, value: bytes):
        if len(value) != len(self._content):
            raise ValueError(f"content buffer must be {len(self._content)} bytes")
        self._content = bytes(value)

    @property
    def size(self) -> int:
        return self._size

    @size.setter
    def size(self, value: int):
        if not 0 <= value <= len(self._content):
            raise ValueError(f"size must be between 0 and {len(self._content)}")
        self._size = value

    @property
    def is_used(self) -> bool:
        return self._is_used

    @is_used.setter
    def is_used(self, value: bool):
        self._is_used = bool(value)

    def clear(self):
        """Zero both buffers and mark the slot free."""
        self._filename = bytes(len(self._filename))
        self._content = bytes(len(self._content))
        self._size = 0
        self._is_used = False

    def __repr__(self):
        name = self._filename.rstrip(b'\x00').decode(TEXT_ENCODING, errors='replace')
        return f"Inode(filename={name!r}, used={self._is_used})"
