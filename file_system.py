"""Core file system implementation."""

import logging
from typing import List, Tuple, Union

from constants import MAX_FILES, FILENAME_LENGTH, CONTENT_LENGTH, TEXT_ENCODING
from structures import SuperBlock, Inode, FileSystemInfo
from errors import CapacityExhausted, NotFound, ValueTooLarge

logger = logging.getLogger(__name__)

Data = Union[str, bytes, bytearray]


class FileSystem:
    """Fixed table of inodes plus the superblock that counts them.

    Files are allocated first-fit by inode index. Names are not unique:
    lookups and deletes act on the lowest-indexed used inode whose name
    buffer matches.
    """

    def __init__(self, capacity: int = MAX_FILES,
                 filename_length: int = FILENAME_LENGTH,
                 content_length: int = CONTENT_LENGTH):
        for label, value in (('capacity', capacity),
                             ('filename_length', filename_length),
                             ('content_length', content_length)):
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{label} must be a positive integer, got {value!r}")

        self.filename_length = filename_length
        self.content_length = content_length
        self.superblock = SuperBlock(capacity)
        self.inodes = [Inode(filename_length, content_length) for _ in range(capacity)]
        logger.debug("Created file system: %d inodes, %d byte names, %d byte contents",
                     capacity, filename_length, content_length)

    def create(self, name: Data, content: Data) -> int:
        """Store content under name in the first free inode. Returns its index."""
        filename = self._encode(name, self.filename_length, 'filename')
        data = self._encode(content, self.content_length, 'content')

        if self.superblock.occupied_count >= self.superblock.capacity:
            logger.info("Create of %r refused: no free inodes", name)
            raise CapacityExhausted(self.superblock.capacity)

        for i, inode in enumerate(self.inodes):
            if not inode.is_used:
                inode.filename = filename.ljust(self.filename_length, b'\x00')
                inode.content = data.ljust(self.content_length, b'\x00')
                inode.size = len(data)
                inode.is_used = True
                self.superblock.increment_occupied()
                logger.debug("Created %r in inode %d", name, i)
                return i

        # Counters claim a free inode exists but the table has none
        raise RuntimeError(f"superblock out of sync with inode table: {self.superblock!r}")

    def read(self, name: Data) -> bytes:
        """Return the content of the first used inode named name."""
        i = self._find(name)
        inode = self.inodes[i]
        return inode.content[:inode.size]

    def delete(self, name: Data) -> int:
        """Release the first used inode named name. Returns its index."""
        i = self._find(name)
        self.inodes[i].clear()
        self.superblock.decrement_occupied()
        logger.debug("Deleted %r from inode %d", name, i)
        return i

    def info(self) -> FileSystemInfo:
        return self.superblock.snapshot()

    def list_files(self) -> List[Tuple[int, str, int]]:
        """List (inode, name, size) for every used inode in index order."""
        entries = []
        for i, inode in enumerate(self.inodes):
            if inode.is_used:
                name = inode.filename.rstrip(b'\x00').decode(TEXT_ENCODING, errors='replace')
                entries.append((i, name, inode.size))
        return entries

    def debug(self):
        """Print file system debug information."""
        info = self.info()
        print("\n=== File System Debug ===")
        print("SuperBlock:")
        print(f"  Total Inodes: {info.capacity}")
        print(f"  Used Inodes:  {info.occupied_count}")
        print(f"  Free Inodes:  {info.free_count}")

        print("\nUsed Inodes:")
        entries = self.list_files()
        for i, name, size in entries:
            print(f"  Inode {i}: {name} ({size} bytes)")
        if not entries:
            print("  (no used inodes)")

    def _find(self, name: Data) -> int:
        """Index of the first used inode whose name buffer matches."""
        filename = self._encode(name, self.filename_length, 'filename').ljust(
            self.filename_length, b'\x00')
        for i, inode in enumerate(self.inodes):
            if inode.is_used and inode.filename == filename:
                return i
        logger.info("No file named %r", name)
        raise NotFound(name)

    @staticmethod
    def _encode(value: Data, length: int, field: str) -> bytes:
        """Encode value to bytes, refusing anything longer than length."""
        if isinstance(value, str):
            raw = value.encode(TEXT_ENCODING)
        elif isinstance(value, (bytes, bytearray)):
            raw = bytes(value)
        else:
            raise TypeError(f"{field} must be str or bytes, not {type(value).__name__}")

        if len(raw) > length:
            raise ValueTooLarge(field, len(raw), length)
        return raw
