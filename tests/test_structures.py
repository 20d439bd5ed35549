import pytest

from constants import FILENAME_LENGTH, CONTENT_LENGTH
from structures import SuperBlock, Inode, FileSystemInfo


def test_superblock_counters():
    sb = SuperBlock(4)
    assert sb.snapshot() == FileSystemInfo(4, 0, 4)

    sb.increment_occupied()
    sb.increment_occupied()
    assert (sb.occupied_count, sb.free_count) == (2, 2)

    sb.decrement_occupied()
    assert sb.snapshot() == FileSystemInfo(capacity=4, occupied_count=1, free_count=3)


def test_superblock_counters_are_read_only():
    sb = SuperBlock()
    with pytest.raises(AttributeError):
        sb.occupied_count = 5


def test_inode_defaults():
    inode = Inode()
    assert inode.filename == bytes(FILENAME_LENGTH)
    assert inode.content == bytes(CONTENT_LENGTH)
    assert inode.is_used is False
    assert inode.size == 0


def test_inode_setters_require_exact_size():
    inode = Inode(filename_length=4, content_length=8)
    inode.filename = b"ab\x00\x00"
    inode.content = bytearray(b"12345678")
    assert inode.filename == b"ab\x00\x00"
    assert inode.content == b"12345678"

    with pytest.raises(ValueError):
        inode.filename = b"abc"
    with pytest.raises(ValueError):
        inode.content = b"123456789"


def test_inode_clear():
    inode = Inode(filename_length=4, content_length=4)
    inode.filename = b"name"
    inode.content = b"data"
    inode.is_used = True

    inode.clear()

    assert inode.filename == bytes(4)
    assert inode.content == bytes(4)
    assert not inode.is_used


def test_inode_size():
    inode = Inode(filename_length=4, content_length=8)
    assert inode.size == 0

    inode.size = 8
    assert inode.size == 8
    inode.size = 0
    assert inode.size == 0

    with pytest.raises(ValueError):
        inode.size = 9
    with pytest.raises(ValueError):
        inode.size = -1


def test_inode_clear_resets_size():
    inode = Inode(filename_length=4, content_length=4)
    inode.content = b"\x00\x00\x00\x00"
    inode.size = 3
    inode.is_used = True

    inode.clear()

    assert inode.size == 0
