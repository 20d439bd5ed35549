"""Global constants for the file system."""

# Table and buffer sizes
MAX_FILES = 32  # Number of inodes in the table
FILENAME_LENGTH = 32  # Bytes in an inode's name buffer
CONTENT_LENGTH = 1024  # Bytes in an inode's content buffer
TEXT_ENCODING = 'utf-8'  # Encoding for str names and contents
