"""Main entry point for the file system simulator."""

import logging
import sys

from constants import TEXT_ENCODING
from file_system import FileSystem
from errors import FileSystemError
from shell import Shell
from colors import bold, success, error

USAGE = """Easy File System (EFS)

Usage: python main.py [demo|shell] [-v|--verbose]

  demo   Create a file system, add one file and read it back (default)
  shell  Start the interactive shell
"""


def demo():
    """Reproduce the classic EFS walkthrough."""
    print(bold("Easy File System (EFS)"))
    print()

    print("Creating new file system...")
    fs = FileSystem()
    print("File system created")
    print()

    filename = "myfile.txt"
    content = "Hey! This is my file. And it is awesome."

    try:
        fs.create(filename, content)
        print(success(f"{filename} file successfully added."))
    except FileSystemError as e:
        print(error(f"Error during adding: {e}"))
        return 1

    try:
        data = fs.read(filename)
        print(f"{filename} content: {data.decode(TEXT_ENCODING)}")
    except FileSystemError as e:
        print(error(f"Error during reading: {e}"))
        return 1

    info = fs.info()
    print(f"Inodes used: {info.occupied_count}/{info.capacity}")
    return 0


def main(argv=None):
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)

    verbose = False
    for flag in ('-v', '--verbose'):
        while flag in args:
            args.remove(flag)
            verbose = True

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    mode = args[0] if args else 'demo'
    if len(args) > 1 or mode not in ('demo', 'shell'):
        print(USAGE)
        return 1

    if mode == 'shell':
        Shell().run()
        return 0
    return demo()


if __name__ == "__main__":
    sys.exit(main())
