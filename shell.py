"""Interactive shell for file system operations."""

from typing import Optional

from constants import TEXT_ENCODING
from file_system import FileSystem
from errors import FileSystemError
from colors import bold, success, error, heading, warning


class Shell:
    """Interactive shell for file system operations."""

    def __init__(self, fs: Optional[FileSystem] = None):
        self.fs = fs if fs is not None else FileSystem()
        self.running = True

    def run(self):
        """Run the shell."""
        print("=" * 60)
        print(heading("Easy File System (EFS) - Interactive Shell"))
        print("=" * 60)
        info = self.fs.info()
        print(f"File system created: {info.capacity} inodes, "
              f"{self.fs.filename_length} byte names, {self.fs.content_length} byte contents")
        print("Type 'help' for available commands\n")

        while self.running:
            try:
                command = input("efs> ").strip()
                if not command:
                    continue

                self.execute_command(command)

            except KeyboardInterrupt:
                print("\nUse 'exit' or 'quit' to exit")
            except EOFError:
                break

        print("\nGoodbye!")

    def execute_command(self, command: str):
        """Execute a shell command."""
        parts = command.split(None, 1)
        if not parts:
            return

        cmd = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ''

        commands = {
            'help': self.cmd_help,
            'create': self.cmd_create,
            'cat': self.cmd_cat,
            'rm': self.cmd_rm,
            'ls': self.cmd_ls,
            'info': self.cmd_info,
            'debug': self.cmd_debug,
            'exit': self.cmd_exit,
            'quit': self.cmd_exit,
        }

        if cmd not in commands:
            print(warning(f"Unknown command: {cmd}. Type 'help' for available commands."))
            return

        # create keeps its text argument exactly as typed
        args = rest.split(None, 1) if cmd == 'create' else rest.split()

        try:
            commands[cmd](args)
        except FileSystemError as e:
            print(error(f"Error: {e}"))

    def cmd_help(self, args):
        """Display help information."""
        print(bold("\nAvailable Commands:"))
        print("  create <file> <txt> - Create a file holding the given text")
        print("  cat <file>          - Display file contents")
        print("  rm <file>           - Remove the first file with this name")
        print("  ls                  - List used inodes")
        print("  info                - Display superblock counters")
        print("  debug               - Display file system debug information")
        print("  help                - Display this help message")
        print("  exit, quit          - Exit the shell\n")

    def cmd_create(self, args):
        """Create a new file."""
        if not args:
            print("Usage: create <filename> <text>")
            return

        filename = args[0]
        text = args[1] if len(args) > 1 else ''
        inode_num = self.fs.create(filename, text)
        print(success(f"{filename} file successfully added (inode {inode_num})."))

    def cmd_cat(self, args):
        """Display file contents."""
        if not args:
            print("Usage: cat <filename>")
            return

        data = self.fs.read(args[0])
        if not data:
            print("(empty file)")
            return
        try:
            print(data.decode(TEXT_ENCODING))
        except UnicodeDecodeError:
            print(f"(binary data, {len(data)} bytes)")
            print("First 100 bytes (hex):", data[:100].hex())

    def cmd_rm(self, args):
        """Remove a file."""
        if not args:
            print("Usage: rm <filename>")
            return

        inode_num = self.fs.delete(args[0])
        print(success(f"Removed {args[0]} from inode {inode_num}"))

    def cmd_ls(self, args):
        """List used inodes."""
        entries = self.fs.list_files()
        if not entries:
            print("(no files)")
            return

        print(bold(f"\n{'Inode':<8} {'Name':<34} {'Size':<10}"))
        print("-" * 54)
        for inode_num, name, size in entries:
            print(f"{inode_num:<8} {name:<34} {size:<10}")
        print()

    def cmd_info(self, args):
        """Display superblock counters."""
        info = self.fs.info()
        print(f"Total inodes: {info.capacity}")
        print(f"Used inodes:  {info.occupied_count}")
        print(f"Free inodes:  {info.free_count}")

    def cmd_debug(self, args):
        """Display debug information."""
        self.fs.debug()

    def cmd_exit(self, args):
        """Exit the shell."""
        self.running = False
