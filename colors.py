"""ANSI color helpers for console output."""

RESET = '\033[0m'
BOLD = '\033[1m'
RED = '\033[91m'
GREEN = '\033[92m'
YELLOW = '\033[93m'
CYAN = '\033[96m'


def bold(text: str) -> str:
    return f"{BOLD}{text}{RESET}"


def success(text: str) -> str:
    return f"{GREEN}{text}{RESET}"


def error(text: str) -> str:
    return f"{RED}{text}{RESET}"


def warning(text: str) -> str:
    return f"{YELLOW}{text}{RESET}"


def heading(text: str) -> str:
    return f"{BOLD}{CYAN}{text}{RESET}"
