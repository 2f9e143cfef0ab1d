"""Console output helpers for the monokit CLI.

Everything is printed to stdout with an icon prefix. ANSI colors are dropped
when ``NO_COLOR`` is set or stdout is not a terminal.
"""

import os
import sys


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def _paint(msg: str, *codes: str) -> str:
    if not _use_color():
        return msg
    return f"{''.join(codes)}{msg}{Colors.ENDC}"


def print_header(msg: str) -> None:
    """Print a header message."""
    print(_paint(msg, Colors.HEADER, Colors.BOLD))


def print_info(msg: str) -> None:
    """Print an info message."""
    print(_paint(msg, Colors.CYAN))


def print_success(msg: str) -> None:
    """Print a success message."""
    print(_paint(f"✓ {msg}", Colors.GREEN))


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(_paint(f"⚠️  {msg}", Colors.YELLOW))


def print_error(msg: str) -> None:
    """Print an error message."""
    print(_paint(f"❌ {msg}", Colors.RED))


def print_step(number: int, msg: str) -> None:
    """Print one numbered line of a "next steps" list."""
    print(_paint(f"   {number}. {msg}", Colors.CYAN))


def print_command(command: list[str], cwd: str = "") -> None:
    """Echo an external command before it runs (``$ go mod tidy``)."""
    location = f" (in {cwd})" if cwd else ""
    print(_paint(f"$ {' '.join(command)}{location}", Colors.DIM))
