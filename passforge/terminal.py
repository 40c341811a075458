"""
Terminal Secret Input
======================

Reads passwords without echoing them. On POSIX terminals echo is switched
off through :mod:`termios` for exactly the duration of the read and the
previous attributes are restored on every exit path, including
``KeyboardInterrupt``. Streams that are not terminals (pipes, tests) are
read as-is.
"""

from __future__ import annotations

import getpass
import sys
from contextlib import contextmanager
from typing import IO, Generator, Optional

try:
    import termios
except ImportError:  # Windows
    termios = None  # type: ignore[assignment]


def _is_tty(stream: IO[str]) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@contextmanager
def echo_disabled(stream: Optional[IO[str]] = None) -> Generator[None, None, None]:
    """Disable terminal echo on *stream* for the duration of the block."""
    stream = stream if stream is not None else sys.stdin
    if termios is None or not _is_tty(stream):
        yield
        return

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    silent = termios.tcgetattr(fd)
    silent[3] &= ~termios.ECHO  # lflags
    termios.tcsetattr(fd, termios.TCSAFLUSH, silent)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, saved)


def read_secret(
    prompt: str,
    *,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
) -> str:
    """Prompt for and read one line without echo.

    Raises:
        EOFError: If the input stream is exhausted.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    if termios is None and _is_tty(stdin):
        return getpass.getpass(prompt)

    stdout.write(prompt)
    stdout.flush()
    with echo_disabled(stdin):
        line = stdin.readline()
    # The user's Enter key was not echoed
    stdout.write("\n")
    stdout.flush()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")
