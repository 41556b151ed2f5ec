import os
import sys
import termios
from contextlib import contextmanager


@contextmanager
def raw_terminal(stream=None):
    """Disable echo and line buffering on a tty, restoring it on exit.

    Pipes and other non-tty inputs are used as they are.
    """
    stream = stream if stream is not None else sys.stdin
    fd = stream.fileno()
    if not os.isatty(fd):
        yield stream
        return

    saved = termios.tcgetattr(fd)
    mode = termios.tcgetattr(fd)
    mode[3] &= ~(termios.ICANON | termios.ECHO)  # lflag
    termios.tcsetattr(fd, termios.TCSANOW, mode)
    try:
        yield stream
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def read_key(stream=None) -> str:
    """Block until one byte is typed. Returns '' at end of input.

    Bytes are mapped one-to-one onto characters (latin-1), so 8-bit input
    reaches the dispatcher as an unbound key instead of a decode error.
    """
    with raw_terminal(stream) as s:
        return os.read(s.fileno(), 1).decode('latin-1')
