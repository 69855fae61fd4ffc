"""Terminal bootstrap helpers for digirain startup."""

import curses
import importlib
import sys

_BACKENDS_UNSET = object()
_BACKENDS_CACHE = {"value": _BACKENDS_UNSET}


def resolve_posix_backends():
    """Resolve and cache the ``(fcntl, termios)`` modules, or None."""
    cached = _BACKENDS_CACHE["value"]
    if cached is not _BACKENDS_UNSET:
        return cached

    try:
        fcntl_mod = importlib.import_module("fcntl")
        termios_mod = importlib.import_module("termios")
    except ImportError:
        _BACKENDS_CACHE["value"] = None
        return None

    _BACKENDS_CACHE["value"] = (fcntl_mod, termios_mod)
    return _BACKENDS_CACHE["value"]


def _reset_backend_cache():
    """Reset cache for tests."""
    _BACKENDS_CACHE["value"] = _BACKENDS_UNSET


def configure_terminal(stdscr, timeout_ms=16):
    """Apply core curses terminal setup.

    ``timeout_ms`` bounds how long one frame waits for a key.
    """
    curses.curs_set(0)
    curses.noecho()
    curses.cbreak()
    stdscr.keypad(True)
    stdscr.nodelay(False)
    stdscr.timeout(timeout_ms)


def disable_flow_control(stdin_stream=None):
    """Disable XON/XOFF so Ctrl+Q reaches the app."""
    backends = resolve_posix_backends()
    if backends is None:
        return False
    _, termios = backends
    stream = sys.stdin if stdin_stream is None else stdin_stream
    try:
        fd = stream.fileno()
        attrs = termios.tcgetattr(fd)
        attrs[0] &= ~(termios.IXON | termios.IXOFF)
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
    except (AttributeError, ValueError, OSError, termios.error):
        return False
    return True
