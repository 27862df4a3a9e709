"""Prefixed, optionally coloured console logging."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, TextIO

CONTINUATION_PREFIX = "\x10"

_COLOR_NORMAL = "\033[0m"
_COLOR_RED = "\033[1;31m"
_COLOR_CYAN = "\033[36m"
_COLOR_YELLOW = "\033[33m"
_COLOR_MAGENTA = "\033[35m"


@dataclass
class _Settings:
    appname: str = ""
    do_debug: bool = False


_settings = _Settings()


def init(appname: str, do_debug: bool = False) -> None:
    """Set the application name and whether debug output is enabled."""
    _settings.appname = appname
    _settings.do_debug = do_debug


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        return False


def _split_lines(message: str) -> Iterator[tuple[str, bool]]:
    """Yield each line of the message and whether it ended with a newline."""
    *complete, tail = message.split("\n")
    for line in complete:
        yield line, True
    if tail:
        yield tail, False


def _emit(stream: TextIO, color: str, prefix: str, fmt: str, args: tuple) -> None:
    message = fmt % args

    line_prefix = ""
    if prefix:
        if color:
            line_prefix = f"{color}{prefix}{_COLOR_NORMAL}: "
        else:
            line_prefix = f"{prefix}: "

    for line, has_newline in _split_lines(message):
        if line.startswith(CONTINUATION_PREFIX):
            stream.write(line[len(CONTINUATION_PREFIX):])
        else:
            stream.write(line_prefix + line)
        if has_newline:
            stream.write("\n")


def info(fmt: str, *args) -> None:
    """Write an informational message to standard output."""
    stream = sys.stdout
    if _settings.do_debug:
        color = _COLOR_CYAN if _is_terminal(stream) else ""
        _emit(stream, color, "Info", fmt, args)
    else:
        _emit(stream, "", "", fmt, args)


def debug(fmt: str, *args) -> None:
    """Write a debug message to standard output, if debugging is enabled."""
    if not _settings.do_debug:
        return
    stream = sys.stdout
    color = _COLOR_YELLOW if _is_terminal(stream) else ""
    _emit(stream, color, "Debug", fmt, args)


def error(fmt: str, *args) -> None:
    """Write an error message to standard error."""
    stream = sys.stderr
    color = _COLOR_RED if _is_terminal(stream) else ""
    _emit(stream, color, "Error", fmt, args)


def warning(fmt: str, *args) -> None:
    """Write a warning message to standard error."""
    stream = sys.stderr
    color = _COLOR_MAGENTA if _is_terminal(stream) else ""
    _emit(stream, color, "Warning", fmt, args)


def flush() -> None:
    """Flush standard output and standard error."""
    sys.stdout.flush()
    sys.stderr.flush()