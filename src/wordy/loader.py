# wordy/loader.py
from __future__ import annotations
import os
import sys
from typing import BinaryIO, Optional


class InputError(Exception):
    """The requested input could not be opened, or there is none."""


class UsageError(Exception):
    """Conflicting input sources (a FILE argument while stdin is piped)."""


def stdin_is_piped(stdin=None) -> bool:
    """True when stdin is a pipe/file rather than an interactive terminal."""
    stdin = stdin if stdin is not None else sys.stdin
    if stdin is None:
        return False
    try:
        return not stdin.isatty()
    except (AttributeError, ValueError):
        return False


def _binary(stream) -> BinaryIO:
    # text wrappers (sys.stdin) expose the raw bytes on .buffer
    return getattr(stream, "buffer", stream)


def open_source(path: Optional[str], stdin=None) -> BinaryIO:
    """
    Pick the byte source:
      * piped stdin together with a FILE argument -> UsageError
      * FILE argument -> the opened file (caller closes it)
      * piped stdin -> stdin's binary buffer
      * otherwise -> InputError("No input provided")
    """
    stdin = stdin if stdin is not None else sys.stdin
    piped = stdin_is_piped(stdin)

    if path:
        if piped:
            raise UsageError("a FILE argument cannot be combined with piped stdin")
        if os.path.isdir(path):
            raise InputError(f"Could not open file: {path}")
        try:
            return open(path, "rb")
        except OSError as e:
            raise InputError(f"Could not open file: {path}") from e

    if piped:
        return _binary(stdin)

    raise InputError("No input provided")
