"""Writing characters, strings and integers to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def _encode_char(c: int | str) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    if isinstance(c, int):
        return bytes([c & 0xFF])
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def putchar_fd(c: int | str, fd: int) -> int:
    """Write one character to ``fd``; return the number of bytes written."""
    return _write_all(fd, _encode_char(c))


def putstr_fd(s: str, fd: int) -> int:
    """Write ``s`` to ``fd``; return the number of bytes written."""
    return _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> int:
    """Write ``s`` followed by a newline to ``fd``."""
    return _write_all(fd, s.encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of ``n`` to ``fd``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return _write_all(fd, str(n).encode("ascii"))