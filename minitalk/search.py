"""Length, search, comparison and bounded copy of NUL-terminated text."""

from __future__ import annotations

from typing import Union

Text = Union[str, bytes, bytearray, memoryview]
Buffer = Union[bytearray, memoryview]


def _terminated(s: Text) -> str | bytes:
    """Return the part of ``s`` before its first NUL character."""
    if isinstance(s, str):
        return s.split("\0", 1)[0]
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s).split(b"\0", 1)[0]
    raise TypeError(f"expected str or a bytes-like object, got {type(s).__name__}")


def _codes(s: Text) -> list[int]:
    text = _terminated(s)
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return list(text)


def _char_code(c: int | str | bytes, for_bytes: bool) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
    elif isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single byte, got {c!r}")
        code = c[0]
    elif isinstance(c, int):
        code = c
    else:
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return code & 0xFF if for_bytes else code


def _as_bytes(src: Text) -> bytes:
    text = _terminated(src)
    return text.encode("utf-8") if isinstance(text, str) else text


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: Text, c: int | str | bytes) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL yields the index of the terminator, i.e. the length.
    """
    codes = _codes(s)
    target = _char_code(c, not isinstance(s, str))
    if target == 0:
        return len(codes)
    try:
        return codes.index(target)
    except ValueError:
        return None


def strrchr(s: Text, c: int | str | bytes) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL yields the index of the terminator, i.e. the length.
    """
    codes = _codes(s)
    target = _char_code(c, not isinstance(s, str))
    if target == 0:
        return len(codes)
    for index in reversed(range(len(codes))):
        if codes[index] == target:
            return index
    return None


def strncmp(first: Text, second: Text, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of differing character codes,
    or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    a_codes = _codes(first)[:n]
    b_codes = _codes(second)[:n]
    # A string that ends early compares as if followed by its terminator.
    width = max(len(a_codes), len(b_codes))
    a_codes += [0] * (width - len(a_codes))
    b_codes += [0] * (width - len(b_codes))
    for a, b in zip(a_codes, b_codes):
        if a != b:
            return a - b
    return 0


def strnstr(haystack: Text, needle: Text, length: int) -> int | None:
    """Find ``needle`` wholly within the first ``length`` characters of ``haystack``.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    big = _terminated(haystack)
    little = _terminated(needle)
    if type(big) is not type(little):
        raise TypeError("haystack and needle must both be text or both be bytes")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def _check_size(dest: Buffer, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        raise IndexError(f"size {size} exceeds buffer of {len(dest)} bytes")


def strlcpy(dest: Buffer, src: Text, size: int) -> int:
    """Copy ``src`` into ``dest``, writing at most ``size - 1`` bytes plus a NUL.

    Returns the length of ``src``, so a result ``>= size`` means truncation.
    """
    _check_size(dest, size)
    data = _as_bytes(src)
    if size == 0:
        return len(data)
    count = min(size - 1, len(data))
    dest[:count] = data[:count]
    dest[count] = 0
    return len(data)


def strlcat(dest: Buffer, src: Text, size: int) -> int:
    """Append ``src`` to the NUL-terminated text in ``dest`` within ``size`` bytes.

    Returns the length the combined text would have without the size limit.
    """
    _check_size(dest, size)
    data = _as_bytes(src)
    start = min(strlen(dest), size)
    room = max(size - start - 1, 0)
    chunk = data[:room]
    dest[start:start + len(chunk)] = chunk
    if start < size:
        dest[start + len(chunk)] = 0
    return start + len(data)