"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import overload

_WHITESPACE = frozenset(" \f\n\r\t\v")
_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1


def _code(c: int | str) -> int:
    """Return the character code of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def isalpha(c: int | str) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: int | str) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True if ``c`` is a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


@overload
def toupper(c: str) -> str: ...
@overload
def toupper(c: int) -> int: ...
def toupper(c):
    """Map an ASCII lowercase letter to uppercase; anything else is unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


@overload
def tolower(c: str) -> str: ...
@overload
def tolower(c: int) -> int: ...
def tolower(c):
    """Map an ASCII uppercase letter to lowercase; anything else is unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def _wrap_int32(value: int) -> int:
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is honoured, and parsing
    stops at the first non-digit. Text without digits yields 0. The result
    wraps around like a 32-bit signed int.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)