"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

from collections.abc import Iterator

from minitalk.ascii import itoa
from minitalk.output import putstr_fd

CONVERSIONS = "cspdiuxX"
STDOUT_FD = 1

_UINT_MOD = 1 << 32
_INT_MAX = (1 << 31) - 1
_ULONG_MOD = 1 << 64


def _as_int(value: object, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion} expects an int, got {type(value).__name__}"
        )
    return value


def _format_char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_string(value: object) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def _format_pointer(value: object) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value, "p") % _ULONG_MOD
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _format_int(value: object, conversion: str) -> str:
    number = _as_int(value, conversion) % _UINT_MOD
    if number > _INT_MAX:
        number -= _UINT_MOD
    return itoa(number)


def _format_unsigned(value: object) -> str:
    return itoa(_as_int(value, "u") % _UINT_MOD)


def _format_hex(value: object, conversion: str) -> str:
    number = _as_int(value, conversion) % _UINT_MOD
    return f"{number:X}" if conversion == "X" else f"{number:x}"


def _convert(conversion: str, value: object) -> str:
    if conversion == "c":
        return _format_char(value)
    if conversion == "s":
        return _format_string(value)
    if conversion == "p":
        return _format_pointer(value)
    if conversion in "di":
        return _format_int(value, conversion)
    if conversion == "u":
        return _format_unsigned(value)
    return _format_hex(value, conversion)


def _pieces(fmt: str, args: tuple[object, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = next(chars, None)
        if conversion is None:
            return
        if conversion == "%":
            yield "%"
        elif conversion in CONVERSIONS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for format string {fmt!r}"
                ) from None
            yield _convert(conversion, value)
        # Any other character after '%' is dropped along with the '%'.


def format_string(fmt: str, *args: object) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Unknown conversions are dropped silently and surplus arguments ignored.
    Raises TypeError when an argument is missing or of the wrong kind.
    """
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: object) -> int:
    """Format like :func:`format_string`, write to standard output and
    return the number of bytes written."""
    return putstr_fd(format_string(fmt, *args), STDOUT_FD)