"""The wire format: one character is sent as eight signals, low bit first.

SIGUSR1 carries a 1 bit and SIGUSR2 a 0 bit.
"""

from __future__ import annotations

import signal
from dataclasses import dataclass

BITS_PER_CHAR = 8

SIGNAL_FOR_BIT = {1: signal.SIGUSR1, 0: signal.SIGUSR2}
BIT_FOR_SIGNAL = {sig: bit for bit, sig in SIGNAL_FOR_BIT.items()}


@dataclass
class BitDecoder:
    """Collects bits, least significant first, into whole characters."""

    character: int = 0
    index: int = 0

    def push(self, bit: int) -> int | None:
        """Add one bit; return the finished byte after the eighth, else None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        if bit:
            self.character |= 1 << self.index
        self.index += 1
        if self.index < BITS_PER_CHAR:
            return None
        byte = self.character
        self.character = 0
        self.index = 0
        return byte


def _byte_of(c: int | str | bytes) -> int:
    if isinstance(c, bool):
        raise TypeError("expected a character or an int, got bool")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        encoded = c.encode("utf-8")
        if len(encoded) != 1:
            raise ValueError(f"character {c!r} does not fit in one byte")
        return encoded[0]
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single byte, got {c!r}")
        return c[0]
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def char_to_bits(c: int | str | bytes) -> tuple[int, ...]:
    """Return the eight bits of ``c`` in sending order, low bit first."""
    byte = _byte_of(c)
    return tuple((byte >> position) & 1 for position in range(BITS_PER_CHAR))