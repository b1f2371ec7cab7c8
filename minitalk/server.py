"""Receive characters sent bit by bit as signals and write them out."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO

from minitalk.printf import printf
from minitalk.protocol import BIT_FOR_SIGNAL, BitDecoder


def install_handlers(decoder: BitDecoder, out: BinaryIO) -> dict:
    """Route SIGUSR1/SIGUSR2 into ``decoder`` and write each finished byte to ``out``.

    Returns the handlers that were installed before, keyed by signal number.
    """

    def handle(signum, _frame) -> None:
        byte = decoder.push(BIT_FOR_SIGNAL[signum])
        if byte is not None:
            out.write(bytes([byte]))
            out.flush()

    previous = {}
    for signum in BIT_FOR_SIGNAL:
        previous[signum] = signal.signal(signum, handle)
    return previous


def main(argv: list[str] | None = None) -> int:
    """Print this process's PID, then print every message received until interrupted."""
    del argv
    printf("Your PID: %d\n", os.getpid())
    install_handlers(BitDecoder(), sys.stdout.buffer)
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())