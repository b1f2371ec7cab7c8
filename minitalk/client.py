"""Send a message to a server process as a stream of signals."""

from __future__ import annotations

import os
import sys
import time

from minitalk.ascii import atoi
from minitalk.printf import printf
from minitalk.protocol import SIGNAL_FOR_BIT, char_to_bits

DEFAULT_DELAY = 0.0001


def send_char(pid: int, c: int | str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Send one byte to ``pid`` as eight signals, pausing ``delay`` seconds after each."""
    for bit in char_to_bits(c):
        os.kill(pid, SIGNAL_FOR_BIT[bit])
        if delay > 0:
            time.sleep(delay)


def send_message(pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Send every byte of ``message`` followed by a newline."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for byte in data:
        send_char(pid, byte, delay)
    send_char(pid, "\n", delay)


def _pid_exists(pid: int) -> bool:
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
    except OSError:
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Send the message in ``argv[1]`` to the process whose PID is ``argv[0]``."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 2:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "client"
        printf("Error: Invalid format.\nUsage: %s <pid> <string>\n", program)
        return 1
    pid = atoi(argv[0])
    if not _pid_exists(pid):
        printf("Error: Invalid PID\n")
        return 1
    send_message(pid, os.fsencode(argv[1]))
    return 0


if __name__ == "__main__":
    sys.exit(main())