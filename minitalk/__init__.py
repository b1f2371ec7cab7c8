"""Send text between processes one bit at a time using SIGUSR1 and SIGUSR2,
with small printf, character, buffer and string helpers."""

__version__ = "0.1.0"

__all__ = [
    "ascii",
    "client",
    "memory",
    "output",
    "printf",
    "protocol",
    "search",
    "server",
    "transform",
]