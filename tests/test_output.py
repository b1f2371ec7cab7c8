import os

import pytest

from minitalk.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def _drain(read_fd, write_fd):
    os.close(write_fd)
    chunks = []
    while True:
        chunk = os.read(read_fd, 4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def test_putchar_fd_writes_one_byte(pipe):
    read_fd, write_fd = pipe
    assert putchar_fd("G", write_fd) == 1
    assert _drain(read_fd, write_fd) == b"G"


def test_putchar_fd_accepts_byte_value(pipe):
    read_fd, write_fd = pipe
    putchar_fd(ord("\n"), write_fd)
    assert _drain(read_fd, write_fd) == b"\n"


def test_putchar_fd_rejects_long_string(pipe):
    _, write_fd = pipe
    with pytest.raises(ValueError):
        putchar_fd("ab", write_fd)


def test_putstr_fd_writes_text(pipe):
    read_fd, write_fd = pipe
    text = "Hello World!\n"
    assert putstr_fd(text, write_fd) == len(text)
    assert _drain(read_fd, write_fd) == text.encode()


def test_putstr_fd_empty(pipe):
    read_fd, write_fd = pipe
    assert putstr_fd("", write_fd) == 0
    assert _drain(read_fd, write_fd) == b""


def test_putendl_fd_appends_newline(pipe):
    read_fd, write_fd = pipe
    text = "Essa mordo!"
    putendl_fd(text, write_fd)
    assert _drain(read_fd, write_fd) == text.encode() + b"\n"


@pytest.mark.parametrize("number", [0, 7, 214748364, -2147483648, 2147483647, -5])
def test_putnbr_fd_round_trips(pipe, number):
    read_fd, write_fd = pipe
    putnbr_fd(number, write_fd)
    assert int(_drain(read_fd, write_fd)) == number


def test_putnbr_fd_int_min_text(pipe):
    read_fd, write_fd = pipe
    putnbr_fd(-2147483648, write_fd)
    assert _drain(read_fd, write_fd) == b"-2147483648"


def test_putnbr_fd_rejects_non_int(pipe):
    _, write_fd = pipe
    with pytest.raises(TypeError):
        putnbr_fd("12", write_fd)