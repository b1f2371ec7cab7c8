# minitalk

A small POSIX messaging tool. It sends text from one process to another using only
two signals. `SIGUSR1` carries a 1 bit and `SIGUSR2` carries a 0 bit. Each byte
is sent as eight bits, least significant bit first. A newline ends the message.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start the server in one terminal. It prints its process id and then waits for signals:

```
$ minitalk-server
Your PID: 12345
```

In another terminal, send a message to that process id:

```
$ minitalk-client 12345 "hello there"
```

The server writes each byte to its standard output as soon as the byte is complete.
Here it writes `hello there` followed by a newline. It keeps running until it is
interrupted, for example with Ctrl-C.

The client waits 0.0001 seconds after each signal. It exits with status 1 and prints
an error when:

- it is not given exactly two arguments, a process id and a string, or
- the process id is not a positive number of a process that exists.

The process id is read the way C `atoi` reads a number. Leading whitespace and a sign
are allowed, and reading stops at the first character that is not a digit.

## Library

The package also works as a library:

- `minitalk.protocol` has `BitDecoder`, whose `push(bit)` returns the finished byte
  value as an `int` after the eighth bit and `None` before it. It also has
  `char_to_bits`, which returns the eight bits of a character, low bit first.
- `minitalk.client` has `send_char(pid, c, delay)` and
  `send_message(pid, message, delay)`. `send_message` adds the closing newline.
- `minitalk.server` has `install_handlers(decoder, out)`. It sends `SIGUSR1` and
  `SIGUSR2` to a decoder and writes each finished byte to a binary stream. It returns
  the handlers that were installed before.
- `minitalk.printf` has `format_string` and `printf`, which accept the conversions
  `%c %s %p %d %i %u %x %X %%`. Any other conversion is dropped without an error.
  `printf` writes to standard output and returns the number of bytes written.
- `minitalk.ascii` classifies characters, converts their case, and has `atoi` and `itoa`.
- `minitalk.memory` works on byte buffers: `memset`, `bzero`, `memcpy`, `memmove`,
  `memchr`, `memcmp` and `calloc`.
- `minitalk.search` works on NUL-terminated text: `strlen`, `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `strlcpy` and `strlcat`.
- `minitalk.transform` has `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi` and `striteri`.
- `minitalk.output` writes to file descriptors: `putchar_fd`, `putstr_fd`,
  `putendl_fd` and `putnbr_fd`.

```python
from minitalk.protocol import BitDecoder, char_to_bits

decoder = BitDecoder()
for bit in char_to_bits("A"):
    done = decoder.push(bit)
print(done)  # 65
```

## Limitations

There is no acknowledgement from the server. The client cannot tell whether every
signal arrived, and signals sent faster than the server handles them can be lost.
The server needs `signal.pause`, so it runs on POSIX systems only.