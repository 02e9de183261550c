# sigtalk

Send a text message from one process to another using nothing but POSIX
signals. Each byte goes out as eight signals, most significant bit first:
`SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit. The receiving
process puts the bits back together and writes each byte to standard
output as soon as its eighth bit has arrived.

## Installation

```
pip install .
```

A POSIX system is needed, because the package relies on `SIGUSR1` and
`SIGUSR2`. There are no dependencies outside the standard library. To run
the tests, install the `test` extra (`pip install .[test]`) and run
`pytest`.

## Usage

Start the server in one terminal. It prints its process id and then waits
for signals:

```
$ sigtalk-server
PID of this process is --- 12345 ---
```

From another terminal, send it a message:

```
$ sigtalk-client 12345 "hello there"
```

The server writes `hello there` byte by byte as it arrives. It keeps
running until it is interrupted (Ctrl-C), and then exits with status 0.

The client takes exactly two arguments, a process id and a message. With
any other number of arguments it prints
` Error : Check how to use "client" program ` and exits with status 1.
The process id is read the way C's `atoi` reads a number: leading
whitespace and a sign are allowed, and reading stops at the first
non-digit. The message is sent as raw bytes, up to its first NUL byte,
with a pause of 0.1 ms after every signal. If a signal cannot be
delivered, the client prints ` Error : kill failed (Please check PID) `
and exits with status 1.

Both commands can also be started with `python -m sigtalk.server` and
`python -m sigtalk.client`.

## Library

- `sigtalk.protocol.encode_byte(byte)` returns the eight signals for one
  byte (taken modulo 256), high bit first.
  `sigtalk.protocol.encode_message(message)` yields the signals for every
  byte of a `str` (sent as UTF-8) or `bytes` value, stopping at the first
  NUL.
- `sigtalk.protocol.BitDecoder` takes signals through `feed(signum)` and
  returns each byte once its eighth bit arrives, `None` before that.
  Signals other than `SIGUSR1` and `SIGUSR2` are ignored.
- `sigtalk.client.send_byte(pid, byte, delay)` and
  `sigtalk.client.send_message(pid, message, delay)` deliver bytes to a
  process, sleeping `delay` seconds after each signal (0.0001 by default).
  They raise `sigtalk.client.SendError`, which carries the `pid`, when a
  signal cannot be sent.
- `sigtalk.server.make_handler(decoder, fd)` builds a signal handler that
  feeds a `BitDecoder` and writes each finished byte to the file
  descriptor `fd` (1 by default).

Helper modules used by the commands:

- `sigtalk.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower` for ASCII, on a one-character
  string or an integer code.
- `sigtalk.text`: NUL-terminated string routines: `atoi`, `itoa`,
  `strlen`, `strdup`, `strchr`, `strrchr`, `strncmp`, `strnstr`, and
  `strlcpy` and `strlcat` into a mutable byte buffer. Searches return an
  index or `None`.
- `sigtalk.transform`: `split`, `substr`, `strjoin`, `strtrim`, `strmapi`
  and `striteri`.
- `sigtalk.memory`: byte-buffer operations `memset`, `bzero`, `memcpy`,
  `memmove` (with offsets inside one buffer), `memchr`, `memcmp` and
  `calloc`.
- `sigtalk.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write straight to a file descriptor.

## Limitations

- The server sends nothing back: the client gets no acknowledgement, and
  lost or merged signals go unnoticed, which can garble the message if
  signals arrive faster than the server handles them.
- The server keeps a single decoder, so messages from two clients sending
  at the same time are mixed together.
- The server only writes what arrives; it does not store or forward
  messages.