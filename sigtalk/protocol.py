"""The signal protocol: each byte travels as eight signals, most significant bit first.

SIGUSR1 carries a 0 bit and SIGUSR2 carries a 1 bit.
"""

from __future__ import annotations

import signal
from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8
ZERO_BIT = signal.SIGUSR1
ONE_BIT = signal.SIGUSR2


def encode_byte(byte: int) -> list[signal.Signals]:
    """Return the eight signals that carry ``byte``, high bit first."""
    if isinstance(byte, bool) or not isinstance(byte, int):
        raise TypeError(f"expected an int byte value, got {type(byte).__name__}")
    value = byte & 0xFF
    return [
        ONE_BIT if (value >> bit) & 1 else ZERO_BIT
        for bit in reversed(range(BITS_PER_BYTE))
    ]


def encode_message(message: Union[str, bytes]) -> Iterator[signal.Signals]:
    """Yield the signals for every byte of ``message`` up to its first NUL.

    Text is sent as UTF-8.
    """
    if isinstance(message, str):
        data = message.encode("utf-8")
    elif isinstance(message, (bytes, bytearray)):
        data = bytes(message)
    else:
        raise TypeError(f"expected str or bytes, got {type(message).__name__}")
    end = data.find(b"\0")
    if end >= 0:
        data = data[:end]
    for byte in data:
        yield from encode_byte(byte)


class BitDecoder:
    """Reassembles bytes from a stream of bit signals."""

    def __init__(self) -> None:
        self.bits_left = 0
        self.value = 0

    def feed(self, signum: int) -> Optional[int]:
        """Take one signal; return the byte once its eighth bit arrives.

        Signals other than the two bit signals are ignored.
        """
        if self.bits_left == 0:
            self.bits_left = BITS_PER_BYTE
            self.value = 0
        if signum == ZERO_BIT:
            self.bits_left -= 1
        elif signum == ONE_BIT:
            self.bits_left -= 1
            self.value |= 1 << self.bits_left
        if self.bits_left == 0:
            return self.value
        return None