"""Receiving messages sent bit by bit as signals and echoing them to a descriptor."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import Callable, Optional, Sequence

from .output import put_char, put_nbr, put_str
from .protocol import ONE_BIT, ZERO_BIT, BitDecoder

Handler = Callable[[int, Optional[FrameType]], None]


def make_handler(decoder: BitDecoder, fd: int = 1) -> Handler:
    """Return a signal handler that feeds ``decoder`` and writes each finished byte to ``fd``."""

    def handler(signum: int, frame: Optional[FrameType]) -> None:
        byte = decoder.feed(signum)
        if byte is not None:
            put_char(byte, fd)

    return handler


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: print this process's PID, then print what arrives."""
    handler = make_handler(BitDecoder(), 1)
    signal.signal(ZERO_BIT, handler)
    signal.signal(ONE_BIT, handler)
    put_str("PID of this process is --- ", 1)
    put_nbr(os.getpid(), 1)
    put_str(" --- ", 1)
    put_char("\n", 1)
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())