"""Sending a message to a server process, one bit per signal."""

from __future__ import annotations

import os
import sys
import time
from typing import Iterable, Optional, Sequence, Union

from .output import put_endl
from .protocol import encode_byte, encode_message
from .text import atoi

USAGE_ERROR = ' Error : Check how to use "client" program '
KILL_ERROR = " Error : kill failed (Please check PID) "
DEFAULT_DELAY = 0.0001


class SendError(Exception):
    """A signal could not be delivered to the target process."""

    def __init__(self, pid: int) -> None:
        super().__init__(f"could not signal process {pid}")
        self.pid = pid


def _send_signals(pid: int, signals: Iterable[int], delay: float) -> None:
    for sig in signals:
        try:
            os.kill(pid, sig)
        except OSError as exc:
            raise SendError(pid) from exc
        time.sleep(delay)


def send_byte(pid: int, byte: int, delay: float = DEFAULT_DELAY) -> None:
    """Send one byte to ``pid`` as eight signals, pausing ``delay`` seconds after each."""
    _send_signals(pid, encode_byte(byte), delay)


def send_message(pid: int, message: Union[str, bytes], delay: float = DEFAULT_DELAY) -> None:
    """Send every byte of ``message`` (up to a NUL) to ``pid``."""
    _send_signals(pid, encode_message(message), delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``client PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        put_endl(USAGE_ERROR, 1)
        return 1
    pid = atoi(args[0])
    try:
        send_message(pid, os.fsencode(args[1]))
    except SendError:
        put_endl(KILL_ERROR, 1)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())