"""Signal handling for the dirins command line.

SIGPIPE (where the platform has it) and SIGINT are recorded instead of killing
the process, so output can stop cleanly and the exit code can reflect the signal.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

# SIGPIPE does not exist on Windows
SIGPIPE = getattr(signal, "SIGPIPE", None)


class SignalHandler:
    """Records SIGPIPE and SIGINT and restores the original handler after the first one.

    Attributes:
        sigpipe_received: Set once a SIGPIPE signal arrived.
        sigint_received: Set once a SIGINT signal arrived.
        original_sigpipe_handler: SIGPIPE handler in place before setup, None without SIGPIPE.
        original_sigint_handler: SIGINT handler in place before setup.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(SIGPIPE) if SIGPIPE is not None else None
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        if SIGPIPE is not None:
            signal.signal(SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    @property
    def interrupted(self) -> bool:
        """True once either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the handlers of the module-level signal_handler."""
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Send stdout to the null device after an interruption, silencing shutdown errors."""
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
