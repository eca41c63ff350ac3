"""Signal-aware output writing for the dirins command line."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from dirins.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes UTF-8 text to a file descriptor or a file, stopping once interrupted.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor actually written to.
    """

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Open the output.

        Args:
            file: An open file descriptor, or a path to create/overwrite.

        Raises:
            TypeError: If ``file`` is neither an int nor path-like.
        """
        self.file = file
        self._closed = False
        self._file_obj = None

        if isinstance(file, int):
            self.fd = file
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write data.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is closed.
            ValueError: If the writer is closed.
            OSError: For any other I/O error.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            # os.write may write only part of the buffer
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the output if this writer opened it. A broken pipe on close is ignored."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence over one from close()
            if exc_type is None:
                raise
