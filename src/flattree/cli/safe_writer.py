"""Output writing that stops cleanly on broken pipes and interruptions."""

import errno
import os
import types
from pathlib import Path
from typing import Iterable, Optional, Type, Union

from flattree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes text to a file descriptor or a file, raising BrokenPipeError once interrupted.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor written to.
    """

    def __init__(self, file: Union[int, Path]):
        """Open the output.

        Args:
            file: An open file descriptor (not closed by the writer) or a path to create.

        Raises:
            TypeError: If file is neither an int nor path-like.
        """
        self.file = file
        self._closed = False
        self._owned_file = None

        if isinstance(file, int):
            self.fd = file
        elif isinstance(file, (str, os.PathLike)):
            self._owned_file = Path(file).open("w", encoding="utf-8")
            self.fd = self._owned_file.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write `data` as UTF-8.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is closed.
            ValueError: If the writer was closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        if signal_handler.interrupted():
            raise BrokenPipeError()

        try:
            os.write(self.fd, data.encode("utf-8"))
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_lines(self, lines: Iterable[str]) -> int:
        """Write each line of `lines` in turn, stopping at the first one that cannot be written.

        Returns:
            The number of lines written.

        Raises:
            BrokenPipeError: As for write(), after the lines before it were written.
        """
        written = 0
        for line in lines:
            self.write(line)
            written += 1
        return written

    def close(self) -> None:
        """Close the file if the writer opened it. A broken pipe on close is ignored."""
        if self._closed:
            return
        self._closed = True
        if self._owned_file is not None:
            try:
                self._owned_file.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

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
            # An error from the with block takes precedence over one from closing
            if exc_type is None:
                raise
