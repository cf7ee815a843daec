from __future__ import annotations
import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional

from concacti.constants import DEFAULT_BUFFER_SIZE
from concacti.logging.helpers import get_logger


class OutputWriter:
    """Buffered, byte-counting sink over the output file.

    The raw file is opened unbuffered and wrapped in a BufferedWriter of the
    requested size, so ``buffer_size=1`` is honoured literally instead of
    being read as "line buffering" by ``open``.
    """

    def __init__(self, stream: BinaryIO, *, path: Optional[Path] = None,
                 logger: Optional[logging.Logger] = None) -> None:
        self._stream = stream
        self._path = path
        self._log = logger or get_logger('io.output')
        self._bytes = 0
        self._closed = False

    @classmethod
    def create(cls, path: Path, buffer_size: int = DEFAULT_BUFFER_SIZE, *,
               logger: Optional[logging.Logger] = None) -> 'OutputWriter':
        """Create or truncate *path*. OSError propagates to the caller."""
        raw = open(path, 'wb', buffering=0)
        try:
            stream = io.BufferedWriter(raw, buffer_size=buffer_size)
        except ValueError:
            raw.close()
            raise
        return cls(stream, path=Path(path), logger=logger)

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def bytes_written(self) -> int:
        return self._bytes

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: bytes) -> int:
        self._stream.write(data)
        self._bytes += len(data)
        return len(data)

    def write_line(self, text: str = '') -> int:
        return self.write(text.encode('utf-8', 'surrogateescape') + b'\n')

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._stream.flush()
        finally:
            self._stream.close()
        self._log.debug('closed %s after %d bytes', self._path, self._bytes)

    def __enter__(self) -> 'OutputWriter':
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False
