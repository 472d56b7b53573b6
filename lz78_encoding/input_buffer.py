"""
Input buffer for the LZ78 encoder.
Holds the whole input in memory before any parsing starts.
"""
import logging
import mmap
import os
from typing import BinaryIO

import numpy as np

logger = logging.getLogger(__name__)


class InputBuffer:
    """
    Immutable byte buffer handed to the encoder as a read-only view.
    """

    CHUNK_SIZE = 8192  # First read size, doubled after every read

    def __init__(self, data: bytes = b""):
        self._data = bytes(data)
        self._alphabet_range = None
        self._range_known = False

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "InputBuffer":
        """
        Reads a binary stream until end of stream.

        :param stream: any object with a binary read(n) method
        :return: InputBuffer with the stream contents
        """
        data = bytearray()
        chunk_size = cls.CHUNK_SIZE
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            data.extend(chunk)
            chunk_size *= 2
        logger.debug("read %d bytes from stream", len(data))
        return cls(data)

    @classmethod
    def from_file(cls, path: str) -> "InputBuffer":
        """
        Reads a named file through mmap.

        :param path: path to the input file
        :return: InputBuffer with the file contents
        """
        # mmap refuses zero-length files
        if os.path.getsize(path) == 0:
            return cls()
        with open(path, "rb") as f:
            with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mm:
                data = mm[:]
        logger.debug("read %d bytes from %s", len(data), path)
        return cls(data)

    def __len__(self):
        return len(self._data)

    def __bytes__(self):
        return self._data

    def view(self) -> memoryview:
        """Read-only view of the input."""
        return memoryview(self._data)

    @property
    def alphabet_range(self) -> tuple[int, int] | None:
        """
        (min, max) byte values found in the input, None for empty input.
        Computed once on first access.
        """
        if not self._range_known:
            if self._data:
                values = np.frombuffer(self._data, dtype=np.uint8)
                self._alphabet_range = (int(values.min()), int(values.max()))
            self._range_known = True
        return self._alphabet_range
