# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import os
from typing import IO

from pytermor import fmt, seq

from ..common import PathError
from ..console import Console, ConsoleDebugBuffer


class ByteSource:
    """
    Sequential reader over a regular file. Read errors are not propagated:
    the source reports end-of-stream instead and keeps whatever was read
    before the failure.
    """
    def __init__(self, filename: str, offset: int = 0, chunk_size: int = 0x10):
        if chunk_size <= 0:
            raise ValueError(f'Chunk size should be positive, got {chunk_size}')

        self._filename = filename
        self._offset = offset
        self._chunk_size = chunk_size
        self._io: IO|None = None
        self._size = 0
        self._eof = False
        self._debug_buffer = ConsoleDebugBuffer('source', seq.MAGENTA)

    @property
    def position(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return max(0, self._size - self._offset)

    @property
    def closed(self) -> bool:
        return self._io is None or self._io.closed

    def open(self) -> ByteSource:
        try:
            self._io = open(self._filename, 'rb')
            self._size = os.fstat(self._io.fileno()).st_size
        except OSError as e:
            self.close()
            raise PathError(f"'{self._filename}' is not a valid path") from e
        self._debug_buffer.write(1, f'Opened file: {fmt.bold(self._filename)} ({self._size} bytes)')

        # procfs and other pseudo files report zero size
        if self._size and self._offset > self._size:
            self._debug_buffer.write(1, f'Offset {self._offset} is beyond EOF, clamping to {self._size}')
            self._offset = self._size
        try:
            self._io.seek(self._offset)
        except OSError as e:
            self.close()
            raise PathError(f"Failed to seek '{self._filename}' to {self._offset}") from e
        return self

    def read_chunk(self) -> bytes:
        if self._eof or self.closed:
            return b''
        try:
            chunk = self._io.read(self._chunk_size)
        except OSError as e:
            self._debug_buffer.write(1, f'Read error, treating as EOF: {e!s}', offset=self._offset)
            chunk = b''

        if not chunk:
            self._eof = True
            self._debug_buffer.write(1, 'Encountered EOF', offset=self._offset)
            return b''

        self._debug_buffer.write(2, f'Read chunk: {Console.printd(chunk)}', offset=self._offset)
        self._offset += len(chunk)
        return chunk

    def close(self):
        if self._io and not self._io.closed:
            self._io.close()

    def __enter__(self) -> ByteSource:
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
