# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import threading
from enum import Enum
from typing import Iterable, NamedTuple

from pytermor import fmt, seq

from .config import DumpConfig
from .renderer import Renderer
from .source import ByteSource
from ..console import ConsoleDebugBuffer, ConsoleOutputBuffer


class CancellationToken:
    """
    Stop request shared between the dump loop and whoever wants to interrupt
    it, e.g. a signal handler. Setting and reading the flag are atomic.
    """
    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class DumpState(Enum):
    INIT = 'init'
    STREAMING = 'streaming'
    DONE = 'done'


class DumpResult(NamedTuple):
    rows: int
    bytes_read: int
    interrupted: bool = False
    output_closed: bool = False


class DumpController:
    def __init__(self, config: DumpConfig, output_buffer: ConsoleOutputBuffer,
                 cancel_token: CancellationToken = None, renderer: Renderer = None):
        self._config = config
        self._output_buffer = output_buffer
        self._cancel_token = cancel_token or CancellationToken()
        self._renderer = renderer or Renderer(config)
        self._debug_buffer = ConsoleDebugBuffer('dump', seq.YELLOW)

        self._state = DumpState.INIT
        self._row_index = 0
        self._bytes_read = 0
        self._interrupted = False

    @property
    def state(self) -> DumpState:
        return self._state

    def run(self) -> DumpResult:
        if self._state is not DumpState.INIT:
            raise RuntimeError(f'Dump controller cannot be reused (state: {self._state.value})')

        # errors on opening propagate before anything is written
        with ByteSource(self._config.path, self._config.offset, self._config.row_width) as source:
            try:
                self._dump(source)
            except OSError as e:
                # read errors never get here, ByteSource turns them into EOF
                self._output_buffer.discard()
                self._state = DumpState.DONE
                self._debug_buffer.write(1, f'Output stream failed, aborting: {e!s}')
                return self._make_result(output_closed=True)

        return self._make_result()

    def _dump(self, source: ByteSource):
        length = self._config.length  # None: until EOF

        self._write_lines(self._renderer.render_header())
        self._state = DumpState.STREAMING

        while self._state is DumpState.STREAMING:
            if length is not None and self._bytes_read >= length:
                self._debug_buffer.write(1, 'Length limit reached: ' + fmt.bold(length), offset=source.position)
                self._state = DumpState.DONE
                break

            if self._cancel_token.cancelled:
                self._debug_buffer.write(1, 'Interrupted', offset=source.position)
                self._interrupted = True
                self._state = DumpState.DONE
                break

            chunk = source.read_chunk()
            if not chunk:
                self._state = DumpState.DONE
                break

            if length is not None:
                chunk = chunk[:length - self._bytes_read]
            self._output_buffer.write(self._renderer.render_row(self._row_index, chunk))
            self._row_index += 1
            self._bytes_read += len(chunk)

        self._write_lines(self._renderer.render_footer(self._bytes_read))

    def _write_lines(self, lines: Iterable[str]):
        for line in lines:
            self._output_buffer.write(line)

    def _make_result(self, output_closed: bool = False) -> DumpResult:
        return DumpResult(self._row_index, self._bytes_read, self._interrupted, output_closed)
