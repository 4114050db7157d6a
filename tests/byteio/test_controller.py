# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import errno
import io
import os
import tempfile
import unittest
from math import ceil
from unittest import mock

from hexed import PathError
from hexed.byteio import Base, DumpConfig, Renderer
from hexed.byteio.controller import CancellationToken, DumpController, DumpState
from hexed.console import ConsoleOutputBuffer
from hexed.settings import SettingsManager


class InterruptingRenderer(Renderer):
    def __init__(self, config: DumpConfig, cancel_token: CancellationToken, after_rows: int):
        super().__init__(config)
        self._cancel_token = cancel_token
        self._after_rows = after_rows

    def render_row(self, row_index: int, chunk: bytes) -> str:
        if row_index + 1 >= self._after_rows:
            self._cancel_token.cancel()
        return super().render_row(row_index, chunk)


class FullDeviceIO(io.StringIO):
    def __init__(self, writes_left: int):
        super().__init__()
        self._writes_left = writes_left

    def write(self, s: str) -> int:
        if not s:
            return 0
        if self._writes_left <= 0:
            raise OSError(errno.ENOSPC, os.strerror(errno.ENOSPC))
        self._writes_left -= 1
        return super().write(s)


class DumpControllerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()
        self.tmpdir = tempfile.TemporaryDirectory()
        self.output = io.StringIO()

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _make_file(self, data: bytes) -> str:
        filename = os.path.join(self.tmpdir.name, 'data.bin')
        with open(filename, 'wb') as f:
            f.write(data)
        return filename

    def _dump(self, config: DumpConfig, **kwargs):
        controller = DumpController(config, ConsoleOutputBuffer(self.output), **kwargs)
        result = controller.run()
        return result, self.output.getvalue().splitlines()

    def test_scenario_single_partial_row(self):
        filename = self._make_file(b'\x00\x41\x1b\xff')

        result, lines = self._dump(DumpConfig(filename, show_colors=False))

        self.assertEqual(result.rows, 1)
        self.assertEqual(result.bytes_read, 4)
        self.assertEqual(lines, [
            '  Offset │ 00 01 02 03 04 05 06 07 08 09 0A 0B 0C 0D 0E 0F ',
            '─' * 9 + '┼' + '─' * 48,
            '00000000 │ 00 41 1B FF ' + ' ' * 36 + '  A  ',
            '─' * 9 + '┴' + '─' * 48,
            f'4 bytes in `{filename}`',
        ])

    def test_scenario_length_limit(self):
        filename = self._make_file(b'\x00\x41\x1b\xff')

        result, lines = self._dump(DumpConfig(filename, length=2, show_colors=False, show_guides=False))

        self.assertEqual(result.bytes_read, 2)
        self.assertEqual(lines, [
            '00 41 ' + ' ' * 42 + '  A',
            f'2 bytes in `{filename}`',
        ])

    def test_scenario_offset_beyond_eof(self):
        filename = self._make_file(b'\x00\x41\x1b\xff')

        result, lines = self._dump(DumpConfig(filename, offset=100, show_colors=False))

        self.assertEqual(result.rows, 0)
        self.assertEqual(len(lines), 4)
        self.assertEqual(lines[-1], f'0 bytes in `{filename}`')

    def test_zero_length(self):
        filename = self._make_file(bytes(64))

        result, lines = self._dump(DumpConfig(filename, length=0, show_colors=False))

        self.assertEqual(result.rows, 0)
        self.assertEqual(len(lines), 4)
        self.assertEqual(lines[-1], f'0 bytes in `{filename}`')

    def test_scenario_interruption(self):
        filename = self._make_file(bytes(range(160)))
        config = DumpConfig(filename, show_colors=False)
        token = CancellationToken()

        result, lines = self._dump(config, cancel_token=token,
                                   renderer=InterruptingRenderer(config, token, after_rows=2))

        self.assertTrue(result.interrupted)
        self.assertEqual(result.rows, 2)
        self.assertEqual(result.bytes_read, 32)
        self.assertEqual(len(lines), 2 + 2 + 2)
        self.assertEqual(lines[-1], f'32 bytes in `{filename}`')

    def test_cancelled_before_start(self):
        filename = self._make_file(bytes(range(160)))
        token = CancellationToken()
        token.cancel()

        result, lines = self._dump(DumpConfig(filename, show_colors=False, show_guides=False), cancel_token=token)

        self.assertTrue(result.interrupted)
        self.assertEqual(lines, [f'0 bytes in `{filename}`'])

    def test_rows_count(self):
        data = bytes(range(256)) * 2
        filename = self._make_file(data)
        cases = [(0, None), (0, 1), (0, 16), (0, 17), (5, None), (5, 100), (500, 100), (512, None), (0, 10000)]

        for base in Base:
            for offset, length in cases:
                self.output = io.StringIO()
                config = DumpConfig(filename, base, offset, length, show_colors=False, show_guides=False)

                result, lines = self._dump(config)

                expected_bytes = min(length if length is not None else len(data), max(0, len(data) - offset))
                self.assertEqual(result.bytes_read, expected_bytes, (base, offset, length))
                self.assertEqual(result.rows, ceil(expected_bytes / base.row_width), (base, offset, length))
                self.assertEqual(len(lines), result.rows + 1)

    def test_cells_reconstruct_file_contents(self):
        data = bytes(range(256))[::-3] + b'tail'
        filename = self._make_file(data)

        for base in Base:
            self.output = io.StringIO()
            config = DumpConfig(filename, base, show_colors=False, show_guides=False, show_ascii=False)

            _, lines = self._dump(config)

            radix = 8 if base is Base.OCTAL else 16
            decoded = bytes(int(cell, radix) for line in lines[:-1] for cell in line.split())
            self.assertEqual(decoded, data)

    def test_last_row_offset_label(self):
        filename = self._make_file(bytes(40))

        _, lines = self._dump(DumpConfig(filename, offset=3, show_colors=False))

        self.assertTrue(lines[2].startswith('00000000 │ '))
        self.assertTrue(lines[3].startswith('00000010 │ '))
        self.assertTrue(lines[4].startswith('00000020 │ '))
        self.assertEqual(len(lines[4]), len(lines[2]) - 16 + 5)

    def test_output_is_idempotent(self):
        filename = self._make_file(bytes(range(256)) * 3)
        config = DumpConfig(filename, offset=7, length=300)

        _, first = self._dump(config)
        self.output = io.StringIO()
        _, second = self._dump(config)

        self.assertEqual(first, second)

    def test_missing_file_produces_no_output(self):
        config = DumpConfig(os.path.join(self.tmpdir.name, 'missing.bin'))

        with self.assertRaises(PathError):
            self._dump(config)
        self.assertEqual(self.output.getvalue(), '')

    def test_broken_pipe_stops_dump(self):
        filename = self._make_file(bytes(160))
        output_buffer = ConsoleOutputBuffer(self.output)
        controller = DumpController(DumpConfig(filename, show_colors=False), output_buffer)

        with mock.patch.object(output_buffer, 'flush', side_effect=BrokenPipeError):
            result = controller.run()

        self.assertTrue(result.output_closed)
        self.assertEqual(result.rows, 0)
        self.assertIs(controller.state, DumpState.DONE)

    def test_failed_write_stops_dump(self):
        filename = self._make_file(bytes(160))
        self.output = FullDeviceIO(writes_left=3)

        result, lines = self._dump(DumpConfig(filename, show_colors=False))

        self.assertTrue(result.output_closed)
        self.assertFalse(result.interrupted)
        self.assertEqual(result.rows, 1)
        self.assertEqual(len(lines), 3)

    def test_unknown_file_size_reads_until_eof(self):
        filename = self._make_file(bytes(range(40)))

        with mock.patch('hexed.byteio.source.os.fstat', return_value=mock.Mock(st_size=0)):
            result, lines = self._dump(DumpConfig(filename, show_colors=False, show_guides=False))

        self.assertEqual(result.rows, 3)
        self.assertEqual(result.bytes_read, 40)
        self.assertEqual(lines[-1], f'40 bytes in `{filename}`')

    def test_controller_cannot_be_reused(self):
        filename = self._make_file(bytes(4))
        controller = DumpController(DumpConfig(filename), ConsoleOutputBuffer(self.output))

        controller.run()

        self.assertIs(controller.state, DumpState.DONE)
        self.assertRaises(RuntimeError, controller.run)


if __name__ == '__main__':
    unittest.main()
