# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import os
import sys
import traceback
from abc import ABCMeta, abstractmethod
from math import ceil
from typing import IO, List, Any

from pytermor import autof, fmt, seq, Format, SequenceSGR

from .common import ArgumentError, PathError
from .settings import SettingsManager, Settings


# noinspection PyMethodMayBeStatic
class AbstractConsoleBuffer(metaclass=ABCMeta):
    @abstractmethod
    def flush(self): raise NotImplementedError


class ConsoleOutputBuffer(AbstractConsoleBuffer):
    def __init__(self, io: IO = None):
        self._buf = ''
        self._io = io
        Console.register_buffer(self)

    def write(self, s: str, end='\n', flush=True):
        self._buf += f'{s}{end}'
        if flush:
            self.flush()

    def discard(self):
        self._buf = ''

    def flush(self):
        if not self._buf:
            return

        buf, self._buf = self._buf, ''
        io = self._io or sys.stdout
        Console.print(buf, end='', file=io)
        io.flush()


class ConsoleDebugBuffer(AbstractConsoleBuffer):
    def __init__(self, key_prefix: str = None, prefix_offset_color: SequenceSGR = seq.GRAY):
        self._buf = ''

        self._default_prefix = Console.format_prefix(key_prefix, autof(seq.GRAY, seq.BG_BLACK)) if key_prefix else None
        self._prefix_fmt = autof(prefix_offset_color, seq.BG_BLACK)

        Console.register_buffer(self)

    def write(self, level: int, s: str, offset: int = None, end='\n', flush=True):
        if SettingsManager.app_settings.debug < level:
            return

        prefix = ''
        if isinstance(offset, int):
            prefix = Console.format_prefix_with_offset(offset, self._prefix_fmt)
        elif self._default_prefix is not None:
            prefix = self._default_prefix

        self._buf += f'{prefix}{s}{end}'
        if flush:
            self.flush()

    def flush(self):
        if not self._buf:
            return

        Console.debug(self._buf, end='')
        self._buf = ''


class Console:
    FMT_ERROR_TRACE = fmt.red
    FMT_ERROR = autof(seq.HI_RED)
    MAIN_PREFIX_LEN = 8

    buffers: List[AbstractConsoleBuffer] = list()

    @staticmethod
    def register_buffer(buffer: AbstractConsoleBuffer):
        Console.buffers.append(buffer)

    @staticmethod
    def flush_buffers():
        for buffer in Console.buffers:
            buffer.flush()

    @staticmethod
    def on_exception(e: Exception):
        Console.flush_buffers()

        if isinstance(e, (ArgumentError, PathError)):
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.info(e.USAGE_MSG, file=sys.stderr)

        elif SettingsManager.app_settings.debug > 0:
            tb_lines = [line.rstrip('\n')
                        for line
                        in traceback.format_exception(e.__class__, e, e.__traceback__)]
            error = tb_lines.pop(-1)
            Console.print(Console.FMT_ERROR_TRACE('\n'.join(tb_lines)), file=sys.stderr)
            Console.error(error)

        else:
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.info("Run the app with '" + fmt.bold('--debug') + "' argument to see the details", file=sys.stderr)

    @staticmethod
    def debug(s: str = '', end='\n'):
        Console.print(s, end=end)

    @staticmethod
    def info(s: str = '', end='\n', **kwargs):
        Console.print(s, end=end, **kwargs)

    @staticmethod
    def error(s: str = '', end='\n'):
        Console.print(Console.FMT_ERROR(fmt.bold('ERROR: ') + s), end=end, file=sys.stderr)

    @staticmethod
    def get_separator() -> str:
        return autof(seq.GRAY)('│')

    @staticmethod
    def debug_settings():
        app_settings = SettingsManager.app_settings
        if not app_settings.debug_settings:
            return

        default_settings = Settings()
        debug_buffer = ConsoleDebugBuffer('settings')
        attrs = sorted(attr for attr in app_settings.__dict__ if not attr.startswith('_'))
        max_attr_len = max(len(attr) for attr in attrs)

        for attr in attrs:
            app_value = getattr(app_settings, attr)
            default_value = getattr(default_settings, attr)
            if app_value != default_value:
                values = fmt.green(f'{app_value!s}') + ' ' + fmt.gray(f'[{default_value!s}]')
            else:
                values = fmt.yellow(f'{default_value!s}')
            debug_buffer.write(3, attr.rjust(max_attr_len) + Console.get_separator() + values)

    @staticmethod
    def format_prefix(label: str, f: Format) -> str:
        return f(f'{label!s:>{Console.MAIN_PREFIX_LEN}.{Console.MAIN_PREFIX_LEN}s}') + Console.get_separator()

    @staticmethod
    def format_prefix_with_offset(offset: int, f: Format = fmt.green) -> str:
        offset_str = f'0x{offset:0{ceil(len(str(offset))/2)*2}x}'
        return Console.format_prefix(offset_str, f)

    @staticmethod
    def detach_stdout():
        # further writes (including the one at interpreter shutdown) go nowhere
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())

    @staticmethod
    def print(s: str, end='\n', **kwargs):
        print(s, end=end, **kwargs)

    @staticmethod
    def printd(v: Any, max_input_len: int = 5) -> str:
        if isinstance(v, bytes):
            result = 'len ' + fmt.bold(len(v))
            if SettingsManager.app_settings.debug < 3:
                return result
            if len(v) == 0:
                return f'{result} ' + fmt.gray('[]')
            preview = ' '.join(f'{b:02x}' for b in v[:max_input_len])
            if len(v) > max_input_len:
                preview += ' ..'
            return f'{result} ' + fmt.gray(f'[{preview}]')

        return f'{v!s}'
