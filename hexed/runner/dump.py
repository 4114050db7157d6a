# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import signal
import threading
from typing import IO

from . import AbstractRunner
from ..byteio.controller import CancellationToken, DumpController, DumpResult
from ..console import Console, ConsoleOutputBuffer
from ..settings import SettingsManager


class DumpRunner(AbstractRunner):
    def __init__(self, io: IO = None, cancel_token: CancellationToken = None):
        self._io = io
        self._cancel_token = cancel_token or CancellationToken()
        self.result: DumpResult|None = None
        self._handler_installed = False
        self._prev_handler = None

    def run(self):
        config = SettingsManager.app_settings.to_config()
        controller = DumpController(config, ConsoleOutputBuffer(self._io), self._cancel_token)

        self._install_interrupt_handler()
        try:
            self.result = controller.run()
        finally:
            self._restore_interrupt_handler()

        if self.result.output_closed and self._io is None:
            Console.detach_stdout()

    def _install_interrupt_handler(self):
        # signal handlers can only be set from the main thread
        if threading.current_thread() is not threading.main_thread():
            return
        self._prev_handler = signal.signal(signal.SIGINT, self._on_interrupt)
        self._handler_installed = True

    def _restore_interrupt_handler(self):
        if not self._handler_installed:
            return
        signal.signal(signal.SIGINT, self._prev_handler or signal.SIG_DFL)
        self._handler_installed = False

    def _on_interrupt(self, signum, frame):
        self._cancel_token.cancel()
