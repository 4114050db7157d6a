# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from . import AppArgumentParser
from .console import Console
from .runner import RunnerFactory
from .settings import SettingsManager


# noinspection PyMethodMayBeStatic
class App:
    def run(self, argv: list[str]|None = None):
        self._exit(self.execute(argv))

    def execute(self, argv: list[str]|None = None) -> int:
        try:
            self._parse_args(argv)  # help processing is handled by argparse
            (RunnerFactory.create()).run()
        except BrokenPipeError:
            Console.detach_stdout()
        except Exception as e:
            Console.on_exception(e)
            return 1
        return 0

    def _parse_args(self, argv: list[str]|None):
        SettingsManager.init()
        AppArgumentParser().parse_args(argv, namespace=SettingsManager.app_settings)
        Console.debug_settings()

    def _exit(self, code: int):
        exit(code)
