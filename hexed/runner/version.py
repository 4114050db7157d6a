# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import pytermor
from . import AbstractRunner
from ..version import __version__
from ..console import Console


class VersionRunner(AbstractRunner):
    def run(self):
        Console.info("es7s/hexed".ljust(16) + __version__)
        Console.info("pytermor".ljust(16) + pytermor.__version__)
