# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .common import ArgumentError, PathError

from .arghelp import AppArgumentParser
from .app import App
