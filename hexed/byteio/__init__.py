# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .const import Base, ByteClass, NULL_CHARCODES, CONTROL_CHARCODES, PRINTABLE_CHARCODES, \
    OTHER_CHARCODES, GRAPHIC_CHARCODES, SIDEBAR_PLACEHOLDER
from .config import DumpConfig
from .classifier import classify, is_graphic
from .formatter import Cell, FormattedRow, RowFormatter
from .renderer import Palette, Renderer
