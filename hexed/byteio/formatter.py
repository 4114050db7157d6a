# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List, NamedTuple, Optional

from .classifier import classify, is_graphic
from .config import DumpConfig
from .const import ByteClass, SIDEBAR_PLACEHOLDER


class Cell(NamedTuple):
    text: str
    byte_class: Optional[ByteClass] = None  # padding

    @property
    def is_padding(self) -> bool:
        return self.byte_class is None


class FormattedRow(NamedTuple):
    cells: List[Cell]
    sidebar: str


class RowFormatter:
    def __init__(self, config: DumpConfig):
        self._base = config.base
        self._padding = ' ' * (self._base.cell_width + 1)

    def format(self, chunk: bytes) -> FormattedRow:
        row_width = self._base.row_width
        if len(chunk) > row_width:
            raise ValueError(f'Chunk is longer than row width: {len(chunk)} > {row_width}')

        cells = [Cell(self._base.format_cell(b), classify(b)) for b in chunk]
        cells += [Cell(self._padding)] * (row_width - len(chunk))
        return FormattedRow(cells, self._format_sidebar(chunk))

    def _format_sidebar(self, chunk: bytes) -> str:
        return ''.join(chr(b) if is_graphic(b) else SIDEBAR_PLACEHOLDER for b in chunk)
