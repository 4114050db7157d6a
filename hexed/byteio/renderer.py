# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Dict, List

from pytermor import autof, fmt, seq, Format

from .config import DumpConfig
from .const import ByteClass
from .formatter import RowFormatter


class Palette:
    """
    Maps byte classes and decoration keys to `Format`s. Every format closes the
    attributes it opens, so colored segments never bleed into the text that
    follows. Disabled palette returns the text as is.
    """
    GUIDE = 'guide'
    SIDEBAR = 'sidebar'

    def __init__(self, enabled: bool = True):
        self._enabled = enabled
        self._formats: Dict[ByteClass|str, Format] = {
            ByteClass.NULL: autof(seq.GRAY),
            ByteClass.CONTROL: autof(seq.YELLOW),
            ByteClass.PRINTABLE: autof(seq.CYAN),
            ByteClass.OTHER: fmt.noop,
            self.GUIDE: autof(seq.GREEN, seq.BOLD),
            self.SIDEBAR: autof(seq.GRAY),
        }

    def get_format(self, key: ByteClass|str) -> Format:
        if not self._enabled:
            return fmt.noop
        return self._formats.get(key, fmt.noop)

    def apply(self, text: str, key: ByteClass|str) -> str:
        return self.get_format(key)(text)


class Renderer:
    OFFSET_LABEL = '  Offset'
    GUIDE_SEPARATOR = ' │ '
    RULER_CHAR = '─'
    RULER_JUNCTION_OPEN = '┼'
    RULER_JUNCTION_CLOSE = '┴'

    def __init__(self, config: DumpConfig, palette: Palette = None):
        self._config = config
        self._base = config.base
        self._palette = palette or Palette(config.show_colors)
        self._row_formatter = RowFormatter(config)

    def render_header(self) -> List[str]:
        if not self._config.show_guides:
            return []
        columns = ''.join(self._base.format_cell(i) for i in range(self._base.row_width))
        return [
            self._palette.apply(self.OFFSET_LABEL + self.GUIDE_SEPARATOR + columns, Palette.GUIDE),
            self._render_ruler(self.RULER_JUNCTION_OPEN),
        ]

    def render_row(self, row_index: int, chunk: bytes) -> str:
        formatted = self._row_formatter.format(chunk)
        result = ''

        if self._config.show_guides:
            offset = self._base.format_offset(row_index * self._base.row_width)
            result += self._palette.apply(offset + self.GUIDE_SEPARATOR, Palette.GUIDE)

        for cell in formatted.cells:
            if cell.is_padding:
                result += cell.text
                continue
            result += self._palette.apply(cell.text, cell.byte_class)

        if self._config.show_ascii:
            result += self._palette.apply(' ' + formatted.sidebar, Palette.SIDEBAR)
        return result

    def render_footer(self, total_bytes: int) -> List[str]:
        lines = []
        if self._config.show_guides:
            lines.append(self._render_ruler(self.RULER_JUNCTION_CLOSE))
        lines.append(f'{total_bytes} bytes in `{self._config.path}`')
        return lines

    def _render_ruler(self, junction: str) -> str:
        label_width = len(self._base.format_offset(0)) + 1
        ruler = (self.RULER_CHAR * label_width) + junction + (self.RULER_CHAR * self._base.row_char_width)
        return self._palette.apply(ruler, Palette.GUIDE)
