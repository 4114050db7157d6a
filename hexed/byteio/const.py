# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from enum import Enum

NULL_CHARCODES = [0x00]
CONTROL_CHARCODES = list(range(0x01, 0x20)) + [0x7f]
PRINTABLE_CHARCODES = list(range(0x20, 0x7f))
OTHER_CHARCODES = list(range(0x80, 0x100))
GRAPHIC_CHARCODES = list(range(0x21, 0x7f))

SIDEBAR_PLACEHOLDER = ' '


class ByteClass(Enum):
    NULL = 'null'
    CONTROL = 'control'
    PRINTABLE = 'printable'
    OTHER = 'other'


class Base(Enum):
    HEX = 'hex'
    OCTAL = 'octal'

    @property
    def is_octal(self) -> bool: return self is self.OCTAL

    @property
    def row_width(self) -> int:
        return 0o10 if self.is_octal else 0x10

    @property
    def cell_width(self) -> int:
        return 4 if self.is_octal else 2

    @property
    def row_char_width(self) -> int:
        """ Width of the cell block, every cell being followed by a space. """
        return self.row_width * (self.cell_width + 1)

    def format_cell(self, value: int) -> str:
        if self.is_octal:
            return f'{value:04o} '
        return f'{value:02X} '

    def format_offset(self, offset: int) -> str:
        if self.is_octal:
            return f'{offset:08o}'
        return f'{offset:08X}'
