# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from dataclasses import dataclass

from .const import Base


@dataclass(frozen=True)
class DumpConfig:
    path: str
    base: Base = Base.HEX
    offset: int = 0
    length: int|None = None  # until EOF
    show_guides: bool = True
    show_colors: bool = True
    show_ascii: bool = True

    def __post_init__(self):
        if self.offset < 0:
            raise ValueError(f'Offset should be non-negative, got {self.offset}')
        if self.length is not None and self.length < 0:
            raise ValueError(f'Length should be non-negative, got {self.length}')

    @property
    def row_width(self) -> int:
        return self.base.row_width
