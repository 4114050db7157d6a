# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List

from pytermor import fmt

from . import AbstractRunner
from ..byteio import Base, ByteClass, Palette, NULL_CHARCODES, CONTROL_CHARCODES, \
    PRINTABLE_CHARCODES, OTHER_CHARCODES
from ..console import Console
from ..settings import SettingsManager


class LegendRunner(AbstractRunner):
    MAX_SAMPLES = 4
    CLASS_DESCRIPTIONS = {
        ByteClass.NULL: ('null byte', NULL_CHARCODES),
        ByteClass.CONTROL: ('ASCII control chars', CONTROL_CHARCODES),
        ByteClass.PRINTABLE: ('printable ASCII chars', PRINTABLE_CHARCODES),
        ByteClass.OTHER: ('non-ASCII bytes', OTHER_CHARCODES),
    }

    def run(self):
        palette = Palette(not SettingsManager.app_settings.no_colors)
        base = SettingsManager.app_settings.base

        Console.info(fmt.bold('BYTE CLASSES'))
        for byte_class, (description, charcodes) in self.CLASS_DESCRIPTIONS.items():
            Console.info(self.format_class(palette, base, byte_class, description, charcodes))

    def format_class(self, palette: Palette, base: Base, byte_class: ByteClass,
                     description: str, charcodes: List[int]) -> str:
        samples = ''.join(base.format_cell(b) for b in self._pick_samples(charcodes))
        padding = ' ' * (self.MAX_SAMPLES * (base.cell_width + 1) - len(samples))
        return '  ' + byte_class.value.ljust(10) + palette.apply(samples, byte_class) + padding + \
               f' {description} ({self.format_ranges(charcodes)})'

    def format_ranges(self, charcodes: List[int]) -> str:
        ranges = []
        start = prev = charcodes[0]
        for b in [*charcodes[1:], None]:
            if b is not None and b == prev + 1:
                prev = b
                continue
            ranges.append(f'0x{start:02x}' if start == prev else f'0x{start:02x}-0x{prev:02x}')
            if b is not None:
                start = prev = b
        return ', '.join(ranges)

    def _pick_samples(self, charcodes: List[int]) -> List[int]:
        if len(charcodes) <= self.MAX_SAMPLES:
            return charcodes
        return [*charcodes[:2], *charcodes[-2:]]
