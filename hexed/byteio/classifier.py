# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .const import ByteClass, GRAPHIC_CHARCODES


def classify(b: int) -> ByteClass:
    if not 0x00 <= b <= 0xff:
        raise ValueError(f'Not a byte value: {b!r}')
    if b == 0x00:
        return ByteClass.NULL
    if b < 0x20 or b == 0x7f:
        return ByteClass.CONTROL
    if b < 0x7f:
        return ByteClass.PRINTABLE
    return ByteClass.OTHER


def is_graphic(b: int) -> bool:
    return b in GRAPHIC_CHARCODES
