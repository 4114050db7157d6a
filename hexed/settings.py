# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from argparse import Namespace
from typing import Any

from .byteio.config import DumpConfig
from .byteio.const import Base
from .common import ArgumentError


class Settings(Namespace):
    def __init__(self, **kwargs: Any):
        self.filename: str|None = None
        self.length: str|None = None  # until EOF
        self.skip: str|None = None
        self.octal: bool = False
        self.no_guides: bool = False
        self.no_colors: bool = False
        self.no_ascii: bool = False
        self.legend: bool = False
        self.version: bool = False
        self.debug: int = 0

        super().__init__(**kwargs)

    @property
    def base(self) -> Base:
        if self.octal:
            return Base.OCTAL
        return Base.HEX

    @property
    def debug_settings(self) -> bool:
        return self.debug >= 3

    def to_config(self) -> DumpConfig:
        if not self.filename:
            raise ArgumentError('No file specified')

        return DumpConfig(
            path=self.filename,
            base=self.base,
            offset=self._parse_num(self.skip, 'offset') or 0,
            length=self._parse_num(self.length, 'length'),
            show_guides=not self.no_guides,
            show_colors=not self.no_colors,
            show_ascii=not self.no_ascii,
        )

    @staticmethod
    def _parse_num(value: str|int|None, name: str) -> int|None:
        if value is None:
            return None
        if isinstance(value, int):
            digits = str(value)
        else:
            digits = value[1:] if value.startswith('+') else value
        # ascii decimal digits with an optional '+', nothing else
        if not (digits.isascii() and digits.isdigit()):
            raise ArgumentError(f"'{value}' is not a valid {name}")
        return int(digits)


class SettingsManager:
    app_settings: Settings

    @staticmethod
    def init():
        SettingsManager.app_settings = Settings()
