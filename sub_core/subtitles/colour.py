# sub_core/subtitles/colour.py
# -*- coding: utf-8 -*-
"""
ASS colour values.

ASS writes colours as &HAABBGGRR: alpha first, then blue, green, red, each
one byte of uppercase hex. Alpha 0 is opaque.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional

_HEX_RE = re.compile(r'[0-9A-Fa-f]+')


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


@dataclass(frozen=True, slots=True)
class Colour:
    """RGBA colour with independent byte channels."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 0

    WHITE: ClassVar[Colour]
    BLACK: ClassVar[Colour]
    RED: ClassVar[Colour]

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Colour:
        return cls(red, green, blue, 0)

    @classmethod
    def from_rgba(cls, red: int, green: int, blue: int, alpha: int) -> Colour:
        return cls(red, green, blue, alpha)

    @classmethod
    def from_ass(cls, text: str) -> Optional[Colour]:
        """
        Decode "&HAABBGGRR".

        Returns None when the prefix is missing or the rest is not a 32-bit
        hex number.
        """
        if not text.startswith('&H'):
            return None
        digits = text[2:]
        if not _HEX_RE.fullmatch(digits):
            return None
        num = int(digits, 16)
        if num > 0xFFFFFFFF:
            return None
        return cls(
            red=num & 0xFF,
            green=(num >> 8) & 0xFF,
            blue=(num >> 16) & 0xFF,
            alpha=(num >> 24) & 0xFF,
        )

    def to_ass(self) -> str:
        return f"&H{self.alpha:02X}{self.blue:02X}{self.green:02X}{self.red:02X}"

    def to_hex(self) -> str:
        """Web-style "#RRGGBBAA"."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}{self.alpha:02X}"

    def relative_luminance(self) -> float:
        # https://www.w3.org/TR/WCAG20/#relativeluminancedef
        r = _linearize(self.red)
        g = _linearize(self.green)
        b = _linearize(self.blue)
        return 0.2126 * r + 0.7152 * g + 0.0722 * b

    def __str__(self) -> str:
        return self.to_ass()


Colour.WHITE = Colour.from_rgb(255, 255, 255)
Colour.BLACK = Colour.from_rgb(0, 0, 0)
Colour.RED = Colour.from_rgb(255, 0, 0)
