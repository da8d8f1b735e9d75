"""Character sets for box-drawing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CharSet(Enum):
    Unicode = "unicode"
    Ascii = "ascii"


@dataclass
class BoxChars:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str

    @classmethod
    def unicode(cls) -> BoxChars:
        return cls(
            top_left="┌",
            top_right="┐",
            bottom_left="└",
            bottom_right="┘",
            horizontal="─",
            vertical="│",
        )

    @classmethod
    def unicode_heavy(cls) -> BoxChars:
        return cls(
            top_left="┏",
            top_right="┓",
            bottom_left="┗",
            bottom_right="┛",
            horizontal="━",
            vertical="┃",
        )

    @classmethod
    def ascii(cls) -> BoxChars:
        return cls(
            top_left="+",
            top_right="+",
            bottom_left="+",
            bottom_right="+",
            horizontal="-",
            vertical="|",
        )

    @classmethod
    def ascii_heavy(cls) -> BoxChars:
        return cls(
            top_left="#",
            top_right="#",
            bottom_left="#",
            bottom_right="#",
            horizontal="=",
            vertical="#",
        )

    @classmethod
    def for_charset(cls, cs: CharSet, heavy: bool = False) -> BoxChars:
        if cs == CharSet.Unicode:
            return cls.unicode_heavy() if heavy else cls.unicode()
        return cls.ascii_heavy() if heavy else cls.ascii()
