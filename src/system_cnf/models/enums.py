from __future__ import annotations

from enum import StrEnum

from system_cnf.util.assertx import UnknownVideoMode


class VideoMode(StrEnum):
    NTSC = "NTSC"
    PAL = "PAL"

    @classmethod
    def parse(cls, text: str) -> "VideoMode":
        value = text.strip()
        match value:
            case "NTSC":
                return cls.NTSC
            case "PAL":
                return cls.PAL
            case _:
                raise UnknownVideoMode(value)

    def as_str(self) -> str:
        match self:
            case VideoMode.NTSC:
                return "NTSC"
            case VideoMode.PAL:
                return "PAL"
