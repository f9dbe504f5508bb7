from __future__ import annotations

from dataclasses import dataclass


class DecodeError(ValueError):
    pass


@dataclass
class InvalidCharacter(DecodeError):
    character: str
    index: int

    def __str__(self) -> str:
        return f"invalid character {self.character!r} at index {self.index}"


@dataclass
class Utf8ReconstructionError(DecodeError):
    details: UnicodeDecodeError

    def __str__(self) -> str:
        return f"decoded bytes are not valid utf-8 - {self.details}"
