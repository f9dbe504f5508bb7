from __future__ import annotations

from ._characters import is_unreserved
from ._errors import Utf8ReconstructionError
from ._logging import logger
from .validator import validate


def _encode_byte(b: int) -> str:
    return f"%{b:02X}"


def encode(s: str) -> str:
    return ''.join(c if is_unreserved(c := chr(b)) else _encode_byte(b) for b in s.encode('utf-8'))


def decode(s: str) -> str:
    validate(s)

    # every '%' is followed by two hex digits and everything else is unreserved ascii
    buffer = bytearray()
    chars = iter(s)
    for c in chars:
        if c == '%':
            buffer.append(int(next(chars) + next(chars), base=16))
        else:
            buffer.append(ord(c))

    try:
        return buffer.decode('utf-8')
    except UnicodeDecodeError as exc:
        logger.debug(f"rejected {s!r} - {exc}")
        raise Utf8ReconstructionError(exc) from exc
