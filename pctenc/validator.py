from __future__ import annotations

from typing import Iterator

from ._characters import is_unreserved, is_hexdigit
from ._errors import InvalidCharacter
from ._logging import logger


def _validate_triplet(chars: Iterator[tuple[int, str]], percent_index: int) -> None:
    for _ in range(2):
        try:
            i, c = next(chars)
        except StopIteration:
            # a truncated triplet is blamed on its '%'
            raise InvalidCharacter('%', percent_index) from None

        if not is_hexdigit(c):
            raise InvalidCharacter(c, i)


def validate(s: str) -> None:
    """
    Check that `s` holds only unreserved characters and `%XX` triplets.

    Raises `InvalidCharacter` for the first offending character; the index
    counts characters, not utf-8 bytes.
    """
    chars = enumerate(s)

    try:
        for i, c in chars:
            if is_unreserved(c):
                continue

            if c == '%':
                _validate_triplet(chars, i)
            else:
                raise InvalidCharacter(c, i)
    except InvalidCharacter as exc:
        logger.debug(f"rejected {s!r} - {exc}")
        raise


def is_valid(s: str) -> bool:
    try:
        validate(s)
    except InvalidCharacter:
        return False

    return True
