from typing import Tuple

from sndemangle.DemanglingConfig import DemanglingConfig

from .cursor import Cursor
from .errors import InvalidNameLengthError, TruncatedInputError


def read_name(cursor: Cursor, config) -> str:
    """Read a length-prefixed name: <length> [-] <payload>

    The length counts UTF-8 bytes of the payload. The optional sign marker sits between
    length and payload and is not part of the name.
    """
    config.trace("name", cursor.rest())
    start = cursor.pos
    length_digits = cursor.digits()
    if not length_digits:
        raise InvalidNameLengthError(cursor.rest(), "name: invalid input, expected a decimal length")
    significant = length_digits.lstrip("0")
    # a length with more digits than the input has bytes can never be satisfied
    if len(significant) > len(str(cursor.remaining())):
        raise TruncatedInputError(cursor.text(start), f"name: length of {len(length_digits)} digits exceeds the input")
    length = int(significant or "0")
    cursor.eat("-")
    if length > cursor.remaining():
        raise TruncatedInputError(
            cursor.text(start), f"name: expected {length} bytes, only {cursor.remaining()} left"
        )
    return cursor.take(length)


def decode_name(inn: str, config=None) -> Tuple[int, str]:
    """Decode a single name from the start of inn, returning (consumed bytes, name)."""
    config = config if config is not None else DemanglingConfig()
    cursor = Cursor(inn)
    name = read_name(cursor, config)
    return cursor.pos, name
