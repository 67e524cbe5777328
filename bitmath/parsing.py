"""Parse bit-vectors from their textual binary representation.

The accepted text is a sequence of the digits ``0`` and ``1``, read
from the most significant bit to the least significant bit. Spaces
and underscores can be used to group the digits; they are ignored.

    >>> from bitmath.parsing import parse
    >>> parse("1011 0001 0110 1011")
    0xb16b
    >>> parse("1_01", 3)
    0b101

"""
import logging

from bitmath import core
from bitmath.errors import InvalidDigit, LengthMismatch

log = logging.getLogger(__name__)

DIGITS = "01"
SEPARATORS = " _"


def strip_separators(text):
    """Return the digits of *text*, checking that no other character occurs.

        >>> from bitmath.parsing import strip_separators
        >>> strip_separators("10_01 1")
        '10011'
        >>> strip_separators("1012")
        Traceback (most recent call last):
         ...
        bitmath.errors.InvalidDigit: invalid digit '2' at position 3

    """
    if not isinstance(text, str):
        raise TypeError("expected a str, not {}".format(type(text).__name__))

    digits = []
    for position, char in enumerate(text):
        if char in DIGITS:
            digits.append(char)
        elif char not in SEPARATORS:
            log.debug(f"Rejected {text!r}: {char!r} at position {position}.")
            raise InvalidDigit(char, position)
    return "".join(digits)


def parse(text, width=None):
    """Return the bit-vector written in *text*.

    Args:
        text: the binary digits, most significant first, optionally
            grouped with spaces or underscores.
        width: the expected bit-width. If omitted, the width is the
            number of digits.

    Raises:
        InvalidDigit: if *text* contains a character other than a digit
            or a separator.
        LengthMismatch: if the number of digits differs from *width*.

    ::

        >>> from bitmath.parsing import parse
        >>> parse("110", 3).unsigned_value()
        6
        >>> parse("101", 4)
        Traceback (most recent call last):
         ...
        bitmath.errors.LengthMismatch: expected 4 digits, found 3

    """
    digits = strip_separators(text)

    if width is None:
        if not digits:
            raise LengthMismatch(1, 0)
        width = len(digits)
    else:
        core._check_width(width)
        if len(digits) != width:
            log.debug(f"Rejected {text!r}: {len(digits)} digits for width {width}.")
            raise LengthMismatch(width, len(digits))

    # the first character is the most significant bit
    return core.Bits([d == "1" for d in reversed(digits)], width)
