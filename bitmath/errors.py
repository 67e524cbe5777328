"""Provide the exceptions raised by bit-vector operations.

Every exception derives from `BitsError` and from the builtin exception
that describes the same kind of failure, so ``except ValueError`` and
``except IndexError`` keep working.

Arithmetic overflow is not an error; it is returned as a flag
(see `arithmetic`).
"""


class BitsError(Exception):
    """Base class of the bit-vector exceptions."""


class WidthMismatch(BitsError, ValueError):
    """The operands (or a source sequence) do not have the expected width.

        >>> from bitmath.core import Bits
        >>> Bits.zeros(4) & Bits.zeros(5)
        Traceback (most recent call last):
         ...
        bitmath.errors.WidthMismatch: expected width 4, found 5

    """

    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        super().__init__("expected width {}, found {}".format(expected, found))


class LengthMismatch(BitsError, ValueError):
    """The parsed text does not contain exactly *width* digits."""

    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        super().__init__("expected {} digits, found {}".format(expected, found))


class InvalidDigit(BitsError, ValueError):
    """The parsed text contains a character that is not a digit or separator.

    The position is the 0-based index in the original text.
    """

    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__("invalid digit {!r} at position {}".format(char, position))


class InvalidRange(BitsError, IndexError):
    """A slice ``[hi:lo]`` does not verify ``0 <= lo <= hi < width``.

    *bound* names the violated condition: ``"hi"``, ``"lo"`` or ``"hi < lo"``.
    """

    def __init__(self, hi, lo, width, bound):
        self.hi = hi
        self.lo = lo
        self.width = width
        self.bound = bound
        if bound == "hi":
            msg = "hi index {} out of range for width {}".format(hi, width)
        elif bound == "lo":
            msg = "lo index {} out of range for width {}".format(lo, width)
        else:
            msg = "hi index {} smaller than lo index {}".format(hi, lo)
        super().__init__(msg)


class IndexOutOfBounds(BitsError, IndexError):
    """A bit index is outside ``[0, width)``."""

    def __init__(self, index, width):
        self.index = index
        self.width = width
        super().__init__("bit index {} out of range for width {}".format(index, width))


class ValueOutOfRange(BitsError, ValueError):
    """An integer does not fit in the requested width."""

    def __init__(self, value, width, signed=False):
        self.value = value
        self.width = width
        self.signed = signed
        kind = "signed" if signed else "unsigned"
        super().__init__("{} is not representable as a {}-bit {} value".format(
            value, width, kind))
