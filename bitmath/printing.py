"""Manage the representation of bit-vectors.

The canonical representation (the ``str`` of a `Bits`) shows the
bits, the unsigned and signed decimal values and the unsigned and
signed hexadecimal values::

    >>> from bitmath.parsing import parse
    >>> word = parse("1011000101101011")
    >>> print(word)
    Bits<16>{ 1011 0001 0110 1011 | dec 45419/-20117 | hex 0xb16b/-0x4e95 }
    >>> word
    0xb16b
    >>> word.vrepr()
    'Bits(0b1011000101101011, width=16)'

"""
from sympy.printing import repr as sympy_repr
from sympy.printing import str as sympy_str

GROUP_SIZE = 4


def _hex_digits(bv):
    return -(-bv.width // 4)


def bin_string(bv, pretty=True):
    """Return the bits from the most significant to the least significant.

    If *pretty* is True, the bits are grouped by 4 starting from the
    least significant bit; the leading group can be shorter.

        >>> from bitmath.core import Bits
        >>> from bitmath.printing import bin_string
        >>> bin_string(Bits.from_unsigned(0b101101, 6))
        '10 1101'
        >>> bin_string(Bits.from_unsigned(0b101101, 6), pretty=False)
        '101101'

    """
    digits = bv.bin()[2:]
    if not pretty:
        return digits

    head = len(digits) % GROUP_SIZE
    groups = [digits[:head]] if head else []
    for i in range(head, len(digits), GROUP_SIZE):
        groups.append(digits[i:i + GROUP_SIZE])
    return " ".join(groups)


def unsigned_dec(bv):
    """Return the unsigned value in decimal."""
    return str(bv.unsigned_value())


def signed_dec(bv):
    """Return the two's complement value in decimal."""
    return str(bv.signed_value())


def unsigned_hex(bv):
    """Return the unsigned value in hexadecimal.

    The digits are lowercase and padded to the width divided by 4
    (rounded up).

        >>> from bitmath.core import Bits
        >>> from bitmath.printing import unsigned_hex
        >>> unsigned_hex(Bits.from_unsigned(0xb, 16))
        '0x000b'

    """
    return bv.hex()


def signed_hex(bv):
    """Return the two's complement value in hexadecimal.

    Negative values are written as a minus sign followed by the
    magnitude, padded as in `unsigned_hex`.

        >>> from bitmath.core import Bits
        >>> from bitmath.printing import signed_hex
        >>> signed_hex(Bits.from_unsigned(0xb16b, 16))
        '-0x4e95'
        >>> signed_hex(Bits.from_unsigned(0xff, 8))
        '-0x01'
        >>> signed_hex(Bits.from_unsigned(0x7f, 8))
        '0x7f'

    """
    if not bv.msb:
        return unsigned_hex(bv)
    magnitude = 2 ** bv.width - bv.unsigned_value()
    return "-" + format(magnitude, '0=#{}x'.format(_hex_digits(bv) + 2))


def hex_bytes(bv):
    """Return the unsigned hexadecimal digits grouped by bytes.

    The groups are counted from the least significant digit, so the
    leading group has a single digit when the number of digits is odd.

        >>> from bitmath.core import Bits
        >>> from bitmath.printing import hex_bytes
        >>> hex_bytes(Bits.from_unsigned(0xb16b, 16))
        'b1 6b'
        >>> hex_bytes(Bits.from_unsigned(0xabc, 12))
        'a bc'

    """
    digits = bv.hex()[2:]
    head = len(digits) % 2
    groups = [digits[:head]] if head else []
    for i in range(head, len(digits), 2):
        groups.append(digits[i:i + 2])
    return " ".join(groups)


def render(bv):
    """Return the canonical multi-base representation.

        >>> from bitmath.core import Bits
        >>> from bitmath.printing import render
        >>> render(Bits.from_unsigned(0b101, 3))
        'Bits<3>{ 101 | dec 5/-3 | hex 0x5/-0x3 }'

    """
    return "Bits<{0}>{{ {1} | dec {2}/{3} | hex {4}/{5} }}".format(
        bv.width,
        bin_string(bv),
        unsigned_dec(bv),
        signed_dec(bv),
        unsigned_hex(bv),
        signed_hex(bv))


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BvStrPrinter(sympy_str.StrPrinter):
    """Printing class that handles the `str` method of `Bits`."""

    def _print_Bits(self, bv):
        return render(bv)


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BvShortPrinter(BvStrPrinter):
    """Printing class that handles the `repr` method of `Bits`."""

    def _print_Bits(self, bv):
        if bv.width % 4 == 0:
            return bv.hex()
        else:
            return bv.bin()


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BvReprPrinter(sympy_repr.ReprPrinter):
    """Printing class that handles the `Bits.vrepr` method."""

    def _print_Bits(self, bv):
        return "{}({}, width={})".format(type(bv).__name__, bv.bin(), bv.width)
