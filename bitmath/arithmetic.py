"""Provide two's complement arithmetic with overflow detection.

Every function returns an `Overflowing` pair ``(result, overflowed)``:
the result is the exact result reduced modulo :math:`2^n` (so it does
not depend on the signed or unsigned interpretation), and the flag
tells whether the exact result fits in ``n`` bits under the
interpretation the function is named after.

The flag is computed from the carries and the signs of the operands
while the operation is done; a wrapped result alone does not tell
whether an overflow happened.

    >>> from bitmath.parsing import parse
    >>> from bitmath.arithmetic import unsigned_add, signed_add
    >>> a, b = parse("101"), parse("110")
    >>> unsigned_add(a, b)
    Overflowing(result=0b011, overflowed=True)
    >>> signed_add(a, b)
    Overflowing(result=0b011, overflowed=True)
    >>> signed_add(parse("111"), parse("110"))
    Overflowing(result=0b101, overflowed=False)

Signed and unsigned overflows are not interchangeable: ``7 + 6`` wraps
as unsigned 3-bit integers but ``-1 + -2`` fits as signed ones.

Overflow is never raised as an exception.
"""
import collections

from bitmath import core
from bitmath import operation
from bitmath.errors import WidthMismatch

Overflowing = collections.namedtuple("Overflowing", ["result", "overflowed"])


def _operands(x, y):
    # Automatic Constant Conversion, as in the simple operators
    if isinstance(x, int) and isinstance(y, core.Bits):
        x = core.Bits.from_unsigned(x, y.width)
    elif isinstance(y, int) and isinstance(x, core.Bits):
        y = core.Bits.from_unsigned(y, x.width)

    for a in (x, y):
        if not isinstance(a, core.Bits):
            msg = "expected bit-vector operands, not {}"
            raise TypeError(msg.format(type(a).__name__))
    if x.width != y.width:
        raise WidthMismatch(x.width, y.width)

    return x, y


def _add(x, y, carry):
    """Add two equal-width bit-vectors and an input carry.

    Return the sum modulo :math:`2^n` and the carry out of the most
    significant bit.
    """
    total = []
    for a, b in zip(x.bits, y.bits):
        total.append(a ^ b ^ carry)
        carry = (a and b) or (carry and (a ^ b))
    return core.Bits(total, x.width), carry


def _multiply(x, y):
    """Multiply by shifting and adding, modulo :math:`2^n`."""
    product = core.Bits.zeros(x.width)
    for i, b in enumerate(y.bits):
        if b:
            product, _ = _add(product, operation.BvShl(x, i), False)
    return product


def unsigned_add(x, y):
    """Add *x* and *y* as unsigned integers.

    The overflow flag is the carry out of the most significant bit,
    that is, whether ``int(x) + int(y) >= 2**n``.

        >>> from bitmath.core import Bits
        >>> from bitmath.arithmetic import unsigned_add
        >>> unsigned_add(Bits.from_unsigned(0xfe, 8), Bits.from_unsigned(1, 8))
        Overflowing(result=0xff, overflowed=False)
        >>> unsigned_add(Bits.from_unsigned(0xfe, 8), 2)
        Overflowing(result=0x00, overflowed=True)

    """
    x, y = _operands(x, y)
    result, carry = _add(x, y, False)
    return Overflowing(result, carry)


def signed_add(x, y):
    """Add *x* and *y* as two's complement integers.

    The result has the same bits as `unsigned_add`. The overflow flag
    is set when both operands have the same sign and the sign of the
    result differs from it.

        >>> from bitmath.core import Bits
        >>> from bitmath.arithmetic import signed_add
        >>> signed_add(Bits.from_signed(100, 8), Bits.from_signed(27, 8))
        Overflowing(result=0x7f, overflowed=False)
        >>> signed_add(Bits.from_signed(100, 8), Bits.from_signed(28, 8))
        Overflowing(result=0x80, overflowed=True)

    """
    x, y = _operands(x, y)
    result, _ = _add(x, y, False)
    overflowed = x.msb == y.msb and result.msb != x.msb
    return Overflowing(result, overflowed)


def unsigned_sub(x, y):
    """Subtract *y* from *x* as unsigned integers.

    The difference is computed as ``x + ~y + 1``. The overflow flag
    signals a borrow (``int(x) < int(y)``), that is, the complement
    of the final carry.

        >>> from bitmath.core import Bits
        >>> from bitmath.arithmetic import unsigned_sub
        >>> unsigned_sub(Bits.from_unsigned(5, 4), Bits.from_unsigned(3, 4))
        Overflowing(result=0x2, overflowed=False)
        >>> unsigned_sub(Bits.from_unsigned(3, 4), Bits.from_unsigned(5, 4))
        Overflowing(result=0xe, overflowed=True)

    """
    x, y = _operands(x, y)
    result, carry = _add(x, operation.BvNot(y), True)
    return Overflowing(result, not carry)


def signed_sub(x, y):
    """Subtract *y* from *x* as two's complement integers.

    The result has the same bits as `unsigned_sub`. The overflow flag
    is set when the operands have different signs and the sign of the
    result differs from the sign of *x*.

        >>> from bitmath.core import Bits
        >>> from bitmath.arithmetic import signed_sub
        >>> signed_sub(Bits.from_signed(3, 4), Bits.from_signed(5, 4))
        Overflowing(result=0xe, overflowed=False)
        >>> signed_sub(Bits.from_signed(-8, 4), Bits.from_signed(1, 4))
        Overflowing(result=0x7, overflowed=True)

    """
    x, y = _operands(x, y)
    result, _ = _add(x, operation.BvNot(y), True)
    overflowed = x.msb != y.msb and result.msb != x.msb
    return Overflowing(result, overflowed)


def negate(x):
    """Return the two's complement negation ``~x + 1``.

    The overflow flag is set for the most negative value, the only one
    whose opposite is not representable.

        >>> from bitmath.core import Bits
        >>> from bitmath.arithmetic import negate
        >>> negate(Bits.from_signed(3, 4))
        Overflowing(result=0xd, overflowed=False)
        >>> negate(Bits.from_signed(-8, 4))
        Overflowing(result=0x8, overflowed=True)

    """
    if not isinstance(x, core.Bits):
        raise TypeError("expected a bit-vector, not {}".format(type(x).__name__))
    result, _ = _add(operation.BvNot(x), core.Bits.zeros(x.width), True)
    return Overflowing(result, x.msb and result.msb)


def unsigned_mul(x, y):
    """Multiply *x* and *y* as unsigned integers.

    The product is computed over ``2n`` bits and truncated to the low
    ``n`` bits. The overflow flag is set if any discarded bit is 1.

        >>> from bitmath.core import Bits
        >>> from bitmath.arithmetic import unsigned_mul
        >>> unsigned_mul(Bits.from_unsigned(15, 8), Bits.from_unsigned(17, 8))
        Overflowing(result=0xff, overflowed=False)
        >>> unsigned_mul(Bits.from_unsigned(16, 8), Bits.from_unsigned(16, 8))
        Overflowing(result=0x00, overflowed=True)

    """
    x, y = _operands(x, y)
    n = x.width
    product = _multiply(operation.ZeroExtend(x, n), operation.ZeroExtend(y, n))
    result = operation.Extract(product, n - 1, 0)
    overflowed = any(product.bits[n:])
    return Overflowing(result, overflowed)


def signed_mul(x, y):
    """Multiply *x* and *y* as two's complement integers.

    The operands are sign-extended to ``2n`` bits, where the product is
    exact, and the product is truncated to the low ``n`` bits. The
    overflow flag is set if the truncated product, read as a signed
    integer, differs from the exact product.

        >>> from bitmath.core import Bits
        >>> from bitmath.arithmetic import signed_mul
        >>> signed_mul(Bits.from_signed(-4, 8), Bits.from_signed(32, 8))
        Overflowing(result=0x80, overflowed=False)
        >>> signed_mul(Bits.from_signed(4, 8), Bits.from_signed(32, 8))
        Overflowing(result=0x80, overflowed=True)

    """
    x, y = _operands(x, y)
    n = x.width
    product = _multiply(operation.SignExtend(x, n), operation.SignExtend(y, n))
    result = operation.Extract(product, n - 1, 0)
    overflowed = any(b != result.msb for b in product.bits[n:])
    return Overflowing(result, overflowed)
