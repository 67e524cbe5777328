"""Provide the common bit-vector operators."""
from sympy.core import cache

from bitmath import context
from bitmath import core
from bitmath.errors import InvalidRange, WidthMismatch


def _cacheit(func):
    """Cache functions if `Cache` context is enabled."""
    cfunc = cache.cacheit(func)

    def cached_func(*args, **kwargs):
        if context.Cache.current_context:
            return cfunc(*args, **kwargs)
        else:
            return func(*args, **kwargs)

    return cached_func


@_cacheit
def _evaluate(op, *args):
    return op.eval(*args)


def _check_scalar(name, value):
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("{} must be an int, not {}".format(name, type(value).__name__))
    if value < 0:
        raise ValueError("{} must be non-negative, not {}".format(name, value))


class Operation(object):
    """Represent bit-vector operations.

    A bit-vector operation takes some bit-vector operands (i.e. `Bits`)
    and some scalar operands (i.e. `int`), and returns a single
    bit-vector. Often, *operator* is used to denote the operation
    as a function (without operands) and *operation* is used to denote
    the application of a operator to some operands.

    Operations are used as functions: calling an operator class
    returns the resulting `Bits`, never an instance of the class.

    This class is not meant to be instantiated but to provide a base
    class for the different types of bit-vector operations.

    Attributes:
        arity: a pair of number specifying the number of bit-vector operands
            (at least one) and scalar operands.
        is_simple: True if the operator is *simple*, that is, all its
            operands are bit-vector of the same width. Simple operators allow
            *Automatic Constant Conversion*, that is, instead of passing
            all arguments as bit-vector types, it is possible to pass
            arguments as plain integers.

            ::

                >>> from bitmath.core import Bits
                >>> (Bits.from_unsigned(1, 8) + 1).vrepr()
                'Bits(0b00000010, width=8)'

        operand_types: a list specifying the types of the operands (optional
            if all operands are bit-vectors)
    """

    is_simple = False

    def __new__(cls, *args, **options):
        val_op = options.pop("validate_operands",
                             context.Validation.current_context)
        if options:
            msg = "{}() got unexpected keyword arguments {}"
            raise TypeError(msg.format(cls.__name__, sorted(options)))

        if val_op:
            args = cls._parse_args(*args)

        if cls.is_simple:
            for a in args:
                if not isinstance(a, core.Bits):
                    msg = "{} expects bit-vector operands, not {}"
                    raise TypeError(msg.format(cls.__name__, type(a).__name__))
            for a in args[1:]:
                if a.width != args[0].width:
                    raise WidthMismatch(args[0].width, a.width)

        cls.condition(*args)

        width = cls.output_width(*args)
        result = _evaluate(cls, *args)
        assert result.width == width

        return result

    @classmethod
    def _parse_args(cls, *args):
        # Automatic Constant Conversion
        if cls.is_simple:
            for a in args:
                if isinstance(a, core.Bits):
                    w = a.width
                    break
            else:
                msg = "{} expects at least 1 bit-vector operand"
                raise TypeError(msg.format(cls.__name__))

            args = [core.Bits.from_unsigned(a, w) if isinstance(a, int) else a
                    for a in args]

        if hasattr(cls, "operand_types"):
            operand_types = cls.operand_types
        else:
            operand_types = [core.Bits for _ in args]

        num_terms = 0
        num_scalars = 0
        for a in args:
            if isinstance(a, core.Bits):
                num_terms += 1
            elif isinstance(a, int):
                num_scalars += 1
            else:
                msg = "{} got an invalid operand of type {}"
                raise TypeError(msg.format(cls.__name__, type(a).__name__))
        if tuple(cls.arity) != (num_terms, num_scalars):
            msg = "{} expects {} bit-vector and {} scalar operands"
            raise TypeError(msg.format(cls.__name__, *cls.arity))

        for arg_type, arg in zip(operand_types, args):
            if not isinstance(arg, arg_type):
                msg = "{} expects operands of types {}"
                raise TypeError(msg.format(
                    cls.__name__, [t.__name__ for t in operand_types]))

        return args

    @classmethod
    def condition(cls, *args):
        """Check the restrictions of the operator on its operands.

        The widths of the operands of simple operators are checked
        before. Subclasses raise an exception if a restriction is violated.
        """

    @classmethod
    def output_width(cls, *args):
        """Return the bit-width of the resulting bit-vector."""
        raise NotImplementedError("subclasses need to override this method")

    @classmethod
    def eval(cls, *args):
        """Evaluate the operator with given operands.

        This is an internal method. To evaluate a bit-vector operation,
        use the operator ``()``.
        """
        raise NotImplementedError("subclasses need to override this method")


# Bitwise operators

class BvNot(Operation):
    """Bitwise negation operation.

    It overrides the operator ~. See `Operation` for more information.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import BvNot
        >>> BvNot(Bits.from_unsigned(0b1010101, 7))
        0b0101010
        >>> ~Bits.from_unsigned(0b1010101, 7)
        0b0101010

    """

    arity = [1, 0]

    @classmethod
    def output_width(cls, x):
        return x.width

    @classmethod
    def eval(cls, x):
        return core.Bits([not b for b in x.bits], x.width)


class BvAnd(Operation):
    """Bitwise AND (logical conjunction) operation.

    It overrides the operator & and provides Automatic Constant Conversion.
    See `Operation` for more information.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import BvAnd
        >>> BvAnd(Bits.from_unsigned(5, 8), Bits.from_unsigned(3, 8))
        0x01
        >>> BvAnd(Bits.from_unsigned(5, 8), 3)
        0x01
        >>> Bits.from_unsigned(5, 8) & 3
        0x01

    """

    arity = [2, 0]
    is_simple = True

    @classmethod
    def output_width(cls, x, y):
        return x.width

    @classmethod
    def eval(cls, x, y):
        return core.Bits([a and b for a, b in zip(x.bits, y.bits)], x.width)


class BvOr(Operation):
    """Bitwise OR (logical disjunction) operation.

    It overrides the operator | and provides Automatic Constant Conversion.
    See `Operation` for more information.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import BvOr
        >>> BvOr(Bits.from_unsigned(5, 8), Bits.from_unsigned(3, 8))
        0x07
        >>> Bits.from_unsigned(5, 8) | 3
        0x07

    """

    arity = [2, 0]
    is_simple = True

    @classmethod
    def output_width(cls, x, y):
        return x.width

    @classmethod
    def eval(cls, x, y):
        return core.Bits([a or b for a, b in zip(x.bits, y.bits)], x.width)


class BvXor(Operation):
    """Bitwise XOR (exclusive-or) operation.

    It overrides the operator ^ and provides Automatic Constant Conversion.
    See `Operation` for more information.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import BvXor
        >>> BvXor(Bits.from_unsigned(5, 8), Bits.from_unsigned(3, 8))
        0x06
        >>> Bits.from_unsigned(5, 8) ^ 3
        0x06

    """

    arity = [2, 0]
    is_simple = True

    @classmethod
    def output_width(cls, x, y):
        return x.width

    @classmethod
    def eval(cls, x, y):
        return core.Bits([a != b for a, b in zip(x.bits, y.bits)], x.width)


# Shifts operators

class BvShl(Operation):
    """Shift left operation.

    ``BvShl(x, k)`` moves every bit ``k`` positions towards the most
    significant bit; the vacated low bits are filled with 0.
    Shifting by the width or more gives the zero bit-vector.

    It overrides << (a bit-vector shift amount is taken as its
    unsigned value).

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import BvShl
        >>> BvShl(Bits.from_unsigned(0b10001, 5), 1)
        0b00010
        >>> Bits.from_unsigned(0b10001, 5) << 1
        0b00010
        >>> Bits.from_unsigned(0b10001, 5) << 9
        0b00000

    """

    arity = [1, 1]
    operand_types = [core.Bits, int]

    @classmethod
    def condition(cls, x, k):
        _check_scalar("shift amount", k)

    @classmethod
    def output_width(cls, x, k):
        return x.width

    @classmethod
    def eval(cls, x, k):
        if k >= x.width:
            return core.Bits.zeros(x.width)
        return core.Bits((False,) * k + x.bits[:x.width - k], x.width)


class BvLshr(Operation):
    """Logical right shift operation.

    The vacated high bits are filled with 0. Shifting by the width or
    more gives the zero bit-vector.

    It overrides >>.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import BvLshr
        >>> BvLshr(Bits.from_unsigned(0b10001, 5), 1)
        0b01000
        >>> Bits.from_unsigned(0b10001, 5) >> 1
        0b01000

    """

    arity = [1, 1]
    operand_types = [core.Bits, int]

    @classmethod
    def condition(cls, x, k):
        _check_scalar("shift amount", k)

    @classmethod
    def output_width(cls, x, k):
        return x.width

    @classmethod
    def eval(cls, x, k):
        if k >= x.width:
            return core.Bits.zeros(x.width)
        return core.Bits(x.bits[k:] + (False,) * k, x.width)


class BvAshr(Operation):
    """Arithmetic right shift operation.

    The vacated high bits are filled with the original sign bit.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import BvAshr
        >>> BvAshr(Bits.from_unsigned(0b10001, 5), 2)
        0b11100
        >>> BvAshr(Bits.from_unsigned(0b10001, 5), 7)
        0b11111
        >>> BvAshr(Bits.from_unsigned(0b01001, 5), 2)
        0b00010

    """

    arity = [1, 1]
    operand_types = [core.Bits, int]

    @classmethod
    def condition(cls, x, k):
        _check_scalar("shift amount", k)

    @classmethod
    def output_width(cls, x, k):
        return x.width

    @classmethod
    def eval(cls, x, k):
        k = min(k, x.width)
        return core.Bits(x.bits[k:] + (x.msb,) * k, x.width)


class RotateLeft(Operation):
    """Circular left rotation operation.

    The rotation amount is taken modulo the width.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import RotateLeft
        >>> RotateLeft(Bits.from_unsigned(150, 8), 2)
        0x5a
        >>> RotateLeft(Bits.from_unsigned(150, 8), 10)
        0x5a

    """

    arity = [1, 1]
    operand_types = [core.Bits, int]

    @classmethod
    def condition(cls, x, r):
        _check_scalar("rotation amount", r)

    @classmethod
    def output_width(cls, x, r):
        return x.width

    @classmethod
    def eval(cls, x, r):
        n = x.width
        return core.Bits([x.bits[(i - r) % n] for i in range(n)], n)


class RotateRight(Operation):
    """Circular right rotation operation.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import RotateRight
        >>> RotateRight(Bits.from_unsigned(150, 8), 3)
        0xd2

    """

    arity = [1, 1]
    operand_types = [core.Bits, int]

    @classmethod
    def condition(cls, x, r):
        _check_scalar("rotation amount", r)

    @classmethod
    def output_width(cls, x, r):
        return x.width

    @classmethod
    def eval(cls, x, r):
        n = x.width
        return core.Bits([x.bits[(i + r) % n] for i in range(n)], n)


# Others

class Extract(Operation):
    """Extraction of bits.

    ``Extract(t, i, j)`` extracts the bits from position ``i`` down
    position ``j`` (end points included, position 0 corresponding
    to the least significant bit). The result is a new bit-vector
    of width ``i - j + 1``.

    It overrides the operation [], that is, ``Extract(t, i, j)``
    is equivalent to ``t[i:j]``.

    Note that the indices can be omitted when they point the most
    significant bit or the least significant bit.
    For example, if ``t`` is a bit-vector of length ``n``,
    then ``t[n-1:j] = t[:j]`` and ``t[i:0] = t[i:]``

    Warning:
        In python, given a list ``l``, ``l[i:j]`` denotes the elements
        from position ``i`` up to (but no included) position ``j``.
        Note that with bit-vectors, the order of the arguments is
        swapped and both end points are included.

        For example, for a given list ``l`` and bit-vector ``t``,
        ``l[0:1] == [l[0]]`` and ``t[1:0] == (t[1], t[0])``.

    ::

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import Extract
        >>> Extract(Bits.from_unsigned(0b11100, 5), 4, 2)
        0b111
        >>> Bits.from_unsigned(0b11100, 5)[4:2]
        0b111
        >>> Bits.from_unsigned(0b11100, 5)[2:4]
        Traceback (most recent call last):
         ...
        bitmath.errors.InvalidRange: hi index 2 smaller than lo index 4

    """

    arity = [1, 2]
    operand_types = [core.Bits, int, int]

    @classmethod
    def condition(cls, t, i, j):
        for index in (i, j):
            if not isinstance(index, int) or isinstance(index, bool):
                msg = "slice indices must be int, not {}"
                raise TypeError(msg.format(type(index).__name__))
        if i < 0 or i >= t.width:
            raise InvalidRange(i, j, t.width, "hi")
        if j < 0 or j >= t.width:
            raise InvalidRange(i, j, t.width, "lo")
        if i < j:
            raise InvalidRange(i, j, t.width, "hi < lo")

    @classmethod
    def output_width(cls, t, i, j):
        return i - j + 1

    @classmethod
    def eval(cls, x, i, j):
        return core.Bits(x.bits[j:i + 1], cls.output_width(x, i, j))


class Concat(Operation):
    """Concatenation operation.

    Given the bit-vectors :math:`(x_{n-1}, \\dots, x_0)` and
    :math:`(y_{m-1}, \\dots, y_0)`, ``Concat(x, y)`` returns the bit-vector
    :math:`(x_{n-1}, \\dots, x_0, y_{m-1}, \\dots, y_0)`.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import Concat
        >>> Concat(Bits.from_unsigned(0x12, 8), Bits.from_unsigned(0x345, 12))
        0x12345

    """

    arity = [2, 0]

    @classmethod
    def output_width(cls, x, y):
        return x.width + y.width

    @classmethod
    def eval(cls, x, y):
        return core.Bits(y.bits + x.bits, cls.output_width(x, y))


class ZeroExtend(Operation):
    """Extend with zeroes preserving the unsigned value.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import ZeroExtend
        >>> ZeroExtend(Bits.from_unsigned(0x12, 8), 4)
        0x012

    """

    arity = [1, 1]
    operand_types = [core.Bits, int]

    @classmethod
    def condition(cls, x, i):
        _check_scalar("extension width", i)

    @classmethod
    def output_width(cls, x, i):
        return x.width + i

    @classmethod
    def eval(cls, x, i):
        return core.Bits(x.bits + (False,) * i, cls.output_width(x, i))


class SignExtend(Operation):
    """Extend with copies of the sign bit preserving the signed value.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import SignExtend
        >>> SignExtend(Bits.from_unsigned(0x82, 8), 4)
        0xf82
        >>> SignExtend(Bits.from_unsigned(0x42, 8), 4)
        0x042

    """

    arity = [1, 1]
    operand_types = [core.Bits, int]

    @classmethod
    def condition(cls, x, i):
        _check_scalar("extension width", i)

    @classmethod
    def output_width(cls, x, i):
        return x.width + i

    @classmethod
    def eval(cls, x, i):
        return core.Bits(x.bits + (x.msb,) * i, cls.output_width(x, i))


# Arithmetic operators

class BvNeg(Operation):
    """Unary minus operation.

    It overrides the unary operator -. See `Operation` for more information.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import BvNeg
        >>> BvNeg(Bits.from_unsigned(1, 4))
        0xf
        >>> -Bits.from_unsigned(1, 4)
        0xf

    """

    arity = [1, 0]

    @classmethod
    def output_width(cls, x):
        return x.width

    @classmethod
    def eval(cls, x):
        from bitmath import arithmetic
        return arithmetic.negate(x).result


class BvAdd(Operation):
    """Modular addition operation.

    It overrides the operator + and provides Automatic Constant Conversion.
    The carry out of the most significant bit is discarded; use
    `arithmetic.unsigned_add` or `arithmetic.signed_add` to detect it.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import BvAdd
        >>> BvAdd(Bits.from_unsigned(7, 8), Bits.from_unsigned(2, 8))
        0x09
        >>> BvAdd(Bits.from_unsigned(7, 8), 2)
        0x09
        >>> Bits.from_unsigned(7, 8) + 2
        0x09
        >>> Bits.from_unsigned(0xff, 8) + 1
        0x00

    """

    arity = [2, 0]
    is_simple = True

    @classmethod
    def output_width(cls, x, y):
        return x.width

    @classmethod
    def eval(cls, x, y):
        from bitmath import arithmetic
        return arithmetic.unsigned_add(x, y).result


class BvSub(Operation):
    """Modular subtraction operation.

    It overrides the operator - and provides Automatic Constant Conversion.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import BvSub
        >>> BvSub(Bits.from_unsigned(7, 8), Bits.from_unsigned(2, 8))
        0x05
        >>> Bits.from_unsigned(2, 8) - 7
        0xfb

    """

    arity = [2, 0]
    is_simple = True

    @classmethod
    def output_width(cls, x, y):
        return x.width

    @classmethod
    def eval(cls, x, y):
        from bitmath import arithmetic
        return arithmetic.unsigned_sub(x, y).result


class BvMul(Operation):
    """Modular multiplication operation.

    It overrides the operator * and provides Automatic Constant Conversion.
    The product is truncated to the width of the operands.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import BvMul
        >>> BvMul(Bits.from_unsigned(4, 8), Bits.from_unsigned(3, 8))
        0x0c
        >>> Bits.from_unsigned(0x10, 8) * 0x11
        0x10

    """

    arity = [2, 0]
    is_simple = True

    @classmethod
    def output_width(cls, x, y):
        return x.width

    @classmethod
    def eval(cls, x, y):
        from bitmath import arithmetic
        return arithmetic.unsigned_mul(x, y).result
