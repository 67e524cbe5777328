"""Provide the fixed-width bit-vector type."""
from sympy import Atom, Basic

from bitmath.errors import IndexOutOfBounds, ValueOutOfRange, WidthMismatch


def _check_width(width):
    assert isinstance(width, int) and not isinstance(width, bool) and 0 < width


def _check_index(index, width):
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError("bit index must be an int, not {}".format(type(index).__name__))
    if index < 0 or index >= width:
        raise IndexOutOfBounds(index, width)


class Bits(Atom):
    """Represent a fixed-width bit-vector value.

    A bit-vector of width ``n`` is a sequence of ``n`` bits
    :math:`(x_{n-1}, \\dots, x_1, x_0)`. Index 0 is the least significant
    bit and index ``n - 1`` the most significant bit, which is also the
    sign bit under the two's complement interpretation. The unsigned
    value is :math:`x_0 + 2 x_1 + \\dots + 2^{n-1} x_{n-1}`.

    Bit-vectors are immutable; every operation returns a new value
    and the width of a value never changes.

    Args:
        bits: the bits, least significant first, as 0/1 or booleans.
        width: the bit-width.

    ::

        >>> from bitmath.core import Bits
        >>> Bits([1, 1, 0, 0], 4)
        0x3
        >>> Bits([1, 1, 0], 3)
        0b011
        >>> Bits([1, 1, 0], 3).vrepr()
        'Bits(0b011, width=3)'
        >>> Bits([1, 1], 3)
        Traceback (most recent call last):
         ...
        bitmath.errors.WidthMismatch: expected width 3, found 2

    Bit-vectors support the bitwise, shift and arithmetic operators
    (``~ & | ^ << >> + - *``) with the semantics of the classes in
    `operation`, and the bracket notation ``x[hi:lo]`` for `Extract`.
    Arithmetic operators wrap around silently; to detect overflows use
    the methods ``unsigned_add``, ``signed_add``, etc.
    (see `arithmetic`).

    Note that Bits inherits the methods of the SymPy class `Atom`.
    """

    __slots__ = ["_bits", "_width"]

    def __new__(cls, bits, width):
        _check_width(width)
        bits = tuple(bits)
        if len(bits) != width:
            raise WidthMismatch(width, len(bits))
        for b in bits:
            if b not in (0, 1):
                raise ValueError("bit values must be 0 or 1, not {!r}".format(b))
        obj = Basic.__new__(cls)
        obj._bits = tuple(bool(b) for b in bits)
        obj._width = width
        return obj

    @classmethod
    def zeros(cls, width):
        """Return the all-zero bit-vector of given width.

            >>> from bitmath.core import Bits
            >>> Bits.zeros(8)
            0x00

        """
        _check_width(width)
        return cls([False] * width, width)

    @classmethod
    def ones(cls, width):
        """Return the all-one bit-vector of given width.

            >>> from bitmath.core import Bits
            >>> Bits.ones(6)
            0b111111

        """
        _check_width(width)
        return cls([True] * width, width)

    @classmethod
    def from_unsigned(cls, val, width):
        """Return the bit-vector representing the non-negative integer *val*.

            >>> from bitmath.core import Bits
            >>> Bits.from_unsigned(0xb16b, 16)
            0xb16b
            >>> Bits.from_unsigned(16, 4)
            Traceback (most recent call last):
             ...
            bitmath.errors.ValueOutOfRange: 16 is not representable as a 4-bit unsigned value

        """
        _check_width(width)
        if not isinstance(val, int):
            raise TypeError("expected an int, not {}".format(type(val).__name__))
        if not 0 <= val < 2 ** width:
            raise ValueOutOfRange(val, width)
        return cls([(val >> i) & 1 for i in range(width)], width)

    @classmethod
    def from_signed(cls, val, width):
        """Return the two's complement representation of *val*.

            >>> from bitmath.core import Bits
            >>> Bits.from_signed(-1, 8)
            0xff
            >>> Bits.from_signed(-20117, 16)
            0xb16b

        """
        _check_width(width)
        if not isinstance(val, int):
            raise TypeError("expected an int, not {}".format(type(val).__name__))
        if not -(2 ** (width - 1)) <= val < 2 ** (width - 1):
            raise ValueOutOfRange(val, width, signed=True)
        return cls.from_unsigned(val % (2 ** width), width)

    @classmethod
    def parse(cls, text, width=None):
        """Parse a textual bit-vector. See `parsing.parse`."""
        from bitmath import parsing
        return parsing.parse(text, width)

    @property
    def width(self):
        """The bit-width of the bit-vector."""
        return self._width

    @property
    def bits(self):
        """The bits as a tuple of booleans, least significant first."""
        return self._bits

    @property
    def msb(self):
        """The most significant (sign) bit."""
        return self._bits[-1]

    def bit(self, i):
        """Return the bit at index *i* (0 is the least significant bit).

            >>> from bitmath.core import Bits
            >>> Bits.from_unsigned(0b100, 3).bit(2)
            True
            >>> Bits.from_unsigned(0b100, 3).bit(3)
            Traceback (most recent call last):
             ...
            bitmath.errors.IndexOutOfBounds: bit index 3 out of range for width 3

        """
        _check_index(i, self.width)
        return self._bits[i]

    def set_bit(self, i, value):
        """Return a copy of the bit-vector with the bit at index *i* replaced.

            >>> from bitmath.core import Bits
            >>> Bits.zeros(4).set_bit(3, 1)
            0x8

        """
        _check_index(i, self.width)
        if value not in (0, 1):
            raise ValueError("bit values must be 0 or 1, not {!r}".format(value))
        bits = list(self._bits)
        bits[i] = bool(value)
        return type(self)(bits, self.width)

    def unsigned_value(self):
        """Return the integer represented in base 2."""
        val = 0
        for b in reversed(self._bits):
            val = (val << 1) | b
        return val

    def signed_value(self):
        """Return the integer represented in two's complement.

            >>> from bitmath.core import Bits
            >>> Bits.from_unsigned(0xb16b, 16).signed_value()
            -20117

        """
        val = self.unsigned_value()
        if self.msb:
            val -= 2 ** self.width
        return val

    def __int__(self):
        return self.unsigned_value()

    def __len__(self):
        return self._width

    def __iter__(self):
        return iter(self._bits)

    def __bool__(self):
        if self.width == 1:
            return self._bits[0]
        else:
            raise TypeError("only 1-bit values implement bool()")

    def __hash__(self):
        return super().__hash__()

    def __eq__(self, other):
        """Override == operator."""
        if isinstance(other, Bits):
            return self.width == other.width and self._bits == other._bits
        else:
            return False

    def __ne__(self, other):
        return not self == other

    def _hashable_content(self):
        """Return a tuple of information about self to compute its hash."""
        return self._bits, self._width

    def __getnewargs__(self):
        return self._bits, self._width

    @classmethod
    def class_key(cls):
        """Return the key (identifier) of the class for sorting."""
        return 1, 0, cls.__name__

    # Relational operators (unsigned)

    def _comparable(self, other):
        if isinstance(other, int):
            other = Bits.from_unsigned(other, self.width)
        if other.width != self.width:
            raise WidthMismatch(self.width, other.width)
        return other

    def __lt__(self, other):
        """Override < operator."""
        if not isinstance(other, (int, Bits)):
            return NotImplemented
        return int(self) < int(self._comparable(other))

    def __le__(self, other):
        """Override <= operator."""
        if not isinstance(other, (int, Bits)):
            return NotImplemented
        return int(self) <= int(self._comparable(other))

    def __gt__(self, other):
        """Override > operator."""
        if not isinstance(other, (int, Bits)):
            return NotImplemented
        return int(self) > int(self._comparable(other))

    def __ge__(self, other):
        """Override >= operator."""
        if not isinstance(other, (int, Bits)):
            return NotImplemented
        return int(self) >= int(self._comparable(other))

    # Bitwise operators

    def __invert__(self):
        """Override ~ operator."""
        from bitmath import operation
        return operation.BvNot(self)

    def __and__(self, other):
        """Override & operator."""
        from bitmath import operation
        return operation.BvAnd(self, other)

    __rand__ = __and__

    def __or__(self, other):
        """Override | operator."""
        from bitmath import operation
        return operation.BvOr(self, other)

    __ror__ = __or__

    def __xor__(self, other):
        """Override ^ operator."""
        from bitmath import operation
        return operation.BvXor(self, other)

    __rxor__ = __xor__

    # Shifts

    def __lshift__(self, other):
        """Override << operator."""
        from bitmath import operation
        if isinstance(other, Bits):
            other = int(other)
        return operation.BvShl(self, other)

    def __rshift__(self, other):
        """Override >> operator (logical shift)."""
        from bitmath import operation
        if isinstance(other, Bits):
            other = int(other)
        return operation.BvLshr(self, other)

    # Arithmetic operators (wrapping)

    def __neg__(self):
        """Override unary minus - operator."""
        from bitmath import operation
        return operation.BvNeg(self)

    def __add__(self, other):
        """Override + operator."""
        from bitmath import operation
        return operation.BvAdd(self, other)

    __radd__ = __add__

    def __sub__(self, other):
        """Override - operator."""
        from bitmath import operation
        return operation.BvSub(self, other)

    def __rsub__(self, other):
        """Override reflected - operator."""
        from bitmath import operation
        return operation.BvSub(other, self)

    def __mul__(self, other):
        """Override * operator."""
        from bitmath import operation
        return operation.BvMul(self, other)

    __rmul__ = __mul__

    # Arithmetic with overflow detection

    def unsigned_add(self, other):
        """Add as unsigned integers. See `arithmetic.unsigned_add`."""
        from bitmath import arithmetic
        return arithmetic.unsigned_add(self, other)

    def signed_add(self, other):
        """Add as signed integers. See `arithmetic.signed_add`."""
        from bitmath import arithmetic
        return arithmetic.signed_add(self, other)

    def unsigned_sub(self, other):
        """Subtract as unsigned integers. See `arithmetic.unsigned_sub`."""
        from bitmath import arithmetic
        return arithmetic.unsigned_sub(self, other)

    def signed_sub(self, other):
        """Subtract as signed integers. See `arithmetic.signed_sub`."""
        from bitmath import arithmetic
        return arithmetic.signed_sub(self, other)

    def unsigned_mul(self, other):
        """Multiply as unsigned integers. See `arithmetic.unsigned_mul`."""
        from bitmath import arithmetic
        return arithmetic.unsigned_mul(self, other)

    def signed_mul(self, other):
        """Multiply as signed integers. See `arithmetic.signed_mul`."""
        from bitmath import arithmetic
        return arithmetic.signed_mul(self, other)

    # Slicing

    def __getitem__(self, key):
        """Override [] operator.

        ``x[i]`` returns the bit at index ``i`` and ``x[hi:lo]`` is
        equivalent to ``Extract(x, hi, lo)``. An omitted ``hi`` means the
        most significant bit and an omitted ``lo`` the bit 0.
        """
        from bitmath import operation

        if isinstance(key, slice):
            if key.step is not None and key.step != 1:
                raise TypeError("bit-vector slices do not support a step")
            hi = key.start if key.start is not None else self.width - 1
            lo = key.stop if key.stop is not None else 0
            return operation.Extract(self, hi, lo)
        elif isinstance(key, int):
            return self.bit(key)
        else:
            raise TypeError("invalid index")

    def extract(self, hi, lo):
        """Return the bits from index *hi* down to *lo*. See `operation.Extract`."""
        from bitmath import operation
        return operation.Extract(self, hi, lo)

    # Representation

    def __str__(self):
        """Return the canonical multi-base representation."""
        from bitmath import printing
        return (printing.BvStrPrinter()).doprint(self)

    def __repr__(self):
        """Return the short (literal) representation."""
        from bitmath import printing
        return (printing.BvShortPrinter()).doprint(self)

    def vrepr(self):
        """Return a verbose string representation."""
        from bitmath import printing
        return (printing.BvReprPrinter()).doprint(self)

    def bin(self):
        """Return the binary representation.

            >>> from bitmath.core import Bits
            >>> print(Bits.from_unsigned(3, 4).bin())
            0b0011
            >>> print(Bits.from_unsigned(4, 6).bin())
            0b000100

        """
        width = self.width + 2  # 2 due to '0b'
        return format(int(self), r'0=#{}b'.format(width))

    def hex(self):
        """Return the hexadecimal representation.

        The number of digits is the width divided by 4, rounded up.

            >>> from bitmath.core import Bits
            >>> print(Bits.from_unsigned(3, 4).hex())
            0x3
            >>> print(Bits.from_unsigned(3, 9).hex())
            0x003

        """
        width = -(-self.width // 4) + 2
        return format(int(self), '0=#{}x'.format(width))


def bitvectify(t, width):
    """Convert the argument *t* to a bit-vector of bit-width *width*.

    Integers are taken as unsigned values and strings are parsed.

        >>> from bitmath.core import bitvectify
        >>> print(bitvectify(0, 8).vrepr())
        Bits(0b00000000, width=8)
        >>> print(bitvectify("10_01", 4).vrepr())
        Bits(0b1001, width=4)

    """
    if isinstance(t, Bits):
        if t.width != width:
            raise WidthMismatch(width, t.width)
        return t
    elif isinstance(t, int):
        return Bits.from_unsigned(t, width)
    elif isinstance(t, str):
        return Bits.parse(t, width)
    else:
        msg = "cannot convert '{}' to a bit-vector"
        raise TypeError(msg.format(type(t).__name__))
