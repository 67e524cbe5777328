"""Manipulate fixed-width bit-vectors.

This package provides `Bits`, an immutable bit-vector of a fixed width,
with the usual bitwise operations, two's complement arithmetic with
separate signed and unsigned overflow detection, bit slicing, parsing
from binary text and a multi-base textual representation.

    >>> from bitmath import Bits
    >>> a, b = Bits.parse("101"), Bits.parse("110")
    >>> a.unsigned_add(b)
    Overflowing(result=0b011, overflowed=True)
    >>> print(Bits.parse("1011 0001 0110 1011")[15:8])
    Bits<8>{ 1011 0001 | dec 177/-79 | hex 0xb1/-0x4f }

"""
import logging

from bitmath.core import Bits, bitvectify
from bitmath.errors import (
    BitsError, WidthMismatch, LengthMismatch, InvalidDigit, InvalidRange,
    IndexOutOfBounds, ValueOutOfRange
)
from bitmath.arithmetic import Overflowing
from bitmath.parsing import parse
from bitmath.printing import render

logging.getLogger(__name__).addHandler(logging.NullHandler())
