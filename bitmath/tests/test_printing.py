"""Tests for the printing module."""
import doctest
import unittest

from hypothesis import given
from hypothesis.strategies import integers

from bitmath.core import Bits
from bitmath.parsing import parse
from bitmath.printing import (
    bin_string, unsigned_dec, signed_dec, unsigned_hex, signed_hex,
    hex_bytes, render
)

MIN_SIZE = 1
MAX_SIZE = 64


class TestPrinting(unittest.TestCase):
    """Tests of the representation of bit-vectors."""

    def test_scenario(self):
        word = parse("1011000101101011")
        expected = "Bits<16>{ 1011 0001 0110 1011 | dec 45419/-20117 | hex 0xb16b/-0x4e95 }"

        self.assertEqual(render(word), expected)
        self.assertEqual(str(word), expected)
        self.assertEqual(bin_string(word), "1011 0001 0110 1011")
        self.assertEqual(unsigned_dec(word), "45419")
        self.assertEqual(signed_dec(word), "-20117")
        self.assertEqual(unsigned_hex(word), "0xb16b")
        self.assertEqual(signed_hex(word), "-0x4e95")
        self.assertEqual(hex_bytes(word), "b1 6b")

    def test_non_negative(self):
        x = Bits.from_unsigned(0x0b, 16)
        self.assertEqual(signed_dec(x), unsigned_dec(x))
        self.assertEqual(signed_hex(x), unsigned_hex(x))
        self.assertEqual(str(x),
                         "Bits<16>{ 0000 0000 0000 1011 | dec 11/11 | hex 0x000b/0x000b }")

    def test_partial_groups(self):
        self.assertEqual(bin_string(parse("1")), "1")
        self.assertEqual(bin_string(parse("10000")), "1 0000")
        self.assertEqual(bin_string(parse("111 0000 1010")), "111 0000 1010")
        self.assertEqual(str(parse("10")), "Bits<2>{ 10 | dec 2/-2 | hex 0x2/-0x2 }")
        self.assertEqual(str(parse("1")), "Bits<1>{ 1 | dec 1/-1 | hex 0x1/-0x1 }")
        self.assertEqual(hex_bytes(parse("1")), "1")
        self.assertEqual(hex_bytes(Bits.from_unsigned(0x12345, 20)), "1 23 45")

    def test_repr(self):
        self.assertEqual(repr(Bits.from_unsigned(0xab, 8)), "0xab")
        self.assertEqual(repr(Bits.from_unsigned(5, 7)), "0b0000101")
        self.assertEqual(Bits.from_unsigned(5, 7).vrepr(), "Bits(0b0000101, width=7)")

    @given(
        integers(min_value=MIN_SIZE, max_value=MAX_SIZE),
        integers(min_value=0),
    )
    def test_values(self, width, x):
        x = x % (2 ** width)
        bv = Bits.from_unsigned(x, width)
        digits = -(-width // 4)

        groups = bin_string(bv).split(" ")
        self.assertTrue(all(len(g) == 4 for g in groups[1:]))
        self.assertTrue(1 <= len(groups[0]) <= 4)
        self.assertEqual(int("".join(groups), 2), x)

        self.assertEqual(int(unsigned_dec(bv)), x)
        self.assertEqual(int(signed_dec(bv)), bv.signed_value())

        self.assertEqual(len(unsigned_hex(bv)), digits + 2)
        self.assertEqual(int(unsigned_hex(bv), 16), x)
        self.assertEqual(unsigned_hex(bv), unsigned_hex(bv).lower())

        shex = signed_hex(bv)
        self.assertEqual(len(shex.lstrip("-")), digits + 2)
        self.assertEqual(int(shex, 16), bv.signed_value())
        self.assertEqual(shex.startswith("-"), bv.msb)

        self.assertEqual(int(hex_bytes(bv).replace(" ", ""), 16), x)

        self.assertEqual(parse(bin_string(bv), width), bv)


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import bitmath.printing
    tests.addTests(doctest.DocTestSuite(bitmath.printing))
    return tests
