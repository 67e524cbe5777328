"""Tests for the parsing module."""
import doctest
import unittest

from hypothesis import given
from hypothesis.strategies import integers, lists, sampled_from

from bitmath.core import Bits
from bitmath.errors import InvalidDigit, LengthMismatch
from bitmath.parsing import parse
from bitmath.printing import bin_string

MIN_SIZE = 1
MAX_SIZE = 64


class TestParse(unittest.TestCase):
    """Tests of the parse function."""

    def test_digit_order(self):
        x = parse("1000")
        self.assertEqual(x.width, 4)
        self.assertTrue(x.bit(3))
        self.assertEqual(int(x), 8)
        self.assertEqual(parse("0001", 4), Bits([1, 0, 0, 0], 4))

    def test_separators(self):
        expected = Bits.from_unsigned(0b10110001, 8)
        self.assertEqual(parse("1011 0001"), expected)
        self.assertEqual(parse("1011_0001", 8), expected)
        self.assertEqual(parse(" 1 0_1_1 0001 "), expected)
        self.assertEqual(parse("__1 ", 1), Bits.ones(1))

    def test_invalid_digit(self):
        with self.assertRaises(InvalidDigit) as cm:
            parse("1012", 4)
        self.assertEqual(cm.exception.char, "2")
        self.assertEqual(cm.exception.position, 3)

        with self.assertRaises(InvalidDigit) as cm:
            parse("10 1x", 4)
        self.assertEqual(cm.exception.char, "x")
        self.assertEqual(cm.exception.position, 4)

        for text in ["0b101", "1\t0", "1-0", "１"]:
            with self.assertRaises(InvalidDigit):
                parse(text)

        # digits are checked before the length
        with self.assertRaises(InvalidDigit):
            parse("12", 4)

    def test_length_mismatch(self):
        with self.assertRaises(LengthMismatch) as cm:
            parse("101", 4)
        self.assertEqual(cm.exception.expected, 4)
        self.assertEqual(cm.exception.found, 3)

        with self.assertRaises(LengthMismatch):
            parse("1 0101", 4)
        with self.assertRaises(LengthMismatch):
            parse("")
        with self.assertRaises(LengthMismatch):
            parse(" _ ")

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            parse("1012", 4)
        with self.assertRaises(ValueError):
            parse("101", 4)

    def test_invalid_args(self):
        with self.assertRaises(TypeError):
            parse(101, 3)
        with self.assertRaises(TypeError):
            parse(b"101", 3)
        with self.assertRaises(AssertionError):
            parse("101", 0)
        with self.assertRaises(AssertionError):
            parse("1", True)

    def test_classmethod(self):
        self.assertEqual(Bits.parse("110", 3), parse("110"))

    @given(
        lists(sampled_from("01"), min_size=MIN_SIZE, max_size=MAX_SIZE),
    )
    def test_round_trip(self, digits):
        text = "".join(digits)
        bv = parse(text, len(text))
        self.assertEqual(bv.width, len(text))
        self.assertEqual(bin_string(bv).replace(" ", ""), text)
        self.assertEqual(bin_string(bv, pretty=False), text)
        self.assertEqual(parse(bin_string(bv)), bv)

    @given(
        integers(min_value=MIN_SIZE, max_value=MAX_SIZE),
        integers(min_value=0),
    )
    def test_unsigned_value(self, width, x):
        x = x % (2 ** width)
        text = format(x, "0{}b".format(width))
        self.assertEqual(int(parse(text)), x)


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import bitmath.parsing
    tests.addTests(doctest.DocTestSuite(bitmath.parsing))
    return tests
