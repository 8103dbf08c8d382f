"""Tests for the core module."""
import copy
import doctest
import pickle
import unittest

from hypothesis import given
from hypothesis.strategies import integers, lists

from bitarith.bitvector.context import Validation
from bitarith.bitvector.core import (
    Bits, InvalidBitError, bitify, bits_to_number, number_to_bits, zeros,
    zero_extend
)

MAX_SIZE = 32


class TestBits(unittest.TestCase):
    """Tests of the Bits class."""

    def test_invalid_args(self):
        with self.assertRaises(InvalidBitError) as cm:
            Bits([1, 0, 2])
        self.assertEqual(cm.exception.position, 2)
        self.assertEqual(cm.exception.value, 2)
        with self.assertRaises(InvalidBitError):
            Bits([-1])
        with self.assertRaises(TypeError):
            Bits([1, 0.5])
        with self.assertRaises(TypeError):
            Bits("101")
        with self.assertRaises(TypeError):
            Bits(5)

    def test_unchecked_bits(self):
        with Validation(False):
            bv = Bits([1, 2])
        self.assertEqual(bv.tolist(), [1, 2])

    def test_initialization(self):
        bv = Bits([1, 0, 1, 1])

        self.assertTrue(bv.is_Atom)
        self.assertEqual(len(bv), 4)
        self.assertEqual(bv.width, 4)
        self.assertEqual(list(bv), [1, 0, 1, 1])
        self.assertEqual(Bits([True, False]).tolist(), [1, 0])
        self.assertEqual(len(Bits([])), 0)

        with self.assertRaises(AttributeError):
            bv.width = 5

    def test_immutability(self):
        source = [1, 0, 1]
        bv = Bits(source)
        source[0] = 0
        self.assertEqual(bv, [1, 0, 1])

        with self.assertRaises(TypeError):
            bv[0] = 0

    def test_indexing(self):
        bv = Bits([1, 0, 0, 1, 1])

        self.assertEqual(bv[0], 1)
        self.assertEqual(bv[-1], 1)
        self.assertEqual(bv[1:3], Bits([0, 0]))
        self.assertIsInstance(bv[1:3], Bits)

        with self.assertRaises(IndexError):
            bv[5]
        with self.assertRaises(TypeError):
            bv["0"]

    def test_comparisons(self):
        x, y = Bits([0, 1]), Bits([1])

        self.assertNotEqual(x, y)
        self.assertEqual(x, Bits([0, 1]))
        self.assertEqual(x, [0, 1])
        self.assertEqual(x, (0, 1))
        self.assertNotEqual(x, "01")
        self.assertNotEqual(x, 1)
        self.assertEqual(hash(x), hash(Bits([0, 1])))
        self.assertEqual(len({x, Bits([0, 1]), y}), 2)

    def test_hash_with_tuples(self):
        bv = Bits([0, 1])

        self.assertIn(bv, {(0, 1)})
        self.assertIn((0, 1), {bv})
        self.assertEqual({bv: "x"}[(0, 1)], "x")
        self.assertNotIn(bv, {(1, 0)})

    def test_copy_and_pickle(self):
        bv = Bits([1, 0, 1, 1])

        for other in [copy.copy(bv), copy.deepcopy(bv),
                      pickle.loads(pickle.dumps(bv))]:
            self.assertIsInstance(other, Bits)
            self.assertEqual(other, bv)
            self.assertEqual(hash(other), hash(bv))
            self.assertEqual(other.vrepr(), "Bits([1, 0, 1, 1])")

    def test_representations(self):
        bv = Bits([1, 0, 1, 0, 1, 1, 1, 0])

        self.assertEqual(str(bv), "0b10101110")
        self.assertEqual(repr(bv), "0b10101110")
        self.assertEqual(bv.vrepr(), "Bits([1, 0, 1, 0, 1, 1, 1, 0])")
        self.assertEqual(bv.srepr(), "[1, 0, 1, 0, 1, 1, 1, 0]")
        self.assertEqual(bv.hex(), "0xae")
        self.assertEqual(Bits([0, 0, 0, 1]).hex(), "0x1")
        self.assertEqual(int(bv), 174)

        with self.assertRaises(AssertionError):
            Bits([1, 0, 1]).hex()


class TestConversions(unittest.TestCase):
    """Tests of bits_to_number and number_to_bits."""

    def test_bits_to_number(self):
        for number in range(16):
            bits = [(number >> i) & 1 for i in reversed(range(4))]
            self.assertEqual(bits_to_number(bits), number)

        self.assertEqual(bits_to_number([1, 1, 0, 0]), 12)
        self.assertEqual(bits_to_number(Bits([1] * 32)), 2 ** 32 - 1)
        self.assertEqual(bits_to_number([]), 0)

        with self.assertRaises(InvalidBitError):
            bits_to_number([1, 3])

    def test_number_to_bits(self):
        self.assertEqual(number_to_bits(0), [0])
        self.assertEqual(number_to_bits(1), [1])
        self.assertEqual(number_to_bits(2), [1, 0])
        self.assertEqual(number_to_bits(5), [1, 0, 1])
        self.assertEqual(number_to_bits(12), [1, 1, 0, 0])
        self.assertEqual(number_to_bits(174), [1, 0, 1, 0, 1, 1, 1, 0])
        self.assertEqual(number_to_bits(2 ** 32 - 1), [1] * 32)

    def test_invalid_numbers(self):
        with self.assertRaises(ValueError):
            number_to_bits(-1)
        with self.assertRaises(TypeError):
            number_to_bits(1.0)
        with self.assertRaises(TypeError):
            number_to_bits("1")
        with self.assertRaises(TypeError):
            number_to_bits(True)

    @given(integers(min_value=0, max_value=2 ** MAX_SIZE - 1))
    def test_round_trip(self, number):
        bits = number_to_bits(number)

        self.assertEqual(bits_to_number(bits), number)
        self.assertEqual(len(bits), max(number.bit_length(), 1))
        self.assertTrue(len(bits) == 1 or bits[0] == 1)

    @given(lists(integers(min_value=0, max_value=1), min_size=1, max_size=MAX_SIZE))
    def test_leading_zeros(self, bits):
        number = bits_to_number(bits)
        if len(bits) == 1 or bits[0] == 1:
            self.assertEqual(number_to_bits(number), bits)
        else:
            self.assertLess(len(number_to_bits(number)), len(bits))


class TestHelpers(unittest.TestCase):
    """Tests of zeros, zero_extend and bitify."""

    def test_zeros(self):
        self.assertEqual(zeros(1), [0])
        self.assertEqual(zeros(4), [0, 0, 0, 0])

        with self.assertRaises(AssertionError):
            zeros(0)
        with self.assertRaises(AssertionError):
            zeros("4")

    def test_zero_extend(self):
        self.assertEqual(zero_extend([1, 0], 4), [0, 0, 1, 0])
        self.assertEqual(zero_extend([1, 0], 2), [1, 0])
        self.assertEqual(zero_extend([1, 0, 1], 1), [1, 0, 1])
        self.assertEqual(bits_to_number(zero_extend([1, 1], 8)), 3)

        with self.assertRaises(AssertionError):
            zero_extend([1], -1)

    def test_bitify(self):
        bv = Bits([1, 0])

        self.assertIs(bitify(bv), bv)
        self.assertEqual(bitify(2), bv)
        self.assertEqual(bitify(2, 4), [0, 0, 1, 0])
        self.assertEqual(bitify([1, 0]), bv)
        self.assertEqual(bitify((1, 0)), bv)

        with self.assertRaises(TypeError):
            bitify("10")
        with self.assertRaises(TypeError):
            bitify(1.5)
        with self.assertRaises(TypeError):
            bitify(None)


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import bitarith.bitvector.core
    tests.addTests(doctest.DocTestSuite(bitarith.bitvector.core))
    return tests
