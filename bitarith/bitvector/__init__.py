"""Manipulate bit-vectors given as sequences of bits.

This module represents bit-vectors as immutable sequences of bits in
big-endian order (the most significant bit first), converts them
from and to unsigned integers, and implements the bitwise operators
AND, OR, XOR, NOT and the ripple-carry addition.

"""
