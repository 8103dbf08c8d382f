"""Bit-vector arithmetic on big-endian sequences of bits."""
