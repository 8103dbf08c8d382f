"""Provide the bit-vector type and the integer conversions."""
import collections.abc
import functools

from sympy import Atom

from bitarith.bitvector import context


class InvalidBitError(ValueError):
    """Raised when an element of a bit-vector is neither 0 nor 1."""

    def __init__(self, position, value):
        self.position = position
        self.value = value
        msg = "invalid bit {!r} at position {}".format(value, position)
        super().__init__(msg)


class Bits(Atom):
    """Represent bit-vectors.

    A bit-vector is an immutable sequence of bits given in big-endian
    order, that is, the bit-vector :math:`(x_0, x_1, \\dots, x_{n-1})`
    represents the non-negative integer
    :math:`2^{n-1} x_0 + \\dots + 2 x_{n-2} + x_{n-1}`.
    Leading zero bits are significant positions and they are never
    stripped.

    Args:
        bits: an iterable of bits (0 or 1).

    ::

        >>> from bitarith.bitvector.core import Bits
        >>> Bits([1, 0, 1, 1])
        0b1011
        >>> Bits([0, 0, 1]).vrepr()
        'Bits([0, 0, 1])'
        >>> Bits([1, 0, 1, 1]) == [1, 0, 1, 1]
        True
        >>> Bits([1, 0, 1, 1])[0], Bits([1, 0, 1, 1])[1:]
        (1, 0b011)

    The elements are validated while the `Validation` context
    is enabled (the default):

        >>> Bits([1, 2])
        Traceback (most recent call last):
         ...
        bitarith.bitvector.core.InvalidBitError: invalid bit 2 at position 1

    Bit-vectors support the bitwise operators with the standard
    operator symbols (&, |, ^, ~, +). See `operation` for
    more information.

        >>> Bits([1, 0, 1, 1]) & Bits([1, 0, 0, 1])
        0b1001
        >>> ~Bits([1, 0, 1, 1])
        0b0100
        >>> Bits([1]) + Bits([1])
        0b10

    """

    # Bitwise operators

    def __invert__(self):
        """Override ~ operator."""
        from bitarith.bitvector import operation
        return operation.BvNot(self)

    def __and__(self, other):
        """Override & operator."""
        from bitarith.bitvector import operation
        return operation.BvAnd(self, other)

    __rand__ = __and__

    def __or__(self, other):
        """Override | operator."""
        from bitarith.bitvector import operation
        return operation.BvOr(self, other)

    __ror__ = __or__

    def __xor__(self, other):
        """Override ^ operator."""
        from bitarith.bitvector import operation
        return operation.BvXor(self, other)

    __rxor__ = __xor__

    # Arithmetic operators

    def __add__(self, other):
        """Override + operator."""
        from bitarith.bitvector import operation
        return operation.BvAdd(self, other)

    __radd__ = __add__

    # end operators

    __slots__ = ["_bits"]

    def __new__(cls, bits):
        bits = tuple(bits)

        if context.Validation.current_context:
            for position, bit in enumerate(bits):
                if not isinstance(bit, int):
                    msg = "bit at position {} has invalid type '{}'"
                    raise TypeError(msg.format(position, type(bit).__name__))
                if bit not in (0, 1):
                    raise InvalidBitError(position, bit)
            bits = tuple(int(bit) for bit in bits)

        obj = Atom.__new__(cls)
        obj._bits = bits
        return obj

    def __hash__(self):
        # same hash as the tuple of bits, which compares equal
        return hash(self._bits)

    def __getnewargs__(self):
        return self._bits,

    def __eq__(self, other):
        """Override == operator."""
        if isinstance(other, Bits):
            return self._bits == other._bits
        elif isinstance(other, collections.abc.Sequence) and \
                not isinstance(other, str):
            return self._bits == tuple(other)
        else:
            return False

    def __ne__(self, other):
        return not self == other

    def _hashable_content(self):
        """Return a tuple of information about self to compute its hash."""
        return self._bits,

    def __len__(self):
        return len(self._bits)

    def __iter__(self):
        return iter(self._bits)

    def __getitem__(self, key):
        """Override [] operator."""
        if isinstance(key, slice):
            return Bits(self._bits[key])
        elif isinstance(key, int):
            return self._bits[key]
        else:
            raise TypeError("invalid index")

    def __int__(self):
        return bits_to_number(self)

    def __str__(self):
        """Return the non-verbose string representation."""
        from bitarith.bitvector import printing
        return (printing.BvStrPrinter()).doprint(self)

    __repr__ = __str__

    @property
    def width(self):
        """The number of bits of the bit-vector."""
        return len(self._bits)

    def vrepr(self):
        """Return a verbose string representation."""
        from bitarith.bitvector import printing
        return (printing.BvReprPrinter()).doprint(self)

    def srepr(self):
        """Return the representation as a list of bits.

            >>> from bitarith.bitvector.core import Bits
            >>> print(Bits([0, 1, 1]).srepr())
            [0, 1, 1]

        """
        from bitarith.bitvector import printing
        return (printing.BvShortPrinter()).doprint(self)

    def tolist(self):
        """Return the bits as a list of integers."""
        return list(self._bits)

    def bin(self):
        """Return the binary representation.

            >>> from bitarith.bitvector.core import Bits
            >>> print(Bits([0, 0, 1, 1]).bin())
            0b0011

        """
        return "0b" + "".join(str(bit) for bit in self._bits)

    def hex(self):
        """Return the hexadecimal representation.

            >>> from bitarith.bitvector.core import Bits
            >>> print(Bits([1, 0, 1, 0, 1, 1, 1, 0]).hex())
            0xae

        """
        assert self.width % 4 == 0
        width = (self.width // 4) + 2  # 2 due to '0x'
        return format(int(self), '0=#{}x'.format(width))


def bits_to_number(bits):
    """Return the unsigned integer represented by a big-endian bit-vector.

        >>> from bitarith.bitvector.core import bits_to_number
        >>> bits_to_number([1, 1, 0, 0])
        12
        >>> bits_to_number([0, 0, 0, 1])
        1
        >>> bits_to_number([])
        0

    """
    if context.Validation.current_context:
        bits = bitify(bits)
    return functools.reduce(lambda acc, bit: 2 * acc + bit, bits, 0)


def number_to_bits(number):
    """Return the minimal big-endian bit-vector representing *number*.

    The value 0 is represented by the 1-bit vector ``[0]``.

        >>> from bitarith.bitvector.core import number_to_bits
        >>> number_to_bits(174)
        0b10101110
        >>> number_to_bits(0)
        0b0

    """
    if isinstance(number, bool) or not isinstance(number, int):
        msg = "cannot convert '{}' to a bit-vector"
        raise TypeError(msg.format(type(number).__name__))
    if number < 0:
        raise ValueError("expected a non-negative integer, got {}".format(number))

    digits = []
    quotient = number
    while True:
        quotient, remainder = divmod(quotient, 2)
        digits.append(remainder)
        if quotient == 0:
            break

    return Bits(reversed(digits))


def zeros(width):
    """Return the bit-vector with *width* zero bits."""
    assert isinstance(width, int) and 0 < width
    return Bits([0] * width)


def zero_extend(bits, width):
    """Prepend zero bits to *bits* until it has *width* bits.

        >>> from bitarith.bitvector.core import Bits, zero_extend
        >>> zero_extend(Bits([1, 1]), 4)
        0b0011
        >>> zero_extend(Bits([1, 1, 0]), 2)
        0b110

    """
    assert isinstance(width, int) and 0 <= width
    bits = tuple(bits)
    if len(bits) < width:
        bits = (0,) * (width - len(bits)) + bits
    return Bits(bits)


def bitify(t, width=None):
    """Convert the argument *t* to a bit-vector.

    Integers are converted with `number_to_bits` and, if *width*
    is given, zero-extended to *width* bits.

        >>> from bitarith.bitvector.core import bitify
        >>> print(bitify(3).vrepr())
        Bits([1, 1])
        >>> print(bitify(3, 4).vrepr())
        Bits([0, 0, 1, 1])
        >>> print(bitify((1, 0)).vrepr())
        Bits([1, 0])

    """
    if isinstance(t, Bits):
        return t
    elif isinstance(t, int) and not isinstance(t, bool):
        bits = number_to_bits(t)
        if width is not None:
            bits = zero_extend(bits, width)
        return bits
    elif isinstance(t, collections.abc.Sequence) and not isinstance(t, str):
        return Bits(t)
    else:
        msg = "cannot convert '{}' to a bit-vector"
        raise TypeError(msg.format(type(t).__name__))
