"""Provide the bitwise and arithmetic bit-vector operators."""
import operator

import bidict
from sympy.core import cache

from bitarith.bitvector import context
from bitarith.bitvector import core


class LengthMismatchError(ValueError):
    """Raised when the operands of a bitwise operator differ in length."""

    def __init__(self, left_width, right_width):
        self.left_width = left_width
        self.right_width = right_width
        msg = "bit mismatch (l= {}, r= {})".format(left_width, right_width)
        super().__init__(msg)


def _cacheit(func):
    """Cache functions if `Cache` is enabled."""
    cfunc = cache.cacheit(func)

    def cached_func(*args, **kwargs):
        if context.Cache.current_context:
            return cfunc(*args, **kwargs)
        else:
            return func(*args, **kwargs)

    return cached_func


def _combine(left, right, bit_operator):
    """Apply a bit operator to each pair of bits in the same position."""
    if len(left) != len(right):
        raise LengthMismatchError(len(left), len(right))

    return core.Bits(bit_operator(a, b) for a, b in zip(left, right))


def _full_adder(a, b, carry):
    """Return the sum bit and the output carry of a 1-bit addition."""
    return a ^ b ^ carry, (a & b) | (carry & (a ^ b))


class Operation(object):
    """Represent bit-vector operators.

    A bit-vector operator takes some bit-vector operands and returns
    a new bit-vector; the operands are never modified. Operators are
    evaluated when they are called, that is, calling an `Operation`
    subclass returns a `Bits` object.

    This class is not meant to be instantiated but to provide a base
    class for the different types of bit-vector operators.

    Attributes:
        arity: the number of bit-vector operands.
        is_symmetric: True if the operator is symmetric with respect to
            its operands.
        is_simple: True if the operator is *simple*, that is, all its
            operands are bit-vectors of the same width. Simple operators
            allow *Automatic Constant Conversion*, that is, instead of
            passing all arguments as bit-vectors, it is possible to pass
            arguments as plain integers. They are zero-extended to
            the width of the bit-vector operand.

            ::

                >>> from bitarith.bitvector.core import Bits
                >>> (Bits([1, 0, 0, 0]) | 1).vrepr()
                'Bits([1, 0, 0, 1])'

        unary_symbol: a symbol used when printing (optional)
        infix_symbol: a symbol used when printing (optional)
    """

    is_symmetric = False

    is_simple = False

    @_cacheit
    def __new__(cls, *args, **options):
        val_op = options.pop("validate_operands",
                             context.Validation.current_context)

        if val_op:
            args = cls._parse_args(*args)

        result = cls.eval(*args)

        assert len(result) == cls.output_width(*args)
        return result

    @classmethod
    def _parse_args(cls, *args):
        if len(args) != cls.arity:
            msg = "{} expects {} operand(s), got {}"
            raise TypeError(msg.format(cls.__name__, cls.arity, len(args)))

        # Automatic Constant Conversion
        width = None
        if cls.is_simple:
            for a in args:
                if not isinstance(a, int):
                    width = len(core.bitify(a))
                    break
            else:
                msg = "{} expects at least 1 bit-vector operand"
                raise TypeError(msg.format(cls.__name__))

        return [core.bitify(a, width) for a in args]

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

        >>> from bitarith.bitvector.core import Bits
        >>> from bitarith.bitvector.operation import BvNot
        >>> BvNot(Bits([1, 0, 1, 1]))
        0b0100
        >>> ~Bits([0, 0])
        0b11

    """

    arity = 1
    unary_symbol = "~"

    @classmethod
    def output_width(cls, x):
        return len(x)

    @classmethod
    def eval(cls, x):
        return core.Bits(1 - bit for bit in x)


class BitwiseOperation(Operation):
    """Base class of the binary bitwise operators.

    The operands must have the same number of bits, otherwise
    `LengthMismatchError` is raised. The bit operator given by
    *bit_operator* is applied to each pair of bits in the same position.
    """

    arity = 2
    is_symmetric = True
    is_simple = True

    @classmethod
    def output_width(cls, x, y):
        return len(x)

    @classmethod
    def eval(cls, x, y):
        return _combine(x, y, cls.bit_operator)


class BvAnd(BitwiseOperation):
    """Bitwise AND (logical conjunction) operation.

    It overrides the operator & and provides Automatic Constant Conversion.
    See `Operation` for more information.

        >>> from bitarith.bitvector.core import Bits
        >>> from bitarith.bitvector.operation import BvAnd
        >>> BvAnd(Bits([1, 0, 1, 1]), Bits([1, 0, 0, 1]))
        0b1001
        >>> BvAnd(Bits([1, 0, 1, 1]), 3)
        0b0011
        >>> BvAnd(Bits([1, 1]), Bits([1]))
        Traceback (most recent call last):
         ...
        bitarith.bitvector.operation.LengthMismatchError: bit mismatch (l= 2, r= 1)

    """

    bit_operator = staticmethod(operator.and_)
    infix_symbol = "&"


class BvOr(BitwiseOperation):
    """Bitwise OR (logical disjunction) operation.

    It overrides the operator | and provides Automatic Constant Conversion.
    See `Operation` for more information.

        >>> from bitarith.bitvector.core import Bits
        >>> from bitarith.bitvector.operation import BvOr
        >>> BvOr(Bits([1, 0, 1, 1]), Bits([1, 0, 0, 1]))
        0b1011
        >>> Bits([1, 0, 0, 0]) | 5
        0b1101

    """

    bit_operator = staticmethod(operator.or_)
    infix_symbol = "|"


class BvXor(BitwiseOperation):
    """Bitwise XOR (exclusive-or) operation.

    It overrides the operator ^ and provides Automatic Constant Conversion.
    See `Operation` for more information.

        >>> from bitarith.bitvector.core import Bits
        >>> from bitarith.bitvector.operation import BvXor
        >>> BvXor(Bits([1, 0, 1, 1]), Bits([1, 0, 0, 1]))
        0b0010
        >>> Bits([1, 0, 1]) ^ Bits([1, 0, 1])
        0b000

    """

    bit_operator = staticmethod(operator.xor)
    infix_symbol = "^"


# Arithmetic operators

class BvAdd(Operation):
    """Ripple-carry addition operation.

    It overrides the operator +. The operands are interpreted as
    unsigned integers and they may have different lengths; the shorter
    one is zero-extended. The final carry is always kept as a new
    most significant bit, so the result has one bit more than the
    longest operand (even when the carry is 0).

        >>> from bitarith.bitvector.core import Bits
        >>> from bitarith.bitvector.operation import BvAdd
        >>> BvAdd(Bits([1]), Bits([1]))
        0b10
        >>> BvAdd(Bits([1, 1, 1]), Bits([1, 0, 1, 0, 0]))
        0b011011
        >>> Bits([0, 1]) + 1
        0b010

    Integer operands are converted to their minimal representation.
    """

    arity = 2
    is_symmetric = True
    infix_symbol = "+"

    @classmethod
    def output_width(cls, x, y):
        return max(len(x), len(y)) + 1

    @classmethod
    def eval(cls, x, y):
        width = max(len(x), len(y))
        x = core.zero_extend(x, width)
        y = core.zero_extend(y, width)

        carry = 0
        digits = []
        for a, b in zip(reversed(x), reversed(y)):
            s, carry = _full_adder(a, b, carry)
            digits.append(s)
        digits.append(carry)

        return core.Bits(reversed(digits))


OPERATORS = bidict.bidict({
    "and": BvAnd,
    "or": BvOr,
    "xor": BvXor,
    "not": BvNot,
    "add": BvAdd,
})


def bits_and(left, right):
    """Return the bitwise AND of two bit-vectors with the same length."""
    return BvAnd(left, right)


def bits_or(left, right):
    """Return the bitwise OR of two bit-vectors with the same length."""
    return BvOr(left, right)


def bits_xor(left, right):
    """Return the bitwise XOR of two bit-vectors with the same length."""
    return BvXor(left, right)


def bits_not(bits):
    """Return the bit-vector with every bit flipped."""
    return BvNot(bits)


def bits_add(left, right):
    """Return the sum of two bit-vectors, one bit wider than the longest."""
    return BvAdd(left, right)
