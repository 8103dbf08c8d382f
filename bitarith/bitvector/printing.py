"""Manage the representation of bit-vectors."""
from sympy.printing import repr as sympy_repr
from sympy.printing import str as sympy_str


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BvStrPrinter(sympy_str.StrPrinter):
    """Printing class that handles the `str` method of `Bits`."""

    def _print_Bits(self, bv):
        return bv.bin()


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BvShortPrinter(BvStrPrinter):
    """Printing class that handles the `Bits.srepr` method.

        >>> from bitarith.bitvector.core import Bits
        >>> from bitarith.bitvector.printing import BvShortPrinter
        >>> BvShortPrinter().doprint(Bits([1, 0, 0, 1]))
        '[1, 0, 0, 1]'

    """

    def _print_Bits(self, bv):
        return "[{}]".format(", ".join(str(bit) for bit in bv))


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BvReprPrinter(sympy_repr.ReprPrinter):
    """Printing class that handles the `Bits.vrepr` method."""

    def _print_Bits(self, bv):
        return "{}({})".format(type(bv).__name__, BvShortPrinter().doprint(bv))


def infix_repr(op, operands):
    """Return the infix representation of an operator applied to operands.

        >>> from bitarith.bitvector.core import Bits
        >>> from bitarith.bitvector.operation import BvAnd, BvNot
        >>> infix_repr(BvAnd, [Bits([1, 0]), Bits([1, 1])])
        '[1, 0] & [1, 1]'
        >>> infix_repr(BvNot, [Bits([1, 0])])
        '~[1, 0]'

    """
    args = [BvShortPrinter().doprint(a) for a in operands]

    assert op.arity in [1, 2] and len(args) == op.arity
    if op.arity == 1:
        return "{}{}".format(op.unary_symbol, args[0])
    else:
        return "{} {} {}".format(args[0], op.infix_symbol, args[1])
