"""Top-level script environment.

Without arguments, evaluate some sample bit-vector operations and print
the results. Otherwise, evaluate the given operator on the given
bit-vectors (written as strings of 0's and 1's)::

    python -m bitarith
    python -m bitarith xor 1011 1001
    python -m bitarith -f results.txt add 111 10100

"""
import argparse
import contextlib
import sys

from bitarith.bitvector.core import Bits, bits_to_number, number_to_bits
from bitarith.bitvector.operation import (
    OPERATORS, BvAdd, BvAnd, BvNot, BvOr, BvXor, LengthMismatchError
)
from bitarith.bitvector.printing import infix_repr


SAMPLES = [
    (BvAnd, [[1, 0, 1, 1], [1, 0, 0, 1]]),
    (BvOr, [[1, 0, 1, 1], [1, 0, 0, 1]]),
    (BvXor, [[1, 0, 1, 1], [1, 0, 0, 1]]),
    (BvNot, [[1, 0, 1, 1]]),
    (BvAdd, [[1, 1, 1], [1, 0, 1, 0, 0]]),
]


@contextlib.contextmanager
def _open(filename):
    """Return a file or the standard output depending on filename."""
    if filename and filename != '-':
        fh = open(filename, 'a')
    else:
        fh = sys.stdout

    try:
        yield fh
    finally:
        if fh is not sys.stdout:
            fh.close()


def smart_print(msg, filename=None):
    with _open(filename) as fh:
        print(msg, file=fh, flush=True)


def parse_bits(string):
    """Parse a bit-vector written as a string of 0's and 1's."""
    return Bits(int(c) for c in string)


def evaluate(op, operands, filename=None):
    """Evaluate the operator *op* and print the operation and its result."""
    name = OPERATORS.inverse[op]
    operands = [Bits(o) for o in operands]
    result = op(*operands)

    smart_print("{}: {}".format(name.upper(), infix_repr(op, operands)), filename)
    smart_print(result.srepr(), filename)


def demo(filename=None):
    """Print the results of the sample operations."""
    sample = Bits([1, 1, 0, 0])
    smart_print("Decimal: {}".format(sample.srepr()), filename)
    smart_print(bits_to_number(sample), filename)

    smart_print("Binary: 174", filename)
    smart_print(number_to_bits(174).srepr(), filename)

    for op, operands in SAMPLES:
        evaluate(op, operands, filename)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="bitarith")
    parser.add_argument("operator", nargs="?", choices=list(OPERATORS.keys()))
    parser.add_argument("operands", nargs="*", type=parse_bits)
    parser.add_argument("-f", "--filename")

    args = parser.parse_args(argv)
    operands = args.operands or []

    if args.operator is None:
        if operands:
            parser.error("operands given without an operator")
        demo(args.filename)
        return

    op = OPERATORS[args.operator]
    arity = op.arity
    if len(operands) != arity:
        msg = "{} expects {} operand(s), got {}"
        parser.error(msg.format(args.operator, arity, len(operands)))

    try:
        evaluate(op, operands, args.filename)
    except LengthMismatchError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
