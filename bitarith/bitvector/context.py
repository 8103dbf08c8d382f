"""Provide context managers to modify the default behaviour."""
import contextlib


class StatefulContext(contextlib.AbstractContextManager):
    """Base class for context managers with history."""

    current_context = None

    def __init__(self, new_context):
        """Initialize the context."""
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context

    def __exit__(self, *args):
        type(self).current_context = self.previous_context


class Cache(StatefulContext):
    """Control the Cache context.

    Control whether or not the results of the bit-vector operators
    are cached. By default, the cache is enabled.

        >>> from bitarith.bitvector.core import Bits
        >>> from bitarith.bitvector.context import Cache
        >>> with Cache(False):
        ...     Bits([1, 0]) ^ Bits([1, 1])
        0b01

    Note that the Cache context cannot be enabled when the
    `Validation` context is disabled.
    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert isinstance(new_context, bool)
        super().__init__(new_context)

    def __enter__(self):
        if self.new_context is True:
            assert Validation.current_context is True
        super().__enter__()


class Validation(StatefulContext):
    """Control the Validation context.

    Control whether or not the bits of a bit-vector and the operands of
    the bit-vector operators are validated. By default, validation
    is enabled.

    Note that when it is disabled, elements other than 0 and 1 are
    stored unchecked and the result of operating with them is unspecified.
    Integer operands are no longer converted (see `Operation`), but
    operands with different lengths are still rejected by the
    bitwise operators.

        >>> from bitarith.bitvector.core import Bits
        >>> from bitarith.bitvector.context import Validation
        >>> Bits([1, 0]) & 1
        0b00
        >>> with Validation(False):
        ...     Bits([1, 2]).vrepr()
        'Bits([1, 2])'
        >>> with Validation(False):
        ...     Bits([1, 0]) & 1
        Traceback (most recent call last):
         ...
        TypeError: object of type 'int' has no len()

    When the Validation context is disabled, the `Cache` context is
    also disabled.
    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert isinstance(new_context, bool)
        super().__init__(new_context)

    def __enter__(self):
        if self.new_context is False:
            self.cache_context = Cache(False)
            self.cache_context.__enter__()
        super().__enter__()

    def __exit__(self, *args):
        if self.new_context is False:
            self.cache_context.__exit__()
        super().__exit__()
