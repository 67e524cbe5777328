"""Provide context managers to modify the default behaviour."""
import contextlib
import logging

log = logging.getLogger(__name__)


class StatefulContext(contextlib.AbstractContextManager):
    """Base class for context managers with history."""

    current_context = None

    def __init__(self, new_context):
        """Initialize the context."""
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context
        log.debug(f"{type(self).__name__} context set to {self.new_context!r}.")

    def __exit__(self, *args):
        type(self).current_context = self.previous_context
        log.debug(f"{type(self).__name__} context restored to {self.previous_context!r}.")


class Cache(StatefulContext):
    """Control the Cache context.

    Control whether or not the results of bit-vector operations are
    cached. By default, the cache is enabled.

        >>> from bitmath.core import Bits
        >>> from bitmath.context import Cache
        >>> with Cache(False):
        ...     Bits.from_unsigned(1, 8) + Bits.from_unsigned(1, 8)
        0x02

    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert isinstance(new_context, bool)
        super().__init__(new_context)


class Validation(StatefulContext):
    """Control the Validation context.

    Control whether or not arguments of bit-vector operators are validated.
    By default, validation of arguments is enabled.

    Note that when it is disabled, Automatic Constant Conversion is no longer
    available (see `Operation`). The widths of the operands are checked
    in any case.

        >>> from bitmath.core import Bits
        >>> from bitmath.context import Validation
        >>> Bits.from_unsigned(1, 8) + 1
        0x02
        >>> with Validation(False):
        ...     Bits.from_unsigned(1, 5) + 2
        Traceback (most recent call last):
         ...
        TypeError: BvAdd expects bit-vector operands, not int

    Note:
        Disabling `Validation` speeds up computations with bit-vectors.
    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert isinstance(new_context, bool)
        super().__init__(new_context)
