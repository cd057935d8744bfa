"""Checked operations.

Ten independent, stateless functions. Each validates its inputs before doing
any work and raises an :class:`~checkedops.errors.OperationError` subclass
with a fixed message when an input falls outside its domain. Nothing is
clamped, truncated or wrapped around silently.

Where two guards could both reject an input, the order is fixed: a ``None``
check runs before a bounds check, and a key-existence check runs before a
format check.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, TypeVar

from checkedops.config import INT32, IntegerBounds
from checkedops.errors import (
    DISCOUNT_RANGE_MESSAGE,
    DIVISION_OVERFLOW_MESSAGE,
    INDEX_OUT_OF_BOUNDS_MESSAGE,
    NULL_COLLECTION_MESSAGE,
    NULL_STRING_MESSAGE,
    ArithmeticOverflowError,
    DivideByZeroError,
    IndexOutOfRangeError,
    IntegerFormatError,
    InvalidArgumentError,
    InvalidOperationError,
    KeyNotFoundError,
    NullArgumentError,
)

if TYPE_CHECKING:
    from decimal import Decimal

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

LOGGED_IN_MESSAGE = "User logged in."

# Optional surrounding whitespace, optional sign, ASCII digits only.
_INTEGER_LITERAL = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def reverse(s: str | None) -> str:
    """Return *s* with its characters in reverse order.

    Raises:
        NullArgumentError: If `s` is ``None``.
    """
    if s is None:
        logger.debug("reverse rejected a null string")
        raise NullArgumentError("s", NULL_STRING_MESSAGE)
    return s[::-1]


def calculate_discount(
    price: int | float | Decimal, discount: int | float | Decimal
) -> int | float | Decimal:
    """Apply a percentage discount to a price.

    Args:
        price: The undiscounted price.
        discount: Percentage to take off, between 0 and 100 inclusive.

    Returns:
        ``price - price * discount / 100``, in the arithmetic of the inputs
        (two `Decimal` values give an exact `Decimal`).

    Raises:
        InvalidArgumentError: If `discount` is below 0 or above 100
            (or is NaN).
    """
    # NaN never equals itself; Decimal NaN must not reach the ordering below
    if discount != discount or not 0 <= discount <= 100:
        logger.debug("calculate_discount rejected discount=%s", discount)
        raise InvalidArgumentError("discount", DISCOUNT_RANGE_MESSAGE)
    return price - price * discount / 100


def get_element(items: Sequence[T], index: int) -> T:
    """Return the element of *items* at *index*.

    Negative indices are rejected rather than counted from the end.

    Raises:
        IndexOutOfRangeError: If `index` is not in ``[0, len(items))``.
    """
    if index < 0 or index >= len(items):
        logger.debug("get_element rejected index=%s (length=%s)", index, len(items))
        raise IndexOutOfRangeError(index=index, length=len(items))
    return items[index]


def perform_secure_operation(logged_in: bool) -> str:
    """Perform an action reserved for logged-in users.

    Returns:
        The confirmation ``"User logged in."``.

    Raises:
        InvalidOperationError: If `logged_in` is false.
    """
    if not logged_in:
        logger.debug("perform_secure_operation refused an anonymous caller")
        raise InvalidOperationError()
    return LOGGED_IN_MESSAGE


def parse_int(text: str | None, *, bounds: IntegerBounds = INT32) -> int:
    """Parse a decimal integer literal.

    A literal is an optional sign followed by ASCII digits, with optional
    surrounding whitespace. Underscore separators and non-ASCII digits are
    not accepted, and neither is a value that does not fit *bounds*.

    Raises:
        IntegerFormatError: If `text` is not a literal that fits *bounds*.
    """
    if not isinstance(text, str) or not _INTEGER_LITERAL.fullmatch(text):
        logger.debug("parse_int rejected %r", text)
        raise IntegerFormatError(text)
    value = int(text)
    if value not in bounds:
        logger.debug("parse_int rejected %r outside int%s", text, bounds.bits)
        raise IntegerFormatError(text)
    return value


def find_value_by_key(mapping: Mapping[K, V], key: K) -> V:
    """Return the value stored under *key*.

    Raises:
        KeyNotFoundError: If `key` is absent from `mapping`.
    """
    if key not in mapping:
        logger.debug("find_value_by_key found no key %r", key)
        raise KeyNotFoundError(key)
    return mapping[key]


def add_numbers(x: int, y: int, *, bounds: IntegerBounds = INT32) -> int:
    """Add two integers without leaving *bounds*.

    The boundary is checked before adding, so the sum is never computed
    outside the representable range.

    Raises:
        ArithmeticOverflowError: If an operand or ``x + y`` lies outside *bounds*.
    """
    if x not in bounds or y not in bounds:
        logger.debug("add_numbers operand outside int%s: %s, %s", bounds.bits, x, y)
        raise ArithmeticOverflowError()
    if (y > 0 and x > bounds.maximum - y) or (y < 0 and x < bounds.minimum - y):
        logger.debug("add_numbers overflow: %s + %s (int%s)", x, y, bounds.bits)
        raise ArithmeticOverflowError()
    return x + y


def divide_numbers(dividend: int, divisor: int, *, bounds: IntegerBounds = INT32) -> int:
    """Divide two integers, truncating the quotient toward zero.

    ``divide_numbers(-7, 2)`` is ``-3``, unlike ``-7 // 2``.

    Raises:
        DivideByZeroError: If `divisor` is zero.
        ArithmeticOverflowError: If an operand lies outside *bounds*, or the
            quotient does (only ``bounds.minimum / -1``).
    """
    if divisor == 0:
        logger.debug("divide_numbers rejected division of %s by zero", dividend)
        raise DivideByZeroError()
    if dividend not in bounds or divisor not in bounds:
        logger.debug(
            "divide_numbers operand outside int%s: %s, %s", bounds.bits, dividend, divisor
        )
        raise ArithmeticOverflowError(DIVISION_OVERFLOW_MESSAGE)
    if dividend == bounds.minimum and divisor == -1:
        logger.debug("divide_numbers overflow: %s / -1 (int%s)", dividend, bounds.bits)
        raise ArithmeticOverflowError(DIVISION_OVERFLOW_MESSAGE)
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def sum_collection_elements(collection: Sequence[int] | None, index: int) -> int:
    """Sum every element of *collection* once *index* is validated.

    The index only gates the call: the whole collection is summed whenever
    it lies within bounds.

    Raises:
        NullArgumentError: If `collection` is ``None``.
        IndexOutOfRangeError: If `index` is not in ``[0, len(collection))``.
    """
    if collection is None:
        logger.debug("sum_collection_elements rejected a null collection")
        raise NullArgumentError("collection", NULL_COLLECTION_MESSAGE)
    if index < 0 or index >= len(collection):
        logger.debug(
            "sum_collection_elements rejected index=%s (length=%s)",
            index,
            len(collection),
        )
        raise IndexOutOfRangeError(
            INDEX_OUT_OF_BOUNDS_MESSAGE, index=index, length=len(collection)
        )
    return sum(collection)


def get_element_as_number(
    mapping: Mapping[K, str], key: K, *, bounds: IntegerBounds = INT32
) -> int:
    """Look up *key* and parse the stored text as an integer.

    Raises:
        KeyNotFoundError: If `key` is absent from `mapping`.
        IntegerFormatError: If the stored value is not an integer literal.
    """
    return parse_int(find_value_by_key(mapping, key), bounds=bounds)
