"""Error taxonomy for checked operations.

Every failure raised by :mod:`checkedops.operations` is an `OperationError`
tagged with an `ErrorKind`. Each concrete error also derives from the closest
built-in exception, so callers may catch either the library type or the
familiar Python one.
"""

from enum import Enum

# ============================================================================
#                               Messages
# ============================================================================

NULL_STRING_MESSAGE = "String cannot be null."
NULL_COLLECTION_MESSAGE = "Collection cannot be null."
DISCOUNT_RANGE_MESSAGE = "Discount must be between 0 and 100."
INDEX_OUT_OF_RANGE_MESSAGE = "Index is out of range."
INDEX_OUT_OF_BOUNDS_MESSAGE = "Index has to be within bounds."
NOT_LOGGED_IN_MESSAGE = "User must be logged in to perform this operation."
INTEGER_FORMAT_MESSAGE = "Input is not in the correct format for an integer."
KEY_NOT_FOUND_MESSAGE = "The specified key was not found in the dictionary."
ADDITION_OVERFLOW_MESSAGE = "Arithmetic overflow occurred during addition."
DIVISION_OVERFLOW_MESSAGE = "Arithmetic overflow occurred during division."
DIVIDE_BY_ZERO_MESSAGE = "Division by zero is not allowed."


class ErrorKind(Enum):
    """Enumeration of failure categories."""

    NULL_ARGUMENT = "NullArgument"
    INVALID_ARGUMENT = "InvalidArgument"
    INDEX_OUT_OF_RANGE = "IndexOutOfRange"
    INVALID_OPERATION = "InvalidOperation"
    FORMAT_ERROR = "FormatError"
    KEY_NOT_FOUND = "KeyNotFound"
    OVERFLOW = "Overflow"
    DIVIDE_BY_ZERO = "DivideByZero"


# ============================================================================
#                               Base error
# ============================================================================


class OperationError(Exception):
    """Base class for all checked-operation errors.

    Attributes:
        kind (ErrorKind): The failure category.
        message (str): The exact, user-visible failure message.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def with_param(message: str, param_name: str) -> str:
    """Append the offending parameter name to an argument error message."""
    return f"{message} (Parameter '{param_name}')"


# ============================================================================
#                           Argument errors
# ============================================================================


class NullArgumentError(OperationError, TypeError):
    """Raised when a required argument is ``None``."""

    kind = ErrorKind.NULL_ARGUMENT

    def __init__(self, param_name: str, message: str) -> None:
        super().__init__(with_param(message, param_name))
        self.param_name = param_name


class InvalidArgumentError(OperationError, ValueError):
    """Raised when an argument lies outside its accepted domain."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, param_name: str, message: str) -> None:
        super().__init__(with_param(message, param_name))
        self.param_name = param_name


# ============================================================================
#                           Lookup errors
# ============================================================================


class IndexOutOfRangeError(OperationError, IndexError):
    """Raised when an index falls outside ``[0, len(sequence))``.

    Attributes:
        index (int | None): The rejected index, when known.
        length (int | None): The length of the indexed sequence, when known.
    """

    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(
        self,
        message: str = INDEX_OUT_OF_RANGE_MESSAGE,
        *,
        index: int | None = None,
        length: int | None = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.length = length


class KeyNotFoundError(OperationError, KeyError):
    """Raised when a key is absent from a mapping.

    ``str()`` returns the plain message rather than KeyError's quoted repr.
    """

    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, key: object = None) -> None:
        super().__init__(KEY_NOT_FOUND_MESSAGE)
        self.key = key


# ============================================================================
#                           State and format errors
# ============================================================================


class InvalidOperationError(OperationError, RuntimeError):
    """Raised when the caller's state does not permit the operation."""

    kind = ErrorKind.INVALID_OPERATION

    def __init__(self, message: str = NOT_LOGGED_IN_MESSAGE) -> None:
        super().__init__(message)


class IntegerFormatError(OperationError, ValueError):
    """Raised when text is not a valid integer literal."""

    kind = ErrorKind.FORMAT_ERROR

    def __init__(self, text: object = None) -> None:
        super().__init__(INTEGER_FORMAT_MESSAGE)
        self.text = text


# ============================================================================
#                           Arithmetic errors
# ============================================================================


class ArithmeticOverflowError(OperationError, OverflowError):
    """Raised when an integer result does not fit the configured bounds."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, message: str = ADDITION_OVERFLOW_MESSAGE) -> None:
        super().__init__(message)


class DivideByZeroError(OperationError, ZeroDivisionError):
    """Raised when an integer division has a zero divisor."""

    kind = ErrorKind.DIVIDE_BY_ZERO

    def __init__(self) -> None:
        super().__init__(DIVIDE_BY_ZERO_MESSAGE)

