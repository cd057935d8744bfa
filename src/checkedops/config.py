"""Configuration utilities for CHECKEDOPS.

This module centralizes the integer-width setting shared by the integer
operations and the helpers that read it from the environment.
"""

import os
from dataclasses import dataclass

INT_BITS_ENV_VAR = "CHECKEDOPS_INT_BITS"  # pragma: no mutate
DEFAULT_INT_BITS = 32


@dataclass(frozen=True, slots=True)
class IntegerBounds:
    """Inclusive range of a signed two's-complement integer type."""

    bits: int
    minimum: int
    maximum: int

    @classmethod
    def signed(cls, bits: int) -> "IntegerBounds":
        """Build the bounds of a signed integer that is *bits* wide."""
        return cls(bits=bits, minimum=-(2 ** (bits - 1)), maximum=2 ** (bits - 1) - 1)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.minimum <= value <= self.maximum


INT32 = IntegerBounds.signed(32)
INT64 = IntegerBounds.signed(64)

SUPPORTED_BOUNDS = {32: INT32, 64: INT64}


class UnsupportedIntegerWidthError(Exception):
    """Raised when CHECKEDOPS_INT_BITS names an unsupported integer width."""

    def __init__(self, value: str) -> None:
        supported = ", ".join(str(bits) for bits in SUPPORTED_BOUNDS)
        super().__init__(
            f"Unsupported integer width {value!r}; expected one of: {supported}."
        )
        self.value = value


def bounds_for(bits: int | str) -> IntegerBounds:
    """Return the bounds for a supported integer width.

    Args:
        bits: Width in bits, as an int or its decimal string.

    Raises:
        UnsupportedIntegerWidthError: If the width is not 32 or 64.
    """
    try:
        return SUPPORTED_BOUNDS[int(bits)]
    except (KeyError, ValueError) as e:
        raise UnsupportedIntegerWidthError(str(bits)) from e


def get_integer_bounds() -> IntegerBounds:
    """Get the integer bounds selected by the environment.

    Returns:
        The bounds named by `CHECKEDOPS_INT_BITS`, or `INT32` when unset.

    Raises:
        UnsupportedIntegerWidthError: If `CHECKEDOPS_INT_BITS` is not 32 or 64.
    """
    if not (value := os.environ.get(INT_BITS_ENV_VAR, "").strip()):
        return SUPPORTED_BOUNDS[DEFAULT_INT_BITS]
    return bounds_for(value)
