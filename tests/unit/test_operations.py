"""Unit tests for checkedops.operations."""

import re
from decimal import Decimal

import pytest

from checkedops import operations
from checkedops.config import INT32, INT64
from checkedops.errors import (
    ArithmeticOverflowError,
    DivideByZeroError,
    ErrorKind,
    IndexOutOfRangeError,
    IntegerFormatError,
    InvalidArgumentError,
    InvalidOperationError,
    KeyNotFoundError,
    NullArgumentError,
)

# pylint: disable=magic-value-comparison

NUMBERS = [1, 3, 7, -5, 20]
INT_MAP = {"one": 1, "two": 2, "three": 3}
STR_MAP = {"one": "1", "two": "2", "three": "3"}
BAD_STR_MAP = {"one": "1z", "two": "2a", "three": "b"}

INTEGER_FORMAT = "Input is not in the correct format for an integer."
KEY_NOT_FOUND = "The specified key was not found in the dictionary."


class TestReverse:
    """Tests for reverse."""

    @staticmethod
    def test_reverses_string():
        """A string comes back with its characters in reverse order."""
        assert operations.reverse("Hello!") == "!olleH"

    @staticmethod
    def test_empty_string():
        """The empty string is valid input and reverses to itself."""
        assert operations.reverse("") == ""

    @staticmethod
    def test_none_raises_null_argument():
        """None is rejected with the exact message naming parameter 's'."""
        with pytest.raises(NullArgumentError) as exc_info:
            operations.reverse(None)
        assert str(exc_info.value) == "String cannot be null. (Parameter 's')"
        assert exc_info.value.kind is ErrorKind.NULL_ARGUMENT
        assert exc_info.value.param_name == "s"


class TestCalculateDiscount:
    """Tests for calculate_discount."""

    @staticmethod
    def test_applies_discount():
        """Ten percent off 200 is 180."""
        assert operations.calculate_discount(200, 10) == 180

    @staticmethod
    def test_decimal_inputs_stay_exact():
        """Decimal inputs produce an exact Decimal result."""
        result = operations.calculate_discount(Decimal("19.99"), Decimal("15"))
        assert isinstance(result, Decimal)
        assert result == Decimal("16.9915")

    @staticmethod
    @pytest.mark.parametrize("discount, expected", [(0, 100), (100, 0)])
    def test_bounds_are_inclusive(discount, expected):
        """0 and 100 are both accepted."""
        assert operations.calculate_discount(100, discount) == expected

    @staticmethod
    @pytest.mark.parametrize(
        "price, discount",
        [
            (200, -10),
            (Decimal("100.0"), Decimal("110.0")),
            (50, float("nan")),
            (Decimal("100"), Decimal("NaN")),
        ],
        ids=["negative", "over-100", "nan", "decimal-nan"],
    )
    def test_out_of_range_discount_raises(price, discount):
        """Discounts outside [0, 100] are rejected with the exact message."""
        with pytest.raises(
            InvalidArgumentError,
            match=re.escape(
                "Discount must be between 0 and 100. (Parameter 'discount')"
            ),
        ) as exc_info:
            operations.calculate_discount(price, discount)
        assert exc_info.value.param_name == "discount"


class TestGetElement:
    """Tests for get_element."""

    @staticmethod
    def test_returns_element():
        """The element at a valid index is returned."""
        assert operations.get_element(NUMBERS, 2) == 7

    @staticmethod
    @pytest.mark.parametrize("index", [-2, -1, 5, 10])
    def test_out_of_range_raises(index):
        """Negative indices and indices at or past the length are rejected."""
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            operations.get_element(NUMBERS, index)
        assert str(exc_info.value) == "Index is out of range."
        assert exc_info.value.index == index
        assert exc_info.value.length == len(NUMBERS)

    @staticmethod
    def test_empty_sequence_raises():
        """Index 0 of an empty sequence is out of range."""
        with pytest.raises(IndexOutOfRangeError):
            operations.get_element([], 0)


class TestPerformSecureOperation:
    """Tests for perform_secure_operation."""

    @staticmethod
    def test_logged_in():
        """A logged-in caller gets the confirmation message."""
        assert operations.perform_secure_operation(True) == "User logged in."

    @staticmethod
    def test_not_logged_in_raises():
        """An anonymous caller is refused with the exact message."""
        with pytest.raises(InvalidOperationError) as exc_info:
            operations.perform_secure_operation(False)
        assert (
            str(exc_info.value) == "User must be logged in to perform this operation."
        )


class TestParseInt:
    """Tests for parse_int."""

    @staticmethod
    @pytest.mark.parametrize(
        "text, expected",
        [("42", 42), ("-42", -42), ("+7", 7), ("  12 ", 12), ("007", 7)],
    )
    def test_parses_literals(text, expected):
        """Signed and whitespace-padded decimal literals are accepted."""
        assert operations.parse_int(text) == expected

    @staticmethod
    @pytest.mark.parametrize(
        "text",
        ["42a", "", " ", "4.2", "1_000", "٤٢", "0x2A", "--1", None],
        ids=[
            "trailing-letter",
            "empty",
            "blank",
            "decimal-point",
            "underscore",
            "arabic-indic-digits",
            "hex",
            "double-sign",
            "none",
        ],
    )
    def test_invalid_literal_raises(text):
        """Anything but an optionally signed run of ASCII digits is rejected."""
        with pytest.raises(IntegerFormatError) as exc_info:
            operations.parse_int(text)
        assert str(exc_info.value) == INTEGER_FORMAT
        assert exc_info.value.text == text

    @staticmethod
    def test_range_follows_bounds():
        """A literal beyond int32 is a format error unless int64 is selected."""
        text = str(INT32.maximum + 1)
        with pytest.raises(IntegerFormatError):
            operations.parse_int(text)
        assert operations.parse_int(text, bounds=INT64) == INT32.maximum + 1

    @staticmethod
    def test_extremes_accepted():
        """The int32 extremes themselves parse."""
        assert operations.parse_int(str(INT32.minimum)) == INT32.minimum
        assert operations.parse_int(str(INT32.maximum)) == INT32.maximum


class TestFindValueByKey:
    """Tests for find_value_by_key."""

    @staticmethod
    def test_returns_value():
        """A present key returns its value."""
        assert operations.find_value_by_key(INT_MAP, "two") == 2

    @staticmethod
    def test_missing_key_raises():
        """An absent key is rejected with the exact message."""
        with pytest.raises(KeyNotFoundError) as exc_info:
            operations.find_value_by_key(INT_MAP, "four")
        assert str(exc_info.value) == KEY_NOT_FOUND
        assert exc_info.value.key == "four"


class TestAddNumbers:
    """Tests for add_numbers."""

    @staticmethod
    def test_adds():
        """700 + 800 is 1500."""
        assert operations.add_numbers(700, 800) == 1500

    @staticmethod
    def test_reaching_the_bounds_is_allowed():
        """Sums landing exactly on a bound do not overflow."""
        assert operations.add_numbers(INT32.maximum - 1, 1) == INT32.maximum
        assert operations.add_numbers(INT32.minimum + 1, -1) == INT32.minimum
        assert operations.add_numbers(INT32.maximum, INT32.minimum) == -1

    @staticmethod
    @pytest.mark.parametrize(
        "x, y",
        [
            (INT32.maximum, 1),
            (INT32.minimum, -1),
            (1, INT32.maximum),
            (INT32.maximum + 10, -20),
        ],
        ids=["positive", "negative", "positive-swapped", "operand-out-of-range"],
    )
    def test_overflow_raises(x, y):
        """Sums or operands beyond int32 are rejected with the exact message."""
        with pytest.raises(
            ArithmeticOverflowError,
            match=re.escape("Arithmetic overflow occurred during addition."),
        ):
            operations.add_numbers(x, y)

    @staticmethod
    def test_int64_bounds():
        """With int64 bounds the int32 overflow case is an ordinary sum."""
        assert operations.add_numbers(INT32.maximum, 1, bounds=INT64) == 2**31
        with pytest.raises(ArithmeticOverflowError):
            operations.add_numbers(INT64.maximum, 1, bounds=INT64)


class TestDivideNumbers:
    """Tests for divide_numbers."""

    @staticmethod
    @pytest.mark.parametrize(
        "dividend, divisor, expected",
        [(14, 4, 3), (-14, 4, -3), (14, -4, -3), (-14, -4, 3), (0, 5, 0), (-7, 2, -3)],
    )
    def test_truncates_toward_zero(dividend, divisor, expected):
        """Quotients are truncated toward zero, not floored."""
        assert operations.divide_numbers(dividend, divisor) == expected

    @staticmethod
    def test_divide_by_zero_raises():
        """A zero divisor is rejected with the exact message."""
        with pytest.raises(DivideByZeroError) as exc_info:
            operations.divide_numbers(14, 0)
        assert str(exc_info.value) == "Division by zero is not allowed."

    @staticmethod
    def test_zero_check_precedes_range_check():
        """A zero divisor is reported even when the dividend is out of range."""
        with pytest.raises(DivideByZeroError):
            operations.divide_numbers(INT64.maximum, 0)

    @staticmethod
    def test_min_by_minus_one_overflows():
        """int32 minimum divided by -1 does not fit and is rejected."""
        with pytest.raises(
            ArithmeticOverflowError,
            match=re.escape("Arithmetic overflow occurred during division."),
        ):
            operations.divide_numbers(INT32.minimum, -1)


class TestSumCollectionElements:
    """Tests for sum_collection_elements."""

    @staticmethod
    def test_sums_whole_collection():
        """An in-range index gates the call; the whole collection is summed."""
        assert operations.sum_collection_elements([1, 2, 3, 4, 5], 2) == 15

    @staticmethod
    def test_none_raises_null_argument():
        """A None collection is rejected before the index is checked."""
        with pytest.raises(NullArgumentError) as exc_info:
            operations.sum_collection_elements(None, 2)
        assert (
            str(exc_info.value)
            == "Collection cannot be null. (Parameter 'collection')"
        )

    @staticmethod
    def test_null_check_precedes_bounds_check():
        """A None collection wins over an out-of-range index."""
        with pytest.raises(NullArgumentError):
            operations.sum_collection_elements(None, -10)

    @staticmethod
    @pytest.mark.parametrize("index", [-10, -1, 5, 10])
    def test_out_of_range_index_raises(index):
        """Indices outside [0, len) are rejected with the exact message."""
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            operations.sum_collection_elements([1, 2, 3, 4, 5], index)
        assert str(exc_info.value) == "Index has to be within bounds."


class TestGetElementAsNumber:
    """Tests for get_element_as_number."""

    @staticmethod
    def test_parses_value():
        """The value under a present key is parsed as an integer."""
        assert operations.get_element_as_number(STR_MAP, "two") == 2

    @staticmethod
    def test_missing_key_raises():
        """An absent key is rejected with the dictionary message."""
        with pytest.raises(KeyNotFoundError, match=re.escape(KEY_NOT_FOUND)):
            operations.get_element_as_number(STR_MAP, "invalid")

    @staticmethod
    def test_invalid_value_raises():
        """A value that is not an integer literal is a format error."""
        with pytest.raises(IntegerFormatError, match=re.escape(INTEGER_FORMAT)):
            operations.get_element_as_number(BAD_STR_MAP, "two")

    @staticmethod
    def test_key_check_precedes_format_check():
        """An absent key is reported even when every value is malformed."""
        with pytest.raises(KeyNotFoundError):
            operations.get_element_as_number(BAD_STR_MAP, "four")
