import io

import pytest

from xvutils.printf import fprintf, sprintf


@pytest.mark.parametrize("value", [0, 7, -123, 2147483647])
def test_decimal_matches_str(value):
    assert sprintf("%d", value) == str(value)


def test_hex_is_uppercase():
    assert sprintf("%x", 0xBEEF) == format(0xBEEF, "X")


def test_pointer_is_zero_padded_64_bit():
    assert sprintf("%p", 0x1234) == "0x" + format(0x1234, "016X")


def test_null_string():
    assert sprintf("[%s]", None) == "[(null)]"


def test_percent_literal():
    assert sprintf("100%%") == "100%"


def test_unknown_sequence_is_echoed():
    assert sprintf("%q") == "%q"


def test_unknown_sequence_does_not_consume_argument():
    assert sprintf("%c%d", 5) == "%c" + sprintf("%d", 5)


def test_long_modifier_unknown_conversion():
    assert sprintf("%lz") == "%lz"


def test_long_values_are_narrowed_to_32_bits():
    assert sprintf("%ld", 2**32 + 7) == sprintf("%d", 7)
    assert sprintf("%llu", 2**32 + 9) == sprintf("%u", 9)


def test_unsigned_of_negative():
    assert sprintf("%u", -1) == str(2**32 - 1)
    assert sprintf("%x", -1) == "F" * 8


def test_int_min_wraps():
    assert sprintf("%d", 2**31) == str(-(2**31))


def test_trailing_percent_is_dropped():
    assert sprintf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_fprintf_writes_to_stream():
    buf = io.StringIO()
    fprintf(buf, "%s=%d\n", "x", 3)
    assert buf.getvalue() == sprintf("%s=%d\n", "x", 3)
    assert buf.getvalue().startswith("x=")