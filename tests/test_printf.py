import pytest

from minitalk.printf import format_string, printf


def test_plain_text_is_unchanged():
    assert format_string("hello world") == "hello world"


def test_percent_escape():
    assert format_string("100%%") == "100%"


def test_char_from_str_and_int():
    assert format_string("Character: %c\n", "A") == "Character: A\n"
    assert format_string("%c", ord("z")) == "z"


def test_string_and_null():
    assert format_string("String: %s\n", "1236") == "String: 1236\n"
    assert format_string("%s", None) == "(null)"


def test_signed_integers():
    assert format_string("Signed decimal: %d\n", -123) == "Signed decimal: -123\n"
    assert format_string("Signed integer: %i\n", 456) == "Signed integer: 456\n"
    assert format_string("%d", -2147483648) == "-2147483648"


def test_int_wraps_to_32_bits():
    assert format_string("%d", 2147483648) == "-2147483648"


def test_unsigned_integer():
    assert format_string("Unsigned integer: %u\n", 789) == "Unsigned integer: 789\n"
    assert format_string("%u", -1) == str(2**32 - 1)


@pytest.mark.parametrize("value", [1, 11, 255, 1236, 45516, 2**32 - 1])
def test_hex_round_trip(value):
    lower = format_string("%x", value)
    upper = format_string("%X", value)
    assert int(lower, 16) == value
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_hex_zero():
    assert format_string("%x", 0) == "0"
    assert format_string("%X", 0) == "0"


def test_pointer():
    assert format_string("%p", 0) == "(nil)"
    assert format_string("%p", None) == "(nil)"
    result = format_string("%p", 14)
    assert result.startswith("0x")
    assert int(result, 16) == 14


def test_unknown_conversion_is_dropped():
    assert format_string("a%qb") == "ab"


def test_trailing_percent_is_dropped():
    assert format_string("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "12")
    with pytest.raises(TypeError):
        format_string("%s", 12)


def test_surplus_arguments_ignored():
    assert format_string("%d", 5, 6, 7) == "5"


def test_printf_writes_and_counts(capfd):
    count = printf("Value: %d %s%c\n", 42, "ok", "!")
    out, _ = capfd.readouterr()
    assert out == "Value: 42 ok!\n"
    assert count == len(out)


def test_printf_null_string_count(capfd):
    count = printf("%s", None)
    out, _ = capfd.readouterr()
    assert out == "(null)"
    assert count == 6