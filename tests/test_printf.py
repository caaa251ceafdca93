import pytest

from raycub.printf import format_base, format_number, format_pointer, printf, sprintf


@pytest.mark.parametrize("n", [0, 7, 42, -5, -2147483648, 2147483647])
def test_format_number_plain_matches_decimal(n):
    assert format_number(n, False, False) == str(n)


def test_format_number_plus_flag():
    assert format_number(7, False, True) == "+" + str(7)


def test_format_number_space_flag():
    assert format_number(7, True, False) == " " + str(7)


def test_format_number_negative_ignores_flags():
    assert format_number(-7, True, True) == str(-7)


def test_format_number_wraps_to_32_bits():
    assert format_number(2**31, False, False) == str(-(2**31))


@pytest.mark.parametrize("value", [0, 9, 10, 255, 4096, 123456789])
def test_format_base_matches_builtin(value):
    assert format_base(value, "x") == format(value, "x")
    assert format_base(value, "X") == format(value, "X")
    assert format_base(value, "u") == str(value)


def test_format_base_negative_has_sign():
    assert format_base(-255, "x") == "-" + format(255, "x")


def test_format_pointer_null():
    assert format_pointer(0) == "(nil)"
    assert format_pointer(None) == "(nil)"


@pytest.mark.parametrize("value", [1, 15, 16, 0xDEADBEEF])
def test_format_pointer_hex(value):
    assert format_pointer(value) == hex(value)


def test_sprintf_plain_text():
    assert sprintf("hello world") == "hello world"


def test_sprintf_string_and_null():
    assert sprintf("[%s]", "abc") == "[abc]"
    assert sprintf("%s", None) == "(null)"


def test_sprintf_char_from_int_and_str():
    assert sprintf("%c%c", 65, "b") == chr(65) + "b"


def test_sprintf_integers():
    assert sprintf("%d and %i", -12, 34) == str(-12) + " and " + str(34)


def test_sprintf_flags():
    assert sprintf("% d", 5) == " " + str(5)
    assert sprintf("%+i", 5) == "+" + str(5)


def test_sprintf_unsigned_wraps():
    assert sprintf("%u", -1) == str(0xFFFFFFFF)


def test_sprintf_hex_and_hash():
    assert sprintf("%x %X", 255, 255) == format(255, "x") + " " + format(255, "X")
    assert sprintf("%#x", 255) == "0x" + format(255, "x")
    assert sprintf("%#X", 255) == "0X" + format(255, "X")
    assert sprintf("%#x", 0) == str(0)


def test_sprintf_percent_literal():
    assert sprintf("%%") == "%"


def test_sprintf_pointer():
    assert sprintf("%p", 0) == "(nil)"
    assert sprintf("%p", 4096) == hex(4096)


def test_sprintf_unknown_conversion_is_dropped():
    assert sprintf("a%qb") == "ab"


def test_sprintf_trailing_percent_kept():
    assert sprintf("abc%") == "abc%"


def test_sprintf_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_printf_writes_and_returns_length(capsys):
    written = printf("%s=%d", "x", 10)
    captured = capsys.readouterr().out
    assert captured == sprintf("%s=%d", "x", 10)
    assert written == len(captured)