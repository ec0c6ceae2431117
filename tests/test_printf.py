import pytest

from pfckit.printf import string_printf


def test_plain_text_and_percent():
    assert string_printf("100%% sure") == "100% sure"
    assert string_printf("no args") == "no args"


def test_integer():
    assert string_printf("value=%d", 42) == "value=42"
    assert string_printf("%i", -17) == "-17"


def test_width_space_padding():
    result = string_printf("%6d", 42)
    assert len(result) == 6
    assert result.lstrip(" ") == "42"


def test_width_zero_padding():
    result = string_printf("%06d", 42)
    assert len(result) == 6
    assert set(result[:-2]) == {"0"}
    assert result.endswith("42")


def test_force_sign():
    assert string_printf("%+d", 7) == "+7"
    assert string_printf("%+d", -7) == "-7"
    assert string_printf("%+d", 0) == "0"


def test_string_padding():
    result = string_printf("[%8s]", "abc")
    assert result.startswith("[") and result.endswith("abc]")
    assert len(result) == 10
    assert string_printf("%2s", "abcdef") == "abcdef"


def test_hex_cases():
    lower = string_printf("%x", 0xBEEF)
    upper = string_printf("%X", 0xBEEF)
    assert int(lower, 16) == 0xBEEF
    assert lower.islower()
    assert upper == lower.upper()


def test_unsigned_negative_wraps_to_64_bits():
    assert string_printf("%u", -1) == "18446744073709551615"
    assert int(string_printf("%x", -1), 16) == (1 << 64) - 1


def test_int_wraps_to_32_bits():
    assert string_printf("%d", 0xFFFFFFFF) == "-1"


def test_char():
    assert string_printf("%c%c", 65, "b") == "Ab"


def test_unknown_conversion_copied():
    assert string_printf("%q") == "q"


def test_trailing_percent_ignored():
    assert string_printf("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        string_printf("%d %d", 1)