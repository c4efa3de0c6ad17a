import pytest

from cstrkit.scan import ScanSpec, sscanf


def test_decimal_and_string():
    assert sscanf("42 hello", "%d %s") == [42, "hello"]


def test_signed_decimals():
    assert sscanf("-5000 +644", "%d %d") == [-5000, 644]


def test_decimal_width_splits_field():
    assert sscanf("12345", "%3d%d") == [123, 45]


def test_sign_counts_toward_width():
    assert sscanf("-12", "%2d%d") == [-1, 2]


def test_suppressed_conversion_is_skipped():
    assert sscanf("10 20", "%*d %d") == [20]


def test_short_overflow_stops_field():
    assert sscanf("99999", "%hd%d") == [9999, 9]


def test_long_decimal():
    assert sscanf("14665465467", "%ld") == [14665465467]


def test_decimal_needs_digits():
    assert sscanf("abc", "%d") == []


@pytest.mark.parametrize("number", [0x1A, 255, 123456])
def test_integer_hex_round_trip(number):
    assert sscanf(hex(number), "%i") == [number]


@pytest.mark.parametrize("number", [8, 511, 14140])
def test_integer_octal_round_trip(number):
    assert sscanf("0" + format(number, "o"), "%i") == [number]


def test_integer_negative_hex():
    assert sscanf("-0x10", "%i") == [-int("10", 16)]


def test_integer_lone_zero_fails():
    assert sscanf("0", "%i") == []


def test_integer_wraps_to_int():
    assert sscanf(str(2**31), "%i") == [-(2**31)]


def test_double_values():
    assert sscanf("3.5 2.25", "%lf %lf") == [3.5, 2.25]


def test_float_exponent():
    assert sscanf("1.5e2", "%lf") == [150.0]


def test_single_precision_exact_value():
    assert sscanf("0.5", "%f") == [0.5]


def test_float_requires_digits():
    assert sscanf("x1.0", "%f") == []


def test_unsigned_short_wraps():
    assert sscanf("65537", "%hu") == [1]


@pytest.mark.parametrize("number", [0, 14140, 4294967295])
def test_unsigned_long_round_trip(number):
    assert sscanf(str(number), "%lu") == [number]


@pytest.mark.parametrize("number", [0, 511, 57175])
def test_octal_round_trip(number):
    assert sscanf(format(number, "o"), "%o") == [number]


@pytest.mark.parametrize("number", [1, 858158158, 2147483647])
def test_hex_round_trip(number):
    text = format(number, "x")
    assert sscanf(text, "%x") == [number]
    assert sscanf("0x" + text, "%X") == [number]


def test_pointer():
    assert sscanf(hex(0xDEADBEEF), "%p") == [0xDEADBEEF]


def test_pointer_needs_prefix():
    assert sscanf("123", "%p") == []


def test_plain_char_keeps_whitespace():
    assert sscanf(" x", "%c") == [" "]


def test_char_with_width():
    assert sscanf("abcdef", "%3c%s") == ["abc", "def"]


def test_string_width():
    assert sscanf("abcdef", "%3s%s") == ["abc", "def"]


def test_percent_literal():
    assert sscanf("5% 6", "%d%% %d") == [5, 6]


def test_percent_mismatch_stops():
    assert sscanf("5 6", "%d%%%d") == [5]


def test_literal_mismatch_stops():
    assert sscanf("a1", "b%d") == []


def test_literal_match_continues():
    assert sscanf("x=7", "x=%d") == [7]


def test_unknown_conversion_stops():
    assert sscanf("1 2", "%d %q %d") == [1]


def test_empty_input_raises():
    with pytest.raises(EOFError):
        sscanf("", "%d")


def test_nul_terminates_input():
    with pytest.raises(EOFError):
        sscanf("\0abc", "%s")


def test_spec_defaults_drive_signed_width():
    assert ScanSpec().signed_bits == 32
    assert ScanSpec(length="h").signed_bits == 16
    assert ScanSpec(length="l").signed_bits == 64