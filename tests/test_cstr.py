import pytest

from cstrkit.cstr import (
    strchr,
    strcpy,
    strcspn,
    strlen,
    strncat,
    strncmp,
    strncpy,
    strpbrk,
    strrchr,
    strstr,
    to_lower,
    to_upper,
    trim,
)


@pytest.mark.parametrize("text", ["", "a", "hello world", "tab\tand\nnewline"])
def test_strlen_matches_len(text):
    assert strlen(text) == len(text)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == len("abc")


@pytest.mark.parametrize("char", ["l", "h", "d", "o"])
def test_strchr_finds_first(char):
    assert strchr("hello world", char) == "hello world".find(char)


def test_strchr_accepts_code_point():
    assert strchr("hello", ord("e")) == "hello".find("e")


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") is None
    assert strchr("ab\0cd", "c") is None


def test_strchr_rejects_long_argument():
    with pytest.raises(ValueError):
        strchr("hello", "he")


@pytest.mark.parametrize("char", ["l", "o", "h"])
def test_strrchr_finds_last(char):
    assert strrchr("hello world", char) == "hello world".rfind(char)


def test_strrchr_missing():
    assert strrchr("hello", "q") is None


def test_strcpy_copies_up_to_nul():
    assert strcpy("hello") == "hello"
    assert strcpy("he\0llo") == "he"


def test_strncpy_overwrites_prefix():
    assert strncpy("hello", "XY", 5) == "XYllo"


def test_strncpy_limits_count():
    result = strncpy("hello", "WORLD", 2)
    assert result == "WO" + "hello"[2:]
    assert len(result) == len("hello")


def test_strncat_appends_limited():
    assert strncat("ab", "cde", 2) == "ab" + "cde"[:2]
    assert strncat("ab", "cde", 10) == "ab" + "cde"


def test_strncmp_signs():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("ab", "a", 2) > 0


def test_strncmp_past_end_counts_as_nul():
    assert strncmp("a", "a", 5) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_returns_code_difference():
    assert strncmp("a", "c", 1) == ord("a") - ord("c")


def test_strcspn():
    assert strcspn("hello world", "ow") == "hello world".find("o")
    assert strcspn("hello", "xyz") == len("hello")
    assert strcspn("hello", "") == len("hello")
    assert strcspn("", "abc") == 0


def test_strpbrk():
    assert strpbrk("hello world", "wr") == "hello world".find("w")
    assert strpbrk("hello", "xyz") is None
    assert strpbrk("hello", "") is None


def test_strstr():
    assert strstr("hello world", "lo w") == "hello world".find("lo w")
    assert strstr("hello", "") == 0
    assert strstr("hello", "world") is None
    assert strstr("hi", "high") is None
    assert strstr("aaab", "aab") == "aaab".find("aab")


def test_case_conversion_ascii():
    text = "Hello, World 123!"
    assert to_upper(text) == text.upper()
    assert to_lower(text) == text.lower()


def test_case_conversion_leaves_non_ascii():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_case_conversion_none():
    assert to_upper(None) is None
    assert to_lower(None) is None


def test_case_round_trip():
    text = "mixed Case text"
    assert to_lower(to_upper(text)) == text.lower()


def test_trim():
    assert trim("xxhixx", "x") == "xxhixx".strip("x")
    assert trim("  a b  ", " ") == "a b"
    assert trim("abc", "") == "abc"
    assert trim("xxxx", "x") == ""


def test_trim_none():
    assert trim(None, "x") is None
    assert trim("abc", None) is None