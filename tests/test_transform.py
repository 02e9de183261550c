import pytest

from sigtalk.transform import split, strjoin, striteri, strmapi, strtrim, substr


def _upper(index, ch):
    return ch.upper()


def test_split_sentence():
    text = "42Tokyo is my favorite place"
    assert split(text, " ") == text.split(" ")


def test_split_drops_empty_pieces():
    assert split("^^^1^^2a,^^^^3^^^^--h^^^^", "^") == ["1", "2a,", "3", "--h"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_without_separator_present():
    assert split("whole", ",") == ["whole"]


def test_split_pieces_rejoin_to_stripped_input():
    text = "a,,b,c,"
    assert ",".join(split(text, ",")) == ",".join(p for p in text.split(",") if p)


def test_split_none_and_bad_separator():
    assert split(None, " ") is None
    with pytest.raises(ValueError):
        split("abc", "ab")
    with pytest.raises(TypeError):
        split(123, " ")


def test_substr_start_past_end():
    assert substr("12345", 6, 5) == ""


def test_substr_clamps_length():
    assert substr("12345", 2, 100) == "345"


def test_substr_length_matches_request():
    result = substr("abcdefgh", 2, 3)
    assert len(result) == 3
    assert "abcdefgh".startswith(result, 2)


def test_substr_errors_and_none():
    assert substr(None, 0, 1) is None
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strjoin():
    assert strjoin("abc", "def") == "abcdef"
    assert strjoin("", "x") == "x"


def test_strjoin_none():
    assert strjoin(None, "x") is None
    assert strjoin("x", None) is None


def test_strtrim_examples():
    assert strtrim("+-+Hello+-+", "-+") == "Hello"
    assert strtrim("   \t  \n\n \t\t  \n\n\nHello \t  Please\n Trim me !", " \n\t") == (
        "Hello \t  Please\n Trim me !"
    )
    assert strtrim("     ", " ") == ""
    assert strtrim("abcdba", "acb") == "d"


def test_strtrim_only_first_character_left_is_empty():
    assert strtrim("ax", "x") == ""


def test_strtrim_none_charset_and_none_string():
    assert strtrim("keep me", None) == "keep me"
    assert strtrim(None, "x") is None


def test_strtrim_result_has_no_trim_chars_at_edges():
    result = strtrim("xyhello worldyx", "xy")
    assert result == "hello world"
    assert result[0] not in "xy"
    assert result[-1] not in "xy"


def test_strmapi_upper():
    assert strmapi("hello, world!", _upper) == "HELLO, WORLD!"


def test_strmapi_passes_index():
    seen = []
    strmapi("abc", lambda i, ch: seen.append(i) or ch)
    assert seen == [0, 1, 2]


def test_strmapi_none():
    assert strmapi(None, _upper) is None


def test_striteri_list_in_place():
    chars = list("hello, world!")
    striteri(chars, _upper)
    assert "".join(chars) == "HELLO, WORLD!"


def test_striteri_bytearray_stops_at_nul():
    buf = bytearray(b"ab\0cd")
    striteri(buf, lambda i, b: b - 32)
    assert buf == bytearray(b"AB\0cd")


def test_striteri_none_return_keeps_item():
    chars = list("abc")
    striteri(chars, lambda i, ch: None)
    assert chars == list("abc")