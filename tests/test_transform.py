import pytest

from ftkit.transform import split, striteri, strjoin, strmapi, strtrim, substr


def test_substr_clamps_to_end():
    assert substr("abcde", 2, 5) == "cde"


def test_substr_start_past_end_is_empty():
    assert substr("abcde", 5, 3) == ""
    assert substr("", 0, 3) == ""


def test_substr_is_prefix_of_tail():
    text = "Hello, World!"
    for start in range(len(text)):
        for length in range(len(text) + 2):
            piece = substr(text, start, length)
            assert len(piece) <= length
            assert text[start:].startswith(piece)


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("Hello, ", "World!") == "Hello, World!"
    assert strjoin("", "") == ""


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "a")


def test_strtrim_spaces():
    assert strtrim(" Hello World ", " ") == "Hello World"


def test_strtrim_all_characters_in_set():
    assert strtrim("xxyy", "xy") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_keeps_inner_characters():
    result = strtrim("ab-cd-ba", "ab")
    assert result == "-cd-"
    assert result in "ab-cd-ba"


def test_strmapi_uses_index():
    result = strmapi("abc", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbC"


def test_strmapi_identity_round_trip():
    text = "Hello, World!"
    assert strmapi(text, lambda i, ch: ch) == text


def test_strmapi_stops_at_nul():
    assert strmapi("abcd", lambda i, ch: "\0" if i == 2 else ch) == "ab"


def test_striteri_modifies_in_place():
    chars = list("hello")
    assert striteri(chars, lambda i, ch: ch.upper()) is None
    assert "".join(chars) == "HELLO"


def test_striteri_passes_indices():
    seen = []
    chars = list("abc")
    striteri(chars, lambda i, ch: seen.append(i) or ch)
    assert seen == [0, 1, 2]
    assert chars == ["a", "b", "c"]


def test_split_source_example():
    assert split("111.222.333.444...555", ".") == ["111", "222", "333", "444", "555"]


def test_split_only_separators():
    assert split("....", ".") == []
    assert split("", ".") == []


def test_split_accepts_code():
    assert split("a b", ord(" ")) == ["a", "b"]


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(" ".join(words), " ") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")