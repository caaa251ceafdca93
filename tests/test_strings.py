import pytest

from raycub.strings import (
    bounded_concat,
    bounded_copy,
    count_words,
    iter_indexed,
    join,
    map_indexed,
    split,
    strchr,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, sep",
    [("  hello  world ", " "), ("a,,b,c,", ","), ("", " "), (",,,", ","), ("one", " ")],
)
def test_split_drops_empty_pieces_and_matches_count(text, sep):
    words = split(text, sep)
    assert all(words)
    assert all(sep not in word for word in words)
    assert len(words) == count_words(text, sep)
    assert "".join(words) == text.replace(sep, "")


def test_split_keeps_order():
    assert split("255,128,0", ",") == ["255", "128", "0"]


def test_split_on_nul_returns_whole_text():
    assert split("abc def", "\0") == ["abc def"]
    assert split("", "\0") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_and_strrchr_find_ends():
    text = "a.b.c"
    assert strchr(text, ".") == text.index(".")
    assert strrchr(text, ".") == text.rindex(".")
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None


def test_nul_search_finds_terminator():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strnstr_respects_length():
    big = "lorem ipsum dolor"
    pos = big.index("ipsum")
    assert strnstr(big, "ipsum", len(big)) == pos
    assert strnstr(big, "ipsum", pos + len("ipsum")) == pos
    assert strnstr(big, "ipsum", pos + len("ipsum") - 1) is None
    assert strnstr(big, "", 0) == 0
    assert strnstr(big, "zzz", len(big)) is None


def test_strncmp_signs():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_is_antisymmetric():
    assert strncmp("NO ./a", "SO ./b", 2) == -strncmp("SO ./b", "NO ./a", 2)


def test_bounded_copy_truncates():
    assert bounded_copy("hello", 3) == ("he", len("hello"))
    assert bounded_copy("hello", 100) == ("hello", len("hello"))
    assert bounded_copy("hello", 0) == ("", len("hello"))


def test_bounded_concat_room_and_overflow():
    assert bounded_concat("ab", "cd", 10) == ("abcd", len("abcd"))
    assert bounded_concat("ab", "cd", 3) == ("ab", len("abcd"))
    result, total = bounded_concat("ab", "cd", 1)
    assert result == "ab"
    assert total == len("cd") + 1


def test_strtrim():
    assert strtrim("  ./path/tex.png \n", " \n") == "./path/tex.png"
    assert strtrim("\n\n", "\n") == ""
    assert strtrim("keep", "") == "keep"


def test_substr_bounds():
    text = "raycaster"
    assert substr(text, 3, 4) == text[3:7]
    assert substr(text, 3, 100) == text[3:]
    assert substr(text, len(text) + 1, 2) == ""
    assert substr("", 0, 5) == ""
    with pytest.raises(ValueError):
        substr(text, -1, 2)


def test_join():
    assert join("bom ", "dia") == "bom dia"
    assert join("", "x") == "x"


def test_map_indexed_uses_index_and_char():
    assert map_indexed("abc", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbC"
    assert map_indexed("", lambda i, c: c) == ""


def test_iter_indexed_visits_every_character_in_order():
    seen = []
    iter_indexed("xyz", lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate("xyz"))