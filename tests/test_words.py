import pytest

from minish.words import remove_quotes, split_words


def test_split_collapses_separators():
    assert split_words("  ls  -l   /tmp ", " ") == ["ls", "-l", "/tmp"]


def test_split_keeps_quoted_sections():
    assert split_words("echo 'a b' \"c d\"e f", " ") == ["echo", "'a b'", '"c d"e', "f"]


def test_split_empty_input():
    assert split_words("", " ") == []
    assert split_words("    ", " ") == []


def test_split_other_separator():
    assert split_words("/bin::/usr/bin", ":") == ["/bin", "/usr/bin"]


@pytest.mark.parametrize("line", ["ls -l | wc", "echo 'x y' z", 'a "b c" d'])
def test_split_join_round_trip(line):
    assert " ".join(split_words(line, " ")) == line


def test_split_unclosed_quote_raises():
    with pytest.raises(ValueError):
        split_words("echo 'abc", " ")


def test_remove_quotes_simple():
    assert remove_quotes("'a b'") == "a b"
    assert remove_quotes('"a b"') == "a b"


def test_remove_quotes_keeps_other_quote_kind():
    assert remove_quotes("\"it's\"") == "it's"
    assert remove_quotes("'say \"hi\"'") == 'say "hi"'


def test_remove_quotes_multiple_sections():
    assert remove_quotes("a'b'c\"d\"") == "abcd"


def test_remove_quotes_unclosed_drops_quote():
    assert remove_quotes("'abc") == "abc"


def test_remove_quotes_without_quotes_is_identity():
    assert remove_quotes("plain-word") == "plain-word"
    assert remove_quotes("") == ""