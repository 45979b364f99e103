import pytest

from minish.syntax import (
    SpecialChar,
    check_pipe,
    check_redir,
    count_missing_spaces,
    empty_line,
    is_quoted,
    is_special_char,
    is_special_symbol,
    is_whitespace,
    key_length,
    missing_space_after,
    missing_space_before,
)


@pytest.mark.parametrize(
    "char, expected",
    [("|", SpecialChar.PIPE), ("<", SpecialChar.REDIR), (">", SpecialChar.REDIR), ("a", SpecialChar.NONE)],
)
def test_is_special_char(char, expected):
    assert is_special_char(char) is expected


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_whitespace_true(char):
    assert is_whitespace(char) is True


def test_is_whitespace_false():
    assert is_whitespace("x") is False
    assert is_whitespace("") is False


def test_is_quoted():
    assert is_quoted("'a|'", 2) == "'"
    assert is_quoted('"a|"', 2) == '"'
    assert not is_quoted("a|b", 1)
    assert not is_quoted("'a'|", 3)


def test_is_special_symbol():
    assert is_special_symbol("ls >> f", 3) is SpecialChar.REDIR
    assert is_special_symbol("ls | wc", 3) is SpecialChar.PIPE
    assert is_special_symbol("cat <> f", 4) is SpecialChar.INVALID
    assert is_special_symbol("a |> f", 2) is SpecialChar.PIPE
    assert is_special_symbol("abc", 0) is SpecialChar.NONE


def test_check_pipe():
    assert check_pipe("ls | wc", 3) is True
    assert check_pipe("ls || wc", 3) is False
    assert check_pipe("ls | | wc", 3) is False
    assert check_pipe("ls |& wc", 3) is False
    assert check_pipe("ls '|' wc", 4) is True


def test_check_redir():
    assert check_redir("cat > f", 4) is True
    assert check_redir("cat >> f", 4) is True
    assert check_redir("cat >>> f", 4) is False
    assert check_redir("cat > | f", 4) is False
    assert check_redir("cat <> f", 4) is False
    assert check_redir("cat '<>' f", 5) is True


def test_empty_line():
    assert empty_line("") is True
    assert empty_line(" \t\n ") is True
    assert empty_line("  x ") is False


def test_missing_spaces_around_special():
    assert missing_space_before("ls|wc", 2) is True
    assert missing_space_after("ls|wc", 2) is True
    assert missing_space_before("ls |wc", 3) is False
    assert missing_space_after("ls| wc", 2) is False
    assert missing_space_before("|ls", 0) is False
    assert missing_space_after("ls|", 2) is False


def test_missing_space_after_quote_and_mixed_specials():
    assert missing_space_after("ls|'wc'", 2) is True
    assert missing_space_after("a|>f", 1) is True
    assert missing_space_after("a>>f", 1) is False


def test_quoted_specials_need_no_spaces():
    assert count_missing_spaces("echo 'a|b'") == 0


def test_count_missing_spaces():
    assert count_missing_spaces("ls|wc") == 2
    assert count_missing_spaces("ls | wc") == 0


def test_key_length():
    assert key_length("$HOME x", 0) == len("$HOME")
    assert key_length("a $MY_VAR1-b", 2) == len("$MY_VAR1")
    assert key_length("$", 0) == 1