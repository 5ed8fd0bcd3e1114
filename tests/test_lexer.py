"""Tests for kvbind.parsing.lexer."""

import pytest
from kvbind.core.models import ENTRY, BLANK, COMMENT, MALFORMED
from kvbind.parsing.lexer import LineLexer


def test_entry_is_split_and_trimmed():
    """Name and value are trimmed independently."""
    line = LineLexer().classify("   port =  8080  \n", 3)
    assert line.status == ENTRY
    assert (line.name, line.value) == ("port", "8080")
    assert line.line_no == 3
    assert line.raw_line == "   port =  8080  "


def test_split_on_first_separator_only():
    line = LineLexer().classify("dsn=user=admin;pw=x")
    assert line.name == "dsn"
    assert line.value == "user=admin;pw=x"


def test_empty_value_is_still_an_entry():
    line = LineLexer().classify("name=")
    assert line.status == ENTRY
    assert line.value == ""


@pytest.mark.parametrize("raw, status", [
    ("", BLANK),
    ("   \t ", BLANK),
    ("# a comment", COMMENT),
    ("   #name=value", COMMENT),
    ("no separator here", MALFORMED),
    ("=value", MALFORMED),
    ("   = value", MALFORMED),
])
def test_non_entries(raw, status):
    line = LineLexer().classify(raw)
    assert line.status == status
    assert line.name == ""
    assert not line.is_entry


def test_custom_separator_and_comment_prefix():
    lexer = LineLexer(separator=":", comment_prefix=";")
    assert lexer.classify("; note").status == COMMENT
    assert lexer.classify("a=b").status == MALFORMED
    line = lexer.classify("host: example.org:80")
    assert (line.name, line.value) == ("host", "example.org:80")


def test_empty_separator_rejected():
    with pytest.raises(ValueError):
        LineLexer(separator="")


def test_tokenize_numbers_every_line():
    """CRLF endings leave no stray carriage return in values."""
    lines = LineLexer().tokenize("# header\r\n\r\na=1\r\nbroken\r\n")
    assert [l.status for l in lines] == [COMMENT, BLANK, ENTRY, MALFORMED]
    assert [l.line_no for l in lines] == [1, 2, 3, 4]
    assert lines[2].value == "1"


def test_tokenize_empty_text():
    assert LineLexer().tokenize("") == []
