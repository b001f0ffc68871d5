import pytest

from makepot.helper import detect_pattern_type, include_patterns
from makepot.helper import remove_comment_markup, string_to_list, unquote


@pytest.mark.parametrize("comment, expected", [
    ("/* translators: a name */", "translators: a name"),
    ("/** translators: one\n * two\n */", "translators: one\ntwo"),
    ("// translators: line", "translators: line"),
])
def test_remove_comment_markup(comment, expected):
    assert remove_comment_markup(comment) == expected


def test_unquote():
    assert unquote('"a"') == "a"
    assert unquote("'a'") == "a"
    assert unquote('"a') == '"a'
    assert unquote('"') == '"'


def test_string_to_list():
    assert string_to_list("a,b, c") == ["a", "b", "c"]
    assert string_to_list(["a,b", "c"]) == ["a", "b", "c"]
    assert string_to_list(None) == []


@pytest.mark.parametrize("pattern, expected", [
    ("src", "directory"),
    ("main.php", "file"),
    ("src/*.php", "glob"),
    ("src/main.php", "glob"),
])
def test_detect_pattern_type(pattern, expected):
    assert detect_pattern_type(pattern) == expected


def test_include_patterns():
    assert include_patterns(["src", "main.php", "lib/*.js"]) == \
        ["src/*", "*/main.php", "lib/*.js"]
