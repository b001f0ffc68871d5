from makepot.parser import get_label
from makepot.parsers.block_json import parse_block_json
from makepot.parsers.file_header import THEME_HEADERS, parse_file_headers
from makepot.parsers.readme import parse_readme
from makepot.parsers.theme_json import parse_theme_json


def test_get_label():
    assert get_label("title", "block.json") == "block title"
    assert get_label("Plugin Name", "plugin") == "Name of the plugin"
    assert get_label("unknown", "block.json") == "unknown"
    assert get_label("title", "no-such-kind") == "title"
    assert get_label("title", "block.json", {"title": "T"}) == "T"


def test_block_json_variations():
    parsed = parse_block_json({
        "title": "Quote",
        "variations": [{"name": "pull", "title": "Pull quote"},
                       {"name": "broken"}],
    })
    assert parsed == {"title": "Quote", "variations": {"pull": "Pull quote"}}


def test_block_json_not_an_object():
    assert parse_block_json(["title"]) == {}


def test_theme_json_presets():
    parsed = parse_theme_json({
        "title": "Dark",
        "settings": {
            "color": {"palette": [{"slug": "base", "name": "Base"}]},
            "typography": {"fontSizes": [{"slug": "s", "name": "Small"}]},
            "blocks": {
                "core/button": {
                    "color": {"palette": [{"slug": "acc", "name": "Accent"}]},
                },
            },
        },
        "customTemplates": [{"name": "blank", "title": "Blank"}],
        "templateParts": [{"name": "header", "title": "Header"}],
    })
    assert parsed == {
        "title": "Dark",
        "palette": {"base": "Base", "acc": "Accent"},
        "fontSizes": {"s": "Small"},
        "customTemplates": {"blank": "Blank"},
        "templateParts": {"header": "Header"},
    }


def test_theme_json_tolerates_odd_shapes():
    assert parse_theme_json({"settings": {"color": []}}) == {}
    assert parse_theme_json({"settings": "x"}) == {}


def test_readme_without_sections():
    parsed = parse_readme("=== Tiny ===\nTags: a\n\nShort one.\n")
    assert parsed == {"name": "Tiny", "tags": ["a"],
                      "short_description": "Short one."}


def test_theme_headers():
    css = ("/*\n"
           "Theme Name: Twenty Something\n"
           "Theme URI: https://example.org/theme\n"
           "Description: A theme. */\n")
    assert parse_file_headers(css, THEME_HEADERS) == {
        "Theme Name": "Twenty Something",
        "Theme URI": "https://example.org/theme",
        "Description": "A theme.",
    }
