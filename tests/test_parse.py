import json

from makepot.parse import flatten, parse_headers_file, parse_json_file
from makepot.parse import parse_readme_file, yield_parsed_data


TABLE = {
    "title": "Block Title",
    "tags": "Block Tag",
    "nested": "Nested Label",
}


def test_strings_lists_and_mappings():
    parsed = {"title": "Hello", "tags": ["a", "b"], "nested": {"x": "y"}}
    result = yield_parsed_data(parsed, "block.json", "src/block.json",
                               table=TABLE)

    pairs = sorted((label, text)
                   for label, entries in result.items()
                   for text in entries)
    assert pairs == [("Block Tag", "a"), ("Block Tag", "b"),
                     ("Block Title", "Hello"), ("Nested Label", "y")]

    occurrence = result["Block Title"]["Hello"]
    assert occurrence.message_id == "Hello"
    assert occurrence.translator_comment == "Block Title"
    assert occurrence.source_reference == "src/block.json"
    assert occurrence.message_context is None


def test_labels_come_from_the_source_kind():
    result = yield_parsed_data({"title": "Hi", "keywords": ["k"]},
                               "block.json", "block.json")
    assert set(result) == {"block title", "block keyword"}


def test_unknown_fields_keep_their_name():
    result = yield_parsed_data({"category": "widgets"}, "block.json", "f")
    assert list(result) == ["category"]


def test_falsy_values_are_skipped():
    parsed = {"title": "", "tags": None, "nested": {}, "other": [None, 3]}
    assert yield_parsed_data(parsed, "block.json", "f", table=TABLE) == {}
    assert yield_parsed_data(None, "block.json", "f") == {}
    assert yield_parsed_data({}, "theme.json", "f") == {}


def test_flatten():
    parsed = {"title": "Hello", "tags": ["a", "b"]}
    occurrences = flatten(yield_parsed_data(parsed, "x", "f", table=TABLE))
    assert [o.message_id for o in occurrences] == ["Hello", "a", "b"]


def test_parse_block_json_file(tmp_path):
    block = {
        "name": "my-plugin/notice",
        "title": "Notice",
        "category": "widgets",
        "keywords": ["alert", "message"],
        "styles": [{"name": "rounded", "label": "Rounded"}],
    }
    path = tmp_path / "block.json"
    path.write_text(json.dumps(block), encoding="utf-8")

    result = parse_json_file(str(path), "block.json", origin="block.json")
    assert result["block title"]["Notice"].source_reference == "block.json"
    assert set(result["block keyword"]) == {"alert", "message"}
    assert set(result["block style label"]) == {"Rounded"}
    assert "category" not in result


def test_invalid_json_is_skipped(tmp_path):
    path = tmp_path / "block.json"
    path.write_text("{ not json", encoding="utf-8")
    assert parse_json_file(str(path), "block.json") == {}


def test_parse_readme_file(tmp_path):
    path = tmp_path / "readme.txt"
    path.write_text("=== My Plugin ===\n"
                    "Contributors: someone\n"
                    "Tags: seo, forms\n"
                    "Stable tag: 1.0\n"
                    "\n"
                    "Makes forms better.\n"
                    "\n"
                    "== Description ==\n"
                    "Long text.\n", encoding="utf-8")

    result = parse_readme_file(str(path), origin="readme.txt")
    assert set(result["Plugin name."]) == {"My Plugin"}
    assert set(result["Tag of the plugin."]) == {"seo", "forms"}
    assert set(result["Short description."]) == {"Makes forms better."}
    assert set(result["Readme section title."]) == {"Description"}
    assert set(result["Readme section content."]) == {"Long text."}


def test_parse_plugin_headers(tmp_path):
    path = tmp_path / "my-plugin.php"
    path.write_text("<?php\n"
                    "/**\n"
                    " * Plugin Name: My Plugin\n"
                    " * Description: Does things.\n"
                    " * Author: Someone\n"
                    " * Author URI: https://example.com\n"
                    " */\n", encoding="utf-8")

    result = parse_headers_file(str(path), "plugin", origin="my-plugin.php")
    assert set(result["Name of the plugin"]) == {"My Plugin"}
    assert set(result["Description of the plugin"]) == {"Does things."}
    assert set(result["Author of the plugin"]) == {"Someone"}
    assert set(result["Author URI of the plugin"]) == {"https://example.com"}


def test_files_without_main_header_are_ignored(tmp_path):
    path = tmp_path / "helpers.php"
    path.write_text("<?php\n// Description: helpers\n", encoding="utf-8")
    assert parse_headers_file(str(path), "plugin") == {}
