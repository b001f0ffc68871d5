import json
import logging

from .parser import get_label, parsers
from .parsers.file_header import PLUGIN_HEADERS, THEME_HEADERS
from .parsers.file_header import parse_file_headers
from .message import TranslationOccurrence


log = logging.getLogger(__name__)


def gen_translation(label, text, file_path=None):
    return TranslationOccurrence(
        message_id=text,
        translator_comment=label,
        source_reference=file_path)


def yield_parsed_data(parsed, source_kind, file_path, table=None):
    """
    Extract strings from parsed key/value data.

    Values may be a string, a list of strings or a mapping whose string
    values are extracted. Every string is labelled after its top-level
    key. Returns {label: {text: TranslationOccurrence}}.
    """
    translations = {}
    if not parsed or type(parsed) is not dict:
        return translations

    for term, item in parsed.items():
        label = get_label(term, source_kind, table)

        def store_translation(value):
            if not value or type(value) is not str:
                return
            translations.setdefault(label, {})[value] = \
                gen_translation(label, value, file_path)

        if not item:
            continue
        elif type(item) is str:
            store_translation(item)
        elif type(item) is list:
            for value in item:
                store_translation(value)
        elif type(item) is dict:
            for value in item.values():
                store_translation(value)

    return translations


def flatten(translations):
    """List the occurrences of a {label: {text: occurrence}} slice."""
    return [occurrence
            for entries in translations.values()
            for occurrence in entries.values()]


def parse_json_file(file_path, source_kind, origin=None):
    """Extract strings from a block.json or theme.json file."""
    with open(file_path, encoding="utf-8") as fp:
        try:
            json_data = json.load(fp)
        except json.JSONDecodeError as E:
            log.warning("Skipping %s, invalid JSON: %s", file_path, E)
            return {}
    parsed = parsers[source_kind](json_data)
    return yield_parsed_data(parsed, source_kind, origin or file_path)


def parse_readme_file(file_path, origin=None):
    """Extract the plugin name, tags and sections of a readme.txt."""
    with open(file_path, encoding="utf-8") as fp:
        parsed = parsers["readme.txt"](fp.read())
    return yield_parsed_data(parsed, "readme.txt", origin or file_path)


def parse_headers_file(file_path, source_kind, origin=None):
    """Extract the plugin or theme headers of a main file."""
    if source_kind == "plugin":
        headers, name = PLUGIN_HEADERS, "Plugin Name"
    else:
        headers, name = THEME_HEADERS, "Theme Name"
    with open(file_path, encoding="utf-8", errors="replace") as fp:
        parsed = parse_file_headers(fp.read(), headers)
    if name not in parsed:
        # not the main file of a plugin or theme
        return {}
    return yield_parsed_data(parsed, source_kind, origin or file_path)
