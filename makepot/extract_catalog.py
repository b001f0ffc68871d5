import re

from .helper import unquote
from .message import CatalogRecord, TranslationOccurrence
from .parsers.file_header import PLUGIN_HEADERS, THEME_HEADERS


# msgid prefix -> label of the entries kept from an existing catalog
PREFIXES = {
    "Plugin Name": PLUGIN_HEADERS["Plugin Name"],
    "Plugin URI": PLUGIN_HEADERS["Plugin URI"],
    "Theme Name": THEME_HEADERS["Theme Name"],
    "Theme URI": THEME_HEADERS["Theme URI"],
    "Description": PLUGIN_HEADERS["Description"],
    "Author": PLUGIN_HEADERS["Author"],
    "Author URI": PLUGIN_HEADERS["Author URI"],
}

KEYWORDS = ("msgctxt", "msgid", "msgstr")


def _keyword(line):
    token = line.split(None, 1)[0]
    # msgstr[0] counts as msgstr, msgid_plural is not kept
    token = re.sub(r"\[\d+\]$", "", token)
    return token if token in KEYWORDS else None


def parse_entry(entry):
    """Read msgid, msgstr, msgctxt and comments of one catalog entry."""
    fields = dict((keyword, "") for keyword in KEYWORDS)
    comments = []
    seen = set()
    current = None

    for line in entry.split("\n"):
        line = line.strip()
        if not line:
            continue
        if line.startswith("#"):
            comments.append(line[2:].strip())
            current = None
        elif line.startswith("\""):
            # continuation of a multi-line string
            if current is not None:
                fields[current] += unquote(line)
        else:
            current = _keyword(line)
            if current in seen:
                # only the first msgstr[n] is kept
                current = None
            elif current is not None:
                seen.add(current)
                parts = line.split(None, 1)
                fields[current] = unquote(parts[1].strip()) \
                    if len(parts) > 1 else ""

    return fields, "\n".join(comments)


def extract_translations(content, prefixes=PREFIXES):
    """
    Parse the entries of a POT/PO file and keep those whose msgid starts
    with one of `prefixes`. An entry matching several prefixes gives one
    record per prefix.
    """
    translations = []
    for entry in re.split(r"\n[ \t]*\n", content.replace("\r\n", "\n")):
        fields, comments = parse_entry(entry)
        for prefix, label in prefixes.items():
            if fields["msgid"].startswith(prefix):
                translations.append(CatalogRecord(
                    msgid=fields["msgid"],
                    msgstr=fields["msgstr"],
                    msgctxt=fields["msgctxt"],
                    comments=comments,
                    translation_key=label))
    return translations


def records_to_occurrences(records):
    return [TranslationOccurrence(
        message_id=record.msgid,
        message_context=record.msgctxt or None,
        translator_comment=record.translation_key)
        for record in records]
