from datetime import datetime, timezone
import logging
import os
import polib

from . import __version__
from .config import MakePotException


log = logging.getLogger(__name__)


def generate_header_comments(headers=None):
    """Copyright and license lines written at the top of the POT file."""
    headers = headers or {}
    author = headers.get("author") or "AUTHOR"
    email = headers.get("email") or "EMAIL"
    license = headers.get("license") or "gpl-2.0 or later"
    year = datetime.now().year
    return (f"# Copyright (C) {year} {author} ({email})\n"
            f"# This file is distributed under the {license}.")


def split_reference(reference):
    """"path/to/file.php:12" -> ("path/to/file.php", "12")"""
    path, sep, line = reference.rpartition(":")
    if sep and line.isdigit():
        return (path, line)
    return (reference, "")


def make_metadata(config):
    tzinfo = datetime.now(timezone.utc).astimezone().tzinfo
    tztime = datetime.now(tzinfo).strftime('%Y-%m-%d %H:%M%z')
    headers = config.headers
    name = headers.get("name") or config.slug
    version = headers.get("version")
    return {
        "Project-Id-Version":
            f"{name} {version}" if version else name,
        "Report-Msgid-Bugs-To":
            f"https://wordpress.org/support/plugin/{config.slug}",
        "Last-Translator": "FULL NAME <EMAIL@ADDRESS>",
        "Language-Team": "LANGUAGE <LL@li.org>",
        "MIME-Version": "1.0",
        "Content-Type": "text/plain; charset=UTF-8",
        "Content-Transfer-Encoding": "8bit",
        "POT-Creation-Date": f"{tztime}",
        "PO-Revision-Date": "YEAR-MO-DA HO:MI+ZONE",
        "X-Generator": f"makepot {__version__}",
        "X-Domain": config.domain or config.slug,
    }


def sanitize(catalog, reference):
    """
    Fill in plural forms of catalog entries from a reference POT file.
    Without a context only one plural can be stored per msgid, so the
    reference keeps the plural a string had before.
    """
    if not os.path.isfile(reference):
        raise MakePotException(f"Cannot read {reference}")
    try:
        pofile = polib.pofile(reference)
    except (OSError, UnicodeDecodeError) as error:
        raise MakePotException(
            f"Cannot parse {reference}: {error}") from None
    count = 0
    for entry in pofile.untranslated_entries():
        if not entry.msgid_plural:
            continue
        message = catalog.get(entry.msgid, entry.msgctxt or "")
        if message is not None and not message.message_plural:
            message.message_plural = entry.msgid_plural
            count += 1
    log.debug("took %d plural form(s) from %s", count, reference)
    return count


def source_string(text):
    """Undo the quote and backslash escapes of a source literal."""
    return polib.unescape(text.replace("\\'", "'"))


def make_pofile(catalog, config):
    pofile = polib.POFile()
    # polib prefixes every header line with "# " itself
    pofile.header = "\n".join(
        line[2:] for line in
        generate_header_comments(config.headers).split("\n"))
    pofile.metadata = make_metadata(config)

    for message in catalog.entries():
        entry = polib.POEntry(
            msgid=source_string(message.message_id),
            msgctxt=source_string(message.message_context) or None,
            comment="\n".join(message.comments),
            occurrences=[split_reference(reference)
                         for reference in message.references])
        if message.message_plural:
            entry.msgid_plural = source_string(message.message_plural)
            entry.msgstr_plural = {0: "", 1: ""}
        if "%" in message.message_id:
            entry.flags.append("php-format")
        pofile.append(entry)
    return pofile


def write_to_pot(catalog, config, path=None):
    """Write the catalog as a POT file, returns the number of entries."""
    path = path or config.destination
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    pofile = make_pofile(catalog, config)
    pofile.save(path)
    return len(pofile)
