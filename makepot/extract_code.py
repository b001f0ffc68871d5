import logging

from .helper import remove_comment_markup
from .message import TranslationOccurrence
from .patterns import find_translations
from .position import PositionIndex


log = logging.getLogger(__name__)


def extract_translations_from_code(content, filename, config, warn=None):
    """
    Extract translation calls from the text of a PHP or JS file.

    Parameters:
        content (str): Text of the file
        filename (str): Path written into the references
        config: Any object with a `slug` attribute
        warn: Callable receiving diagnostic lines, defaults to the log

    Returns the occurrences in the order they appear in the file.
    """
    if warn is None:
        warn = log.warning

    translations = []
    line_index = PositionIndex(content)

    for match in find_translations(content):
        line_number = line_index.line_number(match.call_start)
        message_id = match.message_id.strip()
        if not message_id:
            log.debug("skipping blank message in %s on line %d",
                      filename, line_number)
            continue

        msgctxt = None
        if match.context is not None:
            msgctxt = match.context[1]
            if msgctxt != config.slug:
                warn(f"The translation in {filename} on line {line_number} "
                     f"doesn't match the slug. {msgctxt} != {config.slug}")

        comment = None
        if match.translator_comment is not None:
            comment = remove_comment_markup(match.translator_comment).strip()

        plural = None
        if match.message_plural is not None:
            plural = match.message_plural.strip()

        translations.append(TranslationOccurrence(
            message_id=message_id,
            message_context=msgctxt,
            translator_comment=comment,
            source_reference=f"{filename}:{line_number}",
            message_plural=plural))

    log.debug("found %d translations in %d line(s) of %s",
              len(translations), len(line_index), filename)
    return translations
