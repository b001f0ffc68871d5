import re
from typing import Iterator, NamedTuple, Optional, Tuple


SINGULAR_FUNCTIONS = (
    "__", "_e",
    "esc_html__", "esc_html_e",
    "esc_attr__", "esc_attr_e",
)
CONTEXT_FUNCTIONS = (
    "_x", "_ex",
    "esc_html_x", "esc_attr_x",
)
PLURAL_FUNCTIONS = (
    "_n", "_n_noop",
)
PLURAL_CONTEXT_FUNCTIONS = (
    "_nx", "_nx_noop",
)


def _alternation(names):
    # longest first so that "_nx_noop" is tried before "_nx" and "_n"
    return "|".join(re.escape(name)
                    for name in sorted(names, key=len, reverse=True))


def _literal(name):
    """A quoted string literal capturing the quote and its payload."""
    return (r"(?P<{0}_quote>['\"`])"
            r"(?P<{0}>(?:\\.|(?!(?P={0}_quote))[^\\])*)"
            r"(?P={0}_quote)").format(name)


ANY_LITERAL = (r"'(?:\\.|[^'\\])*'"
               r"|\"(?:\\.|[^\"\\])*\""
               r"|`(?:\\.|[^`\\])*`")

# a non-literal argument such as $count or count( $items ),
# never ending in whitespace
ANY_EXPRESSION = (r"[^,()'\"`\s](?:[^,()'\"`\s]|\s+(?=[^,)'\"`\s])"
                  r"|\([^()]*\))*")

TRANSLATOR_ANNOTATION = (
    r"/\*+(?:\s|\*(?!/))*(?i:translators:)(?:(?!\*/).)*\*/"
    r"|//[ \t]*(?i:translators:)[^\n]*"
)

TRANSLATIONS_REGEX = re.compile(r"""
    (?:(?P<comment>{annotation})\s*)?
    \b(?:(?P<plural_function>{plural})|(?P<function>{singular}))
    \s*\(\s*
    (?P<msgid_quote>['"`])
    (?P<msgid>(?:\\.|(?!(?P=msgid_quote))[^\\])+)
    (?P=msgid_quote)
    (?(plural_function)\s*,\s*{plural_literal})
    (?:\s*,\s*(?:{any_literal}|{any_expression}))*?
    (?:\s*,\s*(?P<context>{context_literal}))?
    \s*,?\s*\)
""".format(
    annotation=TRANSLATOR_ANNOTATION,
    plural=_alternation(PLURAL_FUNCTIONS + PLURAL_CONTEXT_FUNCTIONS),
    singular=_alternation(SINGULAR_FUNCTIONS + CONTEXT_FUNCTIONS),
    plural_literal=_literal("plural"),
    any_literal=ANY_LITERAL,
    any_expression=ANY_EXPRESSION,
    context_literal=_literal("context_literal"),
), re.S | re.X)


class TranslationMatch(NamedTuple):
    start: int
    end: int
    call_start: int
    translator_comment: Optional[str]
    function: str
    message_id: str
    message_plural: Optional[str]
    # (quoted literal, literal payload)
    context: Optional[Tuple[str, str]]


def _to_translation_match(match):
    context = None
    if match.group("context") is not None:
        context = (match.group("context"), match.group("context_literal"))
    function = "plural_function" if match.group("plural_function") \
        else "function"
    return TranslationMatch(
        start=match.start(),
        end=match.end(),
        call_start=match.start(function),
        translator_comment=match.group("comment"),
        function=match.group(function),
        message_id=match.group("msgid"),
        message_plural=match.group("plural"),
        context=context)


def next_translation(content: str, pos: int = 0) -> Optional[TranslationMatch]:
    """Find the first translation call at or after `pos`."""
    match = TRANSLATIONS_REGEX.search(content, pos)
    if match is None:
        return None
    return _to_translation_match(match)


def find_translations(content: str) -> Iterator[TranslationMatch]:
    """
    Lazily yield every translation call of `content` in order.
    Each search restarts after the end of the previous match so
    a span is never reported twice.
    """
    pos = 0
    while pos <= len(content):
        match = next_translation(content, pos)
        if match is None:
            return
        yield match
        pos = max(match.end, pos + 1)
