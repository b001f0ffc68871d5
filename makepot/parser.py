from .parsers.block_json import LABELS as BLOCK_JSON_LABELS
from .parsers.block_json import parse_block_json
from .parsers.file_header import PLUGIN_HEADERS, THEME_HEADERS
from .parsers.readme import LABELS as README_LABELS
from .parsers.readme import parse_readme
from .parsers.theme_json import LABELS as THEME_JSON_LABELS
from .parsers.theme_json import parse_theme_json


labels = {
    "block.json": BLOCK_JSON_LABELS,
    "theme.json": THEME_JSON_LABELS,
    "readme.txt": README_LABELS,
    "plugin": PLUGIN_HEADERS,
    "theme": THEME_HEADERS,
}

parsers = {
    "block.json": parse_block_json,
    "theme.json": parse_theme_json,
    "readme.txt": parse_readme,
}


def get_label(term, source_kind, table=None):
    """
    Semantic label of the field `term` for the given kind of source,
    or from `table` when one is given. Unknown fields keep their own name.
    """
    if table is None:
        table = labels.get(source_kind, {})
    return table.get(term, term)
