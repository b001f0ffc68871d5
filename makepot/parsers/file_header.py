import re


PLUGIN_HEADERS = {
    "Plugin Name": "Name of the plugin",
    "Plugin URI": "Plugin URI of the plugin",
    "Description": "Description of the plugin",
    "Author": "Author of the plugin",
    "Author URI": "Author URI of the plugin",
}

THEME_HEADERS = {
    "Theme Name": "Theme Name of the theme",
    "Theme URI": "Theme URI of the theme",
    "Description": "Description of the theme",
    "Author": "Author of the theme",
    "Author URI": "Author URI of the theme",
}

# headers are only looked for in the beginning of a file
HEADER_SIZE = 8192


def _cleanup_header_comment(value):
    return re.sub(r"\s*(?:\*/|\?>).*", "", value).strip()


def parse_file_headers(text, headers):
    """
    Read "Header Name: value" lines from the leading comment of a
    plugin main file or theme stylesheet.
    """
    text = text[:HEADER_SIZE].replace("\r", "\n")
    parsed = {}
    for header in headers:
        match = re.search(r"^[ \t/*#@]*" + re.escape(header) + r":(.*)$",
                          text, re.M | re.I)
        if match:
            value = _cleanup_header_comment(match.group(1))
            if value:
                parsed[header] = value
    return parsed
