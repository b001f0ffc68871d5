import os
import re


def remove_comment_markup(comment):
    """
    Strip /* */, leading asterisks and // from a source comment,
    keeping its text lines.
    """
    comment = re.sub(r"^\s*/\*+|\*+/\s*$", "", comment.strip())
    lines = []
    for line in comment.split("\n"):
        line = re.sub(r"^\s*(?:\*+(?!/)|//+)", "", line).strip()
        if line:
            lines.append(line)
    return "\n".join(lines)


def unquote(text):
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'`":
        return text[1:-1]
    return text


def string_to_list(value):
    """Split a comma separated option value."""
    if type(value) is str:
        return [v.strip() for v in value.split(",") if v.strip()]
    elif type(value) is list:
        result = []
        for v in value:
            result += string_to_list(v)
        return result
    return []


def detect_pattern_type(pattern):
    """Classify an include/exclude pattern as "file", "directory" or "glob"."""
    has_extension = "." in os.path.basename(pattern.rstrip("/" + os.sep))
    has_separator = "/" in pattern or os.sep in pattern

    if "*" in pattern or "?" in pattern:
        return "glob"
    elif not has_extension and not has_separator:
        return "directory"
    elif has_extension and not has_separator:
        return "file"
    return "glob"


def include_patterns(patterns):
    """Turn bare file and directory names into glob patterns."""
    result = []
    for pattern in patterns:
        pattern_type = detect_pattern_type(pattern)
        if pattern_type == "directory":
            result.append(pattern + "/*")
        elif pattern_type == "file":
            result.append("*/" + pattern)
        else:
            result.append(pattern)
    return result
