import re


LABELS = {
    "name": "Plugin name.",
    "short_description": "Short description.",
    "tags": "Tag of the plugin.",
    "section_titles": "Readme section title.",
    "sections": "Readme section content.",
}

PLUGIN_NAME = re.compile(r"^\s*===\s*(.+?)\s*===\s*$")
SECTION_TITLE = re.compile(r"^\s*==\s*(.+?)\s*==\s*$")
HEADER_FIELD = re.compile(r"^([A-Za-z][A-Za-z ]*?)\s*:\s*(.*)$")


def parse_readme(text):
    """
    Split a WordPress style readme.txt into its plugin name, tags,
    short description and sections.
    """
    parsed = {}
    sections = {}
    section = None
    short_description = []
    in_header = True

    for line in text.splitlines():
        match = PLUGIN_NAME.match(line)
        if match and "name" not in parsed:
            parsed["name"] = match.group(1)
            continue
        match = SECTION_TITLE.match(line)
        if match:
            section = match.group(1)
            sections[section] = []
            in_header = False
            continue
        if section is not None:
            sections[section].append(line)
            continue
        if in_header:
            match = HEADER_FIELD.match(line)
            if match:
                if match.group(1).lower() == "tags":
                    parsed["tags"] = [t.strip()
                                      for t in match.group(2).split(",")
                                      if t.strip()]
                continue
            if not line.strip():
                if "name" in parsed and short_description:
                    in_header = False
                continue
        if line.strip() and not sections:
            short_description.append(line.strip())
            in_header = False

    if short_description:
        parsed["short_description"] = " ".join(short_description)
    if sections:
        parsed["section_titles"] = list(sections)
        parsed["sections"] = dict(
            (title, "\n".join(lines).strip())
            for title, lines in sections.items())
    return parsed
