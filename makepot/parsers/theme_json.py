LABELS = {
    "title": "Style variation name",
    "fontSizes": "Font size name",
    "fontFamilies": "Font family name",
    "palette": "Color name",
    "gradients": "Gradient name",
    "duotone": "Duotone name",
    "spacingSizes": "Space size name",
    "customTemplates": "Custom template name",
    "templateParts": "Template part name",
}

SETTINGS = {
    "typography": ("fontSizes", "fontFamilies"),
    "color": ("palette", "gradients", "duotone"),
    "spacing": ("spacingSizes",),
}


def _named(items, key):
    result = {}
    if type(items) is not list:
        return result
    for item in items:
        if type(item) is dict and type(item.get(key)) is str:
            result[item.get("slug") or item.get("name") or item[key]] = \
                item[key]
    return result


def parse_theme_json(json):
    """
    Pick the translatable fields of a theme.json document.
    Presets of "settings" may appear at the top level or per block.
    """
    if type(json) is not dict:
        return {}
    parsed = {}
    if type(json.get("title")) is str:
        parsed["title"] = json["title"]

    settings = json.get("settings")
    if type(settings) is not dict:
        settings = {}
    scopes = [settings]
    if type(settings.get("blocks")) is dict:
        scopes += list(settings["blocks"].values())
    for scope in scopes:
        if type(scope) is not dict:
            continue
        for group, presets in SETTINGS.items():
            group_settings = scope.get(group)
            if type(group_settings) is not dict:
                continue
            for preset in presets:
                names = _named(group_settings.get(preset), "name")
                if names:
                    parsed.setdefault(preset, {}).update(names)

    templates = _named(json.get("customTemplates"), "title")
    if templates:
        parsed["customTemplates"] = templates
    parts = _named(json.get("templateParts"), "title")
    if parts:
        parsed["templateParts"] = parts
    return parsed
