LABELS = {
    "title": "block title",
    "description": "block description",
    "keywords": "block keyword",
    "styles": "block style label",
    "variations": "block variation title",
}


def _named(items, key):
    result = {}
    for item in items:
        if type(item) is dict and type(item.get(key)) is str:
            result[item.get("name") or item[key]] = item[key]
    return result


def parse_block_json(json):
    """Pick the translatable fields of a block.json document."""
    if type(json) is not dict:
        return {}
    parsed = {}
    for field in ("title", "description", "keywords"):
        if field in json:
            parsed[field] = json[field]
    if type(json.get("styles")) is list:
        parsed["styles"] = _named(json["styles"], "label")
    if type(json.get("variations")) is list:
        parsed["variations"] = _named(json["variations"], "title")
    return parsed
