from json import dumps, loads


def parse_json(json_string):
    """Parses a JSON string into python values."""
    return loads(json_string)


def parse_json_or_none(json_string):
    try:
        return parse_json(json_string)
    except ValueError:
        return None


def to_json(dct, pretty=False, sort_keys=False):
    """
    Opposite of parse_json.
    Converts a request body into a JSON string.
    """
    if pretty:
        return dumps(dct, sort_keys=True, indent=2, separators=(", ", ": "))
    return dumps(dct, sort_keys=sort_keys, separators=(",", ":"))
