"""Property flattening and parameter matching for nested JSON data."""
from ..models import MatchResult


def flatten_properties(data, prefix=""):
    """Recursively collect the key path of every object key in a dict/list tree.

    Object keys join with ".", array elements add "[i]" to the prefix handed
    to their children. Scalars contribute nothing.

        >>> flatten_properties({"a": [{"b": 1}, {"b": 2}]})
        ['a', 'a[0].b', 'a[1].b']
    """
    properties = []
    if isinstance(data, (list, tuple)):
        for i, item in enumerate(data):
            properties.extend(flatten_properties(item, f"{prefix}[{i}]"))
    elif isinstance(data, dict):
        for key, value in data.items():
            path = f"{prefix}.{key}" if prefix else f"{key}"
            properties.append(path)
            properties.extend(flatten_properties(value, path))
    return properties


def is_exact_match(parameter_name, path):
    return path == parameter_name or path.endswith(f".{parameter_name}")


def is_similar_match(parameter_name, path):
    """Case-insensitive containment between the name and the last dotted part.

    Array suffixes such as "items[2]" are kept in the last part.
    """
    last_part = path.split(".")[-1].lower()
    name = parameter_name.lower()
    return name in last_part or last_part in name


def match_parameter(parameter_name, all_properties):
    """Check one parameter name against an already flattened property list."""
    exact = any(is_exact_match(parameter_name, p) for p in all_properties)
    similar = [p for p in all_properties if is_similar_match(parameter_name, p)]
    return MatchResult(
        exists=exact,
        exact_match=exact,
        similar_matches=similar,
        all_properties=all_properties,
    )


def find_properties(keyword, all_properties):
    """Return property paths containing keyword anywhere (case-insensitive)."""
    keyword_lower = keyword.lower()
    return [p for p in all_properties if keyword_lower in p.lower()]
