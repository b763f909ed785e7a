"""Reading the JSON data document and the conditions file."""
import json
import logging
import re

from ..errors import DataLoadError

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "$"


def _read_text(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise DataLoadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise DataLoadError(path, f"not valid UTF-8 ({e.reason})") from e


def read_json(path):
    """Parse a JSON document. Raises DataLoadError on I/O or syntax errors."""
    text = _read_text(path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DataLoadError(path, str(e)) from e


def extract_parameters(text, marker=DEFAULT_MARKER):
    """Return every identifier prefixed by marker, in order, duplicates kept.

        >>> extract_parameters("if ($age > 18 && $country == 'NL')")
        ['age', 'country']
    """
    pattern = re.compile(re.escape(marker) + r"(\w+)")
    return pattern.findall(text)


def read_conditions(path, marker=DEFAULT_MARKER):
    return extract_parameters(_read_text(path), marker)


def load_json(path):
    """Like read_json, but logs the failure and returns None."""
    try:
        data = read_json(path)
    except DataLoadError as e:
        logger.error("%s", e)
        return None
    logger.debug("Loaded data from %s", path)
    return data


def load_conditions(path, marker=DEFAULT_MARKER):
    """Like read_conditions, but logs the failure and returns an empty list."""
    try:
        names = read_conditions(path, marker)
    except DataLoadError as e:
        logger.error("%s", e)
        return []
    logger.debug("Extracted %d parameter(s) from %s", len(names), path)
    return names
