"""coercion.py
Coercion helpers for loosely typed values (external analyzer output).
Nothing here trusts the type or presence of a value.
"""
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

LIST_SEPARATOR_REGEX = re.compile(r"[\n,•;|]")


def coerce_string(value: Any) -> Optional[str]:
    """
    Return `value` trimmed if it is a non-empty string, otherwise None.

    Example:
        >>> coerce_string("  Acme  ")
        'Acme'
        >>> coerce_string(42) is None
        True
    """
    if isinstance(value, str):
        return value.strip() or None
    return None


def coerce_string_list(value: Any) -> List[str]:
    """
    Coerce `value` into a list of non-empty, trimmed strings.

    - A list keeps its string items (non-strings are dropped).
    - A string is split on newlines, commas, bullets, semicolons and pipes.
    - Anything else becomes an empty list.

    Example:
        >>> coerce_string_list("SQL; Figma\\n• Python")
        ['SQL', 'Figma', 'Python']
    """
    if isinstance(value, list):
        items = [item.strip() for item in value if isinstance(item, str)]
    elif isinstance(value, str):
        items = [item.strip() for item in LIST_SEPARATOR_REGEX.split(value)]
    else:
        return []
    return [item for item in items if item]


def coerce_bool(value: Any) -> Optional[bool]:
    """Only an actual boolean counts; "false", 0, None... become None."""
    return value if isinstance(value, bool) else None


def coerce_number(value: Any) -> Optional[float]:
    """Return `value` as a float if it is an int/float (booleans excluded), otherwise None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def coerce_dict(value: Any) -> Optional[Dict[str, Any] | BaseModel]:
    """Pass dicts (and already validated models) through; anything else becomes None."""
    return value if isinstance(value, (dict, BaseModel)) else None


def coerce_dict_list(value: Any) -> List[Dict[str, Any]]:
    """Keep only the dict (or model) items of a list; anything that is not a list becomes []."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, (dict, BaseModel))]


def coerce_link_list(value: Any) -> List[Dict[str, Any]]:
    """
    Coerce a links value into a list of {"url", "label", "type"} dicts.

    Accepts bare URL strings and dicts using either `url`/`href` and
    `label`/`title`. Items without a usable URL are dropped.

    Example:
        >>> coerce_link_list(["janedoe.dev", {"href": "https://x.io", "title": "X"}, 7])
        [{'url': 'janedoe.dev', 'label': None, 'type': None}, {'url': 'https://x.io', 'label': 'X', 'type': None}]
    """
    if not isinstance(value, list):
        return []

    links = []
    for item in value:
        if isinstance(item, str):
            url, label, link_type = coerce_string(item), None, None
        elif isinstance(item, dict):
            url = coerce_string(item.get("url")) or coerce_string(item.get("href"))
            label = coerce_string(item.get("label")) or coerce_string(item.get("title"))
            link_type = coerce_string(item.get("type"))
        else:
            continue

        if url:
            links.append({"url": url, "label": label, "type": link_type})
    return links
