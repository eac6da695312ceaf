from __future__ import annotations

import json
from typing import Any, Dict, Mapping

SEPARATOR = "."


def dot(tree: Mapping[str, Any] | list, prepend: str = "") -> Dict[str, Any]:
    """Flatten nested mappings (and lists, by index) into dotted paths.

    Empty containers are kept as leaves so callers can treat them as empty
    translations.
    """
    results: Dict[str, Any] = {}
    items = tree.items() if isinstance(tree, Mapping) else enumerate(tree)
    for name, value in items:
        path = f"{prepend}{name}"
        if isinstance(value, (Mapping, list)) and value:
            results.update(dot(value, prepend=path + SEPARATOR))
        else:
            results[path] = value
    return results


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, Mapping, list, tuple)):
        return len(value) == 0
    return False


def stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_empty(value):
        return ""
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)
