"""
JSON helpers for producing wire-format output.
"""

from typing import Any


def remove_null_values(value: Any) -> Any:
    """Return a copy of ``value`` with every ``None`` dropped, recursively.
    
    Keys mapping to ``None`` are removed from dicts and ``None`` items are
    removed from lists. Other values are returned as-is.
    """
    if isinstance(value, dict):
        return {key: remove_null_values(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [remove_null_values(item) for item in value if item is not None]
    return value
