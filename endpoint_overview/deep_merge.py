"""Logic for deep merging configuration dictionaries."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively, so override tables extend the defaults.
    - Scalars and arrays in 'update' replace those in 'base'.
    - A None value in 'update' removes the key (drops a default override).
    """
    result = base.copy()
    for key, value in update.items():
        if value is None:
            result.pop(key, None)
        elif (
            key in result and isinstance(result[key], dict) and isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
