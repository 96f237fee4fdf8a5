from __future__ import annotations

from typing import Any

ROW_TYPES = ('string', 'number', 'boolean', 'null', 'array', 'object')
CONTAINER_TYPES = ('array', 'object')


def value_type(value: Any) -> str:
    """JSON type tag of a decoded value."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    raise TypeError(f"Not a JSON value: {type(value).__name__}")
