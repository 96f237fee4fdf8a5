from __future__ import annotations

import json
from typing import Any, Dict, Sequence

from .config import DEFAULT_CONFIG, EditorConfig
from .kinds import CONTAINER_TYPES
from .nodes import NodeRow


def flatten_rows(rows: Sequence[NodeRow], config: EditorConfig = DEFAULT_CONFIG) -> str:
    """Render a node's rows as editable JSON text.

    Nested arrays and objects are left out; they are nodes of their own.
    """
    if not rows:
        return "{}"

    if len(rows) == 1 and rows[0].key is None:
        return json.dumps(rows[0].value, ensure_ascii=config.ensure_ascii, allow_nan=False)

    obj: Dict[str, Any] = {}
    for row in rows:
        if row.type in CONTAINER_TYPES:
            continue
        if row.key is not None:
            obj[row.key] = row.value
    return json.dumps(obj, indent=config.indent, ensure_ascii=config.ensure_ascii, allow_nan=False)
