from __future__ import annotations

import json
import math
from typing import Any, Optional

from .config import DEFAULT_CONFIG, EditorConfig
from .errors import DocumentParseFailure, MalformedInput


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are accepted by the json module but are not JSON.
    raise ValueError(f"{name} is not valid JSON")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"{text} is out of range for a JSON number")
    return value


def read_json_content(file_obj):
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return json.loads(content, parse_constant=_reject_constant, parse_float=_parse_float)

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f, parse_constant=_reject_constant, parse_float=_parse_float)


def parse_json_text(text: Optional[str]) -> Any:
    """Parse text typed by the user. Raises MalformedInput."""
    if text is None or not text.strip():
        raise MalformedInput("Invalid JSON: input is empty")
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
    except json.JSONDecodeError as exc:
        raise MalformedInput(f"Invalid JSON: {exc.msg}", exc.lineno, exc.colno) from None
    except ValueError as exc:
        raise MalformedInput(f"Invalid JSON: {exc}") from None


def parse_document_text(text: Optional[str]) -> Any:
    """Parse stored document text. Raises DocumentParseFailure."""
    if text is None:
        raise DocumentParseFailure("Document is empty.")
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
    except json.JSONDecodeError as exc:
        raise DocumentParseFailure(
            f"Stored document is not valid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})"
        ) from None
    except ValueError as exc:
        raise DocumentParseFailure(f"Stored document is not valid JSON: {exc}") from None


def dump_json_text(value: Any, config: EditorConfig = DEFAULT_CONFIG) -> str:
    return json.dumps(value, indent=config.indent, ensure_ascii=config.ensure_ascii, allow_nan=False)
