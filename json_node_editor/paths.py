from __future__ import annotations

import json
from typing import Any, List, Sequence, Tuple, Union

PathSegment = Union[int, str]
Path = Tuple[PathSegment, ...]

ROOT = '$'

_decoder = json.JSONDecoder()


def is_index_segment(segment: Any) -> bool:
    """True for array indexes. bool is an int subclass but never an index."""
    return isinstance(segment, int) and not isinstance(segment, bool)


def format_segment(segment: PathSegment) -> str:
    if is_index_segment(segment):
        return f"[{segment}]"
    return f"[{json.dumps(str(segment), ensure_ascii=False)}]"


def format_path(path: Sequence[PathSegment] = ()) -> str:
    """Render a path in bracket notation, e.g. $["customer"][0]["name"]."""
    if not path:
        return ROOT
    return ROOT + ''.join(format_segment(seg) for seg in path)


def parse_path(text: str) -> Path:
    """Parse the bracket notation produced by `format_path` back into a path."""
    if text is None:
        raise ValueError("Path is empty.")
    text = text.strip()
    if not text.startswith(ROOT):
        raise ValueError(f"Path must start with '{ROOT}': {text!r}")

    parts: List[PathSegment] = []
    i = 1
    while i < len(text):
        if text[i] != '[':
            raise ValueError(f"Expected '[' at position {i} in {text!r}")
        i += 1
        if i < len(text) and text[i] == '"':
            try:
                segment, i = _decoder.raw_decode(text, i)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Bad key at position {i} in {text!r}: {exc.msg}") from None
            if not isinstance(segment, str):
                raise ValueError(f"Bad key at position {i} in {text!r}")
        else:
            end = text.find(']', i)
            digits = text[i:end] if end != -1 else ''
            if not (digits.isascii() and digits.isdigit()):
                raise ValueError(f"Bad index at position {i} in {text!r}")
            segment = int(digits)
            i = end
        if i >= len(text) or text[i] != ']':
            raise ValueError(f"Missing ']' in {text!r}")
        i += 1
        parts.append(segment)
    return tuple(parts)
