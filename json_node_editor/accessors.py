from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Sequence

from .errors import PathConflict
from .kinds import value_type
from .paths import PathSegment, format_path, is_index_segment

logger = logging.getLogger(__name__)


def _check_segment(path: Sequence[PathSegment], index: int) -> None:
    segment = path[index]
    if is_index_segment(segment):
        if segment < 0:
            raise PathConflict(path, index, f"Negative index {segment} in {format_path(path)}")
    elif not isinstance(segment, str):
        raise PathConflict(path, index, f"Unsupported path segment {segment!r} in {format_path(path)}")


def _fits(container: Any, segment: PathSegment) -> bool:
    if is_index_segment(segment):
        return isinstance(container, list)
    return isinstance(container, dict)


def _new_container(next_segment: PathSegment):
    return [] if is_index_segment(next_segment) else {}


def _has_slot(container: Any, segment: PathSegment) -> bool:
    if isinstance(container, list):
        return segment < len(container)
    return segment in container


def _assign(container: Any, segment: PathSegment, value: Any) -> None:
    if isinstance(container, list):
        if segment >= len(container):
            # Indexes past the end leave null holes.
            container.extend([None] * (segment - len(container) + 1))
        container[segment] = value
    else:
        container[segment] = value


def get_value_by_path(data: Any, path: Sequence[PathSegment]) -> Any:
    """Retrieve the value at a structural path.

    Raises KeyError when any segment is missing or addresses the wrong kind
    of container.
    """
    current = data
    for index, segment in enumerate(path):
        if not _fits(current, segment) or not _has_slot(current, segment) or (
            is_index_segment(segment) and segment < 0
        ):
            raise KeyError(f"No value at {format_path(path[:index + 1])}")
        current = current[segment]
    return current


def has_path(data: Any, path: Sequence[PathSegment]) -> bool:
    try:
        get_value_by_path(data, path)
    except KeyError:
        return False
    return True


def set_value_by_path(data: Any, path: Sequence[PathSegment], value: Any, on_conflict: str = 'error') -> Any:
    """Return a copy of `data` with `value` installed at `path`.

    Missing intermediate slots are created as a list when the following
    segment is an index and as a dict otherwise. When descent hits a value
    of the wrong kind, `PathConflict` is raised (`on_conflict='error'`) or
    the value is replaced by a new container (`on_conflict='overwrite'`).
    `data` itself is never modified.
    """
    path = tuple(path)
    if not path:
        return value

    for index in range(len(path)):
        _check_segment(path, index)

    root = deepcopy(data)
    if not _fits(root, path[0]):
        root = _resolve_conflict(root, path, 0, on_conflict)

    current = root
    for index, segment in enumerate(path[:-1]):
        next_segment = path[index + 1]
        if not _has_slot(current, segment):
            child = _new_container(next_segment)
            _assign(current, segment, child)
        else:
            child = current[segment]
            if not _fits(child, next_segment):
                child = _resolve_conflict(child, path, index + 1, on_conflict)
                _assign(current, segment, child)
        current = child

    _assign(current, path[-1], value)
    return root


def _resolve_conflict(found: Any, path: Sequence[PathSegment], index: int, on_conflict: str):
    segment = path[index]
    expected = 'array' if is_index_segment(segment) else 'object'
    where = format_path(path[:index])
    if on_conflict != 'overwrite':
        raise PathConflict(
            path,
            index,
            f"Cannot set {format_path(path)}: {where} is {value_type(found)}, expected {expected}",
        )
    logger.warning(f"Overwriting {value_type(found)} at {where} with a new {expected} to set {format_path(path)}")
    return _new_container(segment)
