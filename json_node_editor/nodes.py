from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Sequence

from .accessors import get_value_by_path
from .kinds import ROW_TYPES, value_type
from .paths import Path, PathSegment, format_path


@dataclass(frozen=True)
class NodeRow:
    """One displayed child entry of a node."""

    key: Optional[str]
    value: Any
    type: str

    def __post_init__(self):
        if self.type not in ROW_TYPES:
            raise ValueError(f"Unknown row type: {self.type!r}")


@dataclass
class SelectedNode:
    id: str
    path: Path
    rows: List[NodeRow] = field(default_factory=list)


def build_rows(value: Any) -> List[NodeRow]:
    """Row view of a node.

    Objects give one keyed row per member (containers included, so the
    flattener can skip them). Arrays have no rows of their own; their
    elements are separate nodes. Scalars give a single keyless row.
    """
    if isinstance(value, dict):
        return [NodeRow(key=str(k), value=v, type=value_type(v)) for k, v in value.items()]
    if isinstance(value, list):
        return []
    return [NodeRow(key=None, value=value, type=value_type(value))]


def build_node(document: Any, path: Sequence[PathSegment] = ()) -> SelectedNode:
    """Build the selectable node at `path`. Raises KeyError when absent."""
    path = tuple(path)
    value = get_value_by_path(document, path)
    return SelectedNode(id=format_path(path), path=path, rows=build_rows(value))


def iter_node_paths(document: Any, path: Path = ()) -> Iterator[Path]:
    """Yield the path of every selectable node, depth first.

    Every object and every array element is a node; arrays themselves are
    not, and scalar object members are rows of their parent.
    """
    if not isinstance(document, list):
        yield path
    if isinstance(document, dict):
        children = document.items()
    elif isinstance(document, list):
        children = enumerate(document)
    else:
        return
    for key, child in children:
        if isinstance(document, list) or isinstance(child, (dict, list)):
            yield from iter_node_paths(child, path + (key,))


def list_node_paths(document: Any) -> List[str]:
    return [format_path(p) for p in iter_node_paths(document)]
