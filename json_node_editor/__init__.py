"""Core logic for the JSON Node Editor.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- render a node's rows as editable JSON text
- format structural paths in bracket notation
- install a value into a document at a path
and the `EditSession` that runs parse -> patch -> commit on save.
"""
from .accessors import get_value_by_path, set_value_by_path
from .errors import DocumentParseFailure, EditorError, MalformedInput, PathConflict
from .flattening import flatten_rows
from .nodes import NodeRow, SelectedNode, build_node, build_rows
from .paths import format_path, parse_path
from .session import EditSession, SessionState
from .store import DocumentStore

__all__ = [
    'DocumentParseFailure',
    'DocumentStore',
    'EditSession',
    'EditorError',
    'MalformedInput',
    'NodeRow',
    'PathConflict',
    'SelectedNode',
    'SessionState',
    'build_node',
    'build_rows',
    'flatten_rows',
    'format_path',
    'get_value_by_path',
    'parse_path',
    'set_value_by_path',
]
