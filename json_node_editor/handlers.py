from __future__ import annotations

import logging
import os
import tempfile
from typing import Optional

import gradio as gr

from .accessors import has_path
from .config import EditorConfig
from .errors import EditorError
from .flattening import flatten_rows
from .io_utils import dump_json_text, parse_document_text, parse_json_text, read_json_content
from .nodes import build_node, iter_node_paths, list_node_paths
from .paths import format_path, parse_path
from .session import EditSession, log_notification
from .store import DocumentStore

logger = logging.getLogger(__name__)


def notify_user(ok: bool, message: str) -> None:
    log_notification(ok, message)
    if ok:
        gr.Info(message)
    else:
        gr.Warning(message)


def _empty_outputs(status: str):
    return (
        None,
        "",
        gr.update(choices=[], value=None),
        gr.update(value="", visible=True),
        gr.update(value="", visible=False),
        "$",
        gr.update(visible=False),
        gr.update(visible=False),
        gr.update(visible=False),
        status,
    )


def view_outputs(session: Optional[EditSession], status: str = ""):
    """Outputs shared by every editor event, in the order `app.py` wires them."""
    if session is None:
        return _empty_outputs(status)

    document = parse_document_text(session.store.json)
    choices = list_node_paths(document)
    editing = session.editing
    return (
        session,
        session.store.get_contents(),
        gr.update(choices=choices, value=session.node.id if session.node.id in choices else None),
        gr.update(value=flatten_rows(session.node.rows, session.config), visible=not editing),
        gr.update(value=session.buffer, visible=editing),
        format_path(session.node.path),
        gr.update(visible=not editing),
        gr.update(visible=editing),
        gr.update(visible=editing),
        status,
    )


def _first_node_path(document):
    return next(iter_node_paths(document), ())


def load_document_handler(file_obj, config: Optional[EditorConfig] = None):
    if file_obj is None:
        return _empty_outputs("No file uploaded.")

    try:
        document = read_json_content(file_obj)
    except Exception as e:
        return _empty_outputs(f"Error parsing JSON: {str(e)}")

    config = config or EditorConfig()
    text = dump_json_text(document, config)
    store = DocumentStore(text)
    session = EditSession(store, build_node(document, _first_node_path(document)), notify=notify_user, config=config)
    node_count = len(list_node_paths(document))
    logger.info(f"Loaded document with {node_count} nodes")
    return view_outputs(session, f"Successfully loaded. Found {node_count} editable nodes.")


def select_node_handler(session: Optional[EditSession], path_label):
    if session is None:
        return view_outputs(None, "No document loaded.")
    if not path_label:
        return view_outputs(session, "")

    try:
        path = parse_path(path_label)
        node = build_node(parse_document_text(session.store.json), path)
    except (ValueError, KeyError) as e:
        return view_outputs(session, f"Cannot select {path_label}: {e}")

    session.select(node)
    return view_outputs(session, "")


def begin_edit_handler(session: Optional[EditSession]):
    if session is None:
        return view_outputs(None, "No document loaded.")
    session.begin_edit()
    return view_outputs(session, f"Editing {session.node.id}")


def save_edit_handler(session: Optional[EditSession], buffer_text: str):
    if session is None:
        return view_outputs(None, "No document loaded.")
    if not session.editing:
        return view_outputs(session, "Nothing to save.")

    session.update_buffer(buffer_text)
    _, message = session.save()
    return view_outputs(session, message)


def cancel_edit_handler(session: Optional[EditSession]):
    if session is None:
        return view_outputs(None, "No document loaded.")
    session.cancel()
    return view_outputs(session, "Edit cancelled.")


def apply_raw_contents_handler(session: Optional[EditSession], raw_text: str):
    """Replace the whole document from the raw text editor. Last writer wins."""
    if session is None:
        return view_outputs(None, "No document loaded.")

    try:
        document = parse_json_text(raw_text)
    except EditorError as e:
        notify_user(False, str(e))
        return view_outputs(session, str(e))

    text = dump_json_text(document, session.config)
    session.store.set_contents(text, True)
    session.store.set_json(text)
    path = session.node.path if has_path(document, session.node.path) else _first_node_path(document)
    node = build_node(document, path)
    # A raw edit supersedes any node edit in progress.
    session.select(node)
    session.cancel()
    notify_user(True, "Document updated")
    return view_outputs(session, "Document updated")


def export_document_handler(session: Optional[EditSession], file_name: str):
    if session is None:
        return None, "No document loaded."

    if not file_name or not file_name.strip():
        file_name = "edited"
    file_name = file_name.strip()
    if not file_name.lower().endswith('.json'):
        file_name += '.json'

    temp_dir = tempfile.gettempdir()
    path = os.path.join(temp_dir, file_name)

    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(session.store.get_contents())
    except OSError as e:
        return None, f"Error during export: {str(e)}"

    session.store.has_changes = False
    return path, f"Export successful! Saved to {path}"
