from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Tuple

from .accessors import set_value_by_path
from .config import DEFAULT_CONFIG, EditorConfig
from .errors import EditorError
from .flattening import flatten_rows
from .io_utils import dump_json_text, parse_document_text, parse_json_text
from .nodes import SelectedNode, build_node
from .store import DocumentStore

logger = logging.getLogger(__name__)

Notifier = Callable[[bool, str], None]


class SessionState(Enum):
    VIEWING = 'viewing'
    EDITING = 'editing'


def log_notification(ok: bool, message: str) -> None:
    if ok:
        logger.info(message)
    else:
        logger.warning(message)


class EditSession:
    """Edit state for the currently selected node.

    Holds the edit buffer and runs parse -> patch -> commit on save. Every
    save attempt sends exactly one notification; failures leave the buffer
    and the stored document as they were.
    """

    def __init__(
        self,
        store: DocumentStore,
        node: SelectedNode,
        notify: Optional[Notifier] = None,
        config: EditorConfig = DEFAULT_CONFIG,
    ):
        self.store = store
        self.node = node
        self.notify = notify or log_notification
        self.config = config
        self.state = SessionState.VIEWING
        self.buffer = self._initial_buffer()

    @property
    def editing(self) -> bool:
        return self.state is SessionState.EDITING

    def _initial_buffer(self) -> str:
        return flatten_rows(self.node.rows, self.config)

    def _reset(self) -> None:
        self.state = SessionState.VIEWING
        self.buffer = self._initial_buffer()

    def begin_edit(self) -> str:
        if not self.editing:
            self.state = SessionState.EDITING
            self.buffer = self._initial_buffer()
        return self.buffer

    def update_buffer(self, text: str) -> None:
        if not self.editing:
            raise RuntimeError("Call begin_edit() before changing the edit buffer.")
        self.buffer = text

    def cancel(self) -> None:
        self._reset()

    def select(self, node: SelectedNode) -> None:
        """Switch to another node, dropping any edit in progress."""
        if node.id == self.node.id:
            self.node = node
            return
        if self.editing:
            logger.info(f"Discarding unsaved edit of {self.node.id} after selecting {node.id}")
        self.node = node
        self._reset()

    def save(self) -> Tuple[bool, str]:
        if not self.editing:
            raise RuntimeError("No edit in progress.")

        try:
            value = parse_json_text(self.buffer)
            document = parse_document_text(self.store.get_contents())
            updated = set_value_by_path(document, self.node.path, value, on_conflict=self.config.on_conflict)
            text = dump_json_text(updated, self.config)
        except EditorError as exc:
            message = str(exc)
            logger.debug(f"Save of {self.node.id} failed: {message}")
            self.notify(False, message)
            return False, message

        self.store.set_contents(text, True)
        self.store.set_json(text)
        self.node = build_node(updated, self.node.path)
        self._reset()

        message = "Node updated"
        self.notify(True, message)
        return True, message
