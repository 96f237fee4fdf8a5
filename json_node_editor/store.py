from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class DocumentStore:
    """In-memory holder of the serialized document.

    `contents` is the text shown in the raw editor, `json` is the derived
    copy used by the node view. Both are replaced on every commit; the last
    writer wins.
    """

    def __init__(self, contents: str = "{}"):
        self.contents = contents
        self.has_changes = False
        self.json: Optional[str] = contents

    def get_contents(self) -> str:
        return self.contents

    def set_contents(self, contents: str, has_changes: bool = True) -> None:
        self.contents = contents
        self.has_changes = has_changes
        logger.debug(f"Document contents replaced ({len(contents)} chars, changed={has_changes})")

    def set_json(self, text: str) -> None:
        self.json = text
