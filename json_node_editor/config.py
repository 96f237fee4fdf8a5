from __future__ import annotations

import logging
from typing import Literal

from pydantic import NonNegativeInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EditorConfig(BaseSettings):
    """Settings shared by the flattener, the patcher and the edit session.

    - indent: spaces used when serializing documents and flattened rows.
    - ensure_ascii: escape non-ASCII characters in serialized text.
    - on_conflict: 'error' refuses to descend through a scalar,
      'overwrite' replaces it with a new container and logs a warning.
    - log_level: level name passed to `setup_logging`.

    Every field can be set from a JSON_NODE_EDITOR_* environment variable.
    """

    model_config = SettingsConfigDict(env_prefix='JSON_NODE_EDITOR_', frozen=True)

    indent: NonNegativeInt = 2
    ensure_ascii: bool = False
    on_conflict: Literal['error', 'overwrite'] = 'error'
    log_level: str = 'INFO'

    @field_validator('on_conflict', mode='before')
    @classmethod
    def _lower_policy(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator('log_level', mode='before')
    @classmethod
    def _upper_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


DEFAULT_CONFIG = EditorConfig()


def setup_logging(level: str = 'INFO') -> None:
    """Configure root logging once for the app."""
    numeric = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.basicConfig(
        level=numeric,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    logging.getLogger().setLevel(numeric)
