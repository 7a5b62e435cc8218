"""
Stored history schema -- the JSON document kept under each history key.

Backends only see strings. This module is the boundary where those strings
are parsed back into VersionHistory, with pydantic checking shape and cursor
bounds so a corrupted or hand-edited record never reaches the state machine.

    {"cursor": 1, "entries": [{"sequence_number": 1, "content": "...",
                               "saved_at": "2026-01-01T09:00:00"}, ...]}

Keep this file under 100 lines.
"""

import logging

from pydantic import BaseModel, Field, ValidationError, model_validator

from .models import VersionEntry, VersionHistory

logger = logging.getLogger(__name__)

KEY_PREFIX = "history:"


class StoredEntry(BaseModel):
    sequence_number: int = Field(ge=1)
    content: str
    saved_at: str = ""


class StoredHistory(BaseModel):
    entries: list[StoredEntry] = Field(default_factory=list)
    cursor: int = Field(default=-1, ge=-1)

    @model_validator(mode="after")
    def _cursor_in_range(self) -> "StoredHistory":
        if not self.entries and self.cursor != -1:
            raise ValueError("cursor must be -1 for an empty history")
        if self.entries and not 0 <= self.cursor < len(self.entries):
            raise ValueError(
                f"cursor {self.cursor} out of range for {len(self.entries)} entries"
            )
        return self


def history_key(identifier: str) -> str:
    """Storage key for one document's history."""
    return f"{KEY_PREFIX}{identifier}"


def dump_history(history: VersionHistory) -> str:
    stored = StoredHistory(
        entries=[
            StoredEntry(
                sequence_number=e.sequence_number, content=e.content, saved_at=e.saved_at
            )
            for e in history.entries
        ],
        cursor=history.cursor,
    )
    return stored.model_dump_json()


def load_history(raw: str | None) -> VersionHistory:
    """Parse a stored record. Missing or invalid records load as empty."""
    if not raw:
        return VersionHistory()
    try:
        stored = StoredHistory.model_validate_json(raw)
    except ValidationError as e:
        logger.error(f"[HistorySchema] Discarding unreadable history: {e.error_count()} errors")
        return VersionHistory()
    history = VersionHistory(
        entries=[
            VersionEntry(
                sequence_number=e.sequence_number, content=e.content, saved_at=e.saved_at
            )
            for e in stored.entries
        ],
        cursor=stored.cursor,
    )
    return history.renumbered()
