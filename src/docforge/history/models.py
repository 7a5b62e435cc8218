"""
Version history data models.

VersionEntry is immutable once created. VersionHistory is the whole state of
one document's draft history: an ordered entry list plus a cursor. Sequence
numbers always equal position + 1; ``renumbered()`` restores that after any
truncation or trimming.

Keep this file under 150 lines.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime


class SaveReason:
    """Reason codes for a save that did not create a version."""

    NO_CHANGE = "no-change"
    TOO_LARGE = "too-large"
    STORAGE_ERROR = "storage-error"


@dataclass(frozen=True)
class VersionEntry:
    """One saved draft."""

    sequence_number: int
    content: str
    saved_at: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def markdown(self) -> str:
        return self.content


@dataclass
class VersionHistory:
    """Entries plus the index of the current one (-1 when empty)."""

    entries: list[VersionEntry] = field(default_factory=list)
    cursor: int = -1

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def at_tip(self) -> bool:
        return self.cursor == len(self.entries) - 1

    @property
    def current(self) -> VersionEntry | None:
        if self.is_empty:
            return None
        return self.entries[self.cursor]

    def renumbered(self) -> "VersionHistory":
        """Copy with sequence numbers reset to position + 1."""
        entries = [
            e if e.sequence_number == i + 1 else replace(e, sequence_number=i + 1)
            for i, e in enumerate(self.entries)
        ]
        return VersionHistory(entries=entries, cursor=self.cursor)


@dataclass(frozen=True)
class SaveResult:
    """Outcome of save_version()."""

    success: bool
    version_number: int | None = None
    total_versions: int = 0
    reason: str | None = None


@dataclass(frozen=True)
class VersionView:
    """The current draft plus navigation state, as shown to a UI."""

    content: str
    version_number: int
    total_versions: int
    can_go_back: bool
    can_go_forward: bool
    saved_at: str = ""

    @property
    def markdown(self) -> str:
        return self.content

    @classmethod
    def of(cls, history: VersionHistory) -> "VersionView":
        entry = history.entries[history.cursor]
        return cls(
            content=entry.content,
            version_number=entry.sequence_number,
            total_versions=len(history.entries),
            can_go_back=history.cursor > 0,
            can_go_forward=history.cursor < len(history.entries) - 1,
            saved_at=entry.saved_at,
        )
