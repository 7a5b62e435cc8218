"""
VersionStore -- linear undo/redo over saved drafts, with branch discard.

State machine per document:

  Empty ---save---> Populated (cursor on entry #1)

  save(content):
    same as cursor entry      -> no-op, reason "no-change"
    cursor at tip             -> append, cursor moves to new tip
    cursor rewound            -> cursor entry and everything after it are
                                 replaced by the new entry (future discarded)
    more than max_versions    -> oldest entries dropped, numbers stay dense
  back / forward              -> move cursor; None at either boundary

Every call reloads state from the backend and writes it back, so the store
holds no state of its own beyond configuration. One owner per history: there
is no locking.

Keep this file under 250 lines.
"""

import logging
from datetime import datetime

from ..config import DEFAULT_MAX_CONTENT_CHARS, DEFAULT_MAX_VERSIONS, load_settings
from ..security.validators import validate_positive_int, validate_storage_key
from .backends import InMemoryKeyValueStore, KeyValueStore, StorageError
from .models import SaveReason, SaveResult, VersionEntry, VersionHistory, VersionView
from .schema import dump_history, history_key, load_history

logger = logging.getLogger(__name__)


class VersionStore:
    """
    Draft history for one document.

    Usage:
        store = create_version_store("project-42")
        store.save_version("# Draft 1")
        store.save_version("# Draft 2")
        store.go_back()                      # VersionView of draft 1
        store.save_version("# Draft 1b")     # replaces draft 1, drops draft 2
        store.get_current_version().version_number  # 1
    """

    def __init__(
        self,
        identifier: str,
        backend: KeyValueStore | None = None,
        max_versions: int = DEFAULT_MAX_VERSIONS,
        max_content_chars: int = DEFAULT_MAX_CONTENT_CHARS,
    ):
        self.identifier = validate_storage_key(identifier)
        self._key = history_key(self.identifier)
        self._backend = backend if backend is not None else InMemoryKeyValueStore()
        self._max_versions = validate_positive_int(max_versions, "max_versions")
        self._max_content_chars = validate_positive_int(max_content_chars, "max_content_chars")

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def _load(self) -> VersionHistory:
        try:
            raw = self._backend.get(self._key)
        except StorageError as e:
            logger.error(f"[VersionStore] Failed to load {self._key}: {e}")
            return VersionHistory()
        return load_history(raw)

    def _persist(self, history: VersionHistory) -> bool:
        try:
            self._backend.put(self._key, dump_history(history))
            return True
        except StorageError as e:
            logger.error(f"[VersionStore] Failed to save {self._key}: {e}")
            return False

    def snapshot(self) -> VersionHistory:
        """The full stored history (entries and cursor)."""
        return self._load()

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def save_version(self, content: str) -> SaveResult:
        """Save a new draft. See the module docstring for the rules."""
        if not isinstance(content, str):
            raise TypeError(f"content must be str, not {type(content).__name__}")

        history = self._load()
        total = len(history.entries)

        if len(content) > self._max_content_chars:
            logger.warning(
                f"[VersionStore] {self.identifier}: draft of {len(content)} chars "
                f"exceeds {self._max_content_chars}"
            )
            return SaveResult(False, total_versions=total, reason=SaveReason.TOO_LARGE)

        current = history.current
        if current is not None and current.content == content:
            return SaveResult(
                False,
                version_number=current.sequence_number,
                total_versions=total,
                reason=SaveReason.NO_CHANGE,
            )

        entries = list(history.entries)
        if not history.is_empty and not history.at_tip:
            discarded = total - history.cursor
            entries = entries[: history.cursor]
            logger.info(
                f"[VersionStore] {self.identifier}: discarding {discarded} version(s) "
                f"from #{history.cursor + 1}"
            )
        entries.append(VersionEntry(sequence_number=len(entries) + 1, content=content))

        if len(entries) > self._max_versions:
            dropped = len(entries) - self._max_versions
            entries = entries[dropped:]
            logger.debug(f"[VersionStore] {self.identifier}: trimmed {dropped} oldest")

        updated = VersionHistory(entries=entries, cursor=len(entries) - 1).renumbered()
        if not self._persist(updated):
            return SaveResult(False, total_versions=total, reason=SaveReason.STORAGE_ERROR)

        return SaveResult(
            True,
            version_number=updated.cursor + 1,
            total_versions=len(updated.entries),
        )

    def _move(self, step: int) -> VersionView | None:
        history = self._load()
        target = history.cursor + step
        if history.is_empty or not 0 <= target < len(history.entries):
            return None
        history.cursor = target
        if not self._persist(history):
            logger.warning(
                f"[VersionStore] {self.identifier}: cursor move to #{target + 1} not persisted"
            )
        return VersionView.of(history)

    def go_back(self) -> VersionView | None:
        """Step to the previous draft, or None at the first one."""
        return self._move(-1)

    def go_forward(self) -> VersionView | None:
        """Step to the next draft, or None at the newest one."""
        return self._move(1)

    def get_current_version(self) -> VersionView | None:
        history = self._load()
        if history.is_empty:
            return None
        return VersionView.of(history)

    def load_draft(self) -> VersionEntry | None:
        """The draft at the cursor, without navigation state."""
        return self._load().current


def create_version_store(
    identifier: str,
    backend: KeyValueStore | None = None,
    max_versions: int | None = None,
    max_content_chars: int | None = None,
) -> VersionStore:
    """Build a VersionStore, filling unset limits from the environment."""
    settings = load_settings()
    return VersionStore(
        identifier,
        backend=backend,
        max_versions=max_versions if max_versions is not None else settings.max_versions,
        max_content_chars=(
            max_content_chars if max_content_chars is not None else settings.max_content_chars
        ),
    )


def time_since(iso_date: str, now: datetime | None = None) -> str:
    """Human-readable age of a save timestamp ("just now", "5 mins ago")."""
    if not iso_date:
        return "--"
    try:
        saved = datetime.fromisoformat(iso_date)
    except ValueError:
        return "--"
    now = now or datetime.now(saved.tzinfo)
    # naive timestamps are local time; compare in local time when only one side is aware
    if (saved.tzinfo is None) != (now.tzinfo is None):
        saved = saved.astimezone().replace(tzinfo=None)
        now = now.astimezone().replace(tzinfo=None)
    minutes = int((now - saved).total_seconds() // 60)

    if minutes < 1:
        return "just now"
    if minutes == 1:
        return "1 min ago"
    if minutes < 60:
        return f"{minutes} mins ago"

    hours = minutes // 60
    if hours == 1:
        return "1 hour ago"
    if hours < 24:
        return f"{hours} hours ago"

    return saved.date().isoformat()
