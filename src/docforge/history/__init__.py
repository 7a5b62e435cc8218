"""
Draft Version History -- linear undo/redo with branch discard.

  - models.py: VersionEntry, VersionHistory, SaveResult, VersionView
  - schema.py: stored JSON record, parsed with pydantic at the boundary
  - backends.py: KeyValueStore protocol + in-memory, JSON-file, SQLite
  - store.py: VersionStore state machine and create_version_store()

The store owns transition rules only. Where the history lives is whatever
KeyValueStore the host passes in.
"""

from .backends import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    SqliteKeyValueStore,
    StorageError,
)
from .models import SaveReason, SaveResult, VersionEntry, VersionHistory, VersionView
from .store import VersionStore, create_version_store, time_since
