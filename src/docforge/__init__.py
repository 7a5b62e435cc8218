"""
docforge -- the shared core of the document-authoring tools.

  - scoring: validate_document() rubric for strategic proposals
  - history: VersionStore draft history with branch discard
  - cli: `docforge` command-line front end
"""

from .history import VersionStore, create_version_store
from .scoring import ValidationReport, validate_document

__version__ = "0.1.0"

__all__ = ["ValidationReport", "VersionStore", "create_version_store", "validate_document"]
