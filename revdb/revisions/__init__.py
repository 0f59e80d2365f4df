"""
Revision ledger for a virtual file database.

A revision records the files it added, removed or modified relative to a
baseline. The ledger holds the active revisions and answers one question
before any file is resolved: is this path superseded by a revision?

Components:
- file_set: FileSet, an unordered set of path strings
- revision: Revision, one named change-set (added / removed / modified)
- ledger: RevisionLedger, name-deduplicated ordered revisions + blacklist query
- notation: command-line notation for building revisions
- screen: path normalization and screening against a ledger

Design principles:
- Paths are compared exactly; normalization belongs to the caller
- Added and removed files are blacklisted; modified files are not
- Last write wins by name on add; removal is by identity only
"""

from .file_set import FileSet
from .revision import Revision
from .ledger import RevisionLedger
from .notation import parse_revision
from .screen import ScreenResult, normalize_path, normalize_revision, screen_path

__all__ = [
    "FileSet",
    "Revision",
    "RevisionLedger",
    "parse_revision",
    "ScreenResult",
    "normalize_path",
    "normalize_revision",
    "screen_path",
]
