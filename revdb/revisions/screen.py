"""Screening of requested paths against a revision ledger."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Any

from .file_set import FileSet
from .ledger import RevisionLedger
from .revision import Revision


@dataclass(frozen=True)
class ScreenResult:
    """Outcome of screening one requested path."""

    requested: str
    path: str  # form used for the ledger query
    blacklisted: bool
    revisions: list[str] = field(default_factory=list)  # names of blacklisting revisions

    def to_dict(self) -> dict[str, Any]:
        return {
            "requested": self.requested,
            "path": self.path,
            "blacklisted": self.blacklisted,
            "revisions": list(self.revisions),
        }


def normalize_path(path: str) -> str:
    """Normalize a path into the form revisions are populated with.

    Backslashes become "/", repeated separators and "." segments collapse.
    ".." is kept as written and case is preserved.
    """
    path = path.strip().replace("\\", "/")
    if not path:
        return path
    leading = "/" if path.startswith("/") else ""
    parts = [p for p in path.split("/") if p and p != "."]
    if not parts:
        return leading or "."
    return leading + posixpath.join(*parts)


def screen_path(ledger: RevisionLedger, path: str, *, normalize: bool = True) -> ScreenResult:
    """Check one requested path against the ledger.

    Args:
        ledger: Active revisions
        path: Path as requested
        normalize: Apply normalize_path before the query; pass False when the
            caller already holds the ledger's path form

    Returns:
        ScreenResult naming every revision that blacklists the path
    """
    query = normalize_path(path) if normalize else path
    hits = ledger.blacklisting_revisions(query)
    return ScreenResult(
        requested=path,
        path=query,
        blacklisted=bool(hits),
        revisions=[r.name for r in hits],
    )


def normalize_revision(revision: Revision) -> Revision:
    """Copy a revision with every entry path passed through normalize_path.

    Absent file sets stay absent. The original revision is not modified.
    """

    def _normalized(files: FileSet | None) -> FileSet | None:
        if files is None:
            return None
        return FileSet(normalize_path(p) for p in files)

    return Revision(
        name=revision.name,
        files_added=_normalized(revision.files_added),
        files_removed=_normalized(revision.files_removed),
        files_modified=_normalized(revision.files_modified),
        database_path=revision.database_path,
    )
