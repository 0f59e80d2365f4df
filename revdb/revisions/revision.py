"""A single database revision (change-set)."""

from __future__ import annotations

from dataclasses import dataclass

from .file_set import FileSet


@dataclass(eq=False)
class Revision:
    """Files added, removed and modified by one revision.

    `name` is the key a RevisionLedger deduplicates on; do not change it while
    the revision is held by a ledger. Any of the three file sets may be None,
    which behaves as an empty set.

    Equality is identity: two revisions with the same name are still
    distinct objects. Use `same_name` for the name comparison.
    """

    name: str
    files_added: FileSet | None = None
    files_removed: FileSet | None = None
    files_modified: FileSet | None = None
    database_path: str = ""

    def is_blacklisted(self, path: str) -> bool:
        """True if this revision adds or removes `path`.

        Modified files still resolve through the original source, so they
        never blacklist.
        """
        return (self.files_removed is not None and self.files_removed.contains(path)) or (
            self.files_added is not None and self.files_added.contains(path)
        )

    def same_name(self, other: Revision) -> bool:
        return self.name == other.name

    def remove_file(self, path: str) -> bool:
        """Drop `path` from every present file set.

        Returns:
            True if any file set held the path
        """
        removed = False
        for files in (self.files_added, self.files_removed, self.files_modified):
            if files is not None:
                removed = files.remove(path) or removed
        return removed

    def copy(self) -> Revision:
        """Copy this revision, sharing its file sets with the original."""
        return Revision(
            name=self.name,
            files_added=self.files_added,
            files_removed=self.files_removed,
            files_modified=self.files_modified,
            database_path=self.database_path,
        )
