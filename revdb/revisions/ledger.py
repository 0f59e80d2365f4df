"""
Ordered, name-deduplicated collection of active revisions.

Key property: at most one revision per name. Adding a revision whose name is
already held replaces the held one in place; removing needs the exact object.
"""

from __future__ import annotations

import logging
from typing import Iterator

from .revision import Revision

logger = logging.getLogger(__name__)


class RevisionLedger:
    """Active revisions of a database, in insertion/replacement order.

    The ledger holds shared references. A revision removed here stays alive
    for anyone else holding it.

    Not thread-safe: callers serialize mutations. Concurrent
    `is_file_blacklisted` calls are fine as long as nothing mutates.
    """

    def __init__(self, database_path: str = ""):
        self.database_path = database_path
        self._revisions: list[Revision] = []

    # --- Mutation ---

    def add_revision(self, revision: Revision | None) -> None:
        """Register a revision.

        None is ignored. Re-adding a held revision is a no-op. A revision with
        the same name as a held one takes over its slot.
        """
        if revision is None:
            return

        for i, existing in enumerate(self._revisions):
            if existing is revision:
                return
            if existing.same_name(revision):
                self._revisions[i] = revision
                logger.debug("replaced revision %r at position %d", revision.name, i)
                return

        self._revisions.append(revision)
        logger.debug("added revision %r", revision.name)

    def remove_revision(self, revision: Revision | None) -> None:
        """Remove the entry that is `revision` (identity, not name).

        A different object with the same name is left alone. Missing
        revisions and None are ignored.
        """
        for i, existing in enumerate(self._revisions):
            if existing is revision:
                del self._revisions[i]
                logger.debug("removed revision %r", existing.name)
                return

    def remove_file(self, path: str) -> bool:
        """Drop `path` from every revision's file sets.

        Returns:
            True if any revision held the path
        """
        removed = False
        for revision in self._revisions:
            removed = revision.remove_file(path) or removed
        if removed:
            logger.debug("removed file %r from ledger", path)
        return removed

    # --- Query methods ---

    def is_file_blacklisted(self, path: str) -> bool:
        """True if any held revision adds or removes `path`."""
        return any(revision.is_blacklisted(path) for revision in self._revisions)

    def blacklisting_revisions(self, path: str) -> list[Revision]:
        """All revisions that blacklist `path`, in ledger order."""
        return [r for r in self._revisions if r.is_blacklisted(path)]

    def get_revision(self, name: str) -> Revision | None:
        """Get the held revision with this name, if any.

        Name-based removal is `ledger.remove_revision(ledger.get_revision(name))`.
        """
        for revision in self._revisions:
            if revision.name == name:
                return revision
        return None

    @property
    def revisions(self) -> list[Revision]:
        return list(self._revisions)

    def copy(self) -> RevisionLedger:
        """Copy the ledger. Revisions are shared, the list is not."""
        other = RevisionLedger(self.database_path)
        other._revisions = list(self._revisions)
        return other

    def __len__(self) -> int:
        return len(self._revisions)

    def __iter__(self) -> Iterator[Revision]:
        return iter(list(self._revisions))

    def __getitem__(self, index: int) -> Revision:
        return self._revisions[index]

    def __repr__(self) -> str:
        names = [r.name for r in self._revisions]
        return f"RevisionLedger(database_path={self.database_path!r}, revisions={names!r})"
