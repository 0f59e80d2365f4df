"""
Command-line notation for revisions.

    NAME[@DATABASE_PATH][:ENTRY[,ENTRY...]]

Each entry is a path with a one-character prefix:
    +path   added
    -path   removed
    ~path   modified

Examples:
    rev1:+a.osg,-b.osg
    rev2@/data/terrain:~tiles/0_0.osg
    empty

The first ":" ends the header, so database paths cannot contain one, and
the first "@" ends the name, so revision names cannot contain one.
"""

from __future__ import annotations

from .file_set import FileSet
from .revision import Revision

ADDED_PREFIX = "+"
REMOVED_PREFIX = "-"
MODIFIED_PREFIX = "~"

_CATEGORIES = {
    ADDED_PREFIX: "files_added",
    REMOVED_PREFIX: "files_removed",
    MODIFIED_PREFIX: "files_modified",
}


def parse_revision(text: str) -> Revision:
    """Build a Revision from its command-line notation.

    Categories with no entries stay None.

    Raises:
        ValueError: empty name, unknown entry prefix, or empty entry path
    """
    head, _, body = text.partition(":")
    name, _, database_path = head.partition("@")
    name = name.strip()
    if not name:
        raise ValueError(f"Revision has no name: {text!r}")

    sets: dict[str, FileSet] = {}
    for raw in body.split(","):
        entry = raw.strip()
        if not entry:
            continue
        attr = _CATEGORIES.get(entry[0])
        if attr is None:
            raise ValueError(
                f"Entry {entry!r} in revision {name!r} must start with "
                f"{ADDED_PREFIX!r}, {REMOVED_PREFIX!r} or {MODIFIED_PREFIX!r}"
            )
        path = entry[1:].strip()
        if not path:
            raise ValueError(f"Entry {entry!r} in revision {name!r} has no path")
        sets.setdefault(attr, FileSet()).insert(path)

    return Revision(name=name, database_path=database_path.strip(), **sets)


def format_revision(revision: Revision) -> str:
    """Render a revision back into notation (entries sorted per category)."""
    head = revision.name
    if revision.database_path:
        head += f"@{revision.database_path}"
    entries: list[str] = []
    for prefix, attr in _CATEGORIES.items():
        files = getattr(revision, attr)
        if files is not None:
            entries.extend(prefix + path for path in files)
    if not entries:
        return head
    return head + ":" + ",".join(entries)
