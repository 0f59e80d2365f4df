"""Unordered set of file paths."""

from __future__ import annotations

from typing import Iterable, Iterator


class FileSet:
    """A set of path strings compared by exact string equality.

    No normalization or case folding happens here: callers must insert and
    query paths in the same form.
    """

    def __init__(self, paths: Iterable[str] | FileSet = ()):
        """Create a file set.

        Args:
            paths: Initial paths, or another FileSet to copy. The copy never
                shares storage with the source.

        Raises:
            TypeError: paths is a single string rather than an iterable of paths
        """
        if isinstance(paths, str):
            raise TypeError(f"FileSet takes an iterable of paths, not a single path: {paths!r}")
        if isinstance(paths, FileSet):
            self._paths: set[str] = set(paths._paths)
        else:
            self._paths = set(paths)

    @property
    def paths(self) -> frozenset[str]:
        return frozenset(self._paths)

    def contains(self, path: str) -> bool:
        return path in self._paths

    def insert(self, path: str) -> None:
        """Add a path (no-op if already present)."""
        self._paths.add(path)

    def remove(self, path: str) -> bool:
        """Remove a path. Returns True if it was present."""
        if path in self._paths:
            self._paths.discard(path)
            return True
        return False

    def append(self, other: FileSet | None) -> None:
        """Insert every path of another file set."""
        if other is None:
            return
        self._paths.update(other._paths)

    def copy(self) -> FileSet:
        return FileSet(self)

    def is_empty(self) -> bool:
        return not self._paths

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileSet):
            return NotImplemented
        return self._paths == other._paths

    # Mutable container; keep it out of sets and dict keys.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FileSet({sorted(self._paths)!r})"
