"""Pytest configuration and fixtures."""

import pytest

from revdb.revisions import FileSet, Revision, RevisionLedger


@pytest.fixture
def rev_adds_a() -> Revision:
    """Revision adding a.osg."""
    return Revision(name="r1", files_added=FileSet(["a.osg"]))


@pytest.fixture
def rev_removes_b() -> Revision:
    """Revision removing b.osg and modifying m.osg."""
    return Revision(
        name="r2",
        files_removed=FileSet(["b.osg"]),
        files_modified=FileSet(["m.osg"]),
    )


@pytest.fixture
def ledger(rev_adds_a: Revision, rev_removes_b: Revision) -> RevisionLedger:
    """Ledger holding r1 then r2."""
    ledger = RevisionLedger()
    ledger.add_revision(rev_adds_a)
    ledger.add_revision(rev_removes_b)
    return ledger
