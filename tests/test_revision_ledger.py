"""
Tests for RevisionLedger: name-keyed upsert, identity removal and the
aggregate blacklist query.
"""

from __future__ import annotations

import logging

import pytest

from revdb.revisions import FileSet, Revision, RevisionLedger


# -----------------------------------------------------------------------------
# add_revision
# -----------------------------------------------------------------------------


def test_add_none_is_ignored() -> None:
    ledger = RevisionLedger()
    ledger.add_revision(None)

    assert len(ledger) == 0


def test_re_adding_same_revision_keeps_one_entry(rev_adds_a: Revision) -> None:
    ledger = RevisionLedger()
    ledger.add_revision(rev_adds_a)
    ledger.add_revision(rev_adds_a)

    assert ledger.revisions == [rev_adds_a]


def test_same_name_replaces_in_place(ledger: RevisionLedger, rev_adds_a: Revision) -> None:
    replacement = Revision(name="r1", files_added=FileSet(["z.osg"]))
    ledger.add_revision(replacement)

    assert len(ledger) == 2
    assert ledger[0] is replacement
    assert ledger[1].name == "r2"
    assert rev_adds_a not in ledger.revisions


def test_distinct_names_append_in_order(ledger: RevisionLedger) -> None:
    r3 = Revision(name="r3")
    ledger.add_revision(r3)

    assert [r.name for r in ledger] == ["r1", "r2", "r3"]


# -----------------------------------------------------------------------------
# remove_revision
# -----------------------------------------------------------------------------


def test_remove_by_identity(ledger: RevisionLedger, rev_adds_a: Revision, rev_removes_b: Revision) -> None:
    ledger.remove_revision(rev_adds_a)

    assert ledger.revisions == [rev_removes_b]

    ledger.remove_revision(rev_adds_a)
    assert ledger.revisions == [rev_removes_b]


def test_remove_ignores_same_name_other_object(ledger: RevisionLedger) -> None:
    impostor = Revision(name="r1", files_added=FileSet(["a.osg"]))
    ledger.remove_revision(impostor)

    assert len(ledger) == 2
    assert ledger.is_file_blacklisted("a.osg")


def test_remove_none_is_ignored(ledger: RevisionLedger) -> None:
    ledger.remove_revision(None)

    assert len(ledger) == 2


def test_remove_by_name_is_layered_on_lookup(ledger: RevisionLedger, rev_removes_b: Revision) -> None:
    ledger.remove_revision(ledger.get_revision("r1"))

    assert ledger.revisions == [rev_removes_b]
    assert ledger.get_revision("r1") is None


def test_removed_revision_outlives_ledger_entry(ledger: RevisionLedger, rev_adds_a: Revision) -> None:
    ledger.remove_revision(rev_adds_a)

    assert rev_adds_a.is_blacklisted("a.osg")
    assert not ledger.is_file_blacklisted("a.osg")


# -----------------------------------------------------------------------------
# Queries
# -----------------------------------------------------------------------------


def test_empty_ledger_blacklists_nothing() -> None:
    assert not RevisionLedger().is_file_blacklisted("x")


def test_aggregate_query(ledger: RevisionLedger) -> None:
    assert ledger.is_file_blacklisted("a.osg")
    assert ledger.is_file_blacklisted("b.osg")
    assert not ledger.is_file_blacklisted("c.osg")
    assert not ledger.is_file_blacklisted("m.osg")


def test_replacement_scenario() -> None:
    ledger = RevisionLedger()
    assert not ledger.is_file_blacklisted("x")

    ledger.add_revision(Revision(name="rev1", files_added=FileSet(["x"])))
    assert ledger.is_file_blacklisted("x")

    ledger.add_revision(Revision(name="rev1", files_added=FileSet(["y"])))
    assert not ledger.is_file_blacklisted("x")
    assert ledger.is_file_blacklisted("y")
    assert len(ledger) == 1


def test_blacklisting_revisions_in_ledger_order(ledger: RevisionLedger) -> None:
    ledger.add_revision(Revision(name="r3", files_removed=FileSet(["a.osg"])))

    assert [r.name for r in ledger.blacklisting_revisions("a.osg")] == ["r1", "r3"]
    assert ledger.blacklisting_revisions("m.osg") == []


def test_remove_file_clears_all_revisions(ledger: RevisionLedger) -> None:
    ledger.add_revision(Revision(name="r3", files_removed=FileSet(["a.osg"])))

    assert ledger.remove_file("a.osg") is True
    assert not ledger.is_file_blacklisted("a.osg")
    assert ledger.remove_file("a.osg") is False
    assert len(ledger) == 3


# -----------------------------------------------------------------------------
# Container behavior
# -----------------------------------------------------------------------------


def test_copy_shares_revisions_not_list(ledger: RevisionLedger) -> None:
    ledger.database_path = "/data/terrain"
    copied = ledger.copy()
    copied.add_revision(Revision(name="r3"))

    assert copied.database_path == "/data/terrain"
    assert len(ledger) == 2
    assert len(copied) == 3
    assert copied[0] is ledger[0]


def test_revisions_property_is_a_snapshot(ledger: RevisionLedger) -> None:
    snapshot = ledger.revisions
    snapshot.clear()

    assert len(ledger) == 2


def test_index_out_of_range(ledger: RevisionLedger) -> None:
    with pytest.raises(IndexError):
        ledger[5]


def test_mutations_are_logged(caplog: pytest.LogCaptureFixture, rev_adds_a: Revision) -> None:
    ledger = RevisionLedger()
    with caplog.at_level(logging.DEBUG, logger="revdb.revisions.ledger"):
        ledger.add_revision(rev_adds_a)
        ledger.add_revision(Revision(name="r1"))
        ledger.remove_revision(ledger[0])

    messages = [r.getMessage() for r in caplog.records]
    assert messages == [
        "added revision 'r1'",
        "replaced revision 'r1' at position 0",
        "removed revision 'r1'",
    ]
