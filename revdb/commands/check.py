"""Check command - screen paths against a ledger of revisions."""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..revisions import Revision, RevisionLedger, normalize_revision, screen_path


def build_ledger(revisions: list[Revision], *, normalize: bool = False) -> RevisionLedger:
    """Register revisions in order, as a loader would.

    With normalize, entry paths are stored in normalize_path form so they
    match normalized queries. The same input object maps to the same
    normalized copy, so repeats stay identity re-adds.
    """
    ledger = RevisionLedger()
    normalized: dict[int, Revision] = {}
    for revision in revisions:
        if normalize:
            revision = normalized.setdefault(id(revision), normalize_revision(revision))
        ledger.add_revision(revision)
    return ledger


def run_check(
    paths: list[str],
    revisions: list[Revision],
    *,
    normalize: bool = True,
    output_json: bool = False,
    fail_on_blacklisted: bool = False,
) -> int:
    """Report which paths the revisions blacklist.

    Returns:
        1 if fail_on_blacklisted and any path is blacklisted, else 0
    """
    ledger = build_ledger(revisions, normalize=normalize)
    results = [screen_path(ledger, p, normalize=normalize) for p in paths]
    blacklisted = [r for r in results if r.blacklisted]

    if output_json:
        data = {
            "revisions": [r.name for r in ledger],
            "results": [r.to_dict() for r in results],
            "blacklisted": len(blacklisted),
        }
        print(json.dumps(data, indent=2))
    else:
        if not ledger:
            Console(stderr=True).print("No revisions given; nothing is blacklisted.", style="yellow")

        table = Table(title="Path screening")
        table.add_column("Path", style="cyan")
        table.add_column("Status")
        table.add_column("Revisions")
        for result in results:
            status = "[red]blacklisted[/red]" if result.blacklisted else "[green]original[/green]"
            table.add_row(escape(result.path), status, escape(", ".join(result.revisions)) or "-")

        console = Console()
        console.print(table)
        console.print(f"\n{len(blacklisted)} of {len(results)} path(s) blacklisted")

    if fail_on_blacklisted and blacklisted:
        return 1
    return 0
