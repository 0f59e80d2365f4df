"""Show command - print the ledger built from revisions."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..revisions import FileSet, Revision
from ..revisions.notation import format_revision
from .check import build_ledger


def _files(files: FileSet | None) -> list[str] | None:
    return None if files is None else list(files)


def _cell(files: FileSet | None) -> str:
    if files is None:
        return "[dim]-[/dim]"
    return "\n".join(escape(p) for p in files) or "[dim](empty)[/dim]"


def revision_to_dict(revision: Revision) -> dict[str, Any]:
    return {
        "name": revision.name,
        "database_path": revision.database_path,
        "files_added": _files(revision.files_added),
        "files_removed": _files(revision.files_removed),
        "files_modified": _files(revision.files_modified),
        "notation": format_revision(revision),
    }


def run_show(revisions: list[Revision], *, output_json: bool = False) -> int:
    """Print the active revisions after name replacement."""
    ledger = build_ledger(revisions)
    distinct = {id(r): r for r in revisions}.values()
    replaced = sum(1 for r in distinct if ledger.get_revision(r.name) is not r)

    if output_json:
        print(json.dumps({"revisions": [revision_to_dict(r) for r in ledger]}, indent=2))
        return 0

    console = Console()
    if not ledger:
        console.print("Ledger is empty.")
        return 0

    table = Table(title="Active revisions")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Database")
    table.add_column("Added")
    table.add_column("Removed")
    table.add_column("Modified")
    for i, revision in enumerate(ledger):
        table.add_row(
            str(i),
            escape(revision.name),
            escape(revision.database_path) or "-",
            _cell(revision.files_added),
            _cell(revision.files_removed),
            _cell(revision.files_modified),
        )
    console.print(table)

    if replaced:
        Console(stderr=True).print(
            f"{replaced} revision(s) replaced by a later revision of the same name", style="dim"
        )
    return 0
