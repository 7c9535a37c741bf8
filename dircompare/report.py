"""Console reporting for a comparison run."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO

from dircompare.models import ActionOutcome, Comparison
from dircompare.reconcile import a_only, b_only


def print_groups(title: str, groups: Dict[str, List[Path]], out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    for fingerprint, paths in groups.items():
        print(f"{title} (fingerprint = {fingerprint})", file=out)
        for path in paths:
            print(f"  {path}", file=out)


def print_comparison(comparison: Comparison, out: Optional[TextIO] = None) -> None:
    """Print A-only and B-only groups followed by summary counts."""
    out = out or sys.stdout
    a_index, b_index = comparison.a_index, comparison.b_index

    print_groups("Only in A", a_only(a_index, b_index), out)
    print_groups("Only in B", b_only(a_index, b_index), out)

    print("\n=== Comparison Summary ===", file=out)
    print(f"Duplicate files in B: {len(comparison.result.b_duplicates)}", file=out)
    print(f"Files unique to B: {len(comparison.result.b_unique)}", file=out)

    unreadable = len(a_index.failures) + len(b_index.failures)
    if unreadable:
        print(f"⚠️  Unreadable files skipped: {unreadable}", file=out)
        for failure in a_index.failures + b_index.failures:
            print(f"  - {failure.message}", file=out)


def print_action_outcome(outcome: ActionOutcome, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    for path in outcome.deleted:
        print(f"✅ Deleted {path}", file=out)
    for failure in outcome.delete_failures:
        print(f"❌ Delete failed {failure.message}", file=out)
    if "y" in outcome.actions:
        print("Delete task finished", file=out)

    labels = {"o": "Duplicate file list", "u": "Unique file list"}
    for action, path in outcome.written.items():
        print(f"✅ {labels[action]} written to {path}", file=out)
    for failure in outcome.output_failures:
        print(f"❌ {failure.message}", file=out)


def action_prompt(dir_b: Path) -> str:
    """Menu text shown when no action argument was given."""
    return (
        f"Comparison finished, choose actions for {dir_b}\n"
        "  [y] delete duplicate files in B\n"
        "  [o] write duplicate list\n"
        "  [u] write list of files unique to B\n"
        "> "
    )
