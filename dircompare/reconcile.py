"""Reconcile two fingerprint indices.

Only the presence of a fingerprint in tree A matters: every B path whose
fingerprint appears anywhere in A is a duplicate, every other B path is
unique, no matter how many copies either side holds.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from dircompare.models import FingerprintIndex, ReconciliationResult


def reconcile(a: FingerprintIndex, b: FingerprintIndex) -> ReconciliationResult:
    """Partition B's paths into duplicates of A and files unique to B."""
    b_duplicates: List[Path] = []
    b_unique: List[Path] = []

    for fingerprint in a:
        if fingerprint in b:
            b_duplicates.extend(b.paths_for(fingerprint))

    for fingerprint in b:
        if fingerprint not in a:
            b_unique.extend(b.paths_for(fingerprint))

    return ReconciliationResult(b_duplicates=b_duplicates, b_unique=b_unique)


def a_only(a: FingerprintIndex, b: FingerprintIndex) -> Dict[str, List[Path]]:
    """Fingerprint groups found in A but nowhere in B (informational)."""
    return {fp: a.paths_for(fp) for fp in a if fp not in b}


def b_only(a: FingerprintIndex, b: FingerprintIndex) -> Dict[str, List[Path]]:
    """Fingerprint groups found in B but nowhere in A."""
    return {fp: b.paths_for(fp) for fp in b if fp not in a}
