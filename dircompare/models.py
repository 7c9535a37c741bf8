"""Data classes shared by the indexer, reconciler and action layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from dircompare.errors import DeleteFailure, FileReadFailure, OutputWriteFailure


@dataclass(frozen=True)
class FileRecord:
    """A regular file discovered under a directory root."""

    path: Path
    root: Path


@dataclass(frozen=True)
class FingerprintIndex:
    """Fingerprint -> paths mapping for one directory tree.

    Attributes:
        root: Directory the index was built from.
        entries: Each fingerprint mapped to every path under ``root`` whose
            content produced it. Several paths under one fingerprint mean the
            tree contains internal duplicates.
        failures: Files that were discovered but could not be read.
        stats: Counters from the indexing pass, if it was timed.
    """

    root: Path
    entries: Dict[str, List[Path]] = field(default_factory=dict)
    failures: List[FileReadFailure] = field(default_factory=list)
    stats: Dict[str, object] = field(default_factory=dict)

    def __contains__(self, fingerprint: object) -> bool:
        return fingerprint in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def fingerprints(self) -> List[str]:
        return list(self.entries)

    def paths_for(self, fingerprint: str) -> List[Path]:
        return list(self.entries.get(fingerprint, []))

    def all_paths(self) -> List[Path]:
        return [p for paths in self.entries.values() for p in paths]

    @property
    def file_count(self) -> int:
        return sum(len(paths) for paths in self.entries.values())


@dataclass(frozen=True)
class ReconciliationResult:
    """Partition of tree B's files against tree A.

    Every path in B's index lands in exactly one of the two lists.
    """

    b_duplicates: List[Path] = field(default_factory=list)
    b_unique: List[Path] = field(default_factory=list)


@dataclass(frozen=True)
class Comparison:
    """Both indices and the reconciliation derived from them."""

    a_index: FingerprintIndex
    b_index: FingerprintIndex
    result: ReconciliationResult


@dataclass
class ActionOutcome:
    """What the action layer did for one run."""

    actions: str = ""
    deleted: List[Path] = field(default_factory=list)
    delete_failures: List[DeleteFailure] = field(default_factory=list)
    written: Dict[str, Path] = field(default_factory=dict)
    output_failures: List[OutputWriteFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.delete_failures and not self.output_failures

    def written_path(self, action: str) -> Optional[Path]:
        return self.written.get(action)
