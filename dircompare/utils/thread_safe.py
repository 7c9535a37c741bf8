"""Concurrency-safe accumulators for parallel indexing.

This module provides lock-guarded data structures used while many workers
fingerprint files at once, so concurrent inserts never lose entries.
"""

import asyncio
from pathlib import Path
from typing import Dict, List, Any
from datetime import datetime

from dircompare.errors import FileReadFailure
from dircompare.utils.logger import log_debug, log_info


class ThreadSafeIndex:
    """Fingerprint -> paths accumulator with single-writer inserts."""

    def __init__(self):
        self._entries: Dict[str, List[Path]] = {}
        self._failures: List[FileReadFailure] = []
        self._lock = asyncio.Lock()

    async def add(self, fingerprint: str, path: Path) -> int:
        """Append a path under its fingerprint.

        Returns:
            Number of paths now recorded for that fingerprint
        """
        async with self._lock:
            paths = self._entries.setdefault(fingerprint, [])
            paths.append(path)
            if len(paths) > 1:
                log_debug("Fingerprint shared within tree", fingerprint=fingerprint, count=len(paths))
            return len(paths)

    async def record_failure(self, failure: FileReadFailure) -> None:
        """Record a file that could not be fingerprinted."""
        async with self._lock:
            self._failures.append(failure)

    async def snapshot(self) -> tuple:
        """Copy out (entries, failures) for building the read-only index."""
        async with self._lock:
            entries = {fp: list(paths) for fp, paths in self._entries.items()}
            return entries, list(self._failures)


class ProcessingStats:
    """Statistics tracking for one indexing pass."""

    def __init__(self, label: str = ""):
        self.label = label
        self._lock = asyncio.Lock()
        self._stats = {
            "total_files": 0,
            "processed": 0,
            "fingerprinted": 0,
            "failed": 0,
            "start_time": None,
            "end_time": None,
        }

    async def record_start(self):
        """Record processing start time."""
        async with self._lock:
            self._stats["start_time"] = datetime.now()
            log_debug("Indexing started", root=self.label, timestamp=self._stats["start_time"].isoformat())

    async def record_end(self):
        """Record processing end time."""
        async with self._lock:
            self._stats["end_time"] = datetime.now()
            log_debug("Indexing finished", root=self.label, timestamp=self._stats["end_time"].isoformat())

    async def set_total_files(self, count: int):
        """Set total number of discovered files."""
        async with self._lock:
            self._stats["total_files"] = count

    async def record_fingerprinted(self) -> int:
        """Record a successfully fingerprinted file; returns files processed so far."""
        async with self._lock:
            self._stats["processed"] += 1
            self._stats["fingerprinted"] += 1
            return self._stats["processed"]

    async def record_failure(self) -> int:
        """Record a file that failed; returns files processed so far."""
        async with self._lock:
            self._stats["processed"] += 1
            self._stats["failed"] += 1
            return self._stats["processed"]

    async def get_summary(self) -> Dict[str, Any]:
        """Get statistics summary with derived rates."""
        async with self._lock:
            stats = dict(self._stats)

            if stats["start_time"] and stats["end_time"]:
                duration = (stats["end_time"] - stats["start_time"]).total_seconds()
                stats["duration_seconds"] = duration
                stats["files_per_second"] = (
                    stats["processed"] / duration if duration > 0 else 0
                )

            if stats["start_time"]:
                stats["start_time"] = stats["start_time"].isoformat()
            if stats["end_time"]:
                stats["end_time"] = stats["end_time"].isoformat()

            return stats

    async def log_progress(self):
        """Log current progress."""
        async with self._lock:
            processed = self._stats["processed"]
            total = self._stats["total_files"]
            percent = (processed / total * 100) if total > 0 else 0

            log_info(
                "Indexing progress",
                root=self.label,
                processed=processed,
                total=total,
                percent=f"{percent:.1f}%",
                failed=self._stats["failed"],
            )
