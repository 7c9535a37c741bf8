"""Parallel fingerprint indexer with a bounded worker pool.

Walks a directory tree, fingerprints every regular file concurrently and
collects the results into a fingerprint -> paths index. A file that cannot be
read is recorded and skipped; it never aborts the pass.
"""

import asyncio
import os
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Union

from tqdm import tqdm

from dircompare.config import Config, get_config
from dircompare.errors import FileReadFailure, PathUnreadable
from dircompare.fingerprint import fingerprint_file
from dircompare.models import FileRecord, FingerprintIndex
from dircompare.utils.logger import log_debug, log_error, log_info, log_warning
from dircompare.utils.thread_safe import ProcessingStats, ThreadSafeIndex


def check_root(root: Path) -> Path:
    """Ensure ``root`` is a listable directory.

    Raises:
        PathUnreadable: if it does not exist, is not a directory or cannot be listed.
    """
    if not root.exists():
        raise PathUnreadable(root, "does not exist")
    if not root.is_dir():
        raise PathUnreadable(root, "not a directory")
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise PathUnreadable(root, e.strerror or str(e)) from e
    return root


def discover_files(root: Path) -> List[FileRecord]:
    """Recursively collect regular files under ``root``.

    Symbolic links, directories and special entries are skipped. A nested
    directory that cannot be listed is logged and skipped.
    """
    records: List[FileRecord] = []
    stack: List[Path] = [root]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as entries:
                listed = list(entries)
        except OSError as e:
            log_warning("Skipping unreadable directory", path=str(current), error=str(e))
            continue
        for entry in listed:
            try:
                if entry.is_dir(follow_symlinks=False):
                    stack.append(Path(entry.path))
                elif entry.is_file(follow_symlinks=False):
                    records.append(FileRecord(path=Path(entry.path), root=root))
            except OSError as e:
                log_debug("Skipping entry", path=entry.path, error=str(e))
    return records


class AsyncIndexer:
    """Fingerprint indexer with worker pool for parallel file hashing."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize indexer.

        Args:
            config: Settings for worker count, hash algorithm and progress output
        """
        self.config = config or get_config()
        self.max_workers = self.config.max_workers

    async def index(self, root: Union[str, Path]) -> FingerprintIndex:
        """Build the fingerprint index for one directory tree.

        Args:
            root: Directory to index

        Returns:
            Completed index, including any per-file read failures

        Raises:
            PathUnreadable: if ``root`` cannot be traversed
        """
        root = check_root(Path(root))
        records = discover_files(root)

        accumulator = ThreadSafeIndex()
        stats = ProcessingStats(label=str(root))
        queue: asyncio.Queue = asyncio.Queue()
        for record in records:
            queue.put_nowait(record)

        await stats.set_total_files(len(records))
        await stats.record_start()
        log_info("Indexing directory", root=str(root), files=len(records), workers=self.max_workers)

        progress = tqdm(
            total=len(records),
            desc=f"Hashing {root}",
            unit="file",
            disable=not self.config.show_progress,
        )
        try:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                workers = [
                    self._worker(queue, accumulator, stats, executor, progress)
                    for _ in range(min(self.max_workers, len(records)))
                ]
                results = await asyncio.gather(*workers, return_exceptions=True)
        finally:
            progress.close()

        await stats.record_end()

        unexpected = [r for r in results if isinstance(r, BaseException)]
        if unexpected:
            raise unexpected[0]

        entries, failures = await accumulator.snapshot()
        summary = await stats.get_summary()
        log_info(
            "Indexing completed",
            root=str(root),
            fingerprints=len(entries),
            fingerprinted=summary["fingerprinted"],
            failed=summary["failed"],
            duration_seconds=summary.get("duration_seconds", 0),
        )

        return FingerprintIndex(root=root, entries=entries, failures=failures, stats=summary)

    async def _worker(
        self,
        queue: asyncio.Queue,
        accumulator: ThreadSafeIndex,
        stats: ProcessingStats,
        executor: ThreadPoolExecutor,
        progress: tqdm,
    ) -> None:
        """Pull files off the queue until it is drained."""
        while True:
            try:
                record = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            try:
                await self._index_file(record, accumulator, stats, executor, progress)
            finally:
                queue.task_done()

    async def _index_file(
        self,
        record: FileRecord,
        accumulator: ThreadSafeIndex,
        stats: ProcessingStats,
        executor: ThreadPoolExecutor,
        progress: tqdm,
    ) -> None:
        """Fingerprint one file and record the outcome."""
        loop = asyncio.get_running_loop()
        start_time = time.time()
        try:
            fingerprint = await loop.run_in_executor(
                executor,
                fingerprint_file,
                record.path,
                self.config.hash_algorithm,
                self.config.read_chunk_bytes,
            )
        except OSError as e:
            failure = FileReadFailure(record.path, e.strerror or str(e))
            await accumulator.record_failure(failure)
            processed = await stats.record_failure()
            log_error("Failed to fingerprint file", path=str(record.path), error=failure.reason)
        else:
            await accumulator.add(fingerprint, record.path)
            processed = await stats.record_fingerprinted()
            log_debug(
                "Fingerprinted file",
                path=str(record.path),
                fingerprint=fingerprint,
                seconds=round(time.time() - start_time, 4),
            )
        progress.update(1)

        if processed % self.config.progress_log_every == 0:
            await stats.log_progress()


async def build_index_async(
    root: Union[str, Path],
    config: Optional[Config] = None,
) -> FingerprintIndex:
    """Convenience coroutine to index one directory.

    Args:
        root: Directory to index
        config: Optional settings; the global configuration is used otherwise

    Returns:
        Completed fingerprint index
    """
    return await AsyncIndexer(config=config).index(root)


def build_index(root: Union[str, Path], config: Optional[Config] = None) -> FingerprintIndex:
    """Index one directory, running the worker pool to completion.

    Raises:
        PathUnreadable: if ``root`` cannot be traversed
    """
    return asyncio.run(build_index_async(root, config=config))
