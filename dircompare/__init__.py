"""Compare two directory trees by file content.

Builds a fingerprint index for each tree and reports which files in the
target duplicate content from the source and which are unique to it.
"""

from dircompare.compare import compare_directories, compare_directories_async
from dircompare.indexer import build_index, build_index_async
from dircompare.reconcile import reconcile

__all__ = [
    "build_index",
    "build_index_async",
    "compare_directories",
    "compare_directories_async",
    "reconcile",
]
