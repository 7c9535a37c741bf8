"""Index both trees and reconcile them."""

import asyncio
from pathlib import Path
from typing import Optional, Union

from dircompare.config import Config, get_config
from dircompare.indexer import AsyncIndexer
from dircompare.models import Comparison
from dircompare.reconcile import reconcile
from dircompare.utils.logger import log_stage


async def compare_directories_async(
    dir_a: Union[str, Path],
    dir_b: Union[str, Path],
    config: Optional[Config] = None,
) -> Comparison:
    """Index A, then B, then reconcile B against A.

    Raises:
        PathUnreadable: if either root cannot be traversed
    """
    indexer = AsyncIndexer(config=config or get_config())

    a_index = await indexer.index(dir_a)
    log_stage("Folder A indexed", root=str(a_index.root), fingerprints=len(a_index))

    b_index = await indexer.index(dir_b)
    log_stage("Folder B indexed", root=str(b_index.root), fingerprints=len(b_index))

    result = reconcile(a_index, b_index)
    log_stage(
        "Reconciled",
        duplicates=len(result.b_duplicates),
        unique=len(result.b_unique),
    )
    return Comparison(a_index=a_index, b_index=b_index, result=result)


def compare_directories(
    dir_a: Union[str, Path],
    dir_b: Union[str, Path],
    config: Optional[Config] = None,
) -> Comparison:
    """Synchronous wrapper around :func:`compare_directories_async`."""
    return asyncio.run(compare_directories_async(dir_a, dir_b, config=config))
