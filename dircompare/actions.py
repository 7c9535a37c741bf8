"""Actions applied to a reconciliation result.

``y`` deletes B's duplicates, ``o`` writes the duplicate list, ``u`` writes the
unique list. Letters combine freely; every matching action runs.
"""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

from dircompare.config import Config, get_config
from dircompare.errors import DeleteFailure, OutputWriteFailure
from dircompare.models import ActionOutcome, ReconciliationResult
from dircompare.utils.logger import log_error, log_info, log_warning

DELETE = "y"
WRITE_DUPLICATES = "o"
WRITE_UNIQUE = "u"
ACTION_ORDER = (DELETE, WRITE_DUPLICATES, WRITE_UNIQUE)


def parse_actions(selector: Optional[str]) -> Set[str]:
    """Return the action letters contained in ``selector``."""
    if not selector:
        return set()
    text = selector.strip().lower()
    return {action for action in ACTION_ORDER if action in text}


def delete_duplicates(paths: Iterable[Path]) -> Tuple[List[Path], List[DeleteFailure]]:
    """Remove each path, continuing past individual failures.

    Returns:
        (deleted paths, failures)
    """
    deleted: List[Path] = []
    failures: List[DeleteFailure] = []
    for path in paths:
        try:
            os.remove(path)
        except OSError as e:
            failure = DeleteFailure(path, e.strerror or str(e))
            failures.append(failure)
            log_warning("Delete failed", path=str(path), error=failure.reason)
            continue
        deleted.append(Path(path))
    log_info("Delete task finished", deleted=len(deleted), failed=len(failures))
    return deleted, failures


def write_path_list(paths: Iterable[Path], destination: Path) -> Path:
    """Write one path per line to ``destination``.

    Raises:
        OutputWriteFailure: if the file cannot be created or written
    """
    destination = Path(destination)
    try:
        with open(destination, "w", encoding="utf-8") as f:
            for path in paths:
                f.write(f"{path}\n")
    except OSError as e:
        raise OutputWriteFailure(destination, e.strerror or str(e)) from e
    return destination


def run_actions(
    selector: Optional[str],
    result: ReconciliationResult,
    config: Optional[Config] = None,
) -> ActionOutcome:
    """Run every action named in ``selector`` against ``result``.

    An output failure aborts only the list it was writing.
    """
    config = config or get_config()
    actions = parse_actions(selector)
    outcome = ActionOutcome(actions="".join(a for a in ACTION_ORDER if a in actions))

    if DELETE in actions:
        outcome.deleted, outcome.delete_failures = delete_duplicates(result.b_duplicates)

    outputs = (
        (WRITE_DUPLICATES, result.b_duplicates, config.duplicates_path),
        (WRITE_UNIQUE, result.b_unique, config.unique_path),
    )
    for action, paths, destination in outputs:
        if action not in actions:
            continue
        try:
            outcome.written[action] = write_path_list(paths, destination)
            log_info("List written", action=action, path=str(destination), entries=len(paths))
        except OutputWriteFailure as e:
            outcome.output_failures.append(e)
            log_error("List output failed", action=action, path=str(destination), error=e.reason)

    return outcome
