"""Error types raised or recorded while comparing directory trees."""

from pathlib import Path
from typing import Union


class DirCompareError(Exception):
    """Base class for dircompare errors."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{self.path}: {self.reason}" if self.reason else str(self.path)


class PathUnreadable(DirCompareError):
    """A root directory cannot be traversed. Fatal to the comparison."""

    @property
    def message(self) -> str:
        return f"Cannot read directory {self.path}: {self.reason}"


class FileReadFailure(DirCompareError):
    """A single file could not be opened or fully read."""


class OutputWriteFailure(DirCompareError):
    """A duplicate or unique list file could not be written."""

    @property
    def message(self) -> str:
        return f"Cannot write {self.path}: {self.reason}"


class DeleteFailure(DirCompareError):
    """A duplicate file could not be removed."""
