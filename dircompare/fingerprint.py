"""Content fingerprints for files."""

import hashlib
from pathlib import Path

DEFAULT_ALGORITHM = "md5"
DEFAULT_CHUNK_BYTES = 128 * 1024


def fingerprint_bytes(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Hex digest of an in-memory buffer."""
    return hashlib.new(algorithm, data).hexdigest()


def fingerprint_file(
    path: Path,
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_bytes: int = DEFAULT_CHUNK_BYTES,
) -> str:
    """Hex digest of a file's full contents, read in fixed-size chunks.

    Raises:
        OSError: if the file cannot be opened or read.
    """
    digest = hashlib.new(algorithm)
    with open(path, "rb") as handle:
        while True:
            chunk = handle.read(chunk_bytes)
            if not chunk:
                break
            digest.update(chunk)
    return digest.hexdigest()
