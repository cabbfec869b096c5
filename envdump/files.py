"""Writing export artifacts under the output root."""

import logging
from pathlib import Path
from typing import Iterable

from envdump.errors import OutputWriteError

logger = logging.getLogger(__name__)


def ensure_parent(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"failed to create directories for {path}: {e}") from e


def write_bytes(path: Path, data: bytes) -> Path:
    """Create ``path`` (truncating any previous content) and write ``data``."""
    ensure_parent(path)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise OutputWriteError(f"failed to write file {path}: {e}") from e
    logger.debug(f"Wrote {len(data)} bytes to {path}")
    return path


def write_chunks(path: Path, chunks: Iterable[bytes]) -> int:
    """Stream ``chunks`` into ``path``; returns the number of bytes written.

    Errors raised while producing the chunks propagate unchanged so the caller
    can report them as remote failures.
    """
    ensure_parent(path)
    try:
        f = open(path, "wb")
    except OSError as e:
        raise OutputWriteError(f"failed to create file {path}: {e}") from e
    written = 0
    with f:
        for chunk in chunks:
            try:
                f.write(chunk)
            except OSError as e:
                raise OutputWriteError(f"failed to copy data to file {path}: {e}") from e
            written += len(chunk)
    return written
