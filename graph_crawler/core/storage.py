"""
File storage helpers – streaming downloaded bytes to disk.
"""

import logging
from pathlib import Path
from typing import Iterable

log = logging.getLogger("graph-crawler")


def stream_to_file(local_path: Path, chunks: Iterable[bytes]) -> int:
    """Write streaming *chunks* to *local_path*.

    Returns the total number of bytes written.  Creates parent
    directories as needed.  Exceptions raised while iterating *chunks*
    propagate unchanged, leaving a partial file behind.
    """
    local_path.parent.mkdir(parents=True, exist_ok=True)
    total = 0
    with local_path.open("wb") as fh:
        for chunk in chunks:
            if chunk:
                fh.write(chunk)
                total += len(chunk)
    log.debug("Streamed → %s (%d bytes)", local_path, total)
    return total


def discard_partial(local_path: Path) -> None:
    """Remove a partially written file, ignoring one that never got created."""
    try:
        local_path.unlink(missing_ok=True)
    except OSError as exc:
        log.debug("Could not remove partial file %s: %s", local_path, exc)
