"""Saving downloaded data to the local cache."""

from __future__ import annotations

from pathlib import Path


def save_file(data: bytes, path: str | Path, filename: str) -> Path:
    """Write ``data`` to ``path/filename``, creating ``path`` when missing.

    Returns the path written. Raises ``OSError`` when the directory cannot be
    created or the file cannot be opened for writing.
    """
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / filename
    with target.open("wb") as handle:
        handle.write(bytes(data))
    return target