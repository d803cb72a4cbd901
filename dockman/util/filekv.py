"""A tiny key=value file store."""

from __future__ import annotations

import os
import threading
from pathlib import Path


class FileLocker:
    """A lock serialising writers of a key-value file."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def __enter__(self) -> "FileLocker":
        self._lock.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._lock.release()


_DEFAULT_LOCKER = FileLocker()


def read_key_values(filename: str | os.PathLike[str]) -> dict[str, str]:
    """Read all key=value pairs from ``filename``.

    Blank lines and lines starting with ``#`` are skipped, as are lines
    without ``=``. A missing file is created empty, together with its
    directory, and an empty mapping is returned.
    """
    path = Path(filename)
    try:
        handle = open(path, encoding="utf-8")
    except FileNotFoundError:
        path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        path.touch()
        return {}

    values: dict[str, str] = {}
    with handle:
        for raw in handle:
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            key, sep, value = line.partition("=")
            if sep:
                values[key.strip()] = value.strip()
    return values


def write_key_value(
    filename: str | os.PathLike[str],
    key: str,
    value: str,
    locker: FileLocker | None = None,
) -> None:
    """Set ``key`` to ``value`` in the file, replacing it atomically."""
    with locker or _DEFAULT_LOCKER:
        values = read_key_values(filename)
        values[key] = value
        path = os.fspath(filename)
        temp_path = path + ".tmp"
        with open(temp_path, "w", encoding="utf-8") as output:
            output.writelines(f"{k}={v}\n" for k, v in values.items())
        os.replace(temp_path, path)