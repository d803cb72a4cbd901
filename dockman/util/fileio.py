"""Line-oriented file reading."""

from __future__ import annotations

import os
from typing import Iterator


def read_lines(file_path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of a text file without their line endings."""
    with open(file_path, encoding="utf-8") as handle:
        for line in handle:
            yield line.rstrip("\n")