"""Host-specific locations and addresses."""

from __future__ import annotations

import os
import socket
import sys
from pathlib import Path


def persistent_volume_path() -> str:
    """Return the directory where persistent data is kept on this host."""
    store_dir = "/data/dockman"
    use_abs = True

    if sys.platform == "win32":
        store_dir = "C:/data/dockman"

    if sys.platform == "darwin":
        try:
            store_dir = os.path.join(str(Path.home()), ".dockman")
        except (RuntimeError, KeyError):
            store_dir = "./dockman"
            use_abs = False

    if not use_abs:
        return store_dir
    return os.path.abspath(store_dir)


def local_ip() -> str:
    """Return the address of the interface used for outbound traffic, or ""."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            return sock.getsockname()[0]
    except OSError:
        return ""