"""Small general-purpose helpers: hashing, mapping, polling and timing."""

from __future__ import annotations

import hashlib
import time
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def hash_string(data: str) -> str:
    """Return the hex-encoded SHA-256 digest of ``data``."""
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


def map_slice(items: Iterable[T], mapper: Callable[[T, int], U]) -> list[U]:
    """Map every item together with its index through ``mapper``."""
    return [mapper(item, index) for index, item in enumerate(items)]


def wait_for(timeout: float, interval: float, predicate: Callable[[], bool]) -> bool:
    """Poll ``predicate`` every ``interval`` seconds until it holds or ``timeout`` passes.

    The predicate is first checked one interval after the call. Returns True
    as soon as it holds, False once the timeout is reached.
    """
    if interval <= 0:
        raise ValueError("interval must be positive")
    start = time.monotonic()
    deadline = start + timeout
    next_tick = start + interval
    while True:
        wake = min(next_tick, deadline)
        remaining = wake - time.monotonic()
        if remaining > 0:
            time.sleep(remaining)
        now = time.monotonic()
        if now >= deadline:
            return False
        if predicate():
            return True
        now = time.monotonic()
        next_tick += interval
        while next_tick <= now:
            next_tick += interval


def delayed(delay: float, func: Callable[[], T]) -> T:
    """Run ``func`` and make the call take at least ``delay`` seconds.

    If ``func`` already takes longer than the delay, no extra time is spent.
    """
    started = time.monotonic()
    result = func()
    elapsed = time.monotonic() - started
    if elapsed < delay:
        time.sleep(delay - elapsed)
    return result


def assert_no_error(err: BaseException | None) -> None:
    """Raise ``err`` if it is set."""
    if err is not None:
        raise err