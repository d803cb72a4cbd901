"""A small HTTP load generator that hammers a site with concurrent agents."""

from __future__ import annotations

import argparse
import random
import threading
import time
import urllib.error
import urllib.request
from datetime import datetime
from typing import Callable, Sequence

HOSTNAME = "https://fedora.htmgo.dev"
AGENTS = 50
DURATION = 60.0
PATHS = ("/docs", "/examples", "/", "/html-to-go")

Fetch = Callable[[str], "tuple[int, bytes]"]

_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; MyClient/1.0)",
    "Accept": "*/*",
    "Connection": "keep-alive",
}


class LoadStats:
    """Thread-safe counters of requests made and bytes read."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.successes = 0
        self.failures = 0
        self.bytes_read = 0

    def record_success(self, nbytes: int) -> None:
        """Count a successful request whose body had ``nbytes`` bytes."""
        with self._lock:
            self.successes += 1
            self.bytes_read += nbytes

    def record_failure(self, nbytes: int = 0) -> None:
        """Count a failed request whose body, if any, had ``nbytes`` bytes."""
        with self._lock:
            self.failures += 1
            self.bytes_read += nbytes

    def total(self) -> int:
        """Number of requests made so far."""
        with self._lock:
            return self.successes + self.failures

    def per_second(self, elapsed: float) -> int:
        """Requests per whole second elapsed, counting less than a second as one."""
        seconds = int(elapsed) or 1
        return self.total() // seconds


def _http_fetch(url: str) -> tuple[int, bytes]:
    request = urllib.request.Request(url, headers=_HEADERS, method="GET")
    try:
        with urllib.request.urlopen(request, timeout=10) as response:
            return response.status, response.read()
    except urllib.error.HTTPError as exc:
        return exc.code, exc.read()


def _agent(
    hostname: str,
    paths: Sequence[str],
    end: float,
    fetch: Fetch,
    stats: LoadStats,
) -> None:
    rng = random.Random()
    while time.monotonic() < end:
        time.sleep(0.01)
        url = hostname + rng.choice(paths)
        try:
            status, body = fetch(url)
        except Exception as exc:  # any transport failure stops this agent
            print(f"Error: {exc}")
            stats.record_failure()
            return
        if status == 200:
            stats.record_success(len(body))
        else:
            print(f"Non-200 response: {status}")
            stats.record_failure(len(body))


def _report(stats: LoadStats, start: float, end: float, stop: threading.Event) -> None:
    while not stop.is_set():
        now = time.monotonic()
        print(
            f"Successful: {stats.successes}, Failed: {stats.failures}, "
            f"Per Second: {stats.per_second(now - start)}, "
            f"Seconds Left: {int(end - now)}, Bytes Read: {stats.bytes_read} "
        )
        stop.wait(1.0)


def run_load_test(
    hostname: str = HOSTNAME,
    paths: Sequence[str] = PATHS,
    agents: int = AGENTS,
    duration: float = DURATION,
    fetch: Fetch | None = None,
) -> LoadStats:
    """Run ``agents`` concurrent clients against ``hostname`` for ``duration`` seconds.

    ``fetch`` takes a URL and returns the status code and body; it defaults
    to a plain HTTP GET. An agent whose request raises stops early.
    """
    if not paths:
        raise ValueError("at least one path is required")
    fetch = fetch or _http_fetch
    stats = LoadStats()
    start = time.monotonic()
    end = start + duration
    print(f"Starting load test at {datetime.now()}")

    stop = threading.Event()
    reporter = threading.Thread(
        target=_report, args=(stats, start, end, stop), daemon=True
    )
    reporter.start()

    workers = [
        threading.Thread(target=_agent, args=(hostname, paths, end, fetch, stats))
        for _ in range(agents)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    stop.set()
    reporter.join()

    print(f"Load test completed at {datetime.now()}")
    print(f"Total requests: {stats.total()}")
    print(f"Successful requests: {stats.successes}")
    print(f"Failed requests: {stats.failures}")
    print(f"Total bytes read: {stats.bytes_read}")
    return stats


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Generate HTTP load against a site.")
    parser.add_argument("--hostname", default=HOSTNAME)
    parser.add_argument("--agents", type=int, default=AGENTS)
    parser.add_argument("--duration", type=float, default=DURATION, help="seconds")
    parser.add_argument("paths", nargs="*", default=list(PATHS))
    args = parser.parse_args(argv)
    run_load_test(args.hostname, args.paths, args.agents, args.duration)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())