"""A scrolling log view and the lines that are pushed into it."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from dockman.ui.elements import Element, Raw, attr, tag
from dockman.util.sanitize import sanitize

LOG_CONTAINER_ID = "build-log"
BUILD_ERROR_PREFIX = "BUILD_ERROR:"

_SCROLL_ON_LOAD = """
  setTimeout(() => {
    const logs = document.getElementById('build-log');
    logs.parentElement.scrollTop = logs.parentElement.scrollHeight;
  }, 1000);
"""

_TRIM_LOGS = """
  const logs = document.getElementById('build-log');
  while (logs.children.length >= {max_logs}) {
    logs.removeChild(logs.firstElementChild);
  }
"""

_SCROLL_ON_MESSAGE = """
  const logsContainer = document.getElementById('build-log').parentElement;
  const scrollPosition = logsContainer.scrollTop + logsContainer.clientHeight;
  const distanceFromBottom = logsContainer.scrollHeight - scrollPosition;
  const scrollThreshold = 1000;
  if (distanceFromBottom <= scrollThreshold) {
    logsContainer.scrollTop = logsContainer.scrollHeight;
  }
"""


@dataclass
class LogBodyOptions:
    max_logs: int = 1000


@dataclass
class DockerLog:
    """One line of container output."""

    host_name: str
    time: datetime
    log: str


def _swap() -> object:
    return attr("hx-swap-oob", f"beforeend:#{LOG_CONTAINER_ID}")


def log_body(opts: LogBodyOptions) -> Element:
    """The log container; keeps at most ``max_logs`` lines and follows new output."""
    return tag(
        "div",
        attr(
            "class",
            "w-full max-h-full h-full overflow-y-auto bg-white border border-gray-300 "
            "rounded-lg shadow-lg mt-6 bg-red-500",
        ),
        tag("div", attr("id", LOG_CONTAINER_ID), attr("class", "flex flex-col w-full")),
        attr("hx-on::load", _SCROLL_ON_LOAD),
        attr(
            "hx-on::ws-after-message",
            _TRIM_LOGS.replace("{max_logs}", str(opts.max_logs)) + _SCROLL_ON_MESSAGE,
        ),
    )


def docker_log_line(log: DockerLog) -> Element:
    """A container log line appended to the log view."""
    return tag(
        "div",
        _swap(),
        tag(
            "div",
            attr(
                "class",
                "px-4 flex flex-no-wrap items-start gap-4 border-b border-gray-300 py-1",
            ),
            tag("div", attr("class", "w-1/8 truncate text-sm font-medium"), log.host_name),
            tag(
                "div",
                attr("class", "w-1/8 text-sm text-gray-600"),
                log.time.strftime("%Y-%m-%d %H:%M:%S"),
            ),
            tag("div", attr("class", "flex-1 text-sm text-gray-800"), log.log),
        ),
    )


def log_line(data: str) -> Element:
    """A build log line; lines marked as build errors are shown in red."""
    row_class = "px-4 flex items-start gap-4 border-b border-gray-300 py-1"
    if data.startswith(BUILD_ERROR_PREFIX):
        message = data[len(BUILD_ERROR_PREFIX):]
        return tag(
            "div",
            _swap(),
            tag(
                "div",
                attr("class", row_class),
                tag(
                    "div",
                    attr("class", "w-1/8 truncate text-sm font-medium text-red-600"),
                    "Error",
                ),
                tag(
                    "div",
                    attr("class", "flex-1 text-sm text-red-800"),
                    Raw(sanitize(message)),
                ),
            ),
        )

    return tag(
        "div",
        _swap(),
        tag(
            "div",
            attr("class", row_class),
            tag("div", attr("class", "flex-1 text-sm text-gray-800"), Raw(sanitize(data))),
        ),
    )