"""A description list of websocket manager and handler metrics."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime

from dockman.ui.elements import Element, attr, tag

_ROW_CLASS = "grid grid-cols-1 gap-1 p-3 even:bg-gray-50 sm:grid-cols-3 sm:gap-4"
_MAX_LISTED_SOCKETS = 100


@dataclass
class ManagerMetrics:
    seconds_elapsed: int = 0
    total_messages: int = 0
    messages_per_second: int = 0
    running_goroutines: int = 0
    total_sockets: int = 0
    total_rooms: int = 0
    total_listeners: int = 0
    sockets_per_room: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class HandlerMetrics:
    session_id_to_hashes_count: int = 0
    total_handlers: int = 0
    server_event_names_to_hash_count: int = 0


@dataclass
class Metrics:
    manager: ManagerMetrics = field(default_factory=ManagerMetrics)
    handler: HandlerMetrics = field(default_factory=HandlerMetrics)


def description_term(term: str) -> Element:
    return tag("dt", attr("class", "font-medium text-gray-900"), term)


def description_detail(detail: str) -> Element:
    return tag("dd", attr("class", "text-gray-700 sm:col-span-2"), detail)


def list_item(term: str, description: str) -> Element:
    """A row with a term and its value."""
    return tag("div", attr("class", _ROW_CLASS), description_term(term), description_detail(description))


def list_block(title: str, children: Element) -> Element:
    """A row with a term and arbitrary content."""
    return tag(
        "div",
        attr("class", _ROW_CLASS),
        description_term(title),
        tag("dd", attr("class", "text-gray-700 sm:col-span-2"), children),
    )


def _room_block(room: str, sockets: list[str]) -> Element:
    if len(sockets) > _MAX_LISTED_SOCKETS:
        content = tag("div", tag("p", f"{len(sockets)} total sockets"))
    else:
        content = tag("div", [tag("div", tag("p", socket)) for socket in sockets])
    return list_block(f"Sockets In Room - {room}", content)


def metrics_list(
    metrics: Metrics,
    goroutines: int | None = None,
    now: datetime | None = None,
) -> Element:
    """Render all metrics; ``goroutines`` defaults to the live thread count."""
    if goroutines is None:
        goroutines = threading.active_count()
    now = now or datetime.now()
    manager, handler = metrics.manager, metrics.handler
    return tag(
        "body",
        tag(
            "div",
            attr("class", "flow-root rounded-lg border border-gray-100 py-3 shadow-sm"),
            tag(
                "dl",
                attr("class", "-my-3 divide-y divide-gray-100 text-sm"),
                list_item("Current Time", now.strftime("%H:%M:%S")),
                list_item("Seconds Elapsed", str(manager.seconds_elapsed)),
                list_item("Total Messages", str(manager.total_messages)),
                list_item("Messages Per Second", str(manager.messages_per_second)),
                list_item("Total Goroutines For ws.Every", str(manager.running_goroutines)),
                list_item("Total Goroutines In System", str(goroutines)),
                list_item("Sockets", str(manager.total_sockets)),
                list_item("Rooms", str(manager.total_rooms)),
                list_item("Session Id To Hashes", str(handler.session_id_to_hashes_count)),
                list_item("Total Handlers", str(handler.total_handlers)),
                list_item("Server Event Names To Hash", str(handler.server_event_names_to_hash_count)),
                list_item("Total Listeners", str(manager.total_listeners)),
                [_room_block(room, sockets) for room, sockets in manager.sockets_per_room.items()],
            ),
        ),
    )