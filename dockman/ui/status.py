"""A coloured dot with a label describing whether something is running."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from dockman.ui.elements import Element, attr, tag


class RunStatus(str, Enum):
    NOT_RUNNING = "not_running"
    RUNNING = "running"
    PARTIALLY_RUNNING = "partially_running"


@dataclass
class StatusIndicatorProps:
    run_status: RunStatus = RunStatus.NOT_RUNNING
    text_map: dict[RunStatus, str] = field(default_factory=dict)


def status_text(status: RunStatus) -> str:
    """The default label for a run status."""
    if status == RunStatus.RUNNING:
        return "Running"
    if status == RunStatus.PARTIALLY_RUNNING:
        return "Partially Running"
    return "Stopped"


def status_indicator(props: StatusIndicatorProps) -> Element:
    """Render the indicator; a non-empty ``text_map`` replaces the default labels."""
    if props.run_status == RunStatus.RUNNING:
        color, animation = "bg-green-500", "animate-pulse"
    elif props.run_status == RunStatus.PARTIALLY_RUNNING:
        color, animation = "bg-amber-500", "animation-pulse"
    else:
        color, animation = "bg-red-500", ""

    if props.text_map:
        label = props.text_map.get(props.run_status, "")
    else:
        label = status_text(props.run_status)

    return tag(
        "div",
        attr("class", "flex items-center space-x-1"),
        tag("span", attr("class", "h-3 w-3 rounded-full " + color + " " + animation)),
        tag("span", attr("class", "text-sm"), label),
    )