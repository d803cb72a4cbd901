"""Navigation sidebar sections: routing, debug tools and the resource list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from dockman.ui.button import ButtonProps, primary_button
from dockman.ui.elements import Element, attr, tag
from dockman.urls import new_resource_url, resource_url

_HEADER_CLASS = "text-slate-800 font-bold"
_LINK_CLASS = "text-slate-900 hover:text-brand-400"


@dataclass(frozen=True)
class Page:
    """A titled link in the sidebar."""

    title: str
    path: str


class _NamedResource(Protocol):
    id: str
    name: str


ROUTING_PAGES = (Page("Route Table", "/routing"),)

DEBUG_PAGES = (
    Page("KV Viewer", "/debug/jetstream/kv"),
    Page("Stream Viewer", "/debug/jetstream/streams"),
    Page("Interval Job Debug", "/debug/job"),
    Page("Router", "/debug/router"),
)


def doc_path(path: str) -> str:
    """The documentation URL for ``path``."""
    return "/docs" + path


def _link(href: str, text: str) -> Element:
    return tag("a", attr("href", href), text, attr("class", _LINK_CLASS))


def _section(heading: str, links: Iterable[Element], action: Element | None = None) -> Element:
    return tag(
        "div",
        attr("class", "flex flex-col gap-2"),
        tag(
            "div",
            attr("class", "flex justify-between items-center"),
            tag("p", heading, attr("class", _HEADER_CLASS)),
            action,
        ),
        tag("div", attr("class", "flex flex-col gap-2"), list(links)),
    )


def routing_section() -> Element:
    """Links to the routing pages."""
    return _section("Routing", (_link(page.path, page.title) for page in ROUTING_PAGES))


def debug_section() -> Element:
    """Links to the debugging tools."""
    return _section("Debug", (_link(page.path, page.title) for page in DEBUG_PAGES))


def resource_list(resources: Iterable[_NamedResource] | None) -> Element:
    """Links to each resource, with a button for creating a new one."""
    new_button = primary_button(ButtonProps(size="xs", text="+ New", href=new_resource_url()))
    return _section(
        "Resources",
        (_link(resource_url(resource.id), resource.name) for resource in resources or ()),
        new_button,
    )