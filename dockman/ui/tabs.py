"""Navigation tabs made of links, highlighting the current page."""

from __future__ import annotations

from dataclasses import dataclass, field

from dockman.ui.elements import Element, attr, tag

_ACTIVE_CLASS = "shrink-0 border-b-2 border-brand-500 px-1 pb-4 text-sm font-medium text-brand-600"
_INACTIVE_CLASS = (
    "shrink-0 border-b-2 border-transparent px-1 pb-4 text-sm font-medium "
    "text-gray-500 hover:border-gray-300 hover:text-gray-700"
)


@dataclass(frozen=True)
class Link:
    text: str
    href: str


@dataclass
class LinkTabsProps:
    links: list[Link] = field(default_factory=list)
    end: Element | None = None


def compare_links(a: str, b: str) -> bool:
    """Whether two URLs have the same path, ignoring their query strings."""
    return a.split("?", 1)[0] == b.split("?", 1)[0]


def link_tabs(current_path: str, props: LinkTabsProps) -> Element:
    """Render the tabs; the first whose path matches ``current_path`` is active."""
    active = next(
        (i for i, link in enumerate(props.links) if compare_links(current_path, link.href)),
        -1,
    )
    return tag(
        "div",
        tag(
            "div",
            attr("class", "sm:hidden"),
            tag("label", attr("for", "Tab"), attr("class", "sr-only"), "Tab"),
        ),
        tag(
            "div",
            tag(
                "div",
                attr("class", "border-b border-gray-200 relative"),
                tag(
                    "nav",
                    attr("class", "-mb-px flex gap-6"),
                    attr("aria-label", "LinkTabs"),
                    [
                        tag(
                            "a",
                            attr("href", link.href),
                            attr("class", _ACTIVE_CLASS if index == active else _INACTIVE_CLASS),
                            link.text,
                        )
                        for index, link in enumerate(props.links)
                    ],
                ),
                props.end,
            ),
        ),
    )