"""Small page building blocks: titles, step navigation, paragraphs and links."""

from __future__ import annotations

from dockman.ui.elements import Element, Raw, attr, merge_classes, tag


def title(text: str) -> Element:
    """A page heading."""
    return tag("h1", text, attr("class", "text-2xl font-bold"))


def next_step(classes: str, prev: Element | None, nxt: Element | None) -> Element:
    """A row holding the previous and next step links."""
    return tag(
        "div",
        attr("class", merge_classes("flex gap-2 justify-between", classes)),
        prev,
        nxt,
    )


def next_block(text: str, url: str) -> Element:
    """A card linking to the next step."""
    return tag(
        "a",
        attr("href", url),
        attr(
            "class",
            "w-[50%] border border-slate-300 p-4 rounded text-right "
            "hover:border-blue-400 cursor-pointer",
        ),
        tag("p", "Next", attr("class", "text-slate-600 text-sm")),
        tag("p", text, attr("class", "text-blue-500 hover:text-blue-400")),
    )


def text_block(text: str) -> Element:
    """Paragraphs, one per line of ``text``, inserted as markup."""
    return tag(
        "div",
        attr("class", "flex flex-col gap-2 leading-relaxed text-slate-900 break-words"),
        [tag("p", Raw(line)) for line in text.split("\n")],
    )


def link(text: str, href: str, *args: str) -> Element:
    """A link; extra class strings come before the link colours."""
    return tag(
        "a",
        attr("href", href),
        text,
        attr("class", merge_classes(*args, "text-blue-500 hover:text-blue-400")),
    )