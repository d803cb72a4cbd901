"""A minimal HTML element tree for building pages and fragments."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Iterator, Union

_VOID_TAGS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input", "link",
        "meta", "source", "track", "wbr",
    }
)


@dataclass(frozen=True)
class Attr:
    """An attribute; a value of None renders as a bare boolean attribute."""

    name: str
    value: str | None = ""


@dataclass(frozen=True)
class Raw:
    """Markup inserted without escaping."""

    html: str


Node = Union["Element", Raw, str]


def _render_node(node: Node) -> str:
    if isinstance(node, Element):
        return node.render()
    if isinstance(node, Raw):
        return node.html
    return html.escape(node, quote=False)


@dataclass
class Element:
    """An HTML element. An empty tag name makes a fragment of its children."""

    tag: str
    attrs: dict[str, str | None] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def render(self) -> str:
        """Serialise the element and its children to HTML."""
        inner = "".join(_render_node(child) for child in self.children)
        if not self.tag:
            return inner
        rendered_attrs = "".join(
            f" {name}" if value is None else f' {name}="{html.escape(value)}"'
            for name, value in self.attrs.items()
        )
        if self.tag.lower() in _VOID_TAGS:
            return f"<{self.tag}{rendered_attrs}>"
        return f"<{self.tag}{rendered_attrs}>{inner}</{self.tag}>"

    def __str__(self) -> str:
        return self.render()

    def get(self, name: str) -> str | None:
        """Return an attribute's value, or None if it is absent."""
        return self.attrs.get(name)

    def _walk(self) -> Iterator[Element]:
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child._walk()

    def find_all(self, tag: str) -> list[Element]:
        """Return this element and its descendants with the given tag, in document order."""
        return [element for element in self._walk() if element.tag == tag]

    def text_content(self) -> str:
        """Concatenate all text and raw content below this element."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, Element):
                parts.append(child.text_content())
            elif isinstance(child, Raw):
                parts.append(child.html)
            else:
                parts.append(child)
        return "".join(parts)


def _apply(element: Element, args: tuple | list) -> None:
    for arg in args:
        if arg is None:
            continue
        if isinstance(arg, Attr):
            element.attrs[arg.name] = arg.value
        elif isinstance(arg, (Element, Raw, str)):
            element.children.append(arg)
        elif isinstance(arg, (list, tuple)):
            _apply(element, arg)
        else:
            raise TypeError(f"cannot add {type(arg).__name__} to an element")


def tag(name: str, *args: Attr | Node | list | tuple | None) -> Element:
    """Build an element from attributes, children, text and nested lists.

    None is skipped; a later attribute of the same name replaces an earlier one.
    """
    element = Element(name)
    _apply(element, args)
    return element


def attr(name: str, value: str | None = None) -> Attr:
    """Build an attribute; omit the value for a boolean attribute."""
    return Attr(name, value)


def merge_classes(*args: str | None) -> str:
    """Join class strings with single spaces, skipping empty ones."""
    return " ".join(part.strip() for part in args if part and part.strip())


def field_label(label: str, *args: Attr | Node | list | tuple | None) -> Element:
    """A form field label."""
    classes = (
        "text-sm font-medium leading-none peer-disabled:cursor-not-allowed "
        "peer-disabled:opacity-70"
    )
    return tag("label", attr("class", classes), label, *args)