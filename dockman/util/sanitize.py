"""HTML sanitising for user-generated content."""

from __future__ import annotations

import re
from html.parser import HTMLParser
from urllib.parse import urlsplit

_ALLOWED_TAGS = frozenset(
    {
        "a", "abbr", "acronym", "address", "area", "article", "aside", "b",
        "bdi", "bdo", "big", "blockquote", "br", "caption", "center", "cite",
        "code", "col", "colgroup", "dd", "del", "details", "dfn", "div", "dl",
        "dt", "em", "figcaption", "figure", "h1", "h2", "h3", "h4", "h5", "h6",
        "hgroup", "hr", "i", "img", "ins", "kbd", "li", "mark", "ol", "p",
        "pre", "q", "rp", "rt", "ruby", "s", "samp", "section", "small",
        "span", "strike", "strong", "sub", "summary", "sup", "table", "tbody",
        "td", "tfoot", "th", "thead", "time", "tr", "tt", "u", "ul", "var",
        "wbr",
    }
)
_VOID_TAGS = frozenset({"area", "br", "col", "hr", "img", "wbr"})
_SKIP_CONTENT_TAGS = frozenset({"script", "style"})
_URL_SCHEMES = frozenset({"http", "https", "mailto"})

_TOKENS = re.compile(r"^[\s\w-]+$")
_NUMBER = re.compile(r"^[0-9]+$")
_DIRECTION = re.compile(r"^(?i:rtl|ltr)$")
_LANG = re.compile(r"^[a-zA-Z]{2,20}(-[a-zA-Z0-9]{1,20})*$")
_PARAGRAPH = re.compile(r"^[\w\s.,:;!?'\"()\-/]*$")

_GLOBAL_ATTRS = {
    "class": _TOKENS,
    "dir": _DIRECTION,
    "id": _TOKENS,
    "lang": _LANG,
    "title": _PARAGRAPH,
}
_ELEMENT_ATTRS = {
    "img": {"alt": _PARAGRAPH, "width": _NUMBER, "height": _NUMBER},
    "td": {"colspan": _NUMBER, "rowspan": _NUMBER},
    "th": {"colspan": _NUMBER, "rowspan": _NUMBER},
    "ol": {"start": _NUMBER},
}
_URL_ATTRS = {"a": "href", "img": "src"}


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("'", "&#39;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&#34;")
    )


def _safe_url(value: str) -> str | None:
    value = value.strip()
    try:
        parts = urlsplit(value)
    except ValueError:
        return None
    if parts.scheme and parts.scheme.lower() not in _URL_SCHEMES:
        return None
    return value


def _filter_attrs(tag: str, attrs: list[tuple[str, str | None]]) -> list[tuple[str, str]]:
    kept: list[tuple[str, str]] = []
    element_rules = _ELEMENT_ATTRS.get(tag, {})
    url_attr = _URL_ATTRS.get(tag)
    for name, raw in attrs:
        value = raw or ""
        if name == url_attr:
            url = _safe_url(value)
            if url is not None:
                kept.append((name, url))
            continue
        rule = element_rules.get(name) or _GLOBAL_ATTRS.get(name)
        if rule is not None and rule.match(value):
            kept.append((name, value))
    return kept


class _Sanitizer(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._out: list[str] = []
        self._open: list[tuple[str, bool]] = []
        self._skipping = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if self._skipping:
            return
        if tag in _SKIP_CONTENT_TAGS:
            self._skipping += 1
            return
        if tag not in _ALLOWED_TAGS:
            return
        kept = _filter_attrs(tag, attrs)
        if tag == "a":
            if not any(name == "href" for name, _ in kept):
                self._open.append((tag, False))
                return
            kept.append(("rel", "nofollow"))
        rendered = "".join(f' {name}="{_escape(value)}"' for name, value in kept)
        self._out.append(f"<{tag}{rendered}>")
        if tag not in _VOID_TAGS:
            self._open.append((tag, True))

    def handle_endtag(self, tag: str) -> None:
        if tag in _SKIP_CONTENT_TAGS:
            if self._skipping:
                self._skipping -= 1
            return
        if self._skipping or tag in _VOID_TAGS or tag not in _ALLOWED_TAGS:
            return
        for position in range(len(self._open) - 1, -1, -1):
            open_tag, emitted = self._open[position]
            if open_tag == tag:
                del self._open[position]
                if emitted:
                    self._out.append(f"</{tag}>")
                return
        self._out.append(f"</{tag}>")

    def handle_data(self, data: str) -> None:
        if not self._skipping:
            self._out.append(_escape(data))

    def result(self) -> str:
        return "".join(self._out)


def sanitize(text: str) -> str:
    """Strip unsafe markup from ``text``, keeping common formatting tags."""
    parser = _Sanitizer()
    parser.feed(text)
    parser.close()
    return parser.result()