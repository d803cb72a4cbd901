"""Buttons and link-buttons with sizes, variants and an optional loading spinner."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from dockman.ui.elements import Element, attr, merge_classes, tag


class ButtonSize(str, Enum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"


class ButtonVariant(str, Enum):
    DEFAULT = "default"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    DESTRUCTIVE = "destructive"
    GHOST = "ghost"
    LINK = "link"


_BASE_CLASSES = (
    "inline-flex items-center justify-center gap-2 whitespace-nowrap rounded-md text-sm font-medium "
    "ring-offset-background transition-colors focus-visible:outline-none focus-visible:ring-2 "
    "focus-visible:ring-ring focus-visible:ring-offset-2 disabled:pointer-events-none disabled:opacity-50 "
    "[&_svg]:pointer-events-none [&_svg]:size-4 [&_svg]:shrink-0"
)

_SIZE_CLASSES = {
    ButtonSize.XS: "h-8 px-3 text-xs",
    ButtonSize.SM: "h-9 px-3",
    ButtonSize.MD: "h-10 px-4 py-2",
    ButtonSize.LG: "h-11 px-8",
    ButtonSize.XL: "h-12 px-8",
}

_VARIANT_CLASSES = {
    ButtonVariant.DEFAULT: "bg-primary text-primary-foreground hover:bg-primary/90",
    ButtonVariant.PRIMARY: "bg-primary text-primary-foreground hover:bg-primary/90",
    ButtonVariant.SECONDARY: "bg-secondary text-secondary-foreground hover:bg-secondary/80",
    ButtonVariant.DESTRUCTIVE: "bg-destructive text-destructive-foreground hover:bg-destructive/90",
    ButtonVariant.GHOST: "hover:bg-accent hover:text-accent-foreground",
    ButtonVariant.LINK: "text-primary underline-offset-4 hover:underline",
}

_ICON_CLASSES = {
    ButtonSize.XS: "h-3 w-3",
    ButtonSize.SM: "h-4 w-4",
    ButtonSize.MD: "h-5 w-5",
    ButtonSize.LG: "h-5 w-5",
    ButtonSize.XL: "h-6 w-6",
}

_LOADER_ON_LOAD = (
    "const button = this;"
    " const startLoader = new Function(button.dataset.startLoader);"
    " const form = button.closest('form');"
    " (form || button).addEventListener(form ? 'submit' : 'click',"
    " function () { startLoader.call(button); });"
)

_LOADER_START = (
    "setTimeout(() => { this.setAttribute('disabled', '');"
    " this.querySelectorAll('.spinner').forEach((el) => el.classList.remove('hidden')); }, 100);"
)

# Delayed so the spinner does not flash too quickly.
_LOADER_STOP = (
    "setTimeout(() => { this.removeAttribute('disabled');"
    " this.querySelectorAll('.spinner').forEach((el) => el.classList.add('hidden')); }, 100);"
)


@dataclass
class ButtonProps:
    """Everything a button can be configured with."""

    text: str = ""
    disabled: bool = False
    full_width: bool = False
    size: ButtonSize | str | None = None
    variant: ButtonVariant | str | None = None
    css_class: str = ""
    left_icon: Element | None = None
    right_icon: Element | None = None
    target: str = ""
    type: str = ""
    trigger: str = ""
    get: str = ""
    post: str = ""
    href: str = ""
    children: list[Any] = field(default_factory=list)
    show_loader: bool = False


def _spinner() -> Element:
    return tag(
        "div",
        attr(
            "class",
            "hidden spinner spinner-border animate-spin inline-block w-4 h-4 "
            "border-2 rounded-full border-slate-200 border-t-transparent",
        ),
        attr("role", "status"),
    )


def button(props: ButtonProps) -> Element:
    """Render a button, or a link styled as one when ``href`` is set."""
    size = ButtonSize(props.size) if props.size else ButtonSize.MD
    variant = ButtonVariant(props.variant) if props.variant else ButtonVariant.DEFAULT

    children = list(props.children)
    left_icon = props.left_icon
    if props.show_loader:
        left_icon = _spinner()
        children.extend(
            [
                attr("hx-on::load", _LOADER_ON_LOAD),
                attr("data-start-loader", _LOADER_START),
                attr("hx-on::after-request", _LOADER_STOP),
            ]
        )

    classes = merge_classes(
        _BASE_CLASSES,
        _SIZE_CLASSES[size],
        _VARIANT_CLASSES[variant],
        "w-full" if props.full_width else "w-auto",
        props.css_class,
    )

    return tag(
        "a" if props.href else "button",
        attr("class", classes),
        attr("hx-target", props.target) if props.target else None,
        attr("hx-trigger", props.trigger) if props.trigger else None,
        attr("hx-get", props.get) if props.get else None,
        attr("hx-post", props.post) if props.post else None,
        attr("href", props.href) if props.href else None,
        attr("type", props.type or "button"),
        attr("disabled") if props.disabled else None,
        children,
        left_icon,
        props.text or None,
        props.right_icon,
    )


def default_button(props: ButtonProps) -> Element:
    return button(replace(props, variant=ButtonVariant.DEFAULT))


def primary_button(props: ButtonProps) -> Element:
    return button(replace(props, variant=ButtonVariant.PRIMARY))


def secondary_button(props: ButtonProps) -> Element:
    return button(replace(props, variant=ButtonVariant.SECONDARY))


def destructive_button(props: ButtonProps) -> Element:
    return button(replace(props, variant=ButtonVariant.DESTRUCTIVE))


def ghost_button(props: ButtonProps) -> Element:
    return button(replace(props, variant=ButtonVariant.GHOST))


def link_button(props: ButtonProps) -> Element:
    return button(replace(props, variant=ButtonVariant.LINK))


def danger_button(props: ButtonProps) -> Element:
    return button(replace(props, variant=ButtonVariant.DESTRUCTIVE))


def submit_button(props: ButtonProps) -> Element:
    """A submit button that shows a spinner while its request runs."""
    return button(replace(props, type="submit", show_loader=True))


def size_icon_class(size: ButtonSize | str | None) -> str:
    """The icon size classes matching a button size."""
    try:
        return _ICON_CLASSES[ButtonSize(size)]
    except ValueError:
        return "h-5 w-5"