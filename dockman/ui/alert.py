"""Alert boxes and form error areas."""

from __future__ import annotations

from dockman.ui.elements import Element, attr, tag

ALERT_ID = "ui-alert"
FORM_ERROR_ID = "form-error"


def alert_placeholder() -> Element:
    """An empty container that alerts are swapped into."""
    return tag("div", attr("id", ALERT_ID))


def success_alert(title: Element | str, message: Element | str) -> Element:
    """A green alert with a title and a message."""
    return tag(
        "div",
        attr("id", ALERT_ID),
        attr("role", "alert"),
        attr("class", "rounded border-s-4 border-green-500 bg-green-50 p-4 w-full"),
        tag("strong", attr("class", "block font-medium text-green-800"), title),
        tag("p", attr("class", "mt-2 text-sm text-green-700"), message),
    )


def error_alert(title: Element | str, message: Element | str | None = None) -> Element:
    """A red alert; without a message only the title is shown."""
    classes = "rounded border-s-4 border-red-500 bg-red-50 p-4 w-full"
    if message is None:
        return tag(
            "div",
            attr("id", ALERT_ID),
            attr("role", "alert"),
            attr("class", classes),
            tag("p", attr("class", "text-sm text-red-700"), title),
        )
    return tag(
        "div",
        attr("id", ALERT_ID),
        attr("role", "alert"),
        attr("class", classes),
        tag("strong", attr("class", "block font-medium text-red-800"), title),
        tag("p", attr("class", "mt-2 text-sm text-red-700"), message),
    )


def generic_error_alert(err: BaseException | str) -> Element:
    """An error alert reporting that an operation failed with ``err``."""
    return error_alert(
        tag("p", "Unable to perform the operation"),
        tag("p", str(err)),
    )


def form_error(error: str) -> Element:
    """The form error area, holding an alert when ``error`` is set."""
    return tag(
        "div",
        attr("id", FORM_ERROR_ID),
        error_alert(tag("p", error)) if error else None,
    )