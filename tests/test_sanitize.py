import pytest

from dockman.util.sanitize import sanitize


def test_plain_text_is_kept():
    assert sanitize("building image") == "building image"


def test_allowed_tags_kept():
    assert sanitize("<b>bold</b> and <i>it</i>") == "<b>bold</b> and <i>it</i>"


def test_script_removed_with_content():
    result = sanitize("before<script>alert('x')</script>after")
    assert result == "beforeafter"


def test_event_handler_attributes_removed():
    result = sanitize('<span onclick="steal()">hi</span>')
    assert "onclick" not in result
    assert "steal" not in result
    assert "hi" in result


def test_javascript_links_dropped():
    result = sanitize('<a href="javascript:alert(1)">click</a>')
    assert "javascript" not in result
    assert "click" in result


def test_safe_links_kept():
    result = sanitize('<a href="https://example.com/x">link</a>')
    assert 'href="https://example.com/x"' in result
    assert "link" in result


def test_class_attribute_kept():
    result = sanitize('<span class="text-red">x</span>')
    assert 'class="text-red"' in result


def test_text_is_escaped():
    assert sanitize("a < b") == "a &lt; b"
    assert "<" not in sanitize("x &lt;img src=x&gt;").replace("&lt;", "")


@pytest.mark.parametrize(
    "markup",
    [
        "<p>it's <b>fine</b></p>",
        '<a href="/relative">rel</a><script>x</script>',
        "<div><unknown>text</unknown></div>",
        "a & b \"quoted\"",
    ],
)
def test_sanitize_is_idempotent(markup):
    once = sanitize(markup)
    assert sanitize(once) == once