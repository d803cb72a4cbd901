from dataclasses import dataclass

from dockman.ui.sidebar import (
    DEBUG_PAGES,
    Page,
    debug_section,
    doc_path,
    resource_list,
    routing_section,
)
from dockman.urls import new_resource_url, resource_url


@dataclass
class FakeResource:
    id: str
    name: str


def _hrefs(element):
    return [a.get("href") for a in element.find_all("a")]


def test_doc_path_prefixes_docs():
    assert doc_path("/intro") == "/docs/intro"


def test_routing_section_links_route_table():
    section = routing_section()
    assert _hrefs(section) == ["/routing"]
    assert "Route Table" in section.text_content()
    assert "Routing" in section.text_content()


def test_debug_section_links_every_debug_page_in_order():
    section = debug_section()
    assert _hrefs(section) == [page.path for page in DEBUG_PAGES]
    text = section.text_content()
    for page in DEBUG_PAGES:
        assert page.title in text


def test_debug_pages_include_job_debug():
    assert Page("Interval Job Debug", "/debug/job") in DEBUG_PAGES


def test_resource_list_links_each_resource():
    resources = [FakeResource("abc", "web"), FakeResource("def", "worker")]
    section = resource_list(resources)
    hrefs = _hrefs(section)
    assert resource_url("abc") in hrefs
    assert resource_url("def") in hrefs
    assert hrefs.index(resource_url("abc")) < hrefs.index(resource_url("def"))
    text = section.text_content()
    assert "web" in text and "worker" in text


def test_resource_list_has_new_button():
    section = resource_list([])
    assert new_resource_url() in section.render()
    assert "+ New" in section.text_content()


def test_resource_list_accepts_none():
    section = resource_list(None)
    assert "Resources" in section.text_content()
    assert resource_url("abc") not in section.render()