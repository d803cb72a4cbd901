from urllib.parse import parse_qsl, urlsplit

import pytest

from dockman import urls


def _query(url):
    return parse_qsl(urlsplit(url).query)


def test_with_qs_without_pairs_returns_url():
    assert urls.with_qs("/resource/create") == "/resource/create"


def test_with_qs_odd_arguments_raise():
    with pytest.raises(ValueError):
        urls.with_qs("/x", "key")


def test_with_qs_round_trips_values():
    url = urls.with_qs("/x", "a", "one two", "b", "x&y")
    assert urlsplit(url).path == "/x"
    assert _query(url) == [("a", "one two"), ("b", "x&y")]


def test_resource_urls():
    assert urls.resource_url("r1") == "/resource?id=r1"
    assert urls.resource_servers_url("r1") == "/resource/servers?id=r1"
    assert urls.server_url("s1") == "/server?id=s1"
    assert urls.resource_run_log_url("r1") == "/resource/deployment/run-log?id=r1"
    assert urls.resource_environment_url("r1") == (
        "/resource/deployment/environment?id=r1"
    )
    assert urls.resource_deployment_url("r1") == "/resource/deployment?id=r1"


def test_deployment_urls_keep_parameter_order():
    start = urls.resource_start_deployment_path("r1", "b1")
    assert urlsplit(start).path == "/resource/deployment/new"
    assert _query(start) == [("resourceId", "r1"), ("buildId", "b1")]
    log = urls.resource_deployment_log_url("r1", "b1")
    assert urlsplit(log).path == "/resource/deployment/build-log"
    assert _query(log) == [("id", "r1"), ("buildId", "b1")]


def test_create_urls():
    assert urls.new_resource_url() == "/resource/create"
    assert urls.new_server_url() == "/server/create"


def test_repo_commit_hash_url():
    repo = "https://github.com/example/project"
    assert urls.repo_commit_hash_url(repo, "abc123") == f"{repo}/commit/abc123"
    assert urls.repo_commit_hash_url("https://gitlab.com/example/p", "abc") == ""