"""Builders for the application's page URLs."""

from __future__ import annotations

from urllib.parse import urlencode


def with_qs(url: str, *args: str) -> str:
    """Append query parameters given as alternating keys and values."""
    if not args:
        return url
    if len(args) % 2:
        raise ValueError("query parameters must come in key/value pairs")
    pairs = list(zip(args[::2], args[1::2]))
    return f"{url}?{urlencode(pairs)}"


def resource_url(resource_id: str) -> str:
    return with_qs("/resource", "id", resource_id)


def resource_servers_url(resource_id: str) -> str:
    return with_qs("/resource/servers", "id", resource_id)


def server_url(server_id: str) -> str:
    return with_qs("/server", "id", server_id)


def resource_start_deployment_path(resource_id: str, build_id: str) -> str:
    return with_qs(
        "/resource/deployment/new", "resourceId", resource_id, "buildId", build_id
    )


def resource_deployment_log_url(resource_id: str, build_id: str) -> str:
    return with_qs(
        "/resource/deployment/build-log", "id", resource_id, "buildId", build_id
    )


def resource_run_log_url(resource_id: str) -> str:
    return with_qs("/resource/deployment/run-log", "id", resource_id)


def resource_environment_url(resource_id: str) -> str:
    return with_qs("/resource/deployment/environment", "id", resource_id)


def resource_deployment_url(resource_id: str) -> str:
    return with_qs("/resource/deployment", "id", resource_id)


def new_resource_url() -> str:
    return with_qs("/resource/create")


def new_server_url() -> str:
    return with_qs("/server/create")


def repo_commit_hash_url(repo_url: str, commit: str) -> str:
    """Return a link to ``commit`` for GitHub repositories, otherwise ""."""
    if "github.com" in repo_url:
        return f"{repo_url}/commit/{commit}"
    return ""