from datetime import datetime

from dockman.ui.log import DockerLog, LogBodyOptions, docker_log_line, log_body, log_line


def test_log_body_contains_container_and_limit():
    body = log_body(LogBodyOptions(max_logs=250))
    containers = [d for d in body.find_all("div") if d.get("id") == "build-log"]
    assert len(containers) == 1
    assert "250" in body.get("hx-on::ws-after-message")


def test_log_body_limit_changes_script():
    small = log_body(LogBodyOptions(max_logs=100)).get("hx-on::ws-after-message")
    large = log_body(LogBodyOptions(max_logs=1000)).get("hx-on::ws-after-message")
    assert "100" in small
    assert "1000" in large
    assert small != large


def test_docker_log_line_fields():
    line = docker_log_line(
        DockerLog(host_name="host-a", time=datetime(2024, 1, 2, 3, 4, 5), log="started")
    )
    assert line.get("hx-swap-oob") == "beforeend:#build-log"
    cells = line.find_all("div")[2:]
    assert [c.text_content() for c in cells] == ["host-a", "2024-01-02 03:04:05", "started"]


def test_docker_log_line_escapes_text():
    line = docker_log_line(
        DockerLog(host_name="h", time=datetime(2024, 1, 2, 3, 4, 5), log="<b>x</b>")
    )
    assert "<b>" not in line.render()


def test_plain_log_line():
    line = log_line("hello world")
    assert line.get("hx-swap-oob") == "beforeend:#build-log"
    assert "hello world" in line.text_content()
    assert "Error" not in line.text_content()
    assert "text-red-800" not in line.render()


def test_build_error_line_strips_prefix():
    line = log_line("BUILD_ERROR:failed to build")
    text = line.text_content()
    assert "BUILD_ERROR:" not in text
    assert "failed to build" in text
    error_cells = [d for d in line.find_all("div") if d.get("class") == "flex-1 text-sm text-red-800"]
    assert len(error_cells) == 1


def test_log_line_sanitizes_scripts():
    line = log_line("<script>alert(1)</script>ok")
    assert "<script>" not in line.render()