import pytest

from dockman.ui.status import RunStatus, StatusIndicatorProps, status_indicator, status_text


@pytest.mark.parametrize(
    "status, expected",
    [
        (RunStatus.RUNNING, "Running"),
        (RunStatus.PARTIALLY_RUNNING, "Partially Running"),
        (RunStatus.NOT_RUNNING, "Stopped"),
    ],
)
def test_status_text(status, expected):
    assert status_text(status) == expected


@pytest.mark.parametrize(
    "status, color",
    [
        (RunStatus.RUNNING, "bg-green-500"),
        (RunStatus.PARTIALLY_RUNNING, "bg-amber-500"),
        (RunStatus.NOT_RUNNING, "bg-red-500"),
    ],
)
def test_indicator_colour(status, color):
    dot = status_indicator(StatusIndicatorProps(run_status=status)).find_all("span")[0]
    assert color in dot.get("class")


def test_running_pulses():
    dot = status_indicator(StatusIndicatorProps(RunStatus.RUNNING)).find_all("span")[0]
    assert "animate-pulse" in dot.get("class")


def test_default_label():
    element = status_indicator(StatusIndicatorProps(RunStatus.PARTIALLY_RUNNING))
    assert element.find_all("span")[1].text_content() == "Partially Running"


def test_text_map_overrides_label():
    props = StatusIndicatorProps(
        RunStatus.RUNNING,
        {RunStatus.NOT_RUNNING: "Not Accessible", RunStatus.RUNNING: "Connected"},
    )
    assert status_indicator(props).find_all("span")[1].text_content() == "Connected"


def test_text_map_missing_entry_is_empty():
    props = StatusIndicatorProps(RunStatus.PARTIALLY_RUNNING, {RunStatus.RUNNING: "Connected"})
    assert status_indicator(props).find_all("span")[1].text_content() == ""