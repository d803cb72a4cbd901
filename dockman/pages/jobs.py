"""The interval job debug view: job status, timing and pause controls."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Iterable

from dockman.ui.elements import Element, attr, tag
from dockman.ui.table import Table
from dockman.urls import with_qs

TOGGLE_JOB_PATH = "/debug/job/toggle"
OWN_JOB_SOURCE = "dockman"

COLUMNS = (
    "Source",
    "Status",
    "Job Name",
    "Description",
    "Interval",
    "Last Ran",
    "Total Runs",
    "Last Run Duration",
    "Actions",
)

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass
class JobMetric:
    job_source: str
    job_name: str
    job_description: str = ""
    interval: timedelta = timedelta(0)
    last_ran: datetime = datetime.min
    total_runs: int = 0
    last_run_duration: timedelta = timedelta(0)
    job_paused: bool = False
    status: str = ""

    @property
    def key(self) -> str:
        return f"{self.job_source}-{self.job_name}"


def calculate_run_status(metric: JobMetric, now: datetime | None = None) -> str:
    """'paused', 'stopped' if overdue by more than a 10% margin, else 'running'."""
    if metric.job_paused:
        return "paused"
    now = now or datetime.now()
    time_between = metric.interval - metric.last_run_duration
    adjusted = time_between + time_between / 10
    if metric.last_ran < now - adjusted:
        return "stopped"
    return "running"


def _format(moment: datetime, with_seconds: bool) -> str:
    hour = moment.hour % 12 or 12
    clock = f"{hour}:{moment.minute:02d}"
    if with_seconds:
        clock += f":{moment.second:02d}"
    meridiem = "PM" if moment.hour >= 12 else "AM"
    return f"{_MONTHS[moment.month - 1]} {moment.day}, {moment.year} at {clock} {meridiem}"


def format_time_pretty(moment: datetime) -> str:
    """A date such as 'Jan 2, 2006 at 3:04 PM'."""
    return _format(moment, with_seconds=False)


def _trim_fraction(whole: int, fraction: int, digits: int) -> str:
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:0{digits}d}".rstrip("0")


def format_duration(duration: timedelta) -> str:
    """Render a duration as hours, minutes and seconds, e.g. '1h2m3.5s'."""
    micros = (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    if micros < 1_000:
        return f"{sign}{micros}\u00b5s"
    if micros < 1_000_000:
        return f"{sign}{_trim_fraction(micros // 1_000, micros % 1_000, 3)}ms"
    hours, rest = divmod(micros, 3_600_000_000)
    minutes, rest = divmod(rest, 60_000_000)
    seconds = _trim_fraction(rest // 1_000_000, rest % 1_000_000, 6) + "s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return f"{sign}{seconds}"


def last_updated(metrics: Iterable[JobMetric]) -> Element:
    """The time the most recent job ran."""
    latest = max((metric.last_ran for metric in metrics), default=datetime.min)
    return tag(
        "div",
        attr("class", "text-sm text-gray-500"),
        "Last updated: ",
        _format(latest, with_seconds=True),
    )


def _toggle_button(metric: JobMetric) -> Element:
    return tag(
        "button",
        attr("hx-swap", "none"),
        attr("hx-post", with_qs(TOGGLE_JOB_PATH, "job", metric.key)),
        "Resume" if metric.job_paused else "Pause",
        attr("class", "text-blue-500 hover:text-blue-700"),
    )


def job_metrics_table(metrics: Iterable[JobMetric], now: datetime | None = None) -> Element:
    """A table of jobs sorted by source and name, with their computed status."""
    now = now or datetime.now()
    rows = sorted(
        (replace(metric, status=calculate_run_status(metric, now)) for metric in metrics),
        key=lambda metric: metric.key,
    )

    table = Table()
    table.add_columns(COLUMNS)
    for metric in rows:
        table.add_row()
        table.with_cell_texts(
            metric.job_source,
            metric.status,
            metric.job_name,
            metric.job_description,
            format_duration(metric.interval),
            format_time_pretty(metric.last_ran),
            str(metric.total_runs),
            format_duration(metric.last_run_duration),
        )
        table.add_cell(_toggle_button(metric) if metric.job_source == OWN_JOB_SOURCE else tag(""))
    return table.render()