"""Tests for the task timer."""

import io
import time

import pytest
from rich.console import Console

from copybench.core.errors import CopyFailedError
from copybench.core.file_operations import CopyTaskProtocol, TaskTimer, TaskTiming


class SleepingTask:
    def __init__(self, label: str, seconds: float = 0.01):
        self.label = label
        self.seconds = seconds
        self.runs = 0

    def run(self) -> None:
        self.runs += 1
        time.sleep(self.seconds)

    def __str__(self) -> str:
        return self.label


class FailingTask:
    def run(self) -> None:
        raise CopyFailedError("boom")

    def __str__(self) -> str:
        return "failing"


@pytest.fixture
def console_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def timer(console_output) -> TaskTimer:
    return TaskTimer(console=Console(file=console_output, width=120))


def test_task_satisfies_protocol():
    assert isinstance(SleepingTask("x"), CopyTaskProtocol)


def test_measure_runs_task_once(timer):
    task = SleepingTask("sleep", seconds=0.02)

    timing = timer.measure(task)

    assert task.runs == 1
    assert timing.label == "sleep"
    assert timing.elapsed >= 0.02


def test_measure_does_not_print(timer, console_output):
    timer.measure(SleepingTask("quiet", seconds=0))

    assert console_output.getvalue() == ""


def test_measure_and_print(timer, console_output):
    timing = timer.measure_and_print(SleepingTask("1.Copy a file byte-by-byte"))

    output = console_output.getvalue()
    assert output.startswith("1.Copy a file byte-by-byte : ")
    assert output.rstrip().endswith("sec")
    assert f"{timing.elapsed:.6f}" in output


def test_task_errors_propagate(timer, console_output):
    with pytest.raises(CopyFailedError):
        timer.measure_and_print(FailingTask())

    assert console_output.getvalue() == ""


def test_timing_str():
    assert str(TaskTiming(label="task", elapsed=1.5)) == "task : 1.500000 sec"
