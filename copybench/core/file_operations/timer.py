"""Wall-clock timing for copy tasks."""

import time
from dataclasses import dataclass

from rich.console import Console

from copybench.core.logging import get_struct_logger

from .protocols import CopyTaskProtocol


logger = get_struct_logger(__name__)


@dataclass
class TaskTiming:
    """Elapsed wall-clock time of one task run."""

    label: str
    elapsed: float

    def __str__(self) -> str:
        return f"{self.label} : {self.elapsed:.6f} sec"


class TaskTimer:
    """Runs tasks and reports how long each one took."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def measure(self, task: CopyTaskProtocol) -> TaskTiming:
        """Run ``task`` and return its elapsed time.

        Exceptions raised by the task propagate unchanged.
        """
        label = str(task)
        start_time = time.perf_counter()
        task.run()
        elapsed = time.perf_counter() - start_time
        logger.debug("task_measured", task=label, elapsed=elapsed)
        return TaskTiming(label=label, elapsed=elapsed)

    def measure_and_print(self, task: CopyTaskProtocol) -> TaskTiming:
        """Run ``task`` and print ``<label> : <seconds> sec``."""
        timing = self.measure(task)
        self.console.print(str(timing), markup=False)
        return timing
