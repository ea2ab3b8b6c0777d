"""Tests for logging setup."""

import json
import logging

from copybench.core.logging import get_struct_logger, setup_logging


def test_setup_logging_sets_root_level():
    setup_logging(level=logging.INFO)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.INFO
    assert len(root_logger.handlers) == 1


def test_setup_logging_writes_json_file(tmp_path):
    log_file = tmp_path / "logs" / "copybench.log"
    setup_logging(level=logging.DEBUG, log_file=log_file)

    logger = get_struct_logger("copybench.tests", run="logging")
    logger.info("benchmark_started", tasks=5)
    for handler in logging.getLogger().handlers:
        handler.flush()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert any(
        record["event"] == "benchmark_started"
        and record["tasks"] == 5
        and record["run"] == "logging"
        for record in records
    )


def test_warning_level_filters_info(tmp_path):
    log_file = tmp_path / "copybench.log"
    setup_logging(level=logging.WARNING, log_file=log_file)

    get_struct_logger("copybench.tests").info("hidden_event")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert not log_file.exists() or "hidden_event" not in log_file.read_text()
