"""Tests for the CLI error handling decorator."""

from unittest.mock import patch

import pytest
import typer

from copybench.cli.decorators import handle_errors
from copybench.core.errors import ConfigError, CopyFailedError


@pytest.mark.parametrize(
    ("error", "event"),
    [
        (CopyFailedError("block copy failed"), "copy_failed"),
        (ConfigError("Unknown encoding: nope"), "configuration_error"),
        (RuntimeError("boom"), "unexpected_error"),
    ],
)
def test_handled_error_is_logged_once_and_exits(capsys, error, event):
    @handle_errors
    def command() -> None:
        raise error

    with patch("copybench.cli.decorators.error_handling.logger") as mock_logger:
        with pytest.raises(typer.Exit) as exc_info:
            command()

    assert exc_info.value.exit_code == 1
    mock_logger.error.assert_called_once()
    assert mock_logger.error.call_args.args[0] == event
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_successful_command_returns_value():
    @handle_errors
    def command() -> int:
        return 42

    assert command() == 42
