"""Unit tests for the structlog JSON configuration."""

import json

import pytest
import structlog

from gitvault.utils.log import configure_logging


def test_configure_logging_emits_json_lines_on_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that events are rendered as one JSON object per line on stderr."""
    configure_logging()

    structlog.get_logger("test").info("cloning mirror", repository="u/repo", dir="/backup/repo.git")

    captured = capsys.readouterr()
    assert captured.out == ""
    event = json.loads(captured.err.strip())
    assert event["event"] == "cloning mirror"
    assert event["level"] == "info"
    assert event["repository"] == "u/repo"
    assert event["dir"] == "/backup/repo.git"
    assert "timestamp" in event


@pytest.mark.parametrize("debug,expected_lines", [(False, 0), (True, 1)])
def test_configure_logging_debug_threshold(capsys: pytest.CaptureFixture[str], debug: bool, expected_lines: int) -> None:
    """Test that debug events are only emitted in debug mode."""
    configure_logging(debug=debug)

    structlog.get_logger("test").debug("Running git command", command="git remote update")

    assert len(capsys.readouterr().err.splitlines()) == expected_lines
