import logging
import os
import subprocess
import sys

import pytest

from logarithm.utils import get_pylogger


def test_get_pylogger(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the logger level is read from the environment."""
    # Case 1: default level
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    logger = get_pylogger("test.logging.default")
    assert isinstance(logger, logging.Logger)
    assert logger.level == logging.INFO

    # Case 2: level names are case-insensitive
    monkeypatch.setenv("LOG_LEVEL", "debug")
    logger = get_pylogger("test.logging.debug")
    assert logger.level == logging.DEBUG


def test_get_pylogger_invalid_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test an unknown level is rejected."""
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValueError, match="VERBOSE"):
        get_pylogger("test.logging.invalid")


def test_get_pylogger_without_env_level(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Test a logger left to follow its ancestors ignores `LOG_LEVEL`."""
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    logger = get_pylogger("test.logging.unset", level_from_env=False)
    assert logger.level == logging.NOTSET


def test_import_with_unknown_log_level() -> None:
    """Test the package imports and computes under any `LOG_LEVEL`."""
    for level_name in ("trace", "10", "verbose"):
        env = dict(os.environ, LOG_LEVEL=level_name)
        result = subprocess.run(
            [
                sys.executable,
                "-c",
                "import logarithm; print(logarithm.log_in_base(8, 2))",
            ],
            env=env,
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "3.0"
