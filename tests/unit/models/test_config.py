"""Tests for runner configuration and result models."""

import pytest
from pydantic import ValidationError

from page_test_driver.models.config import RunnerConfig
from page_test_driver.models.result import RunResult


def test_defaults() -> None:
    """Defaults describe the standard local test page."""
    config = RunnerConfig()

    assert config.url == "http://localhost:8080/"
    assert config.status_element_id == "status"
    assert config.output_element_id == "output"
    assert config.running_text == "Running"
    assert config.success_text == "exit: 0"
    assert config.timeout == 10.0


@pytest.mark.parametrize(
    "kwargs",
    [{"timeout": 0}, {"timeout": -1}, {"poll_interval": -0.1}, {"unknown": 1}],
)
def test_rejects_invalid_values(kwargs: dict[str, float]) -> None:
    """Rejects non-positive timeouts, negative intervals and unknown keys."""
    with pytest.raises(ValidationError):
        RunnerConfig(**kwargs)


def test_is_frozen() -> None:
    """Configuration cannot be changed after creation."""
    config = RunnerConfig()

    with pytest.raises(ValidationError):
        config.timeout = 1  # type: ignore[misc]


@pytest.mark.parametrize(
    ("status", "exit_code"),
    [("success", 0), ("failure", 1), ("timeout", 1), ("error", 1)],
)
def test_run_result_exit_code(status: str, exit_code: int) -> None:
    """Only success maps to exit code 0."""
    result = RunResult(status=status, duration=0.0)  # type: ignore[arg-type]

    assert result.exit_code == exit_code
