"""Test factories for generating test data."""

from polyfactory.factories import DataclassFactory

from page_test_driver.models.result import RunResult


class RunResultFactory(DataclassFactory[RunResult]):
    """Factory for RunResult."""

    __model__ = RunResult

    message = None
    output = None
    status_text = None
