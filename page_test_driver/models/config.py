"""Configuration of a single page test run."""

from pydantic import Field

from page_test_driver.models.base import Model

RUNNING_TEXT = "Running"
SUCCESS_TEXT = "exit: 0"


class RunnerConfig(Model):
    """What page to open, which elements to watch and how long to wait."""

    url: str = Field(
        default="http://localhost:8080/", description="Page under test"
    )
    status_element_id: str = Field(
        default="status", description="Id of the element reporting progress"
    )
    output_element_id: str = Field(
        default="output", description="Id of the element holding captured output"
    )
    running_text: str = Field(
        default=RUNNING_TEXT, description="Status text while the test is running"
    )
    success_text: str = Field(
        default=SUCCESS_TEXT, description="Status text of a passed test"
    )
    timeout: float = Field(
        default=10.0, gt=0, description="Seconds to wait for the test to finish"
    )
    poll_interval: float = Field(
        default=0.1, ge=0, description="Seconds between status reads"
    )
