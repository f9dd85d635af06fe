"""Shared fixtures."""

from __future__ import annotations

import io

import pytest

from storyreport.core.config import FileConfiguration
from storyreport.core.models import Scenario, Step, StepOutcome, Story
from storyreport.output.stream_factory import FileStreamFactory


class RecordingStreamFactory(FileStreamFactory):
    """Stream factory handing out in-memory streams and remembering each configuration."""

    def __init__(self, story_path: str = "stories/login.story"):
        super().__init__(story_path=story_path)
        self.opened: list[tuple[FileConfiguration, io.StringIO]] = []

    def create_stream(self) -> io.StringIO:
        stream = io.StringIO()
        self.opened.append((self.configuration, stream))
        return stream

    @property
    def configurations(self) -> list[FileConfiguration]:
        return [configuration for configuration, _ in self.opened]


@pytest.fixture
def stream_factory() -> RecordingStreamFactory:
    return RecordingStreamFactory()


@pytest.fixture
def story() -> Story:
    return Story(
        path="stories/login.story",
        description="User logs in",
        scenarios=[
            Scenario(
                title="valid credentials",
                given_scenarios=["stories/register.story"],
                steps=[
                    Step("Given a registered user"),
                    Step("When the user logs in"),
                    Step("Then the dashboard shows"),
                ],
            ),
            Scenario(
                title="wrong password",
                steps=[
                    Step("Given a registered user"),
                    Step("When the password is <wrong>", StepOutcome.FAILED, "AssertionError: denied"),
                    Step("Then an error shows", StepOutcome.NOT_PERFORMED),
                    Step("And the attempt is logged", StepOutcome.PENDING),
                    Step("!-- note", StepOutcome.IGNORABLE),
                ],
            ),
        ],
    )
