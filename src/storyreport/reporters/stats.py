"""Per-story statistics collector."""

from __future__ import annotations

import logging
from typing import TextIO

from storyreport.core.models import Step, Story
from storyreport.core.reporter import Reporter

logger = logging.getLogger(__name__)

STAT_KEYS = (
    "steps",
    "steps_successful",
    "steps_ignorable",
    "steps_pending",
    "steps_not_performed",
    "steps_failed",
    "scenarios",
    "scenarios_successful",
    "scenarios_failed",
    "given_scenarios",
)


class PostStoryStatisticsCollector(Reporter):
    """Counts step and scenario outcomes and writes them after each story.

    Statistics are written to the stream as ``key=value`` lines, one block per
    story, in ``STAT_KEYS`` order.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._counts: dict[str, int] = dict.fromkeys(STAT_KEYS, 0)
        self._scenario_failed = False

    @property
    def name(self) -> str:
        return "stats"

    @property
    def statistics(self) -> dict[str, int]:
        return dict(self._counts)

    def _count(self, key: str) -> None:
        self._counts[key] += 1

    def before_story(self, story: Story) -> None:
        self._counts = dict.fromkeys(STAT_KEYS, 0)

    def after_story(self) -> None:
        for key in STAT_KEYS:
            self._stream.write(f"{key}={self._counts[key]}\n")
        self._stream.flush()

    def given_scenarios(self, paths: list[str]) -> None:
        self._counts["given_scenarios"] += len(paths)

    def before_scenario(self, title: str) -> None:
        self._scenario_failed = False

    def after_scenario(self) -> None:
        self._count("scenarios")
        if self._scenario_failed:
            self._count("scenarios_failed")
        else:
            self._count("scenarios_successful")

    def successful(self, step: Step) -> None:
        self._count("steps")
        self._count("steps_successful")

    def ignorable(self, step: Step) -> None:
        self._count("steps")
        self._count("steps_ignorable")

    def pending(self, step: Step) -> None:
        self._count("steps")
        self._count("steps_pending")

    def not_performed(self, step: Step) -> None:
        self._count("steps")
        self._count("steps_not_performed")

    def failed(self, step: Step, error: str) -> None:
        self._count("steps")
        self._count("steps_failed")
        self._scenario_failed = True

    def close(self) -> None:
        if not self._stream.closed:
            logger.debug("Closing statistics stream")
            self._stream.close()
