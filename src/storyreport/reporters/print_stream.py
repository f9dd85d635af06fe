"""Pattern-driven text reporters writing to a stream."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from storyreport.core.models import Step, Story
from storyreport.core.reporter import Reporter

logger = logging.getLogger(__name__)

TXT_PATTERNS: dict[str, str] = {
    "before_story": "{description}\n(path: {path})\n",
    "after_story": "\n",
    "given_scenarios": "GivenScenarios: {paths}\n",
    "before_scenario": "Scenario: {title}\n",
    "after_scenario": "\n",
    "successful": "{step}\n",
    "ignorable": "{step}\n",
    "pending": "{step} (PENDING)\n",
    "not_performed": "{step} (NOT PERFORMED)\n",
    "failed": "{step} (FAILED)\n{error}\n",
}


class PrintStreamOutput(Reporter):
    """Writes each event to a stream using a format pattern per event.

    ``patterns`` overrides individual entries of the default pattern table,
    e.g. ``{"pending": "{step} (TODO)\\n"}``. Placeholders available to the
    patterns are ``path``/``description`` (story), ``title`` (scenario),
    ``paths`` (given scenarios), ``step`` and ``error``.
    """

    default_patterns: dict[str, str] = TXT_PATTERNS

    def __init__(
        self,
        stream: TextIO | None = None,
        patterns: dict[str, str] | None = None,
    ):
        self._owns_stream = stream is not None
        self._stream = stream if stream is not None else sys.stdout
        self.patterns = {**self.default_patterns, **(patterns or {})}

    @property
    def name(self) -> str:
        return "print-stream"

    @property
    def stream(self) -> TextIO:
        return self._stream

    def escape(self, value: str) -> str:
        return value

    def _print(self, event: str, **values: str) -> None:
        pattern = self.patterns.get(event)
        if not pattern:
            return
        escaped = {key: self.escape(str(value)) for key, value in values.items()}
        self._stream.write(pattern.format(**escaped))

    def before_story(self, story: Story) -> None:
        self._print("before_story", description=story.description, path=story.path)

    def after_story(self) -> None:
        self._print("after_story")
        self._stream.flush()

    def given_scenarios(self, paths: list[str]) -> None:
        self._print("given_scenarios", paths=", ".join(paths))

    def before_scenario(self, title: str) -> None:
        self._print("before_scenario", title=title)

    def after_scenario(self) -> None:
        self._print("after_scenario")

    def successful(self, step: Step) -> None:
        self._print("successful", step=step.text)

    def ignorable(self, step: Step) -> None:
        self._print("ignorable", step=step.text)

    def pending(self, step: Step) -> None:
        self._print("pending", step=step.text)

    def not_performed(self, step: Step) -> None:
        self._print("not_performed", step=step.text)

    def failed(self, step: Step, error: str) -> None:
        self._print("failed", step=step.text, error=error)

    def close(self) -> None:
        if self._stream.closed:
            return
        self._stream.flush()
        if self._owns_stream:
            logger.debug("Closing %s stream", self.name)
            self._stream.close()


class PlainTextOutput(PrintStreamOutput):
    """Plain text report."""

    @property
    def name(self) -> str:
        return "txt"
