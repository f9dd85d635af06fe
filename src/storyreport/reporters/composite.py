"""Reporter that fans events out to several delegates."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from storyreport.core.models import Step, Story
from storyreport.core.reporter import Reporter

logger = logging.getLogger(__name__)


class ReporterDispatchError(RuntimeError):
    """Raised after an event was dispatched and one or more delegates failed."""

    def __init__(self, event: str, failures: list[tuple[Reporter, Exception]]):
        self.event = event
        self.failures = failures
        details = "; ".join(f"{reporter.name}: {exc}" for reporter, exc in failures)
        super().__init__(f"{len(failures)} reporter(s) failed on {event}: {details}")


class DelegatingReporter(Reporter):
    """Forwards every event to each delegate, in order.

    A failing delegate does not stop the others: failures are collected and
    raised together as a ReporterDispatchError once every delegate has seen
    the event.
    """

    def __init__(self, delegates: Iterable[Reporter] = ()):
        self._delegates: tuple[Reporter, ...] = tuple(delegates)

    @property
    def name(self) -> str:
        return "delegating"

    @property
    def delegates(self) -> tuple[Reporter, ...]:
        return self._delegates

    def _dispatch(self, event: str, *args: Any) -> None:
        failures: list[tuple[Reporter, Exception]] = []
        for delegate in self._delegates:
            try:
                getattr(delegate, event)(*args)
            except Exception as e:
                logger.warning("Reporter %s failed on %s: %s", delegate.name, event, e)
                failures.append((delegate, e))
        if failures:
            raise ReporterDispatchError(event, failures)

    def before_story(self, story: Story) -> None:
        self._dispatch("before_story", story)

    def after_story(self) -> None:
        self._dispatch("after_story")

    def given_scenarios(self, paths: list[str]) -> None:
        self._dispatch("given_scenarios", paths)

    def before_scenario(self, title: str) -> None:
        self._dispatch("before_scenario", title)

    def after_scenario(self) -> None:
        self._dispatch("after_scenario")

    def successful(self, step: Step) -> None:
        self._dispatch("successful", step)

    def ignorable(self, step: Step) -> None:
        self._dispatch("ignorable", step)

    def pending(self, step: Step) -> None:
        self._dispatch("pending", step)

    def not_performed(self, step: Step) -> None:
        self._dispatch("not_performed", step)

    def failed(self, step: Step, error: str) -> None:
        self._dispatch("failed", step, error)

    def close(self) -> None:
        self._dispatch("close")
