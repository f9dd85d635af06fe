"""Abstract base class for reporters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storyreport.core.models import Step, Story


class Reporter(ABC):
    """Base class for story reporters.

    Event hooks are no-ops by default so a reporter only overrides the
    events it renders.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Reporter identifier."""

    def before_story(self, story: Story) -> None:
        """Called before the first scenario of a story."""

    def after_story(self) -> None:
        """Called after the last scenario of a story."""

    def given_scenarios(self, paths: list[str]) -> None:
        """Called with the scenarios a scenario depends on."""

    def before_scenario(self, title: str) -> None:
        """Called before the steps of a scenario run."""

    def after_scenario(self) -> None:
        """Called after the steps of a scenario ran."""

    def successful(self, step: Step) -> None:
        pass

    def ignorable(self, step: Step) -> None:
        pass

    def pending(self, step: Step) -> None:
        pass

    def not_performed(self, step: Step) -> None:
        pass

    def failed(self, step: Step, error: str) -> None:
        pass

    def close(self) -> None:
        """Release any resource held by the reporter."""

    def __enter__(self) -> Reporter:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
