"""Replays a recorded story through a reporter."""

from __future__ import annotations

import logging

from storyreport.core.models import StepOutcome, Story
from storyreport.core.reporter import Reporter

logger = logging.getLogger(__name__)


def play_story(story: Story, reporter: Reporter) -> None:
    """Emit the events of ``story`` to ``reporter`` in execution order."""
    logger.debug("Replaying story %s through %s", story.path, reporter.name)

    reporter.before_story(story)
    for scenario in story.scenarios:
        reporter.before_scenario(scenario.title)
        if scenario.given_scenarios:
            reporter.given_scenarios(scenario.given_scenarios)
        for step in scenario.steps:
            if step.outcome == StepOutcome.FAILED:
                reporter.failed(step, step.error)
            elif step.outcome == StepOutcome.PENDING:
                reporter.pending(step)
            elif step.outcome == StepOutcome.NOT_PERFORMED:
                reporter.not_performed(step)
            elif step.outcome == StepOutcome.IGNORABLE:
                reporter.ignorable(step)
            else:
                reporter.successful(step)
        reporter.after_scenario()
    reporter.after_story()
