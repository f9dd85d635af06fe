"""YAML loader for recorded story runs."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from storyreport.core.models import Story

logger = logging.getLogger(__name__)


def load_stories(path: str | Path) -> list[Story]:
    """Load recorded stories from a YAML file with a top-level ``stories`` list."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Stories file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or "stories" not in data:
        raise ValueError(f"Invalid stories file: {path} (missing 'stories' key)")

    if not isinstance(data["stories"], list):
        raise ValueError(f"Invalid stories file: {path} ('stories' must be a list)")

    stories = [Story.from_dict(item) for item in data["stories"]]
    logger.info("Loaded %d stories from %s", len(stories), path)
    return stories
