"""Opens report file streams for file-backed reporters."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import TextIO

from storyreport.core.config import FileConfiguration

logger = logging.getLogger(__name__)


class FileStreamFactory:
    """Creates one output file per story and format.

    The file name is derived from the story path: its extension is dropped,
    path separators become dots and the configured extension is appended,
    e.g. ``stories/login.story`` with extension ``html`` gives
    ``stories.login.html`` inside the configured directory.
    """

    def __init__(
        self,
        story_path: str | None = None,
        base_dir: str | Path | None = None,
        configuration: FileConfiguration | None = None,
    ):
        self.story_path = story_path
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()
        self.configuration = configuration or FileConfiguration()

    def use_configuration(self, configuration: FileConfiguration) -> None:
        self.configuration = configuration

    def use_story_path(self, story_path: str) -> None:
        self.story_path = story_path

    def output_directory(self) -> Path:
        directory = Path(self.configuration.directory)
        if self.configuration.absolute:
            return directory
        return self.base_dir / directory

    def output_file(self) -> Path:
        if not self.story_path:
            raise ValueError("No story path set on stream factory")
        name = PurePosixPath(self.story_path.replace("\\", "/"))
        stem = str(name.with_suffix("")) if name.suffix else str(name)
        file_name = f"{stem.strip('/').replace('/', '.')}.{self.configuration.extension}"
        return self.output_directory() / file_name

    def create_stream(self) -> TextIO:
        """Open the output file for the current configuration, creating parents."""
        path = self.output_file()
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("Opening report stream %s", path)
        return open(path, "w", encoding="utf-8")
