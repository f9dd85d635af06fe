"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_OUTPUT_DIRECTORY = "story-reports"


@dataclass(frozen=True)
class FileConfiguration:
    """Where a file-backed reporter writes: directory, absolute flag and extension."""

    directory: str = DEFAULT_OUTPUT_DIRECTORY
    absolute: bool = False
    extension: str = "txt"


@dataclass(frozen=True)
class OutputLocation:
    """Output directory and whether it is absolute."""

    directory: str = DEFAULT_OUTPUT_DIRECTORY
    absolute: bool = False


DEFAULT_OUTPUT = OutputLocation()


@dataclass
class OutputConfig:
    """Configuration for the output location."""

    directory: str = DEFAULT_OUTPUT_DIRECTORY
    absolute: bool = False


@dataclass
class ReportingConfig:
    """Top-level reporting configuration."""

    output: OutputConfig = field(default_factory=OutputConfig)
    formats: list[str] = field(default_factory=lambda: ["stats"])
    base_dir: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, path: str | Path) -> ReportingConfig:
        """Load configuration from a YAML file."""
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReportingConfig:
        """Create configuration from a dictionary."""
        config = cls()

        if "output" in data:
            out = data["output"] or {}
            config.output = OutputConfig(
                directory=out.get("directory", DEFAULT_OUTPUT_DIRECTORY),
                absolute=out.get("absolute", False),
            )

        formats = data.get("formats", ["stats"])
        if isinstance(formats, str):
            formats = [formats]
        config.formats = list(formats)
        config.base_dir = data.get("base_dir")
        config.log_level = data.get("log_level", "INFO")

        return config

    def merge_overrides(
        self,
        output_dir: str | None = None,
        absolute: bool | None = None,
        formats: list[str] | None = None,
    ) -> None:
        """Apply CLI overrides to the config."""
        if output_dir:
            self.output.directory = output_dir
        if absolute is not None:
            self.output.absolute = absolute
        if formats:
            self.formats = formats

    def output_location(self) -> OutputLocation:
        return OutputLocation(directory=self.output.directory, absolute=self.output.absolute)
