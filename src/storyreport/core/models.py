"""Core data models for story reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class UnsupportedFormatError(ValueError):
    """Raised when a reporter is requested for a format outside the known set."""

    def __init__(self, format: Any):
        self.format = format
        super().__init__(f"Building reporter not supported for format {format!r}")


class Format(str, Enum):
    """Output channel a reporter writes to."""

    CONSOLE = "console"
    STATS = "stats"
    TXT = "txt"
    HTML = "html"
    XML = "xml"

    @property
    def extension(self) -> str | None:
        """Default file extension, or None for formats that are not file-backed."""
        if self is Format.CONSOLE:
            return None
        return self.value

    @property
    def file_backed(self) -> bool:
        return self.extension is not None

    @classmethod
    def parse(cls, value: Format | str) -> Format:
        """Coerce a Format or a case-insensitive name/value string to a Format."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise UnsupportedFormatError(value)


class StepOutcome(str, Enum):
    """Result of executing a single step."""

    SUCCESSFUL = "successful"
    IGNORABLE = "ignorable"
    PENDING = "pending"
    NOT_PERFORMED = "not_performed"
    FAILED = "failed"


@dataclass(frozen=True)
class Step:
    """A step as executed, with its outcome."""

    text: str
    outcome: StepOutcome = StepOutcome.SUCCESSFUL
    error: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | str) -> Step:
        if isinstance(data, str):
            return cls(text=data)
        if not isinstance(data, dict):
            raise ValueError(f"Step entry must be a string or a mapping, got {data!r}")
        if "text" not in data:
            raise ValueError("Step entry is missing the 'text' key")
        return cls(
            text=data["text"],
            outcome=StepOutcome(data.get("outcome", StepOutcome.SUCCESSFUL.value)),
            error=data.get("error", ""),
        )


@dataclass
class Scenario:
    """A scenario and the steps it ran."""

    title: str
    steps: list[Step] = field(default_factory=list)
    given_scenarios: list[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return any(step.outcome == StepOutcome.FAILED for step in self.steps)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Scenario:
        if not isinstance(data, dict):
            raise ValueError(f"Scenario entry must be a mapping, got {data!r}")
        steps = data.get("steps") or []
        if not isinstance(steps, list):
            raise ValueError("Scenario 'steps' must be a list")
        given = data.get("given_scenarios") or []
        if isinstance(given, str):
            given = [given]
        return cls(
            title=data.get("title", ""),
            steps=[Step.from_dict(s) for s in steps],
            given_scenarios=list(given),
        )


@dataclass
class Story:
    """A recorded story run: its path, description and scenarios."""

    path: str
    description: str = ""
    scenarios: list[Scenario] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Story:
        if not isinstance(data, dict):
            raise ValueError(f"Story entry must be a mapping, got {data!r}")
        if "path" not in data:
            raise ValueError("Story entry is missing the 'path' key")
        scenarios = data.get("scenarios") or []
        if not isinstance(scenarios, list):
            raise ValueError("Story 'scenarios' must be a list")
        return cls(
            path=data["path"],
            description=data.get("description", ""),
            scenarios=[Scenario.from_dict(s) for s in scenarios],
            metadata=data.get("metadata", {}),
        )
