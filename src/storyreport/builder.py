"""Builder composing one reporter per format into a single delegating reporter."""

from __future__ import annotations

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Iterable, Mapping

from storyreport.core.config import DEFAULT_OUTPUT, OutputLocation, ReportingConfig
from storyreport.core.models import Format
from storyreport.core.reporter import Reporter
from storyreport.output.stream_factory import FileStreamFactory
from storyreport.reporters.composite import DelegatingReporter
from storyreport.reporters.resolver import FormatResolver, ReporterFactory

logger = logging.getLogger(__name__)


class StoryReporterBuilder:
    """Builds a DelegatingReporter with one delegate per requested format.

    File-backed formats open their stream when requested, using the output
    directory and absolute flag current at that moment; later calls to
    ``output_to``/``output_as_absolute`` only affect later requests.
    Requesting a format again replaces its previous reporter. Delegates are
    kept in the order their format was first requested.

    Example::

        reporter = (
            StoryReporterBuilder(FileStreamFactory("stories/login.story"))
            .output_to("reports")
            .with_default_formats()
            .with_format(Format.HTML)
            .build()
        )

    Not thread-safe.
    """

    def __init__(
        self,
        stream_factory: FileStreamFactory,
        defaults: OutputLocation = DEFAULT_OUTPUT,
        resolver: FormatResolver | None = None,
        overrides: Mapping[Format, ReporterFactory] | None = None,
        default_formats: Iterable[Format | str] = (Format.STATS,),
    ):
        self.stream_factory = stream_factory
        self._resolver = resolver or FormatResolver(stream_factory)
        for fmt, factory in (overrides or {}).items():
            self._resolver = self._resolver.with_factory(fmt, factory)
        self._location = OutputLocation(defaults.directory, defaults.absolute)
        self._default_formats = tuple(Format.parse(f) for f in default_formats)
        self._delegates: dict[Format, Reporter] = {}

    @classmethod
    def from_config(
        cls,
        config: ReportingConfig,
        stream_factory: FileStreamFactory | None = None,
        **kwargs,
    ) -> StoryReporterBuilder:
        """Create a builder whose defaults and default formats come from ``config``."""
        if stream_factory is None:
            stream_factory = FileStreamFactory(base_dir=config.base_dir)
        kwargs.setdefault("default_formats", config.formats)
        return cls(stream_factory, defaults=config.output_location(), **kwargs)

    @property
    def resolver(self) -> FormatResolver:
        return self._resolver

    @property
    def output_directory(self) -> str:
        return self._location.directory

    @property
    def output_absolute(self) -> bool:
        return self._location.absolute

    def output_to(self, directory: str) -> StoryReporterBuilder:
        self._location = replace(self._location, directory=directory)
        return self

    def output_as_absolute(self, absolute: bool) -> StoryReporterBuilder:
        self._location = replace(self._location, absolute=absolute)
        return self

    def use_factory(self, format: Format | str, factory: ReporterFactory) -> StoryReporterBuilder:
        """Resolve ``format`` with ``factory`` from now on; other formats are unchanged."""
        self._resolver = self._resolver.with_factory(format, factory)
        return self

    def with_default_formats(self) -> StoryReporterBuilder:
        return self.with_formats(*self._default_formats)

    def with_format(self, format: Format | str) -> StoryReporterBuilder:
        fmt = Format.parse(format)
        reporter = self.reporter_for(fmt)
        previous = self._delegates.get(fmt)
        if previous is not None:
            logger.debug("Replacing %s reporter %s", fmt.value, type(previous).__name__)
        self._delegates[fmt] = reporter
        return self

    def with_formats(self, *formats: Format | str) -> StoryReporterBuilder:
        for fmt in formats:
            self.with_format(fmt)
        return self

    def reporter_for(self, format: Format | str) -> Reporter:
        """Resolve ``format`` with the current output location, without storing it."""
        return self._resolver.resolve(format, self._location)

    @property
    def delegates(self) -> Mapping[Format, Reporter]:
        """Read-only view of the current reporter per format."""
        return MappingProxyType(self._delegates)

    def get_delegates(self) -> Mapping[Format, Reporter]:
        return self.delegates

    def build(self) -> DelegatingReporter:
        return DelegatingReporter(self._delegates.values())
