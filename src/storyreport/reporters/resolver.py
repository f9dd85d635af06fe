"""Resolves a Format to a reporter instance."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, TextIO

from storyreport.core.config import DEFAULT_OUTPUT, FileConfiguration, OutputLocation
from storyreport.core.models import Format, UnsupportedFormatError
from storyreport.core.reporter import Reporter
from storyreport.output.stream_factory import FileStreamFactory
from storyreport.reporters.console import ConsoleOutput
from storyreport.reporters.markup import HtmlOutput, XmlOutput
from storyreport.reporters.print_stream import PlainTextOutput
from storyreport.reporters.stats import PostStoryStatisticsCollector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionContext:
    """What a reporter factory gets to build a reporter for one format."""

    format: Format
    stream_factory: FileStreamFactory
    location: OutputLocation

    def file_configuration(self, extension: str | None = None) -> FileConfiguration:
        """File configuration for the current location; extension defaults to the format's."""
        return FileConfiguration(
            directory=self.location.directory,
            absolute=self.location.absolute,
            extension=extension or self.format.extension or self.format.value,
        )

    def open_stream(self, extension: str | None = None) -> TextIO:
        self.stream_factory.use_configuration(self.file_configuration(extension))
        return self.stream_factory.create_stream()


# Maps a format to a callable building its reporter from a ResolutionContext.
ReporterFactory = Callable[[ResolutionContext], Reporter]

DEFAULT_FACTORIES: dict[Format, ReporterFactory] = {
    Format.CONSOLE: lambda ctx: ConsoleOutput(),
    Format.STATS: lambda ctx: PostStoryStatisticsCollector(ctx.open_stream()),
    Format.TXT: lambda ctx: PlainTextOutput(ctx.open_stream()),
    Format.HTML: lambda ctx: HtmlOutput(ctx.open_stream()),
    Format.XML: lambda ctx: XmlOutput(ctx.open_stream()),
}


class FormatResolver:
    """Per-format reporter factories, defaulting to DEFAULT_FACTORIES.

    A single format can be resolved differently without touching the others::

        resolver = FormatResolver(factory).with_factory(
            Format.TXT, lambda ctx: PlainTextOutput(ctx.open_stream("text"))
        )
    """

    def __init__(
        self,
        stream_factory: FileStreamFactory,
        factories: Mapping[Format, ReporterFactory] | None = None,
    ):
        self.stream_factory = stream_factory
        self._factories: dict[Format, ReporterFactory] = dict(
            DEFAULT_FACTORIES if factories is None else factories
        )

    @property
    def formats(self) -> list[Format]:
        """Formats this resolver can build, in declaration order."""
        return [f for f in Format if f in self._factories]

    def factory_for(self, format: Format | str) -> ReporterFactory:
        fmt = Format.parse(format)
        if fmt not in self._factories:
            raise UnsupportedFormatError(format)
        return self._factories[fmt]

    def with_factory(self, format: Format | str, factory: ReporterFactory) -> FormatResolver:
        """Return a new resolver where ``format`` is built by ``factory``."""
        factories = dict(self._factories)
        factories[Format.parse(format)] = factory
        return FormatResolver(self.stream_factory, factories)

    def resolve(
        self,
        format: Format | str,
        location: OutputLocation = DEFAULT_OUTPUT,
    ) -> Reporter:
        """Build the reporter for ``format`` writing to ``location``."""
        factory = self.factory_for(format)
        fmt = Format.parse(format)
        reporter = factory(ResolutionContext(fmt, self.stream_factory, location))
        logger.debug(
            "Resolved %s to %s (directory=%s, absolute=%s)",
            fmt.value,
            type(reporter).__name__,
            location.directory,
            location.absolute,
        )
        return reporter
