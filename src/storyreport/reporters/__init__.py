"""Reporters for every output format, plus the format resolver and fan-out reporter."""

from storyreport.reporters.composite import DelegatingReporter, ReporterDispatchError
from storyreport.reporters.console import ConsoleOutput
from storyreport.reporters.markup import HtmlOutput, XmlOutput
from storyreport.reporters.print_stream import PlainTextOutput, PrintStreamOutput
from storyreport.reporters.resolver import (
    DEFAULT_FACTORIES,
    FormatResolver,
    ReporterFactory,
    ResolutionContext,
)
from storyreport.reporters.stats import PostStoryStatisticsCollector

__all__ = [
    "DEFAULT_FACTORIES",
    "ConsoleOutput",
    "DelegatingReporter",
    "FormatResolver",
    "HtmlOutput",
    "PlainTextOutput",
    "PostStoryStatisticsCollector",
    "PrintStreamOutput",
    "ReporterDispatchError",
    "ReporterFactory",
    "ResolutionContext",
    "XmlOutput",
]
