"""HTML and XML reporters."""

from __future__ import annotations

import html
from xml.sax.saxutils import escape as xml_escape

from storyreport.reporters.print_stream import PrintStreamOutput

HTML_PATTERNS: dict[str, str] = {
    "before_story": (
        '<div class="story">\n<h1>{description}</h1>\n<div class="path">{path}</div>\n'
    ),
    "after_story": "</div>\n",
    "given_scenarios": '<div class="givenScenarios">GivenScenarios: {paths}</div>\n',
    "before_scenario": '<div class="scenario">\n<h2>Scenario: {title}</h2>\n',
    "after_scenario": "</div>\n",
    "successful": '<div class="step successful">{step}</div>\n',
    "ignorable": '<div class="step ignorable">{step}</div>\n',
    "pending": (
        '<div class="step pending">{step} <span class="keyword pending">(PENDING)</span></div>\n'
    ),
    "not_performed": (
        '<div class="step notPerformed">{step} '
        '<span class="keyword notPerformed">(NOT PERFORMED)</span></div>\n'
    ),
    "failed": (
        '<div class="step failed">{step} <span class="keyword failed">(FAILED)</span>'
        '<pre class="failure">{error}</pre></div>\n'
    ),
}

XML_PATTERNS: dict[str, str] = {
    "before_story": '<story path="{path}" title="{description}">\n',
    "after_story": "</story>\n",
    "given_scenarios": '<givenScenarios paths="{paths}"/>\n',
    "before_scenario": '<scenario title="{title}">\n',
    "after_scenario": "</scenario>\n",
    "successful": '<step outcome="successful">{step}</step>\n',
    "ignorable": '<step outcome="ignorable">{step}</step>\n',
    "pending": '<step outcome="pending" keyword="PENDING">{step}</step>\n',
    "not_performed": '<step outcome="notPerformed" keyword="NOT PERFORMED">{step}</step>\n',
    "failed": (
        '<step outcome="failed" keyword="FAILED">{step}<failure>{error}</failure></step>\n'
    ),
}


class HtmlOutput(PrintStreamOutput):
    """HTML fragment report."""

    default_patterns = HTML_PATTERNS

    @property
    def name(self) -> str:
        return "html"

    def escape(self, value: str) -> str:
        return html.escape(value, quote=True)


class XmlOutput(PrintStreamOutput):
    """XML report."""

    default_patterns = XML_PATTERNS

    @property
    def name(self) -> str:
        return "xml"

    def escape(self, value: str) -> str:
        return xml_escape(value, {'"': "&quot;"})
