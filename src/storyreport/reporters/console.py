"""Console reporter using Rich."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from storyreport.core.models import Step, Story
from storyreport.core.reporter import Reporter


class ConsoleOutput(Reporter):
    """Reporter that prints story events to the terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    @property
    def name(self) -> str:
        return "console"

    def before_story(self, story: Story) -> None:
        self.console.print()
        if story.description:
            self.console.print(f"[bold]{escape(story.description)}[/bold]")
        self.console.print(f"[dim](path: {escape(story.path)})[/dim]")

    def after_story(self) -> None:
        self.console.print()

    def given_scenarios(self, paths: list[str]) -> None:
        self.console.print(f"  GivenScenarios: {escape(', '.join(paths))}")

    def before_scenario(self, title: str) -> None:
        self.console.print(f"[cyan]Scenario: {escape(title)}[/cyan]")

    def successful(self, step: Step) -> None:
        self.console.print(f"  [green]{escape(step.text)}[/green]")

    def ignorable(self, step: Step) -> None:
        self.console.print(f"  [dim]{escape(step.text)}[/dim]")

    def pending(self, step: Step) -> None:
        self.console.print(f"  [yellow]{escape(step.text)} (PENDING)[/yellow]")

    def not_performed(self, step: Step) -> None:
        self.console.print(f"  [magenta]{escape(step.text)} (NOT PERFORMED)[/magenta]")

    def failed(self, step: Step, error: str) -> None:
        self.console.print(f"  [red]{escape(step.text)} (FAILED)[/red]")
        if error:
            self.console.print(f"    [red]{escape(error)}[/red]")

    def close(self) -> None:
        self.console.file.flush()
