"""CLI formats command."""

from __future__ import annotations

import click


@click.command("formats")
def formats_cmd() -> None:
    """List the supported report formats."""
    from rich.console import Console
    from rich.table import Table

    from storyreport.core.models import Format

    console = Console()

    table = Table(title="Report Formats")
    table.add_column("Format", style="cyan")
    table.add_column("Extension")
    table.add_column("Output")

    for fmt in Format:
        table.add_row(fmt.value, fmt.extension or "-", "file" if fmt.file_backed else "terminal")

    console.print(table)
