"""Main CLI entry point."""

from __future__ import annotations

import click

from storyreport.cli.formats_cmd import formats_cmd
from storyreport.cli.replay import replay_cmd


@click.group()
@click.version_option(version="0.1.0", prog_name="storyreport")
def cli() -> None:
    """storyreport: fan story execution events out to several report formats."""


cli.add_command(formats_cmd, "formats")
cli.add_command(replay_cmd, "replay")

if __name__ == "__main__":
    cli()
