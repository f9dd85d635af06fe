"""CLI replay command."""

from __future__ import annotations

import click


@click.command("replay")
@click.argument("stories_file", type=click.Path(exists=True))
@click.option("--config", "-c", type=click.Path(exists=True), help="Config YAML file")
@click.option("--format", "-f", "formats", multiple=True, help="Report format (repeatable)")
@click.option("--output-dir", "-o", help="Output directory for file reports")
@click.option("--absolute/--relative", default=None, help="Treat the output directory as absolute")
@click.option("--base-dir", type=click.Path(file_okay=False), help="Base for relative output")
@click.option("--log-level", default=None, help="Log level (overrides the config file)")
def replay_cmd(
    stories_file: str,
    config: str | None,
    formats: tuple[str, ...],
    output_dir: str | None,
    absolute: bool | None,
    base_dir: str | None,
    log_level: str | None,
) -> None:
    """Replay recorded stories through the configured reporters."""
    import yaml

    from storyreport.builder import StoryReporterBuilder
    from storyreport.core.config import ReportingConfig
    from storyreport.core.models import Format, UnsupportedFormatError
    from storyreport.core.player import play_story
    from storyreport.core.story_file import load_stories
    from storyreport.output.stream_factory import FileStreamFactory
    from storyreport.reporters.composite import ReporterDispatchError
    from storyreport.utils.logging import setup_logging

    # Load config
    if config:
        report_config = ReportingConfig.from_yaml(config)
    else:
        report_config = ReportingConfig()

    # Apply CLI overrides
    report_config.merge_overrides(
        output_dir=output_dir,
        absolute=absolute,
        formats=list(formats) if formats else None,
    )
    if base_dir:
        report_config.base_dir = base_dir
    if log_level:
        report_config.log_level = log_level

    setup_logging(report_config.log_level)

    try:
        selected = [Format.parse(f) for f in report_config.formats]
    except UnsupportedFormatError as e:
        raise click.BadParameter(str(e), param_hint="--format") from e

    try:
        stories = load_stories(stories_file)
    except (ValueError, yaml.YAMLError) as e:
        raise click.ClickException(str(e)) from e

    stream_factory = FileStreamFactory(base_dir=report_config.base_dir)
    for story in stories:
        # File reporters open their streams per story, so each story gets its own builder
        stream_factory.use_story_path(story.path)
        builder = StoryReporterBuilder.from_config(
            report_config, stream_factory, default_formats=selected
        )
        try:
            builder.with_default_formats()
        except OSError as e:
            # release the streams opened before the failing format
            builder.build().close()
            raise click.ClickException(f"{story.path}: cannot open report: {e}") from e

        try:
            with builder.build() as reporter:
                play_story(story, reporter)
        except ReporterDispatchError as e:
            raise click.ClickException(f"{story.path}: {e}") from e

    click.echo(
        f"\nReplayed {len(stories)} stories to: {', '.join(f.value for f in selected)}"
    )
