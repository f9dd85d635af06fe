"""Tests for the command line interface."""

import io
import logging
from pathlib import Path

from click.testing import CliRunner

from storyreport.cli.main import cli
from storyreport.output.stream_factory import FileStreamFactory

STORIES = """
stories:
  - path: stories/login.story
    description: User logs in
    scenarios:
      - title: valid credentials
        steps:
          - Given a registered user
          - text: Then the dashboard shows
            outcome: pending
"""


def _write_stories(tmp_path: Path) -> Path:
    path = tmp_path / "stories.yaml"
    path.write_text(STORIES)
    return path


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_formats_lists_every_format():
    result = CliRunner().invoke(cli, ["formats"])
    assert result.exit_code == 0
    for name in ("console", "stats", "txt", "html", "xml"):
        assert name in result.output


def test_replay_writes_reports(tmp_path: Path):
    stories = _write_stories(tmp_path)
    result = CliRunner().invoke(
        cli,
        ["replay", str(stories), "-f", "stats", "-f", "html", "-o", "out", "--base-dir", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    assert "Replayed 1 stories to: stats, html" in result.output
    stats = (tmp_path / "out" / "stories.login.stats").read_text()
    assert "steps=2" in stats
    assert "steps_pending=1" in stats
    assert "Given a registered user" in (tmp_path / "out" / "stories.login.html").read_text()


def test_replay_uses_config_file(tmp_path: Path):
    stories = _write_stories(tmp_path)
    config = tmp_path / "report.yaml"
    config.write_text(f"output:\n  directory: {tmp_path / 'abs'}\n  absolute: true\nformats: [xml]\n")

    result = CliRunner().invoke(cli, ["replay", str(stories), "-c", str(config)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "abs" / "stories.login.xml").exists()


def test_replay_rejects_unknown_format(tmp_path: Path):
    stories = _write_stories(tmp_path)
    result = CliRunner().invoke(cli, ["replay", str(stories), "-f", "pdf", "--base-dir", str(tmp_path)])
    assert result.exit_code != 0
    assert "pdf" in result.output


def test_replay_rejects_invalid_stories_file(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("nothing: here\n")
    result = CliRunner().invoke(cli, ["replay", str(path), "--base-dir", str(tmp_path)])
    assert result.exit_code != 0
    assert "missing 'stories' key" in result.output


def test_replay_reports_step_without_text(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text(
        "stories:\n"
        "  - path: a.story\n"
        "    scenarios:\n"
        "      - title: t\n"
        "        steps:\n"
        "          - outcome: failed\n"
    )
    result = CliRunner().invoke(cli, ["replay", str(path), "--base-dir", str(tmp_path)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, KeyError)
    assert "missing the 'text' key" in result.output


def test_replay_reports_scenario_that_is_not_a_mapping(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("stories:\n  - path: a.story\n    scenarios:\n      - just a title\n")
    result = CliRunner().invoke(cli, ["replay", str(path), "--base-dir", str(tmp_path)])
    assert result.exit_code == 1
    assert "Scenario entry must be a mapping" in result.output


def test_replay_reports_invalid_yaml(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("stories: [unclosed\n")
    result = CliRunner().invoke(cli, ["replay", str(path), "--base-dir", str(tmp_path)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_replay_uses_config_log_level(tmp_path: Path):
    stories = _write_stories(tmp_path)
    config = tmp_path / "report.yaml"
    config.write_text("log_level: DEBUG\nformats: [stats]\n")

    result = CliRunner().invoke(
        cli, ["replay", str(stories), "-c", str(config), "--base-dir", str(tmp_path)]
    )

    assert result.exit_code == 0, result.output
    assert logging.getLogger("storyreport").level == logging.DEBUG


def test_replay_log_level_option_overrides_config(tmp_path: Path):
    stories = _write_stories(tmp_path)
    config = tmp_path / "report.yaml"
    config.write_text("log_level: DEBUG\nformats: [stats]\n")

    result = CliRunner().invoke(
        cli,
        ["replay", str(stories), "-c", str(config), "--log-level", "WARNING", "--base-dir", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    assert logging.getLogger("storyreport").level == logging.WARNING


def test_replay_closes_opened_streams_when_a_format_fails(tmp_path: Path, monkeypatch):
    stories = _write_stories(tmp_path)
    opened: list[io.StringIO] = []

    def create_stream(self):
        if opened:
            raise OSError("disk full")
        stream = io.StringIO()
        opened.append(stream)
        return stream

    monkeypatch.setattr(FileStreamFactory, "create_stream", create_stream)
    result = CliRunner().invoke(
        cli, ["replay", str(stories), "-f", "stats", "-f", "html", "--base-dir", str(tmp_path)]
    )

    assert result.exit_code == 1
    assert "cannot open report: disk full" in result.output
    assert len(opened) == 1
    assert opened[0].closed
