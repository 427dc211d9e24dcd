"""Tests for the command-line interface."""

import logging

import pytest
from typer.testing import CliRunner

from solid_principles import __version__
from solid_principles.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _cwd(isolated_cwd):
    """Keep config discovery and default output inside tmp_path."""
    return isolated_cwd


class TestNotifyCommand:
    def test_email(self):
        result = runner.invoke(app, ["notify", "notification via Email", "Othman"])
        assert result.exit_code == 0
        assert "'to': 'Othman'" in result.output
        assert "'message': 'notification via Email'" in result.output

    def test_sms(self):
        result = runner.invoke(app, ["notify", "notification via SMS", "Othman", "--via", "sms"])
        assert result.exit_code == 0
        assert "'message': 'notification via SMS'" in result.output

    def test_unknown_provider(self):
        result = runner.invoke(app, ["notify", "hi", "Othman", "--via", "fax"])
        assert result.exit_code != 0


class TestReportCommand:
    def test_writes_report(self, tmp_path):
        out = tmp_path / "out"
        out.mkdir()
        result = runner.invoke(app, ["report", "Report V2.txt", "Lorem ipsum...", "-o", str(out)])
        assert result.exit_code == 0
        assert "has content" in result.output
        assert (out / "Report V2.txt").read_text(encoding="utf-8") == "Lorem ipsum..."

    def test_empty_content(self, isolated_cwd):
        result = runner.invoke(app, ["report", "blank.txt", ""])
        assert result.exit_code == 0
        assert "empty" in result.output
        assert (isolated_cwd / "blank.txt").read_text(encoding="utf-8") == ""

    def test_missing_output_dir_still_exits_cleanly(self, tmp_path):
        missing = tmp_path / "missing"
        result = runner.invoke(app, ["report", "r.txt", "x", "-o", str(missing)])
        assert result.exit_code == 0
        assert not missing.exists()

    def test_config_output_dir(self, isolated_cwd):
        (isolated_cwd / "reports").mkdir()
        (isolated_cwd / "solid-principles.toml").write_text('output_dir = "reports"\n')
        result = runner.invoke(app, ["report", "r.txt", "x"])
        assert result.exit_code == 0
        assert (isolated_cwd / "reports" / "r.txt").exists()


class TestDemoCommand:
    def test_runs_both_demos(self, isolated_cwd):
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        assert "'message': 'hello world'" in result.output
        assert "'message': 'notification via SMS'" in result.output
        assert (isolated_cwd / "Report.txt").read_text(encoding="utf-8") == "Report Created!"
        assert (isolated_cwd / "Report V2.txt").exists()


class TestGlobalOptions:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_config_file(self, isolated_cwd):
        result = runner.invoke(app, ["--config", str(isolated_cwd / "nope.toml"), "demo"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_verbose_flag(self):
        result = runner.invoke(app, ["-v", "notify", "hi", "Othman"])
        assert result.exit_code == 0
        assert logging.getLogger("solid_principles").level == logging.DEBUG

    def test_quiet_flag(self):
        result = runner.invoke(app, ["-q", "notify", "hi", "Othman"])
        assert result.exit_code == 0
        assert logging.getLogger("solid_principles").level == logging.ERROR

    def test_verbosity_from_env(self, monkeypatch):
        monkeypatch.setenv("SOLID_VERBOSITY", "verbose")
        result = runner.invoke(app, ["notify", "hi", "Othman"])
        assert result.exit_code == 0
        assert logging.getLogger("solid_principles").level == logging.DEBUG

    def test_verbosity_from_toml(self, isolated_cwd):
        (isolated_cwd / "solid-principles.toml").write_text('verbosity = "quiet"\n')
        result = runner.invoke(app, ["notify", "hi", "Othman"])
        assert result.exit_code == 0
        assert logging.getLogger("solid_principles").level == logging.ERROR

    def test_non_string_config_value(self, isolated_cwd):
        (isolated_cwd / "solid-principles.toml").write_text("output_dir = 5\n")
        result = runner.invoke(app, ["report", "r.txt", "x"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output
        assert not (isolated_cwd / "r.txt").exists()

    def test_log_file(self, isolated_cwd):
        log_file = isolated_cwd / "demo.log"
        result = runner.invoke(
            app, ["-v", "--log-file", str(log_file), "report", "r.txt", "x", "-o", "missing"]
        )
        assert result.exit_code == 0
        text = log_file.read_text(encoding="utf-8")
        assert "ERROR solid_principles.reports.file_manager" in text
        assert "Cannot access file" in text


class TestMarkupInNames:
    def test_report_name_not_rendered_as_markup(self, isolated_cwd):
        result = runner.invoke(app, ["report", "[bold]x.txt", "content"])
        assert result.exit_code == 0
        assert "Exported to [bold]x.txt" in result.output
        assert (isolated_cwd / "[bold]x.txt").read_text(encoding="utf-8") == "content"
