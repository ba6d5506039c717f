"""Integration tests for CLI commands using CliRunner."""

from __future__ import annotations

import json
from pathlib import Path

import msgspec
from typer.testing import CliRunner

from synthetic_quota.catalog import get_fallback_models
from synthetic_quota.cli.app import ExitCode
from synthetic_quota.cli.app import app

runner = CliRunner()


class TestQuotaCommand:
    """Tests for the quota command."""

    def test_renders_from_file(self, sample_payload_file):
        """Renders the bar, percent and countdown."""
        result = runner.invoke(app, ["quota", str(sample_payload_file), "--width", "10"])
        assert result.exit_code == 0, result.output
        assert "█████░░░░░" in result.output
        assert "50%" in result.output
        assert "resets in" in result.output

    def test_reads_stdin(self, sample_payload):
        """'-' reads the payload from stdin."""
        result = runner.invoke(
            app,
            ["quota", "-", "--width", "4"],
            input=msgspec.json.encode(sample_payload).decode(),
        )
        assert result.exit_code == 0, result.output
        assert "██░░" in result.output

    def test_json_output(self, sample_payload_file):
        """--json emits a report object."""
        result = runner.invoke(
            app, ["--json", "quota", str(sample_payload_file), "-w", "10"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["used"] == 67.5
        assert data["limit"] == 135
        assert data["remaining"] == 67.5
        assert data["percent"] == 50
        assert data["bar"] == "█████░░░░░"
        assert data["color"] == "success"
        assert data["resets_at"] == "2099-01-01T00:00:00Z"
        assert data["resets_in"].endswith("m")

    def test_width_from_env(self, sample_payload_file, monkeypatch):
        """Bar width falls back to configuration."""
        monkeypatch.setenv("SYNTHETIC_QUOTA_BAR_WIDTH", "6")
        result = runner.invoke(app, ["--json", "quota", str(sample_payload_file)])
        assert json.loads(result.stdout)["bar"] == "███░░░"

    def test_glyphs_from_config_file(self, sample_payload_file, isolated_config):
        """Glyphs come from config.toml."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.toml").write_text(
            '[display]\nfilled_glyph = "#"\nempty_glyph = "-"\n', encoding="utf-8"
        )
        result = runner.invoke(
            app, ["--json", "quota", str(sample_payload_file), "-w", "4"]
        )
        assert json.loads(result.stdout)["bar"] == "##--"

    def test_over_limit_is_error_color(self, tmp_path):
        """Usage beyond the limit is clamped and flagged."""
        path = tmp_path / "over.json"
        path.write_text('{"subscription": {"limit": 10, "requests": 25}}')
        result = runner.invoke(app, ["--json", "quota", str(path)])
        data = json.loads(result.stdout)
        assert data["percent"] == 100
        assert data["color"] == "error"
        assert data["remaining"] == 0
        assert data["resets_in"] is None

    def test_missing_file(self, tmp_path):
        """A missing file is an input error."""
        result = runner.invoke(app, ["quota", str(tmp_path / "nope.json")])
        assert result.exit_code == ExitCode.INPUT_ERROR
        assert "File not found" in result.output

    def test_invalid_payload(self, tmp_path):
        """A malformed payload is an input error."""
        path = tmp_path / "bad.json"
        path.write_text('{"usage": 1}')
        result = runner.invoke(app, ["quota", str(path)])
        assert result.exit_code == ExitCode.INPUT_ERROR
        assert "Invalid quota payload" in result.output

    def test_invalid_timestamp(self, tmp_path):
        """A bad renewal time fails loudly."""
        path = tmp_path / "bad_time.json"
        path.write_text(
            '{"subscription": {"limit": 10, "requests": 1, "renewsAt": "soon"}}'
        )
        result = runner.invoke(app, ["--json", "quota", str(path)])
        assert result.exit_code == ExitCode.INPUT_ERROR
        data = json.loads(result.stdout)
        assert data["error"]["category"] == "parse"
        assert data["error"]["details"] == {"value": "soon"}

    def test_invalid_config(self, sample_payload_file, isolated_config):
        """A broken config file exits with CONFIG_ERROR."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.toml").write_text("[display\n", encoding="utf-8")
        result = runner.invoke(app, ["quota", str(sample_payload_file)])
        assert result.exit_code == ExitCode.CONFIG_ERROR


class TestModelsCommand:
    """Tests for the models command."""

    def test_table_default_limit(self):
        """Table shows the configured number of models."""
        result = runner.invoke(app, ["models"])
        assert result.exit_code == 0, result.output
        models = get_fallback_models()
        assert models[0].name in result.output
        assert f"{len(models) - 5} more not shown" in result.output

    def test_json_limit(self):
        """--limit caps JSON output."""
        result = runner.invoke(app, ["--json", "models", "--limit", "3"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert len(data) == 3
        assert data[0] == {"id": "hf:moonshotai/Kimi-K2.5", "name": "Kimi K2.5"}

    def test_all(self):
        """--all lists every model."""
        result = runner.invoke(app, ["--json", "models", "--all"])
        assert len(json.loads(result.stdout)) == len(get_fallback_models())

    def test_quiet_prints_ids(self):
        """Quiet mode prints one id per line."""
        result = runner.invoke(app, ["--quiet", "models", "-n", "2"])
        lines = result.output.strip().splitlines()
        assert lines == [model.id for model in get_fallback_models()[:2]]

    def test_limit_from_config(self, isolated_config):
        """model_limit is read from config.toml."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.toml").write_text(
            "[display]\nmodel_limit = 1\n", encoding="utf-8"
        )
        result = runner.invoke(app, ["--json", "models"])
        assert len(json.loads(result.stdout)) == 1


class TestPriceCommand:
    """Tests for the price command."""

    def test_json(self):
        """Prices are parsed to per-million values."""
        result = runner.invoke(app, ["--json", "price", "$0.00000055", "$1.20", "junk"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["$0.00000055"] == 0.55
        assert data["$1.20"] == 1.2
        assert data["junk"] == 0

    def test_quiet(self):
        """Quiet mode prints bare numbers."""
        result = runner.invoke(app, ["--quiet", "price", "$0.00000055"])
        assert result.output.strip() == "0.55"

    def test_default(self):
        """Default output labels the unit."""
        result = runner.invoke(app, ["price", "$1.20"])
        assert "$1.2" in result.output
        assert "1M tokens" in result.output
