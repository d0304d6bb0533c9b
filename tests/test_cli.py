"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from seasurface.cli import app

runner = CliRunner()


class TestCli:
    """Tests for CLI commands."""

    def test_presets(self):
        """Should list every preset."""
        result = runner.invoke(app, ["presets"])

        assert result.exit_code == 0
        for name in ["calm", "choppy", "stormy", "default"]:
            assert name in result.stdout

    def test_simulate_json(self):
        """Should report height statistics as JSON."""
        result = runner.invoke(
            app,
            ["simulate", "--frames", "10", "--fps", "10", "--segments", "8",
             "--weather", "stormy", "--json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["frames"] == 10
        assert data["vertices"] == 81
        assert data["wave_amplitude"] == 2.5
        assert data["clock"] == pytest.approx(3.5)
        assert data["heights"]["max"] <= 1.4 * 2.5

    def test_simulate_with_ripple_and_history(self, tmp_path):
        """Should accept a ripple and save a history plot."""
        history = tmp_path / "history.png"
        result = runner.invoke(
            app,
            ["simulate", "--frames", "5", "--segments", "8",
             "--ripple", "0", "0", "1.5", "--history", str(history)],
        )

        assert result.exit_code == 0
        assert history.exists()
        assert "Final Heights" in result.stdout

    def test_simulate_rejects_bad_frames(self):
        """Zero frames should be rejected."""
        result = runner.invoke(app, ["simulate", "--frames", "0"])
        assert result.exit_code != 0

    def test_snapshot(self, tmp_path):
        """Should write a height-field image."""
        output = tmp_path / "surface.png"
        result = runner.invoke(
            app, ["snapshot", str(output), "--time", "2.0", "--segments", "16"]
        )

        assert result.exit_code == 0
        assert output.exists()
        assert output.stat().st_size > 0

    def test_version(self):
        """Should print version."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.stdout
