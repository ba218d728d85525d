"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from baseline_coach import cli as cli_module
from baseline_coach.cli import cli


def write(tmp_path, name, text):
    path = tmp_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestScanCommand:
    """Test `baseline-coach scan`."""

    def test_json_output(self, site_dir):
        result = CliRunner().invoke(cli, ["scan", "--path", str(site_dir), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["filesScanned"] == 4
        assert [f["featureId"] for f in data["findings"]] == [
            "dialog", "share", "async-clipboard", "async-clipboard", "subgrid", "has",
        ]

    def test_console_output(self, site_dir):
        result = CliRunner().invoke(cli, ["scan", "--path", str(site_dir)])

        assert result.exit_code == 0
        assert "scanned 4 files" in result.output
        assert "Web Share API [share]" in result.output

    def test_markdown_output(self, site_dir):
        result = CliRunner().invoke(cli, ["scan", "--path", str(site_dir), "--format", "markdown"])

        assert result.exit_code == 0
        assert result.output.startswith("# Baseline Coach Report")

    def test_policy_none_reports_but_passes(self, tmp_path):
        write(tmp_path, "vt.css", "@view-transition { navigation: auto; }\n")

        result = CliRunner().invoke(cli, ["scan", "--path", str(tmp_path), "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["findings"][0]["baseline"] is False

    def test_fail_on_limited(self, tmp_path):
        write(tmp_path, "vt.css", "@view-transition { navigation: auto; }\n")

        result = CliRunner().invoke(cli, ["scan", "--path", str(tmp_path), "--fail-on", "limited"])

        assert result.exit_code == 2

    def test_fail_on_newly_with_limited(self, tmp_path):
        write(tmp_path, "vt.css", "@view-transition { navigation: auto; }\n")

        result = CliRunner().invoke(cli, ["scan", "--path", str(tmp_path), "--fail-on", "newly"])

        assert result.exit_code == 3

    def test_newly_only_site(self, site_dir):
        runner = CliRunner()

        limited = runner.invoke(cli, ["scan", "--path", str(site_dir), "--fail-on", "limited"])
        newly = runner.invoke(cli, ["scan", "--path", str(site_dir), "--fail-on", "newly"])

        assert limited.exit_code == 0
        assert newly.exit_code == 3

    def test_exts_option(self, site_dir):
        result = CliRunner().invoke(cli, ["scan", "--path", str(site_dir), "--exts", "html", "--format", "json"])

        data = json.loads(result.output)
        assert data["filesScanned"] == 1
        assert [f["featureId"] for f in data["findings"]] == ["dialog"]

    def test_config_file_with_override(self, tmp_path, site_dir):
        config = write(tmp_path, "coach.json", json.dumps({
            "path": str(site_dir),
            "output_format": "json",
            "fail_on": "limited",
        }))

        result = CliRunner().invoke(cli, ["scan", "--config", str(config), "--fail-on", "newly"])

        assert result.exit_code == 3
        assert json.loads(result.output)["filesScanned"] == 4

    def test_output_file(self, tmp_path, site_dir):
        out = tmp_path / "report.json"

        result = CliRunner().invoke(cli, ["scan", "--path", str(site_dir), "--output", str(out)])

        assert result.exit_code == 0
        assert json.loads(out.read_text(encoding="utf-8"))["filesScanned"] == 4

    @pytest.mark.parametrize("output_format", ["json", "markdown", "console"])
    def test_output_save_failure_prints_no_report(self, tmp_path, site_dir, output_format):
        out = tmp_path / "missing" / "report.out"

        result = CliRunner().invoke(cli, [
            "scan", "--path", str(site_dir), "--format", output_format, "--output", str(out),
        ])

        assert result.exit_code == 1
        assert "Baseline Coach failed" in result.output
        assert "filesScanned" not in result.output
        assert "Baseline Coach: scanned" not in result.output
        assert "Baseline Coach Report" not in result.output
        assert "dialog" not in result.output
        assert not out.exists()

    def test_read_failure_exits_one_without_report(self, tmp_path):
        (tmp_path / "bad.js").write_bytes(b"\xff\xfe")

        result = CliRunner().invoke(cli, ["scan", "--path", str(tmp_path), "--format", "json"])

        assert result.exit_code == 1
        assert "Baseline Coach failed" in result.output
        assert "filesScanned" not in result.output

    def test_scanner_exception_exits_one(self, site_dir, monkeypatch):
        class ExplodingScanner:
            def __init__(self, config):
                pass

            def scan(self):
                raise RuntimeError("walk failed")

        monkeypatch.setattr(cli_module, "BaselineScanner", ExplodingScanner)

        result = CliRunner().invoke(cli, ["scan", "--path", str(site_dir)])

        assert result.exit_code == 1
        assert "walk failed" in result.output


class TestInfoCommand:
    """Test `baseline-coach info`."""

    def test_known_feature(self):
        result = CliRunner().invoke(cli, ["info", "dialog"])

        assert result.exit_code == 0
        assert "<dialog> element" in result.output
        assert "Baseline: Widely available (since 2024-09-14)" in result.output
        assert "Source: built-in catalog" in result.output

    def test_unknown_feature(self):
        result = CliRunner().invoke(cli, ["info", "marquee"])

        assert result.exit_code == 1
        assert "Unknown feature: marquee" in result.output


class TestOtherCommands:
    """Test `features` and `init-config`."""

    def test_features_lists_catalog(self):
        result = CliRunner().invoke(cli, ["features"])

        assert result.exit_code == 0
        for feature_id in ("has", "subgrid", "dialog", "share"):
            assert feature_id in result.output
        assert "6 features (fallback)" in result.output

    def test_init_config(self, tmp_path):
        target = tmp_path / "coach.yaml"

        result = CliRunner().invoke(cli, ["init-config", "--config-template", str(target)])

        assert result.exit_code == 0
        assert target.exists()
        assert "fail_on: none" in target.read_text(encoding="utf-8")
