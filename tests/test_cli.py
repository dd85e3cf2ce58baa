"""Tests for the grasp command-line interface."""

from __future__ import annotations

from typer.testing import CliRunner

from grasp.cli.main import app

runner = CliRunner()

DB = "1 -1 2 -1 3 -1 4 -1 -2\n1 -1 2 -1 3 -1 4 -1 -2\n1 -1 2 -1 5 -1 -2\n"


class TestMineCommand:
    def test_writes_patterns(self, tmp_path):
        db = tmp_path / "db.txt"
        db.write_text(DB, encoding="utf-8")
        out = tmp_path / "patterns.txt"

        result = runner.invoke(app, ["mine", str(db), str(out), "--min-sup", "2"])

        assert result.exit_code == 0, result.output
        assert "1 patterns written" in result.output
        assert out.read_text(encoding="utf-8") == "1 -1 2 -1 3 -1 4 -1 #SUP: 2\n"

    def test_cover_flag(self, tmp_path):
        db = tmp_path / "db.txt"
        db.write_text(DB, encoding="utf-8")
        out = tmp_path / "patterns.txt"

        result = runner.invoke(app, ["mine", str(db), str(out), "--cover"])

        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8") == "1 -1 2 -1 3 -1 4 -1 #SUP: 2 #COVER: 2\n"

    def test_config_file(self, tmp_path):
        db = tmp_path / "db.txt"
        db.write_text(DB, encoding="utf-8")
        config = tmp_path / "grasp.yaml"
        config.write_text("mining:\n  min_support: 4\nlog_level: WARNING\n", encoding="utf-8")
        out = tmp_path / "patterns.txt"

        result = runner.invoke(app, ["mine", str(db), str(out), "--config", str(config)])

        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8") == ""

    def test_missing_input(self, tmp_path):
        result = runner.invoke(
            app, ["mine", str(tmp_path / "absent.txt"), str(tmp_path / "out.txt")]
        )
        assert result.exit_code == 1
        assert "Cannot read sequence database" in result.output


class TestGraphsCommand:
    def test_summary(self, tmp_path):
        db = tmp_path / "db.txt"
        db.write_text(DB + "7 -1 8 -1 -2\n", encoding="utf-8")

        result = runner.invoke(app, ["graphs", str(db)])

        assert result.exit_code == 0, result.output
        assert "Sequences: 4" in result.output
        assert "Graphs: 2" in result.output
        assert "graph 0: 5 nodes, 4 edges, 3 with support >= 2" in result.output
