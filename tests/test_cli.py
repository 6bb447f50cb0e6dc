"""Tests for the CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from field_binding import __version__
from field_binding.cli import app, load_rules
from field_binding.errors import RulesFileError

runner = CliRunner()


class TestCheckCommand:
    """Tests for the check command."""

    def test_valid_value(self) -> None:
        result = runner.invoke(
            app,
            ["check", "a", "a@b.com", "--name", "email", "--label", "Email", "--debounce", "20"],
        )

        assert result.exit_code == 0, result.output
        assert "'a@b.com'" in result.output
        assert "none" in result.output

    def test_required_empty_value_fails(self) -> None:
        result = runner.invoke(
            app,
            ["check", "", "--label", "Name", "--required", "--debounce", "10"],
        )

        assert result.exit_code == 1
        assert "Name is required" in result.output
        assert "*Name" in result.output

    def test_rules_file(self, tmp_path: Path) -> None:
        rules_path = tmp_path / "rules.json"
        rules_path.write_text(json.dumps({"debounceTimer": 10, "minLength": 5}))

        result = runner.invoke(
            app,
            ["check", "abc", "--label", "Code", "--rules", str(rules_path)],
        )

        assert result.exit_code == 1
        assert "Code must be at least 5 characters" in result.output

    def test_negative_debounce_rejected(self) -> None:
        result = runner.invoke(app, ["check", "x", "--debounce", "-5"])

        assert result.exit_code == 2

    def test_rules_file_override_revalidated(self, tmp_path: Path) -> None:
        rules_path = tmp_path / "rules.yaml"
        rules_path.write_text("debounceTimer: 10\nminLength: 2\n")

        result = runner.invoke(
            app,
            ["check", "abc", "--required", "--debounce", "15", "--rules", str(rules_path)],
        )

        assert result.exit_code == 0, result.output
        assert "15" in result.output

    def test_missing_rules_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["check", "x", "--rules", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
        assert "file not found" in result.output.replace("\n", " ")


class TestLoadRules:
    """Tests for rules file loading."""

    def test_yaml_rules(self, tmp_path: Path) -> None:
        rules_path = tmp_path / "rules.yaml"
        rules_path.write_text("required: true\ndebounceTimer: 300\n")

        rules = load_rules(rules_path)

        assert rules.required is True
        assert rules.debounce_timer == 300

    def test_empty_file(self, tmp_path: Path) -> None:
        rules_path = tmp_path / "rules.yaml"
        rules_path.write_text("")

        assert load_rules(rules_path).required is False

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        rules_path = tmp_path / "rules.yaml"
        rules_path.write_text("- required\n")

        with pytest.raises(RulesFileError, match="mapping"):
            load_rules(rules_path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        rules_path = tmp_path / "rules.yaml"
        rules_path.write_text("debounceTimer: -1\n")

        with pytest.raises(RulesFileError):
            load_rules(rules_path)


class TestOtherCommands:
    """Tests for version and config output."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_config(self, isolated_home: Path) -> None:
        (isolated_home / "config.yaml").write_text("default_debounce_ms: 120\n")

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "120 ms" in result.output

    def test_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIELD_BINDING_DEBOUNCE_MS", "soon")

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 1
        assert "Error" in result.output
