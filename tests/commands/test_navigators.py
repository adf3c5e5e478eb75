"""Tests for navigator commands: list, new, edit, delete."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from git_drive.cli import cli
from git_drive.config.discovery import CONFIG_FILENAME

JANE = ["new", "jane", "--name", "Jane Doe", "--email", "jane@example.org"]
JOE = ["new", "joe", "--name", "Joe Bloggs", "--email", "joe@example.org"]


@pytest.fixture
def seeded(cli_runner: CliRunner, config_dir: Path) -> Path:
    for args in (JANE, JOE):
        assert cli_runner.invoke(cli, args).exit_code == 0
    return config_dir


class TestNew:
    def test_new_writes_record_file(self, cli_runner: CliRunner, config_dir: Path) -> None:
        result = cli_runner.invoke(cli, JANE)
        assert result.exit_code == 0
        assert "OK  add_navigator" in result.stdout
        assert (config_dir / CONFIG_FILENAME).read_text() == (
            "version: 1\nnavigator: jane\nCo-Authored-By: Jane Doe <jane@example.org>\n"
        )

    def test_duplicate_fails(self, cli_runner: CliRunner, seeded: Path) -> None:
        result = cli_runner.invoke(cli, JANE)
        assert result.exit_code == 1
        assert "Alias jane already exists for a navigator" in result.stderr
        assert result.stdout == ""

    def test_requires_name_and_email(self, cli_runner: CliRunner, config_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["new", "jane", "--name", "Jane"])
        assert result.exit_code == 2
        assert "--email" in result.output

    def test_navigators_have_no_key_option(self, cli_runner: CliRunner, config_dir: Path) -> None:
        result = cli_runner.invoke(cli, [*JANE, "--key", "K"])
        assert result.exit_code == 2

    def test_json_output(self, cli_runner: CliRunner, config_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", *JANE])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"]["alias"] == "jane"

    def test_config_dir_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere"
        result = cli_runner.invoke(cli, ["--config-dir", str(target), *JANE])
        assert result.exit_code == 0
        assert (target / CONFIG_FILENAME).is_file()


class TestList:
    def test_lists_in_insertion_order(self, cli_runner: CliRunner, seeded: Path) -> None:
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "jane: Jane Doe <jane@example.org>",
            "joe: Joe Bloggs <joe@example.org>",
        ]

    def test_empty(self, cli_runner: CliRunner, config_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert result.stdout == ""
        assert not config_dir.exists()

    def test_quiet(self, cli_runner: CliRunner, seeded: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "list"])
        assert result.stdout.splitlines() == ["jane", "joe"]

    def test_broken_file(self, cli_runner: CliRunner, config_dir: Path) -> None:
        config_dir.mkdir()
        (config_dir / CONFIG_FILENAME).write_text("version: 1\nnavigator: x\n")
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 1
        assert "reached end of file" in result.stderr
        assert "path: " in result.stderr


class TestEdit:
    def test_edit_email(self, cli_runner: CliRunner, seeded: Path) -> None:
        result = cli_runner.invoke(cli, ["edit", "jane", "--email", "jane@work.example.org"])
        assert result.exit_code == 0
        listing = cli_runner.invoke(cli, ["list"]).stdout.splitlines()
        assert listing[0] == "jane: Jane Doe <jane@work.example.org>"

    def test_unknown_alias(self, cli_runner: CliRunner, seeded: Path) -> None:
        result = cli_runner.invoke(cli, ["edit", "ghost", "--name", "Ghost"])
        assert result.exit_code == 1
        assert "Alias ghost does not exist for a navigator" in result.stderr

    def test_no_change_warns(self, cli_runner: CliRunner, seeded: Path) -> None:
        result = cli_runner.invoke(cli, ["edit", "jane"])
        assert result.exit_code == 0
        assert "WARNING: Nothing to change for navigator jane" in result.stderr


class TestDelete:
    def test_delete_many(self, cli_runner: CliRunner, seeded: Path) -> None:
        result = cli_runner.invoke(cli, ["delete", "jane", "joe"])
        assert result.exit_code == 0
        assert "deleted: jane, joe" in result.stdout
        assert cli_runner.invoke(cli, ["list"]).stdout == ""

    def test_unknown_alias_warns(self, cli_runner: CliRunner, seeded: Path) -> None:
        result = cli_runner.invoke(cli, ["delete", "ghost"])
        assert result.exit_code == 0
        assert "WARNING: No navigator with alias ghost" in result.stderr

    def test_requires_alias(self, cli_runner: CliRunner, config_dir: Path) -> None:
        assert cli_runner.invoke(cli, ["delete"]).exit_code == 2
