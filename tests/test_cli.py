"""Tests for the click CLI."""

import pytest
from click.testing import CliRunner

from jot.cli import main
from jot.config import load_config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def data_args(tmp_path):
    return ["--data-file", str(tmp_path / "tasks.jsonl")]


class TestRun:
    def test_adds_and_lists(self, runner, data_args):
        result = runner.invoke(main, data_args + ["run", "todo", "read", "book"])
        assert result.exit_code == 0
        assert "Now you have 1 task in the list." in result.output

        result = runner.invoke(main, data_args + ["run", "list"])
        assert result.exit_code == 0
        assert "1.[T][ ] read book" in result.output

    def test_command_error_exits_nonzero(self, runner, data_args):
        result = runner.invoke(main, data_args + ["run", "delete", "1"])
        assert result.exit_code == 1
        assert "OOPS!!!" in result.output

    def test_deadline_delimiter_survives_shell_words(self, runner, data_args):
        runner.invoke(main, data_args + ["run", "deadline", "report", "/by", "Friday"])
        result = runner.invoke(main, data_args + ["run", "find", "report"])
        assert result.output.strip() == "[D][ ] report (by: Friday)"


class TestShell:
    def test_session_until_bye(self, runner, data_args):
        result = runner.invoke(
            main,
            data_args + ["shell"],
            input="todo read book\n\nblah\ndone 1\nbye\nlist\n",
        )
        assert result.exit_code == 0
        assert "What can I do for you?" in result.output
        assert "OOPS!!! unknown command" in result.output
        assert "[T][X] read book" in result.output
        assert result.output.rstrip().endswith("Bye. Hope to see you again soon!")

    def test_default_command_is_shell(self, runner, data_args):
        result = runner.invoke(main, data_args, input="list\n")
        assert result.exit_code == 0
        assert "Your list is empty." in result.output

    def test_end_of_input_stops_cleanly(self, runner, data_args):
        result = runner.invoke(main, data_args + ["shell"], input="todo read book\n")
        assert result.exit_code == 0


class TestLogging:
    def test_bad_log_level_in_config_does_not_crash(self, runner, data_args, tmp_path, monkeypatch):
        conf = tmp_path / "jot.conf"
        conf.write_text("LOG_LEVEL=BASIC_FORMAT\n")
        monkeypatch.setattr("jot.cli.load_config", lambda: load_config(conf))

        result = runner.invoke(main, data_args + ["run", "list"])

        assert result.exit_code == 0
        assert "Your list is empty." in result.output
