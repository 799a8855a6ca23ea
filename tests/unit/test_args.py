"""Unit tests for args module."""

import argparse

import pytest

from emitter.lib.args import default_config_file_path, log_level_type, parse_emitter_args


class TestLogLevelType:
    """Tests for the log_level_type function."""

    def test_int_string(self):
        """Test that a numeric string is parsed as an int level."""
        assert log_level_type("10") == 10

    def test_level_name(self):
        """Test that level names are accepted in any case."""
        assert log_level_type("debug") == 10
        assert log_level_type("ERROR") == 40

    def test_invalid_level(self):
        """Test that an unknown level name is rejected."""
        with pytest.raises(argparse.ArgumentTypeError):
            log_level_type("verbose")


class TestParseEmitterArgs:
    """Tests for the parse_emitter_args function."""

    def test_defaults(self):
        """Test the values used when nothing is passed."""
        args = parse_emitter_args([])

        assert args.script == "-"
        assert args.config_file_path == default_config_file_path
        assert args.log_level is None
        assert args.log_dir is None
        assert args.echo_template is None
        assert args.strict is False

    def test_all_options(self):
        """Test that every option is parsed."""
        args = parse_emitter_args(
            [
                "commands.txt",
                "--config-file-path",
                "custom.ini",
                "-l",
                "INFO",
                "--log-dir",
                "/tmp/logs",
                "--echo-template",
                "{payload}",
                "--strict",
            ]
        )

        assert args.script == "commands.txt"
        assert args.config_file_path == "custom.ini"
        assert args.log_level == 20
        assert args.log_dir == "/tmp/logs"
        assert args.echo_template == "{payload}"
        assert args.strict is True

    def test_invalid_log_level_exits(self, capsys):
        """Test that argparse exits on a bad log level."""
        with pytest.raises(SystemExit):
            parse_emitter_args(["--log-level", "loud"])

        assert "invalid log level" in capsys.readouterr().err
