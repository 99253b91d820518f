"""
Tests for the constraints, init, config and completion commands.
"""

import argparse
import io
import json
from unittest.mock import patch

import pytest

from oulipy.config import CONFIG_FILENAME, DEFAULT_CONFIG, parse_toml


class TestConstraintsCommand:
    """Tests for `oulipy constraints`."""

    def test_text_listing(self):
        from oulipy.commands.constraints_cmd import run

        with patch("sys.stdout", new_callable=io.StringIO) as mock_stdout:
            result = run(argparse.Namespace(json=False))

        assert result == 0
        output = mock_stdout.getvalue()
        assert "Lipogramme" in output
        assert "Allitération systématique" in output
        assert "Voyelle autorisée (vowel): a e i o u y" in output

    def test_json_listing(self):
        from oulipy.commands.constraints_cmd import run

        with patch("sys.stdout", new_callable=io.StringIO) as mock_stdout:
            result = run(argparse.Namespace(json=True))

        assert result == 0
        data = json.loads(mock_stdout.getvalue())
        assert [c["id"] for c in data] == [
            "lipogram",
            "monovocalism",
            "tautogram",
            "alliteration",
        ]
        assert data[1]["parameter"] == {
            "type": "vowel",
            "label": "Voyelle autorisée",
            "options": ["a", "e", "i", "o", "u", "y"],
        }


class TestInitCommand:
    """Tests for `oulipy init`."""

    def test_creates_config(self, isolated_cwd):
        from oulipy.commands.init import run

        with patch("sys.stdout", new_callable=io.StringIO):
            result = run(argparse.Namespace(force=False, quiet=False))

        assert result == 0
        content = (isolated_cwd / CONFIG_FILENAME).read_text(encoding="utf-8")
        assert parse_toml(content) == DEFAULT_CONFIG

    def test_refuses_overwrite(self, isolated_cwd):
        from oulipy.commands.init import run

        (isolated_cwd / CONFIG_FILENAME).write_text("# mine\n")

        with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
            result = run(argparse.Namespace(force=False, quiet=False))

        assert result == 1
        assert "--force" in mock_stderr.getvalue()
        assert (isolated_cwd / CONFIG_FILENAME).read_text() == "# mine\n"

    def test_force_overwrites(self, isolated_cwd):
        from oulipy.commands.init import run

        (isolated_cwd / CONFIG_FILENAME).write_text("# mine\n")

        result = run(argparse.Namespace(force=True, quiet=True))

        assert result == 0
        assert "[check]" in (isolated_cwd / CONFIG_FILENAME).read_text()


class TestConfigCommand:
    """Tests for `oulipy config`."""

    def _args(self, action, config=None, json=False):
        return argparse.Namespace(config_action=action, config=config, json=json)

    def test_path_without_file(self):
        from oulipy.commands.config_cmd import run

        with patch("sys.stdout", new_callable=io.StringIO) as mock_stdout:
            result = run(self._args("path"))

        assert result == 0
        assert "using defaults" in mock_stdout.getvalue()

    def test_path_with_file(self, isolated_cwd):
        from oulipy.commands.config_cmd import run

        (isolated_cwd / CONFIG_FILENAME).write_text("")

        with patch("sys.stdout", new_callable=io.StringIO) as mock_stdout:
            result = run(self._args("path"))

        assert result == 0
        assert CONFIG_FILENAME in mock_stdout.getvalue()

    def test_show_json(self, isolated_cwd):
        from oulipy.commands.config_cmd import run

        (isolated_cwd / CONFIG_FILENAME).write_text('[check]\nparam = "i"\n')

        with patch("sys.stdout", new_callable=io.StringIO) as mock_stdout:
            result = run(self._args("show", json=True))

        assert result == 0
        data = json.loads(mock_stdout.getvalue())
        assert data["check"] == {"constraint": "lipogram", "param": "i"}

    def test_show_toml(self):
        from oulipy.commands.config_cmd import run

        with patch("sys.stdout", new_callable=io.StringIO) as mock_stdout:
            result = run(self._args("show"))

        assert result == 0
        assert parse_toml(mock_stdout.getvalue()) == DEFAULT_CONFIG


class TestCompletionCommand:
    """Tests for `oulipy completion`."""

    def test_instructions_for_fish(self):
        pytest.importorskip("argcomplete")
        from oulipy.commands.completion import run

        with patch("sys.stdout", new_callable=io.StringIO) as mock_stdout:
            result = run(argparse.Namespace(shell="fish"))

        assert result == 0
        assert "register-python-argcomplete --shell fish oulipy" in mock_stdout.getvalue()

    def test_missing_argcomplete(self):
        from oulipy.commands import completion

        with patch.object(completion, "argcomplete_available", return_value=False), patch(
            "sys.stderr", new_callable=io.StringIO
        ) as mock_stderr:
            result = completion.run(argparse.Namespace(shell=None))

        assert result == 1
        assert "oulipy[completion]" in mock_stderr.getvalue()

    def test_detect_shell(self, monkeypatch):
        from oulipy.commands.completion import detect_shell

        monkeypatch.setenv("SHELL", "/usr/bin/zsh")
        assert detect_shell() == "zsh"
        monkeypatch.setenv("SHELL", "/bin/ksh")
        assert detect_shell() == "bash"
