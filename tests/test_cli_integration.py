"""End-to-end CLI integration tests.

Invokes oulipy as a subprocess to verify real command execution.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def _run_oulipy(*args: str, input: str | None = None, cwd=None) -> subprocess.CompletedProcess:
    """Run oulipy as a subprocess."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    env["PYTHONIOENCODING"] = "utf-8"
    return subprocess.run(
        [sys.executable, "-m", "oulipy", *args],
        input=input,
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=cwd,
        env=env,
        timeout=60,
    )


class TestCLIHelp:
    """Test --help works for main and subcommands."""

    def test_main_help(self):
        result = _run_oulipy("--help")
        assert result.returncode == 0
        assert "oulipy" in result.stdout

    def test_check_help(self):
        result = _run_oulipy("check", "--help")
        assert result.returncode == 0
        assert "Exit codes" in result.stdout

    def test_no_command_prints_help(self):
        result = _run_oulipy()
        assert result.returncode == 0
        assert "Available commands" in result.stdout


class TestCheckCommand:
    """Test check command runs end-to-end."""

    def test_lipogram_violation(self, isolated_cwd):
        result = _run_oulipy(
            "check", "-c", "lipogram", "-p", "e", input="Le chat mange.", cwd=isolated_cwd
        )
        assert result.returncode == 1
        assert 'Lettre interdite détectée : "e"' in result.stdout

    def test_tautogram_file_json(self, isolated_cwd):
        poem = isolated_cwd / "poeme.txt"
        poem.write_text("Pierre porte plusieurs pommes.", encoding="utf-8")

        result = _run_oulipy(
            "check", str(poem), "-c", "tautogram", "-p", "p", "-j", cwd=isolated_cwd
        )

        assert result.returncode == 0
        assert json.loads(result.stdout)[0]["isValid"] is True

    def test_unknown_constraint_is_usage_error(self, isolated_cwd):
        result = _run_oulipy("check", "-c", "palindrome", "-p", "e", cwd=isolated_cwd)
        assert result.returncode == 2

    def test_consonant_only_for_alliteration(self, isolated_cwd):
        result = _run_oulipy(
            "check", "-c", "alliteration", "-p", "e", input="", cwd=isolated_cwd
        )
        assert result.returncode == 2
        assert "Invalid parameter" in result.stderr


class TestInitAndConfig:
    """Test init then config show."""

    def test_init_then_show(self, isolated_cwd):
        assert _run_oulipy("init", cwd=isolated_cwd).returncode == 0

        result = _run_oulipy("config", "show", "-j", cwd=isolated_cwd)

        assert result.returncode == 0
        assert json.loads(result.stdout)["check"]["constraint"] == "lipogram"


class TestVersion:
    def test_version_flag(self):
        result = _run_oulipy("--version")
        assert result.returncode == 0
        assert result.stdout.startswith("oulipy ")
