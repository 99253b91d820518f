"""Shared pytest fixtures."""

import argparse
import os

import pytest


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each test from an empty directory without OULIPY_* overrides."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for name in list(os.environ):
        if name.startswith("OULIPY_"):
            monkeypatch.delenv(name)
    return workdir


@pytest.fixture
def check_args():
    """Build a Namespace for the check command."""

    def _make(files=None, constraint=None, param=None, json=False, quiet=False, config=None):
        return argparse.Namespace(
            files=files or [],
            constraint=constraint,
            param=param,
            json=json,
            quiet=quiet,
            config=config,
            verbose=False,
        )

    return _make
